import unittest
from parameterized import parameterized

from nesguin.addressing import AddressingMode, OPERAND_WIDTHS, INDEXED_MODES, resolve
from nesguin.memory_bus import MemoryBus

PC = 0x8001  # first operand byte


class AddressingTestCase(unittest.TestCase):
    def setUp(self):
        self.memory = MemoryBus()

    def operand(self, *operand_bytes):
        self.memory.load(PC, operand_bytes)

    def test_immediate(self):
        self.operand(0x42)
        self.assertEqual(resolve(AddressingMode.IMMEDIATE, self.memory, PC, 0, 0), (PC, PC + 1))

    def test_none_addressing(self):
        self.assertEqual(resolve(AddressingMode.NONE_ADDRESSING, self.memory, PC, 5, 6), (PC, PC))

    def test_zero_page(self):
        self.operand(0x44)
        self.assertEqual(resolve(AddressingMode.ZERO_PAGE, self.memory, PC, 0, 0), (0x0044, PC + 1))

    @parameterized.expand([
        ("x", AddressingMode.ZERO_PAGE_X, 0x10, 0x00),
        ("y", AddressingMode.ZERO_PAGE_Y, 0x00, 0x10),
    ])
    def test_zero_page_indexed(self, name, mode, x, y):
        self.operand(0x44)
        self.assertEqual(resolve(mode, self.memory, PC, x, y), (0x0054, PC + 1))

    @parameterized.expand([
        ("x", AddressingMode.ZERO_PAGE_X, 0xff, 0x00),
        ("y", AddressingMode.ZERO_PAGE_Y, 0x00, 0xff),
    ])
    def test_zero_page_indexed_stays_in_page_zero(self, name, mode, x, y):
        self.operand(0x80)
        self.assertEqual(resolve(mode, self.memory, PC, x, y), (0x007f, PC + 1))

    def test_absolute(self):
        self.operand(0x00, 0x44)
        self.assertEqual(resolve(AddressingMode.ABSOLUTE, self.memory, PC, 0, 0), (0x4400, PC + 2))

    @parameterized.expand([
        ("x", AddressingMode.ABSOLUTE_X, 0x20, 0x00),
        ("y", AddressingMode.ABSOLUTE_Y, 0x00, 0x20),
    ])
    def test_absolute_indexed_crosses_page(self, name, mode, x, y):
        self.operand(0xf0, 0x44)
        self.assertEqual(resolve(mode, self.memory, PC, x, y), (0x4510, PC + 2))

    def test_absolute_indexed_wraps(self):
        self.operand(0xff, 0xff)
        self.assertEqual(resolve(AddressingMode.ABSOLUTE_X, self.memory, PC, 0x02, 0), (0x0001, PC + 2))
        self.assertEqual(resolve(AddressingMode.ABSOLUTE_Y, self.memory, PC, 0, 0x03), (0x0002, PC + 2))

    def test_indirect_x(self):
        self.operand(0x20)
        self.memory.write_word(0x0024, 0x3074)
        self.assertEqual(resolve(AddressingMode.INDIRECT_X, self.memory, PC, 0x04, 0), (0x3074, PC + 1))

    def test_indirect_x_pointer_wraps(self):
        # $F0 + $10 wraps to pointer $00
        self.operand(0xf0)
        self.memory.write_word(0x0000, 0x1234)
        self.assertEqual(resolve(AddressingMode.INDIRECT_X, self.memory, PC, 0x10, 0), (0x1234, PC + 1))

        # pointer $FF reads its high byte from $00, not $100
        self.operand(0xff)
        self.memory.write_byte(0x00ff, 0x78)
        self.memory.write_byte(0x0000, 0x56)
        self.memory.write_byte(0x0100, 0x99)
        self.assertEqual(resolve(AddressingMode.INDIRECT_X, self.memory, PC, 0x00, 0), (0x5678, PC + 1))

    def test_indirect_y(self):
        self.operand(0x86)
        self.memory.write_word(0x0086, 0x4028)
        self.assertEqual(resolve(AddressingMode.INDIRECT_Y, self.memory, PC, 0, 0x10), (0x4038, PC + 1))

    def test_indirect_y_index_applied_after_dereference(self):
        self.operand(0xff)
        self.memory.write_byte(0x00ff, 0xff)
        self.memory.write_byte(0x0000, 0xff)
        self.memory.write_byte(0x0100, 0x12)
        # base $FFFF from the wrapped pointer, plus Y wraps to $0004
        self.assertEqual(resolve(AddressingMode.INDIRECT_Y, self.memory, PC, 0x77, 0x05), (0x0004, PC + 1))

    def test_program_counter_wraps(self):
        self.memory.write_byte(0xffff, 0x10)
        self.memory.write_byte(0x0000, 0x20)
        self.assertEqual(resolve(AddressingMode.ABSOLUTE, self.memory, 0xffff, 0, 0), (0x2010, 0x0001))

    def test_index_zero_matches_unindexed(self):
        self.operand(0x34, 0x12)
        self.memory.write_word(0x0034, 0xbeef)
        for indexed, plain in INDEXED_MODES.items():
            self.assertEqual(resolve(indexed, self.memory, PC, 0, 0), resolve(plain, self.memory, PC, 0, 0))
        self.assertEqual(resolve(AddressingMode.INDIRECT_X, self.memory, PC, 0, 0),
                         resolve(AddressingMode.INDIRECT_Y, self.memory, PC, 0, 0))

    def test_every_mode_has_a_width(self):
        self.assertEqual(set(OPERAND_WIDTHS), set(AddressingMode))
        for mode in AddressingMode:
            _, new_pc = resolve(mode, self.memory, PC, 1, 1)
            self.assertEqual(new_pc - PC, OPERAND_WIDTHS[mode])


if __name__ == '__main__':
    unittest.main()
