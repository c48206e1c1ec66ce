import unittest

from nesguin import stack
from nesguin.memory_bus import MemoryBus


class StackTestCase(unittest.TestCase):
    def setUp(self):
        self.memory = MemoryBus()

    def test_push_then_decrement(self):
        sp = stack.push_byte(self.memory, 0xff, 0x42)
        self.assertEqual(sp, 0xfe)
        self.assertEqual(self.memory.read_byte(0x01ff), 0x42)

    def test_round_trip(self):
        for sp in (0x00, 0x01, 0x80, 0xfe, 0xff):
            for value in (0x00, 0x01, 0x7f, 0x80, 0xff):
                new_sp = stack.push_byte(self.memory, sp, value)
                popped, restored_sp = stack.pop_byte(self.memory, new_sp)
                self.assertEqual(popped, value)
                self.assertEqual(restored_sp, sp)

    def test_push_wraps_at_zero(self):
        sp = stack.push_byte(self.memory, 0x00, 0x99)
        self.assertEqual(self.memory.read_byte(0x0100), 0x99)
        self.assertEqual(sp, 0xff)

    def test_pop_wraps_at_ff(self):
        self.memory.write_byte(0x0100, 0x37)
        value, sp = stack.pop_byte(self.memory, 0xff)
        self.assertEqual((value, sp), (0x37, 0x00))

    def test_last_in_first_out(self):
        sp = 0xff
        for value in (1, 2, 3):
            sp = stack.push_byte(self.memory, sp, value)
        popped = []
        for _ in range(3):
            value, sp = stack.pop_byte(self.memory, sp)
            popped.append(value)
        self.assertEqual(popped, [3, 2, 1])
        self.assertEqual(sp, 0xff)
        self.assertEqual(stack.stack_address(sp), 0x01ff)


if __name__ == '__main__':
    unittest.main()
