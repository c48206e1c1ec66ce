# 6502 opcode table
#
# Static, read-only metadata for each implemented opcode byte.  The CPU looks
# up the fetched byte here (decode) and dispatches on the mnemonic.  Adding an
# opcode means adding one row here and, for a new mnemonic, one handler method
# on Cpu6502.

from dataclasses import dataclass

from nesguin.addressing import AddressingMode, OPERAND_WIDTHS

IMM = AddressingMode.IMMEDIATE
ZP = AddressingMode.ZERO_PAGE
ZPX = AddressingMode.ZERO_PAGE_X
ZPY = AddressingMode.ZERO_PAGE_Y
ABS = AddressingMode.ABSOLUTE
ABSX = AddressingMode.ABSOLUTE_X
ABSY = AddressingMode.ABSOLUTE_Y
INDX = AddressingMode.INDIRECT_X
INDY = AddressingMode.INDIRECT_Y
IMP = AddressingMode.NONE_ADDRESSING


@dataclass(frozen=True)
class Instruction:
    opcode: int
    mnemonic: str
    mode: AddressingMode
    cycles: int  # base cycle count, without page-crossing penalties

    @property
    def length(self):
        """Instruction length in bytes, opcode included"""
        return 1 + OPERAND_WIDTHS[self.mode]


_INSTRUCTIONS = [
    # Loads
    Instruction(0xa9, 'LDA', IMM, 2),
    Instruction(0xa5, 'LDA', ZP, 3),
    Instruction(0xb5, 'LDA', ZPX, 4),
    Instruction(0xad, 'LDA', ABS, 4),
    Instruction(0xbd, 'LDA', ABSX, 4),
    Instruction(0xb9, 'LDA', ABSY, 4),
    Instruction(0xa1, 'LDA', INDX, 6),
    Instruction(0xb1, 'LDA', INDY, 5),

    Instruction(0xa2, 'LDX', IMM, 2),
    Instruction(0xa6, 'LDX', ZP, 3),
    Instruction(0xb6, 'LDX', ZPY, 4),
    Instruction(0xae, 'LDX', ABS, 4),
    Instruction(0xbe, 'LDX', ABSY, 4),

    Instruction(0xa0, 'LDY', IMM, 2),
    Instruction(0xa4, 'LDY', ZP, 3),
    Instruction(0xb4, 'LDY', ZPX, 4),
    Instruction(0xac, 'LDY', ABS, 4),
    Instruction(0xbc, 'LDY', ABSX, 4),

    # Stores
    Instruction(0x85, 'STA', ZP, 3),
    Instruction(0x95, 'STA', ZPX, 4),
    Instruction(0x8d, 'STA', ABS, 4),
    Instruction(0x9d, 'STA', ABSX, 5),
    Instruction(0x99, 'STA', ABSY, 5),
    Instruction(0x81, 'STA', INDX, 6),
    Instruction(0x91, 'STA', INDY, 6),

    Instruction(0x86, 'STX', ZP, 3),
    Instruction(0x96, 'STX', ZPY, 4),
    Instruction(0x8e, 'STX', ABS, 4),

    Instruction(0x84, 'STY', ZP, 3),
    Instruction(0x94, 'STY', ZPX, 4),
    Instruction(0x8c, 'STY', ABS, 4),

    # Register transfers
    Instruction(0xaa, 'TAX', IMP, 2),
    Instruction(0xa8, 'TAY', IMP, 2),
    Instruction(0x8a, 'TXA', IMP, 2),
    Instruction(0x98, 'TYA', IMP, 2),
    Instruction(0x9a, 'TXS', IMP, 2),
    Instruction(0xba, 'TSX', IMP, 2),

    # Increments and decrements
    Instruction(0xe8, 'INX', IMP, 2),
    Instruction(0xc8, 'INY', IMP, 2),
    Instruction(0xca, 'DEX', IMP, 2),
    Instruction(0x88, 'DEY', IMP, 2),

    # Stack
    Instruction(0x48, 'PHA', IMP, 3),
    Instruction(0x68, 'PLA', IMP, 4),
    Instruction(0x08, 'PHP', IMP, 3),
    Instruction(0x28, 'PLP', IMP, 4),

    # Flags
    Instruction(0x18, 'CLC', IMP, 2),
    Instruction(0x38, 'SEC', IMP, 2),
    Instruction(0x58, 'CLI', IMP, 2),
    Instruction(0x78, 'SEI', IMP, 2),
    Instruction(0xb8, 'CLV', IMP, 2),
    Instruction(0xd8, 'CLD', IMP, 2),
    Instruction(0xf8, 'SED', IMP, 2),

    # No-ops
    Instruction(0xea, 'NOP', IMP, 2),
    Instruction(0x00, 'BRK', IMP, 7),
]

OPCODE_TABLE = {i.opcode: i for i in _INSTRUCTIONS}

MNEMONICS = frozenset(i.mnemonic for i in _INSTRUCTIONS)

_OPERAND_FORMATS = {
    IMM: '#${0:02X}',
    ZP: '${0:02X}',
    ZPX: '${0:02X},X',
    ZPY: '${0:02X},Y',
    ABS: '${0:04X}',
    ABSX: '${0:04X},X',
    ABSY: '${0:04X},Y',
    INDX: '(${0:02X},X)',
    INDY: '(${0:02X}),Y',
}


def disassemble(memory, address):
    """
    Disassemble the instruction at address

    :param memory: memory bus holding the program
    :type memory: MemoryBus
    :param address: location of the opcode byte
    :type address: int
    :return: (assembly text, instruction length in bytes)
    :rtype: tuple
    """
    opcode = memory.read_byte(address)
    instruction = OPCODE_TABLE.get(opcode)
    if instruction is None:
        return '.byte ${:02X}'.format(opcode), 1

    width = OPERAND_WIDTHS[instruction.mode]
    if width == 0:
        return instruction.mnemonic, instruction.length
    if width == 1:
        operand = memory.read_byte((address + 1) & 0xffff)
    else:
        operand = memory.read_word((address + 1) & 0xffff)
    text = instruction.mnemonic + ' ' + _OPERAND_FORMATS[instruction.mode].format(operand)
    return text, instruction.length
