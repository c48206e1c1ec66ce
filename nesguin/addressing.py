# 6502 addressing-mode resolution
#
# resolve() is a pure function of the memory contents, the program counter and
# the index registers.  It returns the effective address and the program
# counter advanced past the operand.  OPERAND_WIDTHS is the only place operand
# byte counts are defined; the opcode table derives instruction lengths from it.

from enum import Enum


class AddressingMode(Enum):
    IMMEDIATE = 'imm'
    ZERO_PAGE = 'zp'
    ZERO_PAGE_X = 'zp,x'
    ZERO_PAGE_Y = 'zp,y'
    ABSOLUTE = 'abs'
    ABSOLUTE_X = 'abs,x'
    ABSOLUTE_Y = 'abs,y'
    INDIRECT_X = '(zp,x)'
    INDIRECT_Y = '(zp),y'
    NONE_ADDRESSING = 'impl'


# Operand bytes following the opcode byte
OPERAND_WIDTHS = {
    AddressingMode.IMMEDIATE: 1,
    AddressingMode.ZERO_PAGE: 1,
    AddressingMode.ZERO_PAGE_X: 1,
    AddressingMode.ZERO_PAGE_Y: 1,
    AddressingMode.ABSOLUTE: 2,
    AddressingMode.ABSOLUTE_X: 2,
    AddressingMode.ABSOLUTE_Y: 2,
    AddressingMode.INDIRECT_X: 1,
    AddressingMode.INDIRECT_Y: 1,
    AddressingMode.NONE_ADDRESSING: 0,
}

# Indexed modes and the mode they reduce to when the index register is 0
INDEXED_MODES = {
    AddressingMode.ZERO_PAGE_X: AddressingMode.ZERO_PAGE,
    AddressingMode.ZERO_PAGE_Y: AddressingMode.ZERO_PAGE,
    AddressingMode.ABSOLUTE_X: AddressingMode.ABSOLUTE,
    AddressingMode.ABSOLUTE_Y: AddressingMode.ABSOLUTE,
}


def zero_page_word(memory, pointer):
    """Little-endian word at a zero page pointer; the high byte wraps from $FF to $00"""
    return memory.read_byte(pointer) | (memory.read_byte((pointer + 1) & 0xff) << 8)


def effective_address(mode, memory, program_counter, register_x, register_y):
    """
    Compute the effective operand address for mode

    :param mode: addressing mode of the instruction
    :type mode: AddressingMode
    :param memory: memory bus the operand bytes are read from
    :type memory: MemoryBus
    :param program_counter: location of the first operand byte
    :type program_counter: int
    :return: 16-bit effective address
    :rtype: int
    """
    if mode in (AddressingMode.IMMEDIATE, AddressingMode.NONE_ADDRESSING):
        return program_counter

    if mode == AddressingMode.ZERO_PAGE:
        return memory.read_byte(program_counter)

    if mode == AddressingMode.ZERO_PAGE_X:
        return (memory.read_byte(program_counter) + register_x) & 0xff

    if mode == AddressingMode.ZERO_PAGE_Y:
        return (memory.read_byte(program_counter) + register_y) & 0xff

    if mode == AddressingMode.ABSOLUTE:
        return memory.read_word(program_counter)

    if mode == AddressingMode.ABSOLUTE_X:
        return (memory.read_word(program_counter) + register_x) & 0xffff

    if mode == AddressingMode.ABSOLUTE_Y:
        return (memory.read_word(program_counter) + register_y) & 0xffff

    if mode == AddressingMode.INDIRECT_X:
        pointer = (memory.read_byte(program_counter) + register_x) & 0xff
        return zero_page_word(memory, pointer)

    if mode == AddressingMode.INDIRECT_Y:
        pointer = memory.read_byte(program_counter)
        return (zero_page_word(memory, pointer) + register_y) & 0xffff

    raise ValueError("Error: unknown addressing mode %r" % (mode,))


def resolve(mode, memory, program_counter, register_x, register_y):
    """
    Returns (effective_address, new_program_counter) for an instruction whose
    operand starts at program_counter
    """
    address = effective_address(mode, memory, program_counter, register_x, register_y)
    return address, (program_counter + OPERAND_WIDTHS[mode]) & 0xffff
