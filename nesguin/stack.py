# 6502 stack on the fixed page $0100-$01FF
#
# The stack pointer designates the next free slot: push writes then
# decrements, pop increments then reads.  Both wrap within the page, and
# neither overflow nor underflow is an error.

from nesguin.constants import STACK_BASE


def stack_address(stack_pointer):
    return STACK_BASE + (stack_pointer & 0xff)


def push_byte(memory, stack_pointer, value):
    """Push value and return the new stack pointer"""
    memory.write_byte(stack_address(stack_pointer), value)
    return (stack_pointer - 1) & 0xff  # this will wrap -1 to 255, as it should


def pop_byte(memory, stack_pointer):
    """Pop a byte and return (value, new stack pointer)"""
    # If popping from an empty stack (sp == $FF), this must wrap to 0
    stack_pointer = (stack_pointer + 1) & 0xff
    return memory.read_byte(stack_address(stack_pointer)), stack_pointer
