# 6502 instruction-level emulation
#
# This module emulates 6502 machine language program execution at an instruction-level
# of granularity (not a cycle-level).
#
# step() executes one instruction and can be called in a while loop.  run() keeps
# stepping until the program counter reaches $FFFF, a sentinel for "ran off the end
# of memory" (there is no interrupt or vector handling).  An instruction whose operand
# runs past $FFFF wraps the program counter to page zero; run() stops there as well.
# Unknown bytes in the vector table ($FFFA-$FFFF) are data, not code: reaching them
# is the normal way a program runs off the end, so they are skipped quietly in both
# modes.
#
# Decode is a lookup in opcodes.OPCODE_TABLE; execution dispatches on the mnemonic
# to the method of the same name, which resolves its operand through
# addressing.resolve().  Unknown opcodes are logged and skipped as one-byte no-ops
# unless the emulator was created with strict=True.

import logging

from nesguin import addressing, flags, stack
from nesguin.byte_util import hexdump
from nesguin.constants import (
    LOAD_ADDRESS, MEMORY_SIZE, NMI_VECTOR, PC_SENTINEL, RESET_STACK_POINTER, RESET_STATUS,
    RESET_VECTOR, STACK_BASE
)
from nesguin.errors import NesguinCapacityError, NesguinNotImplemented
from nesguin.flags import StatusFlag
from nesguin.memory_bus import MemoryBus
from nesguin.opcodes import OPCODE_TABLE, disassemble

logger = logging.getLogger(__name__)


class Cpu6502:
    def __init__(self, strict=False):
        self.memory = MemoryBus()          # 64K memory, owned by this CPU
        self.register_a = 0                # accumulator (byte)
        self.register_x = 0                # x register (byte)
        self.register_y = 0                # y register (byte)
        self.status = 0                    # processor flags (byte)
        self.stack_pointer = 0             # stack pointer (byte)
        self.program_counter = 0           # program counter (16-bit)
        self.cycles = 0                    # base cycles of the instructions executed
        self.last_instruction = None       # last opcode byte fetched
        self.strict = strict               # True = unknown opcodes raise instead of being skipped
        self.wrapped = False               # True once an instruction carried the PC past $FFFF

        # opcode byte -> bound handler, e.g. 0xa9 -> self.LDA
        self.dispatch = {opcode: getattr(self, instruction.mnemonic)
                         for opcode, instruction in OPCODE_TABLE.items()}

    # ---------------------------------------------------------------------------
    # status flags

    def set_flag(self, flag, on):
        self.status = flags.set_flag(self.status, flag, on)

    def get_flag(self, flag):
        return flags.get_flag(self.status, flag)

    def update_zero_and_negative(self, result):
        self.status = flags.update_zero_and_negative(self.status, result)

    # ---------------------------------------------------------------------------
    # stack

    def push(self, data):
        self.stack_pointer = stack.push_byte(self.memory, self.stack_pointer, data)

    def pop(self):
        result, self.stack_pointer = stack.pop_byte(self.memory, self.stack_pointer)
        return result

    # ---------------------------------------------------------------------------
    # program control

    def reset(self):
        """
        Reset the registers and start from the address in the reset vector ($FFFC)

        Y is left as it was; memory is not cleared.
        """
        self.register_a = 0
        self.register_x = 0
        self.status = RESET_STATUS
        self.stack_pointer = RESET_STACK_POINTER
        self.program_counter = self.memory.read_word(RESET_VECTOR)
        self.cycles = 0

    def load_program(self, program):
        """
        Puts a program at the load address ($8000) and points the program counter
        and the reset vector at it

        :param program: machine code
        :type program: bytes, bytearray or list of ints
        :raises NesguinCapacityError: if the program does not fit between $8000 and $FFFF
        """
        if len(program) > MEMORY_SIZE - LOAD_ADDRESS:
            raise NesguinCapacityError(
                "Error: program of %d bytes does not fit at $%04X (max %d bytes)"
                % (len(program), LOAD_ADDRESS, MEMORY_SIZE - LOAD_ADDRESS))
        self.memory.load(LOAD_ADDRESS, program)
        self.program_counter = LOAD_ADDRESS
        self.memory.write_word(RESET_VECTOR, LOAD_ADDRESS)

    def load_and_run(self, program):
        self.load_program(program)
        self.reset()
        self.run()

    def run(self):
        logger.info("Execution start at $%04X", self.program_counter)
        self.wrapped = False
        while self.program_counter < PC_SENTINEL and not self.wrapped:
            self.step()
        if self.wrapped:
            logger.info("Program counter wrapped past $FFFF to $%04X", self.program_counter)
        logger.info("Execution completed after %d cycles", self.cycles)

    def step(self):
        """
        Fetch, decode and execute one instruction

        Sets wrapped when the instruction's operand carried the program counter
        past $FFFF.

        :return: the instruction executed, or None if the opcode is unknown
        :rtype: Instruction
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(self.trace_line())

        fetch_address = self.program_counter
        opcode = self.memory.read_byte(fetch_address)
        self.program_counter = (fetch_address + 1) & 0xffff
        self.last_instruction = opcode

        instruction = OPCODE_TABLE.get(opcode)
        if instruction is None:
            message = "Reached $%04X and no instruction exists for opcode $%02X" % (fetch_address, opcode)
            if fetch_address >= NMI_VECTOR:
                logger.debug(message)
            elif self.strict:
                raise NesguinNotImplemented("Error: " + message)
            else:
                logger.warning(message)
            return None

        self.cycles += instruction.cycles
        self.dispatch[opcode](instruction.mode)
        if self.program_counter < fetch_address:
            self.wrapped = True
        return instruction

    def operand_address(self, mode):
        address, self.program_counter = addressing.resolve(
            mode, self.memory, self.program_counter, self.register_x, self.register_y)
        return address

    # ---------------------------------------------------------------------------
    # instructions
    #
    # Every handler takes the addressing mode from the opcode table.  Handlers of
    # operand-less instructions ignore it.

    def load(self, mode):
        value = self.memory.read_byte(self.operand_address(mode))
        self.update_zero_and_negative(value)
        return value

    def LDA(self, mode):
        self.register_a = self.load(mode)

    def LDX(self, mode):
        self.register_x = self.load(mode)

    def LDY(self, mode):
        self.register_y = self.load(mode)

    def STA(self, mode):
        self.memory.write_byte(self.operand_address(mode), self.register_a)

    def STX(self, mode):
        self.memory.write_byte(self.operand_address(mode), self.register_x)

    def STY(self, mode):
        self.memory.write_byte(self.operand_address(mode), self.register_y)

    def TAX(self, mode):
        self.register_x = self.register_a
        self.update_zero_and_negative(self.register_x)

    def TAY(self, mode):
        self.register_y = self.register_a
        self.update_zero_and_negative(self.register_y)

    def TXA(self, mode):
        self.register_a = self.register_x
        self.update_zero_and_negative(self.register_a)

    def TYA(self, mode):
        self.register_a = self.register_y
        self.update_zero_and_negative(self.register_a)

    # stack pointer transfers leave the flags alone
    def TXS(self, mode):
        self.stack_pointer = self.register_x

    def TSX(self, mode):
        self.register_x = self.stack_pointer

    def INX(self, mode):
        self.register_x = (self.register_x + 1) & 0xff
        self.update_zero_and_negative(self.register_x)

    def INY(self, mode):
        self.register_y = (self.register_y + 1) & 0xff
        self.update_zero_and_negative(self.register_y)

    def DEX(self, mode):
        self.register_x = (self.register_x - 1) & 0xff
        self.update_zero_and_negative(self.register_x)

    def DEY(self, mode):
        self.register_y = (self.register_y - 1) & 0xff
        self.update_zero_and_negative(self.register_y)

    def PHA(self, mode):
        self.push(self.register_a)
        self.update_zero_and_negative(self.register_a)

    def PLA(self, mode):
        self.register_a = self.pop()
        self.update_zero_and_negative(self.register_a)

    # PHP and PLP move the whole status byte verbatim
    def PHP(self, mode):
        self.push(self.status)

    def PLP(self, mode):
        self.status = self.pop()

    def CLC(self, mode):
        self.set_flag(StatusFlag.CARRY, False)

    def SEC(self, mode):
        self.set_flag(StatusFlag.CARRY, True)

    def CLI(self, mode):
        self.set_flag(StatusFlag.INTERRUPT_DISABLE, False)

    def SEI(self, mode):
        self.set_flag(StatusFlag.INTERRUPT_DISABLE, True)

    def CLV(self, mode):
        self.set_flag(StatusFlag.OVERFLOW, False)

    def CLD(self, mode):
        self.set_flag(StatusFlag.DECIMAL, False)

    def SED(self, mode):
        self.set_flag(StatusFlag.DECIMAL, True)

    def NOP(self, mode):
        pass

    # Interrupts are not emulated, so BRK ($00) runs as a NOP.  This lets
    # zero-filled memory after a program run harmlessly up to the sentinel.
    def BRK(self, mode):
        self.NOP(mode)

    # ---------------------------------------------------------------------------
    # debugging

    def trace_line(self):
        text, _ = disassemble(self.memory, self.program_counter)
        return "{:08d},PC=${:04x},A=${:02x},X=${:02x},Y=${:02x},SP=${:02x},P=%{:08b}  {}".format(
            self.cycles, self.program_counter, self.register_a, self.register_x,
            self.register_y, self.stack_pointer, self.status, text)

    def dump_stack(self):
        """
        Utility for debugging:  Returns the stack ($100 to $1FF) as a hexdump
        """
        return hexdump(self.memory.dump(STACK_BASE, 256), STACK_BASE) \
            + '\ncurrent stack pointer ${:02x}'.format(self.stack_pointer)

    def registers(self):
        return {
            'A': self.register_a,
            'X': self.register_x,
            'Y': self.register_y,
            'SP': self.stack_pointer,
            'PC': self.program_counter,
            'P': self.status,
        }
