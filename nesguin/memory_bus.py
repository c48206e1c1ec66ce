# Flat 64K memory bus
#
# Every component that needs storage reads and writes through one MemoryBus.
# There is no banking or memory-mapped I/O; the backing store covers the whole
# 16-bit address space, so every masked address is valid.

from nesguin.constants import MEMORY_SIZE
from nesguin.errors import NesguinCapacityError, NesguinValueError


class MemoryBus:
    def __init__(self):
        self.memory = MEMORY_SIZE * [0x00]  # 64K memory as integers

    def read_byte(self, address):
        return self.memory[address & 0xffff]

    def write_byte(self, address, value):
        if not 0 <= value <= 255:
            raise NesguinValueError("Error: POKE(%d),%d out of range" % (address, value))
        self.memory[address & 0xffff] = value

    def read_word(self, address):
        """
        Get a little-endian 16-bit value from a given memory location

        The high byte is read from address + 1, which wraps from $FFFF to $0000.

        :param address: location from which to retrieve the 16-bit value
        :type address: int
        :return: 16-bit value at address
        :rtype: int
        """
        return self.read_byte(address) | (self.read_byte((address + 1) & 0xffff) << 8)

    def write_word(self, address, word):
        """
        Set a little-endian 16-bit value at the given memory location

        :param address: location at which to store the low byte
        :type address: int
        :param word: value to store in memory
        :type word: int
        """
        if not 0 <= word <= 0xffff:
            raise NesguinValueError('Error: word value "%s" out of range' % word)
        self.write_byte(address, word & 0xff)
        self.write_byte((address + 1) & 0xffff, word >> 8)

    def load(self, address, data):
        """
        Copy a sequence of bytes into memory, starting at address

        :param address: starting memory location
        :type address: int
        :param data: bytes to copy
        :type data: bytes, bytearray or list of ints
        """
        if not 0 <= address < MEMORY_SIZE:
            raise NesguinValueError("Error: address $%X out of range" % address)
        if address + len(data) > MEMORY_SIZE:
            raise NesguinCapacityError(
                "Error: %d bytes at $%04X would run past the end of memory" % (len(data), address))
        for i, a_byte in enumerate(data):
            self.write_byte(address + i, a_byte)

    def dump(self, start, length):
        """Returns a copy of length bytes starting at start (no wraparound)"""
        return self.memory[start:start + length]
