'''
Exceptions for the nesguin 6502 emulator
'''


class NesguinException(Exception):
    """
    Generic base class for nesguin exceptions
    """
    pass


class NesguinValueError(NesguinException, ValueError):
    """
    Value error (byte or word outside its range)
    """
    pass


class NesguinCapacityError(NesguinException):
    """
    Capacity error (data does not fit in the address space)
    """
    pass


class NesguinNotImplemented(NesguinException):
    """
    Not implemented error (opcode without an opcode table entry)
    """
    pass


class NesguinIOError(NesguinException, IOError):
    """
    IO error
    """
    pass
