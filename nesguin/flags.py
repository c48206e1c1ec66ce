# 6502 processor status flags
#
# The status register is kept as a packed byte (the form PHP/PLP push and
# pull verbatim).  These helpers are the only place raw bit masks are used.

from enum import IntEnum


class StatusFlag(IntEnum):
    """Status flags, valued by their bit position (NV-B DIZC)"""
    CARRY = 0
    ZERO = 1
    INTERRUPT_DISABLE = 2
    DECIMAL = 3
    B0 = 4  # break, low
    B1 = 5  # break, high (unused on hardware, but settable)
    OVERFLOW = 6
    NEGATIVE = 7


FLAG_MASKS = {
    StatusFlag.CARRY:             0b00000001,  # noqa:E241
    StatusFlag.ZERO:              0b00000010,  # noqa:E241
    StatusFlag.INTERRUPT_DISABLE: 0b00000100,
    StatusFlag.DECIMAL:           0b00001000,  # noqa:E241
    StatusFlag.B0:                0b00010000,  # noqa:E241
    StatusFlag.B1:                0b00100000,  # noqa:E241
    StatusFlag.OVERFLOW:          0b01000000,  # noqa:E241
    StatusFlag.NEGATIVE:          0b10000000,  # noqa:E241
}


def set_flag(status, flag, on):
    """
    Returns status with exactly the bit owned by flag cleared, then set if on

    :param status: status byte
    :type status: int
    :param flag: the flag to change
    :type flag: StatusFlag
    :param on: new flag value
    :type on: bool
    :return: new status byte
    :rtype: int
    """
    mask = FLAG_MASKS[flag]
    status &= ~mask & 0xff
    if on:
        status |= mask
    return status


def get_flag(status, flag):
    return status & FLAG_MASKS[flag] != 0


def update_zero_and_negative(status, result):
    """
    Set Zero when result is 0 and Negative when bit 7 of result is set

    Both are written independently; no other flag is touched.
    """
    assert 0 <= result <= 255, "Error: can't set flags using non-byte value"
    status = set_flag(status, StatusFlag.ZERO, result == 0)
    return set_flag(status, StatusFlag.NEGATIVE, result & 0b10000000 != 0)


def describe(status):
    """Returns the conventional NV-BDIZC rendering, upper case for set flags"""
    letters = 'CZIDBUVN'
    return ''.join(
        letters[f].upper() if get_flag(status, f) else letters[f].lower()
        for f in reversed(StatusFlag))
