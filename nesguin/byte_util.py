# Common byte functions

import more_itertools as moreit

from nesguin.errors import NesguinValueError, NesguinIOError


def hex_to_int(a_hex):
    if a_hex.startswith('$'):
        a_hex = a_hex[1:]
    elif a_hex.startswith('\\x') or a_hex.startswith('0x'):
        a_hex = a_hex[2:]
    return int(a_hex, 16)


def parse_hex_bytes(text):
    """
    Parse whitespace or comma separated hex byte values into a bytearray

    :param text: e.g. "A9 C0 AA", "$a9,$c0" or "0xa9 0xc0"
    :type text: str
    :return: the parsed bytes
    :rtype: bytearray
    """
    result = bytearray()
    for token in text.replace(',', ' ').split():
        try:
            value = hex_to_int(token)
        except ValueError:
            raise NesguinValueError('Error: "%s" is not a hex byte' % token) from None
        if not 0 <= value <= 255:
            raise NesguinValueError('Error: "%s" is not a byte value' % token)
        result.append(value)
    return result


# adapted from http://code.activestate.com/recipes/579064-hex-dump/
def hexdump(data, start=0):
    lines = []
    for i, row in enumerate(moreit.chunked(data, 16)):
        hex_part = '  '.join(' '.join('{:02X}'.format(b) for b in half) for half in moreit.chunked(row, 8))
        chr_part = ''.join(chr(c) if 32 <= c < 127 else '.' for c in row)
        lines.append('{:04X}: {:48}  {:16}'.format(i * 16 + start, hex_part, chr_part))
    return '\n'.join(lines)


def read_binary_file(path_and_filename):
    try:
        with open(path_and_filename, mode='rb') as in_file:
            return in_file.read()
    except OSError as e:
        raise NesguinIOError('Error: unable to read "%s"' % path_and_filename) from e
