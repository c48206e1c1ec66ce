# Run a 6502 program from $8000 until the program counter reaches $FFFF,
# then print the registers

import argparse
import logging

from nesguin import Cpu6502
from nesguin import byte_util, flags
from nesguin.errors import NesguinException

# LDA #$C0, TAX, INX, BRK
DEMO_PROGRAM = [0xa9, 0xc0, 0xaa, 0xe8, 0x00]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a 6502 program loaded at $8000.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--hex', help='program as hex bytes, e.g. "A9 C0 AA E8"')
    source.add_argument('--bin', help='raw binary file holding the program')
    parser.add_argument('-d', '--debug', action='store_true', help='trace every instruction')
    parser.add_argument('-s', '--strict', action='store_true', help='stop on unknown opcodes')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s')

    try:
        if args.hex:
            program = byte_util.parse_hex_bytes(args.hex)
        elif args.bin:
            program = byte_util.read_binary_file(args.bin)
        else:
            program = DEMO_PROGRAM

        cpu = Cpu6502(strict=args.strict)
        cpu.load_and_run(program)
    except NesguinException as e:
        parser.exit(1, "runProgram: %s\n" % e)

    print(' '.join('{}=${:02X}'.format(k, v) for k, v in cpu.registers().items()))
    print('flags NV-BDIZC: %s' % flags.describe(cpu.status))


if __name__ == "__main__":
    main()
