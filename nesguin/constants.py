# Constants for nesguin
#

# Version information.  Update BUILD_VERSION with every significant bugfix;
# update MINOR_VERSION with every feature addition
MAJOR_VERSION = 0
MINOR_VERSION = 1
BUILD_VERSION = 0

NESGUIN_VERSION = f"{MAJOR_VERSION}.{MINOR_VERSION}.{BUILD_VERSION}"
NESGUIN_RELEASE = f"{MAJOR_VERSION}.{MINOR_VERSION}"

# Memory map
MEMORY_SIZE = 0x10000   # 64K, the full 16-bit address space
STACK_BASE = 0x0100     # $0100-$01FF, indexed by the 8-bit stack pointer
LOAD_ADDRESS = 0x8000   # programs are loaded here by load_program()

# 6502 vector locations
NMI_VECTOR = 0xfffa
RESET_VECTOR = 0xfffc
IRQ_VECTOR = 0xfffe

# run() stops once the program counter reaches this address
PC_SENTINEL = 0xffff

# Register values after reset()
RESET_STACK_POINTER = 0xff
RESET_STATUS = 0x00
