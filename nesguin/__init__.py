from .emulator_6502 import Cpu6502
from .memory_bus import MemoryBus
from .flags import StatusFlag
from .addressing import AddressingMode
from .opcodes import OPCODE_TABLE, Instruction
from .constants import NESGUIN_VERSION as __version__
