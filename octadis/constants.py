"""CHIP-8 disassembler constants."""

PROGRAM_START = 0x200
INSTRUCTION_SIZE = 2
ADDRESS_MASK = 0x0FFF

UNKNOWN_MNEMONIC = "UNKNOWN"
