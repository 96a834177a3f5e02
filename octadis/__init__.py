"""CHIP-8 disassembler package."""

from octadis.decode import DecodedInstruction, InstructionWord, split
from octadis.kinds import Kind
from octadis.disassembler import (
    decode, decode_word, decode_program, disassemble, disassemble_program,
    load_program, load_rom,
)
from octadis.constants import *
from octadis.rendering import render_instruction, render_line
from octadis.config import DisassemblerConfig

__all__ = [
    "DecodedInstruction",
    "InstructionWord",
    "Kind",
    "split",
    "decode",
    "decode_word",
    "decode_program",
    "disassemble",
    "disassemble_program",
    "load_program",
    "load_rom",
    "render_instruction",
    "render_line",
    "DisassemblerConfig",
    "PROGRAM_START",
    "INSTRUCTION_SIZE",
    "UNKNOWN_MNEMONIC",
]
