"""Main CHIP-8 disassembly engine."""

import jax
import jax.lax
import jax.numpy as jnp
import numpy as np
from octadis.decode import DecodedInstruction, InstructionWord, pack_word, split, split_program
from octadis.constants import PROGRAM_START, INSTRUCTION_SIZE
from octadis.kinds import Kind
from octadis.rendering import render_line
from octadis.instructions.system import classify_system_instruction
from octadis.instructions.control_flow import (
    classify_jump, classify_call, classify_skip_if_equal_immediate,
    classify_skip_if_not_equal_immediate, classify_skip_if_equal_register,
    classify_skip_if_not_equal_register, classify_jump_with_offset,
    classify_skip_if_key
)
from octadis.instructions.alu import classify_alu_operation
from octadis.instructions.memory import classify_set, classify_add, classify_set_index, classify_random
from octadis.instructions.display import classify_display
from octadis.instructions.misc import classify_misc_instruction

TRAILING_BYTE_POLICIES = ("truncate", "pad")

# Indexed by opcode class; every nibble value has an entry.
CLASSIFIERS = [
    classify_system_instruction,
    classify_jump,
    classify_call,
    classify_skip_if_equal_immediate,
    classify_skip_if_not_equal_immediate,
    classify_skip_if_equal_register,
    classify_set,
    classify_add,
    classify_alu_operation,
    classify_skip_if_not_equal_register,
    classify_set_index,
    classify_jump_with_offset,
    classify_random,
    classify_display,
    classify_skip_if_key,
    classify_misc_instruction,
]


def classify(word: InstructionWord) -> jnp.ndarray:
    """Map an instruction word to its Kind value."""
    return jax.lax.switch(word.opcode, CLASSIFIERS, word)


_classify_word = jax.jit(classify)
_classify_program = jax.jit(jax.vmap(classify))


def decode_word(high: int, low: int) -> DecodedInstruction:
    """Decode the instruction formed by two bytes."""
    high, low = int(high), int(low)
    kind = Kind(int(_classify_word(split(pack_word(high, low)))))
    return DecodedInstruction(kind=kind, high=high, low=low)


def decode(buffer, offset: int) -> DecodedInstruction:
    """Decode the instruction stored at buffer[offset:offset + 2]."""
    if offset < 0 or offset + 1 >= len(buffer):
        raise IndexError(f"No complete instruction at offset 0x{offset:04x} (buffer size {len(buffer)})")
    return decode_word(buffer[offset], buffer[offset + 1])


def align_program(program: bytes, trailing_byte: str = "truncate") -> bytes:
    """Drop or zero-pad the trailing byte of an odd-length program."""
    if trailing_byte not in TRAILING_BYTE_POLICIES:
        raise ValueError(
            f"Unknown trailing byte policy '{trailing_byte}'. Available: {list(TRAILING_BYTE_POLICIES)}"
        )
    program = bytes(program)
    if len(program) % INSTRUCTION_SIZE == 0:
        return program
    if trailing_byte == "pad":
        return program + b"\x00"
    return program[:-1]


def decode_program(
    program: bytes,
    base_address: int = PROGRAM_START,
    trailing_byte: str = "truncate",
) -> list[tuple[int, DecodedInstruction]]:
    """Decode every word of a program in one vectorized pass.

    Args:
        program: Raw program bytes, as read from a ROM file
        base_address: Address the first program byte is loaded at
        trailing_byte: "truncate" or "pad", applied to odd-length programs

    Returns:
        List of (offset, instruction) pairs in program order
    """
    program = align_program(program, trailing_byte)
    if not program:
        return []

    kinds = np.asarray(_classify_program(split_program(program))).tolist()
    return [
        (base_address + INSTRUCTION_SIZE * index, DecodedInstruction(kind=Kind(kind), high=high, low=low))
        for index, (kind, high, low) in enumerate(zip(kinds, program[0::2], program[1::2]))
    ]


def load_program(program: bytes, base_address: int = PROGRAM_START) -> bytearray:
    """Build a memory image holding the program at base_address."""
    memory = bytearray(base_address)
    memory.extend(program)
    return memory


def load_rom(filename: str) -> bytes:
    """Read ROM data from disk."""
    with open(filename, 'rb') as f:
        return f.read()


def disassemble(buffer, offset: int, style: str = "compat") -> str:
    """Decode and render the instruction at offset as one listing line."""
    return render_line(offset, decode(buffer, offset), style)


def disassemble_program(
    program: bytes,
    base_address: int = PROGRAM_START,
    style: str = "compat",
    trailing_byte: str = "truncate",
) -> list[str]:
    """Render the listing of a whole program, one line per word."""
    return [
        render_line(offset, instruction, style)
        for offset, instruction in decode_program(program, base_address, trailing_byte)
    ]
