"""CHIP-8 ALU operations (8xxx)."""

import jax.numpy as jnp
from octadis.decode import InstructionWord
from octadis.kinds import Kind, as_kind

# Indexed by the last nibble; 0x8-0xD and 0xF are unassigned.
ALU_KINDS = as_kind([
    Kind.MOV, Kind.OR, Kind.AND, Kind.XOR,
    Kind.ADD_CARRY, Kind.SUB_BORROW, Kind.SHIFT_RIGHT, Kind.SUB_REVERSE,
    Kind.UNKNOWN, Kind.UNKNOWN, Kind.UNKNOWN, Kind.UNKNOWN,
    Kind.UNKNOWN, Kind.UNKNOWN, Kind.SHIFT_LEFT, Kind.UNKNOWN,
])


def classify_alu_operation(word: InstructionWord) -> jnp.ndarray:
    """8XYN - ALU operation selected by N."""
    return ALU_KINDS[word.n]
