"""CHIP-8 system instructions (0x0xxx)."""

import jax.numpy as jnp
from octadis.decode import InstructionWord
from octadis.kinds import Kind, select_kind


def classify_system_instruction(word: InstructionWord) -> jnp.ndarray:
    """00E0/00EE - Clear display or return, selected by the last byte only."""
    return select_kind(
        [word.nn == 0xE0, word.nn == 0xEE],
        [Kind.CLS, Kind.RTS]
    )
