"""CHIP-8 miscellaneous instructions (Fxxx)."""

import jax.numpy as jnp
from octadis.decode import InstructionWord
from octadis.kinds import Kind, select_kind

MISC_KINDS = {
    0x07: Kind.GET_DELAY,
    0x0A: Kind.WAIT_KEY,
    0x15: Kind.SET_DELAY,
    0x18: Kind.SET_SOUND,
    0x1E: Kind.ADD_INDEX,
    0x29: Kind.FONT_CHAR,
    0x33: Kind.STORE_BCD,
    0x55: Kind.STORE_REGS,
    0x65: Kind.LOAD_REGS,
}


def classify_misc_instruction(word: InstructionWord) -> jnp.ndarray:
    """FXNN - Timer, index, BCD and register block operations selected by NN."""
    return select_kind(
        [word.nn == selector for selector in MISC_KINDS],
        MISC_KINDS.values()
    )
