"""CHIP-8 control flow instructions."""

import jax.numpy as jnp
from octadis.decode import InstructionWord
from octadis.kinds import Kind, as_kind, select_kind


def make_fixed_classifier(kind: Kind):
    """Factory for opcode classes holding a single instruction form."""
    def classify_fixed(word: InstructionWord) -> jnp.ndarray:
        return as_kind(kind)
    return classify_fixed


classify_jump = make_fixed_classifier(Kind.JUMP)                                # 1NNN
classify_call = make_fixed_classifier(Kind.CALL)                                # 2NNN
classify_skip_if_equal_immediate = make_fixed_classifier(Kind.SKIP_EQ_IMM)      # 3XNN
classify_skip_if_not_equal_immediate = make_fixed_classifier(Kind.SKIP_NE_IMM)  # 4XNN
classify_skip_if_equal_register = make_fixed_classifier(Kind.SKIP_EQ_REG)       # 5XY0
classify_skip_if_not_equal_register = make_fixed_classifier(Kind.SKIP_NE_REG)   # 9XY0
classify_jump_with_offset = make_fixed_classifier(Kind.JUMP_OFFSET)             # BNNN


def classify_skip_if_key(word: InstructionWord) -> jnp.ndarray:
    """EX9E/EXA1 - Skip if key pressed/not pressed."""
    return select_kind(
        [word.nn == 0x9E, word.nn == 0xA1],
        [Kind.SKIP_KEY, Kind.SKIP_NOKEY]
    )
