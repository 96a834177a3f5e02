"""Closed set of CHIP-8 instruction forms."""

import enum

import jax.numpy as jnp


class Kind(enum.IntEnum):
    """One member per recognized instruction form."""
    UNKNOWN = 0
    CLS = 1            # 00E0
    RTS = 2            # 00EE
    JUMP = 3           # 1NNN
    CALL = 4           # 2NNN
    SKIP_EQ_IMM = 5    # 3XNN
    SKIP_NE_IMM = 6    # 4XNN
    SKIP_EQ_REG = 7    # 5XY0
    LOAD_IMM = 8       # 6XNN
    ADD_IMM = 9        # 7XNN
    MOV = 10           # 8XY0
    OR = 11            # 8XY1
    AND = 12           # 8XY2
    XOR = 13           # 8XY3
    ADD_CARRY = 14     # 8XY4
    SUB_BORROW = 15    # 8XY5
    SHIFT_RIGHT = 16   # 8XY6
    SUB_REVERSE = 17   # 8XY7
    SHIFT_LEFT = 18    # 8XYE
    SKIP_NE_REG = 19   # 9XY0
    LOAD_INDEX = 20    # ANNN
    JUMP_OFFSET = 21   # BNNN
    RANDOM = 22        # CXNN
    SPRITE = 23        # DXYN
    SKIP_KEY = 24      # EX9E
    SKIP_NOKEY = 25    # EXA1
    GET_DELAY = 26     # FX07
    WAIT_KEY = 27      # FX0A
    SET_DELAY = 28     # FX15
    SET_SOUND = 29     # FX18
    ADD_INDEX = 30     # FX1E
    FONT_CHAR = 31     # FX29
    STORE_BCD = 32     # FX33
    STORE_REGS = 33    # FX55
    LOAD_REGS = 34     # FX65


_NONE = ()
_ADDRESS = ("nnn",)
_REGISTER = ("x",)
_REGISTER_IMMEDIATE = ("x", "nn")
_REGISTER_PAIR = ("x", "y")

# Fields each instruction form reads from its word.
OPERAND_FIELDS = {
    Kind.UNKNOWN: _NONE,
    Kind.CLS: _NONE,
    Kind.RTS: _NONE,
    Kind.JUMP: _ADDRESS,
    Kind.CALL: _ADDRESS,
    Kind.SKIP_EQ_IMM: _REGISTER_IMMEDIATE,
    Kind.SKIP_NE_IMM: _REGISTER_IMMEDIATE,
    Kind.SKIP_EQ_REG: _REGISTER_PAIR,
    Kind.LOAD_IMM: _REGISTER_IMMEDIATE,
    Kind.ADD_IMM: _REGISTER_IMMEDIATE,
    Kind.MOV: _REGISTER_PAIR,
    Kind.OR: _REGISTER_PAIR,
    Kind.AND: _REGISTER_PAIR,
    Kind.XOR: _REGISTER_PAIR,
    Kind.ADD_CARRY: _REGISTER_PAIR,
    Kind.SUB_BORROW: _REGISTER_PAIR,
    Kind.SHIFT_RIGHT: _REGISTER,
    Kind.SUB_REVERSE: _REGISTER_PAIR,
    Kind.SHIFT_LEFT: _REGISTER,
    Kind.SKIP_NE_REG: _REGISTER_PAIR,
    Kind.LOAD_INDEX: _ADDRESS,
    Kind.JUMP_OFFSET: _ADDRESS,
    Kind.RANDOM: _REGISTER_IMMEDIATE,
    Kind.SPRITE: ("x", "y", "n"),
    # Key skips take their register from the last nibble.
    Kind.SKIP_KEY: ("n",),
    Kind.SKIP_NOKEY: ("n",),
    Kind.GET_DELAY: _REGISTER,
    Kind.WAIT_KEY: _REGISTER,
    Kind.SET_DELAY: _REGISTER,
    Kind.SET_SOUND: _REGISTER,
    Kind.ADD_INDEX: _REGISTER,
    Kind.FONT_CHAR: _REGISTER,
    Kind.STORE_BCD: _REGISTER,
    Kind.STORE_REGS: _REGISTER,
    Kind.LOAD_REGS: _REGISTER,
}


def as_kind(value) -> jnp.ndarray:
    """Cast a kind, a list of kinds or a traced kind array to int32."""
    if isinstance(value, Kind):
        value = int(value)
    elif isinstance(value, (list, tuple)):
        value = [int(kind) for kind in value]
    return jnp.asarray(value, dtype=jnp.int32)


def select_kind(conditions, kinds) -> jnp.ndarray:
    """Kind paired with the first true condition, UNKNOWN when none holds."""
    return jnp.select(
        list(conditions),
        [as_kind(kind) for kind in kinds],
        as_kind(Kind.UNKNOWN)
    )
