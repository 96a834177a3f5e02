"""CHIP-8 instruction decoding records."""

import jax.numpy as jnp
import numpy as np
from chex import dataclass

from octadis.constants import ADDRESS_MASK
from octadis.kinds import OPERAND_FIELDS, Kind


@dataclass(frozen=True)
class InstructionWord:
    """Instruction word split into nibble fields.

    Fields are plain ints for a single word, or equally shaped arrays when a
    whole program is split at once.
    """
    raw: int
    opcode: int  # First nibble
    x: int       # Second nibble (VX register)
    y: int       # Third nibble (VY register)
    n: int       # Fourth nibble (4-bit immediate)
    nn: int      # Last byte (8-bit immediate)
    nnn: int     # Last 12 bits (12-bit address)


def pack_word(high: int, low: int) -> int:
    """Pack two bytes into a 16-bit instruction."""
    return (high << 8) | low


def split(instruction: int) -> InstructionWord:
    """Split 16-bit instruction into components."""
    return InstructionWord(
        raw=instruction,
        opcode=(instruction & 0xF000) >> 12,
        x=(instruction & 0x0F00) >> 8,
        y=(instruction & 0x00F0) >> 4,
        n=instruction & 0x000F,
        nn=instruction & 0x00FF,
        nnn=instruction & ADDRESS_MASK
    )


def split_program(program: bytes) -> InstructionWord:
    """Split every complete word of a program into array-valued fields."""
    data = np.frombuffer(bytes(program), dtype=np.uint8)
    data = jnp.asarray(data[:len(data) - len(data) % 2], dtype=jnp.int32)
    return split(pack_word(data[0::2], data[1::2]))


@dataclass(frozen=True)
class DecodedInstruction:
    """Classified CHIP-8 instruction with its raw bytes."""
    kind: Kind
    high: int
    low: int

    @property
    def raw(self) -> int:
        return pack_word(self.high, self.low)

    @property
    def opcode(self) -> int:
        return self.high >> 4

    @property
    def x(self) -> int:
        return self.high & 0x0F

    @property
    def y(self) -> int:
        return self.low >> 4

    @property
    def n(self) -> int:
        return self.low & 0x0F

    @property
    def nn(self) -> int:
        return self.low

    @property
    def nnn(self) -> int:
        return self.raw & ADDRESS_MASK

    @property
    def operands(self) -> dict[str, int]:
        """Operand fields used by this instruction form, in template order."""
        return {name: getattr(self, name) for name in OPERAND_FIELDS[self.kind]}

    @property
    def is_unknown(self) -> bool:
        return self.kind == Kind.UNKNOWN
