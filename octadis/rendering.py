"""CHIP-8 listing rendering utilities."""

from octadis.constants import UNKNOWN_MNEMONIC
from octadis.decode import DecodedInstruction
from octadis.kinds import Kind

TEMPLATES = {
    Kind.UNKNOWN: UNKNOWN_MNEMONIC,
    Kind.CLS: "CLS",
    Kind.RTS: "RTS",
    Kind.JUMP: "JUMP #${nnn}",
    Kind.CALL: "CALL #${nnn}",
    Kind.SKIP_EQ_IMM: "SKIP.EQ V{x}, #${nn}",
    Kind.SKIP_NE_IMM: "SKIP.NQ V{x}, #${nn}",
    Kind.SKIP_EQ_REG: "SKIP.EQ V{x}, V{y}",
    Kind.LOAD_IMM: "MVI V{x},#${nn}",
    Kind.ADD_IMM: "ADD V{x},#${nn}",
    Kind.MOV: "MOV V{x}, V{y}",
    Kind.OR: "OR V{x}, V{y}",
    Kind.AND: "AND V{x}, V{y}",
    Kind.XOR: "XOR V{x}, V{y}",
    Kind.ADD_CARRY: "ADD. V{x}, V{y}",
    Kind.SUB_BORROW: "SUB. V{x}, V{y}",
    Kind.SHIFT_RIGHT: "SHR. V{x}",
    Kind.SUB_REVERSE: "SUBB. V{x}, V{y}",
    Kind.SHIFT_LEFT: "SHL. V{x}",
    Kind.SKIP_NE_REG: "SKIP.NQ V{x}, V{y}",
    Kind.LOAD_INDEX: "MVI I,#${nnn}",
    Kind.JUMP_OFFSET: "JUMP ${nnn}(V0)",
    Kind.RANDOM: "RAND V{x} #${nn}",
    Kind.SPRITE: "SPRITE V{x} V{y}, #${n}",
    Kind.SKIP_KEY: "SKIP.KEY V{n}",
    Kind.SKIP_NOKEY: "SKIP.NOKEY V{n}",
    Kind.GET_DELAY: "MOV V{x}, DELAY",
    Kind.WAIT_KEY: "WAITKEY V{x}",
    Kind.SET_DELAY: "MOV DELAY, V{x}",
    Kind.SET_SOUND: "MOV SOUND, V{x}",
    Kind.ADD_INDEX: "ADD I, V{x}",
    Kind.FONT_CHAR: "SPRITECHAR V{x}",
    Kind.STORE_BCD: "MOVBCD V{x}",
    Kind.STORE_REGS: "MOVM (I), V0-V{x}",
    Kind.LOAD_REGS: "MOVM V0-V{x}, (I)",
}

# Hexadecimal presentation type per render style.
STYLES = {
    "compat": "x",
    "uppercase": "X",
}


def _hex_digits(style: str) -> str:
    if style not in STYLES:
        raise ValueError(
            f"Unknown render style '{style}'. Available: {list(STYLES.keys())}"
        )
    return STYLES[style]


def format_operand(name: str, value: int, style: str = "compat") -> str:
    """Format one operand field.

    Nibbles (registers, sprite height) take the minimum width, immediate bytes
    two digits, and addresses their high nibble followed by a two digit low
    byte.
    """
    digits = _hex_digits(style)
    if name == "nn":
        return format(value, "02" + digits)
    if name == "nnn":
        return format(value >> 8, digits) + format(value & 0xFF, "02" + digits)
    return format(value, digits)


def render_instruction(instruction: DecodedInstruction, style: str = "compat") -> str:
    """Render mnemonic and operands of a decoded instruction."""
    operands = {
        name: format_operand(name, value, style)
        for name, value in instruction.operands.items()
    }
    return TEMPLATES[instruction.kind].format(**operands)


def render_line(offset: int, instruction: DecodedInstruction, style: str = "compat") -> str:
    """Render one listing line: offset, raw bytes, then the instruction text."""
    digits = _hex_digits(style)
    return (
        f"{offset:04{digits}} {instruction.high:02{digits}} {instruction.low:02{digits}} "
        f"{render_instruction(instruction, style)}"
    )
