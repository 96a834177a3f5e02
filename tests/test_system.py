"""Tests for system instructions (0xxx)."""

import pytest
from octadis import Kind
from conftest import decode_instruction, render_word


def test_decode_clear_screen():
    """Test 00E0 - Clear display."""
    instruction = decode_instruction(0x00E0)

    assert instruction.kind == Kind.CLS
    assert instruction.operands == {}
    assert render_word(0x00E0) == "CLS"


def test_decode_return():
    """Test 00EE - Return from subroutine."""
    assert decode_instruction(0x00EE).kind == Kind.RTS
    assert render_word(0x00EE) == "RTS"


def test_system_class_matches_last_byte_only():
    """0NNN forms are selected by the last byte, middle nibbles are ignored."""
    assert decode_instruction(0x0AE0).kind == Kind.CLS
    assert decode_instruction(0x0FEE).kind == Kind.RTS


@pytest.mark.parametrize("instruction", [0x0000, 0x0123, 0x00E1, 0x00EF, 0x0E00])
def test_undefined_system_instruction(instruction):
    """Other 0NNN words (machine code calls) are unknown."""
    decoded = decode_instruction(instruction)

    assert decoded.kind == Kind.UNKNOWN
    assert decoded.is_unknown
    assert render_word(instruction) == "UNKNOWN"
