"""Test configuration and fixtures for CHIP-8 disassembler tests."""

import pytest
from octadis import decode, render_instruction


@pytest.fixture
def sample_program():
    """Short program: clear screen, set up registers, draw, loop."""
    return bytes([
        0x00, 0xE0,  # CLS
        0x6A, 0x02,  # MVI Va,#$02
        0xA2, 0x0A,  # MVI I,#$20a
        0xDA, 0xB5,  # SPRITE Va Vb, #$5
        0x12, 0x00,  # JUMP #$200
    ])


@pytest.fixture
def rom_file(tmp_path, sample_program):
    """Sample program written to a ROM file."""
    path = tmp_path / "sample.ch8"
    path.write_bytes(sample_program)
    return path


def decode_instruction(instruction: int):
    """Helper to decode a 16-bit instruction from a two byte buffer."""
    return decode(bytes([instruction >> 8, instruction & 0xFF]), 0)


def render_word(instruction: int, style: str = "compat") -> str:
    """Helper to get the listing text of a 16-bit instruction."""
    return render_instruction(decode_instruction(instruction), style)
