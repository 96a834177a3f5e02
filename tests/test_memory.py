"""Tests for register and index loads (6XNN, 7XNN, ANNN, CXNN)."""

from octadis import Kind
from conftest import decode_instruction, render_word


class TestRegisterLoads:
    """Test immediate register instructions."""

    def test_load_immediate(self):
        """6XNN - Set VX = NN."""
        instruction = decode_instruction(0x60AB)

        assert instruction.kind == Kind.LOAD_IMM
        assert instruction.operands == {"x": 0, "nn": 0xAB}
        assert render_word(0x60AB) == "MVI V0,#$ab"

    def test_load_immediate_padded(self):
        """6XNN - Immediate keeps two digits."""
        assert render_word(0x6F05) == "MVI Vf,#$05"

    def test_add_immediate(self):
        """7XNN - VX += NN."""
        assert decode_instruction(0x7C01).kind == Kind.ADD_IMM
        assert render_word(0x7C01) == "ADD Vc,#$01"

    def test_random(self):
        """CXNN - VX = random & NN."""
        assert decode_instruction(0xC3FF).kind == Kind.RANDOM
        assert render_word(0xC3FF) == "RAND V3 #$ff"


class TestIndex:
    """Test index register instructions."""

    def test_set_index(self):
        """ANNN - I = NNN."""
        instruction = decode_instruction(0xA2F0)

        assert instruction.kind == Kind.LOAD_INDEX
        assert instruction.nnn == 0x2F0
        assert render_word(0xA2F0) == "MVI I,#$2f0"

    def test_set_index_zero_page(self):
        """ANNN - High nibble of zero renders as a single digit."""
        assert render_word(0xA005) == "MVI I,#$005"
