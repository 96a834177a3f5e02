"""CHIP-8 display instructions."""

from octadis.instructions.control_flow import make_fixed_classifier
from octadis.kinds import Kind

classify_display = make_fixed_classifier(Kind.SPRITE)  # DXYN
