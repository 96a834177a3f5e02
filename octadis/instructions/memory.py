"""CHIP-8 register and index load instructions."""

from octadis.instructions.control_flow import make_fixed_classifier
from octadis.kinds import Kind

classify_set = make_fixed_classifier(Kind.LOAD_IMM)          # 6XNN
classify_add = make_fixed_classifier(Kind.ADD_IMM)           # 7XNN
classify_set_index = make_fixed_classifier(Kind.LOAD_INDEX)  # ANNN
classify_random = make_fixed_classifier(Kind.RANDOM)         # CXNN
