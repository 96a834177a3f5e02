"""
Disassemble a CHIP-8 ROM to stdout: python main.py path/to/rom.ch8
"""

import sys

from octadis.cli import main

if __name__ == "__main__":
    sys.exit(main())
