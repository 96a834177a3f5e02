import sys

from octadis.cli import main

sys.exit(main())
