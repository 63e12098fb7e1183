import sys

from snek.cli import main

sys.exit(main())
