import sys

from odestep.cli import main

sys.exit(main())
