import sys

from audiomirror.cli import main

sys.exit(main())
