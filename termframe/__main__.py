import sys

from termframe.cli import main

sys.exit(main())
