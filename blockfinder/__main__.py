import sys

from blockfinder.cli import main

sys.exit(main())
