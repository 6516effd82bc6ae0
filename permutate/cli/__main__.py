import sys

from permutate.cli import main

sys.exit(main())
