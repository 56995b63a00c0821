import sys

from extfix.cli import main

sys.exit(main())
