import sys

from sramcompare.cli import main

sys.exit(main())
