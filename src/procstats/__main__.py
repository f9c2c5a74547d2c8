import sys

from procstats.cli import main

sys.exit(main())
