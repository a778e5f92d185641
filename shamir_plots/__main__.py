import sys

from shamir_plots.cli import main

sys.exit(main())
