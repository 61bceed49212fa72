import sys

from plant_finder.scripts.cli import main

sys.exit(main())
