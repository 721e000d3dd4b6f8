import sys

from zone_layout.cli import main

sys.exit(main())
