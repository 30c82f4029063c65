import sys

from fieldtrack.cli import main

sys.exit(main())
