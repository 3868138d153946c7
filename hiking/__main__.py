import sys

from hiking.cli import main

sys.exit(main())
