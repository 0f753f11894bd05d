import sys

from flowscribe.cli import main

sys.exit(main())
