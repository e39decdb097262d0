import sys

from mojo.wakeonlan.cli import main

sys.exit(main())
