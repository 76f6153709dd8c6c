"""Allow ``python -m pairmatch``."""

import sys

from pairmatch.cli import main

sys.exit(main())
