"""Allow ``python -m escp_label``."""

import sys

from escp_label.cli import main

sys.exit(main())
