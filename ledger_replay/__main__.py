"""Allow ``python -m ledger_replay``."""

import sys

from ledger_replay.cli import main

sys.exit(main())
