"""Run the indexedseq shell with ``python -m indexedseq``."""

import sys

from indexedseq.shell import main

sys.exit(main())
