"""Allow ``python -m tankgame`` to run the demo harness."""
import sys

from .demo import run

sys.exit(run())
