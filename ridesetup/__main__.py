"""
Entry point for running ridesetup as a module.

Usage:
    python -m ridesetup tire-pressure --input tire.json
    python -m ridesetup make-example
    python -m ridesetup serve --port 8000
"""

import sys

from ridesetup.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
