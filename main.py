"""
Main entry point for the Namma Metro route finder.

Runs the command-line interface from a source checkout; installed copies use
the namma-metro console script instead.
"""

import sys

from namma_metro.cli import main

if __name__ == "__main__":
    sys.exit(main())
