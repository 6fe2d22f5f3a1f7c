"""Entry point for running the reference plotter program."""

import sys

from turtleplotter.cli import main


if __name__ == "__main__":
    sys.exit(main())
