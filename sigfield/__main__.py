import sys

from sigfield.cli import main


if __name__ == "__main__":
    sys.exit(main())
