import sys

from feedforward.cli import main


if __name__ == "__main__":
    sys.exit(main())
