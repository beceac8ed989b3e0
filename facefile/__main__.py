"""Entry point for `python -m facefile`."""

import sys


def main():
    from facefile.app import run
    sys.exit(run())


if __name__ == "__main__":
    main()
