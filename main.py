import sys

from rush.errors import print_error
from rush.log import setup_logging
from rush.shell import Shell


def main(argv=None):
    argv = sys.argv if argv is None else argv

    # rush takes no arguments and reads commands from stdin only.
    if len(argv) != 1:
        print_error()
        sys.exit(1)

    setup_logging()
    try:
        shell = Shell()
    except ValueError as e:
        print_error(e)
        sys.exit(1)

    shell.main_loop()
    sys.exit(0)


if __name__ == "__main__":
    main()
