import sys

from rasm.cli import main

if __name__ == "__main__":
    sys.exit(main())
