import sys

from small_world.cli import main

if __name__ == "__main__":
    sys.exit(main())
