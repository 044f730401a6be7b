import sys

from gravship.game import main

if __name__ == "__main__":
    sys.exit(main())
