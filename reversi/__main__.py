import sys

from reversi.game.driver import main

if __name__ == "__main__":
    sys.exit(main())
