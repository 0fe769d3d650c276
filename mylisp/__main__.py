import sys

from mylisp.repl import main

if __name__ == '__main__':
    sys.exit(main())
