import sys

from folio.main import main

if __name__ == "__main__":
    sys.exit(main())
