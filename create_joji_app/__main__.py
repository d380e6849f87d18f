import sys

from create_joji_app.cli import main

if __name__ == "__main__":
    sys.exit(main())
