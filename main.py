import sys

from sample_app.entrypoint import main


if __name__ == "__main__":
    sys.exit(main())
