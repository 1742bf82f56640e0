"""Allow ``python -m xreplace``."""

from xreplace.cli.cli import main

if __name__ == "__main__":
    main()
