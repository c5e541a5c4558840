"""Allow ``python -m vttparse``."""

from .ui.cli import main

if __name__ == '__main__':
    main()
