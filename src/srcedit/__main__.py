"""Allow ``python -m srcedit PATTERN``."""

from .cli import main


if __name__ == "__main__":
    main()
