"""Allow ``python -m fontrun``."""

from fontrun.ui.cli import main


if __name__ == "__main__":
    main()
