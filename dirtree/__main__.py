"""``python -m dirtree`` runs the same command line as the ``tree`` script."""

from .cli import main


if __name__ == "__main__":
    main()
