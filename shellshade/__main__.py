"""Allow `python -m shellshade`."""

from .cli import main

if __name__ == "__main__":
    main()
