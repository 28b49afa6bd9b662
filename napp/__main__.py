"""Allow ``python -m napp``."""

from napp.cli import main

if __name__ == "__main__":
    main()
