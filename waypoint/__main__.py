"""Allow ``python -m waypoint``."""

from waypoint.cli import main

if __name__ == "__main__":
    main()
