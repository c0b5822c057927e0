"""Allow running the command line interface with ``python -m subdiurnal``."""

# Local Imports
from . import main

if __name__ == "__main__":
    main()
