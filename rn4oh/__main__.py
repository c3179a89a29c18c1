"""Allow running the CLI with ``python -m rn4oh``."""
from rn4oh.cli import main

if __name__ == "__main__":
    main()
