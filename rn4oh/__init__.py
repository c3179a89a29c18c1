"""rn4oh - scaffold RN4OH projects from the official template repository."""

__version__ = "1.0.0"
