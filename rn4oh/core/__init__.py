"""Core rebranding, initialization and version listing logic."""
