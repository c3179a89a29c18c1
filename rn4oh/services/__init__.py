"""External collaborators (git)."""
