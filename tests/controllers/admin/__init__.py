"""Controllers of the Admin module."""
