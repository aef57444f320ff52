"""Example controllers used by discovery tests."""
