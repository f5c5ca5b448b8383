"""Input clients."""
