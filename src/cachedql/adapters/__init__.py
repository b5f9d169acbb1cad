"""Web framework adapters for cachedql."""
