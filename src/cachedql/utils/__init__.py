"""Utility helpers for cachedql."""
