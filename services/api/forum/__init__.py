"""Forum API service."""
