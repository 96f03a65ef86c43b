"""Data stores for persistence.

Stores handle DB engine, sessions and schema creation.

No business logic in stores - that belongs in services.
"""
