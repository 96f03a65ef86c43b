"""Business logic services.

Services contain all business logic and are called by routes.
Each store operation runs in exactly one database transaction.
"""
