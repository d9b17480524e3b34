"""
Data access layer: explicit SQLAlchemy statements behind small async functions.

Repositories never commit. Lookups return None on a miss and let the services
decide what that means.
"""
