"""
Domain Layer - Core business entities and rules.

This layer holds the storefront records (contact messages, orders,
profile snapshots) and has no dependency on frameworks or storage.
"""
