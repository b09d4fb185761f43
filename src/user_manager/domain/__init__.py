"""
Domain Layer - Core Business Logic

This layer contains the user entities, the operation result value object and
the repository interface. It is independent of HTTP and presentation concerns.
"""
