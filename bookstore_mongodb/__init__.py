"""bookstore_mongodb package initializer

Makes the `bookstore_mongodb` directory a regular Python package so the
query runner, the seeder and the collection setup script can be run with
``python -m bookstore_mongodb.<module>`` from the project root.
"""

__all__ = [
    "connect_db",
    "create_collections",
    "insert_books",
    "models",
    "queries",
    "run_queries",
    "schema",
    "validation",
]
