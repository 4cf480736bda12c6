"""
Shared fixtures: mocked collections for the unit tests and a live
collection for the integration tests.
"""
import os
from unittest.mock import MagicMock

import pytest
from pymongo import MongoClient
from pymongo.errors import PyMongoError


def make_cursor(docs=None):
    """Mock cursor that chains sort/skip/limit and iterates over ``docs``."""
    cursor = MagicMock(name="cursor")
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.__iter__.side_effect = lambda: iter(list(docs or []))
    return cursor


@pytest.fixture
def books():
    collection = MagicMock(name="books")
    collection.name = "books"
    collection.find.return_value = make_cursor()
    collection.aggregate.side_effect = lambda pipeline: iter([])
    collection.database.command.return_value = {
        "executionStats": {"nReturned": 1, "totalDocsExamined": 1}
    }
    return collection


@pytest.fixture
def mock_client(books):
    client = MagicMock(name="client")
    client.__getitem__.return_value.__getitem__.return_value = books
    return client


@pytest.fixture
def live_books():
    uri = os.getenv("MONGO_TEST_URI", "mongodb://localhost:27017")
    client = MongoClient(uri, serverSelectionTimeoutMS=1000)
    try:
        client.admin.command("ping")
    except PyMongoError:
        client.close()
        pytest.skip(f"MongoDB not reachable at {uri}")

    collection = client["plp_bookstore_test"]["books"]
    collection.drop()
    yield collection
    collection.drop()
    client.close()
