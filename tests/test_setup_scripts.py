"""
Tests for collection setup and seeding
"""
from unittest.mock import MagicMock

import pytest
from pymongo.errors import BulkWriteError, CollectionInvalid, OperationFailure

from bookstore_mongodb import connect_db
from bookstore_mongodb.create_collections import create_collections
from bookstore_mongodb.insert_books import SAMPLE_BOOKS, insert_books
from bookstore_mongodb.schema import books_schema
from bookstore_mongodb.validation import BookValidationError


def test_create_collections_applies_validator():
    db = MagicMock()

    create_collections(db)

    db.create_collection.assert_called_once_with(connect_db.COLLECTION_NAME)
    db.command.assert_called_once_with(
        "collMod", connect_db.COLLECTION_NAME, validator={"$jsonSchema": books_schema}
    )


def test_create_collections_tolerates_existing_collection():
    db = MagicMock()
    db.create_collection.side_effect = CollectionInvalid("collection books already exists")

    create_collections(db)

    db.command.assert_called_once()


def test_create_collections_reports_validator_failure(capsys):
    db = MagicMock()
    db.command.side_effect = OperationFailure("not authorized")

    create_collections(db)

    assert "Failed to apply validator" in capsys.readouterr().out


def test_insert_books_resets_and_inserts_catalogue():
    collection = MagicMock()
    collection.distinct.return_value = ["old-1", "old-2"]
    collection.insert_many.return_value.inserted_ids = list(range(len(SAMPLE_BOOKS)))

    ids = insert_books(collection)

    docs = collection.insert_many.call_args[0][0]
    assert [d["title"] for d in docs] == [b["title"] for b in SAMPLE_BOOKS]
    assert len(ids) == len(SAMPLE_BOOKS)
    collection.delete_many.assert_called_once_with({"_id": {"$in": ["old-1", "old-2"]}})
    names = [c[0] for c in collection.method_calls]
    assert names.index("insert_many") < names.index("delete_many")


def test_insert_books_keeps_old_documents_when_insert_fails():
    collection = MagicMock()
    collection.distinct.return_value = ["old-1"]
    collection.insert_many.side_effect = BulkWriteError(
        {"writeErrors": [{"index": 0, "code": 121, "errmsg": "Document failed validation"}]}
    )

    with pytest.raises(BulkWriteError):
        insert_books(collection)

    collection.delete_many.assert_not_called()


def test_sample_catalogue_has_runner_targets():
    titles = {b["title"] for b in SAMPLE_BOOKS}
    assert {"1984", "Moby Dick"} <= titles
    assert any(b["author"] == "George Orwell" for b in SAMPLE_BOOKS)


def test_insert_books_without_reset_keeps_existing():
    collection = MagicMock()

    insert_books(collection, books=SAMPLE_BOOKS[:2], reset=False)

    collection.delete_many.assert_not_called()
    collection.insert_many.assert_called_once()


def test_insert_books_validates_before_writing():
    collection = MagicMock()
    bad = dict(SAMPLE_BOOKS[0], price=-5)

    with pytest.raises(BookValidationError):
        insert_books(collection, books=[SAMPLE_BOOKS[1], bad])

    collection.delete_many.assert_not_called()
    collection.insert_many.assert_not_called()


def test_insert_books_empty_list_inserts_nothing():
    collection = MagicMock()

    assert insert_books(collection, books=[], reset=False) == []
    collection.insert_many.assert_not_called()
