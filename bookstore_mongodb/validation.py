"""Client-side checks for book documents before they are written.

The collection validator in :mod:`bookstore_mongodb.schema` is expressed in
BSON types; ``jsonschema`` needs plain JSON Schema, so the BSON schema is
translated once and cached.
"""
from typing import Any, Dict

import jsonschema
from pydantic import ValidationError

from bookstore_mongodb import schema as book_schema
from bookstore_mongodb.models import BookIn


class BookValidationError(ValueError):
    """Raised when a book document fails the model or the collection schema."""


_BSON_TO_JSON_TYPES = {
    "string": "string",
    "int": "integer",
    "long": "integer",
    "double": "number",
    "decimal": "number",
    "bool": "boolean",
    "null": "null",
    "object": "object",
    "array": "array",
}

_JSON_SCHEMA_CACHE: dict = {}


def bson_to_jsonschema(bson_schema: dict) -> dict:
    props = {}
    for key, prop in bson_schema.get("properties", {}).items():
        bson_type = prop.get("bsonType")
        types = bson_type if isinstance(bson_type, list) else [bson_type]
        json_types = []
        for t in types:
            if t not in _BSON_TO_JSON_TYPES:
                raise ValueError(f"Unsupported bsonType {t!r} for field {key!r}")
            json_type = _BSON_TO_JSON_TYPES[t]
            if json_type not in json_types:
                json_types.append(json_type)
        props[key] = {"type": json_types[0] if len(json_types) == 1 else json_types}

    json_schema = {"type": "object", "properties": props}
    if "required" in bson_schema:
        json_schema["required"] = list(bson_schema["required"])
    return json_schema


def _books_jsonschema() -> dict:
    if "books" not in _JSON_SCHEMA_CACHE:
        _JSON_SCHEMA_CACHE["books"] = bson_to_jsonschema(book_schema.books_schema)
    return _JSON_SCHEMA_CACHE["books"]


def validate_book(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Check a document against the collection schema and return it unchanged."""
    try:
        jsonschema.validate(instance=doc, schema=_books_jsonschema())
    except jsonschema.ValidationError as e:
        raise BookValidationError(f"Schema validation error: {e.message}") from e
    return doc


def prepare_book(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize a raw book through :class:`BookIn`, then schema-check it."""
    try:
        doc = BookIn(**raw).to_document()
    except ValidationError as e:
        title = raw.get("title", "<untitled>")
        raise BookValidationError(f"Invalid book {title!r}: {e.errors()[0]['msg']}") from e
    return validate_book(doc)
