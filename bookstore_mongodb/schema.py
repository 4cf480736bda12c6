# schema.py

books_schema = {
    "bsonType": "object",
    "required": ["title", "author", "genre", "published_year", "price", "in_stock"],
    "properties": {
        "title": {"bsonType": "string"},
        "author": {"bsonType": "string"},
        "genre": {"bsonType": "string"},
        "published_year": {"bsonType": "int"},
        "price": {"bsonType": ["double", "int"]},
        "in_stock": {"bsonType": "bool"},
        "pages": {"bsonType": "int"},
        "publisher": {"bsonType": "string"},
    }
}
