# insert_books.py - seed the books collection with the sample catalogue
from typing import Iterable, List, Optional

from bookstore_mongodb.connect_db import get_books_collection, get_client, get_database
from bookstore_mongodb.validation import prepare_book

SAMPLE_BOOKS = [
    {
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "genre": "Fiction",
        "published_year": 1960,
        "price": 12.99,
        "in_stock": True,
        "pages": 336,
        "publisher": "J. B. Lippincott & Co.",
    },
    {
        "title": "1984",
        "author": "George Orwell",
        "genre": "Dystopian",
        "published_year": 1949,
        "price": 10.99,
        "in_stock": True,
        "pages": 328,
        "publisher": "Secker & Warburg",
    },
    {
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "genre": "Fiction",
        "published_year": 1925,
        "price": 9.99,
        "in_stock": True,
        "pages": 180,
        "publisher": "Charles Scribner's Sons",
    },
    {
        "title": "Brave New World",
        "author": "Aldous Huxley",
        "genre": "Dystopian",
        "published_year": 1932,
        "price": 11.50,
        "in_stock": False,
        "pages": 311,
        "publisher": "Chatto & Windus",
    },
    {
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "genre": "Fantasy",
        "published_year": 1937,
        "price": 14.99,
        "in_stock": True,
        "pages": 310,
        "publisher": "George Allen & Unwin",
    },
    {
        "title": "The Catcher in the Rye",
        "author": "J.D. Salinger",
        "genre": "Fiction",
        "published_year": 1951,
        "price": 8.99,
        "in_stock": True,
        "pages": 224,
        "publisher": "Little, Brown and Company",
    },
    {
        "title": "Pride and Prejudice",
        "author": "Jane Austen",
        "genre": "Romance",
        "published_year": 1813,
        "price": 7.99,
        "in_stock": True,
        "pages": 432,
        "publisher": "T. Egerton",
    },
    {
        "title": "The Lord of the Rings",
        "author": "J.R.R. Tolkien",
        "genre": "Fantasy",
        "published_year": 1954,
        "price": 19.99,
        "in_stock": True,
        "pages": 1178,
        "publisher": "Allen & Unwin",
    },
    {
        "title": "Animal Farm",
        "author": "George Orwell",
        "genre": "Political Satire",
        "published_year": 1945,
        "price": 8.50,
        "in_stock": False,
        "pages": 112,
        "publisher": "Secker & Warburg",
    },
    {
        "title": "The Alchemist",
        "author": "Paulo Coelho",
        "genre": "Fiction",
        "published_year": 1988,
        "price": 10.99,
        "in_stock": True,
        "pages": 197,
        "publisher": "HarperOne",
    },
    {
        "title": "Moby Dick",
        "author": "Herman Melville",
        "genre": "Adventure",
        "published_year": 1851,
        "price": 12.50,
        "in_stock": False,
        "pages": 635,
        "publisher": "Harper & Brothers",
    },
    {
        "title": "Wuthering Heights",
        "author": "Emily Brontë",
        "genre": "Gothic Fiction",
        "published_year": 1847,
        "price": 9.99,
        "in_stock": True,
        "pages": 342,
        "publisher": "Thomas Cautley Newby",
    },
]


def insert_books(collection, books: Optional[Iterable[dict]] = None, reset: bool = True) -> List:
    """Validate and insert ``books`` (the sample catalogue by default).

    Every document is checked before the collection is touched, so one bad
    record leaves the collection as it was. With ``reset`` the documents that
    existed before are removed only after the new ones are in, so a failed
    insert never leaves the collection empty.
    """
    docs = [prepare_book(b) for b in (SAMPLE_BOOKS if books is None else books)]
    old_ids = collection.distinct("_id") if reset else []

    inserted_ids = list(collection.insert_many(docs).inserted_ids) if docs else []

    if old_ids:
        removed = collection.delete_many({"_id": {"$in": old_ids}})
        print(f"⚠️ Removed {removed.deleted_count} existing book(s)")
    return inserted_ids


def main():
    client = get_client()
    try:
        books = get_books_collection(get_database(client))
        inserted_ids = insert_books(books)
        print(f"✅ {len(inserted_ids)} books were successfully inserted")
        for book in books.find({}, {"_id": 0, "title": 1, "author": 1, "published_year": 1}):
            print(f"   {book['title']} by {book['author']} ({book['published_year']})")
    finally:
        client.close()


if __name__ == "__main__":
    main()
