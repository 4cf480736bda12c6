"""Queries, updates, aggregations and index calls run against the books collection.

Each helper issues exactly one driver call (two for the update, which reads
the document back) and returns plain Python data so the runner can print it.
Filters and pipelines are module constants so they can be inspected directly.
"""
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.results import DeleteResult, UpdateResult

GENRE = "Fiction"
PUBLISHED_AFTER = 2000
AUTHOR = "George Orwell"
UPDATE_TITLE = "1984"
NEW_PRICE = 15.99
DELETE_TITLE = "Moby Dick"
IN_STOCK_AFTER = 2010
SORT_LIMIT = 5
PAGE = 2
PAGE_SIZE = 5

BOOK_PROJECTION = {"_id": 0, "title": 1, "author": 1, "price": 1}

AVERAGE_PRICE_BY_GENRE = [
    {"$group": {"_id": "$genre", "averagePrice": {"$avg": "$price"}}},
]

TOP_AUTHOR = [
    {"$group": {"_id": "$author", "bookCount": {"$sum": 1}}},
    {"$sort": {"bookCount": -1}},
    {"$limit": 1},
]

BOOKS_BY_DECADE = [
    {
        "$project": {
            "decade": {"$multiply": [{"$floor": {"$divide": ["$published_year", 10]}}, 10]}
        }
    },
    {"$group": {"_id": "$decade", "count": {"$sum": 1}}},
    {"$sort": {"_id": 1}},
]

TITLE_INDEX = [("title", ASCENDING)]
AUTHOR_YEAR_INDEX = [("author", ASCENDING), ("published_year", ASCENDING)]


# ======== Basic CRUD ========
def find_by_genre(books: Collection, genre: str = GENRE) -> List[dict]:
    return list(books.find({"genre": genre}))


def find_published_after(books: Collection, year: int = PUBLISHED_AFTER) -> List[dict]:
    return list(books.find({"published_year": {"$gt": year}}))


def find_by_author(books: Collection, author: str = AUTHOR) -> List[dict]:
    return list(books.find({"author": author}))


def update_price(books: Collection, title: str = UPDATE_TITLE, price: float = NEW_PRICE):
    """Set the price of the book titled ``title`` and read it back.

    Returns the update result and the document after the update (``None``
    when no book has that title; a missing title is not an error).
    """
    result: UpdateResult = books.update_one({"title": title}, {"$set": {"price": price}})
    return result, books.find_one({"title": title})


def delete_by_title(books: Collection, title: str = DELETE_TITLE) -> DeleteResult:
    return books.delete_one({"title": title})


# ======== Advanced queries ========
def find_in_stock_after(books: Collection, year: int = IN_STOCK_AFTER) -> List[dict]:
    return list(books.find({"in_stock": True, "published_year": {"$gt": year}}))


def find_projected(books: Collection) -> List[dict]:
    return list(books.find({}, BOOK_PROJECTION))


def sort_by_price(books: Collection, descending: bool = False, limit: int = SORT_LIMIT) -> List[dict]:
    direction = DESCENDING if descending else ASCENDING
    return list(books.find().sort("price", direction).limit(limit))


def paginate(books: Collection, page: int = PAGE, page_size: int = PAGE_SIZE) -> List[dict]:
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    skip = (page - 1) * page_size
    return list(books.find().skip(skip).limit(page_size))


# ======== Aggregations ========
def average_price_by_genre(books: Collection) -> List[dict]:
    return list(books.aggregate(AVERAGE_PRICE_BY_GENRE))


def top_author(books: Collection) -> List[dict]:
    return list(books.aggregate(TOP_AUTHOR))


def count_by_decade(books: Collection) -> List[dict]:
    return list(books.aggregate(BOOKS_BY_DECADE))


# ======== Indexing ========
def create_title_index(books: Collection) -> str:
    return books.create_index(TITLE_INDEX)


def create_author_year_index(books: Collection) -> str:
    return books.create_index(AUTHOR_YEAR_INDEX)


def explain_find_by_title(books: Collection, title: str = UPDATE_TITLE) -> Optional[Dict[str, Any]]:
    """Execution statistics for the point lookup on ``title``."""
    plan = books.database.command(
        "explain",
        {"find": books.name, "filter": {"title": title}},
        verbosity="executionStats",
    )
    return plan.get("executionStats")
