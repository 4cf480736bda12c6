# run_queries.py - CRUD, advanced queries, aggregations and indexing on the books collection
from pprint import pprint

from bson import json_util

from bookstore_mongodb import queries
from bookstore_mongodb.connect_db import get_books_collection, get_client, get_database


def run_queries(books):
    # ======== Basic CRUD ========
    print(f"\n1. Books in the {queries.GENRE} genre:")
    pprint(queries.find_by_genre(books))

    print(f"\n2. Books published after {queries.PUBLISHED_AFTER}:")
    pprint(queries.find_published_after(books))

    print(f"\n3. Books by {queries.AUTHOR}:")
    pprint(queries.find_by_author(books))

    print(f"\n4. Updating price of '{queries.UPDATE_TITLE}'...")
    result, updated = queries.update_price(books)
    print(f"   matched={result.matched_count} modified={result.modified_count}")
    pprint(updated)

    print(f"\n5. Deleting '{queries.DELETE_TITLE}'...")
    deleted = queries.delete_by_title(books)
    print(f"Deleted '{queries.DELETE_TITLE}' ({deleted.deleted_count} document(s))")

    # ======== Advanced queries ========
    print(f"\n6. In-stock books published after {queries.IN_STOCK_AFTER}:")
    pprint(queries.find_in_stock_after(books))

    print("\n7. Books showing only title, author, and price:")
    pprint(queries.find_projected(books))

    print("\n8. Books sorted by price (ascending):")
    pprint(queries.sort_by_price(books))

    print("\n9. Books sorted by price (descending):")
    pprint(queries.sort_by_price(books, descending=True))

    print(f"\n10. Page {queries.PAGE} ({queries.PAGE_SIZE} books per page):")
    pprint(queries.paginate(books))

    # ======== Aggregation pipelines ========
    print("\n11. Average price of books by genre:")
    pprint(queries.average_price_by_genre(books))

    print("\n12. Author with the most books:")
    pprint(queries.top_author(books))

    print("\n13. Books grouped by publication decade:")
    pprint(queries.count_by_decade(books))

    # ======== Indexing ========
    print("\n14. Creating index on title...")
    print(f"   index: {queries.create_title_index(books)}")

    print("\n15. Creating compound index on author + published_year...")
    print(f"   index: {queries.create_author_year_index(books)}")

    print(f"\n16. Explain output for indexed query (find by title '{queries.UPDATE_TITLE}'):")
    print(json_util.dumps(queries.explain_find_by_title(books), indent=2))


def main(client=None):
    """Run every query once, always closing the client afterwards."""
    try:
        if client is None:
            client = get_client()
        books = get_books_collection(get_database(client))
        run_queries(books)
    except Exception as e:
        print(f"❌ Error: {e}")
    finally:
        if client is not None:
            client.close()
        print("\n🔚 Connection closed")


if __name__ == "__main__":
    main()
