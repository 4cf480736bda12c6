from pymongo.errors import CollectionInvalid, OperationFailure

from bookstore_mongodb.connect_db import COLLECTION_NAME, get_client, get_database
from bookstore_mongodb.schema import books_schema


def create_collections(db):
    collections = {
        COLLECTION_NAME: books_schema,
    }

    for name, schema in collections.items():
        try:
            db.create_collection(name)
        except CollectionInvalid:
            # already exists
            pass

        try:
            db.command("collMod", name, validator={"$jsonSchema": schema})
            print(f"✅ Created/updated collection '{name}' with validation.")
        except OperationFailure as e:
            print(f"⚠️ Failed to apply validator to '{name}': {e}")


def main():
    client = get_client()
    try:
        create_collections(get_database(client))
    finally:
        client.close()


if __name__ == "__main__":
    main()
