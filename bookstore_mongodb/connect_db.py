# connect_db.py - client and collection handles for the bookstore database
import os
from typing import Optional

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

load_dotenv()
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "plp_bookstore")
COLLECTION_NAME = os.getenv("COLLECTION_NAME", "books")
MONGO_TLS = os.getenv("MONGO_TLS", "false").lower() in ("1", "true", "yes")
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))


def get_client(uri: Optional[str] = None) -> MongoClient:
    """Open a client and make sure the server answers before returning it.

    The caller owns the client and is responsible for closing it.
    """
    options = {"serverSelectionTimeoutMS": MONGO_TIMEOUT_MS}
    if MONGO_TLS:
        # Atlas clusters; tlsAllowInvalidCertificates only for local testing
        options.update(tls=True, tlsAllowInvalidCertificates=True)

    client = MongoClient(uri or MONGO_URI, **options)
    try:
        client.admin.command("ping")
    except Exception as e:
        print(f"❌ Failed to connect to MongoDB: {e}")
        client.close()
        raise
    return client


def get_database(client: Optional[MongoClient] = None, name: Optional[str] = None) -> Database:
    if client is None:
        client = get_client()
    db = client[name or DB_NAME]
    print(f"✅ Connected to MongoDB database: {db.name}")
    return db


def get_books_collection(db: Database, name: Optional[str] = None) -> Collection:
    return db[name or COLLECTION_NAME]


if __name__ == "__main__":
    _client = get_client()
    try:
        get_database(_client)
    finally:
        _client.close()
