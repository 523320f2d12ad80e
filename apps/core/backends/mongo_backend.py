"""
MongoDB Store Backend - Task persistence via pymongo.

The client connects once when the store is constructed. A connection
failure is logged but not raised: the store is still returned and each
operation fails individually with StoreFailure.

Environment Variables:
    MONGODB_URI: Connection string (default: mongodb://localhost:27017)
    MONGODB_DB: Database name (default: tasks_db)
    MONGODB_COLLECTION: Collection name (default: tasks)
    MONGODB_TIMEOUT_MS: Server selection timeout (default: 5000)
"""

import logging
from typing import List, Optional

from bson import ObjectId
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from apps.core.store import Document, StoreFailure, TaskStoreInterface
from config.database import redact_uri

logger = logging.getLogger(__name__)


def _to_document(raw: Optional[dict]) -> Optional[Document]:
    """Replace Mongo's ObjectId ``_id`` with a string ``id``."""
    if raw is None:
        return None
    doc = {k: v for k, v in raw.items() if k != '_id'}
    return {'id': str(raw['_id']), **doc}


class MongoTaskStore(TaskStoreInterface):
    """
    Store tasks in a MongoDB collection.

    Single-document operations rely on MongoDB's own atomicity;
    connection pooling and timeouts are handled by the pymongo client.
    """

    def __init__(
        self,
        uri: str,
        db_name: str,
        collection_name: str,
        timeout_ms: int = 5000,
        client: Optional[MongoClient] = None,
    ):
        self._collection: Optional[Collection] = None

        try:
            self._client = client or MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
            self._collection = self._client[db_name][collection_name]
            self._client.admin.command('ping')
            logger.info(f"[MONGO] Connected to {redact_uri(uri)} ({db_name}.{collection_name})")
        except PyMongoError as e:
            logger.error(f"[MONGO] Failed to connect to {redact_uri(uri)}: {e}")

    @property
    def collection(self) -> Collection:
        if self._collection is None:
            raise StoreFailure("Document store is not connected")
        return self._collection

    def create(self, doc: Document) -> str:
        try:
            # insert_one adds _id to the dict it is given
            result = self.collection.insert_one(dict(doc))
        except PyMongoError as e:
            raise StoreFailure(str(e)) from e
        return str(result.inserted_id)

    def find_all(self) -> List[Document]:
        try:
            return [_to_document(raw) for raw in self.collection.find({})]
        except PyMongoError as e:
            raise StoreFailure(str(e)) from e

    def find_by_id(self, task_id: str) -> Optional[Document]:
        try:
            return _to_document(self.collection.find_one({'_id': ObjectId(task_id)}))
        except PyMongoError as e:
            raise StoreFailure(str(e)) from e

    def update_by_id(self, task_id: str, patch: Document) -> Optional[Document]:
        try:
            raw = self.collection.find_one_and_update(
                {'_id': ObjectId(task_id)},
                {'$set': patch},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise StoreFailure(str(e)) from e
        return _to_document(raw)

    def delete_by_id(self, task_id: str) -> Optional[Document]:
        try:
            raw = self.collection.find_one_and_delete({'_id': ObjectId(task_id)})
        except PyMongoError as e:
            raise StoreFailure(str(e)) from e
        return _to_document(raw)
