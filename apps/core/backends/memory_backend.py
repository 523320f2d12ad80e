"""
In-Memory Store Backend - Dictionary storage for development and testing.

No MongoDB instance required. Identifiers are generated as ObjectId
strings so they pass the same validation as real store keys.

Usage:
    Set STORE_BACKEND=memory in your .env file.
"""

import copy
import threading
from typing import Dict, List, Optional

from bson import ObjectId

from apps.core.store import Document, TaskStoreInterface


class InMemoryTaskStore(TaskStoreInterface):
    """
    Keep tasks in a dict, in insertion order.

    Documents are copied on the way in and out so callers never share
    state with the store. A lock makes each operation atomic, matching
    the single-document guarantees of the real store.
    """

    def __init__(self):
        self._docs: Dict[str, Document] = {}
        self._lock = threading.Lock()

    def create(self, doc: Document) -> str:
        task_id = str(ObjectId())
        with self._lock:
            self._docs[task_id] = copy.deepcopy(doc)
        return task_id

    def find_all(self) -> List[Document]:
        with self._lock:
            return [self._export(task_id, doc) for task_id, doc in self._docs.items()]

    def find_by_id(self, task_id: str) -> Optional[Document]:
        with self._lock:
            doc = self._docs.get(task_id)
            return self._export(task_id, doc) if doc is not None else None

    def update_by_id(self, task_id: str, patch: Document) -> Optional[Document]:
        with self._lock:
            doc = self._docs.get(task_id)
            if doc is None:
                return None
            doc.update(copy.deepcopy(patch))
            return self._export(task_id, doc)

    def delete_by_id(self, task_id: str) -> Optional[Document]:
        with self._lock:
            doc = self._docs.pop(task_id, None)
            return self._export(task_id, doc) if doc is not None else None

    @staticmethod
    def _export(task_id: str, doc: Document) -> Document:
        return {'id': task_id, **copy.deepcopy(doc)}
