"""
TaskStore - Abstraction layer over the document store holding tasks.

This module provides a platform-agnostic interface for task persistence.
The actual backend is determined by the STORE_BACKEND environment variable.

Usage:
    from apps.core.store import get_store

    store = get_store()
    task_id = store.create({"description": "write report", ...})
    task = store.find_by_id(task_id)

Environment Configuration:
    STORE_BACKEND=mongo   # MongoDB via pymongo (default)
    STORE_BACKEND=memory  # In-process dictionary (development/testing)
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from django.conf import settings

logger = logging.getLogger(__name__)


Document = Dict[str, Any]


class StoreFailure(Exception):
    """
    Raised by a store backend when the underlying driver call fails
    (network, authentication, missing connection, driver errors).
    """


class TaskStoreInterface(ABC):
    """
    Abstract interface for task persistence.

    Every method is a single store operation. Returned documents carry the
    store-assigned identifier under the ``id`` key as a string.

    Implementations:
    - MongoTaskStore: MongoDB collection (production)
    - InMemoryTaskStore: dictionary-backed fake for development/testing
    """

    @abstractmethod
    def create(self, doc: Document) -> str:
        """
        Insert a new document.

        Returns:
            The identifier assigned by the store
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Document]:
        """Return every document in store-native order."""
        pass

    @abstractmethod
    def find_by_id(self, task_id: str) -> Optional[Document]:
        """Return the matching document, or None."""
        pass

    @abstractmethod
    def update_by_id(self, task_id: str, patch: Document) -> Optional[Document]:
        """
        Atomically merge ``patch`` into the matching document.

        Returns:
            The document as it is after the update, or None if nothing matched
        """
        pass

    @abstractmethod
    def delete_by_id(self, task_id: str) -> Optional[Document]:
        """Remove the matching document and return it, or None."""
        pass


def get_store(config: Optional[dict] = None) -> TaskStoreInterface:
    """Build the configured store backend based on the DOCUMENT_STORE setting."""
    config = config or settings.DOCUMENT_STORE
    backend = config.get('BACKEND', 'mongo')

    if backend == 'mongo':
        from apps.core.backends.mongo_backend import MongoTaskStore
        return MongoTaskStore(
            uri=config['URI'],
            db_name=config['NAME'],
            collection_name=config['COLLECTION'],
            timeout_ms=config.get('TIMEOUT_MS', 5000),
        )
    elif backend == 'memory':
        from apps.core.backends.memory_backend import InMemoryTaskStore
        logger.warning("Using in-memory task store; data is lost on restart")
        return InMemoryTaskStore()
    else:
        raise ValueError(f"Unknown STORE_BACKEND: {backend}")
