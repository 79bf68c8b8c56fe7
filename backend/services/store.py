"""Record stores for resumes and tracked applications.

A durable MongoDB collection is used when MONGODB_URI is set and reachable;
otherwise records live in a process-local store that does not survive restart.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel
from pymongo import DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from config import settings
from models.schemas.application import Application
from models.schemas.resume import ResumeRecord
from services.errors import AlreadySaved

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class Store(ABC, Generic[M]):
    """Keyed record store. ``list()`` returns newest records first."""

    backend: str = ""

    @abstractmethod
    def get(self, record_id: str) -> M | None: ...

    @abstractmethod
    def put(self, record_id: str, record: M) -> None: ...

    @abstractmethod
    def delete(self, record_id: str) -> bool: ...

    @abstractmethod
    def list(self, limit: int | None = None) -> list[M]: ...


class InMemoryStore(Store[M]):
    backend = "memory"

    def __init__(self) -> None:
        self._records: dict[str, M] = {}
        self._lock = threading.Lock()

    def get(self, record_id: str) -> M | None:
        with self._lock:
            return self._records.get(record_id)

    def put(self, record_id: str, record: M) -> None:
        with self._lock:
            self._records[record_id] = record

    def delete(self, record_id: str) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def list(self, limit: int | None = None) -> list[M]:
        with self._lock:
            records = list(reversed(self._records.values()))
        return records[:limit] if limit is not None else records

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


class MongoStore(Store[M]):
    """Documents keyed by ``_id``; ``sort_field`` orders ``list()``.

    Each of ``unique_fields`` gets a unique index; a put that would duplicate
    one raises AlreadySaved.
    """

    backend = "mongodb"

    def __init__(
        self,
        collection: Collection,
        model: type[M],
        sort_field: str,
        unique_fields: tuple[str, ...] = (),
    ) -> None:
        self._collection = collection
        self._model = model
        self._sort_field = sort_field
        for field in unique_fields:
            collection.create_index(field, unique=True)

    def _load(self, doc: dict) -> M:
        doc = dict(doc)
        doc["id"] = str(doc.pop("_id"))
        return self._model.model_validate(doc)

    def get(self, record_id: str) -> M | None:
        doc = self._collection.find_one({"_id": record_id})
        return self._load(doc) if doc else None

    def put(self, record_id: str, record: M) -> None:
        doc = record.model_dump(exclude={"id"})
        try:
            self._collection.replace_one({"_id": record_id}, doc, upsert=True)
        except DuplicateKeyError as e:
            raise AlreadySaved("Record already exists") from e

    def delete(self, record_id: str) -> bool:
        return self._collection.delete_one({"_id": record_id}).deleted_count > 0

    def list(self, limit: int | None = None) -> list[M]:
        cursor = self._collection.find().sort(self._sort_field, DESCENDING)
        if limit is not None:
            cursor = cursor.limit(limit)
        return [self._load(doc) for doc in cursor]


_mongo_client: MongoClient | None = None
_stores: dict[str, Store] = {}


def _mongo_database():
    """Connect once; None when unconfigured or unreachable."""
    global _mongo_client
    if not settings.mongodb_uri:
        return None
    if _mongo_client is None:
        try:
            client = MongoClient(settings.mongodb_uri, serverSelectionTimeoutMS=3000)
            client.admin.command("ping")
        except PyMongoError as e:
            logger.warning("MongoDB connection failed: %s", e)
            logger.warning("Using process-local storage (data won't persist)")
            return None
        logger.info("Connected to MongoDB")
        _mongo_client = client
    return _mongo_client[settings.mongodb_db]


def _get_store(
    name: str, model: type[M], sort_field: str, unique_fields: tuple[str, ...] = ()
) -> Store[M]:
    if name not in _stores:
        db = _mongo_database()
        if db is not None:
            _stores[name] = MongoStore(db[name], model, sort_field, unique_fields)
        else:
            _stores[name] = InMemoryStore()
    return _stores[name]


def get_resume_store() -> Store[ResumeRecord]:
    return _get_store("resumes", ResumeRecord, "uploaded_at")


def get_application_store() -> Store[Application]:
    return _get_store("applications", Application, "created_at", ("external_id",))


def reset() -> None:
    """Forget all stores. Useful for testing."""
    _stores.clear()
