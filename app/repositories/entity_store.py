"""
Document store access for members and projects.

``EntityStore`` is the interface the services depend on. Production uses
``FirestoreEntityStore``; ``InMemoryEntityStore`` backs local development
and the test suite. Every returned document is a plain dict carrying its
``id`` next to the stored fields.
"""

from __future__ import annotations

import copy
import uuid
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional, Protocol

from firebase_admin import firestore

from app.core.firebase import get_db


class EntityStore(Protocol):
    def find_by_id(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        ...

    def find_one(self, collection: str, field: str, value: Any) -> Optional[Dict[str, Any]]:
        ...

    def find_by_ids(self, collection: str, ids: Iterable[str]) -> List[Dict[str, Any]]:
        ...

    def list_all(
        self, collection: str, order_by: str = "createdAt", descending: bool = True
    ) -> List[Dict[str, Any]]:
        ...

    def insert(self, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
        ...

    def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        ...

    def delete(self, collection: str, doc_id: str) -> None:
        ...


def _snap_to_dict(snap) -> Dict[str, Any]:
    data = snap.to_dict() or {}
    return {"id": snap.id, **data}


class FirestoreEntityStore:
    def __init__(self, client=None):
        # resolved lazily, importing this module must not need credentials
        self._client = client

    @property
    def db(self):
        if self._client is None:
            self._client = get_db()
        return self._client

    def find_by_id(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        snap = self.db.collection(collection).document(doc_id).get()
        if not snap.exists:
            return None
        return _snap_to_dict(snap)

    def find_one(self, collection: str, field: str, value: Any) -> Optional[Dict[str, Any]]:
        q = self.db.collection(collection).where(field, "==", value).limit(1)
        docs = list(q.stream())
        return _snap_to_dict(docs[0]) if docs else None

    def find_by_ids(self, collection: str, ids: Iterable[str]) -> List[Dict[str, Any]]:
        refs = [self.db.collection(collection).document(i) for i in ids]
        if not refs:
            return []
        return [_snap_to_dict(s) for s in self.db.get_all(refs) if s.exists]

    def list_all(
        self, collection: str, order_by: str = "createdAt", descending: bool = True
    ) -> List[Dict[str, Any]]:
        direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
        q = self.db.collection(collection).order_by(order_by, direction=direction)
        return [_snap_to_dict(d) for d in q.stream()]

    def insert(self, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
        ref = self.db.collection(collection).document()
        ref.set(data, merge=False)
        return {"id": ref.id, **data}

    def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        ref = self.db.collection(collection).document(doc_id)
        ref.update(data)
        return _snap_to_dict(ref.get())

    def delete(self, collection: str, doc_id: str) -> None:
        self.db.collection(collection).document(doc_id).delete()


class InMemoryEntityStore:
    """Dict-backed store for development and tests.

    ``calls`` counts every operation by name.
    """

    def __init__(self):
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.calls: Counter = Counter()

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())

    def _docs(self, collection: str) -> Dict[str, Dict[str, Any]]:
        return self.collections.setdefault(collection, {})

    @staticmethod
    def _out(doc_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": doc_id, **copy.deepcopy(data)}

    def find_by_id(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        self.calls["find_by_id"] += 1
        data = self._docs(collection).get(doc_id)
        return self._out(doc_id, data) if data is not None else None

    def find_one(self, collection: str, field: str, value: Any) -> Optional[Dict[str, Any]]:
        self.calls["find_one"] += 1
        for doc_id, data in self._docs(collection).items():
            if data.get(field) == value:
                return self._out(doc_id, data)
        return None

    def find_by_ids(self, collection: str, ids: Iterable[str]) -> List[Dict[str, Any]]:
        self.calls["find_by_ids"] += 1
        docs = self._docs(collection)
        return [self._out(i, docs[i]) for i in ids if i in docs]

    def list_all(
        self, collection: str, order_by: str = "createdAt", descending: bool = True
    ) -> List[Dict[str, Any]]:
        self.calls["list_all"] += 1
        items = [self._out(i, d) for i, d in self._docs(collection).items()]
        return sorted(items, key=lambda d: d.get(order_by), reverse=descending)

    def insert(self, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
        self.calls["insert"] += 1
        doc_id = uuid.uuid4().hex
        self._docs(collection)[doc_id] = copy.deepcopy(data)
        return self._out(doc_id, data)

    def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        self.calls["update"] += 1
        docs = self._docs(collection)
        if doc_id not in docs:
            raise KeyError(f"{collection}/{doc_id} does not exist")
        docs[doc_id].update(copy.deepcopy(data))
        return self._out(doc_id, docs[doc_id])

    def delete(self, collection: str, doc_id: str) -> None:
        self.calls["delete"] += 1
        self._docs(collection).pop(doc_id, None)
