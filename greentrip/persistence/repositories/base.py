"""Generic async Firestore repository for user-scoped collections."""

from __future__ import annotations

from typing import Generic, TypeVar, Type

from greentrip.contracts.common import FirestoreModel
from greentrip.persistence.firestore_client import get_firestore_client

T = TypeVar("T", bound=FirestoreModel)


class BaseRepository(Generic[T]):
    """CRUD for a Firestore subcollection under ``/users/{user_id}/``.

    Serialization relies entirely on the contract's ``to_firestore()``
    and ``from_firestore()`` methods — no extra mapping layer.
    """

    def __init__(self, model_class: Type[T], collection_name: str):
        self._model_class = model_class
        self._collection_name = collection_name

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _collection_ref(self, user_id: str):
        db = get_firestore_client()
        return (
            db.collection("users")
            .document(user_id)
            .collection(self._collection_name)
        )

    def _hydrate(self, doc) -> T:
        data = doc.to_dict()
        data["id"] = doc.id
        return self._model_class.from_firestore(data)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get(self, user_id: str, doc_id: str) -> T | None:
        """Fetch a single document by ID. Returns *None* if missing."""
        doc = await self._collection_ref(user_id).document(doc_id).get()
        if not doc.exists:
            return None
        return self._hydrate(doc)

    async def list_all(self, user_id: str) -> list[T]:
        """Stream every document in the collection."""
        results: list[T] = []
        async for doc in self._collection_ref(user_id).stream():
            results.append(self._hydrate(doc))
        return results

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, user_id: str, entity: T) -> str:
        """Create a document with a Firestore-generated ID.

        Returns the document ID.
        """
        data = entity.to_firestore()
        data.pop("id", None)
        ref = await self._collection_ref(user_id).add(data)
        return ref[1].id  # (write_result, doc_ref) tuple

    async def update(self, user_id: str, doc_id: str, entity: T) -> None:
        """Partial update (merge) of an existing document."""
        data = entity.to_firestore()
        data.pop("id", None)
        await (
            self._collection_ref(user_id)
            .document(doc_id)
            .set(data, merge=True)
        )
