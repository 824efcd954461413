"""
Base repository class for store access.

Provides a common abstraction layer for all repositories, encapsulating
document store access and providing shared utilities for data operations.
"""

from typing import TypeVar, Generic

from .database import JsonDocumentStore


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for store operations:
    - Document store access via self._db
    - Generic type parameter for model type hints

    Subclasses register the collections they own in __init__ and expose
    domain-specific lookups and writes. Writes must happen inside
    self._db.transaction(), which the service layer opens.

    Example:
        class NoteRepository(BaseRepository[FieldNote]):
            def __init__(self, db: JsonDocumentStore) -> None:
                super().__init__(db)
                self._notes = db.collection("fieldNotes", FieldNote)

            def get_by_id(self, note_id: str) -> Optional[FieldNote]:
                return self._notes.get(note_id)
    """

    def __init__(self, db: JsonDocumentStore) -> None:
        """
        Initialize the repository with a document store.

        Args:
            db: Store instance holding every collection.
        """
        self._db = db
