"""
Document repository interface and in-memory implementation.

Defines the document-store contract used by the search service and an
in-memory store seeded from a JSON export.
"""

import json
import logging
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..domain.entities import Category, Document
from ..domain.exceptions import DataLoadException, DocumentNotFoundException

logger = logging.getLogger(__name__)


class IDocumentRepository(ABC):
    """
    Abstract repository interface for knowledge base articles.

    Search code only reads through list_all/get_by_id; the view counter is
    the single mutation exposed here.
    """

    @abstractmethod
    def list_all(self) -> Tuple[Document, ...]:
        """
        Get every article in storage order.

        Returns:
            Immutable snapshot of the collection
        """
        pass

    @abstractmethod
    def get_by_id(self, document_id: str) -> Optional[Document]:
        """
        Find article by id.

        Args:
            document_id: Article identifier

        Returns:
            Article if found, None otherwise
        """
        pass

    @abstractmethod
    def record_view(self, document_id: str) -> Document:
        """
        Increment the view counter of an article.

        Args:
            document_id: Article identifier

        Returns:
            The updated article

        Raises:
            DocumentNotFoundException: If the id is unknown
        """
        pass

    @abstractmethod
    def list_categories(self) -> List[Category]:
        """
        Get tag statistics.

        Returns:
            One category per distinct tag with its article count
        """
        pass


class InMemoryDocumentRepository(IDocumentRepository):
    """
    Thread-safe in-memory article store.

    Readers get an immutable tuple snapshot. Writers build a new tuple under
    a lock and swap it in, so a search running on an old snapshot never sees
    a half-applied update.
    """

    def __init__(self, documents: Iterable[Document] = ()):
        """
        Initialize repository.

        Args:
            documents: Initial articles in storage order
        """
        self._lock = threading.Lock()
        self._state: Tuple[Tuple[Document, ...], Dict[str, int]] = ((), {})
        self._publish(tuple(documents))

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "InMemoryDocumentRepository":
        """
        Load articles from a JSON export.

        Expected shape: {"articles": [...], "categories": [...]}. The stored
        categories are ignored and recomputed from tags.

        Raises:
            DataLoadException: If the file is missing or malformed
        """
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as handle:
                payload = json.load(handle)
        except (OSError, json.JSONDecodeError) as e:
            raise DataLoadException(str(path), str(e)) from e

        if not isinstance(payload, dict) or not isinstance(payload.get("articles"), list):
            raise DataLoadException(str(path), "expected an object with an 'articles' list")

        try:
            repository = cls(Document.from_dict(item) for item in payload["articles"])
        except (TypeError, ValueError, AttributeError) as e:
            raise DataLoadException(str(path), f"invalid article: {e}") from e

        logger.info("Loaded %d articles from %s", len(repository), path)
        return repository

    def _publish(self, documents: Tuple[Document, ...]) -> None:
        positions = {document.id: index for index, document in enumerate(documents)}
        if len(positions) != len(documents):
            raise ValueError("Duplicate article ids in collection")
        self._state = (documents, positions)

    def list_all(self) -> Tuple[Document, ...]:
        return self._state[0]

    def get_by_id(self, document_id: str) -> Optional[Document]:
        documents, positions = self._state
        index = positions.get(document_id)
        if index is None:
            return None
        return documents[index]

    def record_view(self, document_id: str) -> Document:
        with self._lock:
            documents, positions = self._state
            index = positions.get(document_id)
            if index is None:
                raise DocumentNotFoundException(document_id)

            current = documents[index]
            updated = current.with_views(current.views + 1)
            documents = list(documents)
            documents[index] = updated
            self._publish(tuple(documents))

        logger.debug("Article %s viewed (%d views)", document_id, updated.views)
        return updated

    def list_categories(self) -> List[Category]:
        counts: Dict[str, int] = {}
        for document in self._state[0]:
            for tag in dict.fromkeys(document.tags):
                counts[tag] = counts.get(tag, 0) + 1

        return [
            Category(id=str(index), name=name, count=count)
            for index, (name, count) in enumerate(counts.items(), start=1)
        ]

    def __len__(self) -> int:
        return len(self._state[0])
