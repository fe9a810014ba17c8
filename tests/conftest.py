"""
Test configuration and fixtures
"""

from pathlib import Path

import pytest

import kb_search
from kb_search.domain.entities import Document
from kb_search.repositories.document_repository import InMemoryDocumentRepository
from kb_search.search import FuzzyMatcher, QueryEngine, RelevanceScorer, SimilarityFinder, SynonymTable
from kb_search.services.knowledge_base_service import KnowledgeBaseService

SAMPLE_DATA_FILE = Path(kb_search.__file__).parent / "data" / "sample_articles.json"


@pytest.fixture
def make_document():
    """Factory for documents with only the fields a test cares about."""

    def factory(id: str = "1", **fields) -> Document:
        if "tags" in fields:
            fields["tags"] = tuple(fields["tags"])
        return Document(id=id, **fields)

    return factory


@pytest.fixture
def documents(make_document):
    """Small collection covering every filterable field."""
    return [
        make_document(
            "d1",
            topic="Протечка крыши",
            address="ул. Ленина, д. 5",
            executor="Жилищник Арбат",
            status="Исполнено",
            tags=["Кровля", "Ремонт"],
            date="2024-03-15",
        ),
        make_document(
            "d2",
            topic="Замена счётчика воды",
            address="ул. Ленина, д. 7",
            executor="УК Комфорт",
            status="Новое",
            tags=["Приборы учета"],
            date="2024-04-02",
        ),
        make_document(
            "d3",
            topic="Не работает лифт",
            address="пр. Мира, д. 101",
            executor="Жилищник Арбат",
            status="Исполнено",
            tags=["Лифт", "Ремонт"],
            date="2024-05-20",
        ),
        make_document(
            "d4",
            topic="Уборка подъезда",
            address="пр. Мира, д. 103",
            executor="УК Комфорт",
            status="Новое",
            tags=["Уборка"],
        ),
    ]


@pytest.fixture
def synonym_table():
    return SynonymTable.default()


@pytest.fixture
def fuzzy_matcher():
    return FuzzyMatcher()


@pytest.fixture
def scorer(fuzzy_matcher):
    return RelevanceScorer(fuzzy_matcher)


@pytest.fixture
def engine(synonym_table, scorer):
    return QueryEngine(synonym_table, scorer)


@pytest.fixture
def similarity_finder(fuzzy_matcher):
    return SimilarityFinder(fuzzy_matcher)


@pytest.fixture
def sample_repository():
    """Repository loaded from the bundled sample export."""
    return InMemoryDocumentRepository.from_json_file(SAMPLE_DATA_FILE)


@pytest.fixture
def kb_service(sample_repository, engine, similarity_finder):
    return KnowledgeBaseService(sample_repository, engine, similarity_finder)
