"""
Tests for domain entities and exceptions.
"""

from dataclasses import FrozenInstanceError

import pytest

from kb_search.domain.entities import Document, SearchFilters, SearchMatch, SimilarMatch
from kb_search.domain.exceptions import (
    DataLoadException,
    DocumentNotFoundException,
    KnowledgeBaseException,
    ValidationException,
)


class TestDocument:
    """Test the Document entity."""

    def test_frozen(self, make_document):
        document = make_document(topic="Лифт")

        with pytest.raises(FrozenInstanceError):
            document.topic = "Крыша"

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError):
            Document(id="")

    def test_negative_views_rejected(self):
        with pytest.raises(ValueError):
            Document(id="1", views=-1)

    def test_with_views_returns_copy(self, make_document):
        document = make_document(views=3)

        assert document.with_views(4).views == 4
        assert document.views == 3

    def test_round_trip_dict(self):
        data = {"id": "1", "topic": "Лифт", "tags": ["Лифт", "Лифт"], "views": 2}

        document = Document.from_dict(data)

        assert document.tags == ("Лифт", "Лифт")
        assert document.tag_set == frozenset({"Лифт"})
        assert document.to_dict()["tags"] == ["Лифт", "Лифт"]
        assert document.to_dict()["views"] == 2

    @pytest.mark.parametrize("tags", ["Лифт", {"name": "Лифт"}, 5])
    def test_tags_must_be_a_list(self, tags):
        with pytest.raises(ValueError):
            Document.from_dict({"id": "1", "tags": tags})

    def test_missing_tags_default_to_empty(self):
        assert Document.from_dict({"id": "1", "tags": None}).tags == ()


class TestResultWrappers:
    """Test SearchMatch and SimilarMatch."""

    def test_relevance_added_to_dict(self, make_document):
        result = SearchMatch(make_document(topic="Лифт"), 15.0).to_dict()

        assert result["relevance"] == 15.0
        assert result["topic"] == "Лифт"

    def test_unscored_match_has_no_relevance(self, make_document):
        assert "relevance" not in SearchMatch(make_document()).to_dict()

    def test_similarity_added_to_dict(self, make_document):
        assert SimilarMatch(make_document(), 2.5).to_dict()["similarity"] == 2.5

    def test_document_dict_has_no_scores(self, make_document):
        document = make_document()
        SearchMatch(document, 3.0).to_dict()

        assert "relevance" not in document.to_dict()


class TestSearchFilters:
    def test_active_filters(self):
        filters = SearchFilters(address="Ленина", date_to="2024-01-01", category="")

        assert filters.active() == {"address": "Ленина", "date_to": "2024-01-01"}
        assert not filters.is_empty()
        assert SearchFilters().is_empty()


class TestExceptions:
    """Test domain exception hierarchy."""

    def test_not_found(self):
        exc = DocumentNotFoundException("42")

        assert isinstance(exc, KnowledgeBaseException)
        assert exc.message == "Article not found: 42"
        assert exc.details == {"id": "42"}

    def test_validation(self):
        exc = ValidationException("page", 0, "Page must be at least 1")

        assert exc.details == {"field": "page", "value": "0", "reason": "Page must be at least 1"}

    def test_data_load(self):
        exc = DataLoadException("data.json", "not found")

        assert str(exc) == "Failed to load data from 'data.json': not found"
