"""
Tests for KnowledgeBaseService.
"""

import pytest

from kb_search.domain.entities import SearchFilters
from kb_search.domain.exceptions import DocumentNotFoundException, ValidationException
from kb_search.repositories.document_repository import InMemoryDocumentRepository
from kb_search.services.knowledge_base_service import KnowledgeBaseService


class TestSearchArticles:
    """Test search with pagination."""

    def test_browse_all(self, kb_service):
        page = kb_service.search_articles()

        assert page.total == 4
        assert page.total_pages == 1
        assert [match.document.id for match in page.items] == ["1001", "1002", "1003", "1004"]

    def test_pagination(self, kb_service):
        page = kb_service.search_articles(page=2, limit=3)

        assert page.total == 4
        assert page.page == 2
        assert page.total_pages == 2
        assert [match.document.id for match in page.items] == ["1004"]

    def test_page_past_end(self, kb_service):
        page = kb_service.search_articles(page=5, limit=3)

        assert page.items == []
        assert page.total == 4

    def test_empty_result_has_no_pages(self, kb_service):
        page = kb_service.search_articles("абракадабра")

        assert page.total == 0
        assert page.total_pages == 0

    def test_text_search(self, kb_service):
        page = kb_service.search_articles("ипу")

        assert page.items[0].document.id == "1002"
        assert page.items[0].relevance > 0

    def test_filter_search(self, kb_service):
        page = kb_service.search_articles(filters=SearchFilters(status="Новое"))

        assert [match.document.id for match in page.items] == ["1002", "1004"]

    @pytest.mark.parametrize("page,limit", [(0, 20), (1, 0), (-1, 5)])
    def test_invalid_paging(self, kb_service, page, limit):
        with pytest.raises(ValidationException):
            kb_service.search_articles(page=page, limit=limit)


class TestGetArticle:
    """Test article detail."""

    def test_counts_view_and_finds_related(self, kb_service):
        document, similar = kb_service.get_article("1001")

        assert document.views == 13
        assert kb_service.repository.get_by_id("1001").views == 13
        assert [match.document.id for match in similar] == ["1003"]
        assert similar[0].similarity == 2

    def test_unknown_article(self, kb_service):
        with pytest.raises(DocumentNotFoundException):
            kb_service.get_article("missing")

        assert sum(document.views for document in kb_service.repository.list_all()) == 79


class TestSuggestionsAndCategories:
    def test_suggestions(self, kb_service):
        assert kb_service.suggestions("ипу") == ["Замена счётчика воды"]
        assert kb_service.suggestions("и") == []

    def test_categories(self, kb_service):
        counts = {category.name: category.count for category in kb_service.categories()}

        assert counts["Ремонт"] == 2
        assert counts["Лифт"] == 1


class TestStats:
    """Test collection statistics."""

    @pytest.fixture
    def make_service(self, engine, similarity_finder):
        def factory(documents):
            repository = InMemoryDocumentRepository(documents)
            return KnowledgeBaseService(repository, engine, similarity_finder)

        return factory

    def test_sample_collection(self, kb_service):
        stats = kb_service.stats()

        assert stats.total_articles == 4
        assert stats.total_categories == 6
        assert stats.total_views == 79
        assert [document.id for document in stats.top_viewed] == ["1002", "1001", "1003", "1004"]
        assert stats.executors == ("ГБУ Жилищник района Арбат", "ООО УК Комфорт")
        assert stats.addresses == ("д. 5", "д. 7", "д. 101", "д. 103")

    def test_top_viewed_limited_to_five(self, make_service, make_document):
        views = [5, 40, 7, 40, 1, 90, 12]
        service = make_service(
            [make_document(f"a{index}", views=count) for index, count in enumerate(views)]
        )

        top_viewed = service.stats().top_viewed

        # equally viewed articles keep storage order
        assert [document.id for document in top_viewed] == ["a5", "a1", "a3", "a6", "a2"]

    def test_house_numbers_from_addresses(self, make_service, make_document):
        service = make_service(
            [
                make_document("1", address="ул. Ленина, д. 5, кв. 3"),
                make_document("2", address="ул. Ленина, д.5"),
                make_document("3", address="пр. Мира, д.  12к1"),
                make_document("4", address="пр. Мира"),
                make_document("5", address="ул. Ленина, д. 5"),
                make_document("6"),
            ]
        )

        assert service.stats().addresses == ("д. 5", "д.5", "д.  12")

    def test_executors_distinct_and_non_empty(self, make_service, make_document):
        service = make_service(
            [
                make_document("1", executor="УК Комфорт"),
                make_document("2", executor=""),
                make_document("3"),
                make_document("4", executor="Жилищник"),
                make_document("5", executor="УК Комфорт"),
            ]
        )

        assert service.stats().executors == ("УК Комфорт", "Жилищник")

    def test_categories_counted_from_tags(self, make_service, make_document):
        service = make_service(
            [
                make_document("1", tags=["Лифт", "Ремонт"]),
                make_document("2", tags=["Ремонт", "Ремонт"]),
                make_document("3"),
            ]
        )

        assert service.stats().total_categories == 2

    def test_empty_collection(self, make_service):
        stats = make_service([]).stats()

        assert stats.total_articles == 0
        assert stats.total_views == 0
        assert stats.top_viewed == ()
        assert stats.addresses == ()
