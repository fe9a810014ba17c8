"""
Tests for related-article discovery.
"""


def ids(matches):
    return [match.document.id for match in matches]


class TestFindSimilar:
    """Test SimilarityFinder.find_similar()."""

    def test_untagged_source_has_no_related(self, similarity_finder, documents, make_document):
        source = make_document("src", topic="Протечка крыши")

        assert similarity_finder.find_similar(source, documents) == []

    def test_two_shared_tags(self, similarity_finder, make_document):
        source = make_document("src", topic="Протечка крыши", tags=["Кровля", "Ремонт"])
        other = make_document("o", topic="Не работает лифт", tags=["Ремонт", "Кровля", "Лифт"])

        results = similarity_finder.find_similar(source, [source, other])

        assert ids(results) == ["o"]
        assert results[0].similarity == 4

    def test_same_topic_ranks_below_shared_tag(self, similarity_finder, make_document):
        source = make_document("src", topic="Протечка крыши", tags=["Кровля"])
        same_topic = make_document("topic", topic="Протечка крыши", tags=["Уборка"])
        shared_tag = make_document("tag", topic="Не работает лифт", tags=["Кровля"])

        results = similarity_finder.find_similar(source, [same_topic, shared_tag])

        assert ids(results) == ["tag", "topic"]
        assert results[0].similarity == 2
        assert results[1].similarity == 1

    def test_self_excluded(self, similarity_finder, documents):
        results = similarity_finder.find_similar(documents[0], documents)

        assert "d1" not in ids(results)
        assert ids(results) == ["d3"]

    def test_duplicate_tags_counted_once(self, similarity_finder, make_document):
        source = make_document("src", topic="Протечка крыши", tags=["Кровля"])
        other = make_document("o", topic="Не работает лифт", tags=["Кровля", "Кровля"])

        assert similarity_finder.find_similar(source, [other])[0].similarity == 2

    def test_unrelated_excluded(self, similarity_finder, make_document):
        source = make_document("src", topic="Протечка крыши", tags=["Кровля"])
        other = make_document("o", topic="Не работает лифт", tags=["Лифт"])

        assert similarity_finder.find_similar(source, [other]) == []

    def test_limit(self, similarity_finder, make_document):
        source = make_document("src", topic="Протечка крыши", tags=["Кровля"])
        others = [make_document(str(i), topic="Лифт", tags=["Кровля"]) for i in range(8)]

        assert len(similarity_finder.find_similar(source, others)) == 5
        assert ids(similarity_finder.find_similar(source, others, limit=2)) == ["0", "1"]
