"""
Unit tests for span reconciliation.
"""
from src.entity_extraction.pipeline import extract_all_entities
from src.entity_extraction.reconciler import reconcile
from src.models.entity import EntitySpan, EntityType


class TestReconcile:
    def test_empty_input(self):
        assert reconcile([]) == []

    def test_exact_duplicate_first_wins(self):
        candidates = [
            EntitySpan("New York", EntityType.LOCATION, 0, 8),
            EntitySpan("New York", EntityType.PERSON, 0, 8),
        ]
        merged = reconcile(candidates)
        assert merged == [EntitySpan("New York", EntityType.LOCATION, 0, 8)]

    def test_overlapping_spans_retained(self):
        candidates = [
            EntitySpan("Downtown", EntityType.LOCATION, 10, 18),
            EntitySpan("Downtown Grill", EntityType.PERSON, 10, 24),
        ]
        merged = reconcile(candidates)
        assert len(merged) == 2

    def test_nested_span_retained(self):
        candidates = [
            EntitySpan("Paris", EntityType.LOCATION, 6, 11),
            EntitySpan("Le Paris Bistro", EntityType.ORGANIZATION, 3, 18),
        ]
        merged = reconcile(candidates)
        assert [e.type for e in merged] == [EntityType.ORGANIZATION, EntityType.LOCATION]

    def test_organization_dropped_on_shared_start(self):
        candidates = [
            EntitySpan("Acme Widget", EntityType.PERSON, 10, 21),
            EntitySpan("Acme Widget Corporation", EntityType.ORGANIZATION, 10, 33),
        ]
        merged = reconcile(candidates)
        assert merged == [EntitySpan("Acme Widget", EntityType.PERSON, 10, 21)]

    def test_product_dropped_on_shared_start(self):
        candidates = [
            EntitySpan("Pizza Hut", EntityType.PERSON, 0, 9),
            EntitySpan("Pizza", EntityType.PRODUCT, 0, 5),
        ]
        merged = reconcile(candidates)
        assert merged == [EntitySpan("Pizza Hut", EntityType.PERSON, 0, 9)]

    def test_product_dropped_after_organization(self):
        candidates = [
            EntitySpan("sushi bar", EntityType.ORGANIZATION, 1, 10),
            EntitySpan("sushi", EntityType.PRODUCT, 1, 6),
        ]
        merged = reconcile(candidates)
        assert [e.type for e in merged] == [EntityType.ORGANIZATION]

    def test_other_types_may_share_start(self):
        candidates = [
            EntitySpan("Downtown", EntityType.LOCATION, 0, 8),
            EntitySpan("Downtown Grill", EntityType.PERSON, 0, 14),
        ]
        assert len(reconcile(candidates)) == 2

    def test_organization_kept_without_shared_start(self):
        candidates = [
            EntitySpan("Paris", EntityType.LOCATION, 0, 5),
            EntitySpan("blue note", EntityType.ORGANIZATION, 10, 19),
        ]
        assert len(reconcile(candidates)) == 2

    def test_sorted_by_start_then_end(self):
        candidates = [
            EntitySpan("B", EntityType.DATE, 10, 15),
            EntitySpan("A", EntityType.LOCATION, 0, 5),
            EntitySpan("AB", EntityType.PERSON, 0, 8),
        ]
        merged = reconcile(candidates)
        assert [(e.start, e.end) for e in merged] == [(0, 5), (0, 8), (10, 15)]

    def test_does_not_mutate_input(self):
        candidates = [
            EntitySpan("B", EntityType.DATE, 10, 15),
            EntitySpan("A", EntityType.LOCATION, 0, 5),
        ]
        snapshot = list(candidates)
        reconcile(candidates)
        assert candidates == snapshot


class TestReconcileInPipeline:
    def test_pizza_hut_keeps_person(self):
        entities = extract_all_entities("Pizza Hut delivery")
        assert [(e.text, e.type) for e in entities] == [("Pizza Hut", EntityType.PERSON)]

    def test_three_word_organization_suppressed_by_person(self):
        entities = extract_all_entities("I work at Acme Widget Corporation")
        assert [(e.text, e.type) for e in entities] == [("Acme Widget", EntityType.PERSON)]

    def test_downtown_overlap_kept(self):
        entities = extract_all_entities("Dinner at Downtown Grill")
        assert [(e.text, e.type, e.start, e.end) for e in entities] == [
            ("Downtown", EntityType.LOCATION, 10, 18),
            ("Downtown Grill", EntityType.PERSON, 10, 24),
        ]

    def test_quoted_title_case_phrase_resolves_to_person(self):
        text = 'Tickets for "Blue Note" please'
        entities = extract_all_entities(text)
        assert [(e.text, e.type) for e in entities] == [("Blue Note", EntityType.PERSON)]
