"""
Unit tests for opportunity_radar.store.
"""

from opportunity_radar.models import OpportunityFilter
from opportunity_radar.store import InMemoryOpportunityStore, OpportunityStore, persist

from conftest import make_opp


class TestInMemoryOpportunityStore:
    def test_satisfies_protocol(self):
        assert isinstance(InMemoryOpportunityStore(), OpportunityStore)

    def test_upsert_reports_creation(self):
        store = InMemoryOpportunityStore()
        assert store.upsert(make_opp()) is True
        assert store.upsert(make_opp(description="newer posting")) is False
        assert len(store) == 1

    def test_later_posting_replaces_in_place(self):
        """Should keep the key's position but store the newest value."""
        store = InMemoryOpportunityStore()
        store.upsert(make_opp("A"))
        store.upsert(make_opp("B"))
        store.upsert(make_opp("A", description="updated"))
        result = store.query()
        assert [o.title for o in result] == ["A", "B"]
        assert result[0].description == "updated"

    def test_get_by_key_is_case_insensitive(self):
        store = InMemoryOpportunityStore()
        store.upsert(make_opp("Research Assistant", "Bio Lab"))
        assert store.get("Research Assistant-Bio Lab") is not None
        assert store.get("missing-key") is None

    def test_query_filters_and_truncates(self):
        store = InMemoryOpportunityStore()
        for i in range(5):
            store.upsert(make_opp(f"Role {i}", is_remote=i % 2 == 0))
        result = store.query(OpportunityFilter(is_remote=True, limit=2))
        assert [o.title for o in result] == ["Role 0", "Role 2"]

    def test_query_pages_with_offset(self):
        store = InMemoryOpportunityStore()
        for i in range(5):
            store.upsert(make_opp(f"Role {i}"))
        result = store.query(OpportunityFilter(offset=2, limit=2))
        assert [o.title for o in result] == ["Role 2", "Role 3"]


def test_persist_counts_new_records():
    store = InMemoryOpportunityStore()
    assert persist(store, [make_opp("A"), make_opp("B")]) == 2
    assert persist(store, [make_opp("A"), make_opp("C")]) == 1
    assert len(store) == 3
