"""
Unit tests for category bucketing.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from csv_automation.batch.organizer import organize
from csv_automation.core.models import Record


@pytest.mark.unit
class TestOrganize:
    """Tests for organize"""

    def test_buckets_in_first_seen_order(self, make_record):
        records = [
            make_record(id="1", category="Ops"),
            make_record(id="2", category="Team"),
            make_record(id="3", category="Ops"),
        ]

        buckets = organize(records)

        assert list(buckets) == ["Ops", "Team"]
        assert [r.id for r in buckets["Ops"]] == ["1", "3"]
        assert [r.id for r in buckets["Team"]] == ["2"]

    def test_categories_are_case_and_whitespace_sensitive(self, make_record):
        records = [
            make_record(id="1", category="Team"),
            make_record(id="2", category="team"),
            make_record(id="3", category="Team "),
        ]

        assert list(organize(records)) == ["Team", "team", "Team "]

    def test_empty_input(self):
        assert organize([]) == {}

    @given(st.lists(
        st.builds(Record, id=st.text(max_size=3), name=st.just("n"),
                  category=st.sampled_from(["A", "B", "a", "C"])),
        max_size=30,
    ))
    def test_property_partition(self, records):
        buckets = organize(records)

        flattened = [r for bucket in buckets.values() for r in bucket]
        assert len(flattened) == len(records)
        assert sorted(map(id, flattened)) == sorted(map(id, records))
        for category, bucket in buckets.items():
            assert all(r.category == category for r in bucket)
            assert bucket == [r for r in records if r.category == category]
