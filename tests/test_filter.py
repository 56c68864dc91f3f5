"""Tests for the list view's filtering and ordering."""

import pendulum
import pytest

from conftest import make_draft
from keepsake.service.filter import filter_entries, sort_by_date


@pytest.fixture
def entries(journal):
    return [
        journal.entries.create(
            make_draft(
                title="Catch up",
                date=pendulum.datetime(2024, 3, 1, tz="UTC"),
                mood="good",
                rating=4,
                tags=["friends"],
                favorite=True,
            )
        ),
        journal.entries.create(
            make_draft(
                title="Dog walk",
                date=pendulum.datetime(2024, 3, 3, tz="UTC"),
                mood="okay",
                rating=4,
                tags=["outdoors"],
            )
        ),
        journal.entries.create(
            make_draft(
                title="Bad day",
                date=pendulum.datetime(2024, 3, 2, tz="UTC"),
                mood="bad",
                tags=["work"],
                favorite=True,
            )
        ),
    ]


class TestFilterEntries:
    def test_no_filters(self, entries):
        assert filter_entries(entries) == entries

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query_means_no_search(self, entries, query):
        assert filter_entries(entries, query=query) == entries

    def test_query(self, entries):
        assert filter_entries(entries, query="dog") == [entries[1]]

    def test_favorites_only(self, entries):
        assert filter_entries(entries, favorites_only=True) == [entries[0], entries[2]]

    def test_mood(self, entries):
        assert filter_entries(entries, mood="bad") == [entries[2]]

    def test_rating(self, entries):
        assert filter_entries(entries, rating=4) == entries[:2]

    def test_tag(self, entries):
        assert filter_entries(entries, tag="outdoors") == [entries[1]]

    def test_filters_combine(self, entries):
        assert filter_entries(entries, favorites_only=True, rating=4) == [entries[0]]
        assert filter_entries(entries, query="day", mood="good") == []


class TestSortByDate:
    def test_newest_first(self, entries):
        titles = [entry["title"] for entry in sort_by_date(entries)]
        assert titles == ["Dog walk", "Bad day", "Catch up"]

    def test_oldest_first(self, entries):
        titles = [entry["title"] for entry in sort_by_date(entries, newest_first=False)]
        assert titles == ["Catch up", "Bad day", "Dog walk"]
