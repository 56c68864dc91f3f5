"""Tests for share links and their resolution."""

import pendulum
import pytest

from conftest import make_draft
from keepsake.repository.share_link import SHARE_CODE_ALPHABET, generate_share_code
from keepsake.service.entry import delete_entry
from keepsake.service.share import is_expired, resolve, share_url


@pytest.fixture
def entry(journal):
    return journal.entries.create(make_draft())


class TestShareCode:
    def test_code_shape(self):
        code = generate_share_code()
        assert len(code) == 6
        assert set(code) <= set(SHARE_CODE_ALPHABET)

    def test_share_url(self):
        assert share_url("https://example.com/", "ABC123") == (
            "https://example.com/share/ABC123"
        )
        assert share_url("http://localhost:3000", "ABC123") == (
            "http://localhost:3000/share/ABC123"
        )


class TestShareLinks:
    def test_create_without_expiry(self, journal, entry):
        link = journal.share_links.create(entry["id"])
        assert link["entry_id"] == entry["id"]
        assert link["expires_at"] is None
        assert journal.share_links.list_all() == [link]
        assert journal.share_links.get_by_code(link["code"]) == link

    def test_create_with_ttl(self, journal, entry):
        link = journal.share_links.create(entry["id"], pendulum.duration(hours=1))
        assert link["expires_at"] == link["created_at"].add(hours=1)

    def test_codes_are_unique(self, journal, entry):
        codes = {journal.share_links.create(entry["id"])["code"] for _ in range(20)}
        assert len(codes) == 20

    def test_list_by_entry_includes_expired(self, journal, entry):
        other = journal.entries.create(make_draft(title="other"))
        expired = journal.share_links.create(entry["id"], pendulum.duration(minutes=1))
        journal.share_links.create(other["id"])
        later = expired["created_at"].add(hours=1)

        assert is_expired(expired, later)
        assert journal.share_links.list_by_entry(entry["id"]) == [expired]

    def test_delete(self, journal, entry):
        link = journal.share_links.create(entry["id"])
        assert journal.share_links.delete(link["id"])
        assert not journal.share_links.delete(link["id"])
        assert journal.share_links.get_by_code(link["code"]) is None

    def test_links_survive_entry_deletion(self, journal, entry):
        link = journal.share_links.create(entry["id"])
        delete_entry(journal.entries, journal.deleted_entries, entry["id"])
        assert journal.share_links.list_all() == [link]


class TestResolve:
    def test_resolves_entry(self, journal, entry):
        link = journal.share_links.create(entry["id"], pendulum.duration(days=7))
        assert resolve(journal.share_links, journal.entries, link["code"]) == entry

    def test_unknown_code(self, journal):
        assert resolve(journal.share_links, journal.entries, "ZZZZZZ") is None

    def test_expired_link(self, journal, entry):
        link = journal.share_links.create(entry["id"], pendulum.duration(minutes=5))
        later = link["created_at"].add(minutes=5)
        assert resolve(journal.share_links, journal.entries, link["code"], later) is None

    def test_never_expiring_link(self, journal, entry):
        link = journal.share_links.create(entry["id"])
        far_future = link["created_at"].add(years=10)
        assert not is_expired(link, far_future)
        assert (
            resolve(journal.share_links, journal.entries, link["code"], far_future)
            == entry
        )

    def test_orphaned_link(self, journal, entry):
        link = journal.share_links.create(entry["id"])
        journal.entries.delete(entry["id"])
        assert resolve(journal.share_links, journal.entries, link["code"]) is None
