"""Tests for the command line front end."""

import json

import pytest
from typer.testing import CliRunner

from conftest import make_draft
from keepsake.exceptions import InvalidReminderError
from keepsake.terminal.app import app


@pytest.fixture
def runner():
    return CliRunner(env={"COLUMNS": "200"})


@pytest.fixture
def invoke(runner, journal):
    def _invoke(*args, input=None):
        return runner.invoke(app, list(args), obj=journal, input=input)

    return _invoke


class TestEntryCommands:
    def test_add(self, invoke, journal):
        result = invoke(
            "entry", "add", "--title", "Day 1", "--content", "hello",
            "--tag", "work", "--tag", "home", "--mood", "good", "--rating", "4",
        )
        assert result.exit_code == 0, result.output
        [entry] = journal.entries.list_all()
        assert entry["title"] == "Day 1"
        assert entry["tags"] == ["work", "home"]
        assert entry["mood"] == "good"
        assert entry["rating"] == 4

    def test_aliases(self, invoke, journal):
        result = invoke("e", "a", "-t", "Aliased", "-c", "body")
        assert result.exit_code == 0, result.output
        assert journal.entries.list_all()[0]["title"] == "Aliased"

    def test_add_rejects_unknown_mood(self, invoke, journal):
        result = invoke("entry", "add", "-t", "x", "-c", "y", "--mood", "ecstatic")
        assert result.exit_code != 0
        assert journal.entries.list_all() == []

    def test_add_while_offline_queues_entry(self, invoke, journal):
        journal.offline_queue.set_offline(True)
        result = invoke("entry", "add", "-t", "Queued", "-c", "later")
        assert result.exit_code == 0, result.output
        assert journal.entries.list_all() == []
        [item] = journal.offline_queue.pending()
        assert item["data"]["title"] == "Queued"

    def test_list_and_search(self, invoke, journal):
        journal.entries.create(make_draft(title="Catch up"))
        assert invoke("entry", "list").exit_code == 0
        result = invoke("entry", "search", "catch")
        assert result.exit_code == 0
        assert "Catch up" in result.output

    def test_show_unknown_entry(self, invoke):
        assert invoke("entry", "show", "missing").exit_code == 1

    def test_modify(self, invoke, journal):
        entry = journal.entries.create(make_draft(tags=["work"], mood="bad"))
        result = invoke(
            "entry", "modify", entry["id"], "--title", "Renamed",
            "--add-tag", "home", "--remove-tag", "work", "--remove-mood",
        )
        assert result.exit_code == 0, result.output
        modified = journal.entries.get(entry["id"])
        assert modified["title"] == "Renamed"
        assert modified["tags"] == ["home"]
        assert modified.get("mood") is None
        assert modified["content"] == entry["content"]

    def test_favorite(self, invoke, journal):
        entry = journal.entries.create(make_draft())
        assert invoke("entry", "favorite", entry["id"]).exit_code == 0
        assert journal.entries.get(entry["id"])["favorite"]
        assert invoke("entry", "favorite", entry["id"], "--off").exit_code == 0
        assert not journal.entries.get(entry["id"])["favorite"]

    def test_delete_then_restore_from_trash(self, invoke, journal):
        entry = journal.entries.create(make_draft())
        assert invoke("entry", "delete", entry["id"]).exit_code == 0
        assert journal.entries.list_all() == []

        [deleted] = journal.deleted_entries.list_deleted()
        assert invoke("trash", "list").exit_code == 0
        assert invoke("trash", "restore", deleted["id"]).exit_code == 0
        assert journal.entries.list_all() == [entry]

    def test_delete_unknown_entry(self, invoke):
        assert invoke("entry", "delete", "missing").exit_code == 1


class TestTrashCommands:
    def test_empty_requires_confirmation(self, invoke, journal):
        journal.deleted_entries.archive_on_delete(journal.entries.create(make_draft()))
        assert invoke("trash", "empty", input="n\n").exit_code != 0
        assert len(journal.deleted_entries.list_deleted()) == 1
        assert invoke("trash", "empty", "--yes").exit_code == 0
        assert journal.deleted_entries.list_deleted() == []


class TestBackupCommands:
    def test_export_to_stdout(self, invoke, journal):
        journal.entries.create(make_draft(title="Day 1"))
        result = invoke("backup", "export")
        assert result.exit_code == 0
        assert json.loads(result.output)["data"][0]["title"] == "Day 1"

    def test_export_and_import_file(self, invoke, journal, tmp_path):
        journal.entries.create(make_draft(title="Day 1"))
        assert invoke("backup", "export", "--dir", str(tmp_path)).exit_code == 0
        [backup_file] = list(tmp_path.glob("journal-backup-*.json"))

        journal.entries.create(make_draft(title="Day 2"))
        result = invoke("backup", "import", str(backup_file), "--yes")
        assert result.exit_code == 0, result.output
        assert [e["title"] for e in journal.entries.list_all()] == ["Day 1"]

    def test_import_rejects_invalid_file(self, invoke, journal, tmp_path):
        journal.entries.create(make_draft())
        bad_file = tmp_path / "bad.json"
        bad_file.write_text('{"data": "nope"}')
        assert invoke("backup", "import", str(bad_file), "--yes").exit_code == 1
        assert len(journal.entries.list_all()) == 1


class TestAuthCommands:
    def test_register_and_login(self, invoke, journal):
        assert invoke("auth", "register", "--password", "secret-1").exit_code == 0
        assert invoke("auth", "login", "--password", "wrong").exit_code == 1
        assert invoke("auth", "login", "--password", "secret-1").exit_code == 0

    def test_register_rejects_short_password(self, invoke, journal):
        assert invoke("auth", "register", "--password", "abc").exit_code == 1
        assert not journal.credentials.is_registered()

    def test_login_without_registration(self, invoke):
        assert invoke("auth", "login", "--password", "secret-1").exit_code == 1

    def test_passwd(self, invoke, journal):
        journal.credentials.register("secret-1")
        result = invoke(
            "auth", "passwd", "--old-password", "secret-1", "--new-password", "secret-2"
        )
        assert result.exit_code == 0, result.output
        assert journal.credentials.login("secret-2")

    def test_logout(self, invoke, journal):
        journal.credentials.register("secret-1")
        assert invoke("auth", "logout").exit_code == 0
        assert not journal.credentials.is_registered()


class TestPinCommands:
    def test_set_verify_disable(self, invoke, journal):
        assert invoke("pin", "set", "--pin", "1234").exit_code == 0
        assert invoke("pin", "verify", "--pin", "0000").exit_code == 1
        assert invoke("pin", "verify", "--pin", "1234").exit_code == 0
        assert invoke("pin", "disable").exit_code == 0
        assert invoke("pin", "verify", "--pin", "0000").exit_code == 0

    def test_set_prompts_for_confirmation(self, invoke, journal):
        assert invoke("pin", "set", input="4321\n4321\n").exit_code == 0
        assert journal.pin.verify("4321")
        assert not journal.pin.verify("1234")

    def test_set_rejects_non_digits(self, invoke, journal):
        assert invoke("pin", "set", "--pin", "12ab").exit_code == 1
        assert not journal.pin.is_enabled()


class TestSettingsCommands:
    def test_theme_set(self, invoke, journal):
        result = invoke("theme", "set", "--theme", "lavender", "--font-size", "large")
        assert result.exit_code == 0, result.output
        settings = journal.theme.get_settings()
        assert settings["theme"] == "lavender"
        assert settings["font_size"] == "large"
        assert settings["font_family"] == "default"

    def test_theme_presets(self, invoke):
        result = invoke("theme", "presets")
        assert result.exit_code == 0
        assert "ocean-blue" in result.output

    def test_reminder_add_and_delete(self, invoke, journal):
        assert invoke("reminder", "add", "07:30", "--title", "Write").exit_code == 0
        [reminder] = journal.reminders.list_all()
        assert reminder["title"] == "Write"
        assert invoke("reminder", "delete", reminder["id"]).exit_code == 0
        assert journal.reminders.list_all() == []

    def test_reminder_add_rejects_bad_time(self, invoke, journal):
        result = invoke("reminder", "add", "7:30")
        assert result.exit_code == 1
        assert isinstance(result.exception, InvalidReminderError)
        assert journal.reminders.list_all() == []


class TestShareCommands:
    def test_create_and_resolve(self, invoke, journal):
        entry = journal.entries.create(make_draft(title="Shared"))
        result = invoke("share", "create", entry["id"], "--expires-in", "7d")
        assert result.exit_code == 0, result.output
        [link] = journal.share_links.list_all()
        assert result.output.strip().endswith(f"/share/{link['code']}")

        result = invoke("share", "resolve", link["code"].lower())
        assert result.exit_code == 0
        assert "Shared" in result.output

    def test_create_for_unknown_entry(self, invoke, journal):
        assert invoke("share", "create", "missing").exit_code == 1
        assert journal.share_links.list_all() == []

    def test_resolve_orphaned_link(self, invoke, journal):
        entry = journal.entries.create(make_draft())
        link = journal.share_links.create(entry["id"])
        journal.entries.delete(entry["id"])
        assert invoke("share", "resolve", link["code"]).exit_code == 1


class TestOfflineCommands:
    def test_mode_and_drain(self, invoke, journal):
        assert invoke("offline", "mode", "--on").exit_code == 0
        assert journal.offline_queue.is_offline()
        invoke("entry", "add", "-t", "Queued", "-c", "later")
        assert invoke("offline", "queue").exit_code == 0

        assert invoke("offline", "mode", "--off").exit_code == 0
        result = invoke("offline", "drain")
        assert result.exit_code == 0, result.output
        assert [e["title"] for e in journal.entries.list_all()] == ["Queued"]
        assert journal.offline_queue.list_items() == []

    def test_clear(self, invoke, journal):
        journal.offline_queue.enqueue(make_draft())
        assert invoke("offline", "clear").exit_code == 0
        assert journal.offline_queue.list_items() == []
