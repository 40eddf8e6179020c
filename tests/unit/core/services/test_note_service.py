"""Unit tests for NoteService (quicknotes/core/services/note_service.py)."""

import pytest

from quicknotes.core.services import UNSET, Failure, NoteResult, ValidationMessage


def _create(note_service, user_id="alice", title="Title", body=None):
    result = note_service.create_note(user_id, title, body)
    assert result.ok, result
    return result.note


class TestCreateNote:
    def test_minimal_note(self, note_service):
        result = note_service.create_note("alice", "A")

        assert result.ok
        assert result.note.title == "A"
        assert result.note.body == ""
        assert result.note.user_id == "alice"
        assert result.note.id.startswith("note_")
        assert result.note.created_at.tzinfo is not None
        assert result.note.updated_at is None

    def test_note_is_stored(self, note_service, note_repo):
        note = _create(note_service)
        assert note_repo.get_by_id(note.id) == note

    def test_title_is_trimmed_body_is_not(self, note_service):
        note = _create(note_service, title="  Shop  ", body="  milk  ")
        assert note.title == "Shop"
        assert note.body == "  milk  "

    @pytest.mark.parametrize("title", [None, "", "   ", "\t\n"])
    def test_title_required(self, note_service, note_repo, title):
        result = note_service.create_note("alice", title)

        assert result.failure is Failure.VALIDATION
        assert result.error is ValidationMessage.TITLE_REQUIRED
        assert result.error == "Title is required"
        assert result.note is None
        assert note_repo.count() == 0

    def test_title_too_long(self, note_service):
        result = note_service.create_note("alice", "x" * 81)
        assert result.error == "Title must not exceed 80 characters"

    def test_title_length_counts_after_trim(self, note_service):
        note = _create(note_service, title="  " + "x" * 80 + "  ")
        assert len(note.title) == 80

    def test_body_too_long(self, note_service):
        result = note_service.create_note("alice", "T", "b" * 501)
        assert result.error == "Body must not exceed 500 characters"

    def test_body_at_limit(self, note_service):
        note = _create(note_service, body="b" * 500)
        assert len(note.body) == 500

    def test_title_checked_before_body(self, note_service):
        result = note_service.create_note("alice", "", "b" * 501)
        assert result.error is ValidationMessage.TITLE_REQUIRED

    def test_ids_are_unique(self, note_service):
        ids = {_create(note_service).id for _ in range(100)}
        assert len(ids) == 100


class TestListAndGet:
    def test_list_newest_first(self, note_service):
        first = _create(note_service, title="one")
        second = _create(note_service, title="two")
        third = _create(note_service, title="three")

        listed = note_service.list_user_notes("alice")
        assert [n.id for n in listed] == [third.id, second.id, first.id]

    def test_list_only_own_notes(self, note_service):
        _create(note_service, user_id="alice")
        bob_note = _create(note_service, user_id="bob")

        assert [n.id for n in note_service.list_user_notes("bob")] == [bob_note.id]
        assert note_service.list_user_notes("carol") == []

    def test_get_is_idempotent(self, note_service):
        note = _create(note_service)
        assert note_service.get_note(note.id) == note_service.get_note(note.id)

    def test_get_has_no_owner_filter(self, note_service):
        note = _create(note_service, user_id="alice")
        assert note_service.get_note(note.id) == note

    def test_get_missing(self, note_service):
        assert note_service.get_note("note_missing") is None


class TestUpdateNote:
    def test_update_title_keeps_body(self, note_service):
        note = _create(note_service, title="Old", body="keep me")
        result = note_service.update_note(note.id, "alice", title="New")

        assert result.ok
        assert result.note.title == "New"
        assert result.note.body == "keep me"
        assert result.note.updated_at is not None
        assert result.note.created_at == note.created_at

    def test_update_body_keeps_title(self, note_service):
        note = _create(note_service, title="Shop", body="milk")
        result = note_service.update_note(note.id, "alice", body="milk,eggs")

        assert result.note.title == "Shop"
        assert result.note.body == "milk,eggs"

    def test_update_is_persisted(self, note_service):
        note = _create(note_service)
        result = note_service.update_note(note.id, "alice", title="  New  ")

        assert result.note.title == "New"
        assert note_service.get_note(note.id) == result.note

    def test_update_body_to_empty_string(self, note_service):
        note = _create(note_service, body="something")
        result = note_service.update_note(note.id, "alice", body="")
        assert result.ok
        assert result.note.body == ""

    def test_each_update_refreshes_timestamp(self, note_service):
        note = _create(note_service)
        first = note_service.update_note(note.id, "alice", body="1").note
        second = note_service.update_note(note.id, "alice", body="2").note
        assert second.updated_at >= first.updated_at

    def test_no_fields(self, note_service):
        note = _create(note_service)
        result = note_service.update_note(note.id, "alice")
        assert result.error == "No updatable fields provided"

    def test_none_body_counts_as_omitted(self, note_service):
        note = _create(note_service, body="keep")
        result = note_service.update_note(note.id, "alice", body=None)
        assert result.error is ValidationMessage.NO_UPDATABLE_FIELDS

    @pytest.mark.parametrize("title", [None, "", "    "])
    def test_blank_title_is_rejected_not_ignored(self, note_service, title):
        note = _create(note_service, title="Keep")
        result = note_service.update_note(note.id, "alice", title=title)

        assert result.error is ValidationMessage.TITLE_REQUIRED
        assert note_service.get_note(note.id).title == "Keep"

    def test_title_too_long(self, note_service):
        note = _create(note_service)
        result = note_service.update_note(note.id, "alice", title="x" * 81)
        assert result.error is ValidationMessage.TITLE_TOO_LONG

    def test_body_too_long(self, note_service):
        note = _create(note_service)
        result = note_service.update_note(note.id, "alice", body="b" * 501)
        assert result.error is ValidationMessage.BODY_TOO_LONG

    def test_title_checked_before_body(self, note_service):
        note = _create(note_service)
        result = note_service.update_note(note.id, "alice", title="", body="b" * 501)
        assert result.error is ValidationMessage.TITLE_REQUIRED

    def test_failed_validation_leaves_note_unchanged(self, note_service):
        note = _create(note_service, title="T", body="b")
        note_service.update_note(note.id, "alice", title="New", body="b" * 501)
        assert note_service.get_note(note.id) == note

    def test_not_found(self, note_service):
        result = note_service.update_note("note_missing", "alice", title="New")
        assert result == NoteResult.not_found()

    def test_not_found_before_field_checks(self, note_service):
        result = note_service.update_note("note_missing", "alice")
        assert result.failure is Failure.NOT_FOUND

    def test_forbidden_for_other_user(self, note_service):
        note = _create(note_service, user_id="alice")
        result = note_service.update_note(note.id, "bob", title="Hacked")

        assert result.failure is Failure.FORBIDDEN
        assert note_service.get_note(note.id) == note

    def test_forbidden_before_field_checks(self, note_service):
        note = _create(note_service, user_id="alice")
        assert note_service.update_note(note.id, "bob").failure is Failure.FORBIDDEN
        assert note_service.update_note(note.id, "bob", title="").failure is Failure.FORBIDDEN

    def test_unset_is_falsy_singleton(self):
        assert not UNSET
        assert repr(UNSET) == "UNSET"
        assert type(UNSET)() is UNSET


class TestDeleteNote:
    def test_delete(self, note_service):
        note = _create(note_service)
        result = note_service.delete_note(note.id, "alice")

        assert result.ok
        assert note_service.get_note(note.id) is None

    def test_not_found(self, note_service):
        assert note_service.delete_note("note_missing", "alice").failure is Failure.NOT_FOUND

    def test_forbidden_for_other_user(self, note_service):
        note = _create(note_service, user_id="alice")
        result = note_service.delete_note(note.id, "bob")

        assert result.failure is Failure.FORBIDDEN
        assert note_service.get_note(note.id) == note

    def test_deleted_is_final(self, note_service):
        note = _create(note_service)
        note_service.delete_note(note.id, "alice")

        assert note_service.delete_note(note.id, "alice").failure is Failure.NOT_FOUND
        assert note_service.update_note(note.id, "alice", title="x").failure is Failure.NOT_FOUND
        assert note_service.list_user_notes("alice") == []
