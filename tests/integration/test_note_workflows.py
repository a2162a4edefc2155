"""
Integration Tests for Note Workflows.

Repository and view models over a real SQLite store.
"""

import random

from notekeeper.models.note import NOTE_COLOR_PALETTE, Note
from notekeeper.repositories.note import NoteRepository
from notekeeper.viewmodels import (
    DetailState,
    ListEvent,
    NoteDetailViewModel,
    NotesListViewModel,
)


def _is_newest_first(notes: list[Note]) -> bool:
    stamps = [note.updated_at for note in notes]
    return all(a > b for a, b in zip(stamps, stamps[1:]))


class TestOrdering:
    """fetch_all is always newest-first by updated_at."""

    def test_creates_listed_newest_first(self, repository):
        for title in ("first", "second", "third"):
            repository.create(title, "")

        notes = repository.fetch_all()

        assert [n.title for n in notes] == ["third", "second", "first"]
        assert _is_newest_first(notes)

    def test_update_moves_note_to_top(self, repository):
        first = repository.create("first", "")
        repository.create("second", "")
        repository.create("third", "")

        repository.update(first, "first again", "")

        notes = repository.fetch_all()
        assert notes[0].id == first.id
        assert _is_newest_first(notes)

    def test_favorite_does_not_reorder(self, repository):
        first = repository.create("first", "")
        repository.create("second", "")

        repository.set_favorite(first, True)

        assert [n.title for n in repository.fetch_all()] == ["second", "first"]
        assert repository.fetch_all()[1].is_favorite is True

    def test_equal_timestamps_fall_back_to_created_at(self, store, clock):
        frozen = clock()
        repo = NoteRepository(store, clock=lambda: frozen)
        older = repo.create("older", "")
        older.created_at = older.created_at.replace(microsecond=0)
        newer = repo.create("newer", "")
        newer.created_at = newer.created_at.replace(microsecond=1)
        store.flush()

        assert [n.title for n in repo.fetch_all()] == ["newer", "older"]


class TestCreateAndUpdate:
    def test_create_trims(self, repository):
        repository.create(" Hi ", " there ")

        stored = repository.fetch_all()[0]
        assert (stored.title, stored.content) == ("Hi", "there")

    def test_create_picks_palette_color_from_injected_rng(self, store):
        expected = random.Random(5).choice(NOTE_COLOR_PALETTE)

        note = NoteRepository(store, rng=random.Random(5)).create("x", "")

        assert note.color_hex == expected

    def test_partial_category_update(self, repository):
        note = repository.create("t", "c", "Personal")

        repository.update(note, "X", "Y")
        assert repository.fetch_all()[0].category == "Personal"

        repository.update(note, "X", "Y", category="Work")
        assert repository.fetch_all()[0].category == "Work"

    def test_timestamps_after_update(self, repository):
        note = repository.create("t", "c")
        created, updated = note.created_at, note.updated_at

        repository.update(note, "t2", "c2")

        stored = repository.fetch_all()[0]
        assert stored.updated_at > updated
        assert stored.created_at == created
        assert stored.color_hex == note.color_hex

    def test_update_of_deleted_note_fails(self, repository):
        note = repository.create("t", "c")
        repository.delete(note)

        assert repository.update(note, "x", "y") is False
        assert repository.delete(note) is False

    def test_persist_is_idempotent(self, repository):
        repository.create("t", "")

        assert repository.persist() is True
        assert repository.persist() is True


class TestSearch:
    def test_matches_title_or_content_case_insensitively(self, repository):
        repository.create("Groceries", "milk")
        repository.create("Workout", "legs")
        repository.create("Work notes", "standup")

        results = repository.search("work")

        assert [n.title for n in results] == ["Work notes", "Workout"]

    def test_matches_content(self, repository):
        repository.create("Errands", "Pick up WORK badge")
        repository.create("Other", "nothing")

        assert [n.title for n in repository.search("Work")] == ["Errands"]

    def test_wildcards_are_literal(self, repository):
        repository.create("100% done", "")
        repository.create("1000 done", "")

        assert [n.title for n in repository.search("100%")] == ["100% done"]

    def test_case_folding_covers_non_ascii(self, repository):
        repository.create("Été à Paris", "")
        repository.create("Заметка", "Привет МИР")
        repository.create("Summer", "")

        assert [n.title for n in repository.search("ÉTÉ")] == ["Été à Paris"]
        assert [n.title for n in repository.search("мир")] == ["Заметка"]

    def test_surrounding_whitespace_ignored(self, repository):
        repository.create("Work notes", "")
        repository.create("Groceries", "")

        assert [n.title for n in repository.search("  work ")] == ["Work notes"]

    def test_no_match(self, repository):
        repository.create("Groceries", "")

        assert repository.search("zzz") == []


class TestEndToEnd:
    def test_create_update_delete(self, repository):
        assert repository.fetch_all() == []

        repository.create("Shopping", "Milk, eggs")
        notes = repository.fetch_all()
        assert len(notes) == 1
        note = notes[0]
        assert (note.title, note.content) == ("Shopping", "Milk, eggs")
        assert note.category == "General"
        assert note.is_favorite is False
        before = note.updated_at

        assert repository.update(note, "Shopping List", "Milk, eggs, bread") is True
        fetched = repository.fetch_all()[0]
        assert (fetched.title, fetched.content) == ("Shopping List", "Milk, eggs, bread")
        assert fetched.updated_at > before

        assert repository.delete(fetched) is True
        assert repository.fetch_all() == []

    def test_notes_survive_a_new_store_on_the_same_database(self, tmp_path):
        from notekeeper.core.database import build_engine, create_store

        engine = build_engine(f"sqlite:///{tmp_path / 'db' / 'notes.db'}")
        first = create_store(engine)
        NoteRepository(first).create("Durable", "")
        first.close()

        second = create_store(engine)
        assert [n.title for n in NoteRepository(second).fetch_all()] == ["Durable"]
        second.close()
        engine.dispose()


class TestViewModelFlows:
    """List and detail view models driving the real repository."""

    def test_create_through_detail_then_list(self, repository, list_vm):
        changes = []
        list_vm.subscribe(ListEvent.LIST_CHANGED, lambda: changes.append(len(list_vm.notes)))
        shown = []
        list_vm.subscribe(ListEvent.SHOW_DETAIL, lambda note, new: shown.append((note, new)))

        list_vm.request_create()
        detail = NoteDetailViewModel.from_selection(*shown[0], repository)
        assert detail.save("Shopping", "Milk, eggs") is True
        list_vm.load()

        assert changes == [1]
        assert list_vm.notes[0].title == "Shopping"

    def test_edit_selected_note(self, repository, list_vm):
        repository.create("Old", "body")
        list_vm.load()
        shown = []
        list_vm.subscribe(ListEvent.SHOW_DETAIL, lambda note, new: shown.append((note, new)))

        list_vm.select(0)
        detail = NoteDetailViewModel.from_selection(*shown[0], repository)
        detail.save(detail.title + " edited", detail.content)
        list_vm.load()

        assert detail.state is DetailState.SAVED
        assert list_vm.notes[0].title == "Old edited"

    def test_empty_save_touches_nothing(self, repository, list_vm):
        detail = NoteDetailViewModel.from_selection(None, True, repository)
        errors = []
        detail.bind(type("Screen", (), {
            "on_saved": lambda self: None,
            "on_error": lambda self, message: errors.append(message),
        })())

        detail.save("   ", "\n")

        assert errors == ["Note must have either a title or content"]
        assert repository.fetch_all() == []

    def test_delete_then_load(self, repository, list_vm):
        for title in ("a", "b", "c"):
            repository.create(title, "")
        list_vm.load()
        errors = []
        list_vm.subscribe(ListEvent.ERROR, errors.append)
        doomed = list_vm.notes[1]

        list_vm.delete(1)

        assert doomed.id not in [n.id for n in list_vm.notes]
        assert len(list_vm.notes) == 2
        assert errors == []

    def test_out_of_range_indices_on_three_notes(self, repository, list_vm):
        for title in ("a", "b", "c"):
            repository.create(title, "")
        list_vm.load()
        events = []
        for event in ListEvent:
            list_vm.subscribe(event, lambda *args, e=event: events.append(e))

        list_vm.select(-1)
        list_vm.select(1000)
        list_vm.delete(-1)

        assert events == []
        assert len(list_vm.notes) == 3

    def test_search_then_delete_keeps_filter(self, repository, list_vm):
        repository.create("Groceries", "")
        repository.create("Workout", "")
        repository.create("Work notes", "")

        list_vm.search("work")
        list_vm.delete(0)

        assert [n.title for n in list_vm.notes] == ["Workout"]
        list_vm.search("")
        assert [n.title for n in list_vm.notes] == ["Workout", "Groceries"]
