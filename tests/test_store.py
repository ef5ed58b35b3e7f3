"""Tests for CVStore dispatch, publishing and serialization."""

from __future__ import annotations

import logging
import threading

from careercatalyst.models.actions import (
    AddEducation,
    AddSkill,
    RemoveEducation,
    RemoveSkill,
    UnrecognizedAction,
)
from careercatalyst.models.document import CVDocument
from careercatalyst.store.dispatcher import CVStore


class TestDispatch:
    def test_starts_empty(self, store):
        """A new store holds the empty document."""
        assert store.document == CVDocument.empty()
        assert store.version == 0
        assert store.completeness == 0

    def test_initial_document(self, populated_document):
        """An initial document is used as-is."""
        store = CVStore(populated_document)
        assert store.document is populated_document

    def test_dispatch_updates_document(self, store, sample_education):
        """Dispatch applies the action and bumps the version."""
        store.dispatch(AddEducation(entry=sample_education))
        assert store.document.education == (sample_education,)
        assert store.version == 1

    def test_noop_does_not_bump_version(self, store):
        """No-op actions leave the version alone."""
        store.dispatch(AddSkill(skill="Python"))
        store.dispatch(AddSkill(skill="PYTHON"))
        store.dispatch(RemoveSkill(index=3))
        assert store.version == 1

    def test_unknown_action_keeps_document(self, populated_store, caplog):
        """Unknown actions are logged and ignored."""
        before = populated_store.document
        with caplog.at_level(logging.WARNING):
            populated_store.dispatch(UnrecognizedAction(kind="SHUFFLE"))
        assert populated_store.document is before
        assert "SHUFFLE" in caplog.text

    def test_snapshot_is_stable(self, store):
        """Earlier snapshots are unaffected by later dispatches."""
        store.dispatch(AddSkill(skill="Python"))
        snapshot = store.document
        store.dispatch(AddSkill(skill="Go"))
        assert snapshot.skills == ("Python",)
        assert store.document.skills == ("Python", "Go")

    def test_actions_applied_in_dispatch_order(self, store):
        """Actions apply in dispatch order."""
        for skill in ("a", "b", "c"):
            store.dispatch(AddSkill(skill=skill))
        store.dispatch(RemoveSkill(index=0))
        assert store.document.skills == ("b", "c")

    def test_scenario(self, store, sample_education):
        """Add, duplicate add and remove leave the expected document."""
        store.dispatch(AddEducation(entry=sample_education))
        store.dispatch(AddSkill(skill="JavaScript"))
        store.dispatch(AddSkill(skill="JavaScript"))
        store.dispatch(RemoveEducation(index=0))
        assert store.document.education == ()
        assert store.document.skills == ("JavaScript",)


class TestSubscribers:
    def test_listener_receives_new_document(self, store):
        """Listeners receive the new snapshot."""
        received = []
        store.subscribe(received.append)
        store.dispatch(AddSkill(skill="Python"))
        assert received == [store.document]

    def test_listener_not_called_on_noop(self, store):
        """No-op actions do not notify listeners."""
        received = []
        store.subscribe(received.append)
        store.dispatch(RemoveSkill(index=0))
        assert received == []

    def test_unsubscribe(self, store):
        """Unsubscribing is idempotent and stops notifications."""
        received = []
        unsubscribe = store.subscribe(received.append)
        unsubscribe()
        unsubscribe()
        store.dispatch(AddSkill(skill="Python"))
        assert received == []

    def test_failing_listener_does_not_break_store(self, store, caplog):
        """A raising listener is logged; others still run."""
        received = []

        def broken(document):
            raise RuntimeError("boom")

        store.subscribe(broken)
        store.subscribe(received.append)
        with caplog.at_level(logging.ERROR):
            store.dispatch(AddSkill(skill="Python"))
        assert len(received) == 1
        assert "failed" in caplog.text
        store.dispatch(AddSkill(skill="Go"))
        assert store.document.skills == ("Python", "Go")

    def test_nested_dispatch_runs_after_publish_completes(self, store):
        """Dispatch from a listener waits for the current publish."""
        events = []

        def first(document):
            events.append(("first", document.skills))
            if document.skills == ("Python",):
                store.dispatch(AddSkill(skill="Go"))
                # Not applied yet: the current dispatch is still publishing
                events.append(("after nested", store.document.skills))

        def second(document):
            events.append(("second", document.skills))

        store.subscribe(first)
        store.subscribe(second)
        store.dispatch(AddSkill(skill="Python"))

        assert events == [
            ("first", ("Python",)),
            ("after nested", ("Python",)),
            ("second", ("Python",)),
            ("first", ("Python", "Go")),
            ("second", ("Python", "Go")),
        ]
        assert store.version == 2


def test_threads_do_not_lose_updates(store):
    """Concurrent dispatches from threads are all applied."""
    def worker(prefix):
        for i in range(50):
            store.dispatch(AddSkill(skill=f"{prefix}-{i}"))

    threads = [threading.Thread(target=worker, args=(p,)) for p in ("a", "b", "c", "d")]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store.document.skills) == 200
    assert store.version == 200
