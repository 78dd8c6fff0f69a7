"""Tests for the debounced filter controller."""

from unittest.mock import MagicMock

import pytest

from filter_grid.application.filter_controller import FilterController
from filter_grid.domain.models import FilterRow
from filter_grid.shared.exceptions import StoreError
from filter_grid.shared.types import RecordField


def descriptions(controller):
    return [r.description for r in controller.records]


class TestInitialState:
    """Test the controller right after form load."""

    def test_filter_row_pinned_first(self, controller):
        assert isinstance(controller.rows[0], FilterRow)
        assert controller.rows[0] is controller.filter_row

    def test_initial_query_is_unfiltered(self, controller, sample_records):
        assert controller.records == sample_records
        assert controller.query_count == 1

    def test_filter_row_never_persisted(self, controller, store):
        controller.commit(RecordField.DESCRIPTION, "fox")
        assert store.count() == 7
        assert all(r.code.startswith("REC-") for r in store.query())


class TestDebounce:
    """Test idle-delay behaviour."""

    def test_edit_does_not_query_before_idle(self, controller, scheduler):
        controller.edit(RecordField.DESCRIPTION, "f")
        scheduler.advance(249)
        assert controller.query_count == 1
        assert controller.has_pending_edit
        assert controller.filter_row.get(RecordField.DESCRIPTION) == ""

    def test_edit_queries_after_idle(self, controller, scheduler):
        controller.edit(RecordField.DESCRIPTION, "fox")
        scheduler.advance(250)
        assert controller.query_count == 2
        assert not controller.has_pending_edit
        assert controller.filter_row.get(RecordField.DESCRIPTION) == "fox"
        assert descriptions(controller) == ["Quick Brown Fox", "Brown Fox Jumps", "Fox Jumps Over"]

    def test_rapid_edits_trigger_one_query(self, controller, scheduler):
        for text in ["l", "la", "laz", "lazy"]:
            controller.edit(RecordField.DESCRIPTION, text)
            scheduler.advance(100)
        assert controller.query_count == 1

        scheduler.advance(250)

        assert controller.query_count == 2
        assert controller.edit_count == 4
        assert descriptions(controller) == ["Over The Lazy", "The Lazy Dog"]

    def test_stale_timer_is_noop(self, controller, scheduler):
        first = controller.edit(RecordField.DESCRIPTION, "q")
        second = controller.edit(RecordField.DESCRIPTION, "qu")
        assert second > first

        # Fire the superseded task directly, as if its timer could not be cancelled
        scheduler.tasks[0].callback()
        assert controller.query_count == 1

        scheduler.advance(250)
        assert controller.query_count == 2

    def test_superseded_idle_is_logged(self, controller, scheduler, log_messages):
        controller.edit(RecordField.DESCRIPTION, "q")
        controller.edit(RecordField.DESCRIPTION, "qu")
        scheduler.tasks[0].callback()
        assert any("superseded" in m for m in log_messages)

    def test_pattern_reflects_pending_edit(self, controller):
        controller.edit(RecordField.CODE, "REC")
        assert controller.pattern(RecordField.CODE) == "REC"
        assert controller.filter_row.get(RecordField.CODE) == ""

    def test_edits_to_two_fields_both_apply(self, controller, scheduler):
        controller.edit(RecordField.CODE, "0003")
        controller.edit(RecordField.DESCRIPTION, "fox")
        scheduler.advance(250)
        assert controller.query_count == 2
        assert descriptions(controller) == ["Fox Jumps Over"]

    def test_end_edit_stores_text(self, controller, scheduler):
        controller.edit(RecordField.DESCRIPTION, "dog")
        controller.end_edit(RecordField.DESCRIPTION, "dog")
        assert controller.filter_row.get(RecordField.DESCRIPTION) == "dog"
        scheduler.advance(250)
        assert descriptions(controller) == ["The Lazy Dog"]


class TestCommit:
    """Test Enter and clear actions."""

    def test_commit_queries_immediately(self, controller, scheduler):
        controller.edit(RecordField.DESCRIPTION, "jumps")
        controller.commit(RecordField.DESCRIPTION, "jumps")

        assert controller.query_count == 2
        assert descriptions(controller) == ["Brown Fox Jumps", "Fox Jumps Over", "Jumps Over The"]

        # Pending idle task does not query a second time
        scheduler.advance(1000)
        assert controller.query_count == 2

    def test_commit_flag_blocks_uncancelled_timer(self, controller, scheduler):
        controller.edit(RecordField.DESCRIPTION, "over")
        pending = scheduler.tasks[-1]
        controller.commit()
        pending.callback()
        assert controller.query_count == 2

    def test_edit_after_commit_is_debounced_again(self, controller, scheduler):
        controller.commit(RecordField.DESCRIPTION, "the")
        controller.edit(RecordField.DESCRIPTION, "the l")
        scheduler.advance(250)
        assert controller.query_count == 3
        assert descriptions(controller) == ["Over The Lazy", "The Lazy Dog"]

    def test_commit_without_field_applies_pending(self, controller):
        controller.edit(RecordField.DESCRIPTION, "dog")
        controller.commit()
        assert descriptions(controller) == ["The Lazy Dog"]

    def test_clear_single_field_keeps_others(self, controller):
        controller.commit(RecordField.CODE, "0006")
        controller.commit(RecordField.DESCRIPTION, "brown")
        assert controller.records == []

        controller.clear(RecordField.DESCRIPTION)

        assert controller.filter_row.get(RecordField.CODE) == "0006"
        assert descriptions(controller) == ["The Lazy Dog"]

        controller.commit(RecordField.DESCRIPTION, "brown")
        controller.clear(RecordField.CODE)

        assert controller.filter_row.get(RecordField.DESCRIPTION) == "brown"
        assert descriptions(controller) == ["The Quick Brown", "Quick Brown Fox", "Brown Fox Jumps"]

    def test_clear_discards_pending_edit(self, controller, scheduler):
        controller.edit(RecordField.DESCRIPTION, "fox")
        controller.clear(RecordField.DESCRIPTION)
        scheduler.advance(250)
        assert controller.query_count == 2
        assert len(controller.records) == 7

    def test_clear_all(self, controller):
        controller.commit(RecordField.CODE, "REC")
        controller.commit(RecordField.DESCRIPTION, "zzz")
        assert controller.records == []

        rows = controller.clear_all()

        assert controller.filter_row.is_empty
        assert len(rows) == 8
        assert rows[0] is controller.filter_row


class TestListeners:
    """Test row and error notifications."""

    def test_listener_receives_rows(self, controller):
        listener = MagicMock()
        controller.add_listener(listener)
        controller.commit(RecordField.DESCRIPTION, "dog")
        listener.assert_called_once()
        rows = listener.call_args[0][0]
        assert rows[0] is controller.filter_row
        assert [r.description for r in rows[1:]] == ["The Lazy Dog"]

    def test_remove_listener(self, controller):
        listener = MagicMock()
        controller.add_listener(listener)
        controller.remove_listener(listener)
        controller.query()
        listener.assert_not_called()

    def test_store_error_propagates_and_keeps_rows(self, controller, store):
        before = controller.records
        store.close()
        with pytest.raises(StoreError):
            controller.commit(RecordField.DESCRIPTION, "fox")
        assert controller.records == before

    def test_idle_store_error_goes_to_error_listeners(self, controller, store, scheduler):
        errors = []
        controller.add_error_listener(errors.append)
        store.close()

        controller.edit(RecordField.DESCRIPTION, "fox")
        scheduler.advance(250)

        assert len(errors) == 1
        assert isinstance(errors[0], StoreError)

    def test_idle_store_error_without_listener_raises(self, controller, store, scheduler):
        store.close()
        controller.edit(RecordField.DESCRIPTION, "fox")
        with pytest.raises(StoreError):
            scheduler.advance(250)


class TestPageSize:
    """Test page-size configuration."""

    def test_unfiltered_page_size(self, store, scheduler):
        controller = FilterController(store, scheduler, page_size=3)
        rows = controller.initialize()
        assert len(rows) == 4
        assert controller.debounce_ms == 250
