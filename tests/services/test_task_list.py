"""Unit tests for TaskList - ordering, ordinals, messages and write-through."""

from __future__ import annotations

import pytest

from tasktrack_cli.models import Deadline, Event, ToDo
from tasktrack_cli.services.task_list import TaskList
from tasktrack_cli.utils.exceptions import (
    CorruptedDataError,
    ErrorKind,
    InvalidNumberError,
    MalformedRecordError,
    NotANumberError,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def task_list(mock_storage):
    return TaskList(mock_storage)


@pytest.fixture()
def filled(task_list, mock_storage):
    """A list holding three open tasks: a, b, c (in that order)."""
    for record in ("T|false|a", "T|false|b", "T|false|c"):
        task_list.add_task_from_db(record)
    mock_storage.write.reset_mock()
    return task_list


def _descriptions(task_list):
    return [task.description for task in task_list]


def _last_snapshot(mock_storage):
    return list(mock_storage.write.call_args[0][0])


# ---------------------------------------------------------------------------
# add_task
# ---------------------------------------------------------------------------


class TestAddTask:
    def test_returns_confirmation(self, task_list):
        reply = task_list.add_task(ToDo(description="read book"))
        assert reply == (
            "Got it. I've added this task:\n"
            "\t[T][ ] read book\n"
            "Now you have 1 tasks in the list."
        )

    def test_list_is_sorted_after_every_add(self, task_list):
        for description in ["pear", "apple", "fig", "banana"]:
            task_list.add_task(ToDo(description=description))
            assert list(task_list) == sorted(task_list)
        assert _descriptions(task_list) == ["apple", "banana", "fig", "pear"]

    def test_completed_tasks_sort_after_open_ones(self, task_list):
        task_list.add_task(ToDo(description="a", is_completed=True))
        task_list.add_task(Deadline(description="z", by="Fri"))
        assert _descriptions(task_list) == ["z", "a"]

    def test_add_resorts_after_marking(self, filled):
        filled.mark_task("1", True)
        assert _descriptions(filled) == ["a", "b", "c"]
        filled.add_task(ToDo(description="d"))
        assert _descriptions(filled) == ["b", "c", "d", "a"]

    def test_persists_the_sorted_snapshot(self, task_list, mock_storage):
        task_list.add_task(ToDo(description="b"))
        task_list.add_task(ToDo(description="a"))
        assert mock_storage.write.call_count == 2
        assert _last_snapshot(mock_storage) == list(task_list)


# ---------------------------------------------------------------------------
# mark_task
# ---------------------------------------------------------------------------


class TestMarkTask:
    def test_marks_task_at_ordinal(self, filled):
        task = filled.mark_task("2", True)
        assert task.description == "b"
        assert task.is_completed is True
        assert filled.tasks[1].is_completed is True

    def test_unmark(self, filled):
        filled.mark_task("1", True)
        task = filled.mark_task("1", False)
        assert task.is_completed is False

    def test_does_not_reorder(self, filled):
        filled.mark_task("1", True)
        assert _descriptions(filled) == ["a", "b", "c"]

    def test_persists(self, filled, mock_storage):
        filled.mark_task("3", True)
        mock_storage.write.assert_called_once()
        assert _last_snapshot(mock_storage)[2].is_completed is True

    def test_ignores_surrounding_whitespace(self, filled):
        assert filled.mark_task(" 1 ", True).description == "a"

    @pytest.mark.parametrize("ordinal", ["0", "-1", "4", "100", "1" * 5000])
    def test_out_of_range(self, filled, mock_storage, ordinal):
        with pytest.raises(InvalidNumberError) as exc_info:
            filled.mark_task(ordinal, True)
        assert exc_info.value.message == (
            "Please input a valid number! There are 3 tasks remaining."
        )
        assert exc_info.value.count == 3
        assert exc_info.value.kind is ErrorKind.RANGE
        mock_storage.write.assert_not_called()

    @pytest.mark.parametrize("ordinal", ["one", "", "1.5", "1a"])
    def test_non_numeric(self, filled, ordinal):
        with pytest.raises(NotANumberError) as exc_info:
            filled.mark_task(ordinal, True)
        assert exc_info.value.message == "Please input a number."
        assert exc_info.value.kind is ErrorKind.SYNTAX


# ---------------------------------------------------------------------------
# delete_task
# ---------------------------------------------------------------------------


class TestDeleteTask:
    def test_returns_confirmation(self, filled):
        reply = filled.delete_task("2")
        assert reply == (
            "Noted. I've removed this task:\n"
            "\t[T][ ] b\n"
            "Now you have 2 tasks in the list."
        )

    @pytest.mark.parametrize(
        ("ordinal", "remaining"),
        [("1", ["b", "c"]), ("2", ["a", "c"]), ("3", ["a", "b"])],
    )
    def test_removes_exactly_that_task(self, filled, ordinal, remaining):
        filled.delete_task(ordinal)
        assert _descriptions(filled) == remaining

    def test_persists(self, filled, mock_storage):
        filled.delete_task("1")
        assert [t.description for t in _last_snapshot(mock_storage)] == ["b", "c"]

    @pytest.mark.parametrize("ordinal", ["0", "-2", "4", "9" * 5000])
    def test_out_of_range(self, filled, ordinal):
        with pytest.raises(InvalidNumberError, match="There are 3 tasks remaining."):
            filled.delete_task(ordinal)
        assert len(filled) == 3

    @pytest.mark.parametrize("ordinal", ["two", "", "#1"])
    def test_non_numeric(self, filled, ordinal):
        with pytest.raises(NotANumberError, match="Please input a number."):
            filled.delete_task(ordinal)

    def test_empty_list_reports_zero(self, task_list):
        with pytest.raises(InvalidNumberError, match="There are 0 tasks remaining."):
            task_list.delete_task("1")


# ---------------------------------------------------------------------------
# Write-through failures
# ---------------------------------------------------------------------------


class TestStorageFailure:
    def test_failed_add_leaves_list_unchanged(self, filled, mock_storage):
        mock_storage.write.side_effect = OSError("disk full")
        with pytest.raises(OSError, match="disk full"):
            filled.add_task(ToDo(description="d"))
        assert _descriptions(filled) == ["a", "b", "c"]

    def test_failed_mark_leaves_task_unchanged(self, filled, mock_storage):
        mock_storage.write.side_effect = OSError("disk full")
        with pytest.raises(OSError):
            filled.mark_task("1", True)
        assert filled.tasks[0].is_completed is False

    def test_failed_delete_keeps_task(self, filled, mock_storage):
        mock_storage.write.side_effect = OSError("disk full")
        with pytest.raises(OSError):
            filled.delete_task("1")
        assert len(filled) == 3


# ---------------------------------------------------------------------------
# add_task_from_db
# ---------------------------------------------------------------------------


class TestAddTaskFromDb:
    def test_keeps_stored_order_and_does_not_persist(self, task_list, mock_storage):
        task_list.add_task_from_db("T|false|z")
        task_list.add_task_from_db("D|true|a|Fri")
        task_list.add_task_from_db("E|false|m|noon")
        assert _descriptions(task_list) == ["z", "a", "m"]
        mock_storage.write.assert_not_called()

    def test_rebuilds_variants(self, task_list):
        task_list.add_task_from_db("D|true|return book|Sunday")
        task_list.add_task_from_db("E|false|party|Mon 2pm")
        deadline, event = task_list.tasks
        assert isinstance(deadline, Deadline) and deadline.by == "Sunday"
        assert deadline.is_completed is True
        assert isinstance(event, Event) and event.at == "Mon 2pm"

    def test_round_trip_through_serialize(self, task_list):
        original = Event(description="project meeting", at="Mon 2-4pm", is_completed=True)
        task_list.add_task_from_db(original.serialize())
        rebuilt = task_list.tasks[0]
        assert (rebuilt.description, rebuilt.is_completed, rebuilt.at) == (
            "project meeting",
            True,
            "Mon 2-4pm",
        )

    def test_unknown_tag(self, task_list):
        with pytest.raises(CorruptedDataError, match="Corrupted file"):
            task_list.add_task_from_db("X|true|foo")
        assert len(task_list) == 0

    def test_missing_fields(self, task_list):
        with pytest.raises(MalformedRecordError):
            task_list.add_task_from_db("E|false|party")


# ---------------------------------------------------------------------------
# find_task and rendering
# ---------------------------------------------------------------------------


class TestFindTask:
    @pytest.fixture()
    def kitchen(self, task_list):
        for record in ("T|false|design report", "T|false|buy milk", "T|false|redesign kitchen"):
            task_list.add_task_from_db(record)
        return task_list

    def test_substring_matches_in_list_order(self, kitchen):
        assert kitchen.find_task("design") == (
            "[T][ ] design report\n[T][ ] redesign kitchen"
        )

    def test_is_case_sensitive(self, kitchen):
        assert kitchen.find_task("Design") == ""

    def test_no_match_is_empty(self, kitchen):
        assert kitchen.find_task("car") == ""

    def test_find_matches_reports_ordinals(self, kitchen):
        assert [n for n, _ in kitchen.find_matches("design")] == [1, 3]

    def test_does_not_persist(self, kitchen, mock_storage):
        kitchen.find_task("design")
        mock_storage.write.assert_not_called()


class TestRendering:
    def test_remaining_tasks_message(self, filled):
        assert filled.get_remaining_tasks() == "Now you have 3 tasks in the list."

    def test_numbered_listing(self, task_list):
        task_list.add_task_from_db("T|true|read book")
        task_list.add_task_from_db("D|false|return book|Sunday")
        assert str(task_list) == "1.[T][X] read book\n2.[D][ ] return book (by: Sunday)"

    def test_single_task_has_no_trailing_newline(self, task_list):
        task_list.add_task_from_db("T|false|a")
        assert str(task_list) == "1.[T][ ] a"

    def test_empty_listing(self, task_list):
        assert str(task_list) == ""


# ---------------------------------------------------------------------------
# Lifecycle and end-to-end
# ---------------------------------------------------------------------------


class TestLifecycle:
    def test_starts_open(self, task_list):
        assert task_list.is_closed() is False

    def test_close_is_one_way_and_does_not_block(self, task_list):
        task_list.close()
        assert task_list.is_closed() is True
        task_list.add_task(ToDo(description="still works"))
        assert task_list.is_closed() is True
        assert len(task_list) == 1


def test_add_mark_delete_round(task_list, mock_storage):
    reply = task_list.add_task(ToDo(description="read book"))
    assert len(task_list) == 1
    assert "Now you have 1 tasks in the list." in reply

    task = task_list.mark_task("1", True)
    assert task.is_completed is True

    reply = task_list.delete_task("1")
    assert len(task_list) == 0
    assert "Now you have 0 tasks in the list." in reply
    assert _last_snapshot(mock_storage) == []
