"""Tests for the TaskBoard interface used by the renderer."""

import json
from datetime import date, timedelta

from tasktrack.board import TaskBoard
from tasktrack.engine.deadlines import is_overdue
from tasktrack.models.constants import DARK_MODE_KEY, SAVE_ERROR_MESSAGE, TODOS_KEY
from tasktrack.models.task import TaskStatus
from tasktrack.storage.backends import MemoryKeyValueStore

from fakes import FailingKeyValueStore


class TestScenario:
    """End-to-end flow through the board."""

    def test_shopping_and_taxes(self, memory_storage):
        board = TaskBoard.open(memory_storage)
        yesterday = date.today() - timedelta(days=1)

        a = board.add_task("Buy milk", tags=["shopping"])
        b = board.add_task("File taxes", tags=["finance", "urgent"], deadline=yesterday)

        stats = board.get_stats()
        assert (stats.pending, stats.in_progress, stats.done, stats.total) == (2, 0, 0, 2)
        assert board.get_filtered_view("all", "shopping") == [a]
        assert is_overdue(b.deadline) is True

    def test_stats_follow_mutations(self, memory_storage):
        board = TaskBoard.open(memory_storage)
        tasks = [board.add_task(f"Task {i}") for i in range(4)]

        board.set_task_status(tasks[0].id, "done")
        assert board.get_stats().completion_percentage == 25

        board.set_task_status(tasks[1].id, TaskStatus.IN_PROGRESS)
        stats = board.get_stats()
        assert (stats.pending, stats.in_progress, stats.done) == (2, 1, 1)

        assert board.clear_done() == 1
        assert board.get_stats().total == 3

    def test_empty_board_has_no_percentage(self, memory_storage):
        stats = TaskBoard.open(memory_storage).get_stats()
        assert stats.total == 0
        assert stats.completion_percentage is None

    def test_blank_add_is_noop(self, memory_storage):
        board = TaskBoard.open(memory_storage)
        assert board.add_task("   ") is None
        assert board.get_stats().total == 0

    def test_delete_task(self, memory_storage):
        board = TaskBoard.open(memory_storage)
        task = board.add_task("Drop")
        board.delete_task(task.id)
        board.delete_task(task.id)
        assert board.tasks == []

    def test_used_tags_and_resolution(self, memory_storage):
        board = TaskBoard.open(memory_storage)
        board.add_task("Mystery", tags=["gardening", "work"])

        assert board.get_used_tags() == ["gardening", "work"]
        resolved = [board.resolve_tag(tag) for tag in board.get_used_tags()]
        assert resolved[0] is None
        assert resolved[1].label == "Work"

    def test_reopen_restores_tasks(self, memory_storage):
        board = TaskBoard.open(memory_storage)
        task = board.add_task("Persist me", assignee="Lee", start_date="2024-01-02")
        board.set_task_status(task.id, "in-progress")

        reopened = TaskBoard.open(memory_storage)
        assert reopened.tasks == board.tasks

    def test_opens_legacy_data(self):
        storage = MemoryKeyValueStore({
            TODOS_KEY: json.dumps([
                {"id": "1", "text": "Old done", "completed": True, "createdAt": "2023-01-01T00:00:00.000Z"},
                {"id": "2", "text": "Old open", "completed": False, "createdAt": "2023-01-02T00:00:00.000Z"},
            ])
        })
        board = TaskBoard.open(storage)
        assert [t.status for t in board.get_filtered_view("done")] == ["done"]
        assert board.get_stats().completion_percentage == 50

    def test_opens_data_with_out_of_range_timestamp(self):
        storage = MemoryKeyValueStore({
            TODOS_KEY: json.dumps([{"id": "1", "text": "A", "createdAt": "9999-12-31T23:00:00-05:00"}])
        })
        board = TaskBoard.open(storage)
        assert [t.text for t in board.tasks] == ["A"]
        assert board.tasks[0].created_at.tzinfo is not None
        assert board.save_error is None


class TestSaveErrors:
    """Storage failures are reported, never raised."""

    def test_add_with_failing_storage(self):
        board = TaskBoard.open(FailingKeyValueStore())
        task = board.add_task("Buy milk")

        assert task is not None
        assert board.tasks == [task]
        assert board.save_error == SAVE_ERROR_MESSAGE

    def test_error_clears_after_successful_save(self):
        storage = FailingKeyValueStore()
        board = TaskBoard.open(storage)
        task = board.add_task("Buy milk")
        assert board.save_error is not None

        storage.fail_saves = False
        board.set_task_status(task.id, "done")
        assert board.save_error is None
        assert json.loads(storage.load(TODOS_KEY))[0]["status"] == "done"

    def test_status_change_kept_when_save_fails(self):
        storage = FailingKeyValueStore()
        storage.fail_saves = False
        board = TaskBoard.open(storage)
        task = board.add_task("Buy milk")

        storage.fail_saves = True
        board.set_task_status(task.id, "done")
        assert board.save_error == SAVE_ERROR_MESSAGE
        assert board.tasks[0].status == TaskStatus.DONE

    def test_unreadable_storage_opens_empty(self):
        board = TaskBoard.open(FailingKeyValueStore(fail_loads=True))
        assert board.tasks == []
        assert board.save_error == SAVE_ERROR_MESSAGE

    def test_failed_id_write_back_keeps_loaded_tasks(self):
        storage = FailingKeyValueStore(initial={TODOS_KEY: json.dumps([{"text": "No id"}])})
        board = TaskBoard.open(storage)
        assert [t.text for t in board.tasks] == ["No id"]
        assert board.save_error == SAVE_ERROR_MESSAGE


class TestDarkMode:
    """Presentation preference stored alongside the tasks."""

    def test_default_is_light(self, memory_storage):
        assert TaskBoard.open(memory_storage).dark_mode is False

    def test_round_trip(self, memory_storage):
        TaskBoard.open(memory_storage).set_dark_mode(True)

        assert memory_storage.load(DARK_MODE_KEY) == "true"
        assert TaskBoard.open(memory_storage).dark_mode is True

    def test_unreadable_value_is_light(self):
        storage = MemoryKeyValueStore({DARK_MODE_KEY: "maybe"})
        assert TaskBoard.open(storage).dark_mode is False

    def test_failed_save_reported(self):
        board = TaskBoard.open(FailingKeyValueStore())
        board.set_dark_mode(True)
        assert board.dark_mode is True
        assert board.save_error == SAVE_ERROR_MESSAGE
