"""Tests for the WorkItem contract and the six concrete work items."""

from __future__ import annotations

import copy
import gc
import operator

import pytest

from tests.conftest import delta
from workq.domain.capabilities import Describable, Named
from workq.domain.container import TaskContainer
from workq.domain.errors import InvalidArgumentError, InvalidStateError, WorkQueueError
from workq.domain.lifecycle import TaskKind, TaskState
from workq.domain.operations import divide
from workq.domain.registry import live_objects
from workq.domain.tasks import (
    TASK_TYPES,
    BinaryOperationTask,
    ClearContainerTask,
    CountContainerSizeTask,
    CountLiveObjectsTask,
    CountResultProducingTask,
    EnqueueTask,
    WorkItem,
)


def _plus() -> BinaryOperationTask:
    return BinaryOperationTask("Plus", operator.add, 3, 7)


class TestWorkItemContract:
    def test_abstract(self) -> None:
        with pytest.raises(TypeError):
            WorkItem()  # type: ignore[abstract]

    def test_every_kind_registered(self) -> None:
        assert set(TASK_TYPES) == set(TaskKind)
        for kind, task_type in TASK_TYPES.items():
            assert task_type.KIND is kind

    @pytest.mark.parametrize(
        ("task_type", "expected"),
        [
            (BinaryOperationTask, True),
            (EnqueueTask, False),
            (CountContainerSizeTask, True),
            (CountResultProducingTask, True),
            (ClearContainerTask, False),
            (CountLiveObjectsTask, True),
        ],
    )
    def test_classification_is_type_level(
        self, task_type: type[WorkItem], expected: bool
    ) -> None:
        assert task_type.RESULT_PRODUCING is expected

    def test_classification_available_before_execute(self, container: TaskContainer) -> None:
        task = CountContainerSizeTask(container)
        assert task.is_result_producing() is True
        assert task.state is TaskState.UNEXECUTED

    def test_items_are_describable(self, container: TaskContainer) -> None:
        assert isinstance(ClearContainerTask(container), Describable)
        assert isinstance(Named("x"), Describable)

    def test_state_moves_to_executed(self) -> None:
        task = CountLiveObjectsTask()
        assert not task.executed
        task.execute()
        assert task.executed
        assert task.state is TaskState.EXECUTED

    def test_errors_share_a_base(self) -> None:
        assert issubclass(InvalidArgumentError, WorkQueueError)
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(InvalidStateError, WorkQueueError)
        assert issubclass(InvalidStateError, RuntimeError)


class TestNamed:
    def test_describe(self) -> None:
        assert Named("Plus").describe() == "Object name Plus"

    def test_label_is_read_only(self) -> None:
        named = Named("Plus")
        with pytest.raises(AttributeError):
            named.label = "Minus"  # type: ignore[misc]


class TestBinaryOperationTask:
    def test_describe_before_execute(self) -> None:
        task = _plus()
        assert task.describe() == (
            "Object name Plus, binary operation with arguments = (3.000000, 7.000000)"
        )
        assert "Result" not in task.describe()
        assert task.result is None

    def test_execute(self) -> None:
        task = _plus()
        task.execute()
        assert task.result == 10
        assert "Result = 10" in task.describe()
        assert task.describe().endswith(" Result = 10.000000")

    def test_repeat_execute_recomputes(self) -> None:
        task = BinaryOperationTask("Division", divide, 34, 7)
        task.execute()
        first = task.describe()
        task.execute()
        assert task.describe() == first
        assert "Result = 4.857143" in first

    def test_division_by_zero_is_not_an_error(self) -> None:
        task = BinaryOperationTask("Division", divide, 1, 0)
        task.execute()
        assert task.describe().endswith("Result = inf")

    def test_accepts_named(self) -> None:
        task = BinaryOperationTask(Named("Minus"), operator.sub, 412, 42)
        assert task.name == "Minus"
        assert task.operands == (412.0, 42.0)

    def test_is_result_producing(self) -> None:
        assert _plus().is_result_producing() is True

    def test_counts_itself_and_its_name(self, baseline: int) -> None:
        task = _plus()
        assert delta(baseline) == 2
        clone = copy.deepcopy(task)
        assert clone.name == "Plus"
        assert delta(baseline) == 4
        del task, clone
        assert delta(baseline) == 0


class TestCopying:
    def test_binary_copy_has_its_own_name(self, baseline: int) -> None:
        task = _plus()
        task.execute()
        clone = copy.copy(task)
        assert delta(baseline) == 4
        assert clone._named is not task._named
        assert clone.describe() == task.describe()
        del task
        assert delta(baseline) == 2
        assert clone.name == "Plus"

    def test_binary_assign_counts_both_parts(self, baseline: int) -> None:
        target = _plus()
        source = BinaryOperationTask("Minus", operator.sub, 412, 42)
        source.execute()
        assert delta(baseline) == 4

        target.assign(source)

        assert delta(baseline) == 6
        assert target.name == "Minus"
        assert target.result == 370
        assert target._named is not source._named

    def test_passed_name_is_copied(self, baseline: int) -> None:
        named = Named("Minus")
        task = BinaryOperationTask(named, operator.sub, 412, 42)
        assert task._named is not named
        assert delta(baseline) == 3
        del named
        assert delta(baseline) == 2
        assert task.name == "Minus"

    @pytest.mark.parametrize("duplicate", [copy.copy, copy.deepcopy])
    def test_enqueue_cannot_be_copied(
        self, container: TaskContainer, duplicate: object, baseline: int
    ) -> None:
        task = EnqueueTask(container, _plus())
        with pytest.raises(TypeError, match="cannot be copied"):
            duplicate(task)  # type: ignore[operator]
        assert delta(baseline) == 3

    def test_enqueue_cannot_be_assigned(self, container: TaskContainer, baseline: int) -> None:
        first = EnqueueTask(container, _plus())
        second = EnqueueTask(container, CountLiveObjectsTask())
        with pytest.raises(TypeError, match="cannot be assigned"):
            first.assign(second)
        assert delta(baseline) == 5
        first.execute()
        assert len(container) == 1

    @pytest.mark.parametrize(
        "task_type", [CountContainerSizeTask, CountResultProducingTask, ClearContainerTask]
    )
    def test_container_tasks_share_the_container(
        self, container: TaskContainer, task_type: type[WorkItem], baseline: int
    ) -> None:
        task = task_type(container)  # type: ignore[call-arg]
        clone = copy.copy(task)
        assert delta(baseline) == 2
        container.push(CountLiveObjectsTask())
        clone.execute()
        assert len(container) == (0 if task_type is ClearContainerTask else 1)

    def test_counter_copy_keeps_result(self, baseline: int) -> None:
        task = CountLiveObjectsTask()
        task.execute()
        clone = copy.copy(task)
        assert clone.result == task.result
        assert delta(baseline) == 2


class TestEnqueueTask:
    def test_empty_item_rejected(self, container: TaskContainer, baseline: int) -> None:
        with pytest.raises(InvalidArgumentError, match="Empty task"):
            EnqueueTask(container, None)
        assert delta(baseline) == 0

    def test_execute_moves_item_to_back(self, container: TaskContainer) -> None:
        container.push(CountLiveObjectsTask())
        item = _plus()
        task = EnqueueTask(container, item)
        assert task.pending_item is item

        task.execute()
        assert len(container) == 2
        assert container[-1] is item
        assert task.pending_item is None

    def test_second_execute_fails(self, container: TaskContainer) -> None:
        task = EnqueueTask(container, _plus())
        task.execute()
        with pytest.raises(InvalidStateError, match="already executed"):
            task.execute()
        assert len(container) == 1

    def test_not_result_producing(self, container: TaskContainer) -> None:
        assert EnqueueTask(container, _plus()).is_result_producing() is False

    def test_description_is_frozen_at_construction(self, container: TaskContainer) -> None:
        item = _plus()
        task = EnqueueTask(container, item)
        item.execute()
        assert task.describe() == (
            "EnqueueTask adds task [Object name Plus, binary operation with arguments = "
            "(3.000000, 7.000000)]"
        )

    def test_missing_container(self) -> None:
        container = TaskContainer()
        task = EnqueueTask(container, _plus())
        del container
        gc.collect()
        with pytest.raises(InvalidStateError):
            task.execute()
        assert task.pending_item is not None
        assert task.state is TaskState.UNEXECUTED


class TestCountContainerSizeTask:
    def test_not_run_yet(self, container: TaskContainer) -> None:
        task = CountContainerSizeTask(container)
        assert task.describe() == "CountContainerSizeTask wasn't running yet."

    def test_counts_and_refreshes(self, container: TaskContainer) -> None:
        task = CountContainerSizeTask(container)
        container.push(_plus())
        task.execute()
        assert task.describe() == "CountContainerSizeTask result = 1"

        container.push(task)
        task.execute()
        assert task.result == 2

    def test_empty_container(self, container: TaskContainer) -> None:
        task = CountContainerSizeTask(container)
        task.execute()
        assert task.describe() == "CountContainerSizeTask result = 0"


class TestCountResultProducingTask:
    def test_not_run_yet(self, container: TaskContainer) -> None:
        task = CountResultProducingTask(container)
        assert task.describe() == "CountResultProducingTask wasn't running yet."

    def test_counts_result_producing_items(self, container: TaskContainer) -> None:
        container.push(_plus())
        container.push(ClearContainerTask(container))
        task = CountResultProducingTask(container)
        task.execute()
        assert task.result == 1
        assert task.describe() == "CountResultProducingTask result = 1"

    def test_counts_itself_when_inside(self, container: TaskContainer) -> None:
        task = CountResultProducingTask(container)
        container.push(task)
        container.push(EnqueueTask(container, _plus()))
        task.execute()
        assert task.result == 1

    def test_rescans_on_each_call(self, container: TaskContainer) -> None:
        task = CountResultProducingTask(container)
        task.execute()
        assert task.result == 0
        container.push(CountLiveObjectsTask())
        task.execute()
        assert task.result == 1


class TestClearContainerTask:
    def test_describe(self, container: TaskContainer) -> None:
        task = ClearContainerTask(container)
        assert task.describe() == "ClearContainerTask"
        task.execute()
        assert task.describe() == "ClearContainerTask"

    def test_clear_destroys_every_item(self, container: TaskContainer) -> None:
        container.extend(CountContainerSizeTask(container) for _ in range(3))
        task = ClearContainerTask(container)
        gc.collect()
        before = live_objects()

        task.execute()

        assert len(container) == 0
        assert live_objects() == before - 3

    def test_clear_releases_binary_and_its_name(self, container: TaskContainer) -> None:
        container.push(_plus())
        container.push(CountLiveObjectsTask())
        task = ClearContainerTask(container)
        gc.collect()
        before = live_objects()

        task.execute()

        # Two entries for the binary item (itself and its name), one for the counter.
        assert live_objects() == before - 3

    def test_clear_releases_unexecuted_items(self, container: TaskContainer) -> None:
        pending = _plus()
        container.push(pending)
        task = ClearContainerTask(container)
        container.push(task)
        del pending

        container.pop().execute()

        assert len(container) == 0

    def test_not_result_producing(self, container: TaskContainer) -> None:
        assert ClearContainerTask(container).is_result_producing() is False


class TestCountLiveObjectsTask:
    def test_not_run_yet(self) -> None:
        assert CountLiveObjectsTask().describe() == "CountLiveObjectsTask wasn't running yet."

    def test_captures_registry(self) -> None:
        task = CountLiveObjectsTask()
        task.execute()
        assert task.result == live_objects()
        assert task.describe() == f"CountLiveObjectsTask result = {live_objects()}"

    def test_refreshes(self, baseline: int) -> None:
        task = CountLiveObjectsTask()
        task.execute()
        assert task.result == baseline + 1
        extra = CountLiveObjectsTask()
        task.execute()
        assert task.result == baseline + 2
        assert extra.result is None
