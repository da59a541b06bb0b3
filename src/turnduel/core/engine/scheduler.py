"""Scheduling of paced match steps.

The engine never sleeps. Every pause between steps (the pre-hit wind-up, the
enemy's thinking time, ...) is handed to a ``Scheduler`` as a delayed
callback, so the host decides how time passes:

- ``ManualScheduler`` keeps a virtual clock that the host advances, which is
  what tests and frame-driven hosts want.
- ``ImmediateScheduler`` collapses every delay to zero for headless runs.

Delays are presentation pacing only; both schedulers run callbacks in the
same order and produce the same match outcome.
"""

from __future__ import annotations

import heapq
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Optional


TaskCallback = Callable[[], None]


@dataclass
class ScheduledTask:
    """A callback waiting to run at ``execution_time``."""

    execution_time: float
    sequence_id: int
    callback: TaskCallback = field(compare=False)
    description: str = field(default="", compare=False)
    cancelled: bool = field(default=False, compare=False)

    def __lt__(self, other: "ScheduledTask") -> bool:
        """Define ordering for heap queue.

        Primary: execution_time (earlier times first)
        Secondary: sequence_id (stable ordering for simultaneous tasks)
        """
        if self.execution_time != other.execution_time:
            return self.execution_time < other.execution_time
        return self.sequence_id < other.sequence_id


class Scheduler(ABC):
    """Runs callbacks after a delay measured in seconds."""

    def __init__(self):
        self._sequence_counter = 0

    def _next_sequence(self) -> int:
        self._sequence_counter += 1
        return self._sequence_counter

    @abstractmethod
    def schedule(self, delay: float, callback: TaskCallback, description: str = "") -> ScheduledTask:
        """Schedule ``callback`` to run ``delay`` seconds from now."""
        pass

    @abstractmethod
    def cancel_all(self) -> int:
        """Cancel every pending task. Returns the number cancelled."""
        pass

    @property
    @abstractmethod
    def pending_count(self) -> int:
        pass

    def cancel(self, task: ScheduledTask) -> bool:
        """Cancel a pending task. Returns False if it already ran or was cancelled."""
        if task.cancelled:
            return False
        task.cancelled = True
        return True


class ManualScheduler(Scheduler):
    """Virtual-clock scheduler advanced explicitly by the host."""

    def __init__(self):
        super().__init__()
        self._queue: list[ScheduledTask] = []
        self._current_time: float = 0.0

    @property
    def current_time(self) -> float:
        return self._current_time

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self._queue if not task.cancelled)

    def schedule(self, delay: float, callback: TaskCallback, description: str = "") -> ScheduledTask:
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        task = ScheduledTask(
            execution_time=self._current_time + delay,
            sequence_id=self._next_sequence(),
            callback=callback,
            description=description,
        )
        heapq.heappush(self._queue, task)
        return task

    def cancel(self, task: ScheduledTask) -> bool:
        if task not in self._queue:
            return False
        return super().cancel(task)

    def cancel_all(self) -> int:
        cancelled = self.pending_count
        for task in self._queue:
            task.cancelled = True
        self._queue.clear()
        return cancelled

    def next_task_time(self) -> Optional[float]:
        """Execution time of the earliest pending task, or None."""
        self._drop_cancelled()
        return self._queue[0].execution_time if self._queue else None

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every task that becomes due.

        Tasks scheduled by callbacks are run too if they fall inside the window.

        Returns:
            Number of tasks run
        """
        if seconds < 0:
            raise ValueError(f"Cannot advance by a negative amount: {seconds}")
        target_time = self._current_time + seconds
        processed = 0
        while True:
            self._drop_cancelled()
            if not self._queue or self._queue[0].execution_time > target_time:
                break
            task = heapq.heappop(self._queue)
            self._current_time = task.execution_time
            task.callback()
            processed += 1
        self._current_time = target_time
        return processed

    def run_next(self) -> bool:
        """Jump the clock to the next pending task and run it."""
        next_time = self.next_task_time()
        if next_time is None:
            return False
        task = heapq.heappop(self._queue)
        self._current_time = next_time
        task.callback()
        return True

    def run_until_idle(self, max_tasks: int = 10000) -> int:
        """Run tasks until none are pending.

        Raises:
            RuntimeError: if more than ``max_tasks`` run, which means the
                callbacks keep rescheduling themselves
        """
        processed = 0
        while self.run_next():
            processed += 1
            if processed > max_tasks:
                raise RuntimeError(f"Scheduler did not go idle after {max_tasks} tasks")
        return processed

    def _drop_cancelled(self) -> None:
        while self._queue and self._queue[0].cancelled:
            heapq.heappop(self._queue)


class ImmediateScheduler(Scheduler):
    """Runs every task as soon as possible, ignoring the delay.

    Tasks scheduled from inside a running task are queued and drained by the
    outermost call, so chains of steps never recurse.
    """

    def __init__(self):
        super().__init__()
        self._pending: deque[ScheduledTask] = deque()
        self._draining = False
        self.tasks_run = 0

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self._pending if not task.cancelled)

    def schedule(self, delay: float, callback: TaskCallback, description: str = "") -> ScheduledTask:
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        task = ScheduledTask(
            execution_time=0.0,
            sequence_id=self._next_sequence(),
            callback=callback,
            description=description,
        )
        self._pending.append(task)
        if not self._draining:
            self._drain()
        return task

    def cancel_all(self) -> int:
        cancelled = self.pending_count
        for task in self._pending:
            task.cancelled = True
        self._pending.clear()
        return cancelled

    def _drain(self) -> None:
        self._draining = True
        try:
            while self._pending:
                task = self._pending.popleft()
                if task.cancelled:
                    continue
                task.callback()
                self.tasks_run += 1
        finally:
            self._draining = False
