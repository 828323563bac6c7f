"""Progress reporting for model loading.

:class:`Progress` is the sink interface handed to criteria. :class:`ProgressBar`
renders it with rich.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console
from rich.progress import BarColumn, Progress as RichProgress, TaskID, TextColumn, TimeElapsedColumn


class Progress(ABC):
    """Receives progress updates while a model is materialized."""

    @abstractmethod
    def reset(self, message: str, max_value: int) -> None:
        """Begin a new unit of work with ``max_value`` steps."""
        ...

    @abstractmethod
    def start(self, initial: int = 0) -> None:
        ...

    @abstractmethod
    def end(self) -> None:
        ...

    @abstractmethod
    def increment(self, n: int = 1) -> None:
        ...

    @abstractmethod
    def update(self, value: int, message: Optional[str] = None) -> None:
        """Set the absolute progress, optionally replacing the message."""
        ...


class ProgressBar(Progress):
    """Terminal progress bar built on ``rich.progress``."""

    def __init__(self, console: Optional[Console] = None):
        self._progress = RichProgress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total}"),
            TimeElapsedColumn(),
            console=console,
        )
        self._task: Optional[TaskID] = None
        self._running = False
        self.message = ""
        self.max_value = 0
        self.value = 0

    def reset(self, message: str, max_value: int) -> None:
        if self._task is not None:
            self._progress.remove_task(self._task)
        self.message = message
        self.max_value = max_value
        self.value = 0
        self._task = self._progress.add_task(f"[cyan]{message}", total=max_value)

    def start(self, initial: int = 0) -> None:
        if self._task is None:
            raise RuntimeError("reset() must be called before start()")
        if not self._running:
            self._progress.start()
            self._running = True
        self.update(initial)

    def end(self) -> None:
        if self._task is not None:
            self.update(self.max_value)
        if self._running:
            self._progress.stop()
            self._running = False

    def increment(self, n: int = 1) -> None:
        self.update(self.value + n)

    def update(self, value: int, message: Optional[str] = None) -> None:
        if self._task is None:
            raise RuntimeError("reset() must be called before update()")
        self.value = min(value, self.max_value) if self.max_value else value
        if message is not None:
            self.message = message
            self._progress.update(self._task, completed=self.value, description=f"[cyan]{message}")
        else:
            self._progress.update(self._task, completed=self.value)
