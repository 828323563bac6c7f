"""Translator and block abstractions consumed by criteria.

A :class:`Translator` converts between application-level objects and the
model's native representation. A :class:`Block` is a computation graph that
replaces the one a model would otherwise load from its repository.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

I = TypeVar("I")  # noqa: E741
O = TypeVar("O")  # noqa: E741


class Translator(ABC, Generic[I, O]):
    """Pre- and post-processing strategy for a model."""

    @abstractmethod
    def process_input(self, ctx: dict[str, Any], input: I) -> Any:
        """Convert an application input into model input."""
        ...

    @abstractmethod
    def process_output(self, ctx: dict[str, Any], output: Any) -> O:
        """Convert raw model output into an application output."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Block(ABC):
    """A computation graph supplied in place of a repository model."""

    @abstractmethod
    def forward(self, inputs: Any) -> Any:
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
