"""Base classes for model zoos.

Defines the abstract interface a model repository exposes to criteria.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ModelLoader:
    """A single artifact published by a zoo."""

    # Identity
    group_id: str
    artifact_id: str

    # Location of the artifact archive or directory
    url: Optional[str] = None

    # Metadata matched against criteria filters
    properties: dict[str, str] = field(default_factory=dict)

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


class ModelZoo(ABC):
    """Abstract base class for model repositories.

    Implementations expose the loaders they publish under a single group id.
    """

    @property
    @abstractmethod
    def group_id(self) -> str:
        """Group id shared by every artifact in the zoo."""
        ...

    @abstractmethod
    def list_model_loaders(self) -> list[ModelLoader]:
        ...

    @property
    def supported_engines(self) -> set[str]:
        """Engine names the zoo can load models for (empty means any)."""
        return set()

    def get_model_loader(self, artifact_id: str) -> Optional[ModelLoader]:
        """Get a loader by artifact id, or None if the zoo does not publish it."""
        for loader in self.list_model_loaders():
            if loader.artifact_id == artifact_id:
                return loader
        return None

    def describe(self) -> dict[str, Any]:
        """Summarize the zoo for display."""
        return {
            "group_id": self.group_id,
            "artifacts": [loader.artifact_id for loader in self.list_model_loaders()],
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(group_id={self.group_id!r})"
