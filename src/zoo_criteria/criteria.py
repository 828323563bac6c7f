"""Search criteria for looking up a model in a model zoo.

A :class:`Criteria` is an immutable description of the model a caller wants:
its input/output types, application, engine, device, repository coordinates,
metadata filters and loading overrides. Criteria are assembled with a
:class:`CriteriaBuilder`.

Usage:
    from zoo_criteria import Application, Criteria, Device

    criteria = (
        Criteria.builder()
        .set_types(Image, Classifications)
        .opt_application(Application.IMAGE_CLASSIFICATION)
        .opt_artifact_id("ai.djl.zoo:resnet")
        .opt_filter("layers", "50")
        .opt_device(Device.gpu())
        .build()
    )

Builders are not thread-safe. A builder should be owned by a single caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, TypeVar

from zoo_criteria.application import Application
from zoo_criteria.device import Device
from zoo_criteria.exceptions import InvalidConfigurationError
from zoo_criteria.progress import Progress
from zoo_criteria.translate import Block, Translator
from zoo_criteria.zoo.base import ModelZoo
from zoo_criteria.zoo.default import DefaultModelZoo

logger = logging.getLogger(__name__)

I = TypeVar("I")  # noqa: E741
O = TypeVar("O")  # noqa: E741
P = TypeVar("P")
Q = TypeVar("Q")

ARTIFACT_SEPARATOR = ":"


def _freeze(values: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    """Return a read-only copy of a mapping."""
    if values is None:
        return None
    return MappingProxyType(dict(values))


def _copy(values: Optional[Mapping[str, Any]]) -> Optional[dict[str, Any]]:
    if values is None:
        return None
    return dict(values)


def _type_name(cls: Optional[type]) -> Optional[str]:
    if cls is None:
        return None
    module = getattr(cls, "__module__", None)
    qualname = getattr(cls, "__qualname__", repr(cls))
    if module in (None, "builtins"):
        return qualname
    return f"{module}:{qualname}"


@dataclass(frozen=True, repr=False)
class Criteria(Generic[I, O]):
    """Immutable search criteria for a zoo model.

    Create instances with :meth:`Criteria.builder`. Mapping fields are
    read-only views; every other field is a plain reference. Criteria
    compare by value but are not hashable.
    """

    __hash__ = None  # type: ignore[assignment]

    input_class: type[I]
    output_class: type[O]
    application: Optional[Application] = None
    engine: Optional[str] = None
    device: Optional[Device] = None
    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    model_zoo: Optional[ModelZoo] = None
    filters: Optional[Mapping[str, str]] = None
    arguments: Optional[Mapping[str, Any]] = None
    options: Optional[Mapping[str, Any]] = None
    translator: Optional[Translator[I, O]] = None
    block: Optional[Block] = None
    model_name: Optional[str] = None
    progress: Optional[Progress] = None

    @staticmethod
    def builder() -> "CriteriaBuilder[Any, Any]":
        """Create an empty builder."""
        return CriteriaBuilder()

    def to_dict(self) -> dict[str, Any]:
        """Describe the criteria with JSON-friendly values.

        Types are rendered as ``module:qualname``. Collaborator objects
        (translator, block, progress) are rendered as their class names.
        """
        return {
            "application": self.application.value if self.application is not None else None,
            "input_class": _type_name(self.input_class),
            "output_class": _type_name(self.output_class),
            "engine": self.engine,
            "device": str(self.device) if self.device is not None else None,
            "group_id": self.group_id,
            "artifact_id": self.artifact_id,
            "model_zoo": self.model_zoo.group_id if self.model_zoo is not None else None,
            "filters": dict(self.filters) if self.filters is not None else None,
            "arguments": dict(self.arguments) if self.arguments is not None else None,
            "options": dict(self.options) if self.options is not None else None,
            "translator": type(self.translator).__name__ if self.translator is not None else None,
            "block": type(self.block).__name__ if self.block is not None else None,
            "model_name": self.model_name,
            "progress": type(self.progress).__name__ if self.progress is not None else None,
        }

    def __repr__(self) -> str:
        fields = {k: v for k, v in self.to_dict().items() if v is not None}
        body = ", ".join(f"{k}={v!r}" for k, v in fields.items())
        return f"Criteria({body})"


class CriteriaBuilder(Generic[I, O]):
    """Fluent builder for :class:`Criteria`.

    Every ``opt_*`` method sets one field and returns the same builder.
    """

    def __init__(
        self,
        input_class: Optional[type[I]] = None,
        output_class: Optional[type[O]] = None,
    ):
        self.input_class = input_class
        self.output_class = output_class
        self.application: Optional[Application] = None
        self.engine: Optional[str] = None
        self.device: Optional[Device] = None
        self.group_id: Optional[str] = None
        self.artifact_id: Optional[str] = None
        self.model_zoo: Optional[ModelZoo] = None
        self.filters: Optional[dict[str, str]] = None
        self.arguments: Optional[dict[str, Any]] = None
        self.options: Optional[dict[str, Any]] = None
        self.translator: Optional[Translator[I, O]] = None
        self.block: Optional[Block] = None
        self.model_name: Optional[str] = None
        self.progress: Optional[Progress] = None

    def set_types(self, input_class: type[P], output_class: type[Q]) -> "CriteriaBuilder[P, Q]":
        """Create a new builder for a different input and output type.

        Type-independent settings are carried over. The translator, artifact
        id and model zoo were chosen for the old type pair and are not.

        Args:
            input_class: The new input type
            output_class: The new output type

        Returns:
            A new builder; this builder is left unchanged
        """
        builder: CriteriaBuilder[P, Q] = CriteriaBuilder(input_class, output_class)
        builder.application = self.application
        builder.engine = self.engine
        builder.device = self.device
        builder.group_id = self.group_id
        builder.filters = _copy(self.filters)
        builder.arguments = _copy(self.arguments)
        builder.options = _copy(self.options)
        builder.block = self.block
        builder.model_name = self.model_name
        builder.progress = self.progress

        dropped = [
            name
            for name in ("translator", "artifact_id", "model_zoo")
            if getattr(self, name) is not None
        ]
        if dropped:
            logger.debug(
                "Re-typing criteria to (%s, %s) drops %s",
                _type_name(input_class),
                _type_name(output_class),
                ", ".join(dropped),
            )
        return builder

    def opt_application(self, application: Optional[Application]) -> "CriteriaBuilder[I, O]":
        self.application = application
        return self

    def opt_engine(self, engine: Optional[str]) -> "CriteriaBuilder[I, O]":
        """Set the inference engine name (e.g., 'PyTorch', 'OnnxRuntime')."""
        self.engine = engine
        return self

    def opt_device(self, device: Optional[Device]) -> "CriteriaBuilder[I, O]":
        self.device = device
        return self

    def opt_group_id(self, group_id: Optional[str]) -> "CriteriaBuilder[I, O]":
        """Set the group id of the zoo to search."""
        self.group_id = group_id
        return self

    def opt_artifact_id(self, artifact_id: str) -> "CriteriaBuilder[I, O]":
        """Set the artifact id, optionally qualified as ``group:artifact``.

        A qualified id also sets the group id, replacing any earlier value.

        Raises:
            InvalidConfigurationError: If the id has more than one separator
                or an empty group or artifact part
        """
        if ARTIFACT_SEPARATOR in artifact_id:
            tokens = artifact_id.split(ARTIFACT_SEPARATOR)
            if len(tokens) != 2 or not all(tokens):
                raise InvalidConfigurationError(
                    f"Invalid artifact id {artifact_id!r}: expected 'group:artifact'"
                )
            self.group_id, self.artifact_id = tokens
        else:
            self.artifact_id = artifact_id
        return self

    def opt_model_urls(self, model_urls: str) -> "CriteriaBuilder[I, O]":
        """Search an ad-hoc zoo made of the given comma-delimited URLs.

        Replaces any model zoo set earlier.
        """
        self.model_zoo = DefaultModelZoo(model_urls)
        return self

    def opt_model_zoo(self, model_zoo: Optional[ModelZoo]) -> "CriteriaBuilder[I, O]":
        self.model_zoo = model_zoo
        return self

    def opt_filters(self, filters: Optional[Mapping[str, str]]) -> "CriteriaBuilder[I, O]":
        """Replace the search filters that model metadata must match."""
        self.filters = _copy(filters)
        return self

    def opt_filter(self, key: str, value: str) -> "CriteriaBuilder[I, O]":
        if self.filters is None:
            self.filters = {}
        self.filters[key] = value
        return self

    def opt_block(self, block: Optional[Block]) -> "CriteriaBuilder[I, O]":
        """Use ``block`` instead of the computation graph stored in the zoo."""
        self.block = block
        return self

    def opt_model_name(self, model_name: Optional[str]) -> "CriteriaBuilder[I, O]":
        self.model_name = model_name
        return self

    def opt_arguments(self, arguments: Optional[Mapping[str, Any]]) -> "CriteriaBuilder[I, O]":
        """Replace the model loading argument overrides."""
        self.arguments = _copy(arguments)
        return self

    def opt_argument(self, key: str, value: Any) -> "CriteriaBuilder[I, O]":
        if self.arguments is None:
            self.arguments = {}
        self.arguments[key] = value
        return self

    def opt_options(self, options: Optional[Mapping[str, Any]]) -> "CriteriaBuilder[I, O]":
        """Replace the engine-specific loading options."""
        self.options = _copy(options)
        return self

    def opt_option(self, key: str, value: Any) -> "CriteriaBuilder[I, O]":
        if self.options is None:
            self.options = {}
        self.options[key] = value
        return self

    def opt_translator(self, translator: Optional[Translator[I, O]]) -> "CriteriaBuilder[I, O]":
        """Override the model's default translator."""
        self.translator = translator
        return self

    def opt_progress(self, progress: Optional[Progress]) -> "CriteriaBuilder[I, O]":
        self.progress = progress
        return self

    def build(self) -> Criteria[I, O]:
        """Build an immutable snapshot of the current settings.

        The builder is not reset; later changes do not affect criteria that
        were already built.

        Raises:
            InvalidConfigurationError: If the input or output type is not set
        """
        if self.input_class is None or self.output_class is None:
            raise InvalidConfigurationError("Input and output type are required for a Criteria.")

        criteria = Criteria(
            input_class=self.input_class,
            output_class=self.output_class,
            application=self.application,
            engine=self.engine,
            device=self.device,
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            model_zoo=self.model_zoo,
            filters=_freeze(self.filters),
            arguments=_freeze(self.arguments),
            options=_freeze(self.options),
            translator=self.translator,
            block=self.block,
            model_name=self.model_name,
            progress=self.progress,
        )
        logger.debug("Built %r", criteria)
        return criteria
