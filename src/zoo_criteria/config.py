"""YAML configuration for criteria.

A configuration file holds the plain-valued criteria settings. Collaborator
objects (translators, blocks, progress sinks) are attached in code after the
builder is created.

Example file:
    application: cv/image_classification
    input_class: PIL.Image:Image
    output_class: builtins.dict
    engine: PyTorch
    device: gpu0
    artifact_id: ai.djl.pytorch:resnet
    filters:
      layers: "50"
    arguments:
      width: 224
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from zoo_criteria.application import Application
from zoo_criteria.criteria import Criteria, CriteriaBuilder
from zoo_criteria.device import Device
from zoo_criteria.exceptions import ConfigLoadError, TypeResolutionError
from zoo_criteria.zoo.default import DefaultModelZoo

logger = logging.getLogger(__name__)


def resolve_type(name: str) -> type:
    """Import a type from a dotted name.

    Accepts ``package.module.Class``, ``package.module:Class`` and builtin
    names such as ``str``.

    Raises:
        TypeResolutionError: If the module or attribute cannot be found, or
            the attribute is not a type
    """
    name = name.strip()
    if ":" in name:
        module_name, _, attr_path = name.partition(":")
    elif "." in name:
        module_name, _, attr_path = name.rpartition(".")
    else:
        module_name, attr_path = "builtins", name

    if not module_name or module_name.startswith("."):
        raise TypeResolutionError(f"Type {name!r} needs an absolute module name")

    try:
        obj: Any = importlib.import_module(module_name)
    except (ImportError, ValueError, TypeError) as e:
        raise TypeResolutionError(f"Cannot import module for type {name!r}: {e}") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TypeResolutionError(f"Type {name!r} not found") from e

    if not isinstance(obj, type):
        raise TypeResolutionError(f"{name!r} is not a type")
    return obj


class CriteriaConfig(BaseModel):
    """Plain-valued criteria settings loaded from a file."""

    model_config = ConfigDict(extra="forbid", protected_namespaces=())

    application: Optional[Application] = Field(
        default=None,
        description="Model application path (e.g., cv/object_detection)",
    )
    input_class: Optional[str] = Field(
        default=None,
        description="Dotted name of the model input type",
    )
    output_class: Optional[str] = Field(
        default=None,
        description="Dotted name of the model output type",
    )
    engine: Optional[str] = Field(default=None, description="Inference engine name")
    device: Optional[str] = Field(
        default=None,
        description="Device name (cpu, gpu, gpu1, gpu(1))",
    )
    group_id: Optional[str] = None
    artifact_id: Optional[str] = Field(
        default=None,
        description="Artifact id, optionally qualified as group:artifact",
    )
    model_urls: Optional[str] = Field(
        default=None,
        description="Comma-delimited model URLs for an ad-hoc zoo",
    )
    filters: Optional[dict[str, str]] = None
    arguments: Optional[dict[str, Any]] = None
    options: Optional[dict[str, Any]] = None
    model_name: Optional[str] = None

    @field_validator("application", mode="before")
    @classmethod
    def _parse_application(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Application.of(value)
        return value

    @field_validator("device")
    @classmethod
    def _check_device(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            Device.from_name(value)
        return value

    @field_validator("filters", mode="before")
    @classmethod
    def _stringify_filters(cls, value: Any) -> Any:
        # YAML turns `layers: 50` into an int; filters are exact string matches
        if isinstance(value, dict):
            return {str(k): str(v) for k, v in value.items()}
        return value

    def to_builder(self) -> CriteriaBuilder[Any, Any]:
        """Replay the settings on a new builder.

        Raises:
            TypeResolutionError: If a type name cannot be imported
            InvalidConfigurationError: If the artifact id or model URLs
                are malformed
        """
        builder: CriteriaBuilder[Any, Any] = Criteria.builder()
        builder.input_class = resolve_type(self.input_class) if self.input_class else None
        builder.output_class = resolve_type(self.output_class) if self.output_class else None

        builder.opt_application(self.application)
        builder.opt_engine(self.engine)
        if self.device is not None:
            builder.opt_device(Device.from_name(self.device))
        # Group id first so a qualified artifact id overrides it
        builder.opt_group_id(self.group_id)
        if self.artifact_id is not None:
            builder.opt_artifact_id(self.artifact_id)
        if self.model_urls is not None:
            builder.opt_model_urls(self.model_urls)
        builder.opt_filters(self.filters)
        builder.opt_arguments(self.arguments)
        builder.opt_options(self.options)
        builder.opt_model_name(self.model_name)
        return builder


def load_criteria_config(path: Union[str, Path]) -> CriteriaConfig:
    """Load a criteria configuration from a YAML file.

    Raises:
        ConfigLoadError: If the file cannot be read or does not match the schema
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigLoadError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"{path}: expected a mapping at the top level")

    try:
        config = CriteriaConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid criteria configuration in {path}:\n{e}") from e

    logger.info("Loaded criteria configuration from %s", path)
    return config


def load_criteria(path: Union[str, Path]) -> Criteria[Any, Any]:
    """Load a configuration file and build the criteria it describes."""
    return load_criteria_config(path).to_builder().build()


def criteria_to_yaml(criteria: Criteria[Any, Any]) -> str:
    """Render the file-configurable part of a criteria as YAML.

    The output can be read back with :func:`load_criteria`. Translators,
    blocks, progress sinks and zoos other than URL zoos are left out.
    """
    data = {
        k: v
        for k, v in criteria.to_dict().items()
        if k in CriteriaConfig.model_fields and v is not None
    }
    if isinstance(criteria.model_zoo, DefaultModelZoo):
        data["model_urls"] = ",".join(criteria.model_zoo.urls)
    return yaml.dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
