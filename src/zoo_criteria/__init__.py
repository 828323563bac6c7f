"""Zoo Criteria - Search criteria for locating models in a model zoo."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("zoo-criteria")
except PackageNotFoundError:
    # Package not installed (running from source without pip install -e)
    __version__ = "0.0.0.dev"

from .application import Application
from .criteria import Criteria, CriteriaBuilder
from .device import Device
from .exceptions import (
    ConfigLoadError,
    CriteriaError,
    InvalidConfigurationError,
    TypeResolutionError,
)
from .progress import Progress, ProgressBar
from .translate import Block, Translator
from .zoo import DefaultModelZoo, ModelLoader, ModelZoo

__all__ = [
    "Application",
    "Block",
    "ConfigLoadError",
    "Criteria",
    "CriteriaBuilder",
    "CriteriaError",
    "DefaultModelZoo",
    "Device",
    "InvalidConfigurationError",
    "ModelLoader",
    "ModelZoo",
    "Progress",
    "ProgressBar",
    "Translator",
    "TypeResolutionError",
    "__version__",
]
