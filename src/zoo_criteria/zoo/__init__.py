"""Model zoo abstractions.

Example usage:
    from zoo_criteria.zoo import DefaultModelZoo

    zoo = DefaultModelZoo("https://example.com/models/resnet18.zip")
    loader = zoo.get_model_loader("resnet18")
"""

from .base import ModelLoader, ModelZoo
from .default import DefaultModelZoo

__all__ = [
    "DefaultModelZoo",
    "ModelLoader",
    "ModelZoo",
]
