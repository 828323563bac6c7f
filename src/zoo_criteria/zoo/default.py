"""Ad-hoc model zoo backed directly by a list of model URLs."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

from zoo_criteria.exceptions import InvalidConfigurationError
from zoo_criteria.zoo.base import ModelLoader, ModelZoo

logger = logging.getLogger(__name__)

# Compound suffixes come first
_ARCHIVE_SUFFIXES = (".tar.gz", ".tgz", ".tar", ".zip")


def _artifact_name(url: str) -> str:
    """Derive an artifact id from the last path segment of a URL."""
    path = urlparse(url).path or url
    name = path.rstrip("/").rsplit("/", 1)[-1]
    lowered = name.lower()
    for suffix in _ARCHIVE_SUFFIXES:
        if lowered.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return name


class DefaultModelZoo(ModelZoo):
    """Model zoo whose artifacts are the given comma-delimited URLs.

    Example:
        >>> zoo = DefaultModelZoo("https://host/resnet18.zip,file:///models/bert")
        >>> [loader.artifact_id for loader in zoo.list_model_loaders()]
        ['resnet18', 'bert']
    """

    GROUP_ID = "ai.djl.localmodelzoo"

    def __init__(self, model_urls: str):
        urls = [url.strip() for url in model_urls.split(",")]
        self._urls = [url for url in urls if url]
        if not self._urls:
            raise InvalidConfigurationError(f"No model URLs found in {model_urls!r}")

        self._loaders = [
            ModelLoader(group_id=self.GROUP_ID, artifact_id=_artifact_name(url), url=url)
            for url in self._urls
        ]
        logger.debug("Created model zoo for %d url(s): %s", len(self._urls), self._urls)

    @property
    def group_id(self) -> str:
        return self.GROUP_ID

    @property
    def urls(self) -> list[str]:
        return list(self._urls)

    def list_model_loaders(self) -> list[ModelLoader]:
        return list(self._loaders)

    def describe(self) -> dict:
        summary = super().describe()
        summary["urls"] = self.urls
        return summary
