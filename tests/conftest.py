"""Pytest configuration for zoo-criteria tests."""

import pytest

from zoo_criteria import Block, Translator


class UpperTranslator(Translator[str, str]):
    """Translator that upper-cases text on the way out."""

    def process_input(self, ctx, input):
        return input

    def process_output(self, ctx, output):
        return str(output).upper()


class IdentityBlock(Block):
    def forward(self, inputs):
        return inputs


@pytest.fixture
def translator():
    return UpperTranslator()


@pytest.fixture
def block():
    return IdentityBlock()


@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "criteria.yaml"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
