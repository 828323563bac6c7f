"""Tests for YAML criteria configuration."""

from collections import OrderedDict

import pytest
import yaml

from zoo_criteria import (
    Application,
    ConfigLoadError,
    Criteria,
    DefaultModelZoo,
    Device,
    InvalidConfigurationError,
    TypeResolutionError,
)
from zoo_criteria.config import (
    CriteriaConfig,
    criteria_to_yaml,
    load_criteria,
    load_criteria_config,
    resolve_type,
)


class Envelope:
    class Payload:
        pass


FULL_CONFIG = """
application: cv/image_classification
input_class: builtins.str
output_class: collections:OrderedDict
engine: PyTorch
device: gpu(1)
group_id: ignored.group
artifact_id: ai.djl.pytorch:resnet
filters:
  layers: 50
  dataset: imagenet
arguments:
  width: 224
  normalize: true
options:
  mapLocation: true
model_name: resnet50
"""


# ============================================================================
# Type resolution
# ============================================================================


class TestResolveType:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("str", str),
            ("builtins.int", int),
            ("collections.OrderedDict", OrderedDict),
            ("collections:OrderedDict", OrderedDict),
        ],
    )
    def test_resolves(self, name, expected):
        assert resolve_type(name) is expected

    def test_missing_module(self):
        with pytest.raises(TypeResolutionError, match="Cannot import"):
            resolve_type("no_such_module_xyz.Thing")

    @pytest.mark.parametrize("name", [":Foo", ".Foo", "..x", ".collections:OrderedDict"])
    def test_relative_or_empty_module(self, name):
        with pytest.raises(TypeResolutionError, match="absolute module name"):
            resolve_type(name)

    def test_missing_attribute(self):
        with pytest.raises(TypeResolutionError, match="not found"):
            resolve_type("collections.NoSuchThing")

    def test_not_a_type(self):
        with pytest.raises(TypeResolutionError, match="is not a type"):
            resolve_type("os.path:join")

    def test_is_invalid_configuration(self):
        with pytest.raises(InvalidConfigurationError):
            resolve_type("collections.NoSuchThing")


# ============================================================================
# Loading
# ============================================================================


class TestLoadCriteria:
    def test_full_config(self, write_yaml):
        criteria = load_criteria(write_yaml(FULL_CONFIG))
        assert criteria.application is Application.IMAGE_CLASSIFICATION
        assert criteria.input_class is str
        assert criteria.output_class is OrderedDict
        assert criteria.engine == "PyTorch"
        assert criteria.device == Device.gpu(1)
        assert criteria.group_id == "ai.djl.pytorch"
        assert criteria.artifact_id == "resnet"
        assert criteria.filters == {"layers": "50", "dataset": "imagenet"}
        assert criteria.arguments == {"width": 224, "normalize": True}
        assert criteria.options == {"mapLocation": True}
        assert criteria.model_name == "resnet50"

    def test_model_urls(self, write_yaml):
        path = write_yaml(
            "input_class: str\noutput_class: str\nmodel_urls: http://a/m1.zip,http://a/m2.zip\n"
        )
        criteria = load_criteria(path)
        assert isinstance(criteria.model_zoo, DefaultModelZoo)
        assert [loader.artifact_id for loader in criteria.model_zoo.list_model_loaders()] == ["m1", "m2"]

    def test_missing_types_fail_at_build(self, write_yaml):
        path = write_yaml("engine: PyTorch\n")
        config = load_criteria_config(path)
        assert config.engine == "PyTorch"
        with pytest.raises(InvalidConfigurationError, match="Input and output type"):
            config.to_builder().build()

    def test_malformed_artifact_id(self, write_yaml):
        path = write_yaml("input_class: str\noutput_class: str\nartifact_id: a:b:c\n")
        with pytest.raises(InvalidConfigurationError):
            load_criteria(path)

    def test_empty_file(self, write_yaml):
        config = load_criteria_config(write_yaml(""))
        assert config == CriteriaConfig()

    def test_unknown_field(self, write_yaml):
        with pytest.raises(ConfigLoadError, match="Invalid criteria configuration"):
            load_criteria_config(write_yaml("engin: PyTorch\n"))

    def test_invalid_device(self, write_yaml):
        with pytest.raises(ConfigLoadError):
            load_criteria_config(write_yaml("device: quantum-7\n"))

    def test_invalid_application(self, write_yaml):
        with pytest.raises(ConfigLoadError):
            load_criteria_config(write_yaml("application: cv/unknown\n"))

    def test_application_case_insensitive(self, write_yaml):
        config = load_criteria_config(write_yaml("application: ' CV/Image_Classification '\n"))
        assert config.application is Application.IMAGE_CLASSIFICATION

    def test_not_a_mapping(self, write_yaml):
        with pytest.raises(ConfigLoadError, match="expected a mapping"):
            load_criteria_config(write_yaml("- a\n- b\n"))

    def test_invalid_yaml(self, write_yaml):
        with pytest.raises(ConfigLoadError, match="Invalid YAML"):
            load_criteria_config(write_yaml("filters: {a: [\n"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigLoadError, match="Cannot read"):
            load_criteria_config(tmp_path / "missing.yaml")

    def test_builder_is_editable(self, write_yaml, translator):
        builder = load_criteria_config(write_yaml(FULL_CONFIG)).to_builder()
        criteria = builder.opt_translator(translator).opt_filter("extra", "1").build()
        assert criteria.translator is translator
        assert criteria.filters["extra"] == "1"


# ============================================================================
# Dumping
# ============================================================================


class TestCriteriaToYaml:
    def test_renders_populated_fields(self, write_yaml):
        criteria = load_criteria(write_yaml(FULL_CONFIG))
        data = yaml.safe_load(criteria_to_yaml(criteria))
        assert data["application"] == "cv/image_classification"
        assert data["input_class"] == "str"
        assert data["output_class"] == "collections:OrderedDict"
        assert data["device"] == "gpu(1)"
        assert data["filters"] == {"layers": "50", "dataset": "imagenet"}
        assert "translator" not in data

    def test_model_urls_rendered(self, write_yaml, translator):
        criteria = (
            load_criteria_config(write_yaml(FULL_CONFIG))
            .to_builder()
            .opt_model_urls("http://a/m1.zip,http://a/m2.zip")
            .opt_translator(translator)
            .build()
        )
        data = yaml.safe_load(criteria_to_yaml(criteria))
        assert data["model_urls"] == "http://a/m1.zip,http://a/m2.zip"
        assert "model_zoo" not in data
        assert "translator" not in data

    def test_round_trip_through_config(self, write_yaml):
        original = load_criteria(write_yaml(FULL_CONFIG))
        reloaded = load_criteria(write_yaml(criteria_to_yaml(original), name="dump.yaml"))
        assert reloaded == original

    def test_nested_class_round_trip(self, write_yaml):
        original = Criteria.builder().set_types(Envelope.Payload, str).build()
        text = criteria_to_yaml(original)
        assert yaml.safe_load(text)["input_class"].endswith(":Envelope.Payload")
        reloaded = load_criteria(write_yaml(text, name="nested.yaml"))
        assert reloaded.input_class is Envelope.Payload
        assert reloaded == original
