"""Template rendering tests."""

import json
from datetime import date

import pytest
import yaml

from glueflow.services.template_service import (
    prune_empty_values,
    render_template,
    resources_section,
)


class TestPruneEmptyValues:
    def test_drops_none_recursively(self):
        value = {
            "Properties": {"Schedule": None, "Name": "c1", "Targets": [{"Path": None, "Exclusions": []}]},
        }
        assert prune_empty_values(value) == {
            "Properties": {"Name": "c1", "Targets": [{"Exclusions": []}]},
        }

    def test_keeps_falsy_values(self):
        assert prune_empty_values({"MaxRetries": 0, "Tags": {}, "Flag": False}) == {
            "MaxRetries": 0,
            "Tags": {},
            "Flag": False,
        }


class TestRenderTemplate:
    def test_json(self):
        output = render_template({"Resources": {"A": {"Type": "T", "Properties": {"X": None}}}})
        assert json.loads(output) == {"Resources": {"A": {"Type": "T", "Properties": {}}}}

    def test_json_renders_dates_as_text(self):
        output = render_template({"custom": {"releaseDate": date(2024, 1, 1)}})
        assert json.loads(output) == {"custom": {"releaseDate": "2024-01-01"}}

    def test_yaml_preserves_order(self):
        output = render_template({"b": 1, "a": 2}, output_format="yaml")
        assert output.index("b:") < output.index("a:")
        assert yaml.safe_load(output) == {"b": 1, "a": 2}

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown output format"):
            render_template({}, output_format="toml")


class TestResourcesSection:
    def test_missing(self):
        assert resources_section({}) == {}

    def test_present(self):
        service = {"resources": {"Resources": {"A": {"Type": "T"}}}}
        assert resources_section(service) == {"A": {"Type": "T"}}
