"""
Unit tests for YAML pipeline configuration.
"""

import pytest

from datareader.batch.readers import CSVReader, XMLReader
from datareader.batch.resources import ArrayData, File
from datareader.batch.writers import CSVWriter, JSONWriter, XMLWriter
from datareader.config import PipelineConfigLoader, build_reader
from datareader.config.pipeline_config import build_output, build_resource, build_transformer
from datareader.core.exceptions import ConfigurationError
from datareader.core.transformers import (
    CsvHeaderTransformer,
    HeaderSkippingTransformer,
    IdentityTransformer,
    MappingTransformer,
)


class TestFromDict:
    """Tests for PipelineConfigLoader.from_dict"""

    def test_minimal_array_pipeline(self):
        config = PipelineConfigLoader.from_dict({"source": {"type": "array", "records": [{"a": 1}]}})

        assert config.transform.kind == "identity"
        assert config.output.format == "json"

    def test_format_inferred_from_suffix(self):
        config = PipelineConfigLoader.from_dict({"source": {"path": "data/people.XML"}})
        assert config.source.format == "xml"

    def test_unknown_suffix_requires_format(self):
        with pytest.raises(ConfigurationError, match="cannot infer format"):
            PipelineConfigLoader.from_dict({"source": {"path": "data/people.txt"}})

    def test_file_source_requires_path(self):
        with pytest.raises(ConfigurationError, match="path"):
            PipelineConfigLoader.from_dict({"source": {"type": "file"}})

    def test_array_source_requires_records(self):
        with pytest.raises(ConfigurationError, match="records"):
            PipelineConfigLoader.from_dict({"source": {"type": "array"}})

    def test_unknown_output_format(self):
        with pytest.raises(ConfigurationError):
            PipelineConfigLoader.from_dict({
                "source": {"type": "array", "records": []},
                "output": {"format": "yaml"},
            })

    def test_identity_rejects_mapping(self):
        with pytest.raises(ConfigurationError, match="take no field_mapping"):
            PipelineConfigLoader.from_dict({
                "source": {"type": "array", "records": []},
                "transform": {"kind": "identity", "field_mapping": {"a": "b"}},
            })

    def test_document_must_be_mapping(self):
        with pytest.raises(ConfigurationError, match="mapping"):
            PipelineConfigLoader.from_dict(["not", "a", "mapping"])


class TestLoader:
    """Tests for loading YAML files"""

    def test_load_resolves_relative_path(self, fixtures_dir):
        config = PipelineConfigLoader(fixtures_dir / "pipeline.yaml").load()

        assert config.source.path == str(fixtures_dir / "people.csv")
        assert config.source.format == "csv"
        assert config.transform.kind == "csv_header"
        assert config.transform.field_mapping == {"name": "full_name", "age": "years"}
        assert config.output.pretty_print is False

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            PipelineConfigLoader(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, write_file):
        path = write_file("pipeline.yaml", "source: [unclosed")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            PipelineConfigLoader(path).load()

    def test_empty_document(self, write_file):
        path = write_file("pipeline.yaml", "")
        with pytest.raises(ConfigurationError):
            PipelineConfigLoader(path).load()


class TestBuilders:
    """Tests for turning configuration into components"""

    def test_build_resource(self):
        config = PipelineConfigLoader.from_dict({
            "source": {"path": "/data/people.tsv", "delimiter": "\t"},
        })
        resource = build_resource(config.source)

        assert isinstance(resource, File)
        assert isinstance(resource.format_reader, CSVReader)
        assert resource.format_reader.delimiter == "\t"

    def test_tsv_defaults_to_tab_delimiter(self, write_file):
        path = write_file("people.tsv", "name\tage\nJohn\t30\n")
        config = PipelineConfigLoader.from_dict({
            "source": {"path": str(path)},
            "transform": {"kind": "csv_header"},
        })

        assert config.source.delimiter == "\t"
        assert build_resource(config.source).apply(build_transformer(config.transform)) == [
            {"name": "John", "age": "30"},
        ]

    def test_csv_defaults_to_comma_and_explicit_delimiter_wins(self):
        csv_config = PipelineConfigLoader.from_dict({"source": {"path": "people.csv"}})
        tsv_config = PipelineConfigLoader.from_dict({"source": {"path": "people.tsv", "delimiter": ";"}})

        assert csv_config.source.delimiter == ","
        assert tsv_config.source.delimiter == ";"

    def test_build_xml_resource(self):
        config = PipelineConfigLoader.from_dict({"source": {"path": "p.xml", "item_tag": "person"}})
        resource = build_resource(config.source)

        assert isinstance(resource.format_reader, XMLReader)
        assert resource.format_reader.item_tag == "person"

    def test_build_array_resource(self):
        config = PipelineConfigLoader.from_dict({"source": {"type": "array", "records": [1, 2]}})
        resource = build_resource(config.source)

        assert isinstance(resource, ArrayData)
        assert resource.raw_data == [1, 2]

    @pytest.mark.parametrize("kind, expected", [
        ("identity", IdentityTransformer),
        ("skip_header", HeaderSkippingTransformer),
        ("mapping", MappingTransformer),
        ("csv_header", CsvHeaderTransformer),
    ])
    def test_build_transformer(self, kind, expected):
        config = PipelineConfigLoader.from_dict({
            "source": {"type": "array", "records": []},
            "transform": {"kind": kind},
        })
        assert isinstance(build_transformer(config.transform), expected)

    def test_rules_become_validators(self):
        config = PipelineConfigLoader.from_dict({
            "source": {"type": "array", "records": []},
            "transform": {
                "kind": "mapping",
                "rules": {
                    "name": [{"type": "required_field"}],
                    "email": [{"type": "regex", "params": {"pattern": "@"}, "severity": "warning"}],
                },
            },
        })
        transformer = build_transformer(config.transform)

        # Warning rules never reject records
        assert len(transformer.validators) == 1

    def test_invalid_rule_is_configuration_error(self):
        config = PipelineConfigLoader.from_dict({
            "source": {"type": "array", "records": []},
            "transform": {"kind": "mapping", "rules": {"a": [{"type": "unknown_rule"}]}},
        })
        with pytest.raises(ConfigurationError):
            build_transformer(config.transform)

    @pytest.mark.parametrize("fmt, expected", [
        ("json", JSONWriter),
        ("xml", XMLWriter),
        ("csv", CSVWriter),
    ])
    def test_build_output(self, fmt, expected):
        config = PipelineConfigLoader.from_dict({
            "source": {"type": "array", "records": []},
            "output": {"format": fmt},
        })
        assert isinstance(build_output(config.output), expected)

    def test_invalid_writer_option(self):
        config = PipelineConfigLoader.from_dict({
            "source": {"type": "array", "records": []},
            "output": {"format": "xml", "root_element": "bad name"},
        })
        with pytest.raises(ConfigurationError):
            build_output(config.output)

    def test_build_reader_runs(self, metrics):
        config = PipelineConfigLoader.from_dict({
            "source": {"type": "array", "records": [{"a": "1"}, {"a": "2"}]},
            "transform": {"kind": "skip_header"},
            "output": {"format": "csv"},
        })

        assert build_reader(config, metrics=metrics).run() == "a\n2\n"
