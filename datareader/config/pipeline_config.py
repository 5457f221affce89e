"""
Pipeline configuration.

A complete pipeline (source, transformer, output) can be described in a
YAML document:

```yaml
source:
  type: file
  path: data/people.csv        # relative to the YAML file
  format: csv                  # optional, inferred from the suffix
transform:
  kind: csv_header
  field_mapping:
    name: full_name
    age: years
  rules:                       # checked after mapping
    full_name:
      - type: required_field
    years:
      - type: range
        params: {min: 0, max: 130}
output:
  format: json
  pretty_print: false
```
"""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from datareader.batch import (
    ArrayData,
    CSVReader,
    CSVWriter,
    File,
    JSONReader,
    JSONWriter,
    OutputFormatter,
    Reader,
    Resource,
    XMLReader,
    XMLWriter,
)
from datareader.core.exceptions import ConfigurationError
from datareader.core.rules import RuleEngine, parse_rules
from datareader.core.transformers import (
    CsvHeaderTransformer,
    HeaderSkippingTransformer,
    IdentityTransformer,
    MappingTransformer,
    Transformer,
)

FORMAT_SUFFIXES = {".csv": "csv", ".tsv": "csv", ".json": "json", ".xml": "xml"}


class SourceConfig(BaseModel):
    """
    Where records come from.

    Attributes:
        type: "file" or "array"
        path: File path (file sources)
        format: csv, json or xml; inferred from the path suffix when omitted
        encoding: File text encoding
        records: Inline records (array sources)
        delimiter: CSV field separator; tab for .tsv paths, comma otherwise
        enclosure: CSV quote character
        item_tag: XML element holding one record
    """

    type: Literal["file", "array"] = "file"
    path: str | None = None
    format: Literal["csv", "json", "xml"] | None = None
    encoding: str = "utf-8"
    records: list[Any] | None = None
    delimiter: str | None = None
    enclosure: str = '"'
    item_tag: str = "item"

    @model_validator(mode="after")
    def check_source(self):
        if self.type == "file":
            if not self.path:
                raise ValueError("file sources require 'path'")
            if self.format is None:
                inferred = FORMAT_SUFFIXES.get(Path(self.path).suffix.lower())
                if inferred is None:
                    raise ValueError(f"cannot infer format from '{self.path}'; set 'format'")
                self.format = inferred
            if self.delimiter is None:
                self.delimiter = "\t" if Path(self.path).suffix.lower() == ".tsv" else ","
        elif self.records is None:
            raise ValueError("array sources require 'records'")
        return self


class TransformConfig(BaseModel):
    """
    Which transformer to build.

    Attributes:
        kind: identity, skip_header, mapping or csv_header
        field_mapping: Source key -> destination key (mapping and csv_header)
        skip_first: Drop the first record (mapping only)
        rules: Validation rules by field, in rule-document form
    """

    kind: Literal["identity", "skip_header", "mapping", "csv_header"] = "identity"
    field_mapping: dict[str | int, str] = Field(default_factory=dict)
    skip_first: bool = False
    rules: dict[str | int, list[dict[str, Any]]] | None = None

    @model_validator(mode="after")
    def check_kind(self):
        if self.kind in ("identity", "skip_header") and (self.field_mapping or self.rules):
            raise ValueError(f"'{self.kind}' transformers take no field_mapping or rules")
        return self


class OutputConfig(BaseModel):
    """
    How records are serialized.
    """

    format: Literal["json", "xml", "csv"] = "json"
    pretty_print: bool = True
    sort_keys: bool = False
    ensure_ascii: bool = True
    root_element: str = "data"
    item_element: str = "item"
    delimiter: str = ","
    enclosure: str = '"'
    line_terminator: str = "\n"


class PipelineConfig(BaseModel):
    source: SourceConfig
    transform: TransformConfig = Field(default_factory=TransformConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


class PipelineConfigLoader:
    """
    Loads and validates a PipelineConfig from YAML.
    """

    def __init__(self, config_path: str | Path):
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise ConfigurationError(f"Pipeline configuration file not found: {config_path}")

    def load(self) -> PipelineConfig:
        """
        Raises:
            ConfigurationError: If the YAML is invalid or fails validation
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        config = self.from_dict(document)

        # Relative source paths are relative to the configuration file
        source = config.source
        if source.path and not Path(source.path).is_absolute():
            source.path = str(self.config_path.parent / source.path)
        return config

    @staticmethod
    def from_dict(document: Any) -> PipelineConfig:
        if not isinstance(document, dict):
            raise ConfigurationError("Pipeline configuration must be a mapping")
        try:
            return PipelineConfig.model_validate(document)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid pipeline configuration: {e}") from e


def build_resource(config: SourceConfig) -> Resource:
    if config.type == "array":
        return ArrayData(config.records)

    if config.format == "csv":
        format_reader = CSVReader(delimiter=config.delimiter, enclosure=config.enclosure)
    elif config.format == "json":
        format_reader = JSONReader()
    else:
        format_reader = XMLReader(item_tag=config.item_tag)
    return File(config.path, format_reader, encoding=config.encoding)


def build_transformer(config: TransformConfig, metrics=None) -> Transformer:
    if config.kind == "identity":
        return IdentityTransformer()
    if config.kind == "skip_header":
        return HeaderSkippingTransformer()

    validators = []
    if config.rules:
        validators = RuleEngine(parse_rules({"rules": config.rules})).validators

    if config.kind == "csv_header":
        return CsvHeaderTransformer(config.field_mapping, validators, metrics=metrics)
    return MappingTransformer(config.field_mapping, validators, skip_first=config.skip_first, metrics=metrics)


def build_output(config: OutputConfig) -> OutputFormatter:
    if config.format == "json":
        return JSONWriter(
            pretty_print=config.pretty_print,
            sort_keys=config.sort_keys,
            ensure_ascii=config.ensure_ascii,
        )
    if config.format == "xml":
        return XMLWriter(
            root_element=config.root_element,
            item_element=config.item_element,
            pretty_print=config.pretty_print,
        )
    return CSVWriter(
        delimiter=config.delimiter,
        enclosure=config.enclosure,
        line_terminator=config.line_terminator,
    )


def build_reader(config: PipelineConfig, logger=None, metrics=None) -> Reader:
    """
    Assemble a Reader from a validated configuration.

    Raises:
        ConfigurationError: If a component rejects its options
    """
    return Reader(
        resource=build_resource(config.source),
        output=build_output(config.output),
        transformer=build_transformer(config.transform, metrics=metrics),
        logger=logger,
        metrics=metrics,
    )
