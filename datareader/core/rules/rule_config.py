"""
Rule configuration management.

Loads validation rules from YAML documents and provides a fluent builder
for constructing rule lists in code.
"""

from pathlib import Path
from typing import Any

import yaml

from datareader.core.exceptions import ConfigurationError

SEVERITIES = ("error", "warning")


def parse_rules(document: dict[str, Any] | None) -> list[dict[str, Any]]:
    """
    Turn a rules document into a flat list of rule dictionaries.

    Expected shape (YAML shown):
    ```yaml
    rules:
      name:
        - type: required_field
      age:
        - type: type_check
          params:
            expected_type: int
        - type: range
          params:
            min: 0
            max: 130
          severity: warning
    ```

    Raises:
        ConfigurationError: If the document is malformed
    """
    if not document or "rules" not in document:
        raise ConfigurationError("Rule configuration must contain a 'rules' section")

    field_rules = document["rules"] or {}
    if not isinstance(field_rules, dict):
        raise ConfigurationError("'rules' must map field names to rule lists")

    rules = []
    for field_name, rule_list in field_rules.items():
        if not isinstance(rule_list, list):
            raise ConfigurationError(f"Rules for field '{field_name}' must be a list")
        for idx, rule_def in enumerate(rule_list):
            rules.append(_parse_rule(field_name, rule_def, idx))
    return rules


def _parse_rule(field_name: Any, rule_def: Any, idx: int) -> dict[str, Any]:
    if not isinstance(rule_def, dict) or "type" not in rule_def:
        raise ConfigurationError(f"Rule {idx} for field '{field_name}' is missing 'type'")

    rule_type = rule_def["type"]
    rule_name = rule_def.get("name", f"{field_name}_{rule_type}_{idx}")

    severity = rule_def.get("severity", "error")
    if severity not in SEVERITIES:
        raise ConfigurationError(
            f"Invalid severity '{severity}' for rule '{rule_name}'. Must be 'error' or 'warning'"
        )

    return {
        "rule_name": rule_name,
        "rule_type": rule_type,
        "field_name": field_name,
        "parameters": rule_def.get("params", rule_def.get("parameters", {})) or {},
        "severity": severity,
        "enabled": rule_def.get("enabled", True),
    }


class RuleConfigLoader:
    """
    Loads validation rules from a YAML file.
    """

    def __init__(self, config_path: str | Path):
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise ConfigurationError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> list[dict[str, Any]]:
        """
        Load and parse validation rules.

        Returns:
            List of rule dictionaries suitable for RuleEngine

        Raises:
            ConfigurationError: If the YAML is invalid or malformed
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        return parse_rules(document)


class RuleConfigBuilder:
    """
    Programmatically build rule configurations.
    """

    def __init__(self):
        self.rules: list[dict[str, Any]] = []

    def _add(self, rule_name: str, rule_type: str, field_name: Any,
             parameters: dict[str, Any], severity: str) -> "RuleConfigBuilder":
        if severity not in SEVERITIES:
            raise ConfigurationError(f"Invalid severity '{severity}' for rule '{rule_name}'")
        self.rules.append({
            "rule_name": rule_name,
            "rule_type": rule_type,
            "field_name": field_name,
            "parameters": parameters,
            "severity": severity,
            "enabled": True,
        })
        return self

    def add_required_field(self, field_name: Any, allow_empty_string: bool = False,
                           severity: str = "error") -> "RuleConfigBuilder":
        """Add a required field rule."""
        return self._add(f"{field_name}_required", "required_field", field_name,
                         {"allow_empty_string": allow_empty_string}, severity)

    def add_type_check(self, field_name: Any, expected_type: str, coerce: bool = True,
                       severity: str = "error") -> "RuleConfigBuilder":
        """Add a type check rule."""
        return self._add(f"{field_name}_type_check", "type_check", field_name,
                         {"expected_type": expected_type, "coerce": coerce}, severity)

    def add_range(self, field_name: Any, min_value: float | None = None,
                  max_value: float | None = None, severity: str = "error") -> "RuleConfigBuilder":
        """Add an inclusive range rule."""
        params = {}
        if min_value is not None:
            params["min"] = min_value
        if max_value is not None:
            params["max"] = max_value
        return self._add(f"{field_name}_range", "range", field_name, params, severity)

    def add_regex(self, field_name: Any, pattern: str, severity: str = "error") -> "RuleConfigBuilder":
        """Add a regex rule."""
        return self._add(f"{field_name}_regex", "regex", field_name, {"pattern": pattern}, severity)

    def add_custom(self, field_name: Any, func, error_message: str | None = None,
                   severity: str = "error") -> "RuleConfigBuilder":
        """Add a rule backed by a callable taking (value, record)."""
        params: dict[str, Any] = {"validator_func": func}
        if error_message:
            params["error_message"] = error_message
        return self._add(f"{field_name}_custom", "custom", field_name, params, severity)

    def build(self) -> list[dict[str, Any]]:
        return list(self.rules)
