"""
Rule engine: turns rule dictionaries into validators and applies them.

Transformers take ``engine.validators`` as their validator chain (fast,
short-circuiting accept/reject), while validate_record() runs every rule
and reports which ones passed, failed, or warned.
"""

from typing import Any

from datareader.core.exceptions import ConfigurationError
from datareader.core.models import ValidationResult
from datareader.core.validators import (
    BaseValidator,
    CustomValidator,
    RangeValidator,
    RegexValidator,
    RequiredFieldValidator,
    TypeValidator,
    ValidationError,
)


class RuleEngine:
    """
    Orchestrates validation rules on records.

    Rules are applied in configuration order.
    """

    VALIDATOR_REGISTRY = {
        "required_field": RequiredFieldValidator,
        "type_check": TypeValidator,
        "range": RangeValidator,
        "regex": RegexValidator,
        "custom": CustomValidator,
    }

    def __init__(self, rules: list[dict[str, Any]]):
        """
        Args:
            rules: Rule dictionaries, each containing:
                   - rule_name: str
                   - rule_type: str (required_field, type_check, range, regex, custom)
                   - field_name: str or int
                   - parameters: dict (optional)
                   - severity: "error" or "warning" (default "error")
                   - enabled: bool (default True)
        """
        self.rules = rules
        self.entries: list[tuple[str, str, BaseValidator]] = []
        self._build_validators()

    def _build_validators(self) -> None:
        for rule in self.rules:
            if not rule.get("enabled", True):
                continue

            rule_name = rule["rule_name"]
            validator_class = self.VALIDATOR_REGISTRY.get(rule["rule_type"])
            if not validator_class:
                raise ConfigurationError(f"Unknown rule type: {rule['rule_type']}")

            try:
                validator = validator_class(rule["field_name"], rule.get("parameters", {}))
            except ValueError as e:
                raise ConfigurationError(f"Failed to create validator for rule '{rule_name}': {e}") from e

            self.entries.append((rule_name, rule.get("severity", "error"), validator))

    @property
    def validators(self) -> list[BaseValidator]:
        """Error-severity validators, in order; warnings never reject a record."""
        return [validator for _, severity, validator in self.entries if severity == "error"]

    def validate_record(self, record: Any, record_index: int | None = None) -> ValidationResult:
        """
        Run every enabled rule against ``record``.

        Args:
            record: Mapping or positional record
            record_index: Optional source position, copied into the result

        Returns:
            ValidationResult with per-rule outcomes
        """
        passed_rules = []
        failed_rules = []
        warnings = []

        for rule_name, severity, validator in self.entries:
            try:
                validator.check(record)
                passed_rules.append(rule_name)
            except ValidationError:
                if severity == "error":
                    failed_rules.append(rule_name)
                else:
                    warnings.append(rule_name)

        return ValidationResult(
            record_index=record_index,
            passed=not failed_rules,
            passed_rules=passed_rules,
            failed_rules=failed_rules,
            warnings=warnings,
        )

    def validate_batch(self, records: list[Any]) -> list[ValidationResult]:
        return [self.validate_record(record, idx) for idx, record in enumerate(records)]

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Summarize the loaded rules.

        Returns:
            Dictionary with total count and counts by type and severity
        """
        by_type: dict[str, int] = {}
        by_severity: dict[str, int] = {}
        for _, severity, validator in self.entries:
            by_type[validator.rule_type] = by_type.get(validator.rule_type, 0) + 1
            by_severity[severity] = by_severity.get(severity, 0) + 1

        return {
            "total_rules": len(self.entries),
            "rules_by_type": by_type,
            "rules_by_severity": by_severity,
        }
