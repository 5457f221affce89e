"""
Unit tests for rule engine and rule configuration.
"""

import pytest

from datareader.core.exceptions import ConfigurationError
from datareader.core.rules import RuleConfigBuilder, RuleConfigLoader, RuleEngine, parse_rules


class TestRuleEngine:
    """Tests for RuleEngine"""

    def test_validate_record_all_pass(self):
        rules = RuleConfigBuilder() \
            .add_required_field("name") \
            .add_type_check("age", "int") \
            .add_range("age", min_value=0, max_value=130) \
            .build()

        result = RuleEngine(rules).validate_record({"name": "John", "age": "30"})

        assert result.passed is True
        assert result.failed_rules == []
        assert result.passed_rules == ["name_required", "age_type_check", "age_range"]

    def test_validate_record_with_failures(self):
        rules = RuleConfigBuilder() \
            .add_required_field("name") \
            .add_required_field("age") \
            .build()

        result = RuleEngine(rules).validate_record({"name": "John"}, record_index=4)

        assert result.passed is False
        assert result.failed_rules == ["age_required"]
        assert result.record_index == 4

    def test_warning_rules_do_not_fail_record(self):
        rules = RuleConfigBuilder() \
            .add_regex("email", r"^[^@]+@[^@]+$", severity="warning") \
            .build()

        engine = RuleEngine(rules)
        result = engine.validate_record({"email": "broken"})

        assert result.passed is True
        assert result.warnings == ["email_regex"]
        # Warnings never reject records in a validator chain
        assert engine.validators == []

    def test_validators_are_chain_predicates(self):
        rules = RuleConfigBuilder().add_required_field("name").add_range("age", min_value=0).build()
        validators = RuleEngine(rules).validators

        assert len(validators) == 2
        assert all(v({"name": "A", "age": 3}) for v in validators)
        assert not validators[1]({"name": "A", "age": -3})

    def test_disabled_rules_are_skipped(self):
        rules = RuleConfigBuilder().add_required_field("name").build()
        rules[0]["enabled"] = False

        assert RuleEngine(rules).get_rule_summary()["total_rules"] == 0

    def test_unknown_rule_type(self):
        rules = [{"rule_name": "x", "rule_type": "telepathy", "field_name": "a"}]
        with pytest.raises(ConfigurationError, match="Unknown rule type"):
            RuleEngine(rules)

    def test_bad_parameters_raise_configuration_error(self):
        rules = [{"rule_name": "r", "rule_type": "range", "field_name": "a", "parameters": {}}]
        with pytest.raises(ConfigurationError, match="Failed to create validator"):
            RuleEngine(rules)

    def test_rule_summary(self):
        rules = RuleConfigBuilder() \
            .add_required_field("name") \
            .add_required_field("age") \
            .add_regex("email", ".+@.+", severity="warning") \
            .build()

        summary = RuleEngine(rules).get_rule_summary()

        assert summary["total_rules"] == 3
        assert summary["rules_by_type"] == {"required_field": 2, "regex": 1}
        assert summary["rules_by_severity"] == {"error": 2, "warning": 1}

    def test_validate_batch(self):
        rules = RuleConfigBuilder().add_required_field("name").build()
        results = RuleEngine(rules).validate_batch([{"name": "a"}, {}])

        assert [r.passed for r in results] == [True, False]
        assert [r.record_index for r in results] == [0, 1]

    def test_custom_rule(self):
        rules = RuleConfigBuilder().add_custom("age", lambda value, record: value != "0").build()
        engine = RuleEngine(rules)

        assert engine.validate_record({"age": "1"}).passed is True
        assert engine.validate_record({"age": "0"}).passed is False


class TestRuleConfig:
    """Tests for rule documents and the YAML loader"""

    def test_parse_rules(self):
        rules = parse_rules({
            "rules": {
                "age": [
                    {"type": "type_check", "params": {"expected_type": "int"}},
                    {"type": "range", "params": {"min": 0}, "severity": "warning", "name": "age_floor"},
                ]
            }
        })

        assert rules[0]["rule_name"] == "age_type_check_0"
        assert rules[0]["parameters"] == {"expected_type": "int"}
        assert rules[1]["rule_name"] == "age_floor"
        assert rules[1]["severity"] == "warning"

    def test_missing_rules_section(self):
        with pytest.raises(ConfigurationError, match="rules"):
            parse_rules({"other": {}})

    def test_rule_without_type(self):
        with pytest.raises(ConfigurationError, match="missing 'type'"):
            parse_rules({"rules": {"age": [{"params": {}}]}})

    def test_invalid_severity(self):
        with pytest.raises(ConfigurationError, match="severity"):
            parse_rules({"rules": {"age": [{"type": "range", "severity": "fatal"}]}})

    def test_load_rules_from_yaml(self, fixtures_dir):
        rules = RuleConfigLoader(fixtures_dir / "validation_rules.yaml").load_rules()

        assert [r["rule_type"] for r in rules] == ["required_field", "type_check", "range", "regex"]
        assert rules[-1]["severity"] == "warning"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            RuleConfigLoader(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, write_file):
        path = write_file("rules.yaml", "rules: [unclosed")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            RuleConfigLoader(path).load_rules()
