"""Unit tests for RuleConfig normalization and ConfigurationLoader validation."""

import unittest

from explicit_generics_linter.domain.config import ConfigurationLoader, RuleConfig
from explicit_generics_linter.domain.exceptions import InvalidConfigurationError


class TestRuleConfigNormalize(unittest.TestCase):
    """RuleConfig.normalize accepts a name list or a name -> count mapping."""

    def test_name_list_requires_one_generic_each(self) -> None:
        config = RuleConfig.normalize(["foo", "bar"])
        self.assertEqual(dict(config), {"foo": 1, "bar": 1})

    def test_list_and_mapping_are_equivalent(self) -> None:
        self.assertEqual(
            dict(RuleConfig.normalize(["foo", "bar"])),
            dict(RuleConfig.normalize({"foo": 1, "bar": 1})),
        )

    def test_mapping_is_copied_in_order(self) -> None:
        config = RuleConfig.normalize({"Obj.method": 2, "*.method": 1, "make": 3})
        self.assertEqual(list(config), ["Obj.method", "*.method", "make"])
        self.assertEqual(config["make"], 3)

    def test_duplicate_names_last_write_wins(self) -> None:
        config = RuleConfig.normalize(["foo", "foo"])
        self.assertEqual(dict(config), {"foo": 1})

    def test_zero_count_disables_name(self) -> None:
        config = RuleConfig({"foo": 2, "bar": 0})
        self.assertNotIn("bar", config)
        self.assertEqual(len(config), 1)

    def test_absent_or_empty_normalizes_to_empty(self) -> None:
        self.assertEqual(len(RuleConfig.normalize(None)), 0)
        self.assertEqual(len(RuleConfig.normalize([])), 0)
        self.assertEqual(len(RuleConfig.normalize({})), 0)

    def test_first_match_prefers_earlier_candidates(self) -> None:
        config = RuleConfig.normalize({"*.method": 1, "Obj.method": 2})
        self.assertEqual(
            config.first_match(["Obj.method", "*.method", "method"]), "Obj.method")
        self.assertEqual(
            config.first_match(["Other.method", "*.method", "method"]), "*.method")
        self.assertIsNone(config.first_match(["Other.call", "*.call", "call"]))
        self.assertIsNone(config.first_match([]))


class TestConfigurationLoader(unittest.TestCase):
    """ConfigurationLoader validates [tool.explicit-generics] before normalizing."""

    def test_without_names(self) -> None:
        loader = ConfigurationLoader({})
        self.assertFalse(loader.has_names)
        self.assertEqual(len(loader.rule_config), 0)

    def test_list_of_names(self) -> None:
        loader = ConfigurationLoader({"names": ["Queue", "TypeAdapter"]})
        self.assertTrue(loader.has_names)
        self.assertEqual(loader.rule_config["Queue"], 1)

    def test_table_of_counts(self) -> None:
        loader = ConfigurationLoader({"names": {"Mapper.build": 2}})
        self.assertEqual(loader.rule_config["Mapper.build"], 2)

    def test_rejects_empty_list(self) -> None:
        with self.assertRaises(InvalidConfigurationError):
            ConfigurationLoader({"names": []})

    def test_rejects_repeated_names(self) -> None:
        with self.assertRaises(InvalidConfigurationError) as ctx:
            ConfigurationLoader({"names": ["foo", "foo"]})
        self.assertEqual(ctx.exception.key, "foo")

    def test_rejects_non_string_names(self) -> None:
        with self.assertRaises(InvalidConfigurationError):
            ConfigurationLoader({"names": ["foo", 3]})

    def test_rejects_counts_below_one(self) -> None:
        with self.assertRaises(InvalidConfigurationError) as ctx:
            ConfigurationLoader({"names": {"foo": 0}})
        self.assertEqual(ctx.exception.key, "foo")

    def test_rejects_boolean_and_string_counts(self) -> None:
        for bad in (True, "2", 1.5):
            with self.subTest(bad=bad), self.assertRaises(InvalidConfigurationError):
                ConfigurationLoader({"names": {"foo": bad}})

    def test_rejects_other_shapes(self) -> None:
        with self.assertRaises(InvalidConfigurationError):
            ConfigurationLoader({"names": "foo"})

    def test_invalid_configuration_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            ConfigurationLoader({"names": "foo"})

    def test_with_names_replaces_names(self) -> None:
        loader = ConfigurationLoader({"names": ["foo"]})
        replaced = loader.with_names({"bar": 2})
        self.assertNotIn("foo", replaced.rule_config)
        self.assertEqual(replaced.rule_config["bar"], 2)
        self.assertIn("foo", loader.rule_config)
