"""Configuration for the explicit generics rule. Immutable value object created by Infrastructure."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from explicit_generics_linter.domain.constants import CONFIG_NAMES_KEY
from explicit_generics_linter.domain.exceptions import InvalidConfigurationError


class RuleConfig(Mapping[str, int]):
    """
    Canonical mapping from candidate name to the minimum explicit generic count.

    Insertion ordered; later duplicates overwrite earlier ones. Entries with a
    count of 0 are dropped so they never match.
    """

    def __init__(self, entries: Mapping[str, int] | None = None) -> None:
        self._entries: dict[str, int] = {}
        for name, count in (entries or {}).items():
            self._entries.pop(name, None)
            if count:
                self._entries[name] = count

    @classmethod
    def normalize(cls, raw: object) -> RuleConfig:
        """Convert a name list or a name -> count mapping into a RuleConfig.

        Shapes are validated by ``ConfigurationLoader.validate_names`` before
        they get here; anything else normalizes to an empty config.
        """
        if isinstance(raw, (list, tuple)):
            return cls({name: 1 for name in raw})
        if isinstance(raw, Mapping):
            return cls(raw)
        return cls()

    def __getitem__(self, name: str) -> int:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RuleConfig({self._entries!r})"

    def first_match(self, names: list[str]) -> str | None:
        """Return the first candidate name that has a configured rule."""
        return next((name for name in names if name in self._entries), None)


class ConfigurationLoader:
    """
    Immutable configuration for linter settings.

    Created by Infrastructure from the [tool.explicit-generics] table. Domain does
    not read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        """Set config once at construction. No mutable state after init."""
        self._config = config_dict
        raw_names = self._config.get(CONFIG_NAMES_KEY)
        if raw_names is not None:
            ConfigurationLoader.validate_names(raw_names)
        self._rule_config = RuleConfig.normalize(raw_names)

    @staticmethod
    def validate_names(raw: object) -> None:
        """Reject anything other than a list of unique strings or a name -> int >= 1 table."""
        if isinstance(raw, list):
            if not raw:
                raise InvalidConfigurationError(
                    f"'{CONFIG_NAMES_KEY}' must list at least one name.", key=CONFIG_NAMES_KEY)
            seen: set[str] = set()
            for item in raw:
                if not isinstance(item, str):
                    raise InvalidConfigurationError(
                        f"'{CONFIG_NAMES_KEY}' entries must be strings, got {item!r}.",
                        key=CONFIG_NAMES_KEY,
                    )
                if item in seen:
                    raise InvalidConfigurationError(
                        f"'{CONFIG_NAMES_KEY}' entries must be unique, '{item}' is repeated.",
                        key=item,
                    )
                seen.add(item)
            return
        if isinstance(raw, dict):
            for name, count in raw.items():
                if not isinstance(name, str):
                    raise InvalidConfigurationError(
                        f"'{CONFIG_NAMES_KEY}' keys must be strings, got {name!r}.",
                        key=CONFIG_NAMES_KEY,
                    )
                # bool is an int subclass; true/false in TOML is a typo, not a count.
                if isinstance(count, bool) or not isinstance(count, int) or count < 1:
                    raise InvalidConfigurationError(
                        f"Expected count for '{name}' must be an integer >= 1, got {count!r}.",
                        key=name,
                    )
            return
        raise InvalidConfigurationError(
            f"'{CONFIG_NAMES_KEY}' must be a list of names or a table of name = count.",
            key=CONFIG_NAMES_KEY,
        )

    @property
    def rule_config(self) -> RuleConfig:
        """Return the canonical name -> minimum generics mapping."""
        return self._rule_config

    @property
    def has_names(self) -> bool:
        """Whether any callable names were configured."""
        return bool(self._rule_config)

    def with_names(self, raw: object) -> ConfigurationLoader:
        """Return a copy whose names are replaced, e.g. by CLI overrides."""
        config = dict(self._config)
        config[CONFIG_NAMES_KEY] = raw
        return ConfigurationLoader(config)
