"""Configuration model and loaders for cleanpaste.

Responsibilities:
- Define the cleaning rule flags as an immutable dataclass.
- Merge stored, environment and CLI overrides over defaults deterministically.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `CleaningConfig`: four independent rule toggles, all enabled by default.
- `ConfigLoader`: static construction helpers for `CleaningConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Any, Mapping

import yaml


RULE_NAMES: tuple[str, ...] = (
    "remove_reference_marks",
    "remove_extra_spaces",
    "remove_newlines",
    "convert_full_width",
)

# camelCase keys written by the editor plugin's settings file.
_LEGACY_KEY_ALIASES = {
    "removeReferenceMarks": "remove_reference_marks",
    "removeExtraSpaces": "remove_extra_spaces",
    "removeNewlines": "remove_newlines",
    "convertFullWidth": "convert_full_width",
}

_ENV_KEYS = {
    "CLEANPASTE_REMOVE_REFERENCE_MARKS": "remove_reference_marks",
    "CLEANPASTE_REMOVE_EXTRA_SPACES": "remove_extra_spaces",
    "CLEANPASTE_REMOVE_NEWLINES": "remove_newlines",
    "CLEANPASTE_CONVERT_FULL_WIDTH": "convert_full_width",
}

_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if value is None:
        return None

    token = str(value).strip().lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def _canonical_key(key: object) -> str | None:
    """Map a snake_case or legacy camelCase key onto a rule name."""

    text = str(key).strip()
    text = _LEGACY_KEY_ALIASES.get(text, text)
    if text in RULE_NAMES:
        return text
    return None


@dataclass(frozen=True, slots=True)
class CleaningConfig:
    """Rule toggles for one cleaning call.

    Attributes:
        remove_reference_marks: Drop numeric `[..]` / `(..)` citation markers.
        remove_extra_spaces: Delete every run of ASCII spaces.
        remove_newlines: Delete every run of CR/LF characters.
        convert_full_width: Map U+FF01..U+FF5E to their ASCII counterparts.
    """

    remove_reference_marks: bool = True
    remove_extra_spaces: bool = True
    remove_newlines: bool = True
    convert_full_width: bool = True

    @classmethod
    def all_disabled(cls) -> CleaningConfig:
        """Return a config with every rule switched off."""

        return cls(**{name: False for name in RULE_NAMES})

    @classmethod
    def only(cls, *names: str) -> CleaningConfig:
        """Return a config enabling just the given rules."""

        unknown = sorted(set(names).difference(RULE_NAMES))
        if unknown:
            raise ValueError(f"Unknown cleaning rule(s): {', '.join(unknown)}.")
        return cls(**{name: name in names for name in RULE_NAMES})

    def is_enabled(self, rule_name: str) -> bool:
        """Return whether the named rule should run."""

        if rule_name not in RULE_NAMES:
            return False
        return bool(getattr(self, rule_name))

    def enabled_rules(self) -> tuple[str, ...]:
        """Return enabled rule names in pipeline order."""

        return tuple(name for name in RULE_NAMES if self.is_enabled(name))

    def as_mapping(self) -> dict[str, bool]:
        """Return flags keyed by rule name in pipeline order."""

        return {name: self.is_enabled(name) for name in RULE_NAMES}

    def merged(
        self, overrides: Mapping[str, object], source_label: str = "overrides"
    ) -> CleaningConfig:
        """Return a copy with `overrides` applied over the current flags.

        Keys may be snake_case rule names or legacy camelCase names; `None`
        values leave the current flag in place.

        Raises:
            ValueError: On unknown keys or non-boolean values.
        """

        values = self.as_mapping()
        for raw_key, raw_value in overrides.items():
            key = _canonical_key(raw_key)
            if key is None:
                raise ValueError(f"{source_label} includes unsupported key: {raw_key}.")
            if raw_value is None:
                continue
            parsed = parse_permissive_boolean(raw_value)
            if parsed is None:
                raise ValueError(
                    f"{source_label} field `{key}` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            values[key] = parsed
        return CleaningConfig(**values)


class ConfigLoader:
    """Factory methods for creating `CleaningConfig` from external sources."""

    @staticmethod
    def from_yaml(path: Path) -> CleaningConfig:
        """Create a config from a YAML (or `.json`) settings file merged over defaults."""

        path_text = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            try:
                payload = json.loads(path_text) if path_text.strip() else None
            except json.JSONDecodeError as exc:
                raise ValueError(f"Config `{path}` is not valid JSON: {exc}") from exc
        else:
            try:
                payload = yaml.safe_load(path_text)
            except yaml.YAMLError as exc:
                raise ValueError(f"Config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"Config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader.from_mapping(payload, source_label=f"Config `{path}`")

    @staticmethod
    def from_mapping(
        payload: Mapping[str, Any], source_label: str = "Config"
    ) -> CleaningConfig:
        """Create a config from a stored mapping merged over defaults."""

        return CleaningConfig().merged(payload, source_label=source_label)

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> dict[str, bool]:
        """Read rule overrides from `CLEANPASTE_*` environment variables.

        Blank values are ignored. Returns only the keys that were set.
        """

        env_map: Mapping[str, str] = os.environ if env is None else env
        overrides: dict[str, bool] = {}
        for env_key, rule_name in _ENV_KEYS.items():
            raw_value = env_map.get(env_key)
            if raw_value is None or not raw_value.strip():
                continue
            parsed = parse_permissive_boolean(raw_value)
            if parsed is None:
                raise ValueError(
                    f"Environment variable `{env_key}` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            overrides[rule_name] = parsed
        return overrides

    @staticmethod
    def resolve(
        config_path: Path | None = None,
        cli_overrides: Mapping[str, bool | None] | None = None,
        env: Mapping[str, str] | None = None,
    ) -> CleaningConfig:
        """Resolve effective config with precedence `cli` > `env` > file > defaults."""

        config = (
            ConfigLoader.from_yaml(config_path)
            if config_path is not None
            else CleaningConfig()
        )
        config = config.merged(ConfigLoader.from_env(env), source_label="Environment")
        if cli_overrides:
            config = config.merged(cli_overrides, source_label="CLI")
        return config
