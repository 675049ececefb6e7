"""Configuration model and loaders for lexnorm.

Responsibilities:
- Define tokenizer configuration as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `LexnormConfig`: normalized settings for one tokenizer instance.
- `ConfigLoader`: static construction helpers for `LexnormConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_probability,
    split_name_list,
)
from .text.normalizers import DEFAULT_NORMALIZERS, NORMALIZERS_BY_NAME
from .text.segmenter import SUPPORTED_DETECTION_SCOPES

_DEFAULT_NORMALIZER_NAMES = tuple(normalizer.name for normalizer in DEFAULT_NORMALIZERS)
_SUPPORTED_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"})


@dataclass(slots=True)
class LexnormConfig:
    """Settings for segmentation, detection, and normalization.

    Attributes:
        normalizers: Registry names applied in this order.
        detect_language: Whether normalizers receive a detected language or `None`.
        detection_scope: `clause` or `token` detection grouping in the segmenter.
        min_language_probability: Threshold for accepting a language guess.
        log_level: Minimum level for run logs.
    """

    normalizers: tuple[str, ...] = field(default=_DEFAULT_NORMALIZER_NAMES)
    detect_language: bool = True
    detection_scope: str = "clause"
    min_language_probability: float = 0.5
    log_level: str = "INFO"

    def validate(self) -> None:
        """Validate configuration values before building a tokenizer."""

        if not self.normalizers:
            raise ValueError("`normalizers` must name at least one normalizer.")
        unknown = [name for name in self.normalizers if name not in NORMALIZERS_BY_NAME]
        if unknown:
            supported = ", ".join(_DEFAULT_NORMALIZER_NAMES)
            raise ValueError(
                f"Unsupported `normalizers` value(s) {', '.join(unknown)}; supported: {supported}."
            )
        duplicates = sorted({name for name in self.normalizers if self.normalizers.count(name) > 1})
        if duplicates:
            raise ValueError(f"`normalizers` lists duplicate name(s): {', '.join(duplicates)}.")
        if self.detection_scope not in SUPPORTED_DETECTION_SCOPES:
            supported = ", ".join(sorted(SUPPORTED_DETECTION_SCOPES))
            raise ValueError(
                f"Unsupported `detection_scope` value `{self.detection_scope}`; "
                f"supported: {supported}."
            )
        if not 0.0 < self.min_language_probability <= 1.0:
            raise ValueError("`min_language_probability` must be a number in (0, 1].")
        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            supported = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
            raise ValueError(
                f"Unsupported `log_level` value `{self.log_level}`; supported: {supported}."
            )


class ConfigLoader:
    """Factory methods for creating `LexnormConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "normalizers",
            "detect_language",
            "detection_scope",
            "min_language_probability",
            "log_level",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> LexnormConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> LexnormConfig:
        """Create a validated config from `LEXNORM_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        normalizers = (
            split_name_list(env_map.get("LEXNORM_NORMALIZERS"))
            or _DEFAULT_NORMALIZER_NAMES
        )
        detect_language = ConfigLoader._optional_env_boolean(env_map, "LEXNORM_DETECT_LANGUAGE")
        detection_scope = (
            ConfigLoader._optional_env_string(env_map, "LEXNORM_DETECTION_SCOPE") or "clause"
        )
        raw_probability = ConfigLoader._optional_env_string(
            env_map, "LEXNORM_MIN_LANGUAGE_PROBABILITY"
        )
        min_language_probability = (
            parse_probability(raw_probability, "LEXNORM_MIN_LANGUAGE_PROBABILITY")
            if raw_probability is not None
            else 0.5
        )
        log_level = ConfigLoader._optional_env_string(env_map, "LEXNORM_LOG_LEVEL") or "INFO"

        config = LexnormConfig(
            normalizers=normalizers,
            detect_language=True if detect_language is None else detect_language,
            detection_scope=detection_scope.lower(),
            min_language_probability=min_language_probability,
            log_level=log_level.upper(),
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> LexnormConfig:
        """Build a validated config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        normalizers = ConfigLoader._optional_name_list(payload, "normalizers", source_label)
        detect_language = ConfigLoader._optional_boolean(
            payload,
            "detect_language",
            source_label,
            default=True,
        )
        detection_scope = (
            ConfigLoader._optional_non_empty_string(payload, "detection_scope") or "clause"
        )
        min_language_probability = ConfigLoader._optional_probability(
            payload,
            "min_language_probability",
            source_label,
            default=0.5,
        )
        log_level = ConfigLoader._optional_non_empty_string(payload, "log_level") or "INFO"

        config = LexnormConfig(
            normalizers=normalizers or _DEFAULT_NORMALIZER_NAMES,
            detect_language=detect_language,
            detection_scope=detection_scope.lower(),
            min_language_probability=min_language_probability,
            log_level=log_level.upper(),
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject keys that no config field consumes."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _optional_non_empty_string(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        return normalize_optional_string(payload[key])

    @staticmethod
    def _optional_name_list(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> tuple[str, ...]:
        """Read a list of names given as a YAML sequence or a comma-separated string."""

        if key not in payload or payload[key] is None:
            return ()
        raw = payload[key]
        if not isinstance(raw, (str, list, tuple)):
            raise ValueError(
                f"{source_label} field `{key}` must be a list or comma-separated string."
            )
        return split_name_list(raw)

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_probability(
        payload: Mapping[str, Any], key: str, source_label: str, default: float
    ) -> float:
        """Read and validate a probability field from a payload."""

        if key not in payload:
            return default
        try:
            return parse_probability(payload[key], key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if ConfigLoader._optional_env_string(env, key) is None:
            return None
        parsed = parse_permissive_boolean(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
