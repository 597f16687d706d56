# src/riveter/core/config/settings.py
"""
Settings tipadas do motor de coerção.

Materializa a configuração resolvida (dict) em `AttributeSettings`,
estrutura imutável consultada pelos setters gerados no momento da
atribuição. Cada classe host escolhe suas settings pelo atributo de
classe `attribute_settings` (herdado; padrão `DEFAULT_SETTINGS`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .errors import InvalidSettingError
from .hashing import compute_config_hash
from .loader import DEFAULT_CONFIG, load_config


ENUM_POLICIES = ("none", "raise")


def _section(config: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = config.get(key) or {}
    if not isinstance(value, dict):
        raise InvalidSettingError(f"{key} must be a mapping")
    return value


def _str_tuple(section: Dict[str, Any], key: str, path: str) -> Tuple[str, ...]:
    value = section.get(key)
    if not isinstance(value, list) or not value:
        raise InvalidSettingError(f"{path} must be a non-empty list")
    if not all(isinstance(v, str) and v for v in value):
        raise InvalidSettingError(f"{path} must contain only non-empty strings")
    return tuple(value)


@dataclass(frozen=True)
class AttributeSettings:
    """Settings efetivas de coerção (imutáveis)."""

    date_formats: Tuple[str, ...]
    time_formats: Tuple[str, ...]
    true_values: Tuple[str, ...]
    range_separator: str
    enum_on_invalid: str
    events_enabled: bool
    config_hash: Optional[str] = None

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "AttributeSettings":
        """Valida e materializa a configuração resolvida.

        Raises:
            InvalidSettingError: se alguma chave tiver tipo ou valor inválido.
        """
        if not isinstance(config, dict):
            raise InvalidSettingError("config must be a mapping/dict")

        coercion = _section(config, "coercion")
        enum_cfg = _section(config, "enum")
        events = _section(config, "events")

        separator = coercion.get("range_separator")
        if not isinstance(separator, str) or not separator.strip():
            raise InvalidSettingError("coercion.range_separator must be a non-empty string")

        policy = enum_cfg.get("on_invalid")
        if policy not in ENUM_POLICIES:
            raise InvalidSettingError(f"enum.on_invalid must be one of {ENUM_POLICIES}")

        enabled = events.get("enabled")
        if not isinstance(enabled, bool):
            raise InvalidSettingError("events.enabled must be boolean")

        return cls(
            date_formats=_str_tuple(coercion, "date_formats", "coercion.date_formats"),
            time_formats=_str_tuple(coercion, "time_formats", "coercion.time_formats"),
            true_values=tuple(v.strip().lower() for v in _str_tuple(coercion, "true_values", "coercion.true_values")),
            range_separator=separator,
            enum_on_invalid=policy,
            events_enabled=enabled,
            config_hash=compute_config_hash(config),
        )


def load_settings(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> AttributeSettings:
    """Atalho: `load_config` seguido de `AttributeSettings.from_config`."""
    return AttributeSettings.from_config(
        load_config(defaults_path=defaults_path, local_path=local_path)
    )


DEFAULT_SETTINGS = AttributeSettings.from_config(DEFAULT_CONFIG)
