# src/riveter/core/config/merge.py
"""
Deep-merge das settings de coerção (defaults → projeto → local).

Política (v1):
    - seção (dict) → merge recursivo por chave
    - lista (`date_formats`, `time_formats`, `true_values`) → substituída
      por inteiro; formatos nunca são concatenados
    - escalar (`range_separator`, `on_invalid`, `enabled`) → sobrescrito
    - conflito de tipos → `ConfigTypeConflictError` com o caminho pontuado
      da chave (ex.: `coercion.time_formats`)

Invariantes:
    - Nenhum input é mutado
    - Um conflito interrompe o merge inteiro (sem resultado parcial)
"""

from copy import deepcopy
from typing import Any, Dict, Tuple

from .errors import ConfigTypeConflictError


def _dotted(path: Tuple[str, ...]) -> str:
    return ".".join(path)


def _merge_value(base_value: Any, override_value: Any, path: Tuple[str, ...]) -> Any:
    if isinstance(base_value, dict) and isinstance(override_value, dict):
        return _merge_section(base_value, override_value, path)
    if isinstance(base_value, list) and isinstance(override_value, list):
        return list(deepcopy(override_value))
    if type(base_value) is not type(override_value):
        raise ConfigTypeConflictError(
            f"Conflito de tipo em '{_dotted(path)}': "
            f"{type(base_value).__name__} vs {type(override_value).__name__}"
        )
    return deepcopy(override_value)


def _merge_section(base: Dict[str, Any], override: Dict[str, Any], path: Tuple[str, ...]) -> Dict[str, Any]:
    merged = {key: deepcopy(value) for key, value in base.items() if key not in override}
    for key, override_value in override.items():
        key_path = path + (str(key),)
        if key in base:
            merged[key] = _merge_value(base[key], override_value, key_path)
        else:
            merged[key] = deepcopy(override_value)
    # ordem das chaves segue a base; chaves novas vão ao final
    return {key: merged[key] for key in list(base) + [k for k in override if k not in base]}


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Mescla `override` sobre `base` e devolve uma nova configuração.

    Raises:
        ConfigTypeConflictError: raiz não-dict ou conflito de tipo em alguma chave.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )
    return _merge_section(base, override, ())
