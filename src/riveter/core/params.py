# src/riveter/core/params.py
"""
Pipeline de params: filter → clean → apply.

Transforma um mapeamento bruto e não confiável (ex.: dados de formulário)
em atribuições feitas pelos setters gerados.

Estágios:
    - filter: mantém apenas chaves que são accessors declarados; nunca falha
    - clean:  remove recursivamente valores blank (None / "") de mapas e sequências
    - apply:  atribui chave a chave via setter; chave desconhecida interrompe
              com `UnknownAttributeError`; erros de setters propagam inalterados

Decisões arquiteturais:
    - `clean` é recursão estrutural sobre {escalar, sequência, mapa}
    - `apply` não faz rollback: atribuições anteriores à falha permanecem
    - Nenhum estágio muta o mapeamento recebido

Sequência típica: `apply(filter(clean(params)))` (ver `assign_params`).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple

from .attributes.coercion import is_blank
from .attributes.registry import AttributeRegistry
from .errors import exception_to_payload
from .exceptions import unknown_attribute


def _as_mapping(params: Optional[Mapping]) -> Mapping:
    if params is None:
        return {}
    if not isinstance(params, Mapping):
        raise TypeError(f"params must be a mapping, received: {type(params).__name__}")
    return params


# -----------------------------
# filter
# -----------------------------

def partition_params(registry: AttributeRegistry, params: Optional[Mapping]) -> Tuple[Dict[str, Any], List[str]]:
    """Separa params em (conhecidos, nomes descartados); chaves viram `str`."""
    kept: Dict[str, Any] = {}
    dropped: List[str] = []
    for key, value in _as_mapping(params).items():
        name = str(key)
        if name in registry:
            kept[name] = value
        else:
            dropped.append(name)
    return kept, dropped


def filter_params(registry: AttributeRegistry, params: Optional[Mapping]) -> Dict[str, Any]:
    kept, _ = partition_params(registry, params)
    return kept


# -----------------------------
# clean
# -----------------------------

def clean(value: Any) -> Any:
    """Remove blanks em qualquer nível; escalares passam intactos.

    Sequências (list/tuple) voltam como list. Containers que ficam vazios
    após a limpeza são mantidos, o que torna a função idempotente.
    """
    if isinstance(value, Mapping):
        return {key: clean(item) for key, item in value.items() if not is_blank(item)}
    if isinstance(value, (list, tuple)):
        return [clean(item) for item in value if not is_blank(item)]
    return value


def clean_params(params: Optional[Mapping]) -> Dict[str, Any]:
    return clean(dict(_as_mapping(params)))


# -----------------------------
# apply
# -----------------------------

def apply_params(instance: Any, params: Optional[Mapping]) -> List[str]:
    """Atribui cada chave pelo setter correspondente; retorna as chaves aplicadas."""
    registry = type(instance).attribute_registry()
    owner = type(instance).__name__
    events = instance.events
    applied: List[str] = []

    for key, value in _as_mapping(params).items():
        name = str(key)
        if registry.find(name) is None:
            error = unknown_attribute(owner=owner, name=name)
            events.log(
                attribute=name,
                level="error",
                message=str(error),
                error=exception_to_payload(error).to_dict(),
            )
            raise error

        try:
            setattr(instance, name, value)
        except Exception as exc:
            events.log(
                attribute=name,
                level="error",
                message="assignment failed",
                error=exception_to_payload(exc, attribute=name).to_dict(),
            )
            raise

        applied.append(name)

    if applied:
        events.log(attribute=None, level="info", message="params applied", applied=applied)
    return applied
