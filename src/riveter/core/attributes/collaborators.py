# src/riveter/core/attributes/collaborators.py
"""
Contratos dos colaboradores externos consumidos pela coerção.

Este módulo define os protocolos mínimos que colaboradores externos
devem satisfazer para serem usados por atributos `model` e `enum`:

    - ModelFinder → `find_by_id(id)` para resolver identificadores brutos
    - EnumLike    → `lookup(key)` e `collection()` para enums não nativos

Enums nativos (`enum.Enum`) são suportados diretamente, sem adaptação.

Princípios fundamentais:
    - O core não conhece ORM, banco ou camada de persistência
    - Conformidade é garantida por duck typing (@runtime_checkable)
    - Erros levantados pelos colaboradores nunca são traduzidos aqui
"""

from __future__ import annotations

import enum
from typing import Any, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class ModelFinder(Protocol):
    """Resolve um identificador bruto para uma instância do modelo (ou None)."""

    def find_by_id(self, id: Any) -> Optional[Any]:
        ...


@runtime_checkable
class EnumLike(Protocol):
    """Enum externo não nativo: busca por chave e coleção completa de membros."""

    def lookup(self, key: Any) -> Optional[Any]:
        ...

    def collection(self) -> List[Any]:
        ...


class _Missing:
    def __repr__(self) -> str:  # pragma: no cover
        return "<MISSING>"


MISSING = _Missing()


def is_native_enum(enum_type: Any) -> bool:
    return isinstance(enum_type, type) and issubclass(enum_type, enum.Enum)


def check_enum_type(enum_type: Any) -> None:
    """Guardrail de declaração: o tipo precisa ser Enum nativo ou EnumLike."""
    if is_native_enum(enum_type):
        return
    if isinstance(enum_type, EnumLike):
        return
    raise ValueError(
        f"enum type must be an enum.Enum subclass or expose lookup()/collection(): {enum_type!r}"
    )


def is_enum_member(enum_type: Any, value: Any) -> bool:
    if is_native_enum(enum_type):
        return isinstance(value, enum_type)
    try:
        return value in enum_collection(enum_type)
    except TypeError:
        return False


def enum_lookup(enum_type: Any, key: Any) -> Any:
    """Busca um membro pelo nome/chave externa; retorna MISSING quando ausente.

    Para enums nativos a ordem é: nome exato, valor, nome sem diferenciar caixa.
    """
    if not is_native_enum(enum_type):
        found = enum_type.lookup(key)
        return MISSING if found is None else found

    if isinstance(key, str):
        name = key.strip()
        if name in enum_type.__members__:
            return enum_type.__members__[name]
    try:
        return enum_type(key)
    except (ValueError, TypeError):
        pass
    if isinstance(key, str):
        lowered = key.strip().lower()
        for name, member in enum_type.__members__.items():
            if name.lower() == lowered:
                return member
    return MISSING


def enum_collection(enum_type: Any) -> List[Any]:
    if is_native_enum(enum_type):
        return list(enum_type)
    return list(enum_type.collection())


def resolve_finder(model_type: Any, finder: Optional[Any]) -> Any:
    """Escolhe o finder de um atributo `model`.

    Ordem: finder injetado; o próprio tipo do modelo quando expõe
    `find_by_id`; caso contrário, falha de declaração.
    """
    if finder is not None:
        if not isinstance(finder, ModelFinder):
            raise ValueError(f"finder must expose find_by_id(id): {finder!r}")
        return finder
    if isinstance(model_type, ModelFinder):
        return model_type
    raise ValueError(
        f"model attribute requires a finder: {getattr(model_type, '__name__', model_type)!r} "
        "does not expose find_by_id(id)"
    )
