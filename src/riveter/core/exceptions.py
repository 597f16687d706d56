"""
Riveter: Canonical Exceptions (v1)

Este módulo define as exceções tipadas internas do Riveter.

Objetivo:
- Permitir que declaração, coerção e pipeline de params levantem exceções
  semânticas tipadas
- Facilitar o mapeamento determinístico para RiveterErrorPayload
- Evitar ValueError/KeyError genéricos em guardrails críticos

Regras:
- Não contém lógica de coerção ou de declaração.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class RiveterException(Exception):
    """Base class para exceções internas do Riveter.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    @property
    def name(self) -> Optional[str]:
        """Nome do atributo envolvido, quando houver."""
        return self.details.get("name")


# ---------------------------------------------------------------------------
# Declaração / Registry
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class DuplicateAttributeError(RiveterException):
    """Nome de atributo (ou accessor gerado) já declarado na mesma classe."""


@dataclass(eq=False)
class AttributeNotFound(RiveterException):
    """Nome consultado não corresponde a nenhuma declaração da classe."""


# ---------------------------------------------------------------------------
# Pipeline de params
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class UnknownAttributeError(RiveterException):
    """Chave de params sem declaração correspondente durante `apply_params`."""


# ---------------------------------------------------------------------------
# Coerção
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class InvalidEnumValue(RiveterException):
    """Valor não reconhecido pelo enum declarado (política `raise`)."""


def duplicate_attribute(*, owner: str, name: str) -> DuplicateAttributeError:
    return DuplicateAttributeError(
        message=f"Duplicate attribute: {name}",
        details={"owner": owner, "name": name},
        hint="Renomeie o atributo ou remova a declaração repetida.",
    )


def attribute_not_found(*, owner: str, name: str) -> AttributeNotFound:
    return AttributeNotFound(
        message=f"Attribute not found: {name}",
        details={"owner": owner, "name": name},
    )


def unknown_attribute(*, owner: str, name: str) -> UnknownAttributeError:
    return UnknownAttributeError(
        message=f"unknown attribute: {name}",
        details={"owner": owner, "name": name},
        hint="Use filter_params antes de apply_params para descartar chaves desconhecidas.",
    )


def invalid_enum_value(*, name: str, value: Any, enum_type: Any) -> InvalidEnumValue:
    return InvalidEnumValue(
        message=f"Invalid value for enum attribute {name}: {value!r}",
        details={
            "name": name,
            "value": repr(value),
            "enum": getattr(enum_type, "__name__", repr(enum_type)),
        },
        hint="Informe um membro do enum ou o nome/chave de um membro.",
    )
