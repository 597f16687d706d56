"""
Riveter: Canonical Error Structures (v1)

Este módulo define o padrão canônico de payloads de erro do Riveter.
Payloads são a forma serializável de uma falha e alimentam o event log
das instâncias, devendo ser:

- explícitos
- serializáveis
- rastreáveis

O payload nunca substitui a exceção original: quem registra o erro
continua responsável por propagá-la sem tradução.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import RiveterException


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RiveterErrorPayload:
    """
    Payload canônico de erro do Riveter.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao chamador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Declaração
DUPLICATE_ATTRIBUTE = "DUPLICATE_ATTRIBUTE"
ATTRIBUTE_NOT_FOUND = "ATTRIBUTE_NOT_FOUND"

# Params / atribuição
UNKNOWN_ATTRIBUTE = "UNKNOWN_ATTRIBUTE"
INVALID_ENUM_VALUE = "INVALID_ENUM_VALUE"
ASSIGNMENT_ERROR = "ASSIGNMENT_ERROR"


_CODES = {
    "DuplicateAttributeError": DUPLICATE_ATTRIBUTE,
    "AttributeNotFound": ATTRIBUTE_NOT_FOUND,
    "UnknownAttributeError": UNKNOWN_ATTRIBUTE,
    "InvalidEnumValue": INVALID_ENUM_VALUE,
}


def exception_to_payload(exc: BaseException, *, attribute: Optional[str] = None) -> RiveterErrorPayload:
    """Converte uma exceção em RiveterErrorPayload (serializável).

    Regras:
    - RiveterException: já vem com message/details/hint; o código vem do catálogo.
    - Outras exceções (setters sobrescritos, finders): ASSIGNMENT_ERROR sem stack trace.
    """
    if isinstance(exc, RiveterException):
        # subclasses herdam o código da exceção canônica mais próxima
        code = next(
            (_CODES[base.__name__] for base in type(exc).__mro__ if base.__name__ in _CODES),
            ASSIGNMENT_ERROR,
        )
        return RiveterErrorPayload(
            type=code,
            message=str(exc) or "Erro de atribuição",
            details=dict(exc.details or {}),
            hint=exc.hint,
        )

    return RiveterErrorPayload(
        type=ASSIGNMENT_ERROR,
        message=str(exc) or "Erro inesperado durante atribuição",
        details={
            "exception_class": exc.__class__.__name__,
            "attribute": attribute,
        },
        hint="O erro foi propagado sem alteração ao chamador.",
    )
