# src/riveter/core/attributes/types.py
"""
Tipos canônicos de atributos do Riveter.

Este módulo define:
    - AttributeType → enum fechado de type tags suportados
    - DateRange     → valor imutável de intervalo de datas (atributo composto)

Os valores de `AttributeType` são strings para facilitar serialização
em metadados (`AttributeDefinition.to_dict`) e hashing de schema.

Invariantes:
    - O conjunto de type tags é fechado e conhecido em tempo de design
    - `DateRange` nunca é mutado após criado
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Iterator, Optional, Tuple


class AttributeType(str, Enum):
    """
    Type tags suportados pelo motor de coerção.

    Cada tag possui exatamente uma regra de coerção (`coercion.COERCERS`)
    e um método de declaração correspondente (`attr_<tag>`).
    """
    STRING = "string"
    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"
    DATE = "date"
    TIME = "time"
    DATE_RANGE = "date_range"
    BOOLEAN = "boolean"
    ENUM = "enum"
    ARRAY = "array"
    HASH = "hash"
    MODEL = "model"
    OBJECT = "object"


# Tags aceitos como `data_type` de elementos de array/hash.
ELEMENT_TYPES = frozenset(
    {
        AttributeType.STRING,
        AttributeType.TEXT,
        AttributeType.INTEGER,
        AttributeType.DECIMAL,
        AttributeType.DATE,
        AttributeType.TIME,
        AttributeType.BOOLEAN,
        AttributeType.OBJECT,
    }
)


@dataclass(frozen=True)
class DateRange:
    """
    Intervalo de datas com extremidades independentes.

    Qualquer extremidade pode ser None (intervalo aberto). Igualdade é
    estrutural: `DateRange(a, b) == DateRange(a, b)`.
    """

    first: Optional[date] = None
    last: Optional[date] = None

    def __iter__(self) -> Iterator[Optional[date]]:
        yield self.first
        yield self.last

    def __contains__(self, day: Any) -> bool:
        if not isinstance(day, date):
            return False
        if self.first is not None and day < self.first:
            return False
        if self.last is not None and day > self.last:
            return False
        return True

    @property
    def is_open(self) -> bool:
        return self.first is None or self.last is None

    @property
    def is_empty(self) -> bool:
        return self.first is None and self.last is None

    def to_tuple(self) -> Tuple[Optional[date], Optional[date]]:
        return (self.first, self.last)

    @staticmethod
    def split(text: str, separator: str = "..") -> Tuple[str, str]:
        """Divide `"2010-01-12..2011-01-12"` nas duas extremidades textuais."""
        if separator not in text:
            return text.strip(), ""
        head, _, tail = text.partition(separator)
        return head.strip(), tail.strip()

    def __str__(self) -> str:
        first = self.first.isoformat() if self.first else ""
        last = self.last.isoformat() if self.last else ""
        return f"{first}..{last}"
