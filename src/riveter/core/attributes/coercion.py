# src/riveter/core/attributes/coercion.py
"""Motor de coerção de tipos (v1).

Responsabilidades (v1):
  - converter valores brutos (texto, escalares, estruturas aninhadas) na
    representação tipada do type tag declarado
  - degradar entradas inválidas para None (nunca rejeitar por formato)
  - despachar por uma tabela fechada: exatamente uma regra por `AttributeType`

Este módulo **não**:
  - valida se o valor é aceitável (papel do validador externo)
  - escreve em instâncias (papel dos setters gerados)
  - registra eventos

Única exceção à política de degradação: enums sob a política `raise`
levantam `InvalidEnumValue`. Erros levantados por colaboradores (finder de
modelos) também atravessam sem tradução.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Optional

from ..config.settings import DEFAULT_SETTINGS, AttributeSettings
from ..exceptions import invalid_enum_value
from .collaborators import MISSING, enum_lookup, is_enum_member
from .definition import AttributeDefinition
from .types import AttributeType, DateRange


Coercer = Callable[[Any, AttributeDefinition, AttributeSettings], Any]


# -----------------------------
# Helpers
# -----------------------------

def is_blank(v: Any) -> bool:
    """Blank = ausente (None) ou string vazia."""
    return v is None or (isinstance(v, str) and v == "")


def _text(v: Any) -> Optional[str]:
    if isinstance(v, bytes):
        try:
            v = v.decode("utf-8")
        except UnicodeDecodeError:
            return None
    if isinstance(v, str):
        return v.strip()
    return None


# -----------------------------
# Regras escalares
# -----------------------------

def coerce_string(v: Any, definition: Optional[AttributeDefinition] = None, settings: AttributeSettings = DEFAULT_SETTINGS) -> Optional[str]:
    if v is None:
        return None
    if isinstance(v, bytes):
        return v.decode("utf-8", errors="replace")
    return str(v)


def coerce_integer(v: Any, definition: Optional[AttributeDefinition] = None, settings: AttributeSettings = DEFAULT_SETTINGS) -> Optional[int]:
    if is_blank(v):
        return None
    if isinstance(v, bool):
        # evita True/False virar 1/0
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        return int(v) if v.is_integer() else None
    if isinstance(v, Decimal):
        return int(v) if v.is_finite() and v == v.to_integral_value() else None
    s = _text(v)
    if s is None:
        return None
    if s.startswith(("+", "-")):
        sign = s[0]
        digits = s[1:]
    else:
        sign = ""
        digits = s
    if not digits.isdigit() or not digits.isascii():
        return None
    return int(f"{sign}{digits}")


def coerce_decimal(v: Any, definition: Optional[AttributeDefinition] = None, settings: AttributeSettings = DEFAULT_SETTINGS) -> Optional[Decimal]:
    if is_blank(v):
        return None
    if isinstance(v, bool):
        return None
    if isinstance(v, Decimal):
        return v if v.is_finite() else None
    if isinstance(v, (int, float)):
        # str() evita carregar o erro binário do float para o Decimal
        v = str(v)
    s = _text(v)
    if s is None or s == "":
        return None
    try:
        out = Decimal(s)
    except InvalidOperation:
        return None
    return out if out.is_finite() else None


def coerce_date(v: Any, definition: Optional[AttributeDefinition] = None, settings: AttributeSettings = DEFAULT_SETTINGS) -> Optional[date]:
    if is_blank(v):
        return None
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    s = _text(v)
    if not s:
        return None
    for fmt in settings.date_formats:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    return None


def coerce_time(v: Any, definition: Optional[AttributeDefinition] = None, settings: AttributeSettings = DEFAULT_SETTINGS) -> Optional[datetime]:
    if is_blank(v):
        return None
    if isinstance(v, datetime):
        return v
    if isinstance(v, date):
        return datetime(v.year, v.month, v.day)
    s = _text(v)
    if not s:
        return None
    for fmt in settings.time_formats:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        return None


def coerce_boolean(v: Any, definition: Optional[AttributeDefinition] = None, settings: AttributeSettings = DEFAULT_SETTINGS) -> bool:
    if isinstance(v, bool):
        return v
    if is_blank(v):
        return False
    if isinstance(v, (int, float, Decimal)):
        return v != 0
    s = _text(v)
    if s is None:
        return False
    if s.lower() in settings.true_values:
        return True
    # texto numérico segue a regra dos números ("2" -> True, "0.0" -> False)
    try:
        number = Decimal(s)
    except InvalidOperation:
        return False
    return number.is_finite() and number != 0


def coerce_object(v: Any, definition: Optional[AttributeDefinition] = None, settings: AttributeSettings = DEFAULT_SETTINGS) -> Any:
    return v


# -----------------------------
# Regras compostas / referências
# -----------------------------

def coerce_date_range(v: Any, definition: Optional[AttributeDefinition] = None, settings: AttributeSettings = DEFAULT_SETTINGS) -> DateRange:
    """Sempre retorna um DateRange; entrada blank limpa as duas extremidades."""
    if is_blank(v):
        return DateRange()
    if isinstance(v, DateRange):
        first, last = v.first, v.last
    elif isinstance(v, Mapping):
        first = v.get("from", v.get("first"))
        last = v.get("to", v.get("last"))
    elif isinstance(v, (list, tuple)) and len(v) <= 2:
        # posicional: extremidades ausentes (ex.: removidas por `clean`) ficam None
        first, last = (list(v) + [None, None])[:2]
    elif isinstance(v, (str, bytes)):
        s = _text(v) or ""
        first, last = DateRange.split(s, settings.range_separator)
    else:
        first = getattr(v, "first", None)
        last = getattr(v, "last", None)
    return DateRange(coerce_date(first, None, settings), coerce_date(last, None, settings))


def coerce_enum(v: Any, definition: AttributeDefinition, settings: AttributeSettings = DEFAULT_SETTINGS) -> Any:
    enum_type = definition.target
    if is_blank(v):
        return None
    if is_enum_member(enum_type, v):
        return v
    found = enum_lookup(enum_type, v)
    if found is not MISSING:
        return found
    policy = definition.options.get("on_invalid") or settings.enum_on_invalid
    if policy == "raise":
        raise invalid_enum_value(name=definition.name, value=v, enum_type=enum_type)
    return None


def coerce_model(v: Any, definition: AttributeDefinition, settings: AttributeSettings = DEFAULT_SETTINGS) -> Any:
    model_type = definition.target
    if is_blank(v):
        return None
    if isinstance(model_type, type) and isinstance(v, model_type):
        return v
    finder = definition.options["finder"]
    return finder.find_by_id(v)


def _element_coercer(definition: AttributeDefinition) -> Optional[Coercer]:
    data_type = definition.data_type
    if data_type is None:
        return None
    return COERCERS[data_type]


def coerce_array(v: Any, definition: Optional[AttributeDefinition] = None, settings: AttributeSettings = DEFAULT_SETTINGS) -> Optional[List[Any]]:
    if v is None:
        return None
    if isinstance(v, (list, tuple, set, frozenset)):
        items = list(v)
    else:
        items = [v]
    element = _element_coercer(definition) if definition is not None else None
    if element is None:
        return items
    return [element(item, definition, settings) for item in items]


def coerce_hash(v: Any, definition: Optional[AttributeDefinition] = None, settings: AttributeSettings = DEFAULT_SETTINGS) -> Optional[Dict[Any, Any]]:
    if not isinstance(v, Mapping):
        return None
    element = _element_coercer(definition) if definition is not None else None
    if element is None:
        return dict(v)
    return {key: element(value, definition, settings) for key, value in v.items()}


COERCERS: Dict[AttributeType, Coercer] = {
    AttributeType.STRING: coerce_string,
    AttributeType.TEXT: coerce_string,
    AttributeType.INTEGER: coerce_integer,
    AttributeType.DECIMAL: coerce_decimal,
    AttributeType.DATE: coerce_date,
    AttributeType.TIME: coerce_time,
    AttributeType.DATE_RANGE: coerce_date_range,
    AttributeType.BOOLEAN: coerce_boolean,
    AttributeType.ENUM: coerce_enum,
    AttributeType.ARRAY: coerce_array,
    AttributeType.HASH: coerce_hash,
    AttributeType.MODEL: coerce_model,
    AttributeType.OBJECT: coerce_object,
}


def coerce(definition: AttributeDefinition, raw: Any, settings: AttributeSettings = DEFAULT_SETTINGS) -> Any:
    """Aplica a regra do type tag da definição ao valor bruto."""
    return COERCERS[definition.type](raw, definition, settings)


def lost_in_coercion(raw: Any, value: Any) -> bool:
    """True quando um valor bruto não vazio virou None (auditoria de perda)."""
    return value is None and not is_blank(raw)
