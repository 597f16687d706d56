# src/riveter/core/attributes/definition.py
"""
Definição imutável de um atributo declarado.

Uma `AttributeDefinition` descreve um único atributo de uma classe host:
nome, type tag e opções. Ela é criada no momento da declaração
(`attr_<tag>`) e nunca é alterada depois disso.

Opções reconhecidas:
    - default / default_factory: valor inicial aplicado pelo initializer
    - required: metadado para o validador externo
    - target: tipo do enum (`enum`) ou do modelo (`model`)
    - finder: colaborador `ModelFinder` (`model`)
    - data_type: type tag dos elementos (`array`/`hash`)
    - on_invalid: política do enum para valores desconhecidos ("none"/"raise")
    - minimum / maximum: limites permitidos do intervalo (`date_range`)
    - component_of: nome do atributo composto de origem (`_from`/`_to`)

Invariantes:
    - `name` é um identificador Python válido
    - `type` nunca muda durante a vida da definição
    - `options` é exposto somente para leitura
"""

from __future__ import annotations

import keyword
from copy import copy
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .collaborators import enum_collection, is_native_enum
from .types import AttributeType


def validate_attribute_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValueError("attribute name must be a non-empty string")
    if not name.isidentifier() or keyword.iskeyword(name):
        raise ValueError(f"attribute name must be a valid identifier: {name!r}")
    if name.startswith("_"):
        raise ValueError(f"attribute name must not start with an underscore: {name!r}")
    return name


def _iso(value: Any) -> Optional[str]:
    if isinstance(value, date):
        return value.isoformat()
    return None if value is None else str(value)


@dataclass(frozen=True)
class AttributeDefinition:
    """Descrição imutável de um atributo declarado (nome, type tag, opções)."""

    name: str
    type: AttributeType
    options: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        validate_attribute_name(self.name)
        object.__setattr__(self, "type", AttributeType(self.type))
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    # -----------------------------
    # Opções mais usadas
    # -----------------------------
    @property
    def default(self) -> Any:
        return self.options.get("default")

    @property
    def has_default(self) -> bool:
        return "default" in self.options or "default_factory" in self.options

    @property
    def required(self) -> bool:
        return bool(self.options.get("required", False))

    @property
    def target(self) -> Any:
        return self.options.get("target")

    @property
    def data_type(self) -> Optional[AttributeType]:
        data_type = self.options.get("data_type")
        return None if data_type is None else AttributeType(data_type)

    @property
    def component_of(self) -> Optional[str]:
        return self.options.get("component_of")

    @property
    def is_compound(self) -> bool:
        return self.type is AttributeType.DATE_RANGE

    # -----------------------------
    # Atributo composto (date_range)
    # -----------------------------
    def components(self) -> Tuple["AttributeDefinition", ...]:
        if not self.is_compound:
            return ()
        return tuple(
            AttributeDefinition(
                name=f"{self.name}_{suffix}",
                type=AttributeType.DATE,
                options={"component_of": self.name, "required": self.required},
            )
            for suffix in ("from", "to")
        )

    def accessor_names(self) -> Tuple[str, ...]:
        return (self.name,) + tuple(c.name for c in self.components())

    def initial_value(self) -> Any:
        """Valor bruto inicial: `default_factory()` ou o próprio `default`.

        Containers literais (list/dict/set) recebem cópia rasa por instância;
        qualquer outro default é repassado sem cópia e mantém a identidade
        (ex.: instâncias de modelo).
        """
        factory = self.options.get("default_factory")
        if factory is not None:
            return factory()
        default = self.options.get("default")
        if isinstance(default, (list, dict, set)):
            return copy(default)
        return default

    # -----------------------------
    # Metadados para validadores externos
    # -----------------------------
    def to_dict(self) -> Dict[str, Any]:
        target = self.target
        out: Dict[str, Any] = {
            "name": self.name,
            "type": self.type.value,
            "required": self.required,
            "has_default": self.has_default,
            "accessors": list(self.accessor_names()),
            "data_type": self.data_type.value if self.data_type else None,
            "target": getattr(target, "__name__", None) if target is not None else None,
        }
        if self.type is AttributeType.ENUM:
            out["members"] = _member_names(target)
        if self.type is AttributeType.DATE_RANGE:
            out["minimum"] = _iso(self.options.get("minimum"))
            out["maximum"] = _iso(self.options.get("maximum"))
        if self.component_of:
            out["component_of"] = self.component_of
        return out


def _member_names(enum_type: Any) -> List[str]:
    if is_native_enum(enum_type):
        return [m.name for m in enum_type]
    return [str(m) for m in enum_collection(enum_type)]
