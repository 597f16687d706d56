# src/riveter/core/attributes/accessors.py
"""
Gerador de accessors.

Para cada `AttributeDefinition`, sintetiza no momento da declaração:
    - getter/setter de instância (`property`); o setter coerce e grava
    - `date_range`: pares extras `<name>_from`/`<name>_to` e os predicados
      de presença `has_<name>_from`/`has_<name>_to`
    - `enum`: métodos de classe `<name>_enum()` e `<plural(name)>()`
    - `model`: método de classe `<name>_model()`

Regras:
    - Todos os nomes são planejados antes de qualquer instalação; uma
      colisão aborta a declaração inteira sem instalar nada
    - O armazenamento da instância só é escrito por `write_value`
"""

from __future__ import annotations

from typing import Any, Dict

from ..exceptions import duplicate_attribute
from .coercion import coerce, lost_in_coercion
from .collaborators import enum_collection
from .definition import AttributeDefinition
from .types import AttributeType, DateRange


GENERATED_ACCESSORS_ATTR = "_generated_accessors"


def pluralize(word: str) -> str:
    if word.endswith("y") and len(word) > 1 and word[-2] not in "aeiou":
        return word[:-1] + "ies"
    if word.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"


# -----------------------------
# Escrita / leitura do storage
# -----------------------------

def write_value(instance: Any, definition: AttributeDefinition, raw: Any) -> Any:
    """Coerce `raw` pela regra da definição e grava no storage da instância."""
    settings = type(instance).attribute_settings
    value = coerce(definition, raw, settings)
    if lost_in_coercion(raw, value):
        instance.events.warn(
            attribute=definition.name,
            message=f"value could not be coerced to {definition.type.value}",
            raw=repr(raw),
        )
    instance._attribute_values[definition.name] = value
    return value


def read_value(instance: Any, name: str) -> Any:
    return instance._attribute_values.get(name)


# -----------------------------
# Fábricas de accessors
# -----------------------------

def _value_property(definition: AttributeDefinition) -> property:
    name = definition.name

    def getter(self):
        return read_value(self, name)

    def setter(self, raw):
        write_value(self, definition, raw)

    return property(getter, setter, doc=f"{definition.type.value} attribute `{name}`")


def _range_property(definition: AttributeDefinition) -> property:
    name = definition.name
    first_def, last_def = definition.components()

    def getter(self):
        first = read_value(self, first_def.name)
        last = read_value(self, last_def.name)
        if first is None and last is None:
            return None
        return DateRange(first, last)

    def setter(self, raw):
        settings = type(self).attribute_settings
        rng = coerce(definition, raw, settings)
        if lost_in_coercion(raw, None if rng.is_empty else rng):
            self.events.warn(
                attribute=name,
                message="value could not be coerced to date_range",
                raw=repr(raw),
            )
        # as duas extremidades mudam juntas
        self._attribute_values[first_def.name] = rng.first
        self._attribute_values[last_def.name] = rng.last

    return property(getter, setter, doc=f"date_range attribute `{name}`")


def _presence_property(component: AttributeDefinition) -> property:
    name = component.name

    def getter(self):
        return read_value(self, name) is not None

    return property(getter, doc=f"True quando `{name}` não é None")


def _class_accessor(value_fn) -> classmethod:
    def accessor(cls):
        return value_fn()

    return classmethod(accessor)


def plan_accessors(definition: AttributeDefinition) -> Dict[str, Any]:
    """Mapa nome -> objeto a instalar na classe host, sem efeitos colaterais."""
    plan: Dict[str, Any] = {}

    if definition.type is AttributeType.DATE_RANGE:
        plan[definition.name] = _range_property(definition)
        for component in definition.components():
            plan[component.name] = _value_property(component)
            plan[f"has_{component.name}"] = _presence_property(component)
        return plan

    plan[definition.name] = _value_property(definition)

    target = definition.target
    if definition.type is AttributeType.ENUM:
        plan[f"{definition.name}_enum"] = _class_accessor(lambda: target)
        plan[pluralize(definition.name)] = _class_accessor(lambda: enum_collection(target))
    elif definition.type is AttributeType.MODEL:
        plan[f"{definition.name}_model"] = _class_accessor(lambda: target)

    return plan


def generated_accessors(host: type) -> set:
    """Conjunto próprio (copy-on-write) de nomes gerados na classe host."""
    own = host.__dict__.get(GENERATED_ACCESSORS_ATTR)
    if own is None:
        own = set(getattr(host, GENERATED_ACCESSORS_ATTR, set()))
        setattr(host, GENERATED_ACCESSORS_ATTR, own)
    return own


def check_accessors(host: type, plan: Dict[str, Any], reserved: frozenset) -> None:
    generated = getattr(host, GENERATED_ACCESSORS_ATTR, set())
    owner = host.__name__
    for accessor in plan:
        if accessor in reserved:
            raise ValueError(f"attribute accessor would shadow a reserved member: {accessor}")
        if accessor in generated or accessor in host.__dict__:
            raise duplicate_attribute(owner=owner, name=accessor)


def install_accessors(host: type, plan: Dict[str, Any]) -> None:
    generated = generated_accessors(host)
    for accessor, obj in plan.items():
        setattr(host, accessor, obj)
        generated.add(accessor)
