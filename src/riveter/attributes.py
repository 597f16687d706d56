# src/riveter/attributes.py
"""
Mixin `Attributes`: declaração de atributos tipados em classes host.

Uma classe host herda de `Attributes` e declara atributos por meio dos
métodos de classe `attr_<tipo>`:

    class ProductQuery(Attributes):
        pass

    ProductQuery.attr_string("name", required=True)
    ProductQuery.attr_date_range("period")
    ProductQuery.attr_enum("status", Status, default=Status.ACTIVE)

Cada declaração:
    1. cria uma `AttributeDefinition` imutável
    2. clona o registry do ancestral na primeira declaração da classe
    3. valida unicidade de todos os accessors (registry + accessors gerados)
    4. instala getters/setters tipados e accessors auxiliares

Instâncias aplicam os defaults pelos setters no `__init__` e expõem o
pipeline de params (`filter_params`, `clean_params`, `apply_params`,
`assign_params`).

Invariantes:
    - Classes irmãs nunca compartilham registry
    - Toda leitura observa um valor que passou pelo motor de coerção
    - Uma declaração rejeitada não altera registry nem classe
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .core.attributes.accessors import check_accessors, install_accessors, plan_accessors
from .core.attributes.coercion import coerce_date
from .core.attributes.collaborators import check_enum_type, resolve_finder
from .core.attributes.definition import AttributeDefinition
from .core.attributes.registry import AttributeRegistry
from .core.attributes.types import ELEMENT_TYPES, AttributeType
from .core.config.hashing import compute_schema_hash
from .core.config.settings import DEFAULT_SETTINGS, ENUM_POLICIES, AttributeSettings
from .core.context import AttributeEventLog
from .core import params as _params


class dualmethod:
    """Descriptor com implementações distintas para acesso via classe e via instância."""

    def __init__(self, class_fn, instance_fn=None):
        self.class_fn = class_fn
        self.instance_fn = instance_fn
        self.__doc__ = class_fn.__doc__

    def instance(self, instance_fn) -> "dualmethod":
        self.instance_fn = instance_fn
        return self

    def __get__(self, obj, owner=None):
        if obj is None or self.instance_fn is None:
            return self.class_fn.__get__(None, owner)
        return self.instance_fn.__get__(obj, owner)


class Attributes:
    """Mixin de atributos tipados: declaração, coerção, defaults e params."""

    attribute_settings: AttributeSettings = DEFAULT_SETTINGS
    _attribute_registry: AttributeRegistry = AttributeRegistry(owner="Attributes")

    def __init__(self, params: Optional[Mapping] = None) -> None:
        cls = type(self)
        self._attribute_values: Dict[str, Any] = {}
        self.events = AttributeEventLog(
            owner=cls.__name__,
            enabled=cls.attribute_settings.events_enabled,
        )
        for definition in cls.attribute_registry():
            setattr(self, definition.name, definition.initial_value())
        if params is not None:
            self.assign_params(params)

    # ------------------------------------------------------------------
    # Registry (copy-on-first-declare)
    # ------------------------------------------------------------------

    @classmethod
    def attribute_registry(cls) -> AttributeRegistry:
        """Registry efetivo da classe (próprio ou, antes da 1ª declaração, do ancestral)."""
        return cls._attribute_registry

    @classmethod
    def _own_registry(cls) -> AttributeRegistry:
        own = cls.__dict__.get("_attribute_registry")
        if own is None:
            own = cls.attribute_registry().copy(owner=cls.__name__)
            cls._attribute_registry = own
        return own

    # ------------------------------------------------------------------
    # Declaração
    # ------------------------------------------------------------------

    @classmethod
    def declare_attribute(cls, name: str, type: Any, **options: Any) -> AttributeDefinition:
        if cls is Attributes:
            raise TypeError("attributes must be declared on a subclass of Attributes")

        definition = AttributeDefinition(name=name, type=AttributeType(type), options=options)
        plan = plan_accessors(definition)
        check_accessors(cls, plan, RESERVED_NAMES)

        cls._own_registry().add(definition)
        install_accessors(cls, plan)
        return definition

    @classmethod
    def attr_string(cls, name: str, **options: Any) -> AttributeDefinition:
        return cls.declare_attribute(name, AttributeType.STRING, **options)

    @classmethod
    def attr_text(cls, name: str, **options: Any) -> AttributeDefinition:
        return cls.declare_attribute(name, AttributeType.TEXT, **options)

    @classmethod
    def attr_integer(cls, name: str, **options: Any) -> AttributeDefinition:
        return cls.declare_attribute(name, AttributeType.INTEGER, **options)

    @classmethod
    def attr_decimal(cls, name: str, **options: Any) -> AttributeDefinition:
        return cls.declare_attribute(name, AttributeType.DECIMAL, **options)

    @classmethod
    def attr_date(cls, name: str, **options: Any) -> AttributeDefinition:
        return cls.declare_attribute(name, AttributeType.DATE, **options)

    @classmethod
    def attr_time(cls, name: str, **options: Any) -> AttributeDefinition:
        return cls.declare_attribute(name, AttributeType.TIME, **options)

    @classmethod
    def attr_date_range(
        cls,
        name: str,
        *,
        minimum: Optional[Any] = None,
        maximum: Optional[Any] = None,
        **options: Any,
    ) -> AttributeDefinition:
        """Intervalo de datas; `minimum`/`maximum` são limites expostos ao validador."""
        settings = cls.attribute_settings
        low = coerce_date(minimum, None, settings)
        high = coerce_date(maximum, None, settings)
        if minimum is not None and low is None:
            raise ValueError(f"invalid minimum for date_range {name}: {minimum!r}")
        if maximum is not None and high is None:
            raise ValueError(f"invalid maximum for date_range {name}: {maximum!r}")
        if low is not None and high is not None and low > high:
            raise ValueError(f"date_range {name}: minimum must not be after maximum")
        if low is not None:
            options["minimum"] = low
        if high is not None:
            options["maximum"] = high
        return cls.declare_attribute(name, AttributeType.DATE_RANGE, **options)

    @classmethod
    def attr_boolean(cls, name: str, **options: Any) -> AttributeDefinition:
        return cls.declare_attribute(name, AttributeType.BOOLEAN, **options)

    @classmethod
    def attr_enum(cls, name: str, enum_type: Any, **options: Any) -> AttributeDefinition:
        check_enum_type(enum_type)
        policy = options.get("on_invalid")
        if policy is not None and policy not in ENUM_POLICIES:
            raise ValueError(f"on_invalid must be one of {ENUM_POLICIES}")
        return cls.declare_attribute(name, AttributeType.ENUM, target=enum_type, **options)

    @classmethod
    def attr_array(cls, name: str, data_type: Optional[Any] = None, **options: Any) -> AttributeDefinition:
        return cls.declare_attribute(name, AttributeType.ARRAY, **_element_options(data_type, options))

    @classmethod
    def attr_hash(cls, name: str, data_type: Optional[Any] = None, **options: Any) -> AttributeDefinition:
        return cls.declare_attribute(name, AttributeType.HASH, **_element_options(data_type, options))

    @classmethod
    def attr_model(cls, name: str, model_type: Any, finder: Optional[Any] = None, **options: Any) -> AttributeDefinition:
        resolved = resolve_finder(model_type, finder)
        return cls.declare_attribute(name, AttributeType.MODEL, target=model_type, finder=resolved, **options)

    @classmethod
    def attr_object(cls, name: str, **options: Any) -> AttributeDefinition:
        return cls.declare_attribute(name, AttributeType.OBJECT, **options)

    # ------------------------------------------------------------------
    # Introspecção
    # ------------------------------------------------------------------

    @dualmethod
    @classmethod
    def attributes(cls) -> List[AttributeDefinition]:
        """Classe: definições em ordem de declaração. Instância: nome -> valor tipado."""
        return cls.attribute_registry().list()

    @attributes.instance
    def attributes(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in type(self).attribute_registry().accessor_names()}

    @classmethod
    def column_for_attribute(cls, name: str) -> AttributeDefinition:
        return cls.attribute_registry().resolve(name)

    @classmethod
    def attribute_metadata(cls) -> List[Dict[str, Any]]:
        return [definition.to_dict() for definition in cls.attribute_registry()]

    @classmethod
    def attribute_schema_hash(cls) -> str:
        return compute_schema_hash(cls.attribute_metadata())

    @property
    def persisted(self) -> bool:
        return False

    @property
    def warnings(self) -> Dict[str, List[str]]:
        return self.events.warnings

    # ------------------------------------------------------------------
    # Pipeline de params
    # ------------------------------------------------------------------

    def filter_params(self, params: Optional[Mapping]) -> Dict[str, Any]:
        kept, dropped = _params.partition_params(type(self).attribute_registry(), params)
        if dropped:
            self.events.log(
                attribute=None,
                level="warning",
                message="unknown params dropped",
                dropped=dropped,
            )
        return kept

    def clean_params(self, params: Optional[Mapping]) -> Dict[str, Any]:
        return _params.clean_params(params)

    def apply_params(self, params: Optional[Mapping]) -> List[str]:
        return _params.apply_params(self, params)

    def assign_params(self, params: Optional[Mapping]) -> List[str]:
        return self.apply_params(self.filter_params(self.clean_params(params)))

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={value!r}" for name, value in self.attributes().items())
        return f"<{type(self).__name__} {values}>"


def _element_options(data_type: Optional[Any], options: Dict[str, Any]) -> Dict[str, Any]:
    if data_type is not None:
        element = AttributeType(data_type)
        if element not in ELEMENT_TYPES:
            raise ValueError(f"data_type must be a scalar type, received: {element.value}")
        options["data_type"] = element
    return options


RESERVED_NAMES = frozenset(
    [name for name in dir(Attributes) if not name.startswith("_")] + ["events"]
)
