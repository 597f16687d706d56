# src/riveter/core/attributes/registry.py
"""
Registro estrutural de atributos de uma classe host.

Este módulo define o `AttributeRegistry`, responsável por registrar
definições de atributos e validar a integridade estrutural das
declarações de uma classe antes que qualquer accessor seja gerado.

O registry garante que:
    - cada nome de accessor (inclusive `_from`/`_to` de intervalos) seja único
    - a ordem de declaração seja preservada explicitamente
    - uma declaração rejeitada não altere o estado interno

Decisões arquiteturais:
    - Cada classe que declara atributos possui seu próprio registry
    - Herança usa cópia por valor (`copy`), nunca referência compartilhada
    - Erros estruturais são tratados como falhas fatais da declaração

Limites explícitos:
    - Não gera accessors
    - Não realiza coerção
    - Não conhece instâncias
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from ..exceptions import attribute_not_found, duplicate_attribute
from .definition import AttributeDefinition


@dataclass
class AttributeRegistry:
    """
    Registro canônico e ordenado das definições de uma classe.

    Invariantes:
        - Cada nome de accessor aparece no máximo uma vez
        - `list()` reflete exatamente a ordem de declaração
        - `copy()` produz um registry independente (mutações não vazam)
    """

    owner: str = "Attributes"
    _definitions: Dict[str, AttributeDefinition] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)
    _accessors: Dict[str, AttributeDefinition] = field(default_factory=dict, init=False, repr=False)

    def add(self, definition: AttributeDefinition) -> None:
        for accessor in definition.accessor_names():
            if accessor in self._accessors:
                raise duplicate_attribute(owner=self.owner, name=accessor)

        self._definitions[definition.name] = definition
        self._order.append(definition.name)
        self._accessors[definition.name] = definition
        for component in definition.components():
            self._accessors[component.name] = component

    def get(self, name: str) -> AttributeDefinition:
        key = str(name)
        if key not in self._definitions:
            raise attribute_not_found(owner=self.owner, name=key)
        return self._definitions[key]

    def resolve(self, accessor: str) -> AttributeDefinition:
        """Definição dona do accessor; componentes de intervalo resolvem para a sua própria definição `date`."""
        key = str(accessor)
        if key not in self._accessors:
            raise attribute_not_found(owner=self.owner, name=key)
        return self._accessors[key]

    def find(self, accessor: str) -> Optional[AttributeDefinition]:
        return self._accessors.get(str(accessor))

    def list(self) -> List[AttributeDefinition]:
        return [self._definitions[name] for name in self._order]

    def names(self) -> List[str]:
        return list(self._order)

    def accessor_names(self) -> List[str]:
        return list(self._accessors)

    def copy(self, *, owner: Optional[str] = None) -> "AttributeRegistry":
        clone = AttributeRegistry(owner=owner or self.owner)
        for definition in self.list():
            clone.add(definition)
        return clone

    def __contains__(self, accessor: object) -> bool:
        return str(accessor) in self._accessors

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[AttributeDefinition]:
        return iter(self.list())
