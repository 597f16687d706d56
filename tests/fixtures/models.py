"""
Colaboradores de exemplo para os testes do Riveter.

- Status         → enum nativo (`enum.Enum`)
- ColorCatalog   → enum externo duck-typed (`lookup` / `collection`)
- Product        → modelo com `find_by_id` próprio
- ProductFinder  → finder injetável que registra as chamadas recebidas
"""

from __future__ import annotations

import enum
from typing import Any, Dict, List, Optional


class Status(enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ARCHIVED = "archived"


class ColorCatalog:
    """Enum não nativo: membros são strings, chaves aceitam caixa livre."""

    _members = ["red", "green", "blue"]

    @classmethod
    def lookup(cls, key: Any) -> Optional[str]:
        if not isinstance(key, str):
            return None
        key = key.strip().lower()
        return key if key in cls._members else None

    @classmethod
    def collection(cls) -> List[str]:
        return list(cls._members)


class Product:
    _store: Dict[int, "Product"] = {}

    def __init__(self, id: int, name: str) -> None:
        self.id = id
        self.name = name

    def __repr__(self) -> str:
        return f"Product(id={self.id}, name={self.name!r})"

    @classmethod
    def find_by_id(cls, id: Any) -> Optional["Product"]:
        try:
            return cls._store.get(int(id))
        except (TypeError, ValueError):
            return None


Product._store = {
    1: Product(1, "Rivet"),
    2: Product(2, "Bolt"),
}


class ProductFinder:
    def __init__(self, products: Optional[Dict[int, Product]] = None) -> None:
        self.products = dict(products or Product._store)
        self.calls: List[Any] = []

    def find_by_id(self, id: Any) -> Optional[Product]:
        self.calls.append(id)
        try:
            return self.products.get(int(id))
        except (TypeError, ValueError):
            return None


class ExplodingFinder:
    def find_by_id(self, id: Any) -> Optional[Product]:
        raise LookupError(f"backend unavailable for id {id!r}")


class NoFinderModel:
    pass
