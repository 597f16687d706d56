# src/riveter/__init__.py
"""
Riveter: atributos tipados declarativos para objetos de formulário e consulta.

Este pacote raiz define o namespace público do Riveter: um motor pelo qual
uma classe declara atributos nomeados e tipados, cada um com accessors
gerados, default registrado, coerção a partir de entrada não tipada e
metadados consumidos por validadores externos.

Arquitetura em alto nível:
    - riveter.attributes     → mixin `Attributes` (API de declaração e de instância)
    - core.attributes        → definições, registry, coerção e accessors
    - core.params            → pipeline filter → clean → apply
    - core.config            → settings de coerção (YAML/JSON + deep-merge)
    - core.context           → event log estruturado por instância

Limites explícitos:
    - Não persiste objetos nem consulta bancos de dados
    - Não valida valores (apenas os tipa)
"""

from .attributes import Attributes
from .core.attributes import AttributeDefinition, AttributeRegistry, AttributeType, DateRange, EnumLike, ModelFinder
from .core.config import AttributeSettings, DEFAULT_SETTINGS, load_settings
from .core.exceptions import (
    AttributeNotFound,
    DuplicateAttributeError,
    InvalidEnumValue,
    RiveterException,
    UnknownAttributeError,
)

__all__ = [
    "Attributes",
    "AttributeDefinition",
    "AttributeRegistry",
    "AttributeType",
    "DateRange",
    "EnumLike",
    "ModelFinder",
    "AttributeSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "RiveterException",
    "DuplicateAttributeError",
    "AttributeNotFound",
    "UnknownAttributeError",
    "InvalidEnumValue",
]
