"""
# Attributes Core (Riveter)

Este pacote reúne as peças que materializam atributos tipados:

- **types**: `AttributeType` (type tags) e `DateRange`
- **definition**: `AttributeDefinition` imutável
- **registry**: `AttributeRegistry` ordenado por classe
- **coercion**: tabela fechada de regras de coerção
- **collaborators**: protocolos `ModelFinder` / `EnumLike`
- **accessors**: geração de getters, setters e accessors auxiliares

## Invariantes

- Um nome de accessor é único por registry
- Coerção nunca rejeita formato (degrada para None), exceto enum sob `raise`
- Accessors são gerados uma única vez, na declaração
"""

from .collaborators import EnumLike, ModelFinder  # noqa: F401
from .coercion import COERCERS, coerce, is_blank  # noqa: F401
from .definition import AttributeDefinition  # noqa: F401
from .registry import AttributeRegistry  # noqa: F401
from .types import AttributeType, DateRange  # noqa: F401
