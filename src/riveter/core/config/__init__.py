# src/riveter/core/config/__init__.py

"""
Camada de configuração do Riveter.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar, validar e identificar as settings do motor de coerção.

A configuração no Riveter é:
    - declarativa (YAML/JSON)
    - determinística
    - separada das declarações de atributos

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Materialização tipada em `AttributeSettings`
    - Geração de hash canônico (config e schema)

Limites explícitos:
    - Não declara atributos
    - Não realiza coerção de valores
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash, compute_schema_hash  # noqa: F401
from .loader import DEFAULT_CONFIG, load_config  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .settings import DEFAULT_SETTINGS, AttributeSettings, load_settings  # noqa: F401
