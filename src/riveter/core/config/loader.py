# src/riveter/core/config/loader.py
"""
Loader canônico de configuração do Riveter.

Este módulo é responsável por carregar, validar estruturalmente e resolver
a configuração efetiva utilizada pelo motor de coerção de atributos.

A configuração é resolvida a partir de:
    - um arquivo de defaults (opcional; sem ele, `DEFAULT_CONFIG` embutido)
    - um arquivo local de overrides (opcional)

Responsabilidades do módulo:
    - Carregar arquivos de configuração em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Resolver a configuração final via deep-merge determinístico
    - Garantir precedência explícita do override local sobre defaults

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults
    - `DEFAULT_CONFIG` nunca é mutado

Limites explícitos:
    - Não valida semântica das settings (ver `settings.py`)
    - Não interage com classes host ou instâncias
"""

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


DEFAULT_CONFIG: Dict[str, Any] = {
    "coercion": {
        "date_formats": ["%Y-%m-%d"],
        "time_formats": [
            "%Y-%m-%d %H:%M:%S",
            "%Y-%m-%d %H:%M",
            "%Y-%m-%dT%H:%M:%S",
        ],
        "true_values": ["1", "true", "t", "yes", "y", "on"],
        "range_separator": "..",
    },
    "enum": {
        "on_invalid": "none",
    },
    "events": {
        "enabled": True,
    },
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Decisões arquiteturais:
        - Arquivos vazios são interpretados como dicionários vazios
        - Formatos não suportados geram erro explícito

    Args:
        path (Path): Caminho para o arquivo de configuração.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva do motor de atributos.

    Política de resolução:
        - Sem `defaults_path`, a base é uma cópia de `DEFAULT_CONFIG`
        - Com `defaults_path`, o arquivo é obrigatório e é mesclado sobre
          `DEFAULT_CONFIG` (chaves omitidas mantêm o valor embutido)
        - O arquivo local é opcional; quando presente, tem prioridade

    Args:
        defaults_path (Optional[str]): Caminho opcional para defaults do projeto.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults informado não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """

    effective = deepcopy(DEFAULT_CONFIG)

    if defaults_path is not None:
        defaults = _load_file(Path(defaults_path))
        effective = deep_merge(effective, defaults)

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            local = _load_file(local_file)
            effective = deep_merge(effective, local)

    return effective
