# src/riveter/core/config/hashing.py
"""
Hashing canônico de estruturas de configuração e de schema do Riveter.

O hash gerado representa a **identidade estrutural** de um dicionário
serializável e é utilizado para:
    - identificar as settings efetivas de coerção (`AttributeSettings.config_hash`)
    - identificar o schema declarado de uma classe (`attribute_schema_hash`)

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Estruturas equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""


import json
import hashlib
from typing import Any, Dict, List, Union


def _canonical_json(data: Any) -> str:
    return json.dumps(
        data,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração efetiva.

    Args:
        config (Dict[str, Any]): Configuração resolvida.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    return hashlib.sha256(_canonical_json(config).encode("utf-8")).hexdigest()


def compute_schema_hash(schema: Union[List[Dict[str, Any]], Dict[str, Any]]) -> str:
    """Hash SHA-256 do schema declarado (lista ordenada de metadados de atributos).

    A ordem da lista participa do hash: redeclarar os mesmos atributos em
    outra ordem produz outro schema.
    """
    if not isinstance(schema, (list, dict)):
        raise TypeError(
            f"Schema para hashing deve ser list ou dict, recebido: {type(schema).__name__}"
        )
    return hashlib.sha256(_canonical_json(schema).encode("utf-8")).hexdigest()
