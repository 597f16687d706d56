# src/riveter/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Riveter.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, o merge e a materialização das settings de coerção.

As exceções aqui definidas representam **violações estruturais
explícitas** da configuração, e não falhas de coerção de valores.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros de configuração são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de coerção ou de atribuição

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende de registry, accessors ou instâncias
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do Riveter.

    Todas as exceções levantadas durante carregamento, merge e
    validação de settings devem herdar desta classe.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de defaults informado
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - Um `defaults_path` explícito é obrigatório quando informado
        - Sem `defaults_path`, os defaults embutidos são usados
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"enum": {"on_invalid": "none"}}
        - override: {"enum": "raise"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidSettingError(ConfigError):
    """
    Exceção levantada quando um valor da configuração resolvida não
    pode ser materializado em `AttributeSettings`.

    Exemplos:
        - `enum.on_invalid` fora de {"none", "raise"}
        - `coercion.date_formats` vazio ou com itens não textuais
    """
