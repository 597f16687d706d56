# tests/conftest.py
"""
Fixtures compartilhados para testes do Riveter.

Este módulo define fixtures reutilizáveis que fornecem:
- YAMLs de configuração (defaults + override local)
- uma fábrica de classes host isoladas
- uma classe host completa, com um atributo de cada type tag

O objetivo destas fixtures é permitir testes do core (declaração,
coerção, accessors e pipeline de params) sem depender de:
- filesystem (exceto onde `tmp_path` é usado explicitamente)
- ORMs ou bancos de dados
- frameworks web

Decisões arquiteturais:
    - Cada teste recebe classes host novas; declarações nunca vazam
      entre testes
    - Colaboradores (enums, modelos, finders) vêm de `tests/fixtures/models.py`
    - Imports do core são realizados de forma lazy para melhorar a
      clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture compartilha estado mutável entre testes
    - Nenhuma fixture realiza I/O

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

import pytest


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def riveter_defaults_yaml() -> str:
    """
    YAML de defaults de projeto semelhante a um `riveter.defaults.yaml` real.

    Sobrescreve apenas parte das chaves embutidas; as demais devem vir
    de `DEFAULT_CONFIG` após o merge.

    Returns:
        str: Conteúdo YAML representando defaults do projeto.
    """
    return """\
coercion:
  date_formats:
    - "%Y-%m-%d"
    - "%d/%m/%Y"
enum:
  on_invalid: none
"""


@pytest.fixture
def riveter_local_yaml() -> str:
    """
    YAML de override local (ex.: `riveter.local.yaml`).

    Returns:
        str: Conteúdo YAML representando overrides locais.
    """
    return """\
enum:
  on_invalid: raise
events:
  enabled: false
"""


# =====================================================
# Host classes
# =====================================================

@pytest.fixture
def make_host():
    """
    Fixture factory que cria classes host novas derivadas de `Attributes`.

    Cada chamada produz uma classe independente, o que permite declarar
    atributos livremente sem afetar outros testes.

    Returns:
        Callable[[str], type]: fábrica `make_host(name="Host", base=None)`.
    """
    from riveter import Attributes

    def _make(name: str = "Host", base=None):
        return type(name, (base or Attributes,), {})

    return _make


@pytest.fixture
def SearchForm(make_host):
    """
    Classe host com um atributo de cada type tag suportado.

    Usado por testes de accessors, instância, metadados e pipeline.
    """
    from decimal import Decimal

    from tests.fixtures.models import ColorCatalog, Product, Status

    cls = make_host("SearchForm")
    cls.attr_string("name", required=True)
    cls.attr_text("notes")
    cls.attr_integer("quantity", default=1)
    cls.attr_decimal("price", default=Decimal("0"))
    cls.attr_date("published_on")
    cls.attr_time("updated_at")
    cls.attr_date_range("period")
    cls.attr_boolean("featured", default=False)
    cls.attr_enum("status", Status, default=Status.ACTIVE)
    cls.attr_enum("color", ColorCatalog)
    cls.attr_array("tags", "string", default_factory=list)
    cls.attr_hash("filters")
    cls.attr_model("product", Product)
    cls.attr_object("extra")
    return cls
