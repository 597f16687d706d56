# tests/core/test_event_log.py
"""
Testes do AttributeEventLog.

Os testes asseguram que:
- eventos são estruturados e carregam owner, attribute, level e timestamp
- warnings são agrupados por atributo
- `warn` registra warning e evento de uma só vez
- um log desabilitado não produz efeitos

Limites explícitos:
    - Não valida quais eventos o pipeline de params emite
"""

from datetime import datetime

from riveter.core.context import AttributeEventLog


def test_log_produces_structured_event():
    log = AttributeEventLog(owner="Query")

    log.log(attribute="limit", level="info", message="assigned", raw="'5'")

    event = log.events[0]
    assert event["owner"] == "Query"
    assert event["attribute"] == "limit"
    assert event["level"] == "info"
    assert event["raw"] == "'5'"
    assert datetime.fromisoformat(event["timestamp"]).tzinfo is not None


def test_warnings_are_grouped_by_attribute():
    log = AttributeEventLog(owner="Query")

    log.add_warning(attribute="limit", message="first")
    log.add_warning(attribute="limit", message="second")
    log.add_warning(attribute="day", message="other")

    assert log.warnings == {"limit": ["first", "second"], "day": ["other"]}
    assert log.events == []


def test_warn_records_warning_and_event():
    log = AttributeEventLog(owner="Query")

    log.warn(attribute="day", message="lost", raw="'x'")

    assert log.warnings == {"day": ["lost"]}
    assert log.events[-1]["level"] == "warning"
    assert log.events[-1]["raw"] == "'x'"


def test_disabled_log_is_noop():
    log = AttributeEventLog(owner="Query", enabled=False)

    log.log(attribute=None, level="info", message="ignored")
    log.warn(attribute="day", message="ignored")

    assert log.events == []
    assert log.warnings == {}


def test_clear():
    log = AttributeEventLog(owner="Query")
    log.warn(attribute="day", message="lost")

    log.clear()

    assert log.events == []
    assert log.warnings == {}
