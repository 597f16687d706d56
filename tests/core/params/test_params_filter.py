"""
Tests: core.params (filter)
===========================

`filter_params` mantém apenas chaves declaradas (inclusive componentes
`_from`/`_to`) e nunca falha por chave desconhecida.
"""

import pytest

from riveter.core.params import filter_params, partition_params


def test_filter_keeps_declared_keys_only(SearchForm):
    kept = filter_params(
        SearchForm.attribute_registry(),
        {"name": "rivet", "period_from": "2010-01-12", "admin": True},
    )

    assert kept == {"name": "rivet", "period_from": "2010-01-12"}


def test_partition_reports_dropped_keys(SearchForm):
    kept, dropped = partition_params(SearchForm.attribute_registry(), {"name": "x", "admin": 1, "id": 2})

    assert kept == {"name": "x"}
    assert dropped == ["admin", "id"]


def test_filter_handles_none_and_rejects_non_mappings(SearchForm):
    registry = SearchForm.attribute_registry()

    assert filter_params(registry, None) == {}
    with pytest.raises(TypeError):
        filter_params(registry, ["name"])


def test_instance_filter_logs_dropped_keys(SearchForm):
    form = SearchForm()

    kept = form.filter_params({"quantity": "3", "admin": True})

    assert kept == {"quantity": "3"}
    event = form.events.events[-1]
    assert event["level"] == "warning"
    assert event["dropped"] == ["admin"]
    # chaves descartadas não são warnings de atributo
    assert form.warnings == {}


def test_filter_does_not_mutate_input(SearchForm):
    params = {"name": "x", "admin": True}

    SearchForm().filter_params(params)

    assert params == {"name": "x", "admin": True}
