"""
Testes da limpeza recursiva de params (`clean`).

Este módulo valida a remoção de valores blank (None / "") em qualquer
nível de aninhamento de mapas e sequências.

Decisões arquiteturais:
    - Escalares não blank passam intactos (inclusive 0, False e " ")
    - Sequências voltam como list
    - Containers que ficam vazios após a limpeza são mantidos

Invariantes:
    - clean(clean(x)) == clean(x)
    - O input nunca é mutado
"""

import pytest

from riveter.core.params import clean, clean_params


def test_clean_strips_blank_values_recursively():
    raw = {
        "name": "rivet",
        "notes": "",
        "missing": None,
        "filters": {"color": "", "size": "M", "deep": {"x": None, "y": 0}},
        "tags": ["a", "", None, "b"],
        "rows": [{"a": "", "b": 1}, None],
    }

    assert clean(raw) == {
        "name": "rivet",
        "filters": {"size": "M", "deep": {"y": 0}},
        "tags": ["a", "b"],
        "rows": [{"b": 1}],
    }


@pytest.mark.parametrize(
    "raw, expected",
    [
        ({"a": [1, 2, ""]}, {"a": [1, 2]}),
        ({"a": [1, 2, None]}, {"a": [1, 2]}),
        ({"a": "A", "b": ""}, {"a": "A"}),
        ({"a": "A", "b": None}, {"a": "A"}),
    ],
)
def test_clean_examples(raw, expected):
    assert clean(raw) == expected


def test_clean_keeps_falsy_non_blank_scalars():
    assert clean({"zero": 0, "no": False, "space": " ", "empty_list": []}) == {
        "zero": 0,
        "no": False,
        "space": " ",
        "empty_list": [],
    }


def test_clean_keeps_containers_emptied_by_cleaning():
    assert clean({"filters": {"color": ""}, "tags": [None, ""]}) == {"filters": {}, "tags": []}


def test_clean_converts_tuples_and_passes_scalars():
    assert clean(("a", "", "b")) == ["a", "b"]
    assert clean("text") == "text"
    assert clean(None) is None


@pytest.mark.parametrize(
    "raw",
    [
        {"a": {"b": {"c": ""}}, "d": [None, {"e": None}]},
        {"x": ["", ("", None)], "y": 1},
        {},
    ],
)
def test_clean_is_idempotent(raw):
    once = clean(raw)

    assert clean(once) == once


def test_clean_does_not_mutate_input():
    raw = {"a": "", "nested": {"b": None}, "items": ["", "x"]}

    clean_params(raw)

    assert raw == {"a": "", "nested": {"b": None}, "items": ["", "x"]}


def test_clean_params_accepts_none():
    assert clean_params(None) == {}
