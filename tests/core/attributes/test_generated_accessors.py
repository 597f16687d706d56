"""
Tests: core.attributes.accessors
================================

Getters/setters gerados e accessors auxiliares:
- setters sempre passam pelo motor de coerção
- `date_range` expõe `_from`/`_to` e os predicados `has_`
- `enum` expõe `<name>_enum()` e a coleção pluralizada
- `model` expõe `<name>_model()`
- valores perdidos na coerção geram warnings no event log
"""

from datetime import date
from decimal import Decimal

import pytest

from riveter import DateRange
from riveter.core.attributes.accessors import pluralize

from tests.fixtures.models import ColorCatalog, Product, Status


@pytest.mark.parametrize(
    "word, plural",
    [("status", "statuses"), ("category", "categories"), ("day", "days"), ("color", "colors"), ("box", "boxes")],
)
def test_pluralize(word, plural):
    assert pluralize(word) == plural


def test_setters_coerce_raw_values(SearchForm):
    form = SearchForm()

    form.quantity = "42"
    form.price = "9.998"
    form.published_on = "2010-01-12"
    form.featured = "0"
    form.status = "archived"
    form.tags = "solo"
    form.product = "1"

    assert form.quantity == 42
    assert form.price == Decimal("9.998")
    assert form.published_on == date(2010, 1, 12)
    assert form.featured is False
    assert form.status is Status.ARCHIVED
    assert form.tags == ["solo"]
    assert form.product.name == "Rivet"


def test_typed_boolean_is_kept(SearchForm):
    form = SearchForm()
    form.featured = True

    assert form.featured is True


def test_date_range_round_trip(SearchForm):
    form = SearchForm()

    form.period = "2010-01-12..2011-01-12"

    assert form.period_from == date(2010, 1, 12)
    assert form.period_to == date(2011, 1, 12)
    assert form.period == DateRange(date(2010, 1, 12), date(2011, 1, 12))
    assert form.has_period_from
    assert form.has_period_to


def test_date_range_components_are_writable(SearchForm):
    form = SearchForm()

    form.period_to = "2011-01-12"

    assert form.period == DateRange(None, date(2011, 1, 12))
    assert not form.has_period_from
    assert form.has_period_to

    form.period_from = date(2010, 1, 12)
    assert form.period.to_tuple() == (date(2010, 1, 12), date(2011, 1, 12))


def test_date_range_blank_clears_both_ends(SearchForm):
    form = SearchForm()
    form.period = ("2010-01-12", "2011-01-12")

    form.period = ""

    assert form.period is None
    assert form.period_from is None
    assert form.period_to is None
    assert not form.has_period_from


def test_presence_predicates_are_read_only(SearchForm):
    form = SearchForm()

    with pytest.raises(AttributeError):
        form.has_period_from = True


def test_enum_class_accessors(SearchForm):
    assert SearchForm.status_enum() is Status
    assert SearchForm.statuses() == [Status.ACTIVE, Status.INACTIVE, Status.ARCHIVED]
    assert SearchForm.color_enum() is ColorCatalog
    assert SearchForm.colors() == ["red", "green", "blue"]
    # também acessíveis pela instância
    assert SearchForm().statuses() == SearchForm.statuses()


def test_model_class_accessor(SearchForm):
    assert SearchForm.product_model() is Product


def test_lost_values_produce_warnings(SearchForm):
    form = SearchForm()

    form.quantity = "abc"
    form.published_on = "31/31/2010"
    form.period = "nope..never"

    assert form.quantity is None
    assert form.published_on is None
    assert form.period is None
    assert set(form.warnings) == {"quantity", "published_on", "period"}
    assert form.warnings["quantity"] == ["value could not be coerced to integer"]
    event = [e for e in form.events.events if e["attribute"] == "quantity"][-1]
    assert event["level"] == "warning"
    assert event["raw"] == "'abc'"


def test_blank_values_do_not_warn(SearchForm):
    form = SearchForm()

    form.quantity = ""
    form.period = None
    form.status = ""

    assert form.quantity is None
    assert form.warnings == {}


def test_enum_raise_policy_surfaces_through_setter(make_host):
    from riveter.core.exceptions import InvalidEnumValue

    host = make_host()
    host.attr_enum("status", Status, on_invalid="raise")
    form = host()

    with pytest.raises(InvalidEnumValue):
        form.status = "deleted"
    assert form.status is None


def test_instances_do_not_share_storage(SearchForm):
    first = SearchForm()
    second = SearchForm()

    first.tags.append("mutated")
    first.quantity = 10

    assert second.tags == []
    assert second.quantity == 1
