"""Tests de serialización del filtro de lotes vendibles."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from adapters.query_params import serialize_query_params
from core.domain.models import SellableLotQuery


def test_scalar_query() -> None:
    assert serialize_query_params(SellableLotQuery(query="milk")) == "query=milk"


def test_array_drops_null_and_nan_keeping_order() -> None:
    query = SellableLotQuery(category_ids=[1, None, 2, math.nan])

    assert serialize_query_params(query) == "categoryIds=1&categoryIds=2"


def test_absent_scalar_is_omitted() -> None:
    assert serialize_query_params(SellableLotQuery(limit=None)) == ""
    assert serialize_query_params(SellableLotQuery()) == ""


def test_array_drops_non_numeric_and_infinite_entries() -> None:
    query = SellableLotQuery(supplier_ids=["7", "abc", math.inf, 8.0, True])

    assert serialize_query_params(query) == "supplierIds=7&supplierIds=8"


def test_all_fields_use_wire_names_and_repeat_keys() -> None:
    query = SellableLotQuery(
        query="whole milk",
        parent_category_ids=[10],
        category_ids=[11, 12],
        supplier_ids=[3],
        limit=50,
    )

    assert serialize_query_params(query) == (
        "query=whole+milk"
        "&parentCategoryIds=10"
        "&categoryIds=11&categoryIds=12"
        "&supplierIds=3"
        "&limit=50"
    )


def test_empty_array_emits_nothing() -> None:
    assert serialize_query_params(SellableLotQuery(category_ids=[])) == ""


def test_plain_mapping_is_accepted() -> None:
    assert serialize_query_params({"categoryIds": [1, None], "limit": 5, "query": None}) == "categoryIds=1&limit=5"


def test_id_lists_reject_non_scalar_elements() -> None:
    with pytest.raises(ValidationError):
        SellableLotQuery(category_ids=[1, {"id": 2}])

    with pytest.raises(ValidationError):
        SellableLotQuery(supplier_ids=[object()])


def test_id_lists_keep_booleans_as_booleans() -> None:
    query = SellableLotQuery(parent_category_ids=[True, 3])

    assert query.parent_category_ids is not None
    assert query.parent_category_ids[0] is True
    assert serialize_query_params(query) == "parentCategoryIds=3"


def test_query_is_immutable() -> None:
    query = SellableLotQuery(query="milk")

    with pytest.raises(ValidationError):
        query.query = "bread"  # type: ignore[misc]
