from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional

import pytest
from pydantic import BaseModel, Field, ValidationError

from json_checks.json_model import fold_keys, from_data, from_json, to_jsonable, zero_value


class Status(Enum):
    ACTIVE = "active"
    RETIRED = "retired"


@dataclass
class Category:
    name: str


@dataclass
class Item:
    id: int
    name: str
    category: Category
    status: Status = Status.ACTIVE
    rating: Optional[float] = None
    attributes: Dict[str, int] = field(default_factory=dict)


class Address(BaseModel):
    city: str
    post_code: str = Field(alias="postCode")


class Supplier(BaseModel):
    name: str
    since: date
    addresses: List[Address] = []


def test_nested_dataclasses_case_insensitive():
    item = from_json(Item, '{"Id": 4, "NAME": "Lamp", "Category": {"NAME": "Camp"}, "STATUS": "retired"}')

    assert item == Item(id=4, name="Lamp", category=Category(name="Camp"), status=Status.RETIRED)


def test_nested_base_models_and_aliases_case_insensitive():
    supplier = from_json(
        Supplier,
        '{"NAME": "Acme", "Since": "2020-05-01", "addresses": [{"CITY": "Oslo", "POSTCODE": "0150"}]}',
    )

    assert supplier.name == "Acme"
    assert supplier.since == date(2020, 5, 1)
    assert supplier.addresses[0].post_code == "0150"


def test_fold_keys_leaves_unknown_keys_alone():
    assert fold_keys(Category, {"NAME": "Hike", "Extra": 1}) == {"name": "Hike", "Extra": 1}


def test_fold_keys_through_dict_values():
    folded = fold_keys(Dict[str, Category], {"a": {"Name": "x"}})

    assert folded == {"a": {"name": "x"}}


def test_case_sensitive_decoding_can_be_requested():
    with pytest.raises(ValidationError):
        from_data(Category, {"NAME": "Hike"}, case_insensitive=False)


def test_unknown_keys_are_ignored():
    assert from_data(Category, {"name": "Hike", "extra": [1, 2]}) == Category(name="Hike")


def test_missing_required_field_raises():
    with pytest.raises(ValidationError):
        from_data(Item, {"id": 1})


def test_top_level_null_decodes_to_none():
    assert from_json(Item, "null") is None


def test_dict_of_ints():
    assert from_data(Dict[str, int], {"a": 1, "b": 2}) == {"a": 1, "b": 2}


def test_any_returns_value():
    assert from_data(Any, {"a": [1, {"b": None}]}) == {"a": [1, {"b": None}]}


@pytest.mark.parametrize("model, data", [
    (int, "abc"),
    (List[int], {"a": 1}),
    (Category, "name"),
    (Status, "unknown"),
])
def test_wrong_kind_raises_validation_error(model, data):
    with pytest.raises(ValidationError):
        from_data(model, data)


def test_malformed_json_raises_decode_error():
    with pytest.raises(ValueError):
        from_json(dict, "{broken")


@pytest.mark.parametrize("model, expected", [
    (dict, {}),
    (list, []),
    (List[Category], []),
    (str, ""),
    (int, 0),
    (bool, False),
    (Decimal, Decimal("0")),
    (Optional[int], None),
    (Any, None),
    (date, None),
    (Status, Status.ACTIVE),
])
def test_zero_values(model, expected):
    assert zero_value(model) == expected


def test_zero_value_dataclass():
    assert zero_value(Item) == Item(id=0, name="", category=Category(name=""))


def test_zero_value_base_model():
    supplier = zero_value(Supplier)

    assert supplier.name == ""
    assert supplier.since is None
    assert supplier.addresses == []


def test_to_jsonable_converts_models_dates_and_enums():
    item = Item(id=1, name="Lamp", category=Category(name="Camp"), status=Status.RETIRED)

    assert to_jsonable(item) == {
        "id": 1,
        "name": "Lamp",
        "category": {"name": "Camp"},
        "status": "retired",
        "rating": None,
        "attributes": {},
    }
    assert to_jsonable({"since": date(2020, 5, 1), "price": Decimal("1.50")}) == {
        "since": "2020-05-01",
        "price": "1.50",
    }
