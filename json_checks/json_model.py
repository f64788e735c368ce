# json_checks/json_model.py - typed JSON decoding with case-insensitive field names
"""
Decode JSON into caller-declared models with pydantic.

Any type pydantic can validate works as a model: BaseModel subclasses,
dataclasses, containers, Optional, enums, datetime, Decimal, ...
Before validation, object keys are folded onto the model's field names
(or aliases) case-insensitively, recursively through nested models.
"""

import dataclasses
import json
import types
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, List, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel, TypeAdapter
from pydantic_core import to_jsonable_python
from requests.structures import CaseInsensitiveDict

_UNION_TYPES = (Union, getattr(types, "UnionType", Union))  # X | None on 3.10+


@lru_cache(maxsize=None)
def _adapter(model) -> TypeAdapter:
    return TypeAdapter(model)


def _is_model_class(model, base) -> bool:
    return isinstance(model, type) and issubclass(model, base)


def _unwrap_optional(model):
    if get_origin(model) not in _UNION_TYPES:
        return model
    args = [a for a in get_args(model) if a is not type(None)]
    return args[0] if len(args) == 1 else model


def _field_types(model):
    """JSON key -> annotation for BaseModel and dataclass models, else None."""
    if _is_model_class(model, BaseModel):
        return {info.alias or name: info.annotation for name, info in model.model_fields.items()}
    if dataclasses.is_dataclass(model) and isinstance(model, type):
        hints = get_type_hints(model)
        return {f.name: hints.get(f.name, Any) for f in dataclasses.fields(model)}
    return None


def fold_keys(model, data):
    """Rename object keys to the model's field names, ignoring case."""
    model = _unwrap_optional(model)
    origin = get_origin(model) or model
    args = get_args(model)

    if isinstance(data, list) and origin in (list, List) and args:
        return [fold_keys(args[0], item) for item in data]
    if not isinstance(data, dict):
        return data

    fields = _field_types(model)
    if fields is not None:
        names = CaseInsensitiveDict({name: name for name in fields})
        folded = {}
        for key, value in data.items():
            name = names.get(key)
            if name is None:
                folded[key] = value
            else:
                folded[name] = fold_keys(fields[name], value)
        return folded
    if origin in (dict, Dict) and len(args) == 2:
        return {k: fold_keys(args[1], v) for k, v in data.items()}
    return data


def from_data(model, data, case_insensitive=True, strict=False):
    """Validate an already-parsed JSON value as model. A top-level null stays None."""
    if data is None:
        return None
    if case_insensitive:
        data = fold_keys(model, data)
    return _adapter(model).validate_python(data, strict=strict)


def from_json(model, text: str, case_insensitive=True, strict=False):
    """Parse JSON text and validate it as model."""
    return from_data(model, json.loads(text), case_insensitive=case_insensitive, strict=strict)


def zero_value(model):
    """
    Default/empty instance of model, used when there is no content to parse.

    Required fields of dataclasses and BaseModels get the zero value of their
    own annotation; types with no no-argument constructor zero to None.
    """
    if model is Any or model is object or get_origin(model) in _UNION_TYPES:
        return None
    origin = get_origin(model) or model
    if origin in (list, List):
        return []
    if origin in (dict, Dict):
        return {}
    if _is_model_class(model, BaseModel):
        zeros = {name: zero_value(info.annotation)
                 for name, info in model.model_fields.items() if info.is_required()}
        return model.model_construct(**zeros)
    if dataclasses.is_dataclass(model) and isinstance(model, type):
        hints = get_type_hints(model)
        zeros = {f.name: zero_value(hints.get(f.name, Any))
                 for f in dataclasses.fields(model)
                 if f.init and f.default is dataclasses.MISSING
                 and f.default_factory is dataclasses.MISSING}
        return model(**zeros)
    if _is_model_class(model, Enum):
        return next(iter(model))
    try:
        return model()
    except TypeError:
        return None


def to_jsonable(obj):
    """Turn request content (models, dataclasses, datetimes, ...) into JSON-ready data."""
    return to_jsonable_python(obj)
