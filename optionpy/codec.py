from __future__ import annotations
import json
from typing import Any, Mapping, TypeVar

from .option import Option, from_nullable

A = TypeVar("A")


class OptionEncoder(json.JSONEncoder):
    """`json.JSONEncoder` that writes an Option as its bare value (`null` when absent).

    Example:
        ```python
        json.dumps({"nick": Some("ada"), "age": NONE}, cls=OptionEncoder)
        # '{"nick": "ada", "age": null}'
        ```
    """
    def default(self, o: Any) -> Any:
        if isinstance(o, Option):
            return o.to_nullable()
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    kwargs.setdefault("cls", OptionEncoder)
    kwargs.setdefault("separators", (",", ":"))
    return json.dumps(obj, **kwargs)


def to_jsonable(obj: Any) -> Any:
    # Options nested in a Some are unwrapped too
    if isinstance(obj, Option):
        return to_jsonable(obj.to_nullable())
    if isinstance(obj, Mapping):
        return {k: to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(v) for v in obj]
    return obj


def loads_field(data: Mapping[str, A], key: str) -> Option[A]:
    return from_nullable(data.get(key))
