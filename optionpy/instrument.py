from __future__ import annotations
from typing import TypeVar

from .logger import ConsoleLogger
from .option import Option

T = TypeVar("T")


def instrument(name: str, opt: Option[T], logger: ConsoleLogger | None = None, level: str = "DEBUG", tags: dict[str, str] | None = None) -> Option[T]:
    """Log whether `opt` holds a value, then hand it back unchanged.

    Works like `Option.inspect` but also reports the absent case, which makes
    it handy for finding where in a chain a value went missing.

    Args:
        name: Label used as the message prefix
        opt: The option to report on
        logger: Where to log; without one nothing is emitted
        level: Level name for the record
        tags: Extra fields attached to the record

    Returns:
        `opt` itself

    Example:
        ```python
        log = ConsoleLogger(level="DEBUG")
        user = instrument("user.lookup", from_nullable(users.get(uid)), log, tags={"uid": uid})
        # [...] optionpy DEBUG: user.lookup some uid=7 value=<User 7>
        ```
    """
    if logger is None:
        return opt
    fields = dict(tags or {})
    opt.match(
        lambda v: logger.log(level, f"{name} some", **{**fields, "value": v}),
        lambda: logger.log(level, f"{name} none", **fields),
    )
    return opt
