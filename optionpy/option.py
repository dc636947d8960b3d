from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .errors import ValueAbsent

T = TypeVar("T")
U = TypeVar("U")


def _identity(v: Any) -> Any: return v
def _true(*_: Any) -> bool: return True
def _false(*_: Any) -> bool: return False
def _nothing(*_: Any) -> None: return None


def _raise(message: str) -> Any:
    raise ValueAbsent(message)


class Option(Generic[T]):
    """An optional value: either `Some(value)` or `NONE`.

    `match` is the only method the two variants implement themselves; every
    other method here is expressed through it, so adding behaviour never
    needs to look at the variant directly.

    Example:
        ```python
        port = from_nullable(os.environ.get("PORT")).map(int).unwrap_or(8080)

        label = Some(5).match(lambda v: f"got {v}", lambda: "nothing")
        ```
    """
    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> "Option[Any]":
        if cls is Option:
            raise TypeError("Option cannot be instantiated directly; use Some(value), NONE or from_nullable(value)")
        return super().__new__(cls)

    def match(self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:
        """Call `on_some(value)` if present, otherwise `on_none()`, and return its result.

        Exactly one branch runs.
        """
        raise NotImplementedError

    # predicates

    def is_some(self) -> bool: return self.match(_true, _false)
    def is_none(self) -> bool: return self.match(_false, _true)

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        return self.match(lambda v: bool(predicate(v)), _false)

    # unwrapping

    def expect(self, message: str) -> T:
        """Return the value, or raise `ValueAbsent` carrying `message` unchanged."""
        return self.match(_identity, lambda: _raise(message))

    def unwrap(self) -> T:
        return self.expect("called `Option.unwrap()` on a `None` value")

    def unwrap_or(self, default: T) -> T:
        return self.match(_identity, lambda: default)

    def unwrap_or_else(self, on_none: Callable[[], T]) -> T:
        return self.match(_identity, on_none)

    def get_or_else(self, default: U) -> T | U:
        return self.unwrap_or(default)  # type: ignore[arg-type]

    # transformation

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        return self.match(lambda v: Some(f(v)), lambda: NONE)

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return self.match(f, lambda: default)

    def map_or_else(self, on_none: Callable[[], U], f: Callable[[T], U]) -> U:
        return self.match(f, on_none)

    def inspect(self, f: Callable[[T], Any]) -> "Option[T]":
        """Run `f(value)` for its side effect when present; always returns `self`."""
        self.match(f, _nothing)
        return self

    # chaining

    def and_(self, other: "Option[U]") -> "Option[U]":
        return self.match(lambda _: other, lambda: NONE)

    def and_then(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        return self.match(f, lambda: NONE)

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        return self.and_then(f)

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        return self if self.is_some_and(predicate) else NONE

    def or_(self, other: "Option[T]") -> "Option[T]":
        return self.match(lambda _: self, lambda: other)

    def or_else(self, on_none: Callable[[], "Option[T]"]) -> "Option[T]":
        return self.match(lambda _: self, on_none)

    def xor(self, other: "Option[T]") -> "Option[T]":
        """Return whichever side is present when exactly one is, otherwise `NONE`."""
        if self.is_some() and other.is_none():
            return self
        if self.is_none() and other.is_some():
            return other
        return NONE

    def __and__(self, other: Any) -> "Option[Any]":
        if not isinstance(other, Option): return NotImplemented
        return self.and_(other)

    def __or__(self, other: Any) -> "Option[Any]":
        if not isinstance(other, Option): return NotImplemented
        return self.or_(other)

    def __xor__(self, other: Any) -> "Option[Any]":
        if not isinstance(other, Option): return NotImplemented
        return self.xor(other)

    # interop

    def to_nullable(self) -> Optional[T]:
        return self.match(_identity, _nothing)

    def to_json(self) -> Optional[T]:
        return self.to_nullable()

    def __str__(self) -> str:
        return self.match(lambda v: f"Some({v})", lambda: "None")

    def __repr__(self) -> str:
        return self.match(lambda v: f"Some({v!r})", lambda: "None")


@dataclass(frozen=True, repr=False)
class Some(Option[T]):
    value: T
    def match(self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U: return on_some(self.value)


class _None(Option[Any]):
    __slots__ = ()
    _instance: Optional["_None"] = None

    def __new__(cls) -> "_None":
        # one shared instance per process
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def match(self, on_some: Callable[[Any], U], on_none: Callable[[], U]) -> U: return on_none()

    def __reduce__(self) -> Any: return (_None, ())
    def __copy__(self) -> "_None": return self
    def __deepcopy__(self, memo: Any) -> "_None": return self


NONE: Option[Any] = _None()


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE


def is_option(value: Any) -> bool:
    return isinstance(value, Option)
