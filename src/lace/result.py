"""Result values and the resultish normalization protocol.

``Result`` is strictly ``Ok(value) | Err(error)`` and the combinators in this
module operate on those values only.

Plenty of Python code reports outcomes in looser shapes: a bare ``"ok"``,
``("ok", value, extra)``, ``("error", code, details)``, or a raised-and-caught
exception object. We call these *okish* (successful computations) and
*errorish* (failures), and together with plain values (*valish*) the whole
family is *resultish*. ``from_`` turns any resultish value into a proper
``Result`` so it can flow through ``collect``, ``collapse`` and ``chain``.

For error payloads prefer exception instances, ``Err(ValueError("bad id"))``
over ``Err("bad id")``: they match uniformly, carry extra fields, and can be
raised as-is at the edge of a pipeline.

Example:
    >>> from lace.result import Ok, chain, from_
    >>> chain(from_(("ok", 20)), lambda n: Ok(n + 1))
    Ok(21)
    >>> chain(from_(("error", "timeout", 3)), lambda n: Ok(n + 1))
    Err(('timeout', 3))
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeAlias, TypeGuard, TypeVar

from .config import effective_settings
from .errors import UnsupportedShapeError
from .log import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

_OK = True
_ERR = False

# Largest number of payload fields a tagged tuple may carry
MAX_PAYLOAD = 5

_log = get_logger("lace.result")


class Tag(StrEnum):
    """Success and failure markers.

    Members are strings, so ``"ok"`` and ``Tag.OK`` are interchangeable.
    """
    OK = "ok"
    ERROR = "error"


Okish: TypeAlias = "str | tuple[Any, ...] | Result[Any, Any]"
Errorish: TypeAlias = "str | BaseException | tuple[Any, ...] | Result[Any, Any]"


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Payloads are never inspected or flattened: ``Ok(Err(1))`` stays nested.

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err("fail").map(lambda x: x * 2).unwrap_err()
        'fail'
        >>> Ok(5).flat_map(lambda x: Ok(x * 2) if x > 0 else Err("neg"))
        Ok(10)
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    # ─── Value Extraction ──────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value. Raises RuntimeError on Err."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap() on Err: {self._value!r}")

    def unwrap_err(self) -> E:
        """Extract Err value. Raises RuntimeError on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap_err() on Ok: {self._value!r}")

    def unwrap_or(self, default: T) -> T:
        """Extract Ok value or return default."""
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract Ok value or compute from error via f."""
        return self._value if self._is_ok else f(self._value)  # type: ignore[return-value,arg-type]

    def expect(self, msg: str) -> T:
        """Extract Ok value with custom error message."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"{msg}: {self._value!r}")

    # ─── Functor Operations ────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else self  # type: ignore[arg-type,return-value]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Signature: Result[T,E] → (E→F) → Result[T,F]"""
        return Result(f(self._value), _ERR) if not self._is_ok else self  # type: ignore[arg-type,return-value]

    # ─── Monad Operations ──────────────────────────────────────────────

    def flat_map(self, f: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """Method form of chain(). Chain operations that can fail.

        Example:
            >>> Ok("42").flat_map(lambda s: Ok(int(s))).flat_map(lambda n: Err("neg") if n < 0 else Ok(n))
            Ok(42)
        """
        return chain(self, f)

    and_then = flat_map

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """On Err, apply f to recover. On Ok, pass through."""
        return f(self._value) if not self._is_ok else self  # type: ignore[arg-type,return-value]

    # ─── Inspection & Conversion ─────────────────────────────────────────

    def ok(self) -> T | None:
        """Ok value if Ok, None if Err."""
        return self._value if self._is_ok else None  # type: ignore[return-value]

    def err(self) -> E | None:
        """Err value if Err, None if Ok."""
        return self._value if not self._is_ok else None  # type: ignore[return-value]

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive case analysis. Forces handling both Ok and Err."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    def to_tagged(self) -> tuple[Tag, T | E]:
        """Render as a tagged tuple, the inverse of from_().

        Example:
            >>> Ok(3).to_tagged() == ("ok", 3)
            True
        """
        return (Tag.OK if self._is_ok else Tag.ERROR, self._value)

    # ─── Dunder Methods ──────────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, Any]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[Any, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


def ok(value: T) -> Result[T, Any]:
    """Wrap any value as Ok. No inference: use from_() for that.

    Example:
        >>> ok(2)
        Ok(2)
        >>> ok(("error", "http_error"))
        Ok(('error', 'http_error'))
    """
    return Result(value, _OK)


def error(err: E) -> Result[Any, E]:
    """Wrap any value as Err. No inference: use from_() for that.

    Example:
        >>> error("http_error")
        Err('http_error')
        >>> error(("ok", 12))
        Err(('ok', 12))
    """
    return Result(err, _ERR)


# ═══════════════════════════════════════════════════════════════════════════════
# Classification
# ═══════════════════════════════════════════════════════════════════════════════


def _tag_of(val: object) -> object:
    """Marker carried by a bare or tagged value, or None."""
    if isinstance(val, tuple):
        val = val[0] if val else None
    return val if type(val) is str or isinstance(val, Tag) else None


def is_errorish(val: object) -> TypeGuard[Errorish]:
    """True if val is an error object, an Err, or carries the failure marker.

    Tagged tuples are classified by their tag alone, whatever their arity, so
    ("error",) is errorish even though strict from_() rejects it.

    Usable in match guards:
        >>> match ("error", 404):
        ...     case v if is_errorish(v): print("failed")
        failed
    """
    if isinstance(val, Result):
        return not val._is_ok
    return isinstance(val, BaseException) or _tag_of(val) == Tag.ERROR


def is_okish(val: object) -> TypeGuard[Okish]:
    """True if val carries an explicit success marker (or is an Ok).

    Example:
        >>> is_okish("ok"), is_okish(("ok", 1, 2)), is_okish(1)
        (True, True, False)
    """
    if isinstance(val, Result):
        return val._is_ok
    return _tag_of(val) == Tag.OK


def is_valish(val: object) -> bool:
    """True if val is neither okish nor errorish. from_() wraps such values as Ok.

    Example:
        >>> is_valish(12), is_valish("error")
        (True, False)
    """
    return not (is_errorish(val) or is_okish(val))


# ═══════════════════════════════════════════════════════════════════════════════
# Normalization
# ═══════════════════════════════════════════════════════════════════════════════


def from_(value: object, *, strict: bool | None = None) -> Result[Any, Any]:
    """Turn any resultish value into a Result.

    Errorish values become Err, everything else becomes Ok. Tagged tuples
    unwrap a single payload and keep several payloads together as a tuple.
    A tag with no payload or with more than MAX_PAYLOAD fields raises
    UnsupportedShapeError, unless strict is False (or LACE_STRICT_SHAPES is
    off), in which case the tuple is wrapped as a plain value.

    Examples:
        >>> from_(12)
        Ok(12)
        >>> from_("ok")
        Ok(None)
        >>> from_("error")
        Err(None)
        >>> from_(("ok", 12))
        Ok(12)
        >>> from_(("error", "reason", {"trace_id": 100}))
        Err(('reason', {'trace_id': 100}))
        >>> from_(RuntimeError("oh-oh!"))
        Err(RuntimeError('oh-oh!'))
    """
    match value:
        case Result():
            return value
        case tuple() if _tag_of(value) in (Tag.OK, Tag.ERROR):
            return _from_tagged(value, strict)
        case str() if _tag_of(value) == Tag.OK:
            return Result(None, _OK)
        case str() if _tag_of(value) == Tag.ERROR:
            return Result(None, _ERR)
        case BaseException():
            return Result(value, _ERR)
        case _:
            return Result(value, _OK)


def _from_tagged(value: tuple[Any, ...], strict: bool | None) -> Result[Any, Any]:
    tag, *payload = value
    if 1 <= len(payload) <= MAX_PAYLOAD:
        return Result(payload[0] if len(payload) == 1 else tuple(payload), tag == Tag.OK)
    if strict if strict is not None else effective_settings().strict_shapes:
        raise UnsupportedShapeError.for_arity(value, MAX_PAYLOAD)
    _log.warning("unsupported shape wrapped as value", tag=str(tag), payload_fields=len(payload))
    return Result(value, _OK)


# ═══════════════════════════════════════════════════════════════════════════════
# Combinators
# ═══════════════════════════════════════════════════════════════════════════════


def collect(results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Partition results into (ok values, errors), each in encounter order.

    Examples:
        >>> collect([Ok(1), Err(2), Ok(3)])
        ([1, 3], [2])
        >>> collect([Ok("green")])
        (['green'], [])
    """
    values: list[T] = []
    errors: list[E] = []
    for r in results:
        (values if r._is_ok else errors).append(r._value)  # type: ignore[arg-type]
    return values, errors


def collapse(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Iterable[Result[T,E]] → Result[list[T], E]. Stops at the first Err.

    Items after the first Err are never pulled from the iterable.

    Examples:
        >>> collapse([Ok(1), Ok(2), Ok(3)])
        Ok([1, 2, 3])
        >>> collapse([Ok(1), Err(2), Ok(3), Err(4)])
        Err(2)
        >>> collapse([])
        Ok([])
    """
    values: list[T] = []
    for i, r in enumerate(results):
        if not r._is_ok:
            _log.debug("collapse short-circuited", index=i)
            return r  # type: ignore[return-value]
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK)


def chain(result: Result[T, E], next_fn: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
    """Feed an Ok value into next_fn. An Err is returned as-is and next_fn is not called.

    Examples:
        >>> chain(Ok(1), lambda x: Ok(x + 1))
        Ok(2)
        >>> chain(Err("missing number"), lambda x: Ok(x + 1))
        Err('missing number')
        >>> r = chain(Ok(1), lambda x: Ok(x + 1))
        >>> r = chain(r, lambda x: Ok(x * 2))
        >>> r = chain(r, lambda x: Err("nan"))
        >>> chain(r, lambda x: Ok(x * 10))
        Err('nan')
    """
    if result._is_ok:
        return next_fn(result._value)  # type: ignore[arg-type,return-value]
    _log.debug("chain short-circuited", step=getattr(next_fn, "__name__", repr(next_fn)))
    return result  # type: ignore[return-value]


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map f over items and collapse. f is not called after the first Err.

    Example:
        >>> traverse(["1", "2", "x", "4"], lambda s: Ok(int(s)) if s.isdigit() else Err(f"invalid: {s}"))
        Err('invalid: x')
    """
    return collapse(f(item) for item in items)
