"""Option type: Some[T] | NothingType for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeGuard, TypeVar, Union

import msgspec

from pending_option.types.errors import UnwrapError

if TYPE_CHECKING:
    from pending_option.types.result import Err, Ok

__all__ = ["Nothing", "NothingType", "Option", "Some", "from_nullable", "none", "some"]

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Some(msgspec.Struct, Generic[T], frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. The container itself is
    immutable; combinators that "change" it build a new instance. The
    wrapped value is never copied, so `clone()` gives a new container around
    the same object.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> Some.phantom
        'some'
    """

    value: T

    phantom = "some"

    def is_some(self) -> TypeGuard[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeGuard[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[], Option[T]]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return NothingType()

    def flatten(self: Some[Option[U]]) -> Option[U]:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].
        """
        return self.value

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the contained value and return self unchanged."""
        f(self.value)
        return self

    def match(self, on_some: Callable[[T], U], _on_none: Callable[[], U]) -> U:
        """Return on_some(value); on_none is never called for Some."""
        return on_some(self.value)

    def clone(self) -> Some[T]:
        """Return a new Some holding the same value reference.

        This is a shallow copy: the container is new, the value is shared.
        """
        return Some(self.value)

    def ok_or(self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value).

        Args:
            _err: Ignored error value.

        Returns:
            Ok containing the value.
        """
        from pending_option.types.result import Ok

        return Ok(self.value)

    def ok_or_else(self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value).

        Args:
            _f: Ignored error factory function.

        Returns:
            Ok containing the value.
        """
        from pending_option.types.result import Ok

        return Ok(self.value)

    def and_(self, other: Option[U]) -> Option[U]:
        """Return other if self is Some, else return Nothing.

        Since this is Some, returns other.
        """
        return other

    def or_(self, _other: Option[T]) -> Some[T]:
        """Return self if Some, else return other.

        Since this is Some, returns self.
        """
        return self

    def xor(self, other: Option[T]) -> Option[T]:
        """Return self if other is Nothing, else Nothing."""
        if isinstance(other, Some):
            return NothingType()
        return self

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If either is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return NothingType()


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    All NothingType instances compare equal. The module exposes a shared
    `Nothing` instance for convenience, but nothing in this package relies
    on its identity: `none()` and every combinator that has to produce an
    empty Option for a caller hand out a fresh instance.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
        >>> none() == Nothing
        True
    """

    phantom = "none"

    def is_some(self) -> TypeGuard[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeGuard[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            UnwrapError: Always, since Nothing has no value to unwrap.
        """
        raise UnwrapError("Called unwrap on Nothing")

    def unwrap_or(self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(msg)

    def map(self, _f: Callable[[Any], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def and_then(self, _f: Callable[[Any], Option[U]]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def inspect(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return self without calling the function."""
        return self

    def match(self, _on_some: Callable[[Any], U], on_none: Callable[[], U]) -> U:
        """Return on_none(); on_some is never called for Nothing."""
        return on_none()

    def clone(self) -> NothingType:
        """Return a fresh Nothing."""
        return NothingType()

    def ok_or(self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err).

        Args:
            err: The error value to wrap.

        Returns:
            Err containing the error.
        """
        from pending_option.types.result import Err

        return Err(err)

    def ok_or_else(self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from pending_option.types.result import Err

        return Err(f())

    def and_(self, _other: Option[Any]) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def or_(self, other: Option[T]) -> Option[T]:
        """Return other since self is Nothing."""
        return other

    def xor(self, other: Option[T]) -> Option[T]:
        """Return other if it is Some, else Nothing."""
        if isinstance(other, Some):
            return other
        return self

    def zip(self, _other: Option[Any]) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self


Nothing: NothingType = NothingType()
"""Shared instance representing the absence of a value."""


Option = Union[Some[T], NothingType]


def some(value: T) -> Some[T]:
    """Wrap a value in Some."""
    return Some(value)


def none() -> NothingType:
    """Return a fresh Nothing."""
    return NothingType()


def from_nullable(value: T | None) -> Option[T]:
    """Convert a nullable value to Option.

    Args:
        value: The value that may be None.

    Returns:
        Some(value) if value is not None, otherwise Nothing.
    """
    return Some(value) if value is not None else NothingType()
