"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeGuard, TypeVar, Union

import msgspec

from pending_option.types.errors import UnwrapError

if TYPE_CHECKING:
    from pending_option.types.option import Option

__all__ = ["Err", "Ok", "Result", "collect"]

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class Ok(msgspec.Struct, Generic[T], frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeGuard[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeGuard[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise an exception since this is Ok.

        Raises:
            UnwrapError: Always, since Ok has no error to unwrap.
        """
        raise UnwrapError(f"Called unwrap_err on Ok: {self.value!r}")

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[Any], Result[T, F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def ok(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        from pending_option.types.option import Some

        return Some(self.value)

    def err(self) -> Option[Any]:
        """Convert to Option, returning Nothing since this is Ok."""
        from pending_option.types.option import NothingType

        return NothingType()

    def match(self, on_ok: Callable[[T], U], _on_err: Callable[[Any], U]) -> U:
        """Return on_ok(value); on_err is never called for Ok."""
        return on_ok(self.value)


class Err(msgspec.Struct, Generic[E], frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> err = Err("something went wrong")
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeGuard[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeGuard[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        Raises:
            UnwrapError: Always, since Err has no Ok value to unwrap.
        """
        raise UnwrapError(f"Called unwrap on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or(self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Compute a default value from the error."""
        return f(self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(f"{msg}: {self.error!r}")

    def map(self, _f: Callable[[Any], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def and_then(self, _f: Callable[[Any], Result[U, E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def ok(self) -> Option[Any]:
        """Convert to Option, returning Nothing since this is Err."""
        from pending_option.types.option import NothingType

        return NothingType()

    def err(self) -> Option[E]:
        """Convert to Option, returning Some(error)."""
        from pending_option.types.option import Some

        return Some(self.error)

    def match(self, _on_ok: Callable[[Any], U], on_err: Callable[[E], U]) -> U:
        """Return on_err(error); on_ok is never called for Err."""
        return on_err(self.error)


Result = Union[Ok[T], Err[E]]


def collect(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Err.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err("fail"), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
