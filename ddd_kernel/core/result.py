"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. This approach makes error handling explicit and
testable.

A Result is exactly one of two variants:
- Success: carries the value of a successful operation.
- Failure: carries the error of a failed operation.

Each variant only has a slot for its own payload, so a Result holding both a
value and an error (or neither) cannot be built. The shared ``Result`` base
exposes the inspection and unwrapping API and the factory methods; it cannot
be instantiated on its own.

Usage:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return Failure(error="Division by zero")
        return Success(value=a / b)

    result = divide(10, 2)
    match result:
        case Success(value=value):
            print(f"Result: {value}")
        case Failure(error=error):
            print(f"Error: {error}")

    # Or through the method API
    Result.ok(5).unwrap()              # 5
    Result.err(ValueError()).is_err()  # True
"""

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from ddd_kernel.core.errors.contract_errors import ResultUnwrapError

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


class Result(Generic[T, E]):
    """Base of the Success/Failure variants.

    Not part of the construction contract: build results with
    ``Result.ok()``/``Result.err()`` or the ``Success``/``Failure``
    dataclasses directly.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> "Result[T, E]":
        if cls is Result:
            raise TypeError(
                "Result cannot be instantiated directly; "
                "use Result.ok() or Result.err()"
            )
        return super().__new__(cls)

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @staticmethod
    def ok(value: T) -> "Success[T]":
        """Create a successful result.

        Args:
            value: The success value.

        Returns:
            Success wrapping the value.
        """
        return Success(value=value)

    @staticmethod
    def err(error: E) -> "Failure[E]":
        """Create a failed result.

        Args:
            error: The error value.

        Returns:
            Failure wrapping the error.
        """
        return Failure(error=error)

    @staticmethod
    async def from_awaitable(awaitable: Awaitable[T]) -> "Result[T, Exception]":
        """Bridge an awaitable into a Result.

        Awaits the computation once. No retries, timeout or cancellation are
        applied; ``asyncio.CancelledError`` and other ``BaseException``s
        propagate to the caller.

        Args:
            awaitable: Coroutine, task or future to await.

        Returns:
            Success with the resolved value, or Failure with the raised
            exception.

        Example:
            >>> result = await Result.from_awaitable(client.fetch(user_id))
            >>> if result.is_err():
            ...     logger.warning("fetch_failed", error=str(result.get_err()))
        """
        try:
            value = await awaitable
        except Exception as e:
            return Failure(error=e)
        return Success(value=value)

    @staticmethod
    def catch(
        fn: Callable[[], T],
        fallback_error: Exception | None = None,
    ) -> "Result[T, Exception]":
        """Run a synchronous function and capture what it raises.

        Args:
            fn: Zero-argument callable to execute.
            fallback_error: Error to report instead of the raised one.

        Returns:
            Success with the return value, or Failure with ``fallback_error``
            (when given) or the raised exception.

        Example:
            >>> Result.catch(lambda: int("42")).unwrap()
            42
            >>> Result.catch(lambda: int("x"), ValueError("not a number")).get_err()
            ValueError('not a number')
        """
        try:
            value = fn()
        except Exception as e:
            return Failure(error=fallback_error if fallback_error is not None else e)
        return Success(value=value)

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_ok(self) -> bool:
        """Check whether this result is a Success."""
        return isinstance(self, Success)

    def is_err(self) -> bool:
        """Check whether this result is a Failure."""
        return isinstance(self, Failure)

    def get_err(self) -> E | None:
        """Return the stored error, or None for a Success."""
        if isinstance(self, Failure):
            return self.error
        return None

    # -------------------------------------------------------------------------
    # Unwrapping
    # -------------------------------------------------------------------------

    def unwrap(self) -> T:
        """Return the success value.

        Returns:
            The wrapped value.

        Raises:
            Exception: The stored error, when it is an exception instance.
            ResultUnwrapError: When the stored error is not an exception
                (e.g. a DomainError); the error is kept on ``.error``.
        """
        if isinstance(self, Success):
            return self.value
        if isinstance(self, Failure):
            _raise_error(self.error)
        raise ResultUnwrapError("Result holds neither a value nor an error")

    def unwrap_err(self) -> E:
        """Return the stored error.

        Raises:
            ResultUnwrapError: If this result is a Success.
        """
        if isinstance(self, Failure):
            return self.error
        raise ResultUnwrapError("Tried to unwrap_err() on a successful Result")

    def expect(self, message: str | BaseException) -> T:
        """Return the success value or fail with a caller-chosen error.

        Args:
            message: Message for the raised ResultUnwrapError, or an exception
                instance to raise as-is. Either overrides the stored error.

        Returns:
            The wrapped value.

        Raises:
            ResultUnwrapError: With ``message`` when a string is given.
            BaseException: The given exception instance.
        """
        if isinstance(self, Success):
            return self.value
        cause = self.get_err()
        if isinstance(message, BaseException):
            raise message
        exc = ResultUnwrapError(message, error=cause)
        if isinstance(cause, BaseException):
            raise exc from cause
        raise exc


def _raise_error(error: Any) -> NoReturn:
    if isinstance(error, BaseException):
        raise error
    raise ResultUnwrapError(str(error), error=error)


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Result[T, Any]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Result[Any, E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


def combine(results: Iterable[Result[Any, E]]) -> Result[list[Any], E]:
    """Combine results into a single result of all values.

    Scans in order and stops at the first Failure, which is returned as-is.
    Later results are not inspected.

    Args:
        results: Results to combine.

    Returns:
        The first Failure by position, or Success with the unwrapped values
        in input order.

    Example:
        >>> combine([Success(value=1), Success(value=2)])
        Success(value=[1, 2])
        >>> combine([Success(value=1), Failure(error="boom"), Failure(error="late")])
        Failure(error='boom')
    """
    values: list[Any] = []
    for result in results:
        if isinstance(result, Failure):
            return result
        values.append(result.unwrap())
    return Success(value=values)
