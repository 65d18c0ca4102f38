from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T
    ok = True


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying an error value."""

    error: E
    ok = False


Result = Union[Ok[T], Err[E]]


# PUBLIC_INTERFACE
class Effect(Generic[T, E]):
    """
    A deferred computation that produces exactly one Result when run.

    Nothing happens until `run()` is awaited. Composition through `map` and
    `flat_map` builds a new Effect without running the original; a failure
    short-circuits every step that follows it.

    Example:
        effect = Effect.succeed(2).map(lambda n: n * 10)
        result = await effect.run()  # Ok(value=20)
    """

    __slots__ = ("_thunk",)

    def __init__(self, thunk: Callable[[], Awaitable[Result[T, E]]]) -> None:
        self._thunk = thunk

    async def run(self) -> Result[T, E]:
        """Execute the computation and return its outcome."""
        return await self._thunk()

    @classmethod
    def succeed(cls, value: T) -> "Effect[T, E]":
        """Effect that immediately resolves to Ok(value)."""

        async def thunk() -> Result[T, E]:
            return Ok(value)

        return cls(thunk)

    @classmethod
    def fail(cls, error: E) -> "Effect[T, E]":
        """Effect that immediately resolves to Err(error)."""

        async def thunk() -> Result[T, E]:
            return Err(error)

        return cls(thunk)

    @classmethod
    def from_callable(cls, fn: Callable[[], T]) -> "Effect[T, E]":
        """Effect that calls `fn` when run and succeeds with its return value. `fn` must not raise."""

        async def thunk() -> Result[T, E]:
            return Ok(fn())

        return cls(thunk)

    @classmethod
    def from_awaitable(
        cls,
        thunk: Callable[[], Awaitable[T]],
        on_error: Callable[[Exception], E],
    ) -> "Effect[T, E]":
        """
        Wrap an external asynchronous operation.

        Any exception raised while awaiting is converted through `on_error`
        into an Err; it is never re-raised.
        """

        async def run() -> Result[T, E]:
            try:
                value = await thunk()
            except Exception as exc:
                return Err(on_error(exc))
            return Ok(value)

        return cls(run)

    def map(self, f: Callable[[T], U]) -> "Effect[U, E]":
        """Apply `f` to a successful value; failures pass through untouched."""

        async def thunk() -> Result[U, E]:
            result = await self.run()
            if isinstance(result, Err):
                return result
            return Ok(f(result.value))

        return Effect(thunk)

    def flat_map(self, f: Callable[[T], "Effect[U, E]"]) -> "Effect[U, E]":
        """Chain another effect on success; `f` is never called on failure."""

        async def thunk() -> Result[U, E]:
            result = await self.run()
            if isinstance(result, Err):
                return result
            return await f(result.value).run()

        return Effect(thunk)
