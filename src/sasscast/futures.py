"""Helpers for composing ``concurrent.futures.Future`` continuations."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import CancelledError, Future
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = ["then", "gather"]


def _failure(source: Future) -> BaseException | None:
    if source.cancelled():
        return CancelledError()
    return source.exception()


def _settle(target: Future, result: Any) -> None:
    """Resolve *target* with *result*, waiting first if it is a Future."""
    if isinstance(result, Future):
        result.add_done_callback(lambda done: _forward(done, target))
    else:
        target.set_result(result)


def _forward(source: Future, target: Future) -> None:
    error = _failure(source)
    if error is not None:
        target.set_exception(error)
    else:
        target.set_result(source.result())


def then(source: Future, convert: Callable[[Any], Any]) -> Future:
    """Return a Future resolving to ``convert(source.result())``.

    A failed *source* fails the returned Future with the same exception, as
    does an exception raised by *convert*.  If *convert* itself returns a
    Future the result is flattened.
    """
    target: Future = Future()

    def done(finished: Future) -> None:
        error = _failure(finished)
        if error is not None:
            target.set_exception(error)
            return
        try:
            converted = convert(finished.result())
        except Exception as exc:
            target.set_exception(exc)
            return
        _settle(target, converted)

    source.add_done_callback(done)
    return target


def gather(items: list[Any], build: Callable[[list[Any]], T]) -> T | Future:
    """Call ``build(items)`` now, or once every Future in *items* has settled.

    Futures in *items* are replaced by their results before *build* runs.
    """
    pending = [item for item in items if isinstance(item, Future)]
    if not pending:
        return build(items)

    target: Future = Future()
    remaining = [len(pending)]

    def done(_: Future) -> None:
        remaining[0] -= 1
        if remaining[0]:
            return
        for item in pending:
            error = _failure(item)
            if error is not None:
                target.set_exception(error)
                return
        target.set_result(
            build([item.result() if isinstance(item, Future) else item for item in items])
        )

    for item in pending:
        item.add_done_callback(done)
    return target
