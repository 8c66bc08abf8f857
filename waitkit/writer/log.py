"""
Log - step trace carried by the *_writer variants
=================================================
"""

from __future__ import annotations

from collections.abc import Iterable


class Log[A](list[A]):
    """
    Trace of steps, oldest first.

    Operations return new logs and never mutate the receiver.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    @staticmethod
    def numbered(template: str, numbers: Iterable[int]) -> Log[str]:
        """
        One entry per step number.

        Example:
            Log.numbered("attempt {}: false", range(1, 3))
            # ["attempt 1: false", "attempt 2: false"]
        """
        return Log[str](template.format(n) for n in numbers)

    def tell(self, item: A, /) -> Log[A]:
        """Append a single entry."""
        result: Log[A] = Log(self)
        result.append(item)
        return result


def describe_failure(cause: object) -> str:
    """Log wording for a failed step: a raised exception or an Error value."""
    if isinstance(cause, BaseException):
        return f"raised {cause!r}"
    return f"returned Error({cause!r})"


__all__ = ("Log", "describe_failure")
