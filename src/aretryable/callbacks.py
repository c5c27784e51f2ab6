r"""Data structures shared with user callbacks.

Every ``on_error`` callback, ``retry_on`` predicate and delay function
receives the same three positional arguments: the failure (an
exception or a flagged result), the 1-indexed attempt number, and a
``CallArguments`` record holding the arguments of the original call.
"""

from __future__ import annotations

__all__ = ["CallArguments"]

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class CallArguments:
    """Arguments the wrapped callable was invoked with.

    The same instance is passed to every callback of one invocation,
    across all attempts. ``kwargs`` is stored as a read-only mapping,
    so instances compare by value but are not hashable.

    Attributes:
        args: The positional arguments.
        kwargs: The keyword arguments.

    Example:
        ```pycon
        >>> from aretryable.callbacks import CallArguments
        >>> call = CallArguments(("a", "b"), {"timeout": 5})
        >>> call.args
        ('a', 'b')
        >>> call.kwargs["timeout"]
        5

        ```
    """

    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)

    __hash__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "kwargs", MappingProxyType(dict(self.kwargs)))
