"""
Resolver capability.

A resolver maps a URL under its scheme to a redirect target. Resolvers
may answer synchronously or return an awaitable; returning None means
the resolver declined the URL.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional, Union

ResolverResult = Union[
    Optional[str], Awaitable[Optional[str]]
]

ResolverFunction = Callable[[str], ResolverResult]


class Resolver(ABC):
    """
    Base class for scheme resolvers.

    Examples
    --------
    >>> class BucketResolver(Resolver):
    ...     async def resolve(self, url: str) -> str | None:
    ...         key = url.split("://", 1)[1]
    ...         return f"https://bucket.example.com/{key}"
    """

    @abstractmethod
    def resolve(self, url: str) -> ResolverResult:
        """
        Produce the redirect target for ``url``.

        Parameters
        ----------
        url : str
            The URL whose scheme this resolver is registered for.

        Returns
        -------
        str | None | Awaitable[str | None]
            The redirect location, or None to decline.
        """

    def describe(self) -> str:
        return type(self).__name__


class FunctionResolver(Resolver):
    """Adapts a plain (sync or async) callable to the Resolver interface."""

    def __init__(self, function: ResolverFunction) -> None:
        if not callable(function):
            raise TypeError(
                f"Resolver must be callable, got {type(function).__name__}"
            )
        self._function: ResolverFunction = function

    @property
    def function(self) -> ResolverFunction:
        return self._function

    def resolve(self, url: str) -> ResolverResult:
        return self._function(url)

    def describe(self) -> str:
        return getattr(
            self._function,
            "__qualname__",
            repr(self._function),
        )


def as_resolver(
    resolver: Union[Resolver, ResolverFunction],
) -> Resolver:
    if isinstance(resolver, Resolver):
        return resolver
    if callable(resolver):
        return FunctionResolver(resolver)
    raise TypeError(
        "Resolver must be a Resolver instance or a callable, "
        f"got {type(resolver).__name__}"
    )
