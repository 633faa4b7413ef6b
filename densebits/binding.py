"""Binding profiles selecting which bitset operations a caller gets to see.

A profile is configuration, not a second engine: every profile is backed by
the same :class:`~densebits.bitset.Bitset` and the functions in
:mod:`densebits.api`.
"""

from __future__ import annotations

import enum
import os
import types
from typing import Any, Callable, Iterable, Mapping, Sequence

from . import api
from .bitset import Bitset
from .typehints import Operation, OperationTable

ENVIRONMENT_VARIABLE = "DENSEBITS_PROFILE"

_REDUCED_OPERATIONS = (
    "allocate",
    "clone",
    "set",
    "set_range",
    "clear",
    "clear_range",
    "get",
    "get_range",
    "count",
    "intersection",
    "union",
    "dump_raw",
    "dump_len",
)

_FULL_OPERATIONS = _REDUCED_OPERATIONS + (
    "intersection_mut",
    "union_mut",
    "difference",
    "difference_mut",
    "symmetric_diff",
    "symmetric_diff_mut",
    "equals",
    "subset",
    "strict_subset",
)

# operator symbol -> name of the Bitset method implementing it
_FULL_OPERATORS = {
    "+": "union",
    "*": "intersection",
    "-": "difference",
    "len": "count",
    "==": "equals",
    "<": "strict_subset",
    "<=": "subset",
}


@enum.unique
class Profile(enum.Enum):
    """The operation sets a binding can expose."""

    FULL = "full"
    REDUCED = "reduced"

    @classmethod
    def from_name(cls, name: str) -> Profile:
        """Return the profile called `name`, ignoring case.

        Raises
        ------
        ValueError
            If no profile is called `name`

        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(profile.value for profile in cls)
            raise ValueError(
                f"unknown profile {name!r}, expected one of: {choices}"
            ) from None


def default_profile(environ: Mapping[str, str] = os.environ) -> Profile:
    """Return the profile named by ``DENSEBITS_PROFILE``, or the full one."""
    return Profile.from_name(environ.get(ENVIRONMENT_VARIABLE, Profile.FULL.value))


def _names(profile: Profile) -> Sequence[str]:
    if profile is Profile.FULL:
        return _FULL_OPERATIONS
    return _REDUCED_OPERATIONS


def operations(profile: Profile) -> OperationTable:
    """Return a read-only mapping of operation name to function for `profile`."""
    return types.MappingProxyType(
        {name: getattr(api, name) for name in _names(profile)}
    )


def operators(profile: Profile) -> Mapping[str, str]:
    """Return a read-only mapping of operator symbol to operation name."""
    if profile is Profile.FULL:
        return types.MappingProxyType(dict(_FULL_OPERATORS))
    return types.MappingProxyType({})


class Binding:
    """The operations and operators of one profile, as attributes."""

    __slots__ = "profile", "_operations", "_operators"

    def __init__(self, profile: Profile) -> None:
        self.profile = profile
        self._operations = operations(profile)
        self._operators = operators(profile)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.profile})"

    def __getattr__(self, name: str) -> Operation:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._operations[name]
        except KeyError:
            raise AttributeError(
                f"{name!r} is not exposed by the {self.profile.value} profile"
            ) from None

    def __dir__(self) -> Iterable[str]:
        return sorted({*super().__dir__(), *self._operations})

    @property
    def names(self) -> Sequence[str]:
        """Return the names of the exposed operations."""
        return tuple(self._operations)

    @property
    def symbols(self) -> Sequence[str]:
        """Return the exposed operator symbols."""
        return tuple(self._operators)

    def operator(self, symbol: str) -> Callable[..., Any]:
        """Return the function implementing operator `symbol`.

        The returned function takes its operands in the order they appear
        around the operator, e.g. ``binding.operator("-")(a, b)`` is ``a - b``.

        Raises
        ------
        KeyError
            If `symbol` is not exposed by this binding's profile

        """
        try:
            name = self._operators[symbol]
        except KeyError:
            raise KeyError(
                f"operator {symbol!r} is not exposed by the "
                f"{self.profile.value} profile"
            ) from None
        return getattr(Bitset, name)


def bind(profile: Profile | str | None = None) -> Binding:
    """Return a binding for `profile`.

    Parameters
    ----------
    profile
        A :class:`Profile`, the name of one, or ``None`` to use
        :func:`default_profile`.

    Examples
    --------
    >>> from densebits.binding import bind
    >>> bits = bind("reduced")
    >>> b = bits.allocate() >> bits.set(3)
    >>> bits.count(b)
    1
    >>> bits.difference
    Traceback (most recent call last):
      ...
    AttributeError: 'difference' is not exposed by the reduced profile

    """
    if profile is None:
        profile = default_profile()
    elif isinstance(profile, str):
        profile = Profile.from_name(profile)
    return Binding(profile)
