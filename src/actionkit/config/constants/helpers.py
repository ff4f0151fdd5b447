"""Lazy-loaded constants helpers"""

import typing as t
from pathlib import Path

__all__ = [
    "Optional",
    "Mandatory",
    "maybe_path",
    "maybe_non_negative_int",
    "maybe_positive_int",
]

VT = t.TypeVar("VT")
GetterType = t.Callable[[], t.Optional[VT]]


class Optional(t.Generic[VT]):
    """Optional lazy variable"""

    def __init__(self, *getters: GetterType) -> None:
        self._getters: t.Tuple[GetterType, ...] = getters
        self._name: str = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def __get__(self, instance: t.Any, owner: type) -> t.Optional[VT]:
        getter_result: t.Optional[VT] = None
        for getter in self._getters:
            if (getter_result := getter()) is not None:
                break
        return getter_result


class Mandatory(Optional, t.Generic[VT]):
    """Mandatory lazy variable"""

    def __get__(self, instance: t.Any, owner: type) -> VT:
        result: t.Optional[VT] = super().__get__(instance, owner)
        if result is None:
            raise ValueError(f"{self._name!r} getters failed")
        return result


def maybe_path(path_str: t.Optional[str]) -> t.Optional[Path]:
    """Transform a string into an optional path"""
    return Path(path_str) if path_str else None


def maybe_non_negative_int(value: t.Optional[int]) -> t.Optional[int]:
    """Zero means 'not set', negatives are rejected"""
    if value is None:
        return None
    if value < 0:
        raise ValueError(f"Expected a non-negative integer, got {value!r}")
    return value or None


def maybe_positive_int(value: t.Optional[int]) -> t.Optional[int]:
    """Reject zero and negatives"""
    if value is not None and value <= 0:
        raise ValueError(f"Expected a positive integer, got {value!r}")
    return value
