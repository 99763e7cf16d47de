from __future__ import annotations

from typing import Callable, Optional, Union


class NavigationTarget:
    """
    A position argument resolved against the cursor's current index.

    Navigation calls accept either a plain integer or a function of the
    current index; both are wrapped into a target and resolved exactly once
    before any index arithmetic happens.
    """

    def resolve(self, current: int) -> int:
        raise NotImplementedError()


class Absolute(NavigationTarget):
    value: int

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("Absolute position must be an int, got %s" % type(value).__name__)
        self.value = value

    def resolve(self, current: int) -> int:
        return self.value

    def __eq__(self, other):
        return isinstance(other, Absolute) and other.value == self.value

    def __repr__(self):
        return "Absolute(%d)" % self.value


class Relative(NavigationTarget):
    func: Callable[[int], int]

    def __init__(self, func: Callable[[int], int]):
        self.func = func

    def resolve(self, current: int) -> int:
        result = self.func(current)
        if isinstance(result, bool) or not isinstance(result, int):
            raise TypeError("Navigation function must return an int, got %s" % type(result).__name__)
        return result

    def __repr__(self):
        return "Relative(%r)" % (self.func,)


TargetLike = Union[int, Callable[[int], int], NavigationTarget]


def as_target(arg: Optional[TargetLike]) -> Optional[NavigationTarget]:
    if arg is None:
        return None
    elif isinstance(arg, NavigationTarget):
        return arg
    elif isinstance(arg, bool):
        raise TypeError("Expected an int or a function of the current index, got bool")
    elif isinstance(arg, int):
        return Absolute(arg)
    elif callable(arg):
        return Relative(arg)
    else:
        raise TypeError("Expected an int or a function of the current index, got %s" % type(arg).__name__)


def resolve(arg: Optional[TargetLike], current: int, default: Optional[int] = None) -> Optional[int]:
    """
    :param arg: An int, a function of the current index, a NavigationTarget or None.
    :param current: The index the target is resolved against.
    :param default: The value returned when arg is None.
    :return: The concrete integer the argument stands for.
    """
    target = as_target(arg)
    if target is None:
        return default
    return target.resolve(current)
