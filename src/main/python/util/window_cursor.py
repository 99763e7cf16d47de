from __future__ import annotations

import logging
import typing
from typing import Any, Iterable, List, Mapping, MutableSequence, Optional, Tuple

import config
from util import navigation
from util.diagnostics import ErrorReporter, LoggingReporter, OutOfRange
from util.navigation import TargetLike
from util.observable_list import ObservableList


T = typing.TypeVar('T')

Change = Tuple[int, int, int]


class WindowCursor(typing.Generic[T]):
    """
    A position over a caller-owned sequence, read through a sliding window.

    The cursor never copies or edits ``array``. The owner mutates it directly
    and announces each splice through :meth:`notify_change`, which an
    :class:`ObservableList` does automatically for every cursor attached to it.
    """

    array: MutableSequence[T]
    cyclic: bool
    width_window: int

    def __init__(self, array: Optional[MutableSequence[T]] = None, cyclic: bool = False, width_window: int = 1,
                 reporter: Optional[ErrorReporter] = None):
        if isinstance(width_window, bool) or not isinstance(width_window, int) or width_window < 1:
            raise ValueError("width_window must be a positive integer, got %r" % (width_window,))

        self.array = array if array is not None else ObservableList()
        self.cyclic = bool(cyclic)
        self.width_window = width_window
        self.reporter = reporter or LoggingReporter()

        self._current = 0
        self._length = len(self.array)

        if hasattr(self.array, 'attach'):
            self.array.attach(self)

    @classmethod
    def from_config(cls, source: Optional[Mapping[str, Any]] = None,
                    reporter: Optional[ErrorReporter] = None) -> WindowCursor:
        values = dict(config.DEFAULT_CONFIG)
        for key, value in (source or {}).items():
            key = config.CONFIG_ALIASES.get(key, key)
            if key in values and value is not None:
                values[key] = value

        return cls(array=values['array'], cyclic=values['cyclic'], width_window=values['width_window'],
                   reporter=reporter)

    def detach(self):
        if hasattr(self.array, 'detach'):
            self.array.detach(self)

    @property
    def current_index(self) -> int:
        return self._current

    @current_index.setter
    def current_index(self, value: int):
        length = len(self.array)
        if length == 0 and value == 0:
            self._current = 0
        elif 0 <= value < length:
            self._current = value
        else:
            raise IndexError("Cursor out of range")

    def current(self) -> List[T]:
        length = len(self.array)
        if length == 0:
            return []

        start = self._current
        if self.cyclic:
            width = min(length, self.width_window)
            # a window ending one short of the end already counts as wrapping
            if start + width >= length - 1:
                result = list(self.array[start:start + width])
                remaining = max(0, width - (length - start))
                return result + list(self.array[0:remaining])
            else:
                return list(self.array[start:start + width])
        else:
            width = min(length - start, self.width_window)
            return list(self.array[start:start + width])

    def jump_to(self, target: Optional[TargetLike] = None) -> Optional[OutOfRange]:
        """
        :param target: An absolute index, a function mapping the current index to one, or None for a no-op.
        :return: The reported OutOfRange condition when a linear jump was rejected, otherwise None.
        """
        position = navigation.resolve(target, self._current)
        if position is None:
            return None

        length = len(self.array)
        if self.cyclic:
            if length == 0:
                logging.debug("ignoring jump to %d on an empty cyclic sequence" % position)
                return None
            self._current = position % length
        elif position < 0 or position >= length:
            error = OutOfRange(position, length)
            self.reporter.report(error)
            return error
        else:
            self._current = position

        return None

    def forward(self, arg: Optional[TargetLike] = None) -> List[T]:
        delta = navigation.resolve(arg, self._current, default=1)
        self.jump_to(self._current + delta)
        return self.current()

    def backward(self, arg: Optional[TargetLike] = None) -> List[T]:
        delta = navigation.resolve(arg, self._current, default=1)
        self.jump_to(self._current - delta)
        return self.current()

    def notify_change(self, index: int, removed: int, inserted: int):
        previous = current = self._current
        if removed > 0:
            last_removed = index + removed - 1
            if last_removed > current:
                current = max(0, index - 1)
            else:
                current -= removed

        if index <= current:
            current += inserted

        self._length = max(0, self._length - removed + inserted)
        self._current = min(max(current, 0), max(self._length - 1, 0))
        logging.debug("splice at %d (-%d +%d) moved cursor %d -> %d" % (index, removed, inserted, previous,
                                                                         self._current))

    def notify_changes(self, changes: Iterable[Change]):
        for index, removed, inserted in changes:
            self.notify_change(index, removed, inserted)

    def __repr__(self):
        return "WindowCursor(index=%d, cyclic=%s, width_window=%d, length=%d)" % (
            self._current, self.cyclic, self.width_window, len(self.array))
