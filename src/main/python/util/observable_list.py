from copy import deepcopy
import logging
import typing


T = typing.TypeVar('T')


class ChangeObserver(typing.Protocol):
    def notify_change(self, index: int, removed: int, inserted: int) -> None:
        pass


class ObservableList(list, typing.List[T]):
    """
    A list that announces its structural edits.

    Every insertion or removal is reported to the attached observers as a
    splice ``(index, removed, inserted)`` where ``index`` refers to the list
    as it was before the edit. In-place updates such as ``lst[i] = x``,
    ``reverse`` and ``sort`` keep the length and are not reported.
    """

    def __init__(self, initial: typing.Optional[typing.Iterable] = None):
        list.__init__(self, initial if initial is not None else ())
        self._observers = []

    def attach(self, observer: ChangeObserver):
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: ChangeObserver):
        if observer in self._observers:
            self._observers.remove(observer)

    @property
    def observers(self) -> typing.Tuple[ChangeObserver, ...]:
        return tuple(self._observers)

    def _splice(self, index: int, removed: int, inserted: int):
        logging.debug("splice at %d: -%d +%d" % (index, removed, inserted))
        for observer in tuple(self._observers):
            observer.notify_change(index, removed, inserted)

    def _normalize(self, index: int, length: int) -> int:
        if index < 0:
            index += length
        return index

    def append(self, item):
        index = len(self)
        list.append(self, item)
        self._splice(index, 0, 1)

    def extend(self, items: typing.Iterable):
        items = list(items)
        if not items:
            return
        index = len(self)
        list.extend(self, items)
        self._splice(index, 0, len(items))

    def __iadd__(self, items):
        self.extend(items)
        return self

    def __imul__(self, count: int):
        before = len(self)
        list.__imul__(self, count)
        after = len(self)
        if after > before:
            self._splice(before, 0, after - before)
        elif after < before:
            self._splice(0, before, 0)
        return self

    def insert(self, index: int, item):
        length = len(self)
        index = min(max(self._normalize(index, length), 0), length)
        list.insert(self, index, item)
        self._splice(index, 0, 1)

    def pop(self, index: int = -1):
        index = self._normalize(index, len(self))
        item = list.pop(self, index)
        self._splice(index, 1, 0)
        return item

    def remove(self, x):
        index = self.index(x)
        list.__delitem__(self, index)
        self._splice(index, 1, 0)

    def clear(self):
        length = len(self)
        list.clear(self)
        if length:
            self._splice(0, length, 0)

    def copy(self):
        return ObservableList(list.copy(self))

    # copies start with no observers
    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        duplicate = ObservableList()
        memo[id(self)] = duplicate
        list.extend(duplicate, deepcopy(list(self), memo))
        return duplicate

    def __reduce_ex__(self, protocol):
        return ObservableList, (list(self),)

    def __delitem__(self, indexes):
        if isinstance(indexes, slice):
            removed = range(*indexes.indices(len(self)))
            list.__delitem__(self, indexes)
            if not removed:
                return
            if abs(removed.step) == 1:
                self._splice(min(removed), len(removed), 0)
            else:
                # highest first, so each index is still valid when applied
                for index in sorted(removed, reverse=True):
                    self._splice(index, 1, 0)
        else:
            index = self._normalize(indexes, len(self))
            list.__delitem__(self, indexes)
            self._splice(index, 1, 0)

    def __setitem__(self, indexes, value):
        if isinstance(indexes, slice) and indexes.step in (None, 1):
            start, stop, _ = indexes.indices(len(self))
            removed = max(0, stop - start)
            value = list(value)
            list.__setitem__(self, indexes, value)
            if removed or value:
                self._splice(start, removed, len(value))
        else:
            # single items and extended slices keep the length
            list.__setitem__(self, indexes, value)
