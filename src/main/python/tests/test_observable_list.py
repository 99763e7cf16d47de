import copy
import pickle

import pytest

from util.observable_list import ObservableList


class Recorder:
    def __init__(self):
        self.changes = []

    def notify_change(self, index, removed, inserted):
        self.changes.append((index, removed, inserted))


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def source_data(recorder: Recorder) -> ObservableList:
    data = ObservableList(['a', 'b', 'c'])
    data.attach(recorder)
    return data


@pytest.fixture
def large_source_data(recorder: Recorder) -> ObservableList:
    data = ObservableList(['a', 'b', 'c', 'd', 'e', 'f', 'g', 'h', 'i', 'j'])
    data.attach(recorder)
    return data


def test_empty_by_default():
    assert ObservableList() == []


def test_append(source_data: ObservableList, recorder: Recorder):
    source_data.append('d')
    assert source_data == ['a', 'b', 'c', 'd']
    assert recorder.changes == [(3, 0, 1)]


def test_extend(source_data: ObservableList, recorder: Recorder):
    source_data.extend(iter(['d', 'e']))
    source_data.extend([])
    source_data += ['f']
    assert source_data == ['a', 'b', 'c', 'd', 'e', 'f']
    assert recorder.changes == [(3, 0, 2), (5, 0, 1)]


def test_insert(source_data: ObservableList, recorder: Recorder):
    source_data.insert(0, 'z')
    source_data.insert(-1, 'y')
    source_data.insert(100, 'x')
    assert source_data == ['z', 'a', 'b', 'y', 'c', 'x']
    assert recorder.changes == [(0, 0, 1), (3, 0, 1), (5, 0, 1)]


def test_pop(source_data: ObservableList, recorder: Recorder):
    assert source_data.pop() == 'c'
    assert source_data.pop(0) == 'a'
    assert source_data == ['b']
    assert recorder.changes == [(2, 1, 0), (0, 1, 0)]


def test_pop_out_of_range(source_data: ObservableList, recorder: Recorder):
    with pytest.raises(IndexError):
        source_data.pop(5)
    assert recorder.changes == []


def test_remove(source_data: ObservableList, recorder: Recorder):
    source_data.remove('b')
    assert source_data == ['a', 'c']
    assert recorder.changes == [(1, 1, 0)]
    with pytest.raises(ValueError):
        source_data.remove('b')


def test_clear(source_data: ObservableList, recorder: Recorder):
    source_data.clear()
    source_data.clear()
    assert source_data == []
    assert recorder.changes == [(0, 3, 0)]


def test_delete_item(large_source_data: ObservableList, recorder: Recorder):
    del large_source_data[0]
    del large_source_data[-1]
    assert recorder.changes == [(0, 1, 0), (8, 1, 0)]


def test_delete_contiguous_slice(large_source_data: ObservableList, recorder: Recorder):
    del large_source_data[2:5]
    assert large_source_data == ['a', 'b', 'f', 'g', 'h', 'i', 'j']
    assert recorder.changes == [(2, 3, 0)]


def test_delete_reverse_contiguous_slice(large_source_data: ObservableList, recorder: Recorder):
    del large_source_data[4:1:-1]
    assert large_source_data == ['a', 'b', 'f', 'g', 'h', 'i', 'j']
    assert recorder.changes == [(2, 3, 0)]


def test_delete_stepped_slice(large_source_data: ObservableList, recorder: Recorder):
    del large_source_data[3:10:2]
    assert large_source_data == ['a', 'b', 'c', 'e', 'g', 'i']
    assert recorder.changes == [(9, 1, 0), (7, 1, 0), (5, 1, 0), (3, 1, 0)]


def test_delete_empty_slice(source_data: ObservableList, recorder: Recorder):
    del source_data[2:1]
    assert recorder.changes == []


def test_slice_assignment_is_one_splice(source_data: ObservableList, recorder: Recorder):
    source_data[1:2] = ['x', 'y', 'z']
    assert source_data == ['a', 'x', 'y', 'z', 'c']
    assert recorder.changes == [(1, 1, 3)]


def test_item_updates_are_not_structural(source_data: ObservableList, recorder: Recorder):
    source_data[0] = 'z'
    source_data[::2] = ['q', 'r']
    source_data.reverse()
    source_data.sort()
    assert recorder.changes == []


def test_repeat(source_data: ObservableList, recorder: Recorder):
    source_data *= 2
    assert len(source_data) == 6
    source_data *= 0
    assert source_data == []
    assert recorder.changes == [(3, 0, 3), (0, 6, 0)]


def test_detach(source_data: ObservableList, recorder: Recorder):
    source_data.detach(recorder)
    source_data.append('d')
    assert recorder.changes == []
    assert source_data.observers == ()


def test_copy_has_no_observers(source_data: ObservableList, recorder: Recorder):
    duplicate = source_data.copy()
    duplicate.append('d')
    assert isinstance(duplicate, ObservableList)
    assert recorder.changes == []


def test_copy_module_leaves_observers_behind(source_data: ObservableList, recorder: Recorder):
    duplicate = copy.copy(source_data)
    duplicate.insert(0, 'x')
    assert duplicate == ['x', 'a', 'b', 'c']
    assert duplicate.observers == ()
    assert source_data.observers == (recorder,)
    assert recorder.changes == []


def test_deepcopy_leaves_observers_behind(recorder: Recorder):
    nested = ObservableList([['a'], ['b']])
    nested.attach(recorder)
    duplicate = copy.deepcopy(nested)
    duplicate.append(['c'])
    duplicate[0].append('z')
    assert nested == [['a'], ['b']]
    assert duplicate.observers == ()
    assert recorder.changes == []


def test_pickle_leaves_observers_behind(source_data: ObservableList, recorder: Recorder):
    restored = pickle.loads(pickle.dumps(source_data))
    restored.append('d')
    assert isinstance(restored, ObservableList)
    assert restored == ['a', 'b', 'c', 'd']
    assert restored.observers == ()
    assert recorder.changes == []
