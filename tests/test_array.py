import pytest

from cabernet.array import Array


def test_shape_size_and_rank():
    array = Array((2, 3, 4))
    assert array.shape == (2, 3, 4)
    assert array.size == 24
    assert array.rank == 3
    assert len(array) == 24
    assert list(array) == [0.0] * 24


def test_default_is_empty():
    array = Array()
    assert array.shape == ()
    assert array.size == 0
    assert len(array) == 0


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        Array((2, -1))


def test_reshape_keeps_leading_elements_and_pads():
    array = Array((2,))
    array.data[:] = [1, 2]
    array.reshape((2, 2))
    assert array.shape == (2, 2)
    assert list(array) == [1.0, 2.0, 0.0, 0.0]
    array.reshape((1,))
    assert list(array) == [1.0]


def test_melt_flattens_shape():
    array = Array((2, 3))
    array.melt()
    assert array.shape == (6,)
    assert array.size == 6


def test_collapse_drops_shape_but_not_storage():
    array = Array((2, 2))
    array.collapse()
    assert array.shape == ()
    assert array.size == 0
    assert len(array) == 4


def test_copy_is_independent():
    source = Array((3,))
    source.data[:] = [1, 2, 3]
    target = Array()
    target.copy(source)
    assert target.shape == (3,)
    assert list(target) == [1.0, 2.0, 3.0]
    source.data[0] = 9
    assert list(target) == [1.0, 2.0, 3.0]


def test_move_empties_source():
    source = Array((2, 2))
    source.data[:] = [1, 2, 3, 4]
    target = Array((5,))
    target.move(source)
    assert target.shape == (2, 2)
    assert list(target) == [1.0, 2.0, 3.0, 4.0]
    assert source.shape == ()
    assert source.size == 0
    assert len(source) == 0


def test_clear_releases_everything():
    array = Array((4,))
    array.clear()
    assert array.size == 0
    assert array.shape == ()
    assert list(array) == []