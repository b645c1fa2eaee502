from rustdrills.drills.sequences import (
    array_and_vec,
    fill_vec,
    fill_vec_in_place,
    make_filled_vec,
    vec_loop,
    vec_map,
)


def _evens():
    return [x for x in range(1, 11) if x % 2 == 0][:5]


def test_array_and_vec_similarity():
    a, v = array_and_vec()
    assert list(a) == v
    assert a == (10, 20, 30, 40)


def test_vec_loop():
    v = _evens()
    ans = vec_loop(list(v))
    assert ans == [4, 8, 12, 16, 20]


def test_vec_loop_mutates_its_argument():
    v = _evens()
    result = vec_loop(v)
    assert result is v
    assert v == [4, 8, 12, 16, 20]


def test_vec_map():
    v = _evens()
    ans = vec_map(v)
    assert ans == [4, 8, 12, 16, 20]
    assert v == [2, 4, 6, 8, 10]


def test_fill_vec_moves_value():
    assert fill_vec([22, 44, 66]) == [22, 44, 66, 88]


def test_fill_vec_keeps_original():
    vec0 = [22, 44, 66]
    vec1 = fill_vec(vec0)
    assert vec0 == [22, 44, 66]
    assert vec1 == [22, 44, 66, 88]


def test_fill_vec_in_place():
    vec0 = [22, 44, 66]
    vec1 = fill_vec_in_place(vec0)
    assert vec1 == [22, 44, 66, 88]
    assert vec0 == [22, 44, 66, 88]
    assert vec1 is not vec0


def test_make_filled_vec():
    assert make_filled_vec() == [22, 44, 66, 88]