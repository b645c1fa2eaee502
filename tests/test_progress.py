import pytest

from rustdrills.drills.progress import (
    Progress,
    count_collection_for,
    count_collection_iterator,
    count_for,
    count_iterator,
)


def get_map():
    return {
        "variables1": Progress.COMPLETE,
        "functions1": Progress.COMPLETE,
        "hashmap1": Progress.COMPLETE,
        "arc1": Progress.SOME,
        "as_ref_mut": Progress.NONE,
        "from_str": Progress.NONE,
    }


def get_vec_map():
    other = {
        "variables2": Progress.COMPLETE,
        "functions2": Progress.COMPLETE,
        "if1": Progress.COMPLETE,
        "from_into": Progress.NONE,
        "try_from_into": Progress.NONE,
    }
    return [get_map(), other]


def test_count_complete():
    assert count_iterator(get_map(), Progress.COMPLETE) == 3


def test_count_some():
    assert count_iterator(get_map(), Progress.SOME) == 1


def test_count_none():
    assert count_iterator(get_map(), Progress.NONE) == 2


@pytest.mark.parametrize("state", list(Progress))
def test_count_complete_equals_for(state):
    progress_map = get_map()
    assert count_for(progress_map, state) == count_iterator(progress_map, state)


def test_count_for_values():
    assert count_for(get_map(), Progress.COMPLETE) == 3
    assert count_for(get_map(), Progress.NONE) == 2


def test_count_collection_complete():
    assert count_collection_iterator(get_vec_map(), Progress.COMPLETE) == 6


def test_count_collection_some():
    assert count_collection_iterator(get_vec_map(), Progress.SOME) == 1


def test_count_collection_none():
    assert count_collection_iterator(get_vec_map(), Progress.NONE) == 4


@pytest.mark.parametrize("state", list(Progress))
def test_count_collection_equals_for(state):
    collection = get_vec_map()
    assert count_collection_for(collection, state) == count_collection_iterator(
        collection, state
    )


def test_empty_collection_counts_zero():
    assert count_collection_iterator([], Progress.COMPLETE) == 0
    assert count_iterator({}, Progress.SOME) == 0