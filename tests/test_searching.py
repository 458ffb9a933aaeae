import pytest

from algoshelf.searching import binary_search, find_sequence, k_closest, linear_search

DATA = [1, 9, 18, 24, 27, 35, 38, 41, 49, 53, 55, 66, 67, 72, 75, 77, 81, 89, 90, 97]


@pytest.mark.parametrize("item", DATA)
def test_binary_search_finds_every_item(item):
    assert binary_search(DATA, item) == DATA.index(item)


@pytest.mark.parametrize("item", [0, 2, 50, 96, 98, 1000])
def test_binary_search_missing(item):
    assert binary_search(DATA, item) is None


def test_binary_search_small_inputs():
    assert binary_search([], 3) is None
    assert binary_search([4], 4) == 0
    assert binary_search([4, 8], 8) == 1
    assert binary_search([4, 8], 6) is None


def test_binary_search_odd_and_even_lengths():
    for size in range(1, 12):
        values = list(range(0, size * 3, 3))
        for index, value in enumerate(values):
            assert binary_search(values, value) == index
            assert binary_search(values, value + 1) is None


def test_find_sequence_present():
    assert find_sequence(DATA, DATA[3:6]) == (3, 6)


def test_find_sequence_single_element():
    assert find_sequence(DATA, [97]) == (19, 20)


def test_find_sequence_mismatch():
    assert find_sequence(DATA, [24, 28]) is None


def test_find_sequence_first_missing():
    assert find_sequence(DATA, [2, 9]) is None


def test_find_sequence_runs_past_end():
    assert find_sequence(DATA, [90, 97, 98]) is None


def test_find_sequence_empty_raises():
    with pytest.raises(ValueError):
        find_sequence(DATA, [])


def test_linear_search_first_occurrence():
    values = [5, 3, 5, 7]
    assert linear_search(values, 5) == 0
    assert linear_search(values, 7) == 3


def test_linear_search_missing():
    assert linear_search([5, 3], 4) is None
    assert linear_search([], 4) is None


def test_k_closest_source_example():
    assert k_closest([-10, -50, 20, 17, 80], 20, 2) == [17, 20]


def test_k_closest_invariant():
    values = [12, -3, 40, 7, 19, 25, -11, 8, 33, 2]
    x, k = 10, 4
    chosen = k_closest(values, x, k)
    assert len(chosen) == k
    worst = max(abs(v - x) for v in chosen)
    remaining = list(values)
    for v in chosen:
        remaining.remove(v)
    assert all(abs(v - x) >= worst for v in remaining)
    distances = [abs(v - x) for v in chosen]
    assert distances == sorted(distances, reverse=True)


def test_k_closest_all_and_none():
    values = [3, 1, 2]
    assert sorted(k_closest(values, 0, 3)) == sorted(values)
    assert k_closest(values, 0, 0) == []


@pytest.mark.parametrize("k", [-1, 4])
def test_k_closest_bad_k(k):
    with pytest.raises(ValueError):
        k_closest([1, 2, 3], 0, k)