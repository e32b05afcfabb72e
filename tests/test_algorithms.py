import asyncio
import random

import pytest

from algorithms import REGISTRY, get_algorithm, list_algorithms
from bars import HighlightState, Role


ALL_KEYS = ["selection", "bubble", "insertion", "quick"]


def run(make_driver, key, values):
    driver = make_driver(values, strategy=get_algorithm(key).fn)
    assert asyncio.run(driver.start_sorting()) is True
    return driver


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------
def test_registry_lists_the_four_sorts_in_page_order():
    assert [a.key for a in list_algorithms()] == ALL_KEYS
    assert get_algorithm("heap") is None
    for info in REGISTRY.values():
        assert info.pseudocode
        assert info.label


# ---------------------------------------------------------------------------
# Sortedness & permutation
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("key", ALL_KEYS)
@pytest.mark.parametrize("values", [
    [],
    [7],
    [2, 1],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [4, 4, 4, 4],
    [3, 1, 3, 2, 1, 2],
    [100, 1, 50, 1, 100, 25, 75, 50, 2, 99],
])
def test_result_is_sorted_permutation(make_driver, key, values):
    driver = run(make_driver, key, values)
    assert driver.array.snapshot() == sorted(values)
    assert driver.display.values() == sorted(values)
    assert not driver.is_sorting
    assert driver.highlight_state == HighlightState(sorted_prefix_count=len(values))


@pytest.mark.parametrize("key", ALL_KEYS)
def test_random_arrays_sort(make_driver, key):
    rng = random.Random(1234)
    for _ in range(25):
        values = [rng.randint(1, 100) for _ in range(10)]
        driver = run(make_driver, key, values)
        assert driver.array.snapshot() == sorted(values)
        assert driver.recorder.metrics.final == sorted(values)


@pytest.mark.parametrize("key", ALL_KEYS)
def test_every_highlight_is_followed_by_a_pause(make_driver, key):
    driver = run(make_driver, key, [9, 2, 7, 2, 5, 1, 8])
    kinds = driver.recorder.kinds()
    for i, kind in enumerate(kinds):
        if kind == "highlight":
            assert kinds[i + 1] == "pause"


@pytest.mark.parametrize("key", ALL_KEYS)
def test_same_input_gives_identical_trace(make_driver, key):
    values = [6, 3, 9, 1, 3, 7, 2, 8, 5, 4]
    first = run(make_driver, key, values).recorder.events
    second = run(make_driver, key, values).recorder.events
    assert first == second


@pytest.mark.parametrize("key", ["selection", "bubble", "quick"])
def test_single_element_runs_no_steps(make_driver, key):
    driver = run(make_driver, key, [42])
    assert driver.recorder.kinds() == ["finish"]
    assert driver.highlight_state.sorted_prefix_count == 1


# ---------------------------------------------------------------------------
# Selection sort
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("n", [2, 5, 10])
def test_selection_highlights_n_choose_2(make_driver, n):
    values = list(range(n, 0, -1))
    driver = run(make_driver, "selection", values)
    assert driver.recorder.metrics.highlights == n * (n - 1) // 2


def test_selection_trace_for_5_3_8_1(make_driver):
    driver = run(make_driver, "selection", [5, 3, 8, 1])
    highlights = driver.recorder.highlights()

    first_pass = highlights[:3]
    assert [h.current for h in first_pass] == [1, 2, 3]
    assert [h.min_index for h in first_pass] == [0, 1, 1]
    assert all(h.sorted_prefix_count == 0 for h in first_pass)

    assert driver.recorder.swaps() == [(0, 3), (2, 3)]
    assert driver.array.snapshot() == [1, 3, 5, 8]


def test_selection_keeps_leftmost_minimum_on_ties(make_driver):
    driver = run(make_driver, "selection", [3, 1, 1])
    assert driver.recorder.swaps() == [(0, 1), (1, 2)]


def test_selection_skips_swap_when_minimum_in_place(make_driver):
    driver = run(make_driver, "selection", [1, 2, 3])
    assert driver.recorder.swaps() == []


# ---------------------------------------------------------------------------
# Bubble sort
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5, 6], [6, 5, 4, 3, 2, 1], [3, 3, 1, 2, 2, 1]])
def test_bubble_never_exits_early(make_driver, values):
    n = len(values)
    driver = run(make_driver, "bubble", values)
    assert driver.recorder.metrics.highlights == n * (n - 1) // 2


def test_bubble_two_elements(make_driver):
    driver = run(make_driver, "bubble", [2, 1])
    assert driver.recorder.highlights() == [HighlightState(comparing=(0, 1), sorted_prefix_count=1)]
    assert driver.recorder.swaps() == [(0, 1)]
    assert driver.array.snapshot() == [1, 2]


def test_bubble_does_not_swap_equal_neighbours(make_driver):
    driver = run(make_driver, "bubble", [2, 2, 2])
    assert driver.recorder.swaps() == []


def test_bubble_sorted_marker_grows_each_pass(make_driver):
    driver = run(make_driver, "bubble", [4, 3, 2, 1])
    counts = [h.sorted_prefix_count for h in driver.recorder.highlights()]
    assert counts == [1, 1, 1, 2, 2, 3]


# ---------------------------------------------------------------------------
# Insertion sort
# ---------------------------------------------------------------------------
def test_insertion_trace_for_3_1(make_driver):
    driver = run(make_driver, "insertion", [3, 1])
    assert driver.recorder.highlights() == [
        HighlightState(sorted_prefix_count=1),
        HighlightState(sorted_prefix_count=1),
        HighlightState(current=1, comparing=(0, 1), sorted_prefix_count=1),
        HighlightState(sorted_prefix_count=2),
    ]
    assert driver.recorder.kinds() == [
        "highlight", "pause",
        "assign", "highlight", "pause",
        "highlight", "pause", "assign", "assign", "highlight", "pause",
        "finish",
    ]
    assert driver.array.snapshot() == [1, 3]


def test_insertion_does_not_shift_past_equal_values(make_driver):
    driver = run(make_driver, "insertion", [2, 2])
    assert all(not h.comparing for h in driver.recorder.highlights())
    assert driver.recorder.metrics.writes == 2


def test_insertion_single_element(make_driver):
    driver = run(make_driver, "insertion", [5])
    assert driver.recorder.kinds() == ["highlight", "pause", "assign", "highlight", "pause", "finish"]
    assert driver.highlight_state.sorted_prefix_count == 1


def test_insertion_empty_array_clamps_sorted_marker(make_driver):
    driver = run(make_driver, "insertion", [])
    assert driver.recorder.highlights() == [HighlightState(sorted_prefix_count=0)]


def test_insertion_refreshes_bars_as_prefix_grows(make_driver):
    driver = run(make_driver, "insertion", [30, 10, 20])
    assert [b.value for b in driver.display.bars] == [10, 20, 30]
    assert driver.display.bars[2].height == 250


# ---------------------------------------------------------------------------
# Quicksort
# ---------------------------------------------------------------------------
def test_quick_trace_for_3_1_2(make_driver):
    driver = run(make_driver, "quick", [3, 1, 2])
    assert driver.recorder.highlights() == [
        HighlightState(current=2, comparing=(2,)),
        HighlightState(current=2, comparing=(0, 0)),
        HighlightState(current=2, comparing=(1, 0)),
    ]
    assert driver.recorder.swaps() == [(0, 1), (1, 2)]
    assert driver.array.snapshot() == [1, 2, 3]


def test_quick_sends_equal_values_left_of_pivot(make_driver):
    driver = run(make_driver, "quick", [2, 1, 2])
    # both elements are <= pivot, so the first partition moves nothing
    assert driver.recorder.swaps() == [(0, 1)]
    assert driver.array.snapshot() == [1, 2, 2]


def test_quick_sorted_input_is_quadratic(make_driver):
    n = 6
    driver = run(make_driver, "quick", list(range(1, n + 1)))
    # one pivot highlight per partition plus one per comparison
    partitions = n - 1
    comparisons = n * (n - 1) // 2
    assert driver.recorder.metrics.highlights == partitions + comparisons
    assert driver.recorder.swaps() == []


def test_quick_marks_no_sorted_prefix_until_finish(make_driver):
    driver = run(make_driver, "quick", [4, 2, 3, 1])
    assert all(h.sorted_prefix_count == 0 for h in driver.recorder.highlights())
    assert all(Role.SORTED in b.roles for b in driver.display.bars)
