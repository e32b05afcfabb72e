"""
quick_sort.py — Quicksort (Lomuto partition)
==============================================
The last element of each range is the pivot.  `i` tracks the right edge
of the "≤ pivot" block; each element that belongs there is swapped in.
Finally the pivot is swapped to i+1, its final position, and both sides
are sorted recursively.

Recursion is depth-first and sequential; every partition step is paced,
so total running time tracks the number of comparisons.  Already-sorted
input degrades to O(n²) like any Lomuto quicksort, which is fine at
this array size.

Elements equal to the pivot go left (non-strict `<=`).
"""

from typing import List

from bars import HighlightState


PSEUDOCODE: List[str] = [
    "def quick_sort(a, low, high):",                # 0
    "    if low < high:",                           # 1
    "        p ← partition(a, low, high)",          # 2
    "        quick_sort(a, low, p - 1)",            # 3
    "        quick_sort(a, p + 1, high)",           # 4
    "def partition(a, low, high):",                 # 5
    "    pivot ← a[high];  i ← low - 1",            # 6
    "    for j in low .. high-1:",                  # 7
    "        if a[j] ≤ pivot:",                     # 8
    "            i ← i + 1;  swap(a[i], a[j])",     # 9
    "    swap(a[i+1], a[high]);  return i + 1",     # 10
]


async def quick_sort(driver) -> None:
    await _quick_sort(driver, 0, len(driver.array) - 1)
    driver.finish()


async def _quick_sort(driver, low: int, high: int) -> None:
    if low < high:
        pivot_index = await partition(driver, low, high)
        await _quick_sort(driver, low, pivot_index - 1)
        await _quick_sort(driver, pivot_index + 1, high)


async def partition(driver, low: int, high: int) -> int:
    """Lomuto partition of a[low..high]; returns the pivot's final index."""
    a = driver.array
    pivot = a[high]
    i = low - 1

    # show the pivot on its own first
    driver.highlight(HighlightState(current=high, comparing=(high,)))
    await driver.pause()

    for j in range(low, high):
        driver.highlight(HighlightState(current=high, comparing=(j, i + 1)))
        await driver.pause()

        if a[j] <= pivot:
            i += 1
            if i != j:
                await driver.swap(i, j)

    if i + 1 != high:
        await driver.swap(i + 1, high)

    return i + 1
