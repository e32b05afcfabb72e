"""
selection_sort.py — Selection Sort
====================================
For each position i, scan the unsorted tail for the smallest value and
swap it into place.  Every candidate is highlighted (CURRENT = j,
MIN = best so far, SORTED = prefix [0, i)) and held for one pause
before the comparison is made.

Ties keep the earlier minimum (strict `<`).
"""

from typing import List

from bars import HighlightState


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                   # 0
    "    for i in 0 .. n-2:",                    # 1
    "        min ← i",                           # 2
    "        for j in i+1 .. n-1:",              # 3
    "            if a[j] < a[min]: min ← j",     # 4
    "        if min ≠ i: swap(a[i], a[min])",    # 5
]


async def selection_sort(driver) -> None:
    a = driver.array
    n = len(a)

    for i in range(n - 1):
        min_index = i

        for j in range(i + 1, n):
            driver.highlight(HighlightState(
                current=j,
                min_index=min_index,
                sorted_prefix_count=i,
            ))
            await driver.pause()

            if a[j] < a[min_index]:
                min_index = j

        if min_index != i:
            await driver.swap(i, min_index)

    driver.finish()
