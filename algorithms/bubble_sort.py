"""
bubble_sort.py — Bubble Sort
==============================
Walk a shrinking window left to right, swapping adjacent pairs that are
out of order.  After pass i the largest n-i values sit at the end.

No early exit: every pass runs in full even if nothing moved, so a run
over n elements always shows exactly n(n-1)/2 comparisons.
Equal neighbours are never swapped (strict `>`).
"""

from typing import List

from bars import HighlightState


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                          # 0
    "    for i in n-1 down to 1:",                  # 1
    "        for j in 0 .. i-1:",                   # 2
    "            if a[j] > a[j+1]:",                # 3
    "                swap(a[j], a[j+1])",           # 4
]


async def bubble_sort(driver) -> None:
    a = driver.array
    n = len(a)

    for i in range(n - 1, 0, -1):
        for j in range(i):
            # the finalised run grows from the right, but the marker
            # counts leading bars, so it shows n - i of them
            driver.highlight(HighlightState(
                comparing=(j, j + 1),
                sorted_prefix_count=n - i,
            ))
            await driver.pause()

            if a[j] > a[j + 1]:
                await driver.swap(j, j + 1)

    driver.finish()
