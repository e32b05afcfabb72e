"""
insertion_sort.py — Insertion Sort
====================================
Grow a sorted prefix one element at a time.  The element at i is lifted
out (`base`), larger neighbours to its left shift one slot right, and
`base` drops into the gap.

Shifts are plain writes (driver.assign) with no per-write redraw; the
whole prefix [0, i] is refreshed once the element lands.  Equal values
stop the walk (strict `>`), so equal elements keep their order.
"""

from typing import List

from bars import HighlightState


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                       # 0
    "    for i in 0 .. n-1:",                       # 1
    "        base ← a[i];  j ← i - 1",              # 2
    "        while j ≥ 0 and a[j] > base:",         # 3
    "            a[j+1] ← a[j];  j ← j - 1",        # 4
    "        a[j+1] ← base",                        # 5
]


async def insertion_sort(driver) -> None:
    a = driver.array
    n = len(a)

    # a single element is trivially sorted
    driver.highlight(HighlightState(sorted_prefix_count=min(1, n)))
    await driver.pause()

    for i in range(n):
        base = a[i]
        j = i - 1
        while j >= 0 and a[j] > base:
            driver.highlight(HighlightState(
                current=i,
                comparing=(j, j + 1),
                sorted_prefix_count=i,
            ))
            await driver.pause()
            driver.assign(j + 1, a[j])
            j -= 1
        driver.assign(j + 1, base)

        driver.refresh(range(i + 1))
        driver.highlight(HighlightState(sorted_prefix_count=i + 1))
        await driver.pause()

    driver.finish()
