from typing import Callable, MutableSequence, TypeVar

T = TypeVar("T")


def merge_sort(items: MutableSequence[T], less: Callable[[T, T], bool]) -> None:
    """
    Stable in-place merge sort driven by a strict weak ordering `less(a, b)`,
    true iff a must precede b. Elements equal under `less` keep their input order.

    Bottom-up (iterative), so there is no recursion depth to worry about.
    Time complexity: O(n*log(n)), auxiliary memory: O(n).
    """
    n = len(items)
    if n < 2:
        return

    src = list(items)
    dst = [None] * n
    width = 1
    while width < n:
        for start in range(0, n, 2 * width):
            mid = min(start + width, n)
            end = min(start + 2 * width, n)
            _merge(src, dst, start, mid, end, less)
        src, dst = dst, src
        width *= 2

    items[:] = src


def _merge(src, dst, start: int, mid: int, end: int, less) -> None:
    i, j, k = start, mid, start
    while i < mid and j < end:
        # take from the right run only when strictly less, this keeps the sort stable
        if less(src[j], src[i]):
            dst[k] = src[j]
            j += 1
        else:
            dst[k] = src[i]
            i += 1
        k += 1

    while i < mid:
        dst[k] = src[i]
        i += 1
        k += 1

    while j < end:
        dst[k] = src[j]
        j += 1
        k += 1
