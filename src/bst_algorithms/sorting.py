"""
In-place comparison sorts over mutable sequences.

Every routine takes a ``MutableSequence`` whose elements support ``<``
and rearranges it into non-decreasing order. Nothing is returned.
"""

from typing import Callable, Dict, List, MutableSequence

from bst_algorithms.base import T, debug_log


def selection_sort(items: MutableSequence[T]) -> None:
    """Swap the minimum of the unsorted suffix into each position in turn."""
    n = len(items)
    debug_log("selection_sort: n=%d", n)
    for i in range(n):
        smallest = i
        for j in range(i + 1, n):
            if items[j] < items[smallest]:
                smallest = j
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]


def insertion_sort(items: MutableSequence[T]) -> None:
    """Shift each element left past all strictly larger predecessors."""
    n = len(items)
    debug_log("insertion_sort: n=%d", n)
    for i in range(1, n):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1


def merge_sort(items: MutableSequence[T]) -> None:
    """
    Stable top-down merge sort.

    A single auxiliary buffer the size of the whole sequence is allocated
    once. Before each merge step the segment ``[low..high]`` of the buffer
    is refreshed from the live sequence, then merged back into it.
    """
    n = len(items)
    debug_log("merge_sort: n=%d", n)
    if n < 2:
        return
    auxiliary: List[T] = list(items)
    _merge_sort(items, auxiliary, 0, n - 1)


def _merge_sort(items: MutableSequence[T], auxiliary: List[T], low: int, high: int) -> None:
    if low >= high:
        return
    mid = low + (high - low) // 2
    _merge_sort(items, auxiliary, low, mid)
    _merge_sort(items, auxiliary, mid + 1, high)

    for k in range(low, high + 1):
        auxiliary[k] = items[k]

    left, right = low, mid + 1
    for k in range(low, high + 1):
        if left > mid:
            items[k] = auxiliary[right]
            right += 1
        elif right > high:
            items[k] = auxiliary[left]
            left += 1
        elif auxiliary[right] < auxiliary[left]:
            items[k] = auxiliary[right]
            right += 1
        else:
            # ties go to the left half
            items[k] = auxiliary[left]
            left += 1


def _parent(index: int) -> int:
    return (index - 1) // 2


def _left_child(index: int) -> int:
    return 2 * index + 1


def _right_child(index: int) -> int:
    return 2 * index + 2


def _sift_down(items: MutableSequence[T], start: int, end: int) -> None:
    """Restore the max-heap property for the subtree at *start* within ``[0, end]``."""
    root = start
    while _left_child(root) <= end:
        left = _left_child(root)
        right = _right_child(root)
        candidate = root

        if items[candidate] < items[left]:
            candidate = left
        if right <= end and items[candidate] < items[right]:
            candidate = right

        if candidate == root:
            return

        items[root], items[candidate] = items[candidate], items[root]
        root = candidate


def _heapify(items: MutableSequence[T]) -> None:
    last = len(items) - 1
    for index in range(_parent(last), -1, -1):
        _sift_down(items, index, last)


def heap_sort(items: MutableSequence[T]) -> None:
    """Build a max-heap in place, then repeatedly move the root to the end."""
    n = len(items)
    debug_log("heap_sort: n=%d", n)
    if n < 2:
        return
    _heapify(items)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end - 1)


SORTS: Dict[str, Callable[[MutableSequence[T]], None]] = {
    "selection_sort": selection_sort,
    "insertion_sort": insertion_sort,
    "merge_sort": merge_sort,
    "heap_sort": heap_sort,
}
