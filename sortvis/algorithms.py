"""
The fourteen sorting algorithms.

Contract for every sorter:
  - a generator function taking the array,
  - mutates the array in place,
  - yields one Step on every observable event (compare, swap, write).
Arrays of length 0 or 1 yield nothing.
"""

from .data import is_sorted, shuffle
from .errors import AttemptCeilingExceeded, UnknownAlgorithm
from .settings import BOGO_ATTEMPT_CEILING
from .steps import StepKind, exchange, make_step

COMPARE, SWAP, OVERWRITE, HIGHLIGHT = (
    StepKind.COMPARE, StepKind.SWAP, StepKind.OVERWRITE, StepKind.HIGHLIGHT,
)

ALGORITHMS = [
    ("Bubble Sort",     "bubble"),
    ("Insertion Sort",  "insertion"),
    ("Selection Sort",  "selection"),
    ("Merge Sort",      "merge"),
    ("Quick Sort",      "quick"),
    ("Heap Sort",       "heap"),
    ("Shell Sort",      "shell"),
    ("Cocktail Shaker", "cocktail"),
    ("Gnome Sort",      "gnome"),
    ("LSD Radix Sort",  "radix"),
    ("Counting Sort",   "counting"),
    ("Miracle Sort",    "miracle"),
    ("Flash Sort",      "flash"),
    ("Bogo Sort",       "bogo"),
]

ALGORITHM_KEYS = tuple(key for _, key in ALGORITHMS)

# ============================================================
# ==================== COMPARISON SORTS ======================
# ============================================================

def bubble_sort(arr):
    n = len(arr)
    for i in range(n - 1):
        for j in range(n - i - 1):
            kind = COMPARE
            if arr[j] > arr[j+1]:
                arr[j], arr[j+1] = arr[j+1], arr[j]; kind = SWAP
            yield make_step(kind, arr, (j, j+1), 10)


def insertion_sort(arr):
    for i in range(1, len(arr)):
        key = arr[i]; j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j+1] = arr[j]
            yield make_step(OVERWRITE, arr, (j, j+1), 10)
            j -= 1
        arr[j+1] = key


def selection_sort(arr):
    n = len(arr)
    for i in range(n - 1):
        mi = i
        for j in range(i+1, n):
            if arr[j] < arr[mi]: mi = j
            yield make_step(COMPARE, arr, (j, mi), 10)
        if mi != i:
            yield exchange(arr, i, mi, 10)


def merge_sort(arr):
    """
    Top-down merge over [start, end). Only the write-back is animated, one
    step per position; the comparisons of the merge itself are not.
    """
    def _ms(start, end):
        if end - start <= 1: return
        mid = (start + end) // 2
        yield from _ms(start, mid)
        yield from _ms(mid, end)
        merged = []; i, j = start, mid
        while i < mid and j < end:
            if arr[i] < arr[j]: merged.append(arr[i]); i += 1
            else:               merged.append(arr[j]); j += 1
        merged.extend(arr[i:mid]); merged.extend(arr[j:end])
        for k, v in enumerate(merged):
            arr[start+k] = v
            yield make_step(OVERWRITE, arr, (start+k,), 10)
    yield from _ms(0, len(arr))


def quick_sort(arr):
    """
    Lomuto partition, last element as pivot, left part sorted first.
    Recursion depth reaches n on already-sorted or reversed input.
    """
    def _q(start, end):
        if start >= end: return
        pivot = arr[end]; left = start
        for i in range(start, end):
            if arr[i] < pivot:
                yield exchange(arr, i, left, 10, end)
                left += 1
        yield exchange(arr, left, end, 20)
        yield from _q(start, left - 1)
        yield from _q(left + 1, end)
    yield from _q(0, len(arr) - 1)


def heap_sort(arr):
    def hfy(n, i):
        lg, l, r = i, 2*i+1, 2*i+2
        if l < n and arr[l] > arr[lg]: lg = l
        if r < n and arr[r] > arr[lg]: lg = r
        if lg != i:
            yield exchange(arr, i, lg, 15)
            yield from hfy(n, lg)
    n = len(arr)
    for i in range(n//2 - 1, -1, -1): yield from hfy(n, i)
    for i in range(n - 1, 0, -1):
        yield exchange(arr, 0, i, 15)
        yield from hfy(i, 0)


def shell_sort(arr):
    n, gap = len(arr), len(arr) // 2
    while gap > 0:
        for i in range(gap, n):
            t = arr[i]; j = i
            while j >= gap and arr[j-gap] > t:
                arr[j] = arr[j-gap]
                yield make_step(OVERWRITE, arr, (j-gap, j), 10)
                j -= gap
            arr[j] = t
        gap //= 2


def cocktail_sort(arr):
    start, end = 0, len(arr)
    swapped = True
    while swapped:
        swapped = False
        for i in range(start, end - 1):
            kind = COMPARE
            if arr[i] > arr[i+1]:
                arr[i], arr[i+1] = arr[i+1], arr[i]; kind = SWAP; swapped = True
            yield make_step(kind, arr, (i, i+1), 5)
        if not swapped: break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            kind = COMPARE
            if arr[i] > arr[i+1]:
                arr[i], arr[i+1] = arr[i+1], arr[i]; kind = SWAP; swapped = True
            yield make_step(kind, arr, (i, i+1), 5)
        start += 1


def gnome_sort(arr):
    i = 0
    while i < len(arr):
        if i == 0 or arr[i] >= arr[i-1]: i += 1
        else:
            yield exchange(arr, i, i-1, 10)
            i -= 1

# ============================================================
# =================== DISTRIBUTION SORTS =====================
# ============================================================

def _require_integers(arr, name):
    for v in arr:
        if v != int(v):
            raise ValueError(f"{name} sort needs integer values, got {v!r}")


def radix_sort(arr, base=10):
    """
    LSD radix sort. Digits are taken from v - min so negative values work;
    the written values are the originals. One step per write-back per pass.
    """
    if len(arr) <= 1: return
    _require_integers(arr, "Radix")
    lo = min(arr)
    mk, exp = int(max(arr) - lo), 1
    n = len(arr)
    while mk // exp > 0:
        out = [0]*n; cnt = [0]*base
        for v in arr: cnt[(int(v - lo)//exp) % base] += 1
        for d in range(1, base): cnt[d] += cnt[d-1]
        for i in range(n-1, -1, -1):
            d = (int(arr[i] - lo)//exp) % base
            out[cnt[d]-1] = arr[i]; cnt[d] -= 1
        for i in range(n):
            arr[i] = out[i]
            yield make_step(OVERWRITE, arr, (i,), 5)
        exp *= base


def counting_sort(arr):
    """
    Frequency table over [min, max]. The scan is animated too, although it
    does not move anything.
    """
    if len(arr) <= 1: return
    _require_integers(arr, "Counting")
    lo, hi = int(min(arr)), int(max(arr))
    count = [0] * (hi - lo + 1)
    for i, v in enumerate(arr):
        count[int(v) - lo] += 1
        yield make_step(COMPARE, arr, (i,), 5)
    idx = 0
    for off, c in enumerate(count):
        for _ in range(c):
            arr[idx] = off + lo
            yield make_step(OVERWRITE, arr, (idx,), 5)
            idx += 1


def flash_sort(arr):
    """
    Neubert's flash sort.

    1. classify: class(v) = floor((m-1) * (v - min) / (max - min))
    2. prefix-sum the class sizes into upper bounds L[k]
    3. cycle leader permutation: carry `flash` to the top free slot of its
       class, pick up what was there, repeat until the cycle closes
    4. insertion sort cleans up inside each class
    """
    n = len(arr)
    if n <= 1: return
    vmin, vmax = min(arr), max(arr)
    if vmin == vmax: return
    m = max(1, int(0.45 * n))
    c = (m - 1) / (vmax - vmin)

    def cls(v):
        return min(m - 1, int(c * (v - vmin)))

    L = [0] * m
    for v in arr: L[cls(v)] += 1
    for k in range(1, m): L[k] += L[k-1]

    moves, j, k = 0, 0, m - 1
    while moves < n - 1:
        while j > L[k] - 1:
            j += 1
            k = cls(arr[j])
        flash = arr[j]
        while j != L[k]:
            k = cls(flash)
            dest = L[k] - 1
            arr[dest], flash = flash, arr[dest]
            L[k] -= 1; moves += 1
            yield make_step(SWAP, arr, (j, dest), 5)

    for i in range(1, n):
        key = arr[i]; j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j+1] = arr[j]
            yield make_step(OVERWRITE, arr, (j, j+1), 5)
            j -= 1
        arr[j+1] = key

# ============================================================
# ====================== JOKE SORTS ==========================
# ============================================================

def miracle_sort(arr):
    """Wait for a miracle, then let list.sort() provide it."""
    if len(arr) <= 1: return
    yield make_step(HIGHLIGHT, arr, (), 200)
    arr.sort()
    for i in range(len(arr)):
        yield make_step(HIGHLIGHT, arr, (i,), 5)


def bogo_sort(arr, rng=None, ceiling=BOGO_ATTEMPT_CEILING):
    """
    Shuffle until sorted, one step per shuffle. After `ceiling` shuffles
    it raises AttemptCeilingExceeded and leaves the array as it is.
    """
    attempts = 0
    while not is_sorted(arr):
        if attempts >= ceiling:
            raise AttemptCeilingExceeded(attempts)
        shuffle(arr, rng)
        attempts += 1
        yield make_step(SWAP, arr, (), 50)

# ============================================================
# ======================= REGISTRY ===========================
# ============================================================

def get_generator(key, arr, rng=None, attempt_ceiling=BOGO_ATTEMPT_CEILING):
    builtins = {
        "bubble":    lambda: bubble_sort(arr),
        "insertion": lambda: insertion_sort(arr),
        "selection": lambda: selection_sort(arr),
        "merge":     lambda: merge_sort(arr),
        "quick":     lambda: quick_sort(arr),
        "heap":      lambda: heap_sort(arr),
        "shell":     lambda: shell_sort(arr),
        "cocktail":  lambda: cocktail_sort(arr),
        "gnome":     lambda: gnome_sort(arr),
        "radix":     lambda: radix_sort(arr),
        "counting":  lambda: counting_sort(arr),
        "miracle":   lambda: miracle_sort(arr),
        "flash":     lambda: flash_sort(arr),
        "bogo":      lambda: bogo_sort(arr, rng, attempt_ceiling),
    }
    if key in builtins: return builtins[key]()
    raise UnknownAlgorithm(key)

