import random

from .settings import RANDOM_VALUE_LIMIT, PROGRESSION_STEP

DATA_KINDS = ("random", "progression")


def shuffle(arr, rng=None):
    (rng or random).shuffle(arr)


def is_sorted(arr) -> bool:
    return all(arr[i - 1] <= arr[i] for i in range(1, len(arr)))


def generate_data(kind: str, size: int, rng=None) -> list:
    """
    Build a fresh array for a run.

    random      : `size` integers drawn uniformly from [0, RANDOM_VALUE_LIMIT)
    progression : 0, 4, 8, ... (size terms), shuffled
    """
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    rng = rng or random
    if kind == "random":
        return [rng.randrange(RANDOM_VALUE_LIMIT) for _ in range(size)]
    if kind == "progression":
        arr = [i * PROGRESSION_STEP for i in range(size)]
        shuffle(arr, rng)
        return arr
    raise ValueError(f"Unknown data kind: {kind}")
