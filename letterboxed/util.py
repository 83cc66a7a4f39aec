from typing import Callable, Iterable, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def group_by(seq: Iterable[T], fn: Callable[[T], R]) -> dict[R, list[T]]:
    out = dict[R, list[T]]()
    for v in seq:
        k = fn(v)
        out.setdefault(k, [])
        out[k].append(v)
    return out


def partition(seq: Iterable[T], fn: Callable[[T], bool]) -> tuple[list[T], list[T]]:
    """Split seq in a single, stable pass. Returns (falses, trues)."""
    trues = []
    falses = []
    for x in seq:
        if fn(x):
            trues.append(x)
        else:
            falses.append(x)
    return falses, trues


def chunks(seq: list[T], num_chunks: int) -> list[list[T]]:
    """Split seq into at most num_chunks contiguous pieces of near-equal size."""
    assert num_chunks > 0
    size = len(seq) // num_chunks + 1
    return [seq[i : i + size] for i in range(0, len(seq), size)]
