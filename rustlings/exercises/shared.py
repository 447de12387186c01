"""Sharing data between threads, and a recursive cons list."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every workers-th number from each offset, one thread per offset."""
    if workers < 1:
        raise ValueError("at least one worker is needed")

    def total(offset: int) -> int:
        result = sum(numbers[offset::workers])
        print(f"Sum of offset {offset} is {result}")
        return result

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(total, range(workers)))


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value and the rest of the list, None being the empty list."""

    value: int
    rest: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.rest


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """A cons list holding a single value."""
    return Cons(1, None)


def wait_for_jobs(
    total: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5
) -> int:
    """Run jobs in a background thread while polling; return how often it waited."""
    lock = threading.Lock()
    completed = 0

    def work() -> None:
        nonlocal completed
        for _ in range(total):
            time.sleep(job_delay)
            with lock:
                completed += 1

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    waits = 0
    while True:
        with lock:
            if completed >= total:
                break
        print("waiting... ")
        waits += 1
        time.sleep(poll_delay)
    worker.join()
    return waits