"""
Wall-clock timing for describe().

describe() splits its work into location, spread and shape passes; the
Timer records the overall elapsed time plus one entry per pass, and the
resulting dict travels on Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Overall timer with named, accumulating sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('location'):
            sorted_x = np.sort(x)
        timer.stop()
        timer.result()
        # {'total_seconds': 2.1e-05, 'location': 9.0e-06}
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent inside the block to section ``name``."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - start
            )

    def result(self) -> dict[str, float]:
        """
        ``{'total_seconds': ..., <section>: ...}``.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
