import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("wordgrid")

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(debug: bool = False):
    """Set up root handlers once and switch the wordgrid logger between INFO and DEBUG."""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)


class StageTimer:
    """Collects per-stage timing and counts for a single request or run."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self.counts: dict[str, int] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - t0
            self.timings[name] = round(elapsed * 1000, 1)  # ms
            logger.info("stage=%s elapsed=%.1fms", name, self.timings[name])

    def count(self, name: str, value: int):
        """Record a size produced by a stage, e.g. cells searched or words found."""
        self.counts[name] = value
        logger.info("count=%s value=%d", name, value)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}
