import logging
import threading
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s | %(message)s"

_setup_lock = threading.Lock()
_configured = False


def setup_logging(level: int | str = logging.INFO) -> bool:
    """Configure the root logger once per process.

    Returns True on the call that did the configuration, False afterwards.
    """
    global _configured
    with _setup_lock:
        if _configured:
            return False
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")
        logging.getLogger("PIL").setLevel(logging.WARNING)
        _configured = True
        return True


@contextmanager
def request_span(name: str, logger: logging.Logger | None = None) -> Iterator[str]:
    """Log the start and end of a unit of work under a short correlation id.

    The end line is written on every exit path, with the exception name as
    the outcome when the body raises.
    """
    logger = logger or logging.getLogger("asciiframe")
    span_id = uuid.uuid4().hex[:8]
    start = time.perf_counter()
    outcome = "ok"
    logger.info("[%s] %s start", span_id, name)
    try:
        yield span_id
    except BaseException as e:
        outcome = type(e).__name__
        raise
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("[%s] %s end outcome=%s elapsed_ms=%.1f", span_id, name, outcome, elapsed_ms)
