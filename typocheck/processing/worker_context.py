"""Worker context for multiprocessing without global state."""

from dataclasses import dataclass
import threading

from typocheck.core.config import Config
from typocheck.data.index import DictionaryIndex


@dataclass(frozen=True)
class CheckContext:
    """Immutable context shared by every checking worker.

    Built once after the dictionary is indexed and before any worker starts.
    Workers only read from it.

    Attributes:
        index: Dictionary index bucketed by leading character
        threshold: Exclusive upper bound on the fallback defect count
    """

    index: DictionaryIndex
    threshold: int

    @classmethod
    def from_config(cls, index: DictionaryIndex, config: Config) -> "CheckContext":
        """Create a CheckContext from a built index and the run config."""
        return cls(index=index, threshold=config.threshold)


# Thread-local storage for worker context
_worker_context = threading.local()


def init_worker(context: CheckContext) -> None:
    """Initialize worker process with context in thread-local storage.

    Args:
        context: CheckContext to store in thread-local storage
    """
    _worker_context.value = context


def get_worker_context() -> CheckContext:
    """Get the current worker's context from thread-local storage.

    Raises:
        RuntimeError: If called before init_worker
    """
    try:
        return _worker_context.value  # type: ignore[no-any-return]
    except AttributeError as e:
        raise RuntimeError("Worker context not initialized. Call init_worker first.") from e
