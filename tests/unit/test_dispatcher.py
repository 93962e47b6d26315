"""Unit tests for worker fan-out and partitioning.

Each test has exactly one assertion.
"""

import pytest

from typocheck.data import DictionaryIndex
from typocheck.processing import CheckContext, dispatch, partition, worker_count


def _context() -> CheckContext:
    return CheckContext(index=DictionaryIndex.build(["door", "desk"]), threshold=7)


def _words(n: int) -> list[str]:
    base = ["door", "dooor", "dsek", "xyz"]
    return [base[i % len(base)] for i in range(n)]


class TestWorkerCount:
    """Test worker count selection."""

    def test_small_batch_uses_one_worker(self) -> None:
        """Nine candidates run in a single worker."""
        assert worker_count(9) == 1

    def test_ten_candidates_use_four_workers(self) -> None:
        """Ten candidates is the parallel cut-over."""
        assert worker_count(10) == 4

    def test_empty_batch_uses_one_worker(self) -> None:
        """No candidates still needs a worker to report zero verdicts."""
        assert worker_count(0) == 1


class TestPartition:
    """Test contiguous slicing."""

    def test_last_slice_takes_remainder(self) -> None:
        """Ten words over four workers gives 2, 2, 2, 4."""
        assert partition(10, 4) == [(0, 2), (2, 4), (4, 6), (6, 10)]

    def test_single_worker_takes_everything(self) -> None:
        """One worker covers the whole list."""
        assert partition(9, 1) == [(0, 9)]

    def test_slices_cover_every_index_once(self) -> None:
        """Slices leave no gap and no overlap."""
        covered = [i for start, stop in partition(23, 4) for i in range(start, stop)]
        assert covered == list(range(23))

    def test_rejects_zero_workers(self) -> None:
        """At least one worker is required."""
        with pytest.raises(ValueError):
            partition(5, 0)


class TestDispatch:
    """Test dispatch over one and many workers."""

    def test_nine_words_give_nine_verdicts(self) -> None:
        """Single-worker runs produce one verdict per word."""
        assert len(dispatch(_words(9), _context()).verdicts) == 9

    def test_nine_words_use_one_buffer(self) -> None:
        """Single-worker runs return one buffer."""
        assert len(dispatch(_words(9), _context()).buffers) == 1

    def test_ten_words_give_ten_verdicts(self) -> None:
        """The smallest parallel batch still gets one verdict per word."""
        assert len(dispatch(_words(10), _context()).verdicts) == 10

    def test_ten_words_use_four_workers(self) -> None:
        """Ten words is enough to fan out."""
        assert dispatch(_words(10), _context()).worker_count == 4

    def test_twelve_words_give_twelve_verdicts(self) -> None:
        """Parallel runs produce one verdict per word."""
        assert len(dispatch(_words(12), _context()).verdicts) == 12

    def test_twelve_words_use_four_workers(self) -> None:
        """Parallel runs report the fixed worker count."""
        assert dispatch(_words(12), _context()).worker_count == 4

    def test_parallel_buffers_keep_slice_order(self) -> None:
        """Each buffer lists its slice's words in candidate order."""
        words = [f"d{i}" for i in range(13)]
        result = dispatch(words, _context())
        assert [v.word for v in result.verdicts] == words

    def test_empty_list_gives_no_verdicts(self) -> None:
        """An empty batch produces nothing."""
        assert not dispatch([], _context()).verdicts
