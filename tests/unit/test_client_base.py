import pytest

from docsummary.summarization.client_base import split_timeout


class TestSplitTimeout:
    def test_phases_sum_to_budget(self) -> None:
        connect, read = split_timeout(1.8)
        assert connect + read == pytest.approx(1.8)

    def test_connect_gets_a_quarter(self) -> None:
        connect, read = split_timeout(2.0)
        assert connect == pytest.approx(0.5)
        assert read == pytest.approx(1.5)

    def test_read_phase_is_the_larger_share(self) -> None:
        connect, read = split_timeout(30)
        assert read > connect > 0
