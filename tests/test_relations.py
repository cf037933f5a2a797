"""
Tests for relation detection.

Sign convention: transposition_number(S, T) is (T[i] - S[i]) mod 12, the n
with transpose(S, n) == T. The mirrored convention (S[i] - T[i]) gives the
complementary value (12 - n) mod 12, obtained here by swapping arguments.
"""

import pytest

from chuk_mcp_pcset.core import index_number, normal, tni, transpose, transposition_number


class TestTranspositionNumber:
    """Tests for transposition_number."""

    def test_transposition(self) -> None:
        """C major to D major is T2."""
        assert transposition_number([0, 4, 7], [2, 6, 9]) == 2

    def test_sign_convention(self) -> None:
        """Swapping arguments gives the complementary value."""
        forward = transposition_number([0, 4, 7], [2, 6, 9])
        backward = transposition_number([2, 6, 9], [0, 4, 7])
        assert backward == 10
        assert (forward + backward) % 12 == 0

    def test_wraps(self) -> None:
        """Differences are floored modulo 12."""
        assert transposition_number([11], [1]) == 2
        assert transposition_number([1], [11]) == 10

    def test_not_related(self) -> None:
        """Non-uniform differences give None."""
        assert transposition_number([0, 4, 7], [2, 6, 10]) is None

    def test_length_mismatch(self) -> None:
        """Different lengths give None."""
        assert transposition_number([0, 4, 7], [0, 4]) is None

    def test_empty(self) -> None:
        """No common value exists for empty sets."""
        assert transposition_number([], []) is None

    def test_positional(self) -> None:
        """No reordering is done."""
        assert transposition_number([0, 4, 7], [9, 6, 2]) is None
        assert transposition_number(normal([0, 4, 7]), normal([9, 6, 2])) == 2

    @pytest.mark.parametrize("n", range(12))
    def test_recovers_n(self, n: int) -> None:
        """transpose(S, n) is recognized as Tn."""
        pcs = [0, 1, 4, 6]
        assert transposition_number(pcs, transpose(pcs, n)) == n


class TestIndexNumber:
    """Tests for index_number."""

    def test_index(self) -> None:
        """Constant sum of corresponding elements."""
        assert index_number([0, 4, 7], [5, 1, 10]) == 5

    def test_symmetric_in_arguments(self) -> None:
        """Sums do not depend on argument order."""
        assert index_number([5, 1, 10], [0, 4, 7]) == 5

    def test_not_related(self) -> None:
        """Non-uniform sums give None."""
        assert index_number([0, 4, 7], [2, 6, 9]) is None

    def test_length_mismatch(self) -> None:
        """Different lengths give None."""
        assert index_number([0], [0, 1]) is None

    def test_empty(self) -> None:
        """No common value exists for empty sets."""
        assert index_number([], []) is None

    @pytest.mark.parametrize("n", range(12))
    def test_recovers_n(self, n: int) -> None:
        """tni(S, n) is recognized as TnI."""
        pcs = [0, 1, 4, 6]
        assert index_number(pcs, tni(pcs, n)) == n
