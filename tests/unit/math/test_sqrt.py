"""Tests for the integer square root."""

import math

import pytest

from xybk.math.sqrt import isqrt


class TestIsqrtSmallValues:
    """Exact results around small perfect squares."""

    @pytest.mark.parametrize(
        ("n", "expected"),
        [
            (0, 0),
            (1, 1),
            (2, 1),
            (3, 1),
            (4, 2),
            (8, 2),
            (9, 3),
            (255, 15),
            (256, 16),
            (257, 16),
            (1_000_000, 1000),
        ],
    )
    def test_known_values(self, n, expected):
        assert isqrt(n) == expected

    def test_negative_raises(self):
        """Negative input is rejected."""
        with pytest.raises(ValueError):
            isqrt(-1)


class TestIsqrtLargeValues:
    """Exactness beyond native integer and float precision."""

    def test_perfect_square_10_28(self):
        """sqrt(1e28) = 1e14."""
        assert isqrt(10**28) == 10**14

    def test_below_2_256_squared(self):
        """(2^256)^2 - 1 floors to 2^256 - 1."""
        root = 2**256
        assert isqrt(root * root - 1) == root - 1
        assert isqrt(root * root) == root

    @pytest.mark.parametrize(
        "n",
        [
            602311237141614639250714307746962364969,
            1051862615112527981932275442917763963209,
            23562247653695456410649294596,
            72911332743072652158956264288752431169,
        ],
    )
    def test_floor_property(self, n):
        """r^2 <= n < (r + 1)^2."""
        r = isqrt(n)
        assert r * r <= n < (r + 1) * (r + 1)

    @pytest.mark.parametrize(
        ("n", "expected_root"),
        [
            (602311237141614639250714307746962364969, 24542030012645951437),
            (1051862615112527981932275442917763963209, 32432431532534343453),
            (23562247653695456410649294596, 153499992357314),
            (72911332743072652158956264288752431169, 8538813310002312737),
        ],
    )
    def test_reference_roots(self, n, expected_root):
        """Reference roots agree within a few units."""
        assert abs(isqrt(n) - expected_root) <= 5

    def test_matches_stdlib(self):
        """Agrees with math.isqrt across magnitudes."""
        for exponent in range(0, 160, 7):
            for offset in (-1, 0, 1, 12345):
                n = max(0, 3**exponent + offset)
                assert isqrt(n) == math.isqrt(n)


class TestIsqrtMonotonic:
    """isqrt never decreases as n grows."""

    def test_monotonic_small_range(self):
        previous = 0
        for n in range(0, 5000):
            current = isqrt(n)
            assert current >= previous
            previous = current
