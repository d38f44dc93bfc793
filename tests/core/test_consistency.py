"""Unit tests for the consistency score - pure functions, no mocks needed."""

from catnubcal.core.consistency import calculate_consistency_score


class TestCalculateConsistencyScore:
    """Tests for calculate_consistency_score."""

    def test_empty_sequence(self):
        """No days scores zero."""
        assert calculate_consistency_score([], 2000) == 0

    def test_perfect_week(self):
        """Every day logged and on target scores 100."""
        assert calculate_consistency_score([2000] * 7, 2000) == 100

    def test_nothing_logged(self):
        """A week of zeros scores zero."""
        assert calculate_consistency_score([0] * 7, 2000) == 0

    def test_zero_target(self):
        """A non-positive target scores zero instead of dividing by zero."""
        assert calculate_consistency_score([2000] * 7, 0) == 0

    def test_single_perfect_day(self):
        """One on-target day of seven."""
        # log rate 14.29 * 0.4 + 100 * 0.6 = 65.71
        assert calculate_consistency_score([2000, 0, 0, 0, 0, 0, 0], 2000) == 66

    def test_half_target_every_day(self):
        """Logging daily at half the target."""
        # log rate 100 * 0.4 + 50 * 0.6 = 70
        assert calculate_consistency_score([1000] * 7, 2000) == 70

    def test_deviation_capped(self):
        """Days far over target contribute nothing but never go negative."""
        assert calculate_consistency_score([5000] * 7, 2000) == 40
