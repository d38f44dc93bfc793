"""Unit tests for health tips - pure functions, no mocks needed."""

from catnubcal.core.models import WeightProjection
from catnubcal.core.projection import calculate_weight_projection
from catnubcal.core.tips import generate_health_tip


class TestGenerateHealthTip:
    """Tests for generate_health_tip, in rule priority order."""

    def test_no_intake_asks_to_start_logging(self):
        """Zero intake wins over everything else."""
        projection = calculate_weight_projection(2000, 0)
        tip = generate_health_tip(projection, 0, 2000)

        assert tip.type == "info"
        assert tip.icon == "📝"

    def test_computed_gain_falls_through(self):
        """A computed gain carries a negative change, so the dinner alert stays quiet."""
        projection = calculate_weight_projection(2000, 2500)
        tip = generate_health_tip(projection, 2500, 2000)

        assert projection.projected_weight_change_kg < 0
        assert tip.type == "info"
        assert tip.icon == "💧"

    def test_gaining_fast_handbuilt_projection(self):
        """A positive change over 1 kg on a gaining projection suggests a smaller dinner."""
        projection = WeightProjection(
            daily_deficit=-400, projected_weight_change_kg=1.5, status="gaining", message=""
        )
        tip = generate_health_tip(projection, 2400, 2000)

        assert tip.type == "warning"
        assert "dinner" in tip.tip

    def test_gaining_negative_change_not_alerted(self):
        """The gain alert compares the signed change."""
        projection = WeightProjection(
            daily_deficit=-400, projected_weight_change_kg=-1.5, status="gaining", message=""
        )
        assert generate_health_tip(projection, 2400, 2000).icon == "💧"

    def test_losing_fast_beats_under_eating(self):
        """A change under -2 kg on a losing projection is reported before under-eating."""
        projection = WeightProjection(
            daily_deficit=700, projected_weight_change_kg=-2.5, status="losing", message=""
        )
        tip = generate_health_tip(projection, 900, 2000)

        assert tip.type == "warning"
        assert tip.icon == "💪"

    def test_computed_fast_loss_falls_through(self):
        """A computed loss carries a positive change, so the protein alert stays quiet."""
        projection = calculate_weight_projection(2000, 1200)
        tip = generate_health_tip(projection, 1200, 2000)

        assert projection.status == "losing"
        assert projection.projected_weight_change_kg == 3.12
        assert tip.icon == "💧"

    def test_computed_steep_loss_warns_about_energy(self):
        """Under half the target still warns when the loss alert stays quiet."""
        projection = calculate_weight_projection(2000, 900)
        assert generate_health_tip(projection, 900, 2000).icon == "⚡"

    def test_under_eating(self):
        """Eating under half the target warns about energy."""
        # Projection against a low TDEE is maintaining, but the goal is 2000
        projection = calculate_weight_projection(1000, 900)
        tip = generate_health_tip(projection, 900, 2000)

        assert tip.type == "warning"
        assert tip.icon == "⚡"

    def test_maintaining(self):
        """Steady weight earns praise."""
        projection = calculate_weight_projection(2000, 2050)
        tip = generate_health_tip(projection, 2050, 2000)

        assert tip.type == "success"
        assert tip.icon == "🎯"

    def test_slow_loss_falls_back_to_hydration(self):
        """Losing under 2 kg a month matches no rule and gets the water tip."""
        projection = calculate_weight_projection(2000, 1700)
        tip = generate_health_tip(projection, 1700, 2000)

        assert tip.type == "info"
        assert tip.icon == "💧"

    def test_slow_gain_falls_back_to_hydration(self):
        """Gaining under 1 kg a month also gets the water tip."""
        projection = calculate_weight_projection(2000, 2250)
        tip = generate_health_tip(projection, 2250, 2000)

        assert tip.icon == "💧"
