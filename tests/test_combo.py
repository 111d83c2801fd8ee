"""Tests for max combo estimation."""

import pytest

from ppcalc.constants.mode import Mode
from ppcalc.errors import InvalidParameter
from ppcalc.objects.beatmap import Beatmap
from ppcalc.objects.beatmap import HitObject
from ppcalc.objects.beatmap import HitObjectKind
from ppcalc.objects.statistics import SimulationTarget
from ppcalc.usecases import combo


def std_beatmap() -> Beatmap:
    return Beatmap(
        [
            HitObject(HitObjectKind.CIRCLE),
            HitObject(HitObjectKind.CIRCLE),
            HitObject(
                HitObjectKind.SLIDER,
                (
                    HitObjectKind.SLIDER_HEAD,
                    HitObjectKind.SLIDER_TICK,
                    HitObjectKind.SLIDER_TICK,
                    HitObjectKind.SLIDER_TAIL,
                ),
            ),
            HitObject(HitObjectKind.CIRCLE),
            HitObject(HitObjectKind.SPINNER),
        ],
        id=1,
        title="test",
    )


class TestMaxCombo:
    """Tests for per-ruleset max combo."""

    def test_slider_nested_points(self):
        """A slider with 4 nested points adds 3 combo."""
        assert combo.max_combo(std_beatmap(), Mode.STD) == 8

    def test_slider_without_nested_points(self):
        beatmap = Beatmap([HitObject(HitObjectKind.SLIDER)])

        assert combo.max_combo(beatmap, Mode.STD) == 1

    def test_taiko_counts_hits_only(self):
        beatmap = Beatmap(
            [HitObject(HitObjectKind.HIT)] * 5
            + [HitObject(HitObjectKind.DRUM_ROLL), HitObject(HitObjectKind.SWELL)],
        )

        assert combo.max_combo(beatmap, Mode.TAIKO) == 5
        assert combo.countable_objects(beatmap, Mode.TAIKO) == 5

    def test_catch_skips_tiny_droplets(self):
        beatmap = Beatmap(
            [
                HitObject(HitObjectKind.FRUIT),
                HitObject(
                    HitObjectKind.JUICE_STREAM,
                    (
                        HitObjectKind.FRUIT,
                        HitObjectKind.DROPLET,
                        HitObjectKind.TINY_DROPLET,
                        HitObjectKind.TINY_DROPLET,
                        HitObjectKind.FRUIT,
                    ),
                ),
                HitObject(HitObjectKind.BANANA_SHOWER),
            ],
        )

        assert combo.max_combo(beatmap, Mode.CATCH) == 4
        assert combo.countable_objects(beatmap, Mode.CATCH) == 6

    def test_mania_has_no_combo(self):
        beatmap = Beatmap([HitObject(HitObjectKind.NOTE), HitObject(HitObjectKind.HOLD_NOTE)])

        assert combo.max_combo(beatmap, Mode.MANIA) == 0
        assert combo.countable_objects(beatmap, Mode.MANIA) == 2

    def test_foreign_objects_rejected(self):
        with pytest.raises(InvalidParameter) as exc_info:
            combo.max_combo(std_beatmap(), Mode.TAIKO)

        assert exc_info.value.parameter == "ruleset"


class TestComboTarget:
    """Tests for turning combo targets into absolute values."""

    def test_absolute_combo_wins(self):
        target = SimulationTarget(combo=3, combo_percent=50.0)

        assert combo.resolve_combo(target, 8) == 3

    def test_combo_above_max_rejected(self):
        with pytest.raises(InvalidParameter) as exc_info:
            combo.resolve_combo(SimulationTarget(combo=40), 8)

        assert exc_info.value.parameter == "combo"

    def test_combo_ignored_without_max(self):
        assert combo.resolve_combo(SimulationTarget(combo=40), 0) == 40

    def test_percent_combo(self):
        assert combo.resolve_combo(SimulationTarget(combo_percent=50.0), 8) == 4

    def test_defaults_to_max(self):
        assert combo.resolve_combo(SimulationTarget(), 8) == 8

    def test_combo_percentage(self):
        assert combo.combo_percentage(4, 8) == 50.0
        assert combo.combo_percentage(1, 3) == 33.33

    def test_combo_percentage_without_combo(self):
        assert combo.combo_percentage(0, 0) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
