from typeforge.stats import (
    DEFAULT_STATS,
    apply_multipliers,
    apply_overrides,
    apply_stat_changes,
    apply_status_effect,
    build_stat_breakdown,
    clamp_stats,
    compose_stats,
    stats_from_breakdown,
)
from typeforge.types import MAX_STAT, StatBlock, StatusEffect


def test_default_stats_are_neutral():
    assert DEFAULT_STATS.to_dict() == {"willpower": 8, "intelligence": 8, "spirit": 8, "vitality": 8}


def test_apply_multipliers_rounds_half_up():
    base = StatBlock(willpower=10, intelligence=7, spirit=5, vitality=4)
    out = apply_multipliers(base, {"willpower": 1.15, "intelligence": 1.5, "spirit": 1.1})

    # 11.5 -> 12, 10.5 -> 11, 5.5 -> 6, missing axis stays at 1.0
    assert out.willpower == 12
    assert out.intelligence == 11
    assert out.spirit == 6
    assert out.vitality == 4


def test_overrides_bypass_multipliers():
    base = StatBlock(willpower=10, intelligence=10, spirit=10, vitality=10)
    out = compose_stats(base, {"willpower": 1.2, "spirit": 1.2}, {"willpower": 3})

    assert out.willpower == 3
    assert out.spirit == 12


def test_apply_overrides_none_is_identity():
    base = StatBlock(willpower=1, intelligence=2, spirit=3, vitality=4)
    assert apply_overrides(base, None) is base
    assert apply_overrides(base, {}) is base


def test_compose_clamps_to_range():
    base = StatBlock(willpower=18, intelligence=5, spirit=5, vitality=5)
    out = compose_stats(base, {"willpower": 1.2}, {"vitality": -4, "spirit": 99})

    assert out.willpower == MAX_STAT
    assert out.vitality == 0
    assert out.spirit == MAX_STAT
    assert clamp_stats(out) == out


def test_breakdown_reproduces_final_stats():
    base = StatBlock(willpower=14, intelligence=7, spirit=10, vitality=4)
    breakdown = build_stat_breakdown(
        base=base,
        base_source="VELF",
        multipliers={"intelligence": 1.2},
        multiplier_source="Expressive Sage (sp)",
        overrides={"vitality": 6},
    )

    assert breakdown.base_source == "VELF"
    assert breakdown.multiplier_source == "Expressive Sage (sp)"
    assert stats_from_breakdown(breakdown).to_dict() == {
        "willpower": 14,
        "intelligence": 8,
        "spirit": 10,
        "vitality": 6,
    }


def test_status_effect_changes_are_clamped():
    stats = StatBlock(willpower=19, intelligence=2, spirit=8, vitality=8)
    effect = StatusEffect(name="Test", description="", stat_changes={"willpower": 3, "intelligence": -3})

    out = apply_status_effect(stats, effect)
    assert out.willpower == MAX_STAT
    assert out.intelligence == 0
    assert out.spirit == 8

    assert apply_stat_changes(stats, {}) == stats
