from typeforge.names import (
    FLOWING_PREFIXES,
    HARSH_PREFIXES,
    NEUTRAL_PREFIXES,
    generate_name,
    generate_title,
    pick_name_pool,
)


def test_same_seed_same_name():
    assert generate_name(42, "Expressive Sage (sp)", "Metal") == generate_name(42, "Expressive Sage (sp)", "Metal")


def test_pool_selection():
    assert pick_name_pool("Fierce Berserker (sx)", "Earth")[0] == "harsh"
    assert pick_name_pool("Wanderer", "Fire")[0] == "harsh"
    assert pick_name_pool("Expressive Sage (sp)", "Metal")[0] == "flowing"
    assert pick_name_pool("Wanderer", "Water")[0] == "flowing"
    # harsh class with flowing element is mixed
    assert pick_name_pool("Principled Justicar (so)", "Light")[0] == "neutral"
    assert pick_name_pool(None, "Fire")[0] == "neutral"
    assert pick_name_pool("Sentinel", "Earth")[0] == "neutral"


def test_name_uses_pool_prefix():
    name = generate_name(7, "Fierce Berserker (sx)", "Fire")
    assert any(name.startswith(p) for p in HARSH_PREFIXES)

    name = generate_name(7, "Serene Druid (sp)", "Nature")
    assert any(name.startswith(p) for p in FLOWING_PREFIXES)

    name = generate_name(7)
    assert any(name.startswith(p) for p in NEUTRAL_PREFIXES)


def test_title():
    assert generate_title("Expressive Sage (sp)", "Metal") == "Metal Expressive Sage (sp)"
