from typeforge.edits import apply_edits
from typeforge.generator import generate_character
from typeforge.summary import (
    MAX_INSIGHTS,
    build_backstory_context,
    generate_character_summary,
    generate_system_insights,
)
from typeforge.types import CharacterEdits, EnneagramSelection, GeneratorInput, InstinctSelection


def _full_character(**kwargs):
    base = dict(
        attitudinal="VELF",
        enneagram=EnneagramSelection(type=5, wing=4, instinct="sp"),
        mbti="INTJ",
        socionics="ILI",
        instincts=InstinctSelection(realm="FD"),
        seed=3,
    )
    base.update(kwargs)
    return generate_character(GeneratorInput(**base))


def test_summary_has_one_sentence_per_system():
    summary = generate_character_summary(_full_character())

    assert summary.startswith("Your VELF stack puts Willpower at 14, making it your primary resource.")
    assert "As an Expressive Sage (sp), you " in summary
    assert "Your Ni-dominant kit means you lead with Foresight." in summary
    assert "Metal from the Gamma quadra" in summary
    assert "Frontline fighter with Immersing activation and Directing positioning" in summary


def test_summary_empty_without_systems():
    assert generate_character_summary(generate_character(GeneratorInput(seed=0))) == ""


def test_insights_ranked_and_capped():
    insights = generate_system_insights(_full_character())

    assert len(insights) == MAX_INSIGHTS
    assert insights[0].startswith("Willpower is your highest stat (14)")
    assert "triple-layered convergence" in insights[0]
    assert insights[1].startswith("Your VELF stack puts Willpower at 14")
    assert insights[2].startswith("Se-Inferior's comeback fires from Vitality at 4")
    assert insights[3].startswith("SUR Frontline + Expressive Sage (sp)")


def test_tritype_insight():
    character = _full_character(enneagram=EnneagramSelection(type=5, wing=4, instinct="sp", tritype=(5, 1, 4)))
    insights = generate_system_insights(character)
    assert any(line.startswith("Tritype 5-1-4 covers all three centers") for line in insights)


def test_insights_need_two_systems():
    character = generate_character(GeneratorInput(mbti="INTJ", seed=0))
    assert generate_system_insights(character) == []


def test_insights_are_deterministic():
    assert generate_system_insights(_full_character()) == generate_system_insights(_full_character())


def test_backstory_context():
    character = _full_character()
    context = build_backstory_context(character)

    assert f"Name: {character.name}" in context
    assert "Class: Expressive Sage (sp)" in context
    assert "Stats: Willpower 14, Intelligence 8, Spirit 10, Vitality 4" in context
    assert "Foresight (hero, Ni, power 20)" in context
    assert "Combat Passives: Flow State" in context


def test_tritype_insight_survives_class_name_edit():
    character = _full_character(enneagram=EnneagramSelection(type=5, wing=4, instinct="sp", tritype=(5, 1, 4)))
    edited = apply_edits(character, CharacterEdits(class_name="Archivist"))

    insights = generate_system_insights(edited)
    assert any(line.startswith("Tritype 5-1-4 covers all three centers") for line in insights)
