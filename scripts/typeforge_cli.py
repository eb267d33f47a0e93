"""CLI entrypoint for typeforge.

Usage (uv):
  uv run python -m scripts.typeforge_cli generate --ap VELF --enneagram 5w4 --instinct sp --mbti INTJ

Or via installed script:
  typeforge generate --mbti ENFP --socionics IEE --realm AY
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional

import typer

from typeforge import llm_client
from typeforge.comparison import compute_character_diff
from typeforge.config import get_settings
from typeforge.errors import InvalidInputError, TypeforgeError
from typeforge.generator import generate_character
from typeforge.mbti import ability_power
from typeforge.quiz_questions import questions_for, realm_questions_for
from typeforge.quiz_session import QuizSession
from typeforge.stats import STAT_LABELS
from typeforge.summary import generate_character_summary, generate_system_insights
from typeforge.types import (
    STAT_NAMES,
    SYSTEM_IDS,
    Character,
    EnneagramSelection,
    GeneratorInput,
    InstinctSelection,
)

app = typer.Typer(add_completion=False, help="Forge game characters from personality typologies")


def _configure_logging() -> None:
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


@app.callback()
def _root() -> None:
    _configure_logging()


def _fail(err: TypeforgeError) -> NoReturn:
    typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=2)


# --- Parsing -----------------------------------------------------------------


def _parse_enneagram(
    code: str,
    instinct: Optional[str],
    instinct_stack: Optional[str],
    tritype: Optional[str],
) -> EnneagramSelection:
    type_part, sep, wing_part = code.lower().partition("w")
    if not sep or not type_part.isdigit() or not wing_part.isdigit():
        raise InvalidInputError(f"Enneagram must look like 5w4, got {code!r}", field="enneagram")
    stack = tuple(instinct_stack.split("/")) if instinct_stack else None
    if instinct is None:
        instinct = stack[0] if stack else "sp"
    fixes = None
    if tritype:
        parts = tritype.split("-")
        if not all(p.isdigit() for p in parts):
            raise InvalidInputError(f"Tritype must look like 5-1-4, got {tritype!r}", field="enneagram.tritype")
        fixes = tuple(int(p) for p in parts)
    return EnneagramSelection(
        type=int(type_part),
        wing=int(wing_part),
        instinct=instinct,
        instinct_stack=stack,
        tritype=fixes,
    )


def _load_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidInputError(f"Could not read {path}: {e}", field=str(path)) from e


def _load_generator_input(path: Path) -> GeneratorInput:
    data = _load_json(path)
    if not isinstance(data, dict):
        raise InvalidInputError(f"{path} must hold a JSON object", field=str(path))
    try:
        return GeneratorInput.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidInputError(f"Malformed generator input in {path}: {e}", field=str(path)) from e


# --- Printing ----------------------------------------------------------------


def _print_character(character: Character) -> None:
    arch = character.archetype
    typer.echo(f"{character.name}, {character.title}")
    typer.echo("=" * 40)
    typer.echo(f"Class: {arch.class_name}")
    typer.echo(f"  {arch.description}")
    typer.echo("")
    typer.echo("STATS")
    for stat in STAT_NAMES:
        typer.echo(f"  {STAT_LABELS[stat]:<13} {character.stats.get(stat):>3}")
    typer.echo(f"  {'Total':<13} {character.stats.total():>3}")
    typer.echo("")
    typer.echo("ABILITIES")
    for ability in character.abilities:
        power = ability_power(ability, character.stats)
        typer.echo(f"  [{ability.slot}] {ability.name} ({ability.cognitive_function}, power {power})")
    typer.echo("")
    el = character.element
    typer.echo(f"ELEMENT: {el.element} ({el.quadra} quadra, {el.club} club)")
    typer.echo(f"  Passive: {el.passive_trait.name}")
    cb = character.combat_behavior
    typer.echo(
        f"COMBAT: {cb.combat_orientation}, {cb.activation_style} activation, "
        f"{cb.positioning} positioning, {cb.regen_source} regen"
    )
    for p in cb.passives:
        typer.echo(f"  - {p.name} ({p.source})")
    typer.echo("")
    summary = generate_character_summary(character)
    if summary:
        typer.echo(summary)
    insights = generate_system_insights(character)
    if insights:
        typer.echo("")
        typer.echo("INSIGHTS")
        for line in insights:
            typer.echo(f"  * {line}")


def _print_diff(a: Character, b: Character) -> None:
    diff = compute_character_diff(a, b)
    typer.echo(f"{a.name} vs {b.name}")
    typer.echo("=" * 40)
    for stat in STAT_NAMES:
        delta = diff.stat_diff[stat]
        typer.echo(f"  {STAT_LABELS[stat]:<13} {a.stats.get(stat):>3} {b.stats.get(stat):>3}  ({delta:+d})")
    typer.echo("")
    for comp in diff.ability_comparison_list:
        left = f"{comp.name_a} [{comp.slot_a}]" if comp.name_a else "-"
        right = f"{comp.name_b} [{comp.slot_b}]" if comp.name_b else "-"
        typer.echo(f"  {comp.cognitive_function}: {left} | {right}")
    typer.echo("")
    typer.echo(f"Same element: {diff.same_element}  Same quadra: {diff.same_quadra}")
    typer.echo(f"Same archetype: {diff.same_archetype}  Same orientation: {diff.same_orientation}")
    typer.echo(f"Shared passives: {', '.join(diff.passive_diff.shared) or '(none)'}")
    if diff.is_identical():
        typer.echo("Characters are identical.")


# --- Commands ----------------------------------------------------------------


@app.command()
def generate(
    ap: Optional[str] = typer.Option(None, "--ap", help="Attitudinal Psyche type, e.g. VELF"),
    enneagram: Optional[str] = typer.Option(None, "--enneagram", help="Type and wing, e.g. 5w4"),
    instinct: Optional[str] = typer.Option(None, "--instinct", help="Dominant instinct: sp, so or sx"),
    instinct_stack: Optional[str] = typer.Option(None, "--instinct-stack", help="Full stack, e.g. sp/sx/so"),
    tritype: Optional[str] = typer.Option(None, "--tritype", help="Enneagram tritype, e.g. 5-1-4"),
    mbti: Optional[str] = typer.Option(None, "--mbti", help="MBTI type, e.g. INTJ"),
    socionics: Optional[str] = typer.Option(None, "--socionics", help="Socionics type, e.g. ILI"),
    realm: Optional[str] = typer.Option(None, "--realm", help="Expanded Instincts realm, e.g. FD"),
    realm_tritype: Optional[str] = typer.Option(None, "--realm-tritype", help="Realm tritype, e.g. FD-CY-EX"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the generated name"),
    as_json: bool = typer.Option(False, "--json", help="Print the character as JSON"),
    backstory: bool = typer.Option(False, "--backstory", help="Ask the LLM for a short backstory"),
) -> None:
    """Generate one character from typology selections."""
    settings = get_settings()
    try:
        enn = _parse_enneagram(enneagram, instinct, instinct_stack, tritype) if enneagram else None
        inst = None
        if realm:
            inst = InstinctSelection(
                realm=realm,
                tritype=tuple(realm_tritype.split("-")) if realm_tritype else None,
            )
        gen_input = GeneratorInput(
            attitudinal=ap,
            enneagram=enn,
            mbti=mbti,
            socionics=socionics,
            instincts=inst,
            seed=seed if seed is not None else settings.name_seed,
        )
        character = generate_character(gen_input)
    except TypeforgeError as e:
        _fail(e)

    if as_json:
        typer.echo(json.dumps(character.to_dict(), indent=2))
    else:
        _print_character(character)

    if backstory:
        if not settings.use_llm_backstory:
            typer.echo("\n(backstory disabled; set USE_LLM_BACKSTORY=1 and OPENAI_API_KEY)")
            return
        story = llm_client.generate_backstory(character)
        typer.echo("")
        typer.echo(story or "(no backstory available)")


@app.command()
def compare(
    input_a: Path = typer.Argument(..., help="JSON file with the first generator input"),
    input_b: Path = typer.Argument(..., help="JSON file with the second generator input"),
    as_json: bool = typer.Option(False, "--json", help="Print the diff as JSON"),
) -> None:
    """Compare two characters built from generator-input JSON files."""
    try:
        a = generate_character(_load_generator_input(input_a))
        b = generate_character(_load_generator_input(input_b))
    except TypeforgeError as e:
        _fail(e)

    if as_json:
        typer.echo(json.dumps(compute_character_diff(a, b).to_dict(), indent=2))
    else:
        _print_diff(a, b)


@app.command()
def questions(
    mode: Optional[str] = typer.Option(None, "--mode", help="quick or deep (default from QUIZ_MODE)"),
    center: Optional[str] = typer.Option(None, "--center", help="Also list realm questions for SUR, INT or PUR"),
) -> None:
    """List quiz questions with their option indexes."""
    mode = mode or get_settings().quiz_mode
    try:
        listing = questions_for(mode)
        if center:
            listing = listing + realm_questions_for(mode, center)
    except TypeforgeError as e:
        _fail(e)

    for q in listing:
        typer.echo(f"{q.id} [{q.system}] {q.prompt}")
        for i, option in enumerate(q.options):
            typer.echo(f"    {i}: {option.label}")


@app.command()
def quiz(
    answers_path: Path = typer.Argument(..., help="JSON object of question id -> option index"),
    mode: Optional[str] = typer.Option(None, "--mode", help="quick or deep (default from QUIZ_MODE)"),
    systems: Optional[str] = typer.Option(None, "--systems", help="Comma-separated systems to score"),
    explain: bool = typer.Option(True, "--explain/--no-explain", help="Print score explanations"),
    build: bool = typer.Option(False, "--generate", help="Also generate a character from the results"),
) -> None:
    """Score a finished quiz from an answers file."""
    settings = get_settings()
    mode = mode or settings.quiz_mode
    enabled: List[str] = [s.strip() for s in systems.split(",")] if systems else list(SYSTEM_IDS)
    try:
        answers: Dict[str, int] = _load_json(answers_path)
        if not isinstance(answers, dict):
            raise InvalidInputError(f"{answers_path} must hold a JSON object", field=str(answers_path))
        session = QuizSession(mode=mode, enabled=enabled)
        session.answer_all(answers)
        result = session.compute_results()
    except TypeforgeError as e:
        _fail(e)

    typer.echo(f"QUIZ RESULTS ({mode})")
    typer.echo("=" * 30)
    if result.attitudinal:
        typer.echo(f"Attitudinal Psyche: {result.attitudinal}")
    if result.enneagram_type is not None:
        typer.echo(f"Enneagram: {result.enneagram_type}w{result.enneagram_wing} {result.enneagram_instinct}")
    if result.mbti:
        typer.echo(f"MBTI: {result.mbti}")
    if result.socionics:
        typer.echo(f"Socionics: {result.socionics}")
    if result.instinct_realm:
        typer.echo(f"Instinct realm: {result.instinct_realm}")

    if explain:
        for system, breakdown in result.explanations.items():
            typer.echo("")
            typer.echo(f"[{system}]")
            for line in breakdown.axis_lean_summary:
                typer.echo(f"  {line}")

    if build:
        seed = settings.name_seed
        try:
            character = generate_character(result.to_generator_input(seed=seed))
        except TypeforgeError as e:
            _fail(e)

        typer.echo("")
        _print_character(character)


if __name__ == "__main__":
    app()
