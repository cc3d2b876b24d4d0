"""Projections of heroes and comparison results into transport shapes.

Every function here is a pure projection: the decisions (who won which
category) were already made by HeroComparisonEngine.
"""

from superheroes.models.comparison import ComparisonResult, Side
from superheroes.models.hero import STAT_CATEGORIES, Hero

TIE_MARKER = "tie"

# Positional winner markers for the JSON API: 1 = first requested id, 2 = second
_API_WINNER = {Side.A: 1, Side.B: 2, Side.TIE: TIE_MARKER}


def _label(category: str) -> str:
    return category.capitalize()


def _hero_summary(hero: Hero) -> dict:
    return {"id": hero.id, "name": hero.name}


def comparison_to_api(result: ComparisonResult) -> dict:
    """Serialize a comparison for the HTTP JSON API."""
    return {
        "id1": result.hero_a.id,
        "id2": result.hero_b.id,
        "hero1": _hero_summary(result.hero_a),
        "hero2": _hero_summary(result.hero_b),
        "categories": [
            {
                "name": c.category,
                "id1_value": c.value_a,
                "id2_value": c.value_b,
                "winner": _API_WINNER[c.winner],
            }
            for c in result.categories
        ],
        "wins": {"id1": result.wins_a, "id2": result.wins_b},
        "overall_winner": _API_WINNER[result.overall_winner],
    }


def comparison_to_display(result: ComparisonResult) -> dict:
    """Build the display model used by the comparison view.

    Rows carry per-side highlight flags so the UI never re-derives winners.
    """
    heroes = [result.hero_a, result.hero_b]
    winner = result.winner_hero
    return {
        "heroes": [
            {"id": h.id, "name": h.name, "image": h.image}
            for h in heroes
        ],
        "rows": [
            {
                "category": c.category,
                "label": _label(c.category),
                "values": [c.value_a, c.value_b],
                "highlight": [c.winner is Side.A, c.winner is Side.B],
            }
            for c in result.categories
        ],
        "score": f"{result.wins_a}-{result.wins_b}",
        "winner": _hero_summary(winner) if winner else None,
        "is_tie": result.overall_winner is Side.TIE,
    }


def hero_to_markdown(hero: Hero) -> str:
    """Render a hero as the Markdown block returned by the MCP tool."""
    lines = [
        f"Here is the data for {hero.name} retrieved using the superheroes MCP:",
        "",
        f"• Name: {hero.name}",
        f'• Image: <img src="{hero.image}" alt="{hero.name}"/>',
        "• Powerstats:",
    ]
    for category in STAT_CATEGORIES:
        lines.append(f"  • {_label(category)}: {hero.powerstats.value_of(category)}")
    return "\n".join(lines)


def comparison_to_markdown(result: ComparisonResult) -> str:
    """Render a comparison as a Markdown table for terminal output."""
    a, b = result.hero_a, result.hero_b
    lines = [
        f"# {a.name} vs {b.name}",
        "",
        f"| Category | {a.name} | {b.name} | Winner |",
        "|---|---|---|---|",
    ]
    for c in result.categories:
        if c.winner is Side.A:
            cell = a.name
        elif c.winner is Side.B:
            cell = b.name
        else:
            cell = "Tie"
        lines.append(f"| {_label(c.category)} | {c.value_a} | {c.value_b} | {cell} |")

    lines.append("")
    lines.append(f"**Score:** {result.wins_a}-{result.wins_b}")
    winner = result.winner_hero
    if winner is None:
        lines.append("**Result:** It's a tie!")
    else:
        lines.append(f"**Winner:** {winner.name}")
    return "\n".join(lines)
