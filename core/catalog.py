from __future__ import annotations

from core.models import Category, SkillRating

DEFAULT_CATEGORY_STYLES = {
    "Cloud Skills": {"icon": "🌥", "color": "#007bff"},
    "Database": {"icon": "💽", "color": "#28a745"},
    "Deployment": {"icon": "🚀", "color": "#9c27b0"},
    "Achievements": {"icon": "🏆", "color": "#ff9800"},
    "Implementation": {"icon": "🚩", "color": "#dc3545"},
}
FALLBACK_ICON = "📊"
FALLBACK_COLOR = "#666666"

CHART_PALETTE = ("#8884d8", "#82ca9d", "#ff7300", "#ff6384", "#36a2eb")


def palette_color(index: int) -> str:
    return CHART_PALETTE[index % len(CHART_PALETTE)]


def _as_int(value, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def parse_skill(item: dict) -> SkillRating:
    raw_id = item.get("id")
    return SkillRating(
        id=None if raw_id is None else int(raw_id),
        skill=str(item.get("skill", "")),
        rating=_as_int(item.get("rating")),
    )


def parse_category(item: dict) -> Category:
    name = str(item.get("name", ""))
    style = DEFAULT_CATEGORY_STYLES.get(name, {})
    return Category(
        id=int(item["id"]),
        name=name,
        skills=[parse_skill(skill) for skill in item.get("skills") or []],
        icon=item.get("icon") or style.get("icon") or FALLBACK_ICON,
        color=item.get("color") or style.get("color") or FALLBACK_COLOR,
    )


def parse_categories(payload: list[dict] | None) -> list[Category]:
    return [parse_category(item) for item in payload or []]
