from __future__ import annotations

import math
import re

from core.catalog import palette_color
from core.models import Category, ChartSlice, RatingMode, SkillRating

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(raw) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    match = _LEADING_INT.match(str(raw if raw is not None else ""))
    return int(match.group(1)) if match else None


def mode_bounds(mode: RatingMode, ordinal_min: int = 1) -> tuple[int, int]:
    if mode == RatingMode.PERCENTAGE:
        return 0, 100
    return ordinal_min, 10


def mode_label(mode: RatingMode, ordinal_min: int = 1) -> str:
    low, high = mode_bounds(mode, ordinal_min)
    if mode == RatingMode.PERCENTAGE:
        return f"Percentage ({low}-{high}%)"
    return f"Rating ({low}-{high})"


def tooltip_text(value: int, mode: RatingMode) -> str:
    return f"{value}%" if mode == RatingMode.PERCENTAGE else f"{value}/10"


def resolve_display_value(skill: SkillRating, overlay: dict[int, int], fallback: int = 0) -> int:
    if skill.id is not None and skill.id in overlay:
        return overlay[skill.id]
    return skill.rating or fallback


def chart_projection(category: Category, overlay: dict[int, int], fallback: int = 0) -> list[ChartSlice]:
    slices = []
    for index, skill in enumerate(category.skills):
        value = resolve_display_value(skill, overlay, fallback)
        slices.append(
            ChartSlice(
                label=skill.skill,
                value=value,
                color=palette_color(index),
                show_label=value > 0,
            )
        )
    return slices


class RatingDraft:
    """Locally staged rating edits keyed by skill id.

    ``invalid_input`` decides what happens to a rejected edit: ``"ignore"``
    drops it without trace, ``"report"`` keeps a reason in ``rejections`` so
    the UI can show it next to the field. Either way the overlay is untouched.
    """

    def __init__(self, invalid_input: str = "ignore", fallback: int = 0):
        self.overlay: dict[int, int] = {}
        self.rejections: dict[int, str] = {}
        self.invalid_input = invalid_input
        self.fallback = fallback

    @property
    def has_pending(self) -> bool:
        return bool(self.overlay)

    def stage(self, skill_id: int, raw_value, mode: RatingMode, ordinal_min: int = 1) -> bool:
        low, high = mode_bounds(mode, ordinal_min)
        value = parse_int(raw_value)
        if value is None:
            self._reject(skill_id, "Enter a whole number")
            return False
        if not low <= value <= high:
            self._reject(skill_id, f"Must be between {low} and {high}")
            return False
        self.overlay[skill_id] = value
        self.rejections.pop(skill_id, None)
        return True

    def _reject(self, skill_id: int, reason: str) -> None:
        if self.invalid_input == "report":
            self.rejections[skill_id] = reason

    def resolve(self, skill: SkillRating) -> int:
        return resolve_display_value(skill, self.overlay, self.fallback)

    def project(self, category: Category) -> list[ChartSlice]:
        return chart_projection(category, self.overlay, self.fallback)

    def snapshot(self) -> dict[int, int]:
        return dict(self.overlay)

    def discard(self, skill_id: int) -> None:
        self.overlay.pop(skill_id, None)
        self.rejections.pop(skill_id, None)

    def clear(self, keep: list[int] | None = None) -> None:
        kept = {skill_id: self.overlay[skill_id] for skill_id in keep or [] if skill_id in self.overlay}
        self.overlay = kept
        self.rejections = {}
