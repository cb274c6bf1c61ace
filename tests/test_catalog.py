from __future__ import annotations

from core.catalog import FALLBACK_COLOR, FALLBACK_ICON, parse_categories
from core.charts import threshold_frame
from core.models import RatingMode
from core.ratings import RatingDraft


def test_missing_styles_filled_from_lookup():
    categories = parse_categories(
        [
            {"id": 1, "name": "Cloud Skills", "skills": [{"id": 3, "skill": "AWS", "rating": 7}]},
            {"id": 2, "name": "Leadership", "skills": []},
            {"id": 3, "name": "Database", "color": "#000000", "icon": "DB", "skills": None},
        ]
    )
    assert categories[0].color == "#007bff"
    assert categories[0].skills[0].rating == 7
    assert (categories[1].icon, categories[1].color) == (FALLBACK_ICON, FALLBACK_COLOR)
    assert (categories[2].icon, categories[2].color) == ("DB", "#000000")
    assert categories[2].skills == []


def test_unsaved_skill_keeps_missing_id():
    category = parse_categories([{"id": 1, "name": "Deployment", "skills": [{"skill": "Helm", "rating": "x"}]}])[0]
    assert category.skills[0].id is None
    assert category.skills[0].rating == 0


def test_threshold_frame_follows_draft():
    category = parse_categories(
        [{"id": 1, "name": "Database", "skills": [{"id": 7, "skill": "SQL", "rating": 4}, {"id": 8, "skill": "Redis", "rating": 0}]}]
    )[0]
    draft = RatingDraft()
    draft.stage(7, "55", RatingMode.PERCENTAGE)
    frame = threshold_frame(draft.project(category), RatingMode.PERCENTAGE)
    assert frame["Value"].tolist() == [55, 0]
    assert frame["Label"].tolist() == ["SQL", ""]
    assert frame["Tooltip"].tolist() == ["55%", "0%"]
