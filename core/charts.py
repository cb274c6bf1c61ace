from __future__ import annotations

import altair as alt
import pandas as pd

from core.catalog import palette_color
from core.models import ChartSlice, RatingMode
from core.ratings import tooltip_text

FRAME_COLUMNS = ["Skill", "Value", "Color", "Label", "Tooltip"]


def threshold_frame(slices: list[ChartSlice], mode: RatingMode) -> pd.DataFrame:
    rows = [
        {
            "Skill": item.label,
            "Value": item.value,
            "Color": item.color,
            "Label": item.label if item.show_label else "",
            "Tooltip": tooltip_text(item.value, mode),
        }
        for item in slices
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def share_pct(value: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(round(value / total * 100))


def job_skill_frame(ratings: dict[str, int]) -> pd.DataFrame:
    total = sum(ratings.values())
    rows = []
    for index, (skill, value) in enumerate(ratings.items()):
        pct = share_pct(value, total)
        rows.append(
            {
                "Skill": skill,
                "Value": value,
                "Color": palette_color(index),
                "Label": skill if value > 0 else "",
                "Tooltip": f"{skill}: {value}/10 ({pct}%)",
            }
        )
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def pie_chart(frame: pd.DataFrame, size: int = 300) -> alt.LayerChart:
    domain = frame["Skill"].tolist()
    palette = frame["Color"].tolist()
    base = alt.Chart(frame).encode(
        theta=alt.Theta("Value:Q", stack=True),
        color=alt.Color("Skill:N", scale=alt.Scale(domain=domain, range=palette), legend=alt.Legend(orient="right")),
        tooltip=["Tooltip:N"],
    )
    arcs = base.mark_arc(outerRadius=size // 3)
    labels = base.mark_text(radius=size // 3 + 18).encode(text="Label:N")
    return (arcs + labels).properties(width=size, height=size)
