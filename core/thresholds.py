from __future__ import annotations

import logging

from core.api_client import ApiError, HiringApiClient
from core.catalog import parse_categories
from core.config import Settings
from core.models import Category, CommitReport, RatingMode
from core.ratings import RatingDraft

logger = logging.getLogger(__name__)


class SkillThresholdBoard:
    """State behind the skill thresholds page.

    Holds the baseline categories last fetched from the server, the draft
    overlay of unsaved edits, the active mode and the last user-facing message.
    """

    def __init__(self, client: HiringApiClient, settings: Settings | None = None):
        self.client = client
        self.settings = settings or Settings()
        self.categories: list[Category] = []
        self.draft = RatingDraft(invalid_input=self.settings.invalid_input)
        self.mode: RatingMode = self.settings.rating_mode
        self.expanded_category: int | None = None
        self.message = ""
        self.message_level = "info"

    @property
    def selected_category(self) -> Category | None:
        return next((c for c in self.categories if c.id == self.expanded_category), None)

    def _say(self, message: str, level: str) -> None:
        self.message = message
        self.message_level = level

    def load(self, keep_message: bool = False) -> bool:
        try:
            payload = self.client.list_categories()
        except ApiError as exc:
            self._say("Error connecting to server" if exc.is_transport_error else "Failed to load categories", "error")
            return False
        try:
            categories = parse_categories(payload)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Unexpected categories payload: %s", exc)
            self._say("Failed to load categories", "error")
            return False
        self.categories = categories
        if self.categories and self.expanded_category is None:
            self.expanded_category = self.categories[0].id
        if not keep_message:
            self._say("", "info")
        return True

    def toggle_category(self, category_id: int) -> None:
        self.expanded_category = None if category_id == self.expanded_category else category_id

    def set_mode(self, mode: RatingMode) -> None:
        self.mode = RatingMode(mode)

    def stage(self, skill_id: int, raw_value) -> bool:
        return self.draft.stage(skill_id, raw_value, self.mode, self.settings.ordinal_min)

    def commit_one(self, skill_id: int) -> bool:
        if skill_id not in self.draft.overlay:
            return False
        try:
            self.client.update_skill_rating(skill_id, self.draft.overlay[skill_id])
        except ApiError as exc:
            self._say("Error connecting to server" if exc.is_transport_error else "Failed to update rating", "error")
            return False
        self._say("Rating updated successfully", "success")
        self.draft.discard(skill_id)
        self.load(keep_message=True)
        return True

    def commit_all(self) -> CommitReport | None:
        pending = self.draft.snapshot()
        if not pending:
            return None

        if self.settings.use_bulk_endpoint:
            outcomes = self._commit_bulk(pending)
        else:
            outcomes = self._commit_each(pending)

        failed = [skill_id for skill_id, ok in outcomes.items() if not ok]
        report = CommitReport(attempted=len(pending), succeeded=len(pending) - len(failed), failed_ids=failed)
        if report.all_succeeded:
            self._say(report.message, "success")
        else:
            self._say(report.message, "warning" if report.partial else "error")
        logger.info("Committed %s of %s staged ratings", report.succeeded, report.attempted)

        report.refreshed = self.load(keep_message=True)
        if self.settings.failed_entries == "retain":
            self.draft.clear(keep=failed)
        else:
            self.draft.clear()
        return report

    def _commit_each(self, pending: dict[int, int]) -> dict[int, bool]:
        outcomes: dict[int, bool] = {}
        for skill_id, rating in pending.items():
            try:
                self.client.update_skill_rating(skill_id, rating)
            except ApiError as exc:
                logger.warning("Error updating skill %s: %s", skill_id, exc)
                outcomes[skill_id] = False
            else:
                outcomes[skill_id] = True
        return outcomes

    def _commit_bulk(self, pending: dict[int, int]) -> dict[int, bool]:
        try:
            return self.client.bulk_update_ratings(pending)
        except ApiError as exc:
            logger.warning("Bulk rating update failed: %s", exc)
            return {skill_id: False for skill_id in pending}
