"""Prompt repository: CRUD, search and statistics over the prompt collection.

Every operation loads the whole collection from the store, works on an
in-memory copy and, when something changed, writes the whole collection back.
Operations on one repository are serialized by a lock so concurrent callers in
the same process cannot lose each other's writes.
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable
from uuid import uuid4

from .errors import PromptLibError
from .models import Prompt, PromptInput, PromptStats, SearchFilters
from .seeds import EXAMPLE_PROMPTS
from .store import JsonFileStore, Store

logger = logging.getLogger(__name__)

STATS_TOP_N = 5

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def _new_id() -> str:
    return str(uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _timestamp_key(value: str) -> datetime:
    """Parse an ISO-8601 timestamp for ordering. Unparseable values sort first."""
    try:
        ts = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return _EARLIEST
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


SORT_KEYS: dict[str, Callable[[Prompt], object]] = {
    "title": lambda p: p.title.casefold(),
    "createdAt": lambda p: _timestamp_key(p.created_at),
    "updatedAt": lambda p: _timestamp_key(p.updated_at),
    "usageCount": lambda p: p.usage_count,
}
DEFAULT_SORT = "updatedAt"


def _coerce_input(data: PromptInput | dict) -> PromptInput:
    if isinstance(data, PromptInput):
        return data
    return PromptInput.from_dict(data)


def _matches_text(prompt: Prompt, term: str) -> bool:
    return (
        term in prompt.title.lower()
        or term in prompt.description.lower()
        or term in prompt.content.lower()
        or any(tag.lower() == term for tag in prompt.tags)
    )


class PromptRepository:
    def __init__(
        self,
        path: Path,
        store: Store | None = None,
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.path = Path(path)
        self.store = store or JsonFileStore()
        self._new_id = id_factory or _new_id
        self._now = clock or _utc_now
        self._lock = threading.RLock()

    def _timestamp(self) -> str:
        return self._now().isoformat()

    def _load(self) -> list[Prompt]:
        return [Prompt.from_dict(record) for record in self.store.load(self.path)]

    def _save(self, prompts: list[Prompt]) -> None:
        self.store.save(self.path, [p.to_dict() for p in prompts])

    def _example_prompts(self) -> list[Prompt]:
        now = self._timestamp()
        return [
            Prompt.from_dict(
                {
                    **example,
                    "id": self._new_id(),
                    "createdAt": now,
                    "updatedAt": now,
                    "isExample": True,
                    "usageCount": 0,
                }
            )
            for example in EXAMPLE_PROMPTS
        ]

    def get_all(self) -> list[Prompt]:
        """Return every prompt, seeding the example prompts into an empty library."""
        with self._lock:
            prompts = self._load()
            if not prompts:
                logger.info("Prompt library is empty, writing example prompts")
                prompts = self._example_prompts()
                self._save(prompts)
            logger.debug("%d prompts loaded", len(prompts))
            return prompts

    def get_by_id(self, prompt_id: str) -> Prompt | None:
        with self._lock:
            for prompt in self.get_all():
                if prompt.id == prompt_id:
                    return prompt
            logger.debug("Prompt not found: %s", prompt_id)
            return None

    def create(self, data: PromptInput | dict) -> Prompt:
        """Add a new prompt.

        Raises:
            ValidationError: title or content is missing or empty.
        """
        fields = _coerce_input(data)
        if not fields.title or not fields.content:
            raise PromptLibError.validation("title and content are required")

        with self._lock:
            prompts = self.get_all()
            now = self._timestamp()
            prompt = Prompt.from_dict(
                {
                    **fields.to_dict(),
                    "id": self._new_id(),
                    "createdAt": now,
                    "updatedAt": now,
                }
            )
            prompts.append(prompt)
            self._save(prompts)
            logger.debug("Created prompt %s (%s)", prompt.id, prompt.title)
            return prompt

    def update(self, prompt_id: str, data: PromptInput | dict) -> Prompt | None:
        """Apply the supplied fields of data onto an existing prompt.

        id and createdAt never change; updatedAt is refreshed. usageCount only
        changes through increment_usage.
        """
        return self._apply(prompt_id, _coerce_input(data).to_dict())

    def _apply(self, prompt_id: str, changes: dict) -> Prompt | None:
        with self._lock:
            prompts = self.get_all()
            for index, existing in enumerate(prompts):
                if existing.id == prompt_id:
                    break
            else:
                logger.debug("Prompt not found for update: %s", prompt_id)
                return None

            updated = Prompt.from_dict(
                {
                    **existing.to_dict(),
                    **changes,
                    "id": existing.id,
                    "createdAt": existing.created_at,
                    "updatedAt": self._timestamp(),
                }
            )
            prompts[index] = updated
            self._save(prompts)
            logger.debug("Updated prompt %s", prompt_id)
            return updated

    def delete(self, prompt_id: str) -> bool:
        with self._lock:
            prompts = self.get_all()
            remaining = [p for p in prompts if p.id != prompt_id]
            if len(remaining) == len(prompts):
                logger.debug("Prompt not found for delete: %s", prompt_id)
                return False
            self._save(remaining)
            logger.debug("Deleted prompt %s", prompt_id)
            return True

    def increment_usage(self, prompt_id: str) -> Prompt | None:
        with self._lock:
            prompt = self.get_by_id(prompt_id)
            if prompt is None:
                return None
            return self._apply(
                prompt_id, {"usageCount": (prompt.usage_count or 0) + 1}
            )

    def search(self, filters: SearchFilters | dict | None = None) -> list[Prompt]:
        """Filter and sort prompts.

        Filters are AND-combined and an empty value means no constraint:
        search matches a case-insensitive substring of title, description or
        content, or a tag equal to it ignoring case; category, tone and tag
        are exact matches. Results are sorted by sort_by (unknown keys fall
        back to updatedAt), descending unless sort_order is "asc". Ties keep
        their collection order.
        """
        if filters is None:
            filters = SearchFilters()
        elif isinstance(filters, dict):
            filters = SearchFilters.from_dict(filters)

        prompts = self.get_all()

        if filters.search:
            term = filters.search.lower()
            prompts = [p for p in prompts if _matches_text(p, term)]
        if filters.category:
            prompts = [p for p in prompts if p.category == filters.category]
        if filters.tone:
            prompts = [p for p in prompts if p.tone == filters.tone]
        if filters.tag:
            prompts = [p for p in prompts if filters.tag in p.tags]

        key = SORT_KEYS.get(filters.sort_by, SORT_KEYS[DEFAULT_SORT])
        return sorted(prompts, key=key, reverse=filters.sort_order != "asc")

    def get_stats(self) -> PromptStats:
        prompts = self.get_all()

        categories: Counter[str] = Counter()
        tones: Counter[str] = Counter()
        tags: Counter[str] = Counter()
        for prompt in prompts:
            categories[prompt.category] += 1
            tones[prompt.tone] += 1
            for tag in prompt.tags:
                tags[tag] += 1

        # Order among equal keys is not part of the contract.
        most_used = sorted(prompts, key=SORT_KEYS["usageCount"], reverse=True)
        recent = sorted(prompts, key=SORT_KEYS["updatedAt"], reverse=True)

        return PromptStats(
            total=len(prompts),
            categories=dict(categories),
            tones=dict(tones),
            tags=dict(tags),
            total_usage=sum(p.usage_count for p in prompts),
            most_used=most_used[:STATS_TOP_N],
            recent=recent[:STATS_TOP_N],
        )
