from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_CATEGORY = "General"
DEFAULT_TONE = "Neutral"


def _as_text(value) -> str:
    return str(value) if value else ""


def _as_tags(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(tag) for tag in value]


def _as_count(value) -> int:
    try:
        count = int(value or 0)
    except (TypeError, ValueError):
        return 0
    return max(count, 0)


@dataclass
class Prompt:
    id: str
    title: str
    content: str
    description: str = ""
    category: str = DEFAULT_CATEGORY
    tags: list[str] = field(default_factory=list)
    tone: str = DEFAULT_TONE
    created_at: str = ""
    updated_at: str = ""
    is_example: bool = False
    usage_count: int = 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "content": self.content,
            "category": self.category,
            "tags": list(self.tags),
            "tone": self.tone,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "isExample": self.is_example,
            "usageCount": self.usage_count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Prompt:
        """Build a prompt from its stored shape, filling defaults for missing fields."""
        return cls(
            id=_as_text(data.get("id")),
            title=_as_text(data.get("title")),
            description=_as_text(data.get("description")),
            content=_as_text(data.get("content")),
            category=_as_text(data.get("category")) or DEFAULT_CATEGORY,
            tags=_as_tags(data.get("tags")),
            tone=_as_text(data.get("tone")) or DEFAULT_TONE,
            created_at=_as_text(data.get("createdAt")),
            updated_at=_as_text(data.get("updatedAt")),
            is_example=data.get("isExample") is True,
            usage_count=_as_count(data.get("usageCount")),
        )


@dataclass
class PromptInput:
    """Caller-supplied prompt fields. None means "not supplied".

    Used as the full input of a create and as a sparse patch for an update:
    only supplied fields override the stored record.
    """

    title: str | None = None
    description: str | None = None
    content: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    tone: str | None = None
    is_example: bool | None = None

    _FIELDS = {
        "title": "title",
        "description": "description",
        "content": "content",
        "category": "category",
        "tags": "tags",
        "tone": "tone",
        "is_example": "isExample",
    }

    def to_dict(self) -> dict:
        """Supplied fields only, keyed the way they are stored."""
        result = {}
        for attr, key in self._FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                result[key] = value
        return result

    @classmethod
    def from_dict(cls, data: dict) -> PromptInput:
        """Read the API shape.

        Server-owned keys (id, createdAt, updatedAt, usageCount) are ignored.
        """
        kwargs = {}
        for attr, key in cls._FIELDS.items():
            if data.get(key) is not None:
                kwargs[attr] = data[key]
        return cls(**kwargs)


@dataclass
class SearchFilters:
    search: str = ""
    category: str = ""
    tone: str = ""
    tag: str = ""
    sort_by: str = "updatedAt"
    sort_order: str = "desc"

    @classmethod
    def from_dict(cls, data: dict) -> SearchFilters:
        return cls(
            search=data.get("search") or "",
            category=data.get("category") or "",
            tone=data.get("tone") or "",
            tag=data.get("tag") or "",
            sort_by=data.get("sortBy") or "updatedAt",
            sort_order=data.get("sortOrder") or "desc",
        )


@dataclass
class PromptStats:
    total: int = 0
    categories: dict[str, int] = field(default_factory=dict)
    tones: dict[str, int] = field(default_factory=dict)
    tags: dict[str, int] = field(default_factory=dict)
    total_usage: int = 0
    most_used: list[Prompt] = field(default_factory=list)
    recent: list[Prompt] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "categories": dict(self.categories),
            "tones": dict(self.tones),
            "tags": dict(self.tags),
            "totalUsage": self.total_usage,
            "mostUsed": [p.to_dict() for p in self.most_used],
            "recent": [p.to_dict() for p in self.recent],
        }


@dataclass
class Category:
    id: int
    name: str
    icon: str = ""
    color: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Category:
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            icon=data.get("icon", ""),
            color=data.get("color", ""),
        )


@dataclass
class ReferenceData:
    """Categories and tones offered to users. Read-only."""

    categories: list[Category] = field(default_factory=list)
    tones: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "categories": [c.to_dict() for c in self.categories],
            "tones": list(self.tones),
        }
