import json
from pathlib import Path

from ..config import CATEGORIES_FILENAME, load_reference_data
from ..errors import PromptLibError
from ..models import PromptInput, SearchFilters
from ..repository import PromptRepository


def _summary(prompt) -> dict:
    return {
        "id": prompt.id,
        "title": prompt.title,
        "category": prompt.category,
        "tone": prompt.tone,
        "tags": prompt.tags,
        "usageCount": prompt.usage_count,
        "updatedAt": prompt.updated_at,
    }


def register_tools(
    mcp,
    repository: PromptRepository,
    categories_file: Path | None = None,
) -> None:
    @mcp.tool()
    def prompt_list() -> str:
        """List every prompt in the library."""
        return json.dumps([_summary(p) for p in repository.get_all()])

    @mcp.tool()
    def prompt_get(prompt_id: str) -> str:
        """Get a prompt by id, including its full content."""
        prompt = repository.get_by_id(prompt_id)
        if prompt is None:
            raise PromptLibError.prompt_not_found(prompt_id)
        return json.dumps(prompt.to_dict())

    @mcp.tool()
    def prompt_create(
        title: str,
        content: str,
        description: str = "",
        category: str = "",
        tags: list[str] | None = None,
        tone: str = "",
    ) -> str:
        """Save a new prompt. Category and tone fall back to the library defaults."""
        prompt = repository.create(
            PromptInput(
                title=title,
                content=content,
                description=description,
                category=category,
                tags=tags or [],
                tone=tone,
            )
        )
        return json.dumps({"status": "created", "prompt": prompt.to_dict()})

    @mcp.tool()
    def prompt_update(
        prompt_id: str,
        title: str | None = None,
        content: str | None = None,
        description: str | None = None,
        category: str | None = None,
        tags: list[str] | None = None,
        tone: str | None = None,
    ) -> str:
        """Change the given fields of a prompt. Omitted fields keep their values."""
        prompt = repository.update(
            prompt_id,
            PromptInput(
                title=title,
                content=content,
                description=description,
                category=category,
                tags=tags,
                tone=tone,
            ),
        )
        if prompt is None:
            raise PromptLibError.prompt_not_found(prompt_id)
        return json.dumps({"status": "updated", "prompt": prompt.to_dict()})

    @mcp.tool()
    def prompt_delete(prompt_id: str) -> str:
        """Delete a prompt by id."""
        if not repository.delete(prompt_id):
            raise PromptLibError.prompt_not_found(prompt_id)
        return json.dumps({"status": "deleted", "id": prompt_id})

    @mcp.tool()
    def prompt_use(prompt_id: str) -> str:
        """Return a prompt's content and count one more use of it."""
        prompt = repository.increment_usage(prompt_id)
        if prompt is None:
            raise PromptLibError.prompt_not_found(prompt_id)
        result = {
            "id": prompt.id,
            "title": prompt.title,
            "content": prompt.content,
            "usageCount": prompt.usage_count,
        }
        return json.dumps(result)

    @mcp.tool()
    def prompt_search(
        query: str = "",
        category: str = "",
        tone: str = "",
        tag: str = "",
        sort_by: str = "updatedAt",
        sort_order: str = "desc",
    ) -> str:
        """Search prompts by text, category, tone or tag.

        sort_by is one of title, createdAt, updatedAt, usageCount;
        sort_order is asc or desc.
        """
        filters = SearchFilters(
            search=query,
            category=category,
            tone=tone,
            tag=tag,
            sort_by=sort_by,
            sort_order=sort_order,
        )
        return json.dumps([_summary(p) for p in repository.search(filters)])

    @mcp.tool()
    def prompt_stats() -> str:
        """Counts per category, tone and tag, total usage, most used and recent prompts."""
        return json.dumps(repository.get_stats().to_dict())

    @mcp.tool()
    def prompt_categories() -> str:
        """List the available categories and tones."""
        path = categories_file or repository.path.with_name(CATEGORIES_FILENAME)
        return json.dumps(load_reference_data(path).to_dict())
