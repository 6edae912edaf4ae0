import json

import pytest

from promptlib.errors import ErrorCode, PromptLibError, ValidationError
from promptlib.repository import PromptRepository
from promptlib.tools.prompts import register_tools


class FakeMCP:
    """Minimal stand-in for FastMCP to capture registered tools."""

    def __init__(self):
        self.tools = {}

    def tool(self):
        def decorator(fn):
            self.tools[fn.__name__] = fn
            return fn
        return decorator


@pytest.fixture
def env(tmp_path, clock):
    repository = PromptRepository(tmp_path / "prompts.json", clock=clock)
    mcp = FakeMCP()
    register_tools(mcp, repository, tmp_path / "categories.json")
    return mcp.tools, repository


def _create(tools, **kwargs):
    return json.loads(tools["prompt_create"](**kwargs))["prompt"]


class TestPromptCreate:
    def test_create_basic(self, env):
        tools, _ = env
        result = json.loads(tools["prompt_create"](title="Hello", content="Hello world"))
        assert result["status"] == "created"
        assert result["prompt"]["title"] == "Hello"
        assert result["prompt"]["category"] == "General"
        assert result["prompt"]["tone"] == "Neutral"
        assert result["prompt"]["tags"] == []

    def test_create_with_fields(self, env):
        tools, _ = env
        prompt = _create(
            tools,
            title="Mail",
            content="Dear Sir",
            category="Customer Service",
            tags=["email"],
            tone="Formal",
        )
        assert prompt["category"] == "Customer Service"
        assert prompt["tags"] == ["email"]

    def test_create_empty_title(self, env):
        tools, _ = env
        with pytest.raises(ValidationError):
            tools["prompt_create"](title="", content="x")


class TestPromptGet:
    def test_get_existing(self, env):
        tools, _ = env
        created = _create(tools, title="Fetch me", content="I am here")
        result = json.loads(tools["prompt_get"](prompt_id=created["id"]))
        assert result == created

    def test_get_nonexistent(self, env):
        tools, _ = env
        with pytest.raises(PromptLibError) as exc_info:
            tools["prompt_get"](prompt_id="ghost")
        assert exc_info.value.code == ErrorCode.PROMPT_NOT_FOUND


class TestPromptList:
    def test_list_seeds_examples(self, env):
        tools, _ = env
        result = json.loads(tools["prompt_list"]())
        assert len(result) == 5
        assert {"id", "title", "category", "tone", "tags", "usageCount"} <= set(result[0])


class TestPromptUpdate:
    def test_update_only_given_fields(self, env):
        tools, _ = env
        created = _create(tools, title="Old", content="Body", tags=["keep"])
        result = json.loads(tools["prompt_update"](prompt_id=created["id"], title="New"))
        assert result["prompt"]["title"] == "New"
        assert result["prompt"]["tags"] == ["keep"]
        assert result["prompt"]["createdAt"] == created["createdAt"]

    def test_update_nonexistent(self, env):
        tools, _ = env
        with pytest.raises(PromptLibError) as exc_info:
            tools["prompt_update"](prompt_id="ghost", title="x")
        assert exc_info.value.code == ErrorCode.PROMPT_NOT_FOUND


class TestPromptUse:
    def test_use_increments_count(self, env):
        tools, _ = env
        created = _create(tools, title="Counter", content="count me")
        tools["prompt_use"](prompt_id=created["id"])
        tools["prompt_use"](prompt_id=created["id"])
        result = json.loads(tools["prompt_use"](prompt_id=created["id"]))
        assert result["content"] == "count me"
        assert result["usageCount"] == 3

    def test_use_nonexistent(self, env):
        tools, _ = env
        with pytest.raises(PromptLibError) as exc_info:
            tools["prompt_use"](prompt_id="nope")
        assert exc_info.value.code == ErrorCode.PROMPT_NOT_FOUND


class TestPromptSearch:
    def test_search_by_text(self, env):
        tools, _ = env
        created = _create(tools, title="Zebra formal", content="Dear Sir")
        _create(tools, title="Goodbye", content="Farewell")
        result = json.loads(tools["prompt_search"](query="zebra"))
        assert [r["id"] for r in result] == [created["id"]]

    def test_search_by_category_sorted_by_title(self, env):
        tools, _ = env
        _create(tools, title="b", content="x", category="Ops")
        _create(tools, title="A", content="y", category="Ops")
        result = json.loads(
            tools["prompt_search"](category="Ops", sort_by="title", sort_order="asc")
        )
        assert [r["title"] for r in result] == ["A", "b"]

    def test_search_no_results(self, env):
        tools, _ = env
        assert json.loads(tools["prompt_search"](query="zzzzz")) == []


class TestPromptDelete:
    def test_delete(self, env):
        tools, _ = env
        created = _create(tools, title="Doomed", content="bye")
        result = json.loads(tools["prompt_delete"](prompt_id=created["id"]))
        assert result["status"] == "deleted"
        with pytest.raises(PromptLibError):
            tools["prompt_get"](prompt_id=created["id"])

    def test_delete_nonexistent(self, env):
        tools, _ = env
        with pytest.raises(PromptLibError) as exc_info:
            tools["prompt_delete"](prompt_id="ghost")
        assert exc_info.value.code == ErrorCode.PROMPT_NOT_FOUND


class TestPromptStats:
    def test_stats(self, env):
        tools, _ = env
        _create(tools, title="T", content="C", tags=["x"])
        result = json.loads(tools["prompt_stats"]())
        assert result["total"] == 6
        assert result["tags"]["x"] == 1
        assert sum(result["categories"].values()) == 6


class TestPromptCategories:
    def test_defaults(self, env):
        tools, _ = env
        result = json.loads(tools["prompt_categories"]())
        assert "Programming" in [c["name"] for c in result["categories"]]
        assert "Technical" in result["tones"]
