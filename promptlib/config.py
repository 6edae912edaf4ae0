"""Runtime settings and built-in reference data."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import PromptLibError
from .models import Category, ReferenceData
from .store import JsonFileStore

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path.home() / ".config" / "promptlib"
PROMPTS_FILENAME = "prompts.json"
CATEGORIES_FILENAME = "categories.json"

DEFAULT_CATEGORIES = [
    Category(id=1, name="Studies", icon="📚", color="#3498db"),
    Category(id=2, name="Marketing", icon="📈", color="#e74c3c"),
    Category(id=3, name="Programming", icon="💻", color="#2ecc71"),
    Category(id=4, name="Customer Service", icon="🎧", color="#f39c12"),
    Category(id=5, name="Creativity", icon="🎨", color="#9b59b6"),
]

AVAILABLE_TONES = [
    "Formal",
    "Creative",
    "Instructive",
    "Persuasive",
    "Casual",
    "Technical",
]


@dataclass
class Settings:
    data_dir: Path
    prompts_file: Path
    categories_file: Path

    @classmethod
    def from_env(cls, data_dir: Path | None = None) -> Settings:
        """Resolve settings from PROMPTLIB_* environment variables.

        An explicit data_dir wins over PROMPTLIB_DATA_DIR. File paths default
        to fixed names inside the data directory.
        """
        if data_dir is None:
            env_dir = os.environ.get("PROMPTLIB_DATA_DIR")
            data_dir = Path(env_dir).expanduser() if env_dir else DEFAULT_DATA_DIR

        prompts_file = os.environ.get("PROMPTLIB_PROMPTS_FILE")
        categories_file = os.environ.get("PROMPTLIB_CATEGORIES_FILE")

        return cls(
            data_dir=data_dir,
            prompts_file=(
                Path(prompts_file).expanduser()
                if prompts_file
                else data_dir / PROMPTS_FILENAME
            ),
            categories_file=(
                Path(categories_file).expanduser()
                if categories_file
                else data_dir / CATEGORIES_FILENAME
            ),
        )

    def directories(self) -> list[Path]:
        dirs = [self.data_dir, self.prompts_file.parent, self.categories_file.parent]
        return list(dict.fromkeys(dirs))


def create_directories(directories: list[Path]) -> list[Path]:
    """Create each directory if missing. Run once at startup.

    A failure on one directory is logged and the rest are still attempted.

    Returns:
        The directories that exist afterwards.
    """
    created = []
    for directory in directories:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Could not create directory %s: %s", directory, e)
            continue
        logger.debug("Directory ready: %s", directory)
        created.append(directory)
    return created


def load_reference_data(path: Path) -> ReferenceData:
    """Read categories and tones from the categories document.

    Built-in defaults are used when the file is missing or leaves a section out.
    """
    path = Path(path)
    data: dict = {}
    if JsonFileStore().exists(path):
        try:
            data = json.loads(path.read_text(encoding="utf-8")) or {}
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise PromptLibError.storage_read(path, str(e)) from e
        if not isinstance(data, dict):
            raise PromptLibError.storage_read(path, "expected a JSON object")

    raw_categories = data.get("categories") or []
    if not isinstance(raw_categories, list) or not all(
        isinstance(c, dict) for c in raw_categories
    ):
        raise PromptLibError.storage_read(path, "categories must be a list of objects")

    raw_tones = data.get("tones") or []
    if not isinstance(raw_tones, list) or not all(isinstance(t, str) for t in raw_tones):
        raise PromptLibError.storage_read(path, "tones must be a list of strings")

    categories = [Category.from_dict(c) for c in raw_categories]
    return ReferenceData(
        categories=categories or list(DEFAULT_CATEGORIES),
        tones=raw_tones or list(AVAILABLE_TONES),
    )
