from enum import Enum
from pathlib import Path


class ErrorCode(Enum):
    VALIDATION = "validation"
    PROMPT_NOT_FOUND = "prompt_not_found"
    STORAGE_READ = "storage_read"
    STORAGE_WRITE = "storage_write"


class PromptLibError(Exception):
    def __init__(self, code: ErrorCode, message: str):
        self.code = code
        self.message = message
        super().__init__(message)

    @classmethod
    def validation(cls, detail: str) -> "ValidationError":
        return ValidationError(ErrorCode.VALIDATION, f"Invalid prompt: {detail}")

    @classmethod
    def prompt_not_found(cls, prompt_id: str) -> "PromptLibError":
        return cls(ErrorCode.PROMPT_NOT_FOUND, f"Prompt not found: {prompt_id}")

    @classmethod
    def storage_read(cls, path: Path, detail: str) -> "StorageError":
        return StorageError(
            ErrorCode.STORAGE_READ, f"Failed to read {path}: {detail}", path
        )

    @classmethod
    def storage_write(cls, path: Path, detail: str) -> "StorageError":
        return StorageError(
            ErrorCode.STORAGE_WRITE, f"Failed to write {path}: {detail}", path
        )


class ValidationError(PromptLibError):
    """Rejected input to create()."""


class StorageError(PromptLibError):
    """Read or write failure of the prompts document."""

    def __init__(self, code: ErrorCode, message: str, path: Path | None = None):
        super().__init__(code, message)
        self.path = path
