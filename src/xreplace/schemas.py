"""Pydantic schemas for runtime validation of replace requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from xreplace.types import SourceMode

EXTENSION_SEPARATOR = "."


class ReplaceRequestConfig(BaseModel):
    """Validated raw input for a replace run.

    Exactly one of ``source_file`` and ``source_dir`` must be set.
    """

    model_config = ConfigDict(extra="forbid")

    source_file: str | None = None
    source_dir: str | None = None
    dest_dir: str
    extension: str

    @field_validator("source_file", "source_dir", "dest_dir")
    @classmethod
    def _validate_path_text(cls, value: str | None) -> str | None:
        if value is not None and not value:
            raise ValueError("Critical argument is unfulfilled")
        return value

    @field_validator("extension")
    @classmethod
    def _validate_extension(cls, value: str) -> str:
        if not value:
            raise ValueError("Critical argument is unfulfilled")
        if not value.startswith(EXTENSION_SEPARATOR):
            raise ValueError("Extensions should start with a dot. Example: .txt")
        return value

    @model_validator(mode="after")
    def _validate_mode(self) -> ReplaceRequestConfig:
        if self.source_file is not None and self.source_dir is not None:
            raise ValueError("Cannot specify both --file and --dir")
        if self.source_file is None and self.source_dir is None:
            raise ValueError("One of --file or --dir is required")
        return self

    @property
    def mode(self) -> SourceMode:
        """Return the source mode selected by the request."""
        return "single" if self.source_file is not None else "multi"

    @property
    def source(self) -> str:
        """Return whichever source path was provided."""
        return self.source_file if self.source_file is not None else self.source_dir or ""
