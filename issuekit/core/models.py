"""Domain models for rendering jobs and parent-path lookups."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from .errors import NotFoundError


class RenderTask(BaseModel):
    """A single template rendering job."""

    template_path: Path = Field(..., description="Template file path")
    data_path: Path | None = Field(
        default=None, description="YAML or JSON file holding the template data"
    )
    output_path: Path | None = Field(
        default=None, description="Output file path (stdout when omitted)"
    )


class ParentPaths(BaseModel):
    """Every match for ``file_name`` found between cwd and the filesystem root."""

    file_name: str = Field(..., description="File name that was searched for")
    cwd: Path = Field(..., description="Directory the search started from")
    paths: list[Path] = Field(default_factory=list, description="Matches in discovery order")
    home_match: Path | None = Field(
        default=None, description="Match found in a home directory outside the cwd hierarchy"
    )

    @property
    def closest(self) -> Path:
        """The match nearest to ``cwd``.

        Matches inside the cwd hierarchy win over the out-of-tree home
        directory match; they are discovered nearest first.
        """
        if not self.paths:
            raise NotFoundError(self.file_name)
        for path in self.paths:
            if path != self.home_match:
                return path
        return self.paths[0]
