"""
Module: builder.config

Purpose:
    Configuration dataclass for variant generation. Immutable
    configuration with validation on construction.

Key Classes:
    - BuilderConfig: Main configuration for building exam variants

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: Main build controller
    - cli: generate command
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

MIN_VERSIONS = 1
MAX_VERSIONS = 50
OUTPUT_FORMATS = ("docx", "pdf")

ARCHIVE_NAME = "Shuffled_Exams.zip"
ANSWER_KEY_NAME = "Answer_Key.csv"


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building exam variants (immutable).

    Attributes:
        version_count: Number of shuffled variants to generate (1..50)
        output_path: Archive path (".zip" appended if missing)
        output_format: Variant document format, "docx" or "pdf"
        seed: Random seed for reproducible shuffles (None = unseeded)
        title_template: Variant title, formatted with the 1-based version number

    Example:
        >>> config = BuilderConfig(version_count=5, seed=42)
        >>> config.member_name(3)
        'Test_Version_003.docx'
    """

    version_count: int = 3
    output_path: Path = Path(ARCHIVE_NAME)
    output_format: str = "docx"
    seed: Optional[int] = None
    title_template: str = "Exam Version {version}"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not MIN_VERSIONS <= self.version_count <= MAX_VERSIONS:
            raise ValueError(
                f"version_count must be between {MIN_VERSIONS} and {MAX_VERSIONS}: "
                f"{self.version_count}"
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}: {self.output_format!r}"
            )
        if "{version}" not in self.title_template:
            raise ValueError(
                f"title_template must contain '{{version}}': {self.title_template!r}"
            )
        # Normalise str paths passed by callers
        object.__setattr__(self, "output_path", Path(self.output_path))

    def member_name(self, version: int) -> str:
        """Archive member name for a 1-based version number."""
        return f"Test_Version_{version:03d}.{self.output_format}"

    def title_for(self, version: int) -> str:
        return self.title_template.format(version=version)
