"""YAML-backed configuration for the book reader."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from bookmark_md.exceptions import ConfigError
from bookmark_md.ir.schema import StyleTable, TextStyle


@dataclass
class StyleConfig:
    """Base text styles per block kind, expressed relative to the body size."""

    base_font_size: float = 16.0
    title_size_offset: float = 12.0  # 28pt with the default base
    author_size_offset: float = 6.0
    chapter_size_offset: float = 4.0
    section_size_offset: float = 2.0
    title_bold: bool = True
    author_bold: bool = False
    chapter_bold: bool = True
    section_bold: bool = True
    text_color: Optional[str] = None  # six-digit hex RGB, quoted in YAML: "333333"
    font_name: Optional[str] = None
    paragraph_spacing_ratio: float = 0.75

    @property
    def paragraph_spacing(self) -> float:
        """Space after a body paragraph, in points."""
        return self.base_font_size * self.paragraph_spacing_ratio

    def to_style_table(self) -> StyleTable:
        """Build the style table handed to the parser."""
        base = self.base_font_size

        def style(offset: float, bold: bool) -> TextStyle:
            return TextStyle(size=base + offset, bold=bold, color=self.text_color)

        try:
            return StyleTable(
                title=style(self.title_size_offset, self.title_bold),
                author=style(self.author_size_offset, self.author_bold),
                chapter=style(self.chapter_size_offset, self.chapter_bold),
                section=style(self.section_size_offset, self.section_bold),
                normal=style(0.0, False),
            )
        except (TypeError, ValidationError) as exc:
            raise ConfigError(f"Invalid style configuration: {exc}") from exc


@dataclass
class LoaderConfig:
    """Book file loading settings."""

    encoding: str = "utf-8"
    extensions: list[str] = field(
        default_factory=lambda: [".md", ".markdown", ".txt", ".text"]
    )


@dataclass
class ParserConfig:
    """Parser selection."""

    engine: str = "bookmark"


@dataclass
class Config:
    """Top-level reader configuration."""

    style: StyleConfig = field(default_factory=StyleConfig)
    loader: LoaderConfig = field(default_factory=LoaderConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    verbose: bool = False

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        """Load configuration from a YAML file."""
        try:
            text = path.read_text(encoding="utf-8")
            data = yaml.safe_load(text) or {}
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {path}")
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}")

        return cls._from_dict(data)

    @classmethod
    def from_yaml_string(cls, text: str) -> Config:
        """Load configuration from a YAML string."""
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML: {exc}")
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> Config:
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping at the top level")

        sections = {}
        for name, section_cls in (("style", StyleConfig), ("loader", LoaderConfig), ("parser", ParserConfig)):
            section_data = data.get(name) or {}
            if not isinstance(section_data, dict):
                raise ConfigError(f"Config section '{name}' must be a mapping")
            sections[name] = section_cls(
                **{k: v for k, v in section_data.items() if k in section_cls.__dataclass_fields__}
            )

        config = cls(**sections, verbose=data.get("verbose", False))
        # Style values are validated here, before any book is read.
        config.style.to_style_table()
        return config

    @classmethod
    def default(cls) -> Config:
        """Return the default configuration."""
        return cls()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> Config:
        """Load config from path, or return defaults if path is None."""
        if path is None:
            return cls.default()
        return cls.from_yaml(path)
