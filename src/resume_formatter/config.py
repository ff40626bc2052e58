"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from resume_formatter.models.document import TemplateId

_FORMATS = ("docx", "pdf")


@dataclass(frozen=True)
class PageGeometry:
    """Fixed page layout for PDF output, in millimetres."""

    page_width: float = 210.0
    page_height: float = 297.0
    margin_left: float = 20.0
    margin_top: float = 20.0
    content_width: float = 170.0
    name_advance: float = 8.0
    subtitle_advance: float = 10.0
    body_gap: float = 4.0
    line_height_factor: float = 1.15

    def __post_init__(self) -> None:
        for name in (
            "page_width",
            "page_height",
            "content_width",
            "name_advance",
            "subtitle_advance",
            "line_height_factor",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("margin_left", "margin_top", "body_gap"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.margin_left + self.content_width > self.page_width:
            raise ValueError(
                f"content_width {self.content_width} with margin_left {self.margin_left} "
                f"exceeds page_width {self.page_width}"
            )
        if self.margin_top * 2 >= self.page_height:
            raise ValueError(f"margin_top {self.margin_top} leaves no room on the page")


@dataclass(frozen=True)
class ExportConfig:
    default_template: str = TemplateId.MODERN.value
    output_dir: str = "./output"
    formats: tuple[str, ...] = _FORMATS

    def __post_init__(self) -> None:
        valid = {t.value for t in TemplateId}
        if self.default_template not in valid:
            raise ValueError(
                f"default_template must be one of {sorted(valid)}, got {self.default_template!r}"
            )
        # YAML gives lists
        object.__setattr__(self, "formats", tuple(self.formats))
        unknown = [f for f in self.formats if f not in _FORMATS]
        if unknown or not self.formats:
            raise ValueError(f"formats must be a non-empty subset of {_FORMATS}, got {self.formats}")

    @property
    def resolved_output_dir(self) -> Path:
        return Path(self.output_dir).expanduser()


@dataclass(frozen=True)
class AppConfig:
    export: ExportConfig = field(default_factory=ExportConfig)
    page: PageGeometry = field(default_factory=PageGeometry)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidate = Path.cwd() / "config.yaml"
        if candidate.exists():
            path = candidate

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    return AppConfig(
        export=ExportConfig(**raw.get("export", {})),
        page=PageGeometry(**raw.get("page", {})),
    )
