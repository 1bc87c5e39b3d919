"""Render settings loaded from YAML."""

from __future__ import annotations

import html
from pathlib import Path
from typing import Callable

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .pool import BufferPool


class RenderSettings(BaseModel):
    """Tuning knobs for node construction and page output."""

    initial_capacity: int = Field(
        6,
        ge=1,
        alias="initialCapacity",
        description="Starting scratch capacity for attributes/children per element.",
    )
    max_retained: int = Field(
        32,
        ge=0,
        alias="maxRetained",
        description="Storage arrays kept per pool bucket for reuse.",
    )
    escape_quotes: bool = Field(
        True,
        alias="escapeQuotes",
        description="Escape quote characters in text content. Attribute values always escape them.",
    )
    doctype: bool = Field(
        True, description="Prefix rendered page documents with <!doctype html>."
    )
    lang: str = Field("en", description="Default lang attribute for page documents.")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def encoder(self) -> Callable[[str], str]:
        quote = self.escape_quotes

        def encode(value: str) -> str:
            return html.escape(value, quote=quote)

        return encode

    def make_pool(self) -> BufferPool:
        return BufferPool(
            initial_capacity=self.initial_capacity, max_retained=self.max_retained
        )


def load_settings(path: Path) -> RenderSettings:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return RenderSettings.model_validate(data)


__all__ = ["RenderSettings", "load_settings"]
