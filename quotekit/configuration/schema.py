"""Pydantic models describing the configuration file."""

from __future__ import annotations

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quotekit.ui import ConsoleColor

LayoutName = Literal["root", "read", "quotes"]


class MetaConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: str = "1.0"


class CLIConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    layout: LayoutName = "quotes"
    default_file: str = Field(default="sampleQuotes.txt", min_length=1)
    delay: int = Field(default=42, ge=0)
    foreground: str = "White"
    debug: bool = False

    @field_validator("foreground")
    @classmethod
    def _known_color(cls, value: str) -> str:
        for member in ConsoleColor:
            if member.name.lower() == value.lower():
                return member.name
        choices = ", ".join(member.name for member in ConsoleColor)
        raise ValueError(f"unknown console color {value!r}; expected one of {choices}")

    @property
    def foreground_color(self) -> ConsoleColor:
        return ConsoleColor[self.foreground]


class QuotekitConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    meta: MetaConfig = Field(default_factory=MetaConfig)
    cli: CLIConfig = Field(default_factory=CLIConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuotekitConfig":
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
