"""Frontmatter contract for SKILL.md files.

The raw YAML mapping never leaves this module untyped: ``validate_frontmatter``
either returns a ``SkillFrontmatter`` holding only the recognised keys or
raises ``SchemaError`` with one message per offending field.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import SchemaError

NAME_PATTERN = r"^[a-z0-9-]+$"
MIN_DESCRIPTION_LEN = 20

class SkillFrontmatter(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)

    name: str = Field(min_length=1, pattern=NAME_PATTERN)
    description: str = Field(min_length=MIN_DESCRIPTION_LEN)
    license: Optional[str] = None
    allowed_tools: Optional[list[str]] = Field(default=None, alias="allowed-tools")
    metadata: Optional[dict[str, str]] = None

def validate_frontmatter(raw: Mapping[str, Any]) -> SkillFrontmatter:
    try:
        return SkillFrontmatter.model_validate(dict(raw))
    except ValidationError as err:
        raise SchemaError(None, format_validation_errors(err)) from err

def format_validation_errors(err: ValidationError) -> list[str]:
    # pydantic may report several problems for one field (e.g. every bad list
    # item); keep the first per top-level key.
    by_field: dict[str, str] = {}
    for item in err.errors():
        loc = item.get("loc") or ("<root>",)
        field_name = str(loc[0])
        if field_name in by_field:
            continue
        by_field[field_name] = f"{'.'.join(str(part) for part in loc)}: {_describe(item)}"
    return list(by_field.values())

def _describe(item: Mapping[str, Any]) -> str:
    error_type = item.get("type")
    if error_type == "string_pattern_mismatch":
        return "Name must be lowercase alphanumeric with hyphens"
    if error_type == "string_too_short" and item.get("loc", ())[:1] == ("description",):
        return (
            f"Description must be at least {MIN_DESCRIPTION_LEN} characters "
            f"for discoverability (got {len(str(item.get('input', '')))})"
        )
    if error_type == "string_too_short":
        return "Name cannot be empty"
    return str(item.get("msg", "invalid value"))
