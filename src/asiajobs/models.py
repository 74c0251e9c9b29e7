"""Pydantic data models for asiajobs."""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Job Models ---

class SortOrder(str, Enum):
    DATE_DESC = "date_desc"
    DATE_ASC = "date_asc"
    TITLE_ASC = "title_asc"


_TEXT_FIELDS = (
    "title",
    "description",
    "school",
    "location",
    "city",
    "country",
    "category",
    "experience_level",
    "source",
    "original_url",
    "apply_url",
    "id",
)


class RawJob(BaseModel):
    """A job-like record as received from any upstream source.

    Every field is optional and unknown keys are tolerated. Only the
    normalizer should build these.
    """
    model_config = ConfigDict(extra="allow")

    title: str = ""
    description: str = ""
    school: str = ""
    location: str = ""
    city: str = ""
    country: str = ""
    category: str = ""
    experience_level: str = ""
    source: str = ""
    original_url: str = ""
    apply_url: str = ""
    id: str = ""
    posting_date: Any = None
    application_deadline: Any = None

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        # Nested structures carry no usable text for a single field
        if isinstance(value, (Mapping, list, tuple, set)):
            return ""
        return str(value)


class Job(BaseModel):
    """A normalized job posting."""
    identity_key: str
    title: str = ""
    description: str = ""
    school: str = ""
    location: str = ""
    city: str = ""
    country: str = ""
    category: str = ""
    experience_level: str = ""
    source: str = ""
    id: str = ""
    posting_date: datetime | None = None
    application_deadline: datetime | None = None
    original_url: str = ""
    apply_url: str = ""

    @property
    def view_url(self) -> str:
        return self.original_url or self.apply_url

    @property
    def display_location(self) -> str:
        return self.location or self.city or self.country


# --- Taxonomy Models ---

class TaxonomyGroup(BaseModel):
    """A labelled group of curated values (a region, a category family)."""
    model_config = ConfigDict(frozen=True)

    label: str
    items: tuple[str, ...]


class Taxonomy(BaseModel):
    """Curated country and category groups, in display order."""
    model_config = ConfigDict(frozen=True)

    country_groups: tuple[TaxonomyGroup, ...]
    category_groups: tuple[TaxonomyGroup, ...]

    @property
    def countries(self) -> tuple[str, ...]:
        return tuple(c for g in self.country_groups for c in g.items)

    @property
    def categories(self) -> tuple[str, ...]:
        return tuple(c for g in self.category_groups for c in g.items)


class FilterOptions(BaseModel):
    """Selectable filter values: curated groups first, then values only seen in data."""
    country_groups: tuple[TaxonomyGroup, ...]
    country_extras: list[str] = Field(default_factory=list)
    category_groups: tuple[TaxonomyGroup, ...]
    category_extras: list[str] = Field(default_factory=list)
