"""Portfolio content models.

The content record is the single read-only data source consumed by both the
search engine and the virtual filesystem. Models are frozen so a loaded
record cannot be modified for the lifetime of the process.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Link(_Frozen):
    """External or internal link with a display label."""

    label: str
    href: str


class Project(_Frozen):
    """Portfolio project.

    Attributes:
        id: Unique project slug, also used as the project's directory name
        title: Display title
        description: Free-text description
        technologies: Technology tags
        links: Optional related links (repository, demo, ...)
    """

    id: str = Field(min_length=1)
    title: str
    description: str = ""
    technologies: tuple[str, ...] = ()
    links: tuple[Link, ...] = ()


class Experience(_Frozen):
    """One work experience entry."""

    company: str
    role: str
    period: str
    summary: str = ""


class BlogPost(_Frozen):
    """Blog post teaser. `url` points at the full article when published elsewhere."""

    id: str = Field(min_length=1)
    title: str
    excerpt: str = ""
    date: str = ""
    url: str | None = None


class Skills(_Frozen):
    core_stack: tuple[str, ...] = ()
    domains: tuple[str, ...] = ()
    interests: tuple[str, ...] = ()


class PortfolioContent(_Frozen):
    """Complete portfolio content record.

    Every collection defaults to empty so partially filled content files
    degrade to empty sections instead of failing.

    Invariants:
        - project ids are unique
        - blog post ids are unique
    """

    full_name: str
    education: str = ""
    summary: str = ""
    skills: Skills = Field(default_factory=Skills)
    projects: tuple[Project, ...] = ()
    experience: tuple[Experience, ...] = ()
    learning: tuple[str, ...] = ()
    contributions: tuple[str, ...] = ()
    blog: tuple[BlogPost, ...] = ()
    contact: Mapping[str, str | None] = Field(default_factory=dict, validate_default=True)
    links: tuple[Link, ...] = ()

    @field_validator("contact", mode="after")
    @classmethod
    def _freeze_contact(cls, value: Mapping[str, str | None]) -> Mapping[str, str | None]:
        return MappingProxyType(dict(value))

    @field_serializer("contact")
    def _dump_contact(self, value: Mapping[str, str | None]) -> dict[str, str | None]:
        return dict(value)

    @model_validator(mode="after")
    def _validate_unique_ids(self) -> "PortfolioContent":
        _ensure_unique("project", [project.id for project in self.projects])
        _ensure_unique("blog post", [post.id for post in self.blog])
        return self

    @property
    def first_name(self) -> str:
        parts = self.full_name.split()
        return parts[0] if parts else self.full_name

    def contact_items(self) -> Iterator[tuple[str, str]]:
        """Yield (channel, value) pairs for channels with a value."""
        for channel, value in self.contact.items():
            if value:
                yield channel, value


def _ensure_unique(label: str, ids: list[str]) -> None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise ValueError(f"Duplicate {label} id: {item_id}")
        seen.add(item_id)
