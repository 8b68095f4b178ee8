"""Presentation models and shared helpers for command output."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from typing import Any, Iterable, TextIO

from crego.component import (
    CATEGORY_CI,
    CATEGORY_CONFIGURATION,
    CATEGORY_DATABASE_FRAMEWORK,
    CATEGORY_DEPLOYMENT,
    CATEGORY_LAYOUT,
    CATEGORY_LOGGING,
    CATEGORY_MIGRATIONS,
    CATEGORY_NOSQL_DATABASE,
    CATEGORY_OBSERVABILITY,
    CATEGORY_ORM_FRAMEWORK,
    CATEGORY_PROJECT,
    CATEGORY_SERVER,
    CATEGORY_SQL_DATABASE,
    CATEGORY_TASK_SCHEDULER,
    ID_DATABASE_MONGODB,
    ID_DATABASE_MYSQL,
    ID_DATABASE_NONE,
    ID_DATABASE_POSTGRES,
    ID_DATABASE_REDIS,
    ID_DATABASE_SQLITE,
    Component,
    GoModule,
    Hook,
    TemplateFile,
)

# The order categories are listed in; configuration is listed twice on purpose.
COMPONENT_CATEGORY_ORDER: tuple[str, ...] = (
    CATEGORY_PROJECT,
    CATEGORY_LAYOUT,
    CATEGORY_CONFIGURATION,
    CATEGORY_SERVER,
    CATEGORY_CONFIGURATION,
    CATEGORY_SQL_DATABASE,
    CATEGORY_ORM_FRAMEWORK,
    CATEGORY_NOSQL_DATABASE,
    CATEGORY_MIGRATIONS,
    CATEGORY_TASK_SCHEDULER,
    CATEGORY_LOGGING,
    CATEGORY_OBSERVABILITY,
    CATEGORY_DEPLOYMENT,
    CATEGORY_CI,
)

_SQL_DATABASE_IDS = frozenset(
    {ID_DATABASE_NONE, ID_DATABASE_POSTGRES, ID_DATABASE_MYSQL, ID_DATABASE_SQLITE}
)
_NOSQL_DATABASE_IDS = frozenset({ID_DATABASE_REDIS, ID_DATABASE_MONGODB})

_HTML_ESCAPES = (("&", "\\u0026"), ("<", "\\u003c"), (">", "\\u003e"))


@dataclass(frozen=True)
class ComponentSummary:
    """A component as shown in listings."""

    id: str
    category: str
    name: str
    description: str


@dataclass(frozen=True)
class ComponentDetail:
    """A component with everything it contributes."""

    id: str
    category: str
    name: str
    description: str
    requires: tuple[str, ...] = ()
    conflicts: tuple[str, ...] = ()
    files: tuple[TemplateFile, ...] = ()
    go_modules: tuple[GoModule, ...] = ()
    hooks: tuple[Hook, ...] = ()


@dataclass(frozen=True)
class ComponentCategory:
    """A public category and the components listed under it."""

    category: str
    components: tuple[ComponentSummary, ...] = ()


@dataclass(frozen=True)
class ComponentsList:
    """The categories of a component listing, in display order."""

    categories: tuple[ComponentCategory, ...] = field(default_factory=tuple)


def _jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def encode_json(out: TextIO, value: Any) -> None:
    """Write value as indented JSON followed by a newline."""
    text = json.dumps(_jsonable(value), indent=2, ensure_ascii=False)
    for raw, escaped in _HTML_ESCAPES:
        text = text.replace(raw, escaped)
    out.write(text + "\n")


def public_component_category(category: str) -> str:
    """Map an internal category to the one shown to users."""
    if category == CATEGORY_DATABASE_FRAMEWORK:
        return CATEGORY_ORM_FRAMEWORK
    return category


def is_known_public_component_category(category: str) -> bool:
    """Report whether category can be used as a listing filter."""
    return category in COMPONENT_CATEGORY_ORDER


def format_public_component_categories() -> str:
    """Return the public categories as a comma separated list."""
    return ", ".join(COMPONENT_CATEGORY_ORDER)


def component_summary(component: Component) -> ComponentSummary:
    """Return the listing view of a component."""
    category = public_component_category(component.category)
    if component.id in _SQL_DATABASE_IDS:
        category = CATEGORY_SQL_DATABASE
    elif component.id in _NOSQL_DATABASE_IDS:
        category = CATEGORY_NOSQL_DATABASE
    description = component.description
    if component.id == ID_DATABASE_NONE:
        description = "Project without a sql database integration."
    return ComponentSummary(
        id=component.id,
        category=category,
        name=component.name,
        description=description,
    )


def component_detail(component: Component) -> ComponentDetail:
    """Return the detailed view of a component."""
    return ComponentDetail(
        id=component.id,
        category=component_summary(component).category,
        name=component.name,
        description=component.description,
        requires=tuple(component.requires),
        conflicts=tuple(component.conflicts),
        files=tuple(component.files),
        go_modules=tuple(component.go_modules),
        hooks=tuple(component.hooks),
    )


def write_string_list(out: TextIO, label: str, values: Iterable[str]) -> None:
    """Write a labelled, comma separated list, or 'none' when empty."""
    items = list(values)
    if not items:
        out.write(f"{label}: none\n")
        return
    out.write(f"{label}: {', '.join(items)}\n")