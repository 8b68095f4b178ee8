"""The components command: listing and showing registry components."""

from __future__ import annotations

import dataclasses
import json
from typing import Iterable, TextIO

from crego.component import (
    CATEGORY_DATABASE,
    CATEGORY_DATABASE_FRAMEWORK,
    CATEGORY_NOSQL_DATABASE,
    CATEGORY_ORM_FRAMEWORK,
    CATEGORY_SQL_DATABASE,
    ID_DATABASE_NONE,
    Component,
    UnknownComponentError,
)
from crego.output import (
    COMPONENT_CATEGORY_ORDER,
    ComponentCategory,
    ComponentDetail,
    ComponentsList,
    ComponentSummary,
    component_detail,
    component_summary,
    encode_json,
    format_public_component_categories,
    is_known_public_component_category,
    write_string_list,
)
from crego.registry import new_registry

_NOSQL_NONE_DESCRIPTION = "Project without a nosql database integration."


def _as_nosql_none(summary: ComponentSummary) -> ComponentSummary:
    return dataclasses.replace(
        summary, category=CATEGORY_NOSQL_DATABASE, description=_NOSQL_NONE_DESCRIPTION
    )


def components_list_result(
    components: Iterable[Component], category: str | None = ""
) -> ComponentsList:
    """Group components by public category, optionally keeping only one."""
    grouped: dict[str, list[ComponentSummary]] = {}
    for component in components:
        summary = component_summary(component)
        if category and summary.category != category:
            if component.id == ID_DATABASE_NONE and category == CATEGORY_NOSQL_DATABASE:
                grouped.setdefault(CATEGORY_NOSQL_DATABASE, []).append(
                    _as_nosql_none(summary)
                )
            continue
        grouped.setdefault(summary.category, []).append(summary)
        if component.id == ID_DATABASE_NONE:
            grouped.setdefault(CATEGORY_NOSQL_DATABASE, []).append(
                _as_nosql_none(summary)
            )

    return ComponentsList(
        categories=tuple(
            ComponentCategory(current, tuple(grouped.get(current, ())))
            for current in COMPONENT_CATEGORY_ORDER
            if not category or current == category
        )
    )


def component_list_display_parts(category: str, component_id: str) -> tuple[str, str]:
    """Split a component id into an optional group and a display name."""
    if category in (CATEGORY_SQL_DATABASE, CATEGORY_NOSQL_DATABASE):
        if component_id == ID_DATABASE_NONE:
            return "", "none"
        return "", component_id.removeprefix(CATEGORY_DATABASE + ".")
    if category == CATEGORY_ORM_FRAMEWORK:
        return "", component_id.removeprefix(CATEGORY_DATABASE_FRAMEWORK + ".")

    prefix = category + "."
    if not component_id.startswith(prefix):
        return "", component_id
    trimmed = component_id[len(prefix):]
    group, separator, name = trimmed.partition(".")
    if not separator:
        return "", trimmed
    return group, name


def write_components_list(out: TextIO, result: ComponentsList) -> None:
    """Write a grouped, human-readable component listing."""
    for index, category in enumerate(result.categories):
        if index:
            out.write("\n")
        out.write(f"{category.category}:\n")
        if not category.components:
            out.write("  none\n")
            continue
        current_group = ""
        for summary in category.components:
            group, name = component_list_display_parts(category.category, summary.id)
            if not group:
                current_group = ""
            elif group != current_group:
                out.write(f"  {group}:\n")
                current_group = group
            indent = "    " if group else "  "
            out.write(f"{indent}{name} - {summary.description}\n")


def _write_section(out: TextIO, label: str, lines: list[str]) -> None:
    if not lines:
        out.write(f"{label}: none\n")
        return
    out.write(f"{label}:\n")
    for line in lines:
        out.write(f"  {line}\n")


def write_component_detail(out: TextIO, detail: ComponentDetail) -> None:
    """Write the details of one component."""
    out.write(f"id: {detail.id}\n")
    out.write(f"category: {detail.category}\n")
    out.write(f"name: {detail.name}\n")
    out.write(f"description: {detail.description}\n")
    write_string_list(out, "requires", detail.requires)
    write_string_list(out, "conflicts", detail.conflicts)
    _write_section(out, "files", [f"{f.source} -> {f.target}" for f in detail.files])
    _write_section(
        out, "go_modules", [f"{m.path} {m.version}" for m in detail.go_modules]
    )
    _write_section(out, "hooks", [hook.name for hook in detail.hooks])


def run_components_list(out: TextIO, category: str | None = "", as_json: bool = False) -> None:
    """List registry components, optionally filtered by category."""
    if category and not is_known_public_component_category(category):
        raise ValueError(
            f"unknown component category {json.dumps(category, ensure_ascii=False)}; "
            f"allowed categories: {format_public_component_categories()}"
        )
    result = components_list_result(new_registry().list(), category)
    if as_json:
        encode_json(out, result)
    else:
        write_components_list(out, result)


def run_components_show(out: TextIO, component_id: str, as_json: bool = False) -> None:
    """Show one registry component; raise UnknownComponentError if absent."""
    component = new_registry().get(component_id)
    if component is None:
        raise UnknownComponentError(component_id)
    detail = component_detail(component)
    if as_json:
        encode_json(out, detail)
    else:
        write_component_detail(out, detail)