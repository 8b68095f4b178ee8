# crego

crego describes the building blocks of a Go project: the project type,
layout, HTTP server, configuration format, databases, database frameworks,
migrations, task scheduler, logging, observability endpoints, deployment
files and CI pipelines. Each building block is a *component* with its
requirements, conflicts, template files and Go module dependencies. The
package holds the built-in component registry and a command line to browse
it.

## Installation

```
pip install .
```

## Command line

List every component, grouped by category in a fixed order:

```
crego components list
```

Show one category only:

```
crego components list --category server
crego components list --category sql_database
crego components list --category nosql_database
```

The category order is `project`, `layout`, `configuration`, `server`,
`configuration`, `sql_database`, `orm_framework`, `nosql_database`,
`migrations`, `task_scheduler`, `logging`, `observability`, `deployment`,
`ci` (configuration appears twice in the full listing). Database framework
components are shown under `orm_framework`; `database.none` is shown under
both `sql_database` and `nosql_database`. An unknown category is rejected
with an error naming the allowed ones.

Show the details of a single component — category, name, description,
requirements, conflicts, template files, Go modules and hooks:

```
crego components show server.chi
crego components show database.postgres
crego components show database.framework.gorm --json
```

Both `list` and `show` accept `--json` for indented JSON output.

Print build information:

```
crego version
```

`crego --version` prints a one-line version. The options `--no-color`,
`--verbose`, `--debug` and `--config` are accepted but change nothing in the
commands above.

The exit status is 0 on success and 1 on error; errors are printed to
standard error. Running `crego components` without `list` or `show` prints
its help and fails.

## Library use

```python
from crego.registry import new_registry

registry = new_registry()
for component in registry.list():
    print(component.id, component.description)

gin = registry.get("server.gin")
print(gin.requires)  # ('project.web',)
print("server.chi" in registry, len(registry))
```

`Registry.get` returns `None` for an unknown identifier. Components and
their parts (`Component`, `TemplateFile`, `GoModule`, `Hook`) are frozen
dataclasses in `crego.component`, together with the component errors
(`UnknownComponentError`, `ConflictError`, `MissingDependencyError`,
`MissingRequirementError`, `DependencyCycleError`), which share the base
class `ComponentError`.

`crego.output` turns components into listing and detail views
(`component_summary`, `component_detail`) and writes JSON with
`encode_json`; `crego.components_cmd` holds the `list` and `show`
operations; `crego.cli.run` runs the command line with chosen arguments and
output streams and returns the exit code.

## What it does not do

This package does not generate projects. It has no recipes, no interactive
wizard, no template rendering, and no commands to create, configure,
generate or explain a project. The template file paths in each component
are data to inspect; nothing here renders or writes them.

## Running the tests

```
pip install ".[test]"
pytest
```