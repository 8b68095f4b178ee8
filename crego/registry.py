"""Registry of the components crego knows about."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from crego.component import (
    CATEGORY_CI,
    CATEGORY_CONFIGURATION,
    CATEGORY_DATABASE,
    CATEGORY_DATABASE_FRAMEWORK,
    CATEGORY_DEPLOYMENT,
    CATEGORY_LAYOUT,
    CATEGORY_LOGGING,
    CATEGORY_MIGRATIONS,
    CATEGORY_OBSERVABILITY,
    CATEGORY_PROJECT,
    CATEGORY_SERVER,
    CATEGORY_TASK_SCHEDULER,
    ID_CI_AZURE_PIPELINES,
    ID_CI_GITHUB_ACTIONS,
    ID_CI_GITLAB_CI,
    ID_CONFIGURATION_ENV,
    ID_CONFIGURATION_JSON,
    ID_CONFIGURATION_TOML,
    ID_CONFIGURATION_YAML,
    ID_DATABASE_FRAMEWORK_GORM,
    ID_DATABASE_FRAMEWORK_PGX,
    ID_DATABASE_FRAMEWORK_SQL,
    ID_DATABASE_MONGODB,
    ID_DATABASE_MYSQL,
    ID_DATABASE_NONE,
    ID_DATABASE_POSTGRES,
    ID_DATABASE_REDIS,
    ID_DATABASE_SQLITE,
    ID_DEPLOYMENT_COMPOSE,
    ID_DEPLOYMENT_DOCKER,
    ID_LAYOUT_LAYERED,
    ID_LAYOUT_MINIMAL,
    ID_LOGGING_LOGRUS,
    ID_LOGGING_SLOG,
    ID_LOGGING_ZAP,
    ID_LOGGING_ZEROLOG,
    ID_MIGRATIONS_GOOSE,
    ID_MIGRATIONS_MIGRATE,
    ID_MIGRATIONS_NONE,
    ID_OBSERVABILITY_HEALTH,
    ID_OBSERVABILITY_READINESS,
    ID_PROJECT_CLI,
    ID_PROJECT_WEB,
    ID_SERVER_CHI,
    ID_SERVER_ECHO,
    ID_SERVER_FIBER,
    ID_SERVER_GIN,
    ID_SERVER_NETHTTP,
    ID_TASK_SCHEDULER_GOCRON,
    ID_TASK_SCHEDULER_NONE,
    Component,
    GoModule,
    TemplateFile,
)


class Registry:
    """An ordered collection of components addressable by id."""

    def __init__(self, components: Iterable[Component]) -> None:
        self._components = list(components)
        # A later component with the same id wins lookups.
        self._by_id = {c.id: c for c in self._components}

    def list(self) -> list[Component]:
        """Return all components in registration order."""
        return list(self._components)

    def get(self, component_id: str) -> Component | None:
        """Return the component with the given id, or None."""
        return self._by_id.get(component_id)

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._by_id

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)


def new_registry() -> Registry:
    """Return a registry holding the built-in components."""
    return Registry(default_components())


def _by_layout(minimal: str, layered: str) -> str:
    return (
        '{{ if eq .Recipe.Layout.Style "minimal" }}'
        f"{minimal}{{{{ else }}}}{layered}{{{{ end }}}}"
    )


def _without(values: Sequence[str], excluded: str) -> tuple[str, ...]:
    return tuple(v for v in values if v != excluded)


def _server(
    component_id: str,
    name: str,
    description: str,
    conflicts: Sequence[str],
    modules: Sequence[GoModule] = (),
) -> Component:
    return Component(
        id=component_id,
        category=CATEGORY_SERVER,
        name=name,
        description=description,
        requires=(ID_PROJECT_WEB,),
        conflicts=conflicts,
        go_modules=modules,
    )


def _configuration(
    component_id: str,
    name: str,
    description: str,
    conflicts: Sequence[str],
    files: Sequence[TemplateFile] = (),
    modules: Sequence[GoModule] = (),
) -> Component:
    return Component(
        id=component_id,
        category=CATEGORY_CONFIGURATION,
        name=name,
        description=description,
        conflicts=conflicts,
        files=files,
        go_modules=modules,
    )


def _database(
    component_id: str,
    name: str,
    description: str,
    conflicts: Sequence[str],
    files: Sequence[TemplateFile] = (),
) -> Component:
    return Component(
        id=component_id,
        category=CATEGORY_DATABASE,
        name=name,
        description=description,
        conflicts=conflicts,
        files=files,
    )


def _database_file(engine: str) -> TemplateFile:
    return TemplateFile(
        f"web/{engine}.go.tmpl",
        _by_layout(f"internal/app/{engine}.go", f"internal/database/{engine}.go"),
    )


def default_components() -> list[Component]:
    """Return the built-in components in their canonical order."""
    servers = (ID_SERVER_NETHTTP, ID_SERVER_CHI, ID_SERVER_GIN, ID_SERVER_ECHO, ID_SERVER_FIBER)
    configurations = (
        ID_CONFIGURATION_ENV,
        ID_CONFIGURATION_YAML,
        ID_CONFIGURATION_JSON,
        ID_CONFIGURATION_TOML,
    )
    databases = (
        ID_DATABASE_NONE,
        ID_DATABASE_POSTGRES,
        ID_DATABASE_MYSQL,
        ID_DATABASE_SQLITE,
        ID_DATABASE_REDIS,
        ID_DATABASE_MONGODB,
    )
    loggers = (ID_LOGGING_SLOG, ID_LOGGING_ZAP, ID_LOGGING_ZEROLOG, ID_LOGGING_LOGRUS)
    migrations_file = TemplateFile(
        "web/migrations.go.tmpl",
        _by_layout("internal/app/migrations.go", "internal/database/migrations.go"),
    )

    return [
        Component(
            id=ID_PROJECT_WEB,
            category=CATEGORY_PROJECT,
            name="Web project",
            description="HTTP service project scaffold.",
            files=(
                TemplateFile("web/go.mod.tmpl", "go.mod"),
                TemplateFile("web/README.md.tmpl", "README.md"),
                TemplateFile("project/gitignore.tmpl", ".gitignore"),
                TemplateFile("web/Makefile.tmpl", "Makefile"),
                TemplateFile("web/main.go.tmpl", "cmd/{{ .ProjectName }}/main.go"),
                TemplateFile("web/app.go.tmpl", "internal/app/app.go"),
                TemplateFile(
                    "web/config.go.tmpl",
                    _by_layout("internal/app/config.go", "internal/config/config.go"),
                ),
                TemplateFile(
                    "web/logger.go.tmpl",
                    _by_layout("internal/app/logger.go", "internal/logging/logger.go"),
                ),
                TemplateFile(
                    "web/server.go.tmpl",
                    _by_layout("internal/app/server.go", "internal/server/server.go"),
                ),
                TemplateFile(
                    "web/routes.go.tmpl",
                    _by_layout("internal/app/routes.go", "internal/server/routes.go"),
                ),
                TemplateFile(
                    "web/readiness.go.tmpl",
                    _by_layout(
                        "internal/app/readiness.go",
                        "internal/server/handler/readiness.go",
                    ),
                ),
                TemplateFile(
                    "web/request_id.go.tmpl",
                    _by_layout(
                        "internal/app/request_id.go",
                        "internal/server/middleware/request_id.go",
                    ),
                ),
                TemplateFile(
                    "web/logging_middleware.go.tmpl",
                    _by_layout(
                        "internal/app/logging.go",
                        "internal/server/middleware/logging.go",
                    ),
                ),
                TemplateFile(
                    "web/recover.go.tmpl",
                    _by_layout(
                        "internal/app/recover.go",
                        "internal/server/middleware/recover.go",
                    ),
                ),
            ),
        ),
        Component(
            id=ID_PROJECT_CLI,
            category=CATEGORY_PROJECT,
            name="CLI project",
            description="Command-line application project scaffold.",
            files=(
                TemplateFile("project/README.md.tmpl", "README.md"),
                TemplateFile("project/gitignore.tmpl", ".gitignore"),
            ),
        ),
        Component(
            id=ID_LAYOUT_MINIMAL,
            category=CATEGORY_LAYOUT,
            name="Minimal layout",
            description="Small project layout with minimal package structure.",
        ),
        Component(
            id=ID_LAYOUT_LAYERED,
            category=CATEGORY_LAYOUT,
            name="Layered layout",
            description="Layered project layout for separated application concerns.",
        ),
        _server(
            ID_SERVER_NETHTTP,
            "net/http server",
            "HTTP server built with the Go standard library.",
            _without(servers, ID_SERVER_NETHTTP),
        ),
        _server(
            ID_SERVER_CHI,
            "Chi server",
            "HTTP server built with chi.",
            _without(servers, ID_SERVER_CHI),
            (GoModule("github.com/go-chi/chi/v5", "v5.2.5"),),
        ),
        _server(
            ID_SERVER_GIN,
            "Gin server",
            "HTTP server built with Gin.",
            _without(servers, ID_SERVER_GIN),
            (GoModule("github.com/gin-gonic/gin", "v1.12.0"),),
        ),
        _server(
            ID_SERVER_ECHO,
            "Echo server",
            "HTTP server built with Echo.",
            _without(servers, ID_SERVER_ECHO),
            (GoModule("github.com/labstack/echo/v4", "v4.15.1"),),
        ),
        _server(
            ID_SERVER_FIBER,
            "Fiber server",
            "HTTP server built with Fiber.",
            _without(servers, ID_SERVER_FIBER),
            (GoModule("github.com/gofiber/fiber/v2", "v2.52.12"),),
        ),
        _configuration(
            ID_CONFIGURATION_ENV,
            "Environment configuration",
            "Configuration loaded from environment variables.",
            _without(configurations, ID_CONFIGURATION_ENV),
        ),
        _configuration(
            ID_CONFIGURATION_YAML,
            "YAML configuration",
            "Configuration loaded from YAML files.",
            _without(configurations, ID_CONFIGURATION_YAML),
            (TemplateFile("web/config.yaml.tmpl", "configs/config.yaml"),),
            (GoModule("gopkg.in/yaml.v3", "v3.0.1"),),
        ),
        _configuration(
            ID_CONFIGURATION_JSON,
            "JSON configuration",
            "Configuration loaded from JSON files.",
            _without(configurations, ID_CONFIGURATION_JSON),
            (TemplateFile("web/config.json.tmpl", "configs/config.json"),),
        ),
        _configuration(
            ID_CONFIGURATION_TOML,
            "TOML configuration",
            "Configuration loaded from TOML files.",
            _without(configurations, ID_CONFIGURATION_TOML),
            (TemplateFile("web/config.toml.tmpl", "configs/config.toml"),),
            (GoModule("github.com/pelletier/go-toml/v2", "v2.3.0"),),
        ),
        _database(
            ID_DATABASE_NONE,
            "No database",
            "Project without a database integration.",
            _without(databases, ID_DATABASE_NONE),
        ),
        _database(
            ID_DATABASE_POSTGRES,
            "Postgres database",
            "PostgreSQL database integration.",
            (ID_DATABASE_NONE,),
            (_database_file("postgres"),),
        ),
        _database(
            ID_DATABASE_MYSQL,
            "MySQL database",
            "MySQL database integration.",
            (ID_DATABASE_NONE,),
            (_database_file("mysql"),),
        ),
        _database(
            ID_DATABASE_SQLITE,
            "SQLite database",
            "SQLite database integration.",
            (ID_DATABASE_NONE,),
            (_database_file("sqlite"),),
        ),
        _database(
            ID_DATABASE_REDIS,
            "Redis database",
            "Redis database integration.",
            (ID_DATABASE_NONE,),
            (_database_file("redis"),),
        ),
        _database(
            ID_DATABASE_MONGODB,
            "MongoDB database",
            "MongoDB database integration.",
            (ID_DATABASE_NONE,),
            (_database_file("mongodb"),),
        ),
        Component(
            id=ID_DATABASE_FRAMEWORK_PGX,
            category=CATEGORY_DATABASE_FRAMEWORK,
            name="pgx",
            description="PostgreSQL access through pgx.",
            requires=(ID_DATABASE_POSTGRES,),
        ),
        Component(
            id=ID_DATABASE_FRAMEWORK_SQL,
            category=CATEGORY_DATABASE_FRAMEWORK,
            name="database/sql",
            description="Database access through the Go database/sql package.",
        ),
        Component(
            id=ID_DATABASE_FRAMEWORK_GORM,
            category=CATEGORY_DATABASE_FRAMEWORK,
            name="GORM",
            description="Database access through GORM.",
        ),
        Component(
            id=ID_MIGRATIONS_NONE,
            category=CATEGORY_MIGRATIONS,
            name="No migrations",
            description="Project without a database migration tool.",
            conflicts=(ID_MIGRATIONS_GOOSE, ID_MIGRATIONS_MIGRATE),
        ),
        Component(
            id=ID_MIGRATIONS_GOOSE,
            category=CATEGORY_MIGRATIONS,
            name="Goose migrations",
            description="Database migrations through goose.",
            conflicts=(ID_MIGRATIONS_NONE, ID_MIGRATIONS_MIGRATE),
            files=(
                migrations_file,
                TemplateFile(
                    "web/migration_goose.sql.tmpl",
                    "scripts/migrations/000001_init.sql",
                ),
            ),
        ),
        Component(
            id=ID_MIGRATIONS_MIGRATE,
            category=CATEGORY_MIGRATIONS,
            name="migrate migrations",
            description="Database migrations through the migrate tool.",
            conflicts=(ID_MIGRATIONS_NONE, ID_MIGRATIONS_GOOSE),
            files=(
                migrations_file,
                TemplateFile(
                    "web/migration_migrate_up.sql.tmpl",
                    "scripts/migrations/000001_init.up.sql",
                ),
                TemplateFile(
                    "web/migration_migrate_down.sql.tmpl",
                    "scripts/migrations/000001_init.down.sql",
                ),
            ),
        ),
        Component(
            id=ID_TASK_SCHEDULER_NONE,
            category=CATEGORY_TASK_SCHEDULER,
            name="No task scheduler",
            description="Project without a scheduled task executor.",
            conflicts=(ID_TASK_SCHEDULER_GOCRON,),
        ),
        Component(
            id=ID_TASK_SCHEDULER_GOCRON,
            category=CATEGORY_TASK_SCHEDULER,
            name="gocron task scheduler",
            description="Scheduled task executor backed by gocron.",
            requires=(ID_PROJECT_WEB,),
            conflicts=(ID_TASK_SCHEDULER_NONE,),
            files=(
                TemplateFile("web/scheduler.go.tmpl", "internal/scheduler/scheduler.go"),
                TemplateFile(
                    "web/example_cleanup.go.tmpl",
                    "internal/scheduler/tasks/example_cleanup.go",
                ),
            ),
            go_modules=(GoModule("github.com/go-co-op/gocron/v2", "v2.21.0"),),
        ),
        Component(
            id=ID_LOGGING_SLOG,
            category=CATEGORY_LOGGING,
            name="slog logging",
            description="Structured logging through the Go standard library slog package.",
            conflicts=_without(loggers, ID_LOGGING_SLOG),
        ),
        Component(
            id=ID_LOGGING_ZAP,
            category=CATEGORY_LOGGING,
            name="zap logging",
            description="Structured logging through zap.",
            conflicts=_without(loggers, ID_LOGGING_ZAP),
            go_modules=(GoModule("go.uber.org/zap", "v1.27.1"),),
        ),
        Component(
            id=ID_LOGGING_ZEROLOG,
            category=CATEGORY_LOGGING,
            name="zerolog logging",
            description="Structured logging through zerolog.",
            conflicts=_without(loggers, ID_LOGGING_ZEROLOG),
            go_modules=(GoModule("github.com/rs/zerolog", "v1.35.0"),),
        ),
        Component(
            id=ID_LOGGING_LOGRUS,
            category=CATEGORY_LOGGING,
            name="logrus logging",
            description="Structured logging through logrus.",
            conflicts=_without(loggers, ID_LOGGING_LOGRUS),
            go_modules=(GoModule("github.com/sirupsen/logrus", "v1.9.4"),),
        ),
        Component(
            id=ID_OBSERVABILITY_HEALTH,
            category=CATEGORY_OBSERVABILITY,
            name="Health endpoint",
            description="Basic health endpoint.",
            files=(
                TemplateFile(
                    "web/health.go.tmpl",
                    _by_layout(
                        "internal/app/health.go",
                        "internal/server/handler/health.go",
                    ),
                ),
            ),
        ),
        Component(
            id=ID_OBSERVABILITY_READINESS,
            category=CATEGORY_OBSERVABILITY,
            name="Readiness endpoint",
            description="Readiness endpoint for dependency checks.",
            files=(
                TemplateFile(
                    "web/ready.go.tmpl",
                    _by_layout(
                        "internal/app/ready.go",
                        "internal/server/handler/ready.go",
                    ),
                ),
            ),
        ),
        Component(
            id=ID_DEPLOYMENT_DOCKER,
            category=CATEGORY_DEPLOYMENT,
            name="Docker",
            description="Dockerfile for containerized builds.",
            files=(
                TemplateFile("web/Dockerfile.tmpl", "deployments/Dockerfile"),
                TemplateFile("web/dockerignore.tmpl", "deployments/.dockerignore"),
            ),
        ),
        Component(
            id=ID_DEPLOYMENT_COMPOSE,
            category=CATEGORY_DEPLOYMENT,
            name="Docker Compose",
            description="Docker Compose app service.",
            requires=(ID_DEPLOYMENT_DOCKER,),
            files=(
                TemplateFile(
                    "web/docker-compose.yml.tmpl",
                    "deployments/docker-compose.yml",
                ),
            ),
        ),
        Component(
            id=ID_CI_GITHUB_ACTIONS,
            category=CATEGORY_CI,
            name="GitHub Actions",
            description="GitHub Actions workflow.",
            files=(
                TemplateFile(
                    "web/github-actions-test.yml.tmpl",
                    ".github/workflows/test.yml",
                ),
            ),
        ),
        Component(
            id=ID_CI_GITLAB_CI,
            category=CATEGORY_CI,
            name="GitLab CI",
            description="GitLab CI pipeline.",
            files=(TemplateFile("web/gitlab-ci.yml.tmpl", ".gitlab-ci.yml"),),
        ),
        Component(
            id=ID_CI_AZURE_PIPELINES,
            category=CATEGORY_CI,
            name="Azure Pipelines",
            description="Azure Pipelines workflow.",
            files=(
                TemplateFile("web/azure-pipelines.yml.tmpl", "azure-pipelines.yml"),
            ),
        ),
    ]