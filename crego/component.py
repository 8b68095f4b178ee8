"""Component model: identifiers, categories, data types and errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

CATEGORY_PROJECT = "project"
CATEGORY_LAYOUT = "layout"
CATEGORY_SERVER = "server"
CATEGORY_CONFIGURATION = "configuration"
CATEGORY_DATABASE = "database"
CATEGORY_DATABASE_FRAMEWORK = "database.framework"
CATEGORY_SQL_DATABASE = "sql_database"
CATEGORY_ORM_FRAMEWORK = "orm_framework"
CATEGORY_NOSQL_DATABASE = "nosql_database"
CATEGORY_MIGRATIONS = "migrations"
CATEGORY_TASK_SCHEDULER = "task_scheduler"
CATEGORY_LOGGING = "logging"
CATEGORY_OBSERVABILITY = "observability"
CATEGORY_DEPLOYMENT = "deployment"
CATEGORY_CI = "ci"

ID_PROJECT_WEB = "project.web"
ID_PROJECT_CLI = "project.cli"

ID_LAYOUT_MINIMAL = "layout.minimal"
ID_LAYOUT_LAYERED = "layout.layered"

ID_SERVER_NETHTTP = "server.nethttp"
ID_SERVER_CHI = "server.chi"
ID_SERVER_GIN = "server.gin"
ID_SERVER_ECHO = "server.echo"
ID_SERVER_FIBER = "server.fiber"

ID_CONFIGURATION_ENV = "configuration.env"
ID_CONFIGURATION_YAML = "configuration.yaml"
ID_CONFIGURATION_JSON = "configuration.json"
ID_CONFIGURATION_TOML = "configuration.toml"

ID_DATABASE_NONE = "database.none"
ID_DATABASE_POSTGRES = "database.postgres"
ID_DATABASE_MYSQL = "database.mysql"
ID_DATABASE_SQLITE = "database.sqlite"
ID_DATABASE_REDIS = "database.redis"
ID_DATABASE_MONGODB = "database.mongodb"

ID_DATABASE_FRAMEWORK_PGX = "database.framework.pgx"
ID_DATABASE_FRAMEWORK_SQL = "database.framework.sql"
ID_DATABASE_FRAMEWORK_GORM = "database.framework.gorm"

ID_MIGRATIONS_NONE = "migrations.none"
ID_MIGRATIONS_GOOSE = "migrations.goose"
ID_MIGRATIONS_MIGRATE = "migrations.migrate"

ID_TASK_SCHEDULER_NONE = "task_scheduler.none"
ID_TASK_SCHEDULER_GOCRON = "task_scheduler.gocron"

ID_LOGGING_SLOG = "logging.slog"
ID_LOGGING_ZAP = "logging.zap"
ID_LOGGING_ZEROLOG = "logging.zerolog"
ID_LOGGING_LOGRUS = "logging.logrus"

ID_OBSERVABILITY_HEALTH = "observability.health"
ID_OBSERVABILITY_READINESS = "observability.readiness"

ID_DEPLOYMENT_DOCKER = "deployment.docker"
ID_DEPLOYMENT_COMPOSE = "deployment.compose"

ID_CI_GITHUB_ACTIONS = "ci.github_actions"
ID_CI_GITLAB_CI = "ci.gitlab_ci"
ID_CI_AZURE_PIPELINES = "ci.azure_pipelines"


@dataclass(frozen=True)
class TemplateFile:
    """A template source and the path it renders to."""

    source: str
    target: str


@dataclass(frozen=True)
class GoModule:
    """A Go module dependency that a component adds."""

    path: str
    version: str = ""


@dataclass(frozen=True)
class Hook:
    """A named post-generation hook."""

    name: str


@dataclass(frozen=True)
class Component:
    """A selectable project capability and what it contributes."""

    id: str
    category: str
    name: str
    description: str
    requires: tuple[str, ...] = field(default_factory=tuple)
    conflicts: tuple[str, ...] = field(default_factory=tuple)
    files: tuple[TemplateFile, ...] = field(default_factory=tuple)
    go_modules: tuple[GoModule, ...] = field(default_factory=tuple)
    hooks: tuple[Hook, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for name in ("requires", "conflicts", "files", "go_modules", "hooks"):
            value = getattr(self, name)
            object.__setattr__(self, name, tuple(value) if value else ())


class ComponentError(Exception):
    """Base class for component resolution errors."""


class UnknownComponentError(ComponentError):
    """Raised when a component id is not in the registry."""

    def __init__(self, component_id: str) -> None:
        self.component_id = component_id
        super().__init__(f"unknown component {component_id}")


class MissingDependencyError(ComponentError):
    """Raised when a required component is missing from a selection."""

    def __init__(self, component_id: str, dependency_id: str) -> None:
        self.component_id = component_id
        self.dependency_id = dependency_id
        super().__init__(
            f"component {component_id} requires missing component {dependency_id}"
        )


class MissingRequirementError(ComponentError):
    """Raised when none of a component's alternatives is selected."""

    def __init__(self, component_id: str, requires: Iterable[str]) -> None:
        self.component_id = component_id
        self.requires = tuple(requires)
        super().__init__(
            f"component {component_id} requires one of: {', '.join(self.requires)}"
        )


class ConflictError(ComponentError):
    """Raised when two selected components conflict."""

    def __init__(self, component_id: str, conflict_id: str) -> None:
        self.component_id = component_id
        self.conflict_id = conflict_id
        super().__init__(f"component {component_id} conflicts with {conflict_id}")


class DependencyCycleError(ComponentError):
    """Raised when component requirements form a cycle."""

    def __init__(self, component_id: str) -> None:
        self.component_id = component_id
        super().__init__(f"component dependency cycle includes {component_id}")