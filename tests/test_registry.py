import pytest

from crego.component import (
    CATEGORY_SERVER,
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
)
from crego.registry import Registry, default_components, new_registry

EXPECTED_IDS = [
    ID_PROJECT_WEB,
    ID_PROJECT_CLI,
    ID_LAYOUT_MINIMAL,
    ID_LAYOUT_LAYERED,
    ID_SERVER_NETHTTP,
    ID_SERVER_CHI,
    ID_SERVER_GIN,
    ID_SERVER_ECHO,
    ID_SERVER_FIBER,
    ID_CONFIGURATION_ENV,
    ID_CONFIGURATION_YAML,
    ID_CONFIGURATION_JSON,
    ID_CONFIGURATION_TOML,
    ID_DATABASE_NONE,
    ID_DATABASE_POSTGRES,
    ID_DATABASE_MYSQL,
    ID_DATABASE_SQLITE,
    ID_DATABASE_REDIS,
    ID_DATABASE_MONGODB,
    ID_DATABASE_FRAMEWORK_PGX,
    ID_DATABASE_FRAMEWORK_SQL,
    ID_DATABASE_FRAMEWORK_GORM,
    ID_MIGRATIONS_NONE,
    ID_MIGRATIONS_GOOSE,
    ID_MIGRATIONS_MIGRATE,
    ID_TASK_SCHEDULER_NONE,
    ID_TASK_SCHEDULER_GOCRON,
    ID_LOGGING_SLOG,
    ID_LOGGING_ZAP,
    ID_LOGGING_ZEROLOG,
    ID_LOGGING_LOGRUS,
    ID_OBSERVABILITY_HEALTH,
    ID_OBSERVABILITY_READINESS,
    ID_DEPLOYMENT_DOCKER,
    ID_DEPLOYMENT_COMPOSE,
    ID_CI_GITHUB_ACTIONS,
    ID_CI_GITLAB_CI,
    ID_CI_AZURE_PIPELINES,
]


def test_list_includes_mvp_components():
    assert [c.id for c in new_registry().list()] == EXPECTED_IDS


def test_get_returns_known_component():
    component = new_registry().get(ID_SERVER_GIN)
    assert component.id == ID_SERVER_GIN
    assert component.category == CATEGORY_SERVER
    assert ID_PROJECT_WEB in component.requires


def test_get_rejects_unknown_component():
    assert new_registry().get("server.martini") is None
    assert "server.martini" not in new_registry()


def test_list_returns_independent_list():
    registry = new_registry()
    listed = registry.list()
    listed.clear()
    assert len(registry.list()) == len(EXPECTED_IDS)


def test_default_ids_are_unique():
    ids = [c.id for c in default_components()]
    assert len(ids) == len(set(ids))


def test_every_reference_points_to_a_known_component():
    registry = new_registry()
    for component in registry:
        for ref in component.requires + component.conflicts:
            assert ref in registry, (component.id, ref)


@pytest.mark.parametrize(
    "component_id",
    [ID_SERVER_NETHTTP, ID_SERVER_CHI, ID_SERVER_GIN, ID_SERVER_ECHO, ID_SERVER_FIBER],
)
def test_servers_conflict_with_every_other_server(component_id):
    component = new_registry().get(component_id)
    servers = {ID_SERVER_NETHTTP, ID_SERVER_CHI, ID_SERVER_GIN, ID_SERVER_ECHO, ID_SERVER_FIBER}
    assert set(component.conflicts) == servers - {component_id}
    assert component.requires == (ID_PROJECT_WEB,)


def test_gin_go_module():
    component = new_registry().get(ID_SERVER_GIN)
    assert component.go_modules == (GoModule("github.com/gin-gonic/gin", "v1.12.0"),)


def test_compose_requires_docker():
    component = new_registry().get(ID_DEPLOYMENT_COMPOSE)
    assert component.requires == (ID_DEPLOYMENT_DOCKER,)
    assert component.files[0].target == "deployments/docker-compose.yml"


def test_postgres_file_target_depends_on_layout():
    target = new_registry().get(ID_DATABASE_POSTGRES).files[0].target
    assert target == (
        '{{ if eq .Recipe.Layout.Style "minimal" }}internal/app/postgres.go'
        "{{ else }}internal/database/postgres.go{{ end }}"
    )


def test_pgx_requires_postgres():
    assert new_registry().get(ID_DATABASE_FRAMEWORK_PGX).requires == (ID_DATABASE_POSTGRES,)


def test_custom_registry_preserves_order_and_last_duplicate_wins():
    first = Component(id="a.one", category="a", name="First", description="first")
    second = Component(id="a.two", category="a", name="Second", description="second")
    replacement = Component(id="a.one", category="a", name="Replacement", description="r")
    registry = Registry([first, second, replacement])
    assert registry.list() == [first, second, replacement]
    assert registry.get("a.one") == replacement
    assert len(registry) == 3


def test_empty_registry():
    registry = Registry([])
    assert registry.list() == []
    assert registry.get(ID_SERVER_GIN) is None