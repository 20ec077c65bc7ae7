# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas CI.

Este módulo define fixtures reutilizáveis que fornecem:
- pipelines YAML semelhantes ao uso real
- descritores tipados de container, build, plugin e filtro
- contexto de run controlado (RunContext)

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Dados retornados são determinísticos e isolados
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture executa containers

Este módulo existe como infraestrutura de teste e não
como validação funcional do framework.
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Loader fixtures
# =====================================================

@pytest.fixture
def project_like_pipeline_yaml() -> str:
    """
    Fixture que fornece um pipeline YAML semelhante ao uso real do projeto.

    Cobre todas as seções suportadas, campos flexíveis em forma escalar
    e em forma de lista, argumentos de plugin e blocos `when`.

    Returns:
        str: Conteúdo YAML de um `.drone.yml` típico.
    """

    return """\
cache:
  restore:
    image: plugins/cache
    mount:
      - node_modules
clone:
  git:
    image: plugins/git
    depth: 50
compose:
  database:
    image: postgres:9.6
    environment:
      POSTGRES_USER: app
      POSTGRES_DB: test
build:
  test:
    image: golang:1.9
    environment: CGO_ENABLED=0
    commands:
      - go build
      - go test
  integration:
    image: golang:1.9
    privileged: true
    commands: go test -tags integration
    when:
      branch: master
publish:
  docker:
    repo: octocat/hello-world
    tag: [latest, "1.0"]
    when:
      event: [push, tag]
deploy:
  heroku:
    app: hello-world
    when:
      environment: production
      branch: master
notify:
  slack:
    channel: dev
    when:
      failure: true
"""


# =====================================================
# Typed descriptors
# =====================================================

@pytest.fixture
def golang_container():
    """Descritor genérico de container com todos os campos populados."""
    from atlas_ci.core.config.types import AuthConfig, Container

    return Container(
        image="golang:1.9",
        pull=True,
        privileged=False,
        environment=["GOPATH=/go", "CGO_ENABLED=0"],
        entrypoint="/bin/sh",
        command=["-c", "echo hi"],
        volumes=["/var/run/docker.sock:/var/run/docker.sock"],
        devices=["/dev/fuse"],
        extra_hosts=["db:10.0.0.2"],
        net="bridge",
        pid="host",
        dns="8.8.8.8",
        auth_config=AuthConfig(username="octocat", password="secret", email="o@c.at"),
        memory=512 * 1024 * 1024,
        cpuset_cpus="0,1",
        oom_kill_disable=True,
    )


@pytest.fixture
def go_build(golang_container):
    """Entrada de build com dois comandos de shell."""
    from atlas_ci.core.config.types import Build

    return Build(container=golang_container, commands=["go build", "go test"])


@pytest.fixture
def slack_plugin():
    """Entrada de plugin com argumentos arbitrários."""
    from atlas_ci.core.config.types import Container, Plugin

    return Plugin(
        container=Container(image="plugins/slack"),
        vargs={"channel": "dev", "template": {"success": "ok"}, "retries": 3},
    )


# =====================================================
# Run context fixtures
# =====================================================

@pytest.fixture
def dummy_ctx():
    """
    Fixture que fornece um RunContext determinístico para testes.

    Representa um push no branch `master` de `octocat/hello-world`,
    com a run passando e matrix `GO_VERSION=1.9`.

    Decisões arquiteturais:
        - `run_id` e `created_at` são fixos para garantir determinismo
        - O timestamp é timezone-aware (UTC)

    Returns:
        RunContext: Contexto de run isolado e previsível para testes.
    """
    from atlas_ci.core.pipeline.context import RunContext

    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        repo="octocat/hello-world",
        branch="master",
        event="push",
        status="success",
        matrix={"GO_VERSION": "1.9"},
        meta={"source": "pytest"},
    )
