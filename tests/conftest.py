# tests/conftest.py
"""
Fixtures compartilhados para testes do immutable_config.

Este módulo define fixtures reutilizáveis que fornecem:
- árvores de configuração descritas em YAML (como string, sem I/O)
- uma fábrica para materializar YAML em `ConfigSection`
- um `BindContext` determinístico

Decisões arquiteturais:
    - YAML é usado apenas como notação de fixture: o pacote não faz parsing
    - Imports do core são realizados de forma lazy para melhorar
      a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest
import yaml


@pytest.fixture
def tree_from_yaml():
    """
    Fixture factory que converte um documento YAML em `ConfigSection`.

    Returns:
        Callable[[str], ConfigSection]: fábrica de árvores de configuração.
    """
    from immutable_config.core.tree import ConfigSection

    def _build(document: str):
        return ConfigSection.from_mapping(yaml.safe_load(document) or {})

    return _build


@pytest.fixture
def app_defaults_yaml() -> str:
    """
    YAML de configuração base (defaults) semelhante ao uso real.

    Returns:
        str: conteúdo YAML representando defaults.
    """
    return """\
name: billing
database:
  host: db.internal
  port: 5432
tags:
  - core
  - payments
limits:
  cpu: 1.5
  memory: 512
"""


@pytest.fixture
def app_local_yaml() -> str:
    """
    YAML de overrides locais.

    Returns:
        str: conteúdo YAML representando overrides.
    """
    return """\
database:
  host: localhost
tags:
  - dev
"""


@pytest.fixture
def bind_ctx():
    """
    Fixture que fornece um BindContext determinístico para testes.

    Returns:
        BindContext: contexto com `bind_id` fixo.
    """
    from immutable_config.core.binding.context import BindContext

    return BindContext(bind_id="bind-test-001", meta={"source": "pytest"})
