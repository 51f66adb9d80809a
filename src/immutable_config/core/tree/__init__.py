# src/immutable_config/core/tree/__init__.py
"""
Camada de árvore de configuração.

Este pacote contém o contrato de nó consumido pelo binder e uma
implementação em memória construída a partir de mapas já materializados.

Responsabilidades do pacote:
    - Definir o protocolo `ConfigurationNode`
    - Materializar mapas Python em `ConfigSection` imutáveis
    - Sobrepor camadas (defaults + overrides) seção a seção

Limites explícitos:
    - Não faz parsing de JSON, YAML, INI ou variáveis de ambiente
    - Não converte valores para tipos Python
"""

from .errors import (
    DuplicateTreeKeyError,
    InvalidTreeRootTypeError,
    TreeError,
)
from .node import KEY_DELIMITER, ConfigurationNode, combine_path
from .section import ConfigSection

__all__ = [
    "ConfigSection",
    "ConfigurationNode",
    "DuplicateTreeKeyError",
    "InvalidTreeRootTypeError",
    "KEY_DELIMITER",
    "TreeError",
    "combine_path",
]
