# src/immutable_config/core/tree/node.py
"""
Contrato canônico de um nó da árvore de configuração.

Este módulo define o protocolo mínimo que qualquer fonte de configuração
deve satisfazer para ser consumida pelo binder.

O binder apenas lê nós: nunca os cria, altera ou remove.

Decisões arquiteturais:
    - Ausência de uma chave nunca é erro: `get_section` devolve um nó vazio
    - Um nó pode ter simultaneamente valor e filhos
    - A ordem de `get_children` é definida pela fonte e é observável

Limites explícitos:
    - Não define formato de origem (JSON, YAML, env)
    - Não realiza conversão de tipos
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

#: Separador de segmentos em caminhos de configuração (ex.: "server:ports:0").
KEY_DELIMITER = ":"


@runtime_checkable
class ConfigurationNode(Protocol):
    """
    Contrato de um nó da árvore de configuração.

    Atributos obrigatórios:
        - key: chave do nó no pai (vazia na raiz)
        - path: caminho completo desde a raiz, separado por `KEY_DELIMITER`
        - value: valor bruto opcional do nó

    Invariantes:
        - Chaves de filhos são únicas dentro de um mesmo nó
        - `get_section` nunca levanta exceção para chaves inexistentes
    """
    key: str
    path: str
    value: Optional[str]

    def get_children(self) -> List["ConfigurationNode"]:
        """Retorna os filhos imediatos na ordem definida pela fonte."""
        ...

    def get_section(self, key: str) -> "ConfigurationNode":
        """Retorna o filho com a chave informada, ou um nó vazio."""
        ...


def combine_path(*segments: str) -> str:
    """Concatena segmentos de caminho ignorando segmentos vazios."""
    return KEY_DELIMITER.join(segment for segment in segments if segment)
