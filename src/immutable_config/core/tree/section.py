# src/immutable_config/core/tree/section.py
"""
Implementação em memória da árvore de configuração.

Este módulo define `ConfigSection`, um nó imutável que satisfaz o
protocolo `ConfigurationNode` e pode ser construído a partir de mapas
Python já materializados (por exemplo, o resultado de um parser externo).

Política de materialização (v1):
    - mapa    → filhos nomeados, na ordem de inserção
    - list    → filhos com chaves "0", "1", ... na ordem da lista
    - bool    → valor "true" / "false"
    - None    → nó sem valor
    - escalar → valor `str(escalar)`

Política de camadas (`overlay` / `from_layers`):
    - filhos são casados por chave (case-insensitive), inclusive índices de lista
    - o valor da camada superior vence; valor ausente preserva o inferior
    - filhos presentes em apenas uma das camadas são mantidos

Decisões arquiteturais:
    - Comparação de chaves é case-insensitive (`str.casefold`)
    - A grafia original da primeira ocorrência de cada chave é preservada
    - Seções ausentes são representadas por nós vazios, nunca por erro

Invariantes:
    - Um `ConfigSection` nunca é alterado após criado
    - Cada filho possui chave única (case-insensitive) no seu nível

Limites explícitos:
    - Não lê arquivos nem variáveis de ambiente
    - Não realiza conversão de tipos
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import DuplicateTreeKeyError, InvalidTreeRootTypeError
from .node import ConfigurationNode, combine_path


class ConfigSection:
    """
    Nó imutável da árvore de configuração em memória.

    Args:
        key: chave do nó no pai (vazia na raiz).
        value: valor bruto opcional.
        children: filhos imediatos, na ordem desejada.
        path: caminho completo; derivado de `key` quando omitido.

    Raises:
        DuplicateTreeKeyError: se dois filhos colidirem (case-insensitive).
    """

    __slots__ = ("_key", "_path", "_value", "_children")

    def __init__(
        self,
        key: str = "",
        value: Optional[str] = None,
        children: Iterable["ConfigSection"] = (),
        *,
        path: Optional[str] = None,
    ) -> None:
        self._key = key
        self._path = path if path is not None else key
        self._value = value
        index: Dict[str, ConfigSection] = {}
        for child in children:
            folded = child.key.casefold()
            if folded in index:
                raise DuplicateTreeKeyError(
                    f"Chave duplicada em '{self._path or '<root>'}': "
                    f"'{index[folded].key}' vs '{child.key}'"
                )
            index[folded] = child
        self._children = index

    @property
    def key(self) -> str:
        return self._key

    @property
    def path(self) -> str:
        return self._path

    @property
    def value(self) -> Optional[str]:
        return self._value

    def get_children(self) -> List[ConfigurationNode]:
        return list(self._children.values())

    def get_section(self, key: str) -> ConfigurationNode:
        child = self._children.get(key.casefold())
        if child is None:
            return ConfigSection(key, path=combine_path(self._path, key))
        return child

    def exists(self) -> bool:
        """Indica se o nó possui valor ou filhos."""
        return self._value is not None or bool(self._children)

    def overlay(self, other: "ConfigSection") -> "ConfigSection":
        """
        Retorna uma nova árvore com `other` aplicada sobre esta seção.

        Nenhuma das árvores é alterada; subárvores sem correspondente na
        outra camada são reaproveitadas como estão.
        """
        children: List[ConfigSection] = []
        for folded, child in self._children.items():
            upper = other._children.get(folded)
            children.append(child if upper is None else child.overlay(upper))
        for folded, upper in other._children.items():
            if folded not in self._children:
                children.append(upper)
        value = other._value if other._value is not None else self._value
        return ConfigSection(self._key, value, children, path=self._path)

    def __repr__(self) -> str:
        return (
            f"ConfigSection(path={self._path!r}, value={self._value!r}, "
            f"children={list(self._children.values())!r})"
        )

    # -----------------------------
    # Construção a partir de mapas
    # -----------------------------
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ConfigSection":
        """
        Materializa uma árvore a partir de um mapa Python.

        Raises:
            InvalidTreeRootTypeError: se `data` não for um mapa.
            DuplicateTreeKeyError: se chaves colidirem no mesmo nível.
        """
        if not isinstance(data, Mapping):
            raise InvalidTreeRootTypeError(
                f"Raiz da configuração deve ser um mapa, recebido: {type(data).__name__}"
            )
        return cls("", children=_build_children("", data.items()), path="")

    @classmethod
    def from_layers(
        cls, base: Mapping[str, Any], *overrides: Mapping[str, Any]
    ) -> "ConfigSection":
        """
        Materializa cada camada e as sobrepõe em ordem (a última vence).

        Raises:
            InvalidTreeRootTypeError: se alguma camada não for um mapa.
            DuplicateTreeKeyError: se chaves colidirem dentro de uma camada.
        """
        layers = [cls.from_mapping(layer) for layer in (base, *overrides)]
        return reduce(ConfigSection.overlay, layers)


def _build_children(parent_path: str, items: Iterable[Tuple[Any, Any]]) -> List[ConfigSection]:
    return [_build_node(str(key), parent_path, raw) for key, raw in items]


def _build_node(key: str, parent_path: str, raw: Any) -> ConfigSection:
    path = combine_path(parent_path, key)
    if isinstance(raw, Mapping):
        return ConfigSection(key, children=_build_children(path, raw.items()), path=path)
    if isinstance(raw, (list, tuple)):
        return ConfigSection(key, children=_build_children(path, enumerate(raw)), path=path)
    return ConfigSection(key, value=_scalar_to_str(raw), path=path)


def _scalar_to_str(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    if isinstance(raw, bool):
        return "true" if raw else "false"
    return str(raw)
