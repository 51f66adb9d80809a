"""
immutable_config — binding de árvores de configuração para objetos imutáveis.

Este pacote raiz define o namespace público do immutable_config. O ponto
de entrada é `bind`, que converte uma árvore de configuração já
materializada em uma instância do tipo alvo, resolvendo cada parâmetro do
construtor a partir da seção de mesmo nome.

Exemplo:

    @dataclass(frozen=True)
    class Point:
        x: int
        y: int = 0

    bind(Point, ConfigSection.from_mapping({"x": "5"}))  # Point(x=5, y=0)

Arquitetura em alto nível:
    - core.tree    → contrato de nó, árvore em memória e sobreposição de camadas
    - core.binding → descritores, conversão escalar e binding recursivo

Limites explícitos:
    - Não faz parsing de JSON, YAML, INI ou variáveis de ambiente
    - Não usa setters: todo estado vem do construtor
"""

from typing import Any, Optional

from .core.binding import (
    BindContext,
    Binder,
    BindingError,
    ConstructionError,
    ConversionError,
    DescriptorRegistry,
    DuplicateDescriptorError,
    DuplicateKeyError,
    MissingRequiredValueError,
    NoConstructorError,
    ScalarConverter,
)
from .core.tree import ConfigSection, ConfigurationNode

__version__ = "0.1.0"

_default_binder = Binder()


def bind(
    target: Any,
    node: ConfigurationNode,
    *,
    context: Optional[BindContext] = None,
    registry: Optional[DescriptorRegistry] = None,
) -> Any:
    """
    Realiza o binding da árvore enraizada em `node` para uma instância de `target`.

    Args:
        target: tipo alvo (classe, coleção tipada ou tipo escalar).
        node: raiz da árvore de configuração.
        context: contexto opcional para coleta de eventos e warnings.
        registry: registro de descritores customizado; quando omitido,
            usa o registro padrão do processo.

    Returns:
        A instância construída.

    Raises:
        BindingError: a falha mais interna, identificando `path` e `target`.
    """
    binder = _default_binder if registry is None else Binder(registry)
    return binder.bind(target, node, context=context)


__all__ = [
    "BindContext",
    "Binder",
    "BindingError",
    "ConfigSection",
    "ConfigurationNode",
    "ConstructionError",
    "ConversionError",
    "DescriptorRegistry",
    "DuplicateDescriptorError",
    "DuplicateKeyError",
    "MissingRequiredValueError",
    "NoConstructorError",
    "ScalarConverter",
    "bind",
]
