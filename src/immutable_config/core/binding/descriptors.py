# src/immutable_config/core/binding/descriptors.py
"""
Descritores de tipo e registro de construtores.

Este módulo define os tipos canônicos que descrevem *como* um tipo alvo é
produzido pelo binder, e o `DescriptorRegistry`, responsável por realizar
a introspecção de cada tipo uma única vez e manter o resultado em cache.

Componentes principais:
    - ShapeKind          → categoria de forma (scalar, mapping, sequence, composite)
    - Parameter          → parâmetro do construtor designado
    - TypeDescriptor     → descrição imutável e pré-computada de um tipo alvo
    - DescriptorRegistry → cache de descritores e construtores explícitos

Decisões arquiteturais:
    - A forma é decidida pelo tipo declarado, nunca pelo conteúdo do nó
    - O construtor designado é a própria classe, salvo registro explícito
    - Registrar duas vezes o mesmo tipo é erro imediato (fail fast)
    - Tipos sem construtor utilizável geram descritor com `constructor_error`,
      reportado apenas quando o binder de fato precisa construí-los

Invariantes:
    - O mesmo tipo sempre produz o mesmo descritor
    - Descritores são imutáveis

Limites explícitos:
    - Não lê a árvore de configuração
    - Não constrói instâncias
"""

from __future__ import annotations

import collections.abc as abc
import inspect
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import (
    Annotated,
    Any,
    Callable,
    Dict,
    Optional,
    Tuple,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from .converters import ScalarConverter
from .errors import DuplicateDescriptorError, NoConstructorError

try:  # Python >= 3.10
    from types import UnionType
except ImportError:  # pragma: no cover
    UnionType = Union  # type: ignore[assignment,misc]


_MAPPING_ORIGINS = frozenset({dict, abc.Mapping, abc.MutableMapping, MappingProxyType})
_SEQUENCE_ORIGINS = frozenset(
    {list, tuple, abc.Sequence, abc.MutableSequence, abc.Collection, abc.Iterable}
)
_SET_ORIGINS = frozenset({set, frozenset, abc.Set, abc.MutableSet})


class ShapeKind(str, Enum):
    """
    Categoria de forma de um tipo alvo, usada pelo dispatcher.

    Os valores são strings para facilitar serialização em eventos e erros.
    """
    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    COMPOSITE = "composite"


@dataclass(frozen=True)
class Parameter:
    """Parâmetro nomeado do construtor designado."""

    name: str
    annotation: Any
    has_default: bool = False
    default: Any = None
    keyword_only: bool = False


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Descrição pré-computada de um tipo alvo.

    Campos:
        - target: tipo efetivo, já sem `Optional`/`Annotated`/`NewType`
        - shape: categoria de forma
        - optional: o tipo declarado era `Optional[target]`
        - key_type / value_type: tipos de chave e de valor (mapping) ou
          tipo do elemento em `value_type` (sequence)
        - container: fábrica do resultado imutável de coleções
        - factory: construtor designado (composite)
        - parameters: parâmetros do construtor, em ordem de declaração
        - constructor_error: motivo pelo qual o tipo não é construível
    """

    target: Any
    shape: ShapeKind
    optional: bool = False
    key_type: Any = None
    value_type: Any = None
    container: Optional[Callable[[Any], Any]] = None
    factory: Optional[Callable[..., Any]] = None
    parameters: Tuple[Parameter, ...] = field(default_factory=tuple)
    constructor_error: Optional[NoConstructorError] = None

    @property
    def name(self) -> str:
        return type_name(self.target)


class DescriptorRegistry:
    """
    Registro de descritores de tipo, com cache por processo.

    Args:
        converter: conversor escalar usado para decidir quais tipos são
            escalares e para converter valores e chaves. Quando omitido,
            uma instância padrão é criada.
    """

    def __init__(self, converter: Optional[ScalarConverter] = None) -> None:
        self.converter = converter if converter is not None else ScalarConverter()
        self._factories: Dict[Any, Callable[..., Any]] = {}
        self._cache: Dict[Any, TypeDescriptor] = {}

    def register(self, target: type, factory: Optional[Callable[..., Any]] = None) -> None:
        """
        Designa explicitamente o construtor usado para `target`.

        Raises:
            DuplicateDescriptorError: se `target` já possuir registro.
            NoConstructorError: se a fábrica não for invocável ou não puder
                ser inspecionada.
        """
        if target in self._factories:
            raise DuplicateDescriptorError(
                "Tipo já registrado", target=type_name(target)
            )
        chosen = target if factory is None else factory
        if not callable(chosen):
            raise NoConstructorError(
                "Fábrica registrada não é invocável", target=type_name(target)
            )
        _, error = _inspect_parameters(target, chosen)
        if error is not None:
            raise error
        self._factories[target] = chosen
        # descritores derivados (Optional[T], List[T], ...) copiam a fábrica
        self._cache.clear()

    def describe(self, declared: Any) -> TypeDescriptor:
        descriptor = self._cache.get(declared)
        if descriptor is None:
            descriptor = self._build(declared)
            self._cache[declared] = descriptor
        return descriptor

    # -----------------------------
    # Introspecção
    # -----------------------------
    def _build(self, declared: Any) -> TypeDescriptor:
        target, optional = _unwrap(declared)

        if self.converter.supports(target):
            # construtor explícito: nós sem valor ainda podem ser construídos
            factory = self._factories.get(target)
            parameters, _ = (
                _inspect_parameters(target, factory) if factory is not None else ((), None)
            )
            return TypeDescriptor(
                target=target,
                shape=ShapeKind.SCALAR,
                optional=optional,
                factory=factory,
                parameters=parameters,
            )

        origin = get_origin(target) or target
        args = get_args(target)

        if origin in _MAPPING_ORIGINS:
            key_type, value_type = args if len(args) == 2 else (str, str)
            return TypeDescriptor(
                target=target,
                shape=ShapeKind.MAPPING,
                optional=optional,
                key_type=key_type,
                value_type=value_type,
                container=MappingProxyType,
            )

        if origin in _SEQUENCE_ORIGINS or origin in _SET_ORIGINS:
            container = frozenset if origin in _SET_ORIGINS else tuple
            if origin is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
                return _not_constructible(
                    target, optional, "Tuplas heterogêneas não são suportadas"
                )
            return TypeDescriptor(
                target=target,
                shape=ShapeKind.SEQUENCE,
                optional=optional,
                value_type=args[0] if args else str,
                container=container,
            )

        if origin is Union or origin is UnionType:
            return _not_constructible(target, optional, "Uniões não são suportadas")

        factory = self._factories.get(target, origin)
        parameters, error = _inspect_parameters(target, factory)
        if error is not None:
            return TypeDescriptor(
                target=target,
                shape=ShapeKind.COMPOSITE,
                optional=optional,
                constructor_error=error,
            )
        return TypeDescriptor(
            target=target,
            shape=ShapeKind.COMPOSITE,
            optional=optional,
            factory=factory,
            parameters=parameters,
        )


def _unwrap(declared: Any) -> Tuple[Any, bool]:
    """Remove `Annotated`, `NewType` e `Optional`, devolvendo (tipo, optional)."""
    target = declared
    optional = False
    while True:
        origin = get_origin(target)
        if origin is Annotated:
            target = get_args(target)[0]
        elif hasattr(target, "__supertype__"):
            target = target.__supertype__
        elif origin is Union or origin is UnionType:
            members = [arg for arg in get_args(target) if arg is not type(None)]
            if len(members) != 1:
                return target, optional
            optional = True
            target = members[0]
        else:
            return target, optional


def _inspect_parameters(
    target: Any, factory: Callable[..., Any]
) -> Tuple[Tuple[Parameter, ...], Optional[NoConstructorError]]:
    name = type_name(target)
    if inspect.isclass(target) and (
        inspect.isabstract(target) or getattr(target, "_is_protocol", False)
    ) and factory is target:
        return (), NoConstructorError("Tipo abstrato não pode ser construído", target=name)
    if not callable(factory):
        return (), NoConstructorError("Tipo não expõe construtor", target=name)
    try:
        signature = inspect.signature(factory)
    except (TypeError, ValueError) as exc:
        return (), NoConstructorError(
            "Construtor não pôde ser inspecionado",
            target=name,
            details={"reason": str(exc)},
        )

    hints = _type_hints(factory)
    parameters = []
    for param in signature.parameters.values():
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        annotation = hints.get(param.name, param.annotation)
        if annotation is inspect.Parameter.empty:
            annotation = Any
        parameters.append(
            Parameter(
                name=param.name,
                annotation=annotation,
                has_default=param.default is not inspect.Parameter.empty,
                default=None if param.default is inspect.Parameter.empty else param.default,
                keyword_only=param.kind is inspect.Parameter.KEYWORD_ONLY,
            )
        )
    return tuple(parameters), None


def _type_hints(factory: Callable[..., Any]) -> Dict[str, Any]:
    hints: Dict[str, Any] = {}
    sources = [factory, factory.__init__] if inspect.isclass(factory) else [factory]
    for source in sources:
        try:
            hints.update(get_type_hints(source))
        except (NameError, TypeError, AttributeError):
            # anotações não resolvíveis ficam como declaradas em `signature`
            continue
    hints.pop("return", None)
    return hints


def _not_constructible(target: Any, optional: bool, message: str) -> TypeDescriptor:
    return TypeDescriptor(
        target=target,
        shape=ShapeKind.COMPOSITE,
        optional=optional,
        constructor_error=NoConstructorError(message, target=type_name(target)),
    )


def type_name(target: Any) -> str:
    """Nome legível de um tipo, para mensagens e eventos."""
    if get_origin(target) is not None:
        return repr(target).replace("typing.", "")
    return getattr(target, "__qualname__", None) or repr(target)
