# src/immutable_config/core/binding/binder.py
"""
Binder de configuração para objetos imutáveis.

Este módulo implementa o algoritmo recursivo que converte uma árvore de
configuração (`ConfigurationNode`) em um grafo de objetos imutáveis
construídos exclusivamente via construtor.

Ordem de decisão do dispatcher (primeira regra aplicável vence):
    1. Nó com valor e tipo escalar     → conversão escalar (falha é fatal)
    2. Tipo de forma mapping           → binder de mapas
    3. Tipo de forma sequence          → binder de sequências
    4. Tipo escalar sem valor          → `MissingRequiredValueError`
    5. Demais tipos                    → binder de compostos (construtor)

Política de precedência:
    Quando um nó possui valor *e* filhos, e o tipo alvo é escalar, o valor
    vence. A regra é intencional e coberta por testes.

Decisões arquiteturais:
    - Chamadas recursivas devolvem `BindResult`; exceções só na superfície
    - Apenas falhas `recoverable` são substituídas por valores default, e
      somente no parâmetro que declara o default
    - `Optional[T]` vira None apenas quando a seção está ausente ou vazia
    - Falhas do construtor são encapsuladas em `ConstructionError`
    - Nenhum resultado é mantido em cache entre chamadas

Invariantes:
    - A árvore de configuração nunca é mutada
    - Nenhum resultado parcial é devolvido em caso de falha
    - Coleções produzidas são imutáveis (tuple, frozenset, MappingProxyType)

Limites explícitos:
    - Não faz parsing de fontes de configuração
    - Não usa setters nem atribuição de atributos
    - Não valida regras de domínio além da conversão de tipos
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, FrozenSet, List, Optional

from immutable_config.core.tree.node import ConfigurationNode

from .context import BindContext
from .descriptors import DescriptorRegistry, ShapeKind, TypeDescriptor, type_name
from .errors import ConstructionError, DuplicateKeyError, MissingRequiredValueError
from .result import BindResult


class Binder:
    """
    Binder canônico (dispatcher + binders de composto, sequência e mapa).

    Args:
        registry: registro de descritores; quando omitido, usa um registro
            próprio com o conversor escalar padrão.
    """

    def __init__(self, registry: Optional[DescriptorRegistry] = None) -> None:
        self.registry = registry if registry is not None else DescriptorRegistry()

    @property
    def converter(self):
        return self.registry.converter

    def bind(
        self,
        target: Any,
        node: ConfigurationNode,
        *,
        context: Optional[BindContext] = None,
    ) -> Any:
        """
        Realiza o binding da árvore enraizada em `node` para o tipo `target`.

        Raises:
            TypeError: se `node` não satisfizer `ConfigurationNode`.
            BindingError: a falha mais interna, com `path` da chave responsável.
        """
        if not isinstance(node, ConfigurationNode):
            raise TypeError(
                f"node must satisfy ConfigurationNode, got {type(node).__name__}"
            )
        ctx = context if context is not None else BindContext()
        ctx.log(level="info", message="binding.started", path=node.path, target=type_name(target))

        result = self.bind_type(target, node, ctx)
        if not result.ok:
            ctx.log(
                level="error",
                message="binding.failed",
                path=result.error.path,
                target=type_name(target),
                error=result.error.to_dict(),
            )
            raise result.error

        ctx.log(level="info", message="binding.completed", path=node.path, target=type_name(target))
        return result.value

    # -----------------------------
    # Dispatcher
    # -----------------------------
    def bind_type(
        self,
        declared: Any,
        node: ConfigurationNode,
        context: BindContext,
        absent_targets: FrozenSet[Any] = frozenset(),
    ) -> BindResult:
        """
        Resolve `declared` a partir de `node`, devolvendo sucesso ou falha.

        `absent_targets` acumula os tipos compostos em construção a partir de
        seções ausentes no ramo atual da recursão.
        """
        descriptor = self.registry.describe(declared)

        # Optional: seção ausente ou valor vazio resolve para None sem construir
        if descriptor.optional and not node.get_children() and not node.value:
            context.log(
                level="debug",
                message="binding.optional_none",
                path=node.path,
                target=descriptor.name,
            )
            return BindResult.success(None)

        return self._dispatch(descriptor, node, context, absent_targets)

    def _dispatch(
        self,
        descriptor: TypeDescriptor,
        node: ConfigurationNode,
        context: BindContext,
        absent_targets: FrozenSet[Any],
    ) -> BindResult:
        if node.value is not None and descriptor.shape is ShapeKind.SCALAR:
            return self.converter.try_convert(descriptor.target, node.value, path=node.path)
        if descriptor.shape is ShapeKind.MAPPING:
            return self._bind_mapping(descriptor, node, context, absent_targets)
        if descriptor.shape is ShapeKind.SEQUENCE:
            return self._bind_sequence(descriptor, node, context, absent_targets)
        if descriptor.shape is ShapeKind.SCALAR and descriptor.factory is None:
            return BindResult.failure(
                MissingRequiredValueError(
                    "Nenhum valor configurado",
                    path=node.path,
                    target=descriptor.name,
                    hint=f"Defina um valor para '{node.path}'.",
                )
            )
        return self._bind_composite(descriptor, node, context, absent_targets)

    # -----------------------------
    # Compostos
    # -----------------------------
    def _bind_composite(
        self,
        descriptor: TypeDescriptor,
        node: ConfigurationNode,
        context: BindContext,
        absent_targets: FrozenSet[Any],
    ) -> BindResult:
        if descriptor.constructor_error is not None:
            return BindResult.failure(replace(descriptor.constructor_error, path=node.path))

        if not _exists(node):
            # tipos recursivos: um nó ausente nunca desce duas vezes no mesmo tipo
            if descriptor.target in absent_targets:
                return BindResult.failure(
                    MissingRequiredValueError(
                        "Seção ausente para tipo recursivo",
                        path=node.path,
                        target=descriptor.name,
                    )
                )
            absent_targets = absent_targets | {descriptor.target}
        return self._construct(descriptor, node, context, absent_targets)

    def _construct(
        self,
        descriptor: TypeDescriptor,
        node: ConfigurationNode,
        context: BindContext,
        absent_targets: FrozenSet[Any],
    ) -> BindResult:
        args: List[Any] = []
        kwargs: Dict[str, Any] = {}

        for param in descriptor.parameters:
            child = node.get_section(param.name)
            result = self.bind_type(param.annotation, child, context, absent_targets)
            if result.ok:
                value = result.value
            elif param.has_default and result.recoverable:
                value = param.default
                context.log(
                    level="info",
                    message="binding.default_used",
                    path=child.path,
                    target=descriptor.name,
                    parameter=param.name,
                    reason=str(result.error),
                )
                if _exists(child):
                    context.add_warning(
                        path=child.path,
                        message=f"Seção incompleta ignorada, default usado: {result.error}",
                    )
            else:
                return result

            if param.keyword_only:
                kwargs[param.name] = value
            else:
                args.append(value)

        try:
            instance = descriptor.factory(*args, **kwargs)
        except Exception as exc:  # noqa: BLE001
            error = ConstructionError(
                "Construtor falhou após resolução dos argumentos",
                path=node.path,
                target=descriptor.name,
                details={"exception_class": type(exc).__name__, "reason": str(exc)},
            )
            error.__cause__ = exc
            return BindResult.failure(error)
        return BindResult.success(instance)

    # -----------------------------
    # Sequências
    # -----------------------------
    def _bind_sequence(
        self,
        descriptor: TypeDescriptor,
        node: ConfigurationNode,
        context: BindContext,
        absent_targets: FrozenSet[Any],
    ) -> BindResult:
        items: List[Any] = []
        for child in node.get_children():
            result = self.bind_type(descriptor.value_type, child, context, absent_targets)
            if not result.ok:
                return result
            items.append(result.value)
        return BindResult.success(descriptor.container(items))

    # -----------------------------
    # Mapas
    # -----------------------------
    def _bind_mapping(
        self,
        descriptor: TypeDescriptor,
        node: ConfigurationNode,
        context: BindContext,
        absent_targets: FrozenSet[Any],
    ) -> BindResult:
        entries: Dict[Any, Any] = {}
        origins: Dict[Any, str] = {}
        for child in node.get_children():
            key = self.converter.try_convert(descriptor.key_type, child.key, path=child.path)
            if not key.ok:
                return key
            if key.value in entries:
                return BindResult.failure(
                    DuplicateKeyError(
                        "Chaves distintas convergem para a mesma chave do mapa",
                        path=child.path,
                        target=descriptor.name,
                        details={"keys": [origins[key.value], child.key], "converted": repr(key.value)},
                    )
                )
            result = self.bind_type(descriptor.value_type, child, context, absent_targets)
            if not result.ok:
                return result
            entries[key.value] = result.value
            origins[key.value] = child.key
        return BindResult.success(descriptor.container(entries))


def _exists(node: ConfigurationNode) -> bool:
    return node.value is not None or bool(node.get_children())
