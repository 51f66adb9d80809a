# src/immutable_config/core/binding/__init__.py
"""
# Binding Core — immutable_config

Este pacote implementa a conversão de uma árvore de configuração em
objetos imutáveis construídos exclusivamente via construtor.

## Componentes

- **converters**
  - `ScalarConverter`: string → tipo simples (str, bool, int, Enum, ...)

- **descriptors**
  - `ShapeKind`, `Parameter`, `TypeDescriptor`
  - `DescriptorRegistry`: introspecção única por tipo, com cache

- **binder**
  - `Binder`: dispatcher e binders de composto, sequência e mapa

- **result**
  - `BindResult`: sucesso ou falha explícitos da recursão

- **context**
  - `BindContext`: eventos estruturados e warnings por chamada

- **errors**
  - `BindingError` e subclasses tipadas

## Invariantes

- A árvore de configuração nunca é mutada
- Nenhum resultado parcial é devolvido em caso de falha
- Apenas `MissingRequiredValueError` é substituído por defaults
"""

from .binder import Binder
from .context import BindContext
from .converters import ScalarConverter
from .descriptors import DescriptorRegistry, Parameter, ShapeKind, TypeDescriptor
from .errors import (
    BindingError,
    ConstructionError,
    ConversionError,
    DuplicateDescriptorError,
    DuplicateKeyError,
    MissingRequiredValueError,
    NoConstructorError,
)
from .result import BindResult

__all__ = [
    "BindContext",
    "BindResult",
    "Binder",
    "BindingError",
    "ConstructionError",
    "ConversionError",
    "DescriptorRegistry",
    "DuplicateDescriptorError",
    "DuplicateKeyError",
    "MissingRequiredValueError",
    "NoConstructorError",
    "Parameter",
    "ScalarConverter",
    "ShapeKind",
    "TypeDescriptor",
]
