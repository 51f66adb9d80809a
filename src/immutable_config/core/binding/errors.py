"""
immutable_config — Canonical Binding Exceptions (v1)

Este módulo define as exceções tipadas levantadas pelo binder.

Objetivo:
- Permitir que o binder sinalize falhas semânticas tipadas
- Identificar a chave de configuração (`path`) e o tipo alvo (`target`) da falha
- Evitar ValueError/RuntimeError genéricos na superfície pública

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Apenas `MissingRequiredValueError` é recuperável via valor default.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Dict, Optional


@dataclass(eq=False)
class BindingError(Exception):
    """Base class para falhas de binding.

    Importante:
    - `path` é o caminho da chave de configuração onde a falha ocorreu
    - `target` é o nome do tipo que estava sendo produzido
    - Mensagem deve ser curta e humana
    """

    message: str
    path: str = ""
    target: str = ""
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    #: Indica se a falha pode ser absorvida por um parâmetro com default.
    recoverable: ClassVar[bool] = False

    def __str__(self) -> str:
        location = self.path or "<root>"
        if self.target:
            return f"{self.message} (path={location}, target={self.target})"
        return f"{self.message} (path={location})"

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        payload = asdict(self)
        payload["type"] = type(self).__name__
        payload["recoverable"] = self.recoverable
        return payload


# ---------------------------------------------------------------------------
# Valores
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class ConversionError(BindingError):
    """Valor escalar ou chave de mapa não pôde ser convertido ao tipo declarado."""


@dataclass(eq=False)
class MissingRequiredValueError(BindingError):
    """Nenhum valor utilizável foi encontrado para um tipo sem default."""

    recoverable: ClassVar[bool] = True


@dataclass(eq=False)
class DuplicateKeyError(BindingError):
    """Duas chaves distintas convergiram para a mesma chave após conversão."""


# ---------------------------------------------------------------------------
# Construção
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class NoConstructorError(BindingError):
    """Tipo composto não expõe construtor utilizável para binding."""


@dataclass(eq=False)
class ConstructionError(BindingError):
    """Construtor falhou após a resolução completa dos argumentos (encapsulado)."""


# ---------------------------------------------------------------------------
# Registro de descritores
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class DuplicateDescriptorError(BindingError):
    """Tipo já possui descritor registrado explicitamente."""
