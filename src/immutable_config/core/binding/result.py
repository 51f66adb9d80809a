# src/immutable_config/core/binding/result.py
"""
Resultado explícito de uma etapa recursiva de binding.

O binder não usa exceções como fluxo de controle interno: cada chamada
recursiva devolve um `BindResult`, e o binder de compostos decide pela
substituição do default inspecionando `error.recoverable`.

Invariantes:
    - Um resultado possui exatamente um de: valor (sucesso) ou erro (falha)
    - `BindResult` é imutável
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .errors import BindingError


@dataclass(frozen=True)
class BindResult:
    """Sucesso (`value`) ou falha (`error`) de um binding."""

    value: Any = None
    error: Optional[BindingError] = None

    @classmethod
    def success(cls, value: Any) -> "BindResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BindingError) -> "BindResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def recoverable(self) -> bool:
        return self.error is not None and self.error.recoverable

    def unwrap(self) -> Any:
        """Retorna o valor ou levanta o erro carregado."""
        if self.error is not None:
            raise self.error
        return self.value
