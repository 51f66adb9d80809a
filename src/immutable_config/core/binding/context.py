# src/immutable_config/core/binding/context.py
"""
Contexto de observabilidade de uma chamada de binding.

Este módulo define o `BindContext`, a estrutura utilizada para registrar
eventos estruturados e warnings durante uma única chamada de `bind`.

Princípios fundamentais:
    - Isolamento por chamada (cada bind possui seu próprio contexto)
    - Logs são eventos estruturados, não strings livres
    - Ausência de estado global compartilhado

Invariantes:
    - Eventos sempre incluem `bind_id`, `level`, `message`, `path` e `timestamp`
    - Warnings são agrupados por `path`

Limites explícitos:
    - Não influencia o resultado do binding
    - Não persiste dados automaticamente
    - Não deve ser compartilhado entre chamadas concorrentes
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class BindContext:
    """
    Contexto de uma chamada de binding.

    Eventos registrados pelo binder:
        - binding.started / binding.completed / binding.failed
        - binding.default_used: parâmetro recebeu seu valor default
        - binding.optional_none: tipo `Optional` resolvido como `None`
    """
    bind_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    def log(self, *, level: str, message: str, path: str = "", **extra: Any) -> None:
        event = {
            "bind_id": self.bind_id,
            "level": level,
            "message": message,
            "path": path,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, path: str, message: str) -> None:
        self.warnings.setdefault(path, []).append(message)

    def find(self, message: str) -> List[Dict[str, Any]]:
        """Retorna os eventos com a mensagem informada, na ordem de registro."""
        return [event for event in self.events if event["message"] == message]
