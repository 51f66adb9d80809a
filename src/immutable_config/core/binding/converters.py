# src/immutable_config/core/binding/converters.py
"""
Conversão de valores escalares de configuração.

Este módulo define o `ScalarConverter`, responsável por converter o valor
bruto (string) de um nó de configuração no tipo simples declarado por um
parâmetro ou por uma chave de mapa.

Tipos suportados (v1):
    - str, bytes (UTF-8)
    - bool ("true/false", "yes/no", "on/off", "1/0"; case-insensitive)
    - int, float, complex, Decimal, Fraction
    - Path, UUID
    - datetime, date, time (ISO 8601) e timedelta (segundos ou [d.]hh:mm[:ss])
    - subclasses de Enum (nome do membro, depois valor)
    - typing.Literal[...] (escolha entre valores finitos)
    - typing.Any / object (valor bruto)

Decisões arquiteturais:
    - Conversores são registrados por tipo exato; subclasses usam o
      conversor da base mais próxima na MRO e recebem o resultado no construtor
    - Qualquer exceção de um conversor vira `ConversionError` encadeada
    - Falhas de conversão nunca levantam exceção aqui: viram `BindResult`
    - Conversores customizados podem ser registrados por instância

Limites explícitos:
    - Não valida regras de domínio (intervalos, formatos de negócio)
    - Não conhece a árvore de configuração além do valor bruto
"""

from __future__ import annotations

import re
import uuid
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import Path
from typing import Any, Callable, Dict, Literal, Optional, get_args, get_origin

from .errors import ConversionError
from .result import BindResult

Converter = Callable[[str], Any]

_TRUE = frozenset({"true", "yes", "on", "1"})
_FALSE = frozenset({"false", "no", "off", "0"})

_TIMESPAN = re.compile(r"^(?:(\d+)\.)?(\d+):(\d+)(?::(\d+(?:\.\d+)?))?$")


def _to_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"valor booleano inválido: {raw!r}")


def _to_timedelta(raw: str) -> timedelta:
    text = raw.strip()
    match = _TIMESPAN.match(text)
    if match is None:
        return timedelta(seconds=float(text))
    days, hours, minutes, seconds = match.groups()
    return timedelta(
        days=int(days or 0),
        hours=int(hours),
        minutes=int(minutes),
        seconds=float(seconds or 0),
    )


def _stripped(factory: Callable[[str], Any]) -> Converter:
    return lambda raw: factory(raw.strip())


_BUILTIN_CONVERTERS: Dict[type, Converter] = {
    str: lambda raw: raw,
    bytes: lambda raw: raw.encode("utf-8"),
    bool: _to_bool,
    int: _stripped(int),
    float: _stripped(float),
    complex: _stripped(complex),
    Decimal: _stripped(Decimal),
    Fraction: _stripped(Fraction),
    Path: Path,
    uuid.UUID: _stripped(uuid.UUID),
    datetime: _stripped(datetime.fromisoformat),
    date: _stripped(date.fromisoformat),
    time: _stripped(time.fromisoformat),
    timedelta: _to_timedelta,
}


class ScalarConverter:
    """
    Conversor de strings para tipos simples.

    Cada instância possui sua própria tabela de conversores, inicializada
    com os conversores embutidos. Registros customizados não afetam
    outras instâncias.
    """

    def __init__(self) -> None:
        self._converters: Dict[type, Converter] = dict(_BUILTIN_CONVERTERS)

    def register(self, target: type, converter: Converter) -> None:
        """Registra (ou substitui) o conversor de `target`."""
        if not callable(converter):
            raise TypeError("converter must be callable")
        self._converters[target] = converter

    def supports(self, target: Any) -> bool:
        return self._resolve(target) is not None

    def try_convert(self, target: Any, raw: str, *, path: str = "") -> BindResult:
        """
        Converte `raw` para `target`.

        Returns:
            BindResult: sucesso com o valor convertido, ou falha com
            `ConversionError` (também quando `target` não é escalar).
        """
        converter = self._resolve(target)
        if converter is None:
            return BindResult.failure(
                ConversionError(
                    "Tipo sem conversão escalar registrada",
                    path=path,
                    target=_type_name(target),
                    details={"raw": raw},
                )
            )
        try:
            return BindResult.success(converter(raw))
        except Exception as exc:  # noqa: BLE001
            error = ConversionError(
                f"Valor {raw!r} não pôde ser convertido",
                path=path,
                target=_type_name(target),
                details={"raw": raw, "exception_class": type(exc).__name__, "reason": str(exc)},
            )
            error.__cause__ = exc
            return BindResult.failure(error)

    def convert(self, target: Any, raw: str, *, path: str = "") -> Any:
        """Como `try_convert`, mas levanta `ConversionError` em caso de falha."""
        return self.try_convert(target, raw, path=path).unwrap()

    # -----------------------------
    # Resolução de conversores
    # -----------------------------
    def _resolve(self, target: Any) -> Optional[Converter]:
        if target is Any or target is object:
            return lambda raw: raw
        if get_origin(target) is Literal:
            return self._literal_converter(get_args(target))
        if not isinstance(target, type) or get_origin(target) is not None:
            return None
        if target in self._converters:
            return self._converters[target]
        if issubclass(target, Enum):
            return lambda raw: _to_enum(target, raw)
        for base in target.__mro__[1:]:
            if base in self._converters and base is not object:
                return _narrowed(target, self._converters[base])
        return None

    def _literal_converter(self, choices: tuple) -> Converter:
        def convert(raw: str) -> Any:
            for choice in choices:
                candidate = self.try_convert(type(choice), raw)
                if candidate.ok and type(candidate.value) is type(choice) and candidate.value == choice:
                    return choice
            raise ValueError(f"{raw!r} não está entre {list(choices)!r}")

        return convert


def _narrowed(target: type, base_converter: Converter) -> Converter:
    """Converte com o conversor da base e entrega uma instância de `target`."""

    def convert(raw: str) -> Any:
        value = base_converter(raw)
        return value if isinstance(value, target) else target(value)

    return convert


def _to_enum(target: type, raw: str) -> Enum:
    text = raw.strip()
    for name, member in target.__members__.items():
        if name.lower() == text.lower():
            return member
    for member in target:
        if str(member.value) == text:
            return member
    raise ValueError(f"{raw!r} não é membro de {target.__name__}")


def _type_name(target: Any) -> str:
    return getattr(target, "__qualname__", None) or repr(target)
