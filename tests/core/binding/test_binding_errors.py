# tests/core/binding/test_binding_errors.py
"""
Testes da hierarquia de exceções do binder e do resultado explícito.

Os testes asseguram que:
- todas as falhas herdam de `BindingError`
- apenas `MissingRequiredValueError` é recuperável
- erros são serializáveis e identificam caminho e tipo
- `BindResult` carrega exatamente um de valor ou erro
"""

import json

import pytest

from immutable_config.core.binding.errors import (
    BindingError,
    ConstructionError,
    ConversionError,
    DuplicateDescriptorError,
    DuplicateKeyError,
    MissingRequiredValueError,
    NoConstructorError,
)
from immutable_config.core.binding.result import BindResult


@pytest.mark.parametrize(
    "error_cls, recoverable",
    [
        (ConversionError, False),
        (NoConstructorError, False),
        (ConstructionError, False),
        (DuplicateKeyError, False),
        (DuplicateDescriptorError, False),
        (MissingRequiredValueError, True),
    ],
)
def test_hierarchy_and_recoverability(error_cls, recoverable):
    error = error_cls("boom", path="a:b", target="int")
    assert isinstance(error, BindingError)
    assert error.recoverable is recoverable


def test_error_payload_is_serializable():
    error = ConversionError(
        "Valor inválido", path="server:port", target="int", details={"raw": "http"}, hint="Use um número."
    )
    payload = error.to_dict()

    assert payload == {
        "message": "Valor inválido",
        "path": "server:port",
        "target": "int",
        "details": {"raw": "http"},
        "hint": "Use um número.",
        "type": "ConversionError",
        "recoverable": False,
    }
    json.dumps(payload)


def test_error_str_includes_location():
    assert str(MissingRequiredValueError("faltou", path="db:host", target="str")) == (
        "faltou (path=db:host, target=str)"
    )
    assert str(BindingError("falhou")) == "falhou (path=<root>)"


def test_bind_result_success_and_failure():
    ok = BindResult.success(0)
    assert ok.ok and ok.value == 0 and not ok.recoverable
    assert ok.unwrap() == 0

    failed = BindResult.failure(MissingRequiredValueError("faltou"))
    assert not failed.ok and failed.recoverable
    with pytest.raises(MissingRequiredValueError):
        failed.unwrap()
