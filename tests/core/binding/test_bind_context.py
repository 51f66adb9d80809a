# tests/core/binding/test_bind_context.py
"""
Testes de logging estruturado e coleta de warnings no BindContext.

Os testes asseguram que:
- eventos de log são registrados de forma estruturada
- o binder registra início, conclusão, falha e uso de defaults
- warnings são agrupados por caminho de configuração

Limites explícitos:
    - Não valida persistência dos eventos
    - Não valida ordenação temporal dos timestamps
"""

import pytest

try:
    from immutable_config import ConfigSection, MissingRequiredValueError, bind
    from immutable_config.core.binding.context import BindContext
except Exception as e:  # noqa: BLE001
    BindContext = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None

from tests.fixtures.models import App, PointHolder, StrictPoint


def _require_imports():
    """Falha explicitamente quando a API de contexto não pode ser importada."""
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing BindContext API. Implement:\n"
            "- src/immutable_config/core/binding/context.py (log, add_warning, events, warnings)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_structured_log_event(bind_ctx):
    """
    Verifica que o contexto registra eventos estruturados com campos extras.
    """
    _require_imports()
    bind_ctx.log(level="INFO", message="hello", path="a:b", foo=1)

    ev = bind_ctx.events[-1]
    assert ev["bind_id"] == "bind-test-001"
    assert ev["level"] == "INFO"
    assert ev["message"] == "hello"
    assert ev["path"] == "a:b"
    assert ev["foo"] == 1
    assert "timestamp" in ev


def test_warning_collection(bind_ctx):
    _require_imports()
    bind_ctx.add_warning(path="database", message="incomplete")
    bind_ctx.add_warning(path="database", message="again")
    assert bind_ctx.warnings == {"database": ["incomplete", "again"]}


def test_successful_bind_logs_lifecycle_and_defaults(bind_ctx):
    """
    Verifica os eventos emitidos em um binding bem-sucedido com defaults.
    """
    _require_imports()
    root = ConfigSection.from_mapping({"name": "billing", "database": {"host": "db"}})
    bind(App, root, context=bind_ctx)

    messages = [ev["message"] for ev in bind_ctx.events]
    assert messages[0] == "binding.started"
    assert messages[-1] == "binding.completed"

    defaults = {ev["parameter"] for ev in bind_ctx.find("binding.default_used")}
    assert {"port", "timeout"} <= defaults
    assert [ev["path"] for ev in bind_ctx.find("binding.optional_none")] == ["replicas"]
    assert bind_ctx.warnings == {}


def test_incomplete_section_replaced_by_default_emits_warning(bind_ctx):
    """
    Uma seção presente porém incompleta, substituída pelo default, gera warning.
    """
    _require_imports()
    bind(PointHolder, ConfigSection.from_mapping({"point": {"y": "3"}}), context=bind_ctx)

    assert list(bind_ctx.warnings) == ["point"]
    event = bind_ctx.find("binding.default_used")[-1]
    assert event["parameter"] == "point"
    assert event["target"] == "PointHolder"


def test_failed_bind_logs_error_payload(bind_ctx):
    _require_imports()
    with pytest.raises(MissingRequiredValueError):
        bind(StrictPoint, ConfigSection.from_mapping({"x": "5"}), context=bind_ctx)

    (failed,) = bind_ctx.find("binding.failed")
    assert failed["level"] == "error"
    assert failed["path"] == "y"
    assert failed["error"]["type"] == "MissingRequiredValueError"
    assert failed["error"]["recoverable"] is True
    assert not bind_ctx.find("binding.completed")


def test_contexts_are_isolated():
    _require_imports()
    first, second = BindContext(), BindContext()
    bind(StrictPoint, ConfigSection.from_mapping({"x": "1", "y": "2"}), context=first)

    assert first.bind_id != second.bind_id
    assert first.events and not second.events
