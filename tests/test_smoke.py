# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do immutable_config.

Estes testes garantem apenas que o pacote é importável e que a superfície
pública esperada existe. Não validam comportamento de binding.
"""


def test_smoke():
    """
    Smoke test mínimo do repositório.

    Valida que o pacote raiz pode ser importado e expõe o ponto de entrada.
    """
    import immutable_config

    assert callable(immutable_config.bind)
    assert immutable_config.__version__
