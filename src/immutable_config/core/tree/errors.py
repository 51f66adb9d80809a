# src/immutable_config/core/tree/errors.py
"""
Exceções canônicas da árvore de configuração.

Este módulo define a hierarquia de exceções levantadas durante a
construção de uma árvore de configuração em memória (`ConfigSection`)
a partir de mapas Python já materializados.

As exceções aqui definidas representam **violações estruturais
explícitas** da árvore, e não falhas de binding.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções da árvore herdam de `TreeError`
    - Nenhuma exceção aqui representa erro de conversão ou construção

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do binder
"""


class TreeError(Exception):
    """
    Exceção base para erros estruturais da árvore de configuração.

    Esta hierarquia permite:
        - captura genérica de erros de construção da árvore
        - distinção clara entre falhas da árvore e falhas de binding
    """


class InvalidTreeRootTypeError(TreeError):
    """
    Exceção levantada quando o conteúdo raiz de uma camada de configuração
    não é um mapa (`Mapping`).

    Decisões arquiteturais:
        - A raiz da árvore é sempre uma seção com filhos nomeados
        - Listas ou valores escalares na raiz são inválidos

    Limites explícitos:
        - Não tenta normalizar ou encapsular estruturas inválidas
    """


class DuplicateTreeKeyError(TreeError):
    """
    Exceção levantada quando duas chaves de um mesmo nível colidem
    após a comparação case-insensitive.

    Exemplo de colisão:
        - {"Port": "80", "port": "8080"}

    Invariantes:
        - Cada filho de uma seção possui chave única (case-insensitive)
    """

