"""
Core do immutable_config.

Este pacote reúne a implementação canônica do binder, independente de
qualquer formato de origem de configuração.

Componentes principais:
    - tree    → contrato de nó, árvore em memória e sobreposição de camadas
    - binding → descritores de tipo, conversão escalar e binding recursivo

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado
    - Binding dirigido pelo tipo declarado, nunca pelo conteúdo do nó
    - Objetos produzidos são construídos apenas via construtor

Limites explícitos:
    - Não faz parsing de arquivos ou variáveis de ambiente
    - Não depende de CLI ou serviços externos
"""
