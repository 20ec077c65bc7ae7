# src/atlas_ci/core/__init__.py
"""
Core do Atlas CI.

Componentes principais:
    - config   → arquivo de pipeline → configuração tipada
    - tree     → árvore de execução (tags, nós, montagem, travessia)
    - pipeline → contexto de run e log estruturado de eventos

Princípios fundamentais:
    - A montagem da árvore é pura: mesma configuração, mesma árvore
    - Erros estruturais são explícitos e tipados
    - Nenhuma execução acontece neste pacote
"""
