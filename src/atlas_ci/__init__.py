# src/atlas_ci/__init__.py
"""
Atlas CI — representação intermediária executável de pipelines de build.

Este pacote raiz define o namespace público do Atlas CI, que traduz uma
descrição declarativa de pipeline (passos, containers, guardas
condicionais) em uma árvore de nós tipados percorrida por um executor
externo.

Arquitetura em alto nível:
    - core.config   → carregamento e tipagem do arquivo de pipeline
    - core.tree     → NodeType, nós (List/Docker/Filter), montagem e travessia
    - core.pipeline → contexto de run consultado pelos filtros

Limites explícitos:
    - Não executa containers
    - Não valida viabilidade em runtime (imagem existente, rede válida)
"""
from .core.config import load_pipeline, load_pipeline_text
from .core.tree import NodeType, build_tree

__all__ = ["NodeType", "build_tree", "load_pipeline", "load_pipeline_text"]
