# src/atlas_ci/core/pipeline/__init__.py
"""
# Pipeline — Atlas CI

Este pacote define o **contexto de run** consultado pelos filtros da
árvore e usado como coletor de eventos estruturados.

## Componentes

- **context**
  - `RunContext`: disposição da run (repo, branch, evento, status, matrix)
    e log estruturado de eventos e warnings

## Limites Explícitos

- Não monta a árvore de nós
- Não executa containers
"""

from .context import RunContext, STATUS_FAILURE, STATUS_SUCCESS

__all__ = ["RunContext", "STATUS_FAILURE", "STATUS_SUCCESS"]
