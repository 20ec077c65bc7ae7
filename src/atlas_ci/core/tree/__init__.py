# src/atlas_ci/core/tree/__init__.py
"""
# Tree — Atlas CI

Este pacote define a **representação intermediária executável** de um
pipeline: uma árvore de nós tipados que um executor externo percorre
para lançar containers, aplicar cache, publicar artefatos e notificar.

## Componentes

- **types**
  - `NodeType`: flags de categoria (LIST, FILTER, BUILD, CACHE, CLONE,
    DEPLOY, COMPOSE, NOTIFY, PUBLISH)
  - `CONTAINER_TYPES`, `PLUGIN_TYPES`: grupos para testes de pertinência

- **nodes**
  - `Node` (Protocol): todo nó reporta sua tag
  - `ListNode`, `DockerNode`, `FilterNode` e seus construtores

- **builder**
  - `build_tree`: PipelineConfig → Tree (ListNode raiz)

- **filters** / **walk**
  - contrato de avaliação de filtros e de travessia usado pelo executor

- **rules**
  - regras de montagem aplicadas a nós de container

## Limites Explícitos

- Não executa containers
- Não valida viabilidade em runtime (imagem existente, rede válida)
"""

from .builder import Tree, build_tree
from .filters import filter_matches
from .nodes import (
    DockerNode,
    FilterNode,
    ListNode,
    Node,
    new_build_node,
    new_docker_node,
    new_filter_node,
    new_list_node,
    new_plugin_node,
)
from .rules import RuleFunc, allow_images, disallow_privileged, disallow_volumes
from .types import (
    CONTAINER_TYPES,
    PLUGIN_TYPES,
    InvalidNodeTypeError,
    NodeType,
    is_single,
    type_in,
)
from .walk import iter_runnable, walk

__all__ = [
    "CONTAINER_TYPES",
    "DockerNode",
    "FilterNode",
    "InvalidNodeTypeError",
    "ListNode",
    "Node",
    "NodeType",
    "PLUGIN_TYPES",
    "RuleFunc",
    "Tree",
    "allow_images",
    "build_tree",
    "disallow_privileged",
    "disallow_volumes",
    "filter_matches",
    "is_single",
    "iter_runnable",
    "new_build_node",
    "new_docker_node",
    "new_filter_node",
    "new_list_node",
    "new_plugin_node",
    "type_in",
    "walk",
]
