# src/atlas_ci/core/tree/builder.py
"""
Montagem da árvore de execução a partir da configuração tipada.

Este módulo transforma um `PipelineConfig` em uma `Tree`: um ListNode
raiz cujas entradas são, na ordem de execução:

    cache → clone → compose → build → publish → deploy → notify

Dentro de cada seção, as entradas mantêm a ordem de declaração do
arquivo. Entradas com bloco `when` não vazio são envolvidas em um
FilterNode que guarda o nó de container.

Decisões arquiteturais:
    - Tag por seção é fixa (ver `SECTION_TYPES`)
    - Regras de montagem são aplicadas a todo nó de container, antes de
      qualquer filtro, e a primeira violação interrompe a montagem
    - Com `ctx`, cada nó anexado gera um evento estruturado

Limites explícitos:
    - Não avalia filtros
    - Não executa containers
    - Não valida semântica (imagens, redes)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Iterator, Optional, Sequence, Tuple

from atlas_ci.core.config.types import SECTIONS, Filter, PipelineConfig, Service
from atlas_ci.core.pipeline.context import RunContext

from .nodes import (
    DockerNode,
    ListNode,
    Node,
    new_build_node,
    new_docker_node,
    new_filter_node,
    new_plugin_node,
)
from .rules import RuleFunc
from .types import NodeType


SECTION_TYPES: Dict[str, NodeType] = {
    "cache": NodeType.CACHE,
    "clone": NodeType.CLONE,
    "compose": NodeType.COMPOSE,
    "build": NodeType.BUILD,
    "publish": NodeType.PUBLISH,
    "deploy": NodeType.DEPLOY,
    "notify": NodeType.NOTIFY,
}


@dataclass
class Tree(ListNode):
    """Estágio raiz do pipeline, com a configuração que o originou."""

    config: Optional[PipelineConfig] = None


def _new_service_node(node_type: NodeType, service: Service) -> DockerNode:
    return new_docker_node(node_type, service.container)


SECTION_FACTORIES: Dict[str, Callable[[NodeType, Any], DockerNode]] = {
    "cache": new_plugin_node,
    "clone": new_plugin_node,
    "compose": _new_service_node,
    "build": new_build_node,
    "publish": new_plugin_node,
    "deploy": new_plugin_node,
    "notify": new_plugin_node,
}


def _section_entries(config: PipelineConfig) -> Iterator[Tuple[str, str, Any]]:
    for section in SECTIONS:
        for name, entry in getattr(config, section).items():
            yield section, name, entry


def _guard(node: DockerNode, when: Filter) -> Node:
    if when.is_empty():
        return node
    return new_filter_node(when, node)


def build_tree(
    config: PipelineConfig,
    *,
    rules: Optional[Sequence[RuleFunc]] = None,
    ctx: Optional[RunContext] = None,
) -> Tree:
    """
    Monta a árvore de execução de um pipeline.

    Args:
        config (PipelineConfig): Configuração tipada do pipeline.
        rules (Optional[Sequence[RuleFunc]]): Regras aplicadas a cada nó de container.
        ctx (Optional[RunContext]): Coletor opcional de eventos de montagem.

    Returns:
        Tree: ListNode raiz com os nós em ordem de execução.

    Raises:
        RuleViolationError: Se alguma regra rejeitar um nó.
    """
    tree = Tree(config=config)

    for section, name, entry in _section_entries(config):
        step_id = f"{section}.{name}"
        node = SECTION_FACTORIES[section](SECTION_TYPES[section], entry)
        node = replace(node, name=step_id)

        for rule in rules or ():
            rule(node)

        guarded = _guard(node, entry.filter)
        tree.append(guarded)

        if ctx is not None:
            ctx.log(
                step_id=step_id,
                level="DEBUG",
                message="node appended",
                node_type=node.type.name,
                image=node.image,
                filtered=guarded is not node,
            )

    if ctx is not None and not len(tree):
        ctx.add_warning(step_id="<root>", message="pipeline sem passos")

    return tree
