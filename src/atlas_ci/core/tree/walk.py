# src/atlas_ci/core/tree/walk.py
"""
Travessia da árvore de execução.

Este módulo documenta, em código, o contrato que o executor segue ao
percorrer a árvore: despachar pela tag de cada nó, expandir listas em
ordem e avaliar a guarda de cada FilterNode antes de descer ao filho.

Componentes principais:
    - walk          → todos os nós em pré-ordem (inclusive listas e filtros)
    - iter_runnable → nós de container que executariam para uma run

Invariantes:
    - A ordem produzida é exatamente a ordem de `append`
    - Um FilterNode sem filho interrompe a travessia com erro explícito

Limites explícitos:
    - Não executa containers
    - Não decide paralelismo entre entradas de uma lista
"""

from __future__ import annotations

from typing import Iterator

from atlas_ci.core.exceptions import MissingFilterChildError
from atlas_ci.core.pipeline.context import RunContext

from .filters import filter_matches
from .nodes import DockerNode, Node
from .types import CONTAINER_TYPES, NodeType, type_in


def _child(node: Node) -> Node:
    child = getattr(node, "node", None)
    if child is None:
        raise MissingFilterChildError(
            message="FilterNode without child node",
            details={"repo": getattr(node, "repo", "")},
        )
    return child


def walk(node: Node) -> Iterator[Node]:
    """Percorre a árvore em pré-ordem, na ordem de execução."""
    yield node

    if node.type is NodeType.LIST:
        for child in node.nodes:  # type: ignore[attr-defined]
            yield from walk(child)

    elif node.type is NodeType.FILTER:
        yield from walk(_child(node))


def iter_runnable(node: Node, ctx: RunContext) -> Iterator[DockerNode]:
    """
    Produz os nós de container que executariam para a run descrita em `ctx`.

    Filtros que não casam têm o filho pulado (não é falha); cada pulo é
    registrado como evento estruturado em `ctx`.

    Raises:
        MissingFilterChildError: Se algum FilterNode não possuir filho.
    """
    if node.type is NodeType.LIST:
        for child in node.nodes:  # type: ignore[attr-defined]
            yield from iter_runnable(child, ctx)

    elif node.type is NodeType.FILTER:
        child = _child(node)
        if not filter_matches(node, ctx):  # type: ignore[arg-type]
            ctx.log(
                step_id=getattr(child, "name", "") or child.type.name,
                level="INFO",
                message="skipped by filter",
                node_type=child.type.name,
            )
            return
        yield from iter_runnable(child, ctx)

    elif type_in(node.type, CONTAINER_TYPES):
        yield node  # type: ignore[misc]
