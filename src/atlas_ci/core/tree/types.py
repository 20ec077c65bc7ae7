# src/atlas_ci/core/tree/types.py
"""
Tipos canônicos da árvore de execução do Atlas CI.

Este módulo define o `NodeType`, a tag que identifica a categoria de
todo nó da árvore, e os grupos usados pelo executor para testar
pertinência com um único AND bit a bit.

Componentes principais:
    - NodeType        → flags de categoria (uma por tipo de nó)
    - CONTAINER_TYPES → todas as categorias executadas como container
    - PLUGIN_TYPES    → categorias montadas a partir de plugins
    - is_single / type_in → helpers de verificação e pertinência

Invariantes:
    - Cada nó concreto carrega exatamente uma flag
    - Os valores são potências de dois, estáveis e na ordem declarada

Limites explícitos:
    - Não constrói nós
    - Não contém lógica de execução
"""

from __future__ import annotations

from enum import Flag


class NodeType(Flag):
    """
    Categoria de um nó da árvore de execução.

    Os valores são potências de dois para que um consumidor possa testar
    pertinência a um conjunto de categorias com uma única operação:

        node.type & (NodeType.DEPLOY | NodeType.PUBLISH)

    Tipos definidos:
        - LIST: estágio ordenado de nós
        - FILTER: guarda condicional sobre um único nó
        - BUILD: passo de build com comandos de shell
        - CACHE / CLONE / DEPLOY / NOTIFY / PUBLISH: plugins
        - COMPOSE: serviço auxiliar (container genérico)

    Invariantes:
        - Nós de container recebem a categoria específica que representam,
          nunca uma flag genérica de "container"
    """
    LIST = 1 << 0
    FILTER = 1 << 1
    BUILD = 1 << 2
    CACHE = 1 << 3
    CLONE = 1 << 4
    DEPLOY = 1 << 5
    COMPOSE = 1 << 6
    NOTIFY = 1 << 7
    PUBLISH = 1 << 8


CONTAINER_TYPES = (
    NodeType.BUILD
    | NodeType.CACHE
    | NodeType.CLONE
    | NodeType.DEPLOY
    | NodeType.COMPOSE
    | NodeType.NOTIFY
    | NodeType.PUBLISH
)

PLUGIN_TYPES = (
    NodeType.CACHE
    | NodeType.CLONE
    | NodeType.DEPLOY
    | NodeType.NOTIFY
    | NodeType.PUBLISH
)


class InvalidNodeTypeError(ValueError):
    """
    Exceção levantada quando um construtor recebe uma tag inválida.

    Uma tag é inválida quando não possui exatamente uma flag ou quando
    a flag não pertence ao grupo aceito pelo construtor (ex.: `LIST`
    passado a um construtor de container).

    Esta exceção indica erro de programação do chamador, não erro do
    arquivo de pipeline.
    """


def is_single(node_type: NodeType) -> bool:
    """Indica se a tag possui exatamente uma flag."""
    value = node_type.value
    return value != 0 and value & (value - 1) == 0


def type_in(node_type: NodeType, group: NodeType) -> bool:
    """Indica se a tag pertence ao grupo (`group` pode combinar várias flags)."""
    return bool(node_type & group)


def require_single(node_type: NodeType, group: NodeType) -> NodeType:
    if not isinstance(node_type, NodeType) or not is_single(node_type):
        raise InvalidNodeTypeError(f"node type must be a single flag, got: {node_type!r}")
    if not type_in(node_type, group):
        raise InvalidNodeTypeError(f"node type {node_type.name} not allowed here")
    return node_type
