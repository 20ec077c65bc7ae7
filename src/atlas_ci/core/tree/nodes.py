# src/atlas_ci/core/tree/nodes.py
"""
Nós da árvore de execução do Atlas CI.

Este módulo define o contrato `Node` e as três variantes concretas da
árvore que o executor percorre:

    - ListNode   → sequência ordenada de nós (um estágio do pipeline)
    - DockerNode → qualquer passo executado como container
    - FilterNode → guarda condicional sobre exatamente um nó

Todos os passos de container (build, clone, deploy, compose, notify,
publish, cache e plugins arbitrários) compartilham o mesmo shape,
"rode este container com esta configuração", e por isso colapsam em
um único tipo concreto diferenciado pela tag e por qual dos dois campos
de especialização está populado:

    - `commands` → apenas nós montados a partir de `Build`
    - `vargs`    → apenas nós montados a partir de `Plugin`

Invariantes:
    - Todo nó reporta exatamente uma tag (`NodeType`)
    - A tag é atribuída na construção e nunca muda
    - `ListNode.append` é o único mutador da árvore
    - Um FilterNode sempre possui nó filho

Limites explícitos:
    - Não valida semântica (imagem vazia é aceita)
    - Não avalia filtros
    - Não executa containers
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Protocol, runtime_checkable

from atlas_ci.core.config.types import AuthConfig, Build, Container, Filter, Plugin, to_slice
from atlas_ci.core.exceptions import MissingFilterChildError

from .types import CONTAINER_TYPES, NodeType, require_single


@runtime_checkable
class Node(Protocol):
    """
    Contrato canônico de um nó da árvore.

    Qualquer objeto capaz de reportar sua própria tag é um nó; o executor
    despacha pela tag sem conhecer antecipadamente todos os tipos concretos.
    """

    @property
    def type(self) -> NodeType:
        ...


@dataclass
class ListNode:
    """
    Sequência ordenada de nós, executados na ordem em que foram anexados.

    Os nós anexados passam a pertencer à lista (não são copiados).
    Não existe API de remoção ou reordenação.
    """

    nodes: List[Node] = field(default_factory=list)

    @property
    def type(self) -> NodeType:
        return NodeType.LIST

    def append(self, *nodes: Node) -> None:
        self.nodes.extend(nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)


def new_list_node() -> ListNode:
    return ListNode()


@dataclass(frozen=True)
class DockerNode:
    """
    Descritor completo de uma invocação de container.

    Campos:
        - type: categoria do passo (BUILD, CLONE, DEPLOY, ...)
        - image / pull / privileged
        - environment / entrypoint / command / dns: listas canônicas
        - commands: comandos de shell executados dentro do container (BUILD)
        - volumes / devices / extra_hosts
        - net / pid: modos de rede e de namespace de processos
        - auth_config: credenciais de registry
        - memory / cpuset_cpus / oom_kill_disable: limites de recurso
        - vargs: argumentos arbitrários do plugin
        - name: identificador do passo (`seção.entrada`), atribuído na montagem

    `commands` e `vargs` são mutuamente exclusivos por convenção dos
    construtores, não por restrição estrutural do tipo.
    """

    type: NodeType
    image: str = ""
    pull: bool = False
    privileged: bool = False
    environment: List[str] = field(default_factory=list)
    entrypoint: List[str] = field(default_factory=list)
    command: List[str] = field(default_factory=list)
    commands: List[str] = field(default_factory=list)
    volumes: List[str] = field(default_factory=list)
    devices: List[str] = field(default_factory=list)
    extra_hosts: List[str] = field(default_factory=list)
    net: str = ""
    pid: str = ""
    dns: List[str] = field(default_factory=list)
    auth_config: AuthConfig = field(default_factory=AuthConfig)
    memory: int = 0
    cpuset_cpus: str = ""
    oom_kill_disable: bool = False
    vargs: Dict[str, Any] = field(default_factory=dict)
    name: str = ""

    def __post_init__(self) -> None:
        require_single(self.type, CONTAINER_TYPES)


def new_docker_node(node_type: NodeType, c: Container) -> DockerNode:
    """
    Constrói um DockerNode a partir de um descritor genérico de container.

    Campos flexíveis são normalizados em listas de strings; listas simples
    são copiadas; `vargs` e `commands` ficam vazios.
    """
    return DockerNode(
        type=node_type,
        image=c.image,
        pull=c.pull,
        privileged=c.privileged,
        environment=to_slice(c.environment),
        entrypoint=to_slice(c.entrypoint),
        command=to_slice(c.command),
        volumes=list(c.volumes),
        devices=list(c.devices),
        extra_hosts=list(c.extra_hosts),
        net=c.net,
        pid=c.pid,
        dns=to_slice(c.dns),
        auth_config=replace(c.auth_config),
        memory=c.memory,
        cpuset_cpus=c.cpuset_cpus,
        oom_kill_disable=c.oom_kill_disable,
    )


def new_plugin_node(node_type: NodeType, p: Plugin) -> DockerNode:
    """Único caminho que popula `vargs`."""
    node = new_docker_node(node_type, p.container)
    return replace(node, vargs=dict(p.vargs))


def new_build_node(node_type: NodeType, b: Build) -> DockerNode:
    """Único caminho que popula `commands`."""
    node = new_docker_node(node_type, b.container)
    return replace(node, commands=list(b.commands))


@dataclass(frozen=True)
class FilterNode:
    """
    Guarda condicional: o nó filho só executa se as condições valerem.

    O filho é obrigatório e atribuído uma única vez, na construção.
    Pode ser qualquer nó, inclusive um ListNode guardando um estágio inteiro.
    """

    node: Node
    repo: str = ""
    branch: List[str] = field(default_factory=list)
    event: List[str] = field(default_factory=list)
    success: str = ""
    failure: str = ""
    change: str = ""
    matrix: Dict[str, str] = field(default_factory=dict)
    environment: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.node is None:
            raise MissingFilterChildError(
                message="FilterNode requires a child node",
                details={"repo": self.repo, "branch": list(self.branch)},
                hint="Use new_filter_node(filter, node) to attach the guarded node",
            )

    @property
    def type(self) -> NodeType:
        return NodeType.FILTER


def new_filter_node(f: Filter, node: Node) -> FilterNode:
    """
    Constrói as condições do filtro e anexa o nó guardado em um único passo.

    Raises:
        MissingFilterChildError: Se `node` for None.
    """
    return FilterNode(
        node=node,
        repo=f.repo,
        branch=to_slice(f.branch),
        event=to_slice(f.event),
        success=f.success,
        failure=f.failure,
        change=f.change,
        matrix=dict(f.matrix),
        environment=to_slice(f.environment),
    )
