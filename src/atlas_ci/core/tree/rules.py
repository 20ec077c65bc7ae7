# src/atlas_ci/core/tree/rules.py
"""
Regras de montagem aplicadas a nós de container.

Uma regra é qualquer callable `(node) -> None` que levanta
`RuleViolationError` para rejeitar a árvore (ex.: repositórios não
confiáveis não podem rodar containers privilegiados). Regras recebem
apenas DockerNodes.
"""

from __future__ import annotations

from fnmatch import fnmatch
from typing import Callable

from atlas_ci.core.exceptions import RuleViolationError

from .nodes import DockerNode

RuleFunc = Callable[[DockerNode], None]


def disallow_privileged(node: DockerNode) -> None:
    if node.privileged:
        raise RuleViolationError(
            message="Container privilegiado não permitido",
            details={"image": node.image, "type": node.type.name},
            hint="Remova `privileged: true` ou marque o repositório como confiável",
        )


def disallow_volumes(node: DockerNode) -> None:
    if node.volumes or node.devices:
        raise RuleViolationError(
            message="Volumes e devices do host não permitidos",
            details={
                "image": node.image,
                "volumes": list(node.volumes),
                "devices": list(node.devices),
            },
        )


def allow_images(*patterns: str) -> RuleFunc:
    """Retorna uma regra que aceita apenas imagens casando algum padrão glob."""

    def rule(node: DockerNode) -> None:
        if not any(fnmatch(node.image, p) for p in patterns):
            raise RuleViolationError(
                message="Imagem não permitida",
                details={"image": node.image, "allowed": list(patterns)},
                hint="Use uma imagem da lista de imagens permitidas",
            )

    return rule
