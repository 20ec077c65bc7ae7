# src/atlas_ci/core/tree/filters.py
"""
Avaliação de FilterNodes contra a disposição de uma run.

Um filtro casa quando **todo campo não vazio** que ele carrega é
satisfeito pelo `RunContext`:

    - repo:        igualdade
    - branch:      pertinência (aceita padrões glob, ex.: `feature/*`)
    - event:       pertinência
    - matrix:      igualdade exata para todo eixo nomeado
    - success:     "true" executa em run passando; "false" não executa em
                   run passando
    - failure:     "true" executa em run falhando; "false" não executa em
                   run falhando
    - change:      "true" exige mudança de status; "false" exige status igual
    - environment: pertinência do ambiente de deploy

Sem o campo da própria disposição, a entrada executa a menos que o
campo oposto seja "true" (só `failure: "true"` → apenas em falha);
`success` e `failure` ambos "true" executam sempre.

Campos vazios são satisfeitos por vacuidade. Quando o filtro não casa,
o nó guardado é pulado: não executa e não é reportado como falha.

Limites explícitos:
    - Não executa o nó guardado
    - Não altera o RunContext
"""

from __future__ import annotations

from fnmatch import fnmatch
from typing import List

from atlas_ci.core.pipeline.context import RunContext

from .nodes import FilterNode


def _is_true(value: str) -> bool:
    return value.strip().lower() in {"true", "yes", "on", "1"}


def _match_any(value: str, patterns: List[str]) -> bool:
    return any(fnmatch(value, p) for p in patterns)


def match_repo(node: FilterNode, ctx: RunContext) -> bool:
    return not node.repo or node.repo == ctx.repo


def match_branch(node: FilterNode, ctx: RunContext) -> bool:
    return not node.branch or _match_any(ctx.branch, node.branch)


def match_event(node: FilterNode, ctx: RunContext) -> bool:
    return not node.event or ctx.event in node.event


def match_matrix(node: FilterNode, ctx: RunContext) -> bool:
    return all(ctx.matrix.get(axis) == value for axis, value in node.matrix.items())


def match_environment(node: FilterNode, ctx: RunContext) -> bool:
    return not node.environment or ctx.environment in node.environment


def _allows(own: str, other: str) -> bool:
    # campo da própria disposição decide; senão, só um "true" do lado oposto exclui
    if own:
        return _is_true(own)
    return not (other and _is_true(other))


def match_status(node: FilterNode, ctx: RunContext) -> bool:
    if ctx.is_failure():
        allowed = _allows(node.failure, node.success)
    else:
        allowed = _allows(node.success, node.failure)
    if not allowed:
        return False
    if node.change and _is_true(node.change) != ctx.changed():
        return False
    return True


def filter_matches(node: FilterNode, ctx: RunContext) -> bool:
    """Indica se o nó guardado por `node` deve executar nesta run."""
    return (
        match_repo(node, ctx)
        and match_branch(node, ctx)
        and match_event(node, ctx)
        and match_matrix(node, ctx)
        and match_status(node, ctx)
        and match_environment(node, ctx)
    )
