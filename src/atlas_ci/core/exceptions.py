"""
Atlas CI — Canonical Exceptions (v1)

Este módulo define exceções tipadas da árvore de execução do Atlas CI.

Objetivo:
- Permitir que a montagem e a travessia da árvore levantem exceções semânticas
- Carregar dados estruturados (serializáveis) sobre o nó envolvido
- Evitar ValueError/RuntimeError genéricos em guardrails da árvore

Regras:
- Erros estruturais do arquivo de pipeline pertencem a `core.config.errors`.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AtlasException(Exception):
    """Base class para exceções internas do Atlas CI.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Árvore de nós
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MissingFilterChildError(AtlasException):
    """FilterNode sem nó filho: guarda sem ação guardada."""


@dataclass(frozen=True)
class RuleViolationError(AtlasException):
    """Nó de container rejeitado por uma regra de montagem."""
