# src/atlas_ci/core/pipeline/context.py
"""
Contexto de uma run de pipeline.

Este módulo define o `RunContext`, a estrutura que descreve a disposição
da run corrente (repositório, branch, evento, status, eixo de matrix,
ambiente de deploy) e que coleta eventos de log estruturados durante a
montagem e a travessia da árvore de nós.

Princípios fundamentais:
    - Isolamento por execução (cada run possui seu próprio contexto)
    - Logs são eventos estruturados, não texto livre
    - Ausência de estado global compartilhado

Invariantes:
    - Logs sempre incluem `run_id` e `step_id`
    - Warnings são agrupados por `step_id`

Limites explícitos:
    - Não executa containers
    - Não avalia filtros (ver `atlas_ci.core.tree.filters`)
    - Não persiste eventos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


STATUS_SUCCESS = "success"
STATUS_FAILURE = "failure"


@dataclass
class RunContext:
    """
    Disposição da run corrente e coletor de eventos estruturados.

    Campos:
        - run_id / created_at: identidade da execução
        - repo: identificador do repositório (ex.: `octocat/hello-world`)
        - branch: branch sendo construída
        - event: evento que disparou a run (`push`, `pull_request`, `tag`, `deployment`)
        - status: status corrente da run (`success` até o primeiro passo falhar)
        - prev_status: status da run anterior do mesmo branch (vazio se desconhecido)
        - matrix: valores dos eixos de matrix desta run
        - environment: ambiente alvo de deploy (vazio se não houver)

    Decisões arquiteturais:
        - O executor atualiza `status` conforme passos falham
        - Filtros consultam o contexto, nunca o modificam

    Limites explícitos:
        - Não decide políticas de execução
        - Não valida semântica dos valores
    """
    run_id: str
    created_at: datetime
    repo: str = ""
    branch: str = ""
    event: str = ""
    status: str = STATUS_SUCCESS
    prev_status: str = ""
    matrix: Dict[str, str] = field(default_factory=dict)
    environment: str = ""
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Disposição da run
    # -----------------------------
    def is_success(self) -> bool:
        return self.status == STATUS_SUCCESS

    def is_failure(self) -> bool:
        return self.status == STATUS_FAILURE

    def changed(self) -> bool:
        """Indica se o status mudou em relação à run anterior."""
        if not self.prev_status:
            return True
        return self.prev_status != self.status

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)
