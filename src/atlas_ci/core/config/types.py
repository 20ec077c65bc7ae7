# src/atlas_ci/core/config/types.py
"""
Tipos de configuração do pipeline do Atlas CI.

Este módulo define as estruturas tipadas produzidas a partir do arquivo
de pipeline já parseado (dict) e consumidas pelos construtores de nós
da árvore de execução.

Componentes principais:
    - to_slice       → normalização de campos flexíveis (escalar ou lista)
    - AuthConfig     → credenciais de registry
    - Container      → descritor genérico de invocação de container
    - Filter         → condições `when` de uma entrada
    - Build / Plugin / Service → entradas tipadas por seção
    - PipelineConfig → pipeline completo, seções em ordem de declaração

Princípios fundamentais:
    - Campos flexíveis são mantidos em forma bruta aqui; a forma canônica
      (lista ordenada de strings) é produzida na construção dos nós
    - Shapes incompatíveis são erro estrutural explícito
    - Nenhuma validação semântica (imagem vazia é aceita)

Limites explícitos:
    - Não lê arquivos (ver `loader`)
    - Não monta a árvore de nós
    - Não executa containers
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .errors import InvalidSectionTypeError


# Chaves reservadas ao descritor de container; qualquer outra chave de
# uma entrada de plugin vira argumento (vargs).
CONTAINER_KEYS = frozenset(
    {
        "image",
        "pull",
        "privileged",
        "environment",
        "entrypoint",
        "command",
        "volumes",
        "devices",
        "extra_hosts",
        "net",
        "pid",
        "dns",
        "auth_config",
        "mem_limit",
        "cpuset",
        "oom_kill_disable",
    }
)

FILTER_KEY = "when"

# Ordem canônica das seções no arquivo de pipeline.
SECTIONS = ("cache", "clone", "compose", "build", "publish", "deploy", "notify")


def _scalar_to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_slice(value: Any) -> List[str]:
    """
    Normaliza um campo flexível (escalar ou lista) em lista ordenada de strings.

    Regras:
        - None → []
        - escalar → [escalar]
        - lista/tupla → cada item convertido para string, ordem preservada
        - mapa (ex.: `environment: {KEY: value}`) → ["KEY=value", ...]
          na ordem de declaração; valor ausente (`KEY:`) → "KEY="

    Um escalar e uma lista de um elemento contendo o mesmo escalar
    produzem exatamente a mesma lista normalizada.

    Args:
        value (Any): Valor bruto do campo de configuração.

    Returns:
        List[str]: Nova lista, nunca compartilhada com o input.
    """
    if value is None:
        return []
    if isinstance(value, Mapping):
        return [f"{k}={_opt_str(v)}" for k, v in value.items()]
    if isinstance(value, (list, tuple)):
        return [_scalar_to_str(v) for v in value]
    return [_scalar_to_str(value)]


def _require_mapping(value: Any, *, path: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidSectionTypeError(
            f"'{path}' deve ser um mapa, recebido: {type(value).__name__}"
        )
    return dict(value)


def _str_list(value: Any, *, path: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise InvalidSectionTypeError(
            f"'{path}' deve ser uma lista, recebido: {type(value).__name__}"
        )
    return [_scalar_to_str(v) for v in value]


def _opt_str(value: Any) -> str:
    if value is None:
        return ""
    return _scalar_to_str(value)


_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0", ""})


def _flag(value: Any, *, path: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise InvalidSectionTypeError(
        f"'{path}' deve ser booleano, recebido: {value!r}"
    )


def _memory(value: Any, *, path: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise InvalidSectionTypeError(f"'{path}' deve ser inteiro, recebido: bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise InvalidSectionTypeError(
        f"'{path}' deve ser inteiro (bytes), recebido: {value!r}"
    )


@dataclass
class AuthConfig:
    """Credenciais de registry repassadas ao executor sem interpretação."""

    username: str = ""
    password: str = ""
    email: str = ""
    token: str = ""

    @classmethod
    def from_dict(cls, data: Any, *, path: str = "auth_config") -> "AuthConfig":
        raw = _require_mapping(data, path=path)
        return cls(
            username=_opt_str(raw.get("username")),
            password=_opt_str(raw.get("password")),
            email=_opt_str(raw.get("email")),
            token=_opt_str(raw.get("registry_token", raw.get("token"))),
        )


@dataclass
class Container:
    """
    Descritor genérico de uma invocação de container.

    Campos flexíveis (`environment`, `entrypoint`, `command`, `dns`)
    são mantidos na forma em que foram declarados.
    """

    image: str = ""
    pull: bool = False
    privileged: bool = False
    environment: Any = None
    entrypoint: Any = None
    command: Any = None
    volumes: List[str] = field(default_factory=list)
    devices: List[str] = field(default_factory=list)
    extra_hosts: List[str] = field(default_factory=list)
    net: str = ""
    pid: str = ""
    dns: Any = None
    auth_config: AuthConfig = field(default_factory=AuthConfig)
    memory: int = 0
    cpuset_cpus: str = ""
    oom_kill_disable: bool = False

    @classmethod
    def from_dict(cls, data: Any, *, name: str = "", path: str = "") -> "Container":
        path = path or name or "container"
        raw = _require_mapping(data, path=path)
        return cls(
            # imagem ausente assume o nome da entrada
            image=_opt_str(raw.get("image")) or name,
            pull=_flag(raw.get("pull"), path=f"{path}.pull"),
            privileged=_flag(raw.get("privileged"), path=f"{path}.privileged"),
            environment=raw.get("environment"),
            entrypoint=raw.get("entrypoint"),
            command=raw.get("command"),
            volumes=_str_list(raw.get("volumes"), path=f"{path}.volumes"),
            devices=_str_list(raw.get("devices"), path=f"{path}.devices"),
            extra_hosts=_str_list(raw.get("extra_hosts"), path=f"{path}.extra_hosts"),
            net=_opt_str(raw.get("net")),
            pid=_opt_str(raw.get("pid")),
            dns=raw.get("dns"),
            auth_config=AuthConfig.from_dict(raw.get("auth_config"), path=f"{path}.auth_config"),
            memory=_memory(raw.get("mem_limit"), path=f"{path}.mem_limit"),
            cpuset_cpus=_opt_str(raw.get("cpuset")),
            oom_kill_disable=_flag(raw.get("oom_kill_disable"), path=f"{path}.oom_kill_disable"),
        )


@dataclass
class Filter:
    """Condições `when` que precisam valer para que uma entrada execute."""

    repo: str = ""
    branch: Any = None
    event: Any = None
    success: str = ""
    failure: str = ""
    change: str = ""
    matrix: Dict[str, str] = field(default_factory=dict)
    environment: Any = None

    @classmethod
    def from_dict(cls, data: Any, *, path: str = "when") -> "Filter":
        raw = _require_mapping(data, path=path)
        matrix = _require_mapping(raw.get("matrix"), path=f"{path}.matrix")
        return cls(
            repo=_opt_str(raw.get("repo")),
            branch=raw.get("branch"),
            event=raw.get("event"),
            success=_opt_str(raw.get("success")),
            failure=_opt_str(raw.get("failure")),
            change=_opt_str(raw.get("change")),
            matrix={str(k): _scalar_to_str(v) for k, v in matrix.items()},
            environment=raw.get("environment"),
        )

    def is_empty(self) -> bool:
        return not (
            self.repo
            or to_slice(self.branch)
            or to_slice(self.event)
            or self.success
            or self.failure
            or self.change
            or self.matrix
            or to_slice(self.environment)
        )


@dataclass
class Build:
    """Entrada da seção `build`: container + comandos de shell."""

    container: Container = field(default_factory=Container)
    commands: List[str] = field(default_factory=list)
    filter: Filter = field(default_factory=Filter)

    @classmethod
    def from_dict(cls, data: Any, *, name: str = "", path: str = "build") -> "Build":
        raw = _require_mapping(data, path=path)
        return cls(
            container=Container.from_dict(raw, name=name, path=path),
            commands=to_slice(raw.get("commands")),
            filter=Filter.from_dict(raw.get(FILTER_KEY), path=f"{path}.{FILTER_KEY}"),
        )


@dataclass
class Plugin:
    """
    Entrada de plugin (`cache`, `clone`, `publish`, `deploy`, `notify`).

    Toda chave que não pertence ao container nem ao filtro é um
    argumento do plugin e vai para `vargs` sem interpretação.
    """

    container: Container = field(default_factory=Container)
    vargs: Dict[str, Any] = field(default_factory=dict)
    filter: Filter = field(default_factory=Filter)

    @classmethod
    def from_dict(cls, data: Any, *, name: str = "", path: str = "plugin") -> "Plugin":
        raw = _require_mapping(data, path=path)
        vargs = {
            k: v for k, v in raw.items() if k not in CONTAINER_KEYS and k != FILTER_KEY
        }
        return cls(
            container=Container.from_dict(raw, name=name, path=path),
            vargs=vargs,
            filter=Filter.from_dict(raw.get(FILTER_KEY), path=f"{path}.{FILTER_KEY}"),
        )


@dataclass
class Service:
    """Entrada da seção `compose`: container de serviço auxiliar."""

    container: Container = field(default_factory=Container)
    filter: Filter = field(default_factory=Filter)

    @classmethod
    def from_dict(cls, data: Any, *, name: str = "", path: str = "compose") -> "Service":
        raw = _require_mapping(data, path=path)
        return cls(
            container=Container.from_dict(raw, name=name, path=path),
            filter=Filter.from_dict(raw.get(FILTER_KEY), path=f"{path}.{FILTER_KEY}"),
        )


def _section(data: Dict[str, Any], key: str, factory: Any) -> Dict[str, Any]:
    raw = _require_mapping(data.get(key), path=key)
    out: Dict[str, Any] = {}
    for name, entry in raw.items():
        entry_name = str(name)
        out[entry_name] = factory(entry, name=entry_name, path=f"{key}.{entry_name}")
    return out


@dataclass
class PipelineConfig:
    """
    Pipeline completo, já tipado.

    Cada seção é um dicionário nome → entrada, preservando a ordem de
    declaração do arquivo (dicts Python preservam ordem de inserção).
    """

    cache: Dict[str, Plugin] = field(default_factory=dict)
    clone: Dict[str, Plugin] = field(default_factory=dict)
    compose: Dict[str, Service] = field(default_factory=dict)
    build: Dict[str, Build] = field(default_factory=dict)
    publish: Dict[str, Plugin] = field(default_factory=dict)
    deploy: Dict[str, Plugin] = field(default_factory=dict)
    notify: Dict[str, Plugin] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PipelineConfig":
        raw = _require_mapping(data, path="<root>")
        return cls(
            cache=_section(raw, "cache", Plugin.from_dict),
            clone=_section(raw, "clone", Plugin.from_dict),
            compose=_section(raw, "compose", Service.from_dict),
            build=_section(raw, "build", Build.from_dict),
            publish=_section(raw, "publish", Plugin.from_dict),
            deploy=_section(raw, "deploy", Plugin.from_dict),
            notify=_section(raw, "notify", Plugin.from_dict),
        )
