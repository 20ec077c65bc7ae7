# src/atlas_ci/core/config/__init__.py

"""
Camada de configuração do Atlas CI.

Este pacote contém as estruturas e utilitários responsáveis por carregar
o arquivo declarativo de pipeline e convertê-lo em objetos tipados
(`Container`, `Build`, `Plugin`, `Service`, `Filter`).

Responsabilidades do pacote:
    - Carregamento de arquivos de pipeline (YAML/JSON)
    - Tipagem estrutural por seção, preservando a ordem de declaração
    - Normalização de campos flexíveis (escalar ou lista)

Limites explícitos:
    - Não valida semântica de domínio
    - Não monta nem executa a árvore de nós
"""

from .errors import (
    ConfigError,
    InvalidConfigRootTypeError,
    InvalidSectionTypeError,
    PipelineNotFoundError,
    UnsupportedConfigFormatError,
)
from .loader import load_pipeline, load_pipeline_text
from .types import (
    AuthConfig,
    Build,
    Container,
    Filter,
    PipelineConfig,
    Plugin,
    Service,
    to_slice,
)

__all__ = [
    "AuthConfig",
    "Build",
    "ConfigError",
    "Container",
    "Filter",
    "InvalidConfigRootTypeError",
    "InvalidSectionTypeError",
    "PipelineConfig",
    "PipelineNotFoundError",
    "Plugin",
    "Service",
    "UnsupportedConfigFormatError",
    "load_pipeline",
    "load_pipeline_text",
    "to_slice",
]
