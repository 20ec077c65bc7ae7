# src/atlas_ci/core/config/loader.py
"""
Loader canônico do arquivo de pipeline do Atlas CI.

Este módulo é responsável por carregar o arquivo declarativo de pipeline
e convertê-lo na configuração tipada (`PipelineConfig`) consumida pela
montagem da árvore de nós.

Responsabilidades do módulo:
    - Carregar arquivos de pipeline em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Delegar a tipagem das seções a `PipelineConfig.from_dict`

Princípios fundamentais:
    - Erros estruturais são tratados como falhas fatais
    - A mesma entrada sempre produz a mesma configuração tipada

Limites explícitos:
    - Não valida semântica (imagens, redes, volumes)
    - Não monta a árvore de nós
    - Não aplica defaults de plugins além do nome da entrada
"""

from pathlib import Path
from typing import Any, Dict
import json

import yaml  # PyYAML

from .errors import (
    InvalidConfigRootTypeError,
    PipelineNotFoundError,
    UnsupportedConfigFormatError,
)
from .types import PipelineConfig


def _ensure_root(data: Any) -> Dict[str, Any]:
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Pipeline root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de pipeline e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Decisões arquiteturais:
        - O arquivo deve existir no momento do carregamento
        - O conteúdo raiz deve ser um dicionário (`dict`)
        - Arquivos vazios são interpretados como pipeline vazio

    Args:
        path (Path): Caminho para o arquivo de pipeline.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        PipelineNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise PipelineNotFoundError(f"Arquivo de pipeline não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    return _ensure_root(data)


def load_pipeline_text(text: str) -> PipelineConfig:
    """Parseia um pipeline YAML em memória e retorna a configuração tipada."""
    return PipelineConfig.from_dict(_ensure_root(yaml.safe_load(text)))


def load_pipeline(path: str) -> PipelineConfig:
    """
    Carrega o arquivo de pipeline e retorna a configuração tipada.

    Args:
        path (str): Caminho do arquivo (`.yml`, `.yaml` ou `.json`).

    Returns:
        PipelineConfig: Seções tipadas em ordem de declaração.

    Raises:
        PipelineNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        InvalidSectionTypeError: Se alguma seção possuir shape inválido.
    """
    return PipelineConfig.from_dict(_load_file(Path(path)))
