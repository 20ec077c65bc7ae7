# src/atlas_ci/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Atlas CI.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento e a tipagem estrutural do arquivo de pipeline.

As exceções aqui definidas representam **violações estruturais
explícitas** do arquivo de pipeline, e não erros de execução.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de montagem da árvore ou de execução

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende da árvore de nós nem do executor
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do pipeline.

    Todas as exceções levantadas durante carregamento e tipagem do
    arquivo de pipeline devem herdar desta classe, permitindo captura
    genérica de falhas estruturais.
    """


class PipelineNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de pipeline não é encontrado
    no caminho especificado.

    Limites explícitos:
        - Não tenta localizar arquivos alternativos (ex.: `.drone.yml`)
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de pipeline
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz do pipeline
    não é um dicionário (`dict`).

    Listas ou valores escalares no root são inválidos.
    """


class InvalidSectionTypeError(ConfigError):
    """
    Exceção levantada quando uma seção ou entrada do pipeline possui
    um shape incompatível com o esperado.

    Exemplos:
        - `build: "go test"` (seção deve ser um mapa nome → entrada)
        - `build: {test: [1, 2]}` (entrada deve ser um mapa)
        - `when: "master"` (filtro deve ser um mapa)

    Limites explícitos:
        - Não valida semântica (imagem existente, rede válida, ...)
        - Não tenta encapsular estruturas inválidas
    """
