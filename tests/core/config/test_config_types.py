# tests/core/config/test_config_types.py
"""
Testes dos tipos de configuração e da normalização de campos flexíveis.

Os testes asseguram que:
- `to_slice` é determinístico (escalar ≡ lista de um elemento)
- entradas de plugin separam argumentos (vargs) de campos de container
- imagem ausente assume o nome da entrada
- `Filter.is_empty` reconhece blocos `when` sem condições
"""

import pytest

try:
    from atlas_ci.core.config.types import (
        AuthConfig,
        Container,
        Filter,
        Plugin,
        Service,
        to_slice,
    )
    from atlas_ci.core.config.errors import InvalidSectionTypeError
except Exception as e:  # noqa: BLE001
    to_slice = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config types. Implement:\n"
            "- src/atlas_ci/core/config/types.py\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, []),
        ("master", ["master"]),
        (["master"], ["master"]),
        (("a", "b"), ["a", "b"]),
        (8, ["8"]),
        ([True, 1.5], ["true", "1.5"]),
        ({"A": "1", "DEBUG": True}, ["A=1", "DEBUG=true"]),
        ({"EMPTY": None, "B": 0}, ["EMPTY=", "B=0"]),
    ],
)
def test_to_slice(value, expected):
    _require_imports()
    assert to_slice(value) == expected


def test_to_slice_returns_new_list():
    _require_imports()
    src = ["a"]
    out = to_slice(src)
    out.append("b")
    assert src == ["a"]


def test_plugin_splits_vargs_from_container_fields():
    """
    Verifica que chaves de container e `when` não vazam para `vargs`.

    Invariantes:
        - Chaves desconhecidas são argumentos do plugin, sem interpretação
        - Campos de container continuam tipados no descritor
    """
    _require_imports()
    plugin = Plugin.from_dict(
        {
            "image": "plugins/s3",
            "pull": True,
            "environment": ["AWS_REGION=us-east-1"],
            "bucket": "artifacts",
            "source": "dist/**",
            "acl": {"public": False},
            "when": {"branch": "master"},
        },
        name="s3",
    )
    assert plugin.container.image == "plugins/s3"
    assert plugin.container.pull is True
    assert plugin.vargs == {"bucket": "artifacts", "source": "dist/**", "acl": {"public": False}}
    assert to_slice(plugin.filter.branch) == ["master"]


def test_image_defaults_to_entry_name():
    _require_imports()
    assert Plugin.from_dict({"channel": "dev"}, name="slack").container.image == "slack"
    assert Service.from_dict(None, name="redis").container.image == "redis"


def test_container_resource_and_auth_fields():
    _require_imports()
    c = Container.from_dict(
        {
            "image": "private/app",
            "mem_limit": "1024",
            "cpuset": "0-3",
            "oom_kill_disable": True,
            "auth_config": {"username": "u", "password": "p", "email": "e@x.io"},
        },
        name="app",
    )
    assert c.memory == 1024
    assert c.cpuset_cpus == "0-3"
    assert c.oom_kill_disable is True
    assert c.auth_config == AuthConfig(username="u", password="p", email="e@x.io")


def test_filter_is_empty():
    _require_imports()
    assert Filter().is_empty()
    assert Filter.from_dict(None).is_empty()
    assert Filter.from_dict({"branch": []}).is_empty()
    assert not Filter.from_dict({"branch": "master"}).is_empty()
    assert not Filter.from_dict({"matrix": {"GO": "1.9"}}).is_empty()
    assert Filter.from_dict({"success": True}).success == "true"


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, False),
        (True, True),
        ("false", False),
        ("False", False),
        ("no", False),
        ("true", True),
        ("yes", True),
    ],
)
def test_container_flags_parse_strings(raw, expected):
    _require_imports()
    c = Container.from_dict({"pull": raw, "privileged": raw, "oom_kill_disable": raw}, name="app")
    assert c.pull is expected
    assert c.privileged is expected
    assert c.oom_kill_disable is expected


@pytest.mark.parametrize("raw", ["maybe", 1, ["true"]])
def test_container_flag_rejects_unknown_values(raw):
    _require_imports()
    with pytest.raises(InvalidSectionTypeError):
        Container.from_dict({"privileged": raw}, name="app")
