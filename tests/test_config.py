from pathlib import Path

import pytest

from avsim.core.errors import ConfigError
from avsim.core.session_service import ScanSession
from avsim.infra.config import AppConfig, load_config


def test_defaults_without_file(tmp_path: Path) -> None:
    assert load_config(None) == AppConfig()
    assert load_config(tmp_path / "missing.yaml") == AppConfig()


def test_load_values(tmp_path: Path) -> None:
    path = tmp_path / "avsim.yaml"
    path.write_text(
        "log_level: debug\nlenient_sizes: true\nsignatures:\n  - trojan\n  - worm\nreport_dir: out\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.log_level == "DEBUG"
    assert config.lenient_sizes is True
    assert config.signatures == ("trojan", "worm")
    assert config.report_dir == "out"
    assert ScanSession(config.signatures).store.list() == ["worm", "trojan"]


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "avsim.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == AppConfig()


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "unknown_key: 1\n",
        "log_level: LOUD\n",
        "lenient_sizes: maybe\n",
        "signatures: [a, a]\n",
        "signatures: [1, 2]\n",
        "signatures: [a\n",
        "1: a\nfoo: b\n",
    ],
)
def test_invalid_config(tmp_path: Path, content: str) -> None:
    path = tmp_path / "avsim.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_unreadable_path_is_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path)
    binary = tmp_path / "avsim.yaml"
    binary.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(ConfigError):
        load_config(binary)
