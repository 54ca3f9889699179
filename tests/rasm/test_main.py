import logging
import os
import subprocess
import sys

import pytest

import rasm
from rasm.__main__ import main
from rasm.cli import default_output

from .test_manifest import HALVES
from .utils import RED, read_rgba

logger = logging.getLogger(__name__)


@pytest.fixture
def manifest_file(tmp_path) -> str:
    path = tmp_path / "halves.rasm.toml"
    path.write_text(HALVES)
    return os.fspath(path)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("poster.rasm.toml", "poster"),
        ("dir/poster.toml", "dir/poster"),
        ("poster.cfg", "poster"),
    ],
)
def test_default_output(path: str, expected: str) -> None:
    assert default_output(path) == expected


def test_render(manifest_file: str, tmp_path) -> None:
    assert main(["render", manifest_file]) is None
    data = read_rgba(os.fspath(tmp_path / "halves.png"))
    assert (data[0, 0] == RED).all()


def test_render_output(manifest_file: str, tmp_path) -> None:
    output = os.fspath(tmp_path / "custom")
    assert main(["-v", "render", manifest_file, "-o", output]) is None
    assert os.path.exists(output + ".png")


def test_show(manifest_file: str) -> None:
    assert main(["show", manifest_file]) is None


def test_render_error(tmp_path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text('format = "gif"\nsize = [1, 1]\n')
    assert main(["render", os.fspath(path)]) == 1
    assert main(["render", os.fspath(tmp_path / "missing.toml")]) == 1


@pytest.mark.parametrize("argv", [["-h"], ["--version"], []])
def test_main_exit(argv) -> None:
    with pytest.raises(SystemExit):
        main(argv)


def _run_module(*args: str) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    source = os.path.dirname(os.path.dirname(os.path.abspath(rasm.__file__)))
    env["PYTHONPATH"] = os.pathsep.join(
        x for x in (source, env.get("PYTHONPATH")) if x
    )
    return subprocess.run(
        [sys.executable, "-m", "rasm"] + list(args),
        capture_output=True,
        text=True,
        env=env,
    )


def test_module_exit_status(tmp_path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text('format = "gif"\nsize = [1, 1]\n')
    result = _run_module("render", os.fspath(path))
    assert result.returncode == 1
    assert "gif" in result.stderr


def test_module_render_quiet(manifest_file: str, tmp_path) -> None:
    result = _run_module("render", manifest_file)
    assert result.returncode == 0
    assert result.stdout == ""
    assert result.stderr == ""
    assert os.path.exists(tmp_path / "halves.png")


def test_render_quiet(manifest_file: str, caplog) -> None:
    assert main(["render", manifest_file]) is None
    assert caplog.records == []
