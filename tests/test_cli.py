import struct
from unittest import mock

import matplotlib

matplotlib.use("Agg")

from voxview.cli import list_resources, main  # noqa: E402


def _chunk(ident, content, children=b""):
    return ident + struct.pack("<II", len(content), len(children)) + content + children


def _vox_bytes():
    size = _chunk(b"SIZE", struct.pack("<3i", 2, 2, 2))
    voxels = _chunk(b"XYZI", struct.pack("<I", 2) + bytes([0, 0, 0, 1, 1, 1, 1, 2]))
    return b"VOX " + struct.pack("<I", 150) + _chunk(b"MAIN", b"", size + voxels)


def test_list_resources_sorted(tmp_path):
    for name in ("b.vox", "a.vox", "c.txt"):
        (tmp_path / name).write_bytes(b"")
    assert list_resources(tmp_path) == ["a.vox", "b.vox", "c.txt"]


def test_list_resources_empty(tmp_path):
    assert list_resources(tmp_path) == []


def test_missing_file_returns_error(tmp_path, capsys):
    (tmp_path / "model.vox").write_bytes(b"")
    assert main(["missing.vox", "--resources", str(tmp_path)]) == -1
    out = capsys.readouterr().out
    assert "Chose a file to load" in out
    assert "\tmodel.vox" in out


def test_prompts_for_name(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "nothing.vox")
    assert main(["--resources", str(tmp_path)]) == -1


def test_malformed_file_returns_error(tmp_path, capsys):
    (tmp_path / "bad.vox").write_bytes(b"VOX")
    assert main(["bad.vox", "--resources", str(tmp_path)]) == -1
    assert "Unable to open" in capsys.readouterr().err


def test_valid_file_is_shown(tmp_path):
    (tmp_path / "cube.vox").write_bytes(_vox_bytes())
    with mock.patch("matplotlib.pyplot.show") as show:
        assert main(["cube.vox", "--resources", str(tmp_path)]) == 0
    assert show.call_count == 1