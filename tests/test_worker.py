import os

import pytest

from rpcbench.worker import (
    ROOT_PACKAGE,
    SEARCH_PATH_ENV,
    ByteBufCodec,
    abs_path,
    package_path,
)


def test_codec_name():
    assert str(ByteBufCodec()) == "bytebuffer"


@pytest.mark.parametrize("payload", [b"", b"\x00\x01\x02", bytearray(b"abc"), memoryview(b"xyz")])
def test_codec_round_trip(payload):
    codec = ByteBufCodec()
    encoded = codec.marshal(payload)
    assert encoded == bytes(payload)
    assert codec.unmarshal(encoded) == bytes(payload)


@pytest.mark.parametrize("value", ["text", 42, None, [1, 2]])
def test_codec_rejects_non_bytes(value):
    codec = ByteBufCodec()
    with pytest.raises(TypeError):
        codec.marshal(value)
    with pytest.raises(TypeError):
        codec.unmarshal(value)


def test_package_path_unset(monkeypatch):
    monkeypatch.delenv(SEARCH_PATH_ENV, raising=False)
    with pytest.raises(FileNotFoundError):
        package_path("some/pkg")


def test_package_path_found_in_second_root(tmp_path, monkeypatch):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    target = second / "src" / "some" / "pkg"
    target.mkdir(parents=True)
    monkeypatch.setenv(SEARCH_PATH_ENV, os.pathsep.join([str(first), str(second)]))
    assert package_path("some/pkg") == target


def test_package_path_skips_plain_files(tmp_path, monkeypatch):
    first = tmp_path / "first"
    (first / "src" / "some").mkdir(parents=True)
    (first / "src" / "some" / "pkg").write_text("not a directory")
    second = tmp_path / "second"
    target = second / "src" / "some" / "pkg"
    target.mkdir(parents=True)
    monkeypatch.setenv(SEARCH_PATH_ENV, os.pathsep.join([str(first), str(second)]))
    assert package_path("some/pkg") == target


def test_package_path_missing(tmp_path, monkeypatch):
    monkeypatch.setenv(SEARCH_PATH_ENV, str(tmp_path))
    with pytest.raises(FileNotFoundError):
        package_path("some/pkg")


def test_abs_path_keeps_absolute(tmp_path, monkeypatch):
    monkeypatch.delenv(SEARCH_PATH_ENV, raising=False)
    absolute = tmp_path / "ca.pem"
    assert abs_path(str(absolute)) == absolute


def test_abs_path_joins_relative(tmp_path, monkeypatch):
    root_dir = tmp_path / "src" / ROOT_PACKAGE
    root_dir.mkdir(parents=True)
    monkeypatch.setenv(SEARCH_PATH_ENV, str(tmp_path))
    assert abs_path("benchmark/server/testdata/ca.pem") == root_dir / "benchmark/server/testdata/ca.pem"


def test_abs_path_relative_without_root(monkeypatch):
    monkeypatch.delenv(SEARCH_PATH_ENV, raising=False)
    with pytest.raises(FileNotFoundError):
        abs_path("relative/file.pem")