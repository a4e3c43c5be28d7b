"""Tests for reading the input file (infra/source_reader.py)."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from spanish_checker.exceptions import FileReadError
from spanish_checker.infra.source_reader import read_source


class TestReadSource:
    def test_reads_utf8(self, source_file: Callable[..., str]) -> None:
        assert read_source(source_file("El niño comió piña.")) == "El niño comió piña."

    def test_accepts_path_objects(self, source_file: Callable[..., str]) -> None:
        assert read_source(Path(source_file("hola"))) == "hola"

    def test_empty_file(self, source_file: Callable[..., str]) -> None:
        assert read_source(source_file("")) == ""

    def test_text_is_not_altered(self, source_file: Callable[..., str]) -> None:
        text = "  línea uno\r\nlínea dos\n\n"
        assert read_source(source_file(text)) == text

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError, match="Error leyendo archivo"):
            read_source(tmp_path / "no-existe.txt")

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError):
            read_source(tmp_path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.txt"
        path.write_bytes("año".encode("latin-1"))
        with pytest.raises(FileReadError, match="Error leyendo archivo") as exc_info:
            read_source(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
