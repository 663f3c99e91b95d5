from pathlib import Path
from unittest.mock import patch

import pytest

from app.processor.exceptions import UploadStoreError
from app.processor.file_store import FileStore, sanitize_filename, stored_filename


class TestSanitizeFilename:
    @pytest.mark.parametrize(
        "original, expected",
        [
            ("certificato.pdf", "certificato.pdf"),
            ("attestato corso  base.pdf", "attestato_corso_base.pdf"),
            ("../../etc/passwd", "passwd"),
            ("C:\\Users\\mario\\visita medica.jpg", "visita_medica.jpg"),
            ("", "upload"),
            ("..", "upload"),
            ("dir/", "upload"),
        ],
    )
    def test_sanitize(self, original: str, expected: str) -> None:
        assert sanitize_filename(original) == expected


class TestStoredFilename:
    def test_first_attempt_has_no_counter(self) -> None:
        assert stored_filename("a b.pdf", 1700000000000) == "1700000000000_a_b.pdf"

    def test_collision_adds_counter(self) -> None:
        assert stored_filename("a.pdf", 1700000000000, 2) == "1700000000000_2_a.pdf"


class TestFileStore:
    def test_save_writes_bytes_and_describes_document(self, tmp_path: Path) -> None:
        store = FileStore(tmp_path / "uploads")
        document = store.save(b"%PDF-data", "attestato rls.pdf", "application/pdf")

        assert document.stored_path.parent == tmp_path / "uploads"
        assert document.stored_path.read_bytes() == b"%PDF-data"
        assert document.stored_name.endswith("_attestato_rls.pdf")
        assert document.original_name == "attestato rls.pdf"
        assert document.content_type == "application/pdf"

    def test_save_creates_missing_directory(self, tmp_path: Path) -> None:
        root = tmp_path / "a" / "b"
        FileStore(root).save(b"x", "x.txt")
        assert root.is_dir()

    def test_same_name_same_millisecond_never_overwrites(self, tmp_path: Path) -> None:
        store = FileStore(tmp_path)
        with patch("app.processor.file_store.time.time", return_value=1700000000.0):
            first = store.save(b"first", "doc.pdf")
            second = store.save(b"second", "doc.pdf")

        assert first.stored_name == "1700000000000_doc.pdf"
        assert second.stored_name == "1700000000000_1_doc.pdf"
        assert first.stored_path.read_bytes() == b"first"
        assert second.stored_path.read_bytes() == b"second"

    def test_empty_upload_is_stored(self, tmp_path: Path) -> None:
        document = FileStore(tmp_path).save(b"", "vuoto.pdf")
        assert document.stored_path.read_bytes() == b""

    def test_unwritable_root_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("file")
        with pytest.raises(UploadStoreError, match="Cannot store upload"):
            FileStore(blocker).save(b"x", "x.pdf")

    def test_root_property(self, tmp_path: Path) -> None:
        assert FileStore(tmp_path).root == tmp_path
