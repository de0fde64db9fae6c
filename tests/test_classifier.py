"""Tests for the classifier component."""

from unittest.mock import MagicMock

import pytest

from fsmaint.classifier import FileClassifier
from fsmaint.fs import FileIdentity, FileKind, FileSystem, StatResult


class TestFileClassifier:
    """Tests for FileClassifier."""

    @pytest.fixture
    def classifier(self):
        """Create a classifier over the real file system."""
        return FileClassifier()

    def test_default_file_system(self, classifier):
        """Test that a real FileSystem is used by default."""
        assert isinstance(classifier.fs, FileSystem)

    def test_classify_kinds(self, classifier, tmp_path):
        """Test classification of files, directories and missing paths."""
        file_path = tmp_path / "a.txt"
        file_path.write_text("x")

        assert classifier.classify(str(file_path)) == FileKind.REGULAR
        assert classifier.classify(str(tmp_path)) == FileKind.DIRECTORY
        assert classifier.classify(str(tmp_path / "missing")) == FileKind.UNKNOWN

    def test_broken_symlink_is_unknown(self, classifier, tmp_path):
        """Test that a dangling link is not an error."""
        link = tmp_path / "dangling"
        link.symlink_to(tmp_path / "nowhere")

        assert classifier.classify(str(link)) == FileKind.UNKNOWN
        assert not classifier.is_directory(str(link))
        assert not classifier.exists(str(link))

    def test_identity_missing_is_none(self, classifier, tmp_path):
        """Test identity of a missing path."""
        assert classifier.identity(str(tmp_path / "missing")) is None

    def test_same_file_different_spelling(self, classifier, tmp_path, monkeypatch):
        """Test that relative spellings of one file are the same file."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "s.txt").write_text("x")

        assert classifier.same_file("s.txt", "./s.txt")
        assert classifier.same_file("s.txt", str(tmp_path / "s.txt"))

    def test_same_file_distinct_files(self, classifier, tmp_path):
        """Test that two files with equal content are different files."""
        (tmp_path / "a").write_text("same")
        (tmp_path / "b").write_text("same")

        assert not classifier.same_file(str(tmp_path / "a"), str(tmp_path / "b"))

    def test_same_file_requires_both(self, classifier, tmp_path):
        """Test that a missing path is never the same file."""
        (tmp_path / "a").write_text("x")
        assert not classifier.same_file(str(tmp_path / "a"), str(tmp_path / "missing"))
        assert not classifier.same_file(str(tmp_path / "x"), str(tmp_path / "missing"))

    def test_no_caching(self):
        """Test that every query goes to the file system."""
        fs = MagicMock()
        fs.stat.side_effect = [
            StatResult(kind=FileKind.REGULAR, device=1, inode=2),
            StatResult(kind=FileKind.DIRECTORY, device=1, inode=2),
        ]
        classifier = FileClassifier(fs)

        assert classifier.classify("p") == FileKind.REGULAR
        assert classifier.classify("p") == FileKind.DIRECTORY
        assert fs.stat.call_count == 2

    def test_same_device_required(self):
        """Test that equal inodes on different devices differ."""
        fs = MagicMock()
        fs.stat.side_effect = lambda path: {
            "a": StatResult(kind=FileKind.REGULAR, device=1, inode=7),
            "b": StatResult(kind=FileKind.REGULAR, device=2, inode=7),
        }[path]
        classifier = FileClassifier(fs)

        assert classifier.identity("a") == FileIdentity(1, 7)
        assert not classifier.same_file("a", "b")
