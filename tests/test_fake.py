"""Tests for FakeFS lookup, creation, reading and writing."""

import pytest

from fakefs import ErrorKind, FakeFS


class TestEndToEnd:
    """Walk through a typical session on an empty filesystem."""

    def test_docs_note_session(self):
        fs = FakeFS()

        assert fs.create_dir("/", "docs").success
        assert fs.create_file("/docs", "note.txt", "hi").success
        assert fs.read_file("/docs/note.txt").value == "hi"

        result = fs.write_file("/docs/note.txt", " there", append=True)
        assert result.success
        assert fs.read_file("/docs/note.txt").value == "hi there"

        listing = fs.list_dir("/docs")
        assert listing.success
        assert [node.name for node in listing.value] == ["note.txt"]
        assert listing.value[0] is fs.resolve("/docs/note.txt").value


class TestResolve:
    """Test resolve() and the boolean queries built on it."""

    def test_root_always_resolves(self):
        fs = FakeFS()

        result = fs.resolve("/")
        assert result.success
        assert result.value is fs.root
        assert result.value.name == "/"
        assert result.value.is_dir

    def test_created_file_resolves(self):
        """A created file exists and resolves to a file node of that name."""
        fs = FakeFS()
        fs.create_dir("/", "docs")

        fs.create_file("/docs", "a.txt")

        assert fs.exists("/docs/a.txt")
        node = fs.resolve("/docs/a.txt").value
        assert node.name == "a.txt"
        assert node.is_file
        assert node.parent_path == "/docs"

    def test_missing_segment(self):
        """A missing segment is reported by name."""
        fs = FakeFS()

        result = fs.resolve("/missing/deeper")
        assert not result.success
        assert result.error is ErrorKind.NOT_FOUND
        assert result.cause == "missing"

    def test_missing_last_segment(self):
        fs = FakeFS()
        fs.create_dir("/", "docs")

        result = fs.resolve("/docs/nope.txt")
        assert result.error is ErrorKind.NOT_FOUND
        assert result.cause == "nope.txt"

    def test_file_in_the_middle(self):
        """Descending through a file is NOT_A_DIRECTORY citing the file."""
        fs = FakeFS()
        fs.create_file("/", "f.txt", "x")

        result = fs.resolve("/f.txt/inner")
        assert result.error is ErrorKind.NOT_A_DIRECTORY
        assert result.cause == "f.txt"

    def test_exists_isfile_isdir(self):
        fs = FakeFS()
        fs.create_dir("/", "docs")
        fs.create_file("/docs", "a.txt")

        assert fs.exists("/docs") is True
        assert fs.exists("/docs/") is True
        assert fs.exists("/nope") is False

        assert fs.isfile("/docs/a.txt") is True
        assert fs.isfile("/docs") is False
        assert fs.isfile("/nope") is False

        assert fs.isdir("/docs") is True
        assert fs.isdir("/") is True
        assert fs.isdir("/docs/a.txt") is False
        assert fs.isdir("/docs/a.txt/x") is False

    def test_messy_paths_resolve(self):
        fs = FakeFS()
        fs.create_dir("/", "docs")
        fs.create_file("/docs", "a.txt")

        assert fs.isfile("  //docs/./../docs//a.txt  ")

    def test_trailing_space_before_separator(self):
        """'/docs /' names the stored directory '/docs'."""
        fs = FakeFS()
        fs.create_dir("/", "docs ")

        assert fs.resolve("/docs /").value.name == "docs"
        assert fs.isdir("/docs /")


class TestCreate:
    """Test create_file() and create_dir()."""

    def test_create_file_default_content(self):
        fs = FakeFS()

        node = fs.create_file("/", "empty.txt").value
        assert node.content == ""

    def test_create_dir_is_empty(self):
        fs = FakeFS()

        fs.create_dir("/", "empty")

        assert fs.list_dir("/empty").value == []

    def test_children_keep_insertion_order(self):
        fs = FakeFS()
        for name in ["b", "a", "c"]:
            fs.create_file("/", name)

        assert [n.name for n in fs.list_dir("/").value] == ["b", "a", "c"]

    def test_invalid_name(self):
        fs = FakeFS()

        result = fs.create_file("/", "a/b")
        assert result.error is ErrorKind.INVALID_NAME
        assert result.cause == "a/b"

        result = fs.create_dir("/", "..")
        assert result.error is ErrorKind.INVALID_NAME

    def test_name_is_stripped(self):
        """Surrounding whitespace is not stored in the name."""
        fs = FakeFS()

        node = fs.create_file("/", "  padded.txt  ").value
        assert node.name == "padded.txt"
        assert fs.isfile("/padded.txt")

    def test_already_exists(self):
        """Names are unique within a directory, whatever the kind."""
        fs = FakeFS()
        fs.create_dir("/", "docs")
        fs.create_file("/docs", "note.txt")

        result = fs.create_file("/docs", "note.txt")
        assert result.error is ErrorKind.ALREADY_EXISTS
        assert result.cause == "/docs/note.txt"

        result = fs.create_dir("//docs/", "note.txt")
        assert result.error is ErrorKind.ALREADY_EXISTS
        assert result.cause == "/docs/note.txt"

    def test_missing_parent(self):
        fs = FakeFS()

        result = fs.create_file("/nope", "a.txt")
        assert result.error is ErrorKind.NOT_FOUND
        assert result.cause == "/nope"

    def test_parent_is_file(self):
        fs = FakeFS()
        fs.create_file("/", "f.txt")

        result = fs.create_dir("/f.txt", "sub")
        assert result.error is ErrorKind.NOT_A_DIRECTORY
        assert result.cause == "/f.txt"

    def test_same_name_in_different_directories(self):
        fs = FakeFS()
        fs.create_dir("/", "a")
        fs.create_dir("/", "b")

        assert fs.create_file("/a", "x").success
        assert fs.create_file("/b", "x").success

    def test_bytes_content(self):
        fs = FakeFS()

        fs.create_file("/", "data.bin", b"\x00\x01")

        assert fs.read_file("/data.bin").value == b"\x00\x01"


class TestReadAndList:
    """Test read_file() and list_dir() failures."""

    def test_read_directory(self):
        fs = FakeFS()
        fs.create_dir("/", "docs")

        result = fs.read_file("/docs")
        assert result.error is ErrorKind.NOT_A_FILE
        assert result.cause == "/docs"

    def test_read_missing(self):
        fs = FakeFS()

        result = fs.read_file("nope.txt")
        assert result.error is ErrorKind.NOT_FOUND
        assert result.cause == "/nope.txt"

    def test_list_file(self):
        fs = FakeFS()
        fs.create_file("/", "f.txt")

        result = fs.list_dir("/f.txt")
        assert result.error is ErrorKind.NOT_A_DIRECTORY
        assert result.cause == "/f.txt"

    def test_list_missing(self):
        fs = FakeFS()

        result = fs.list_dir("/nope")
        assert result.error is ErrorKind.NOT_FOUND
        assert result.cause == "/nope"

    def test_list_defaults_to_cwd(self):
        fs = FakeFS()
        fs.create_file("/", "a.txt")

        assert [n.name for n in fs.list_dir().value] == ["a.txt"]


class TestWrite:
    """Test write_file()."""

    def test_overwrite(self):
        fs = FakeFS()
        fs.create_file("/", "a.txt", "old")

        node = fs.write_file("/a.txt", "new").value

        assert node.content == "new"
        assert fs.read_file("/a.txt").value == "new"

    def test_append(self):
        fs = FakeFS()
        fs.create_file("/", "a.txt", "ab")

        fs.write_file("/a.txt", "cd", append=True)

        assert fs.read_file("/a.txt").value == "abcd"

    def test_append_bytes(self):
        fs = FakeFS()
        fs.write_file("/a.bin", b"ab")

        fs.write_file("/a.bin", b"cd", append=True)

        assert fs.read_file("/a.bin").value == b"abcd"

    def test_append_mixed_types_raises(self):
        fs = FakeFS()
        fs.create_file("/", "a.txt", "text")

        with pytest.raises(TypeError, match="Expected str, got bytes"):
            fs.write_file("/a.txt", b"bytes", append=True)

    def test_write_creates_missing_file(self):
        fs = FakeFS()
        fs.create_dir("/", "docs")

        result = fs.write_file("/docs/new.txt", "hello")

        assert result.success
        assert result.value.name == "new.txt"
        assert fs.read_file("/docs/new.txt").value == "hello"

    def test_append_to_missing_file_creates_it(self):
        fs = FakeFS()

        fs.write_file("/log.txt", "line", append=True)

        assert fs.read_file("/log.txt").value == "line"

    def test_write_directory(self):
        fs = FakeFS()
        fs.create_dir("/", "docs")

        result = fs.write_file("/docs", "x")
        assert result.error is ErrorKind.NOT_A_FILE
        assert result.cause == "/docs"

    def test_write_root(self):
        fs = FakeFS()

        assert fs.write_file("/", "x").error is ErrorKind.NOT_A_FILE

    def test_write_with_missing_parent(self):
        fs = FakeFS()

        result = fs.write_file("/nope/a.txt", "x")
        assert result.error is ErrorKind.NOT_FOUND
        assert result.cause == "/nope"
