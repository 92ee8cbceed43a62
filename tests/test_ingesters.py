import pytest

from docchat import ingesters
from docchat.errors import UnsupportedSourceError
from docchat.ingesters import (
    FileIngester,
    FolderIngester,
    get_ingester,
    ingest_paths,
    register_ingester,
)
from docchat.models import TextUpload
from docchat.protocols import Ingester
from docchat.utils import decode_text, looks_binary


@pytest.fixture
def docs_dir(tmp_path):
    (tmp_path / "a.txt").write_text("Alpha text.")
    (tmp_path / "b.md").write_text("# Beta\n\nMarkdown body.")
    (tmp_path / "c.json").write_text('{"key": "value"}')
    (tmp_path / "d.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00")
    (tmp_path / "nulls.txt").write_bytes(b"abc\x00def")
    (tmp_path / "empty.txt").write_text("")
    (tmp_path / "blank.md").write_text("   \n\n")
    (tmp_path / ".hidden").mkdir()
    (tmp_path / ".hidden" / "secret.txt").write_text("Hidden.")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "e.txt").write_text("Nested text.")
    return tmp_path


def test_folder_ingester_yields_text_files_in_order(docs_dir):
    uploads = list(FolderIngester().ingest(docs_dir))

    assert [u.title for u in uploads] == ["a", "b", "c", "sub/e"]


def test_json_is_kept_as_opaque_text(docs_dir):
    uploads = {u.title: u for u in FolderIngester().ingest(docs_dir)}
    assert uploads["c"].content == '{"key": "value"}'


def test_file_ingester_titles_by_file_stem(docs_dir):
    (upload,) = FileIngester().ingest(docs_dir / "b.md")

    assert upload.title == "b"
    assert upload.content == "# Beta\n\nMarkdown body."
    assert upload.path == str(docs_dir / "b.md")


def test_file_ingester_skips_binary_content(docs_dir):
    assert list(FileIngester().ingest(docs_dir / "nulls.txt")) == []


@pytest.mark.parametrize("name", ["empty.txt", "blank.md"])
def test_file_ingester_skips_blank_content(docs_dir, name):
    assert list(FileIngester().ingest(docs_dir / name)) == []


def test_blank_files_never_become_documents(docs_dir, store):
    for upload in FolderIngester().ingest(docs_dir):
        store.add_document(upload.title, upload.content)

    chunks = [c for doc in store.list_documents() for c in doc.chunks]
    assert chunks
    assert all(c.strip() for c in chunks)


def test_registered_ingester_is_picked(docs_dir, monkeypatch):
    class LogIngester:
        source_type = "log"

        def can_handle(self, source):
            return source.suffix == ".log"

        def ingest(self, source):
            yield TextUpload(title=source.stem, content=source.read_text(), path=str(source))

    monkeypatch.setattr(ingesters, "_INGESTERS", list(ingesters._INGESTERS))
    log_file = docs_dir / "server.log"
    log_file.write_text("Started. Stopped.")

    with pytest.raises(UnsupportedSourceError):
        get_ingester(log_file)

    custom = LogIngester()
    register_ingester(custom)

    assert get_ingester(log_file) is custom
    assert [u.title for u in ingest_paths([str(log_file)])] == ["server"]


def test_get_ingester_picks_by_source(docs_dir):
    assert isinstance(get_ingester(docs_dir / "a.txt"), FileIngester)
    assert isinstance(get_ingester(docs_dir), FolderIngester)


@pytest.mark.parametrize("name", ["d.png", "missing.txt"])
def test_get_ingester_rejects_unsupported(docs_dir, name):
    with pytest.raises(UnsupportedSourceError):
        get_ingester(docs_dir / name)


def test_ingest_paths_chains_sources(docs_dir):
    uploads = list(ingest_paths([str(docs_dir / "a.txt"), str(docs_dir / "sub")]))
    assert [u.title for u in uploads] == ["a", "e"]


def test_ingesters_satisfy_protocol():
    assert isinstance(FileIngester(), Ingester)
    assert isinstance(FolderIngester(), Ingester)


def test_binary_detection():
    assert looks_binary(b"\x00\x01\x02")
    assert looks_binary(bytes(range(1, 9)) * 10)
    assert not looks_binary(b"")
    assert not looks_binary("naïve café text".encode("utf-8"))
    assert decode_text("naïve".encode("utf-8")) == "naïve"
    assert decode_text(b"\x00") is None
