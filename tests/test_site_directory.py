import json

import pytest

from datafort.directory import SiteDirectory
from datafort.errors import DirectoryError, DuplicatePathError, SiteNotFoundError
from datafort.models.metadata import DirectoryMetadata
from datafort.models.site import Site


def _build_directory() -> SiteDirectory:
    directory = SiteDirectory(DirectoryMetadata(title="Sites"))
    root = Site(name="root", title="Root")
    directory.add(root)
    child = Site(name="child", title="Child", url="http://x/child")
    root.attach(child)
    directory.add(child)
    directory.add(Site(name="other", title="Other"))
    return directory


def test_add_registers_roots_and_index():
    directory = _build_directory()

    assert [site.name for site in directory.roots()] == ["root", "other"]
    assert directory.paths() == ["root", "child.root", "other"]
    assert len(directory) == 3
    assert "child.root" in directory
    assert "child" not in directory
    assert directory.metadata.title == "Sites"
    assert directory.metadata.splash is None


def test_roots_view_is_read_only():
    directory = _build_directory()

    roots = directory.roots()
    assert isinstance(roots, tuple)
    assert directory.roots() == roots


def test_find_returns_same_instance():
    directory = _build_directory()

    first = directory.find("child.root")
    second = directory.find("child.root")
    assert first is second
    assert first.parent is directory.find("root")


def test_find_missing_path_raises_not_found():
    directory = _build_directory()

    with pytest.raises(SiteNotFoundError) as excinfo:
        directory.find("missing.root")

    assert excinfo.value.path == "missing.root"
    assert isinstance(excinfo.value, KeyError)
    assert isinstance(excinfo.value, DirectoryError)
    assert "missing.root" in str(excinfo.value)


def test_add_rejects_duplicate_path():
    directory = _build_directory()

    with pytest.raises(DuplicatePathError) as excinfo:
        directory.add(Site(name="other"))

    assert excinfo.value.path == "other"
    assert excinfo.value.line_number is None
    assert [site.name for site in directory.roots()] == ["root", "other"]


def test_walk_is_pre_order():
    directory = _build_directory()

    assert [site.path for site in directory.walk()] == ["root", "child.root", "other"]


def test_dump_and_json_projection():
    directory = _build_directory()

    dump = directory.dump()
    assert [entry["name"] for entry in dump] == ["root", "other"]
    assert dump[0]["children"][0]["path"] == "child.root"
    assert dump[0]["children"][0]["url"] == "http://x/child"

    assert json.loads(directory.to_json()) == dump


def test_empty_directory():
    directory = SiteDirectory()

    assert directory.roots() == ()
    assert len(directory) == 0
    assert directory.dump() == []
    assert directory.metadata == DirectoryMetadata()
