from firebase_storage.storage.prefixer import PathPrefixer


def test_empty_prefix_is_noop():
    prefixer = PathPrefixer("")
    assert prefixer.prefix_path("test/test-file.txt") == "test/test-file.txt"
    assert prefixer.strip_prefix("test/test-file.txt") == "test/test-file.txt"


def test_prefix_gets_single_trailing_separator():
    assert PathPrefixer("uploads").prefix == "uploads/"
    assert PathPrefixer("uploads/").prefix == "uploads/"
    assert PathPrefixer("uploads///").prefix == "uploads/"
    assert PathPrefixer("/").prefix == ""


def test_prefix_path():
    prefixer = PathPrefixer("uploads")
    assert prefixer.prefix_path("test/test-file.txt") == "uploads/test/test-file.txt"
    assert prefixer.prefix_path("") == "uploads/"


def test_strip_prefix_leaves_foreign_keys_untouched():
    prefixer = PathPrefixer("uploads")
    assert prefixer.strip_prefix("uploads/a.txt") == "a.txt"
    assert prefixer.strip_prefix("other/a.txt") == "other/a.txt"
    assert prefixer.strip_prefix("uploadsa.txt") == "uploadsa.txt"


def test_strip_recovers_applied_path():
    paths = ["", "a", "a/b/c.txt", "dir/", "/leading", "./dot/../x", "uploads/nested"]
    for prefix in ["", "uploads", "env/prod/"]:
        prefixer = PathPrefixer(prefix)
        for path in paths:
            assert prefixer.strip_prefix(prefixer.prefix_path(path)) == path
