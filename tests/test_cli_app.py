import pytest

import cli_app


def test_cli_builds_dumps_and_queries(collection_dir, tmp_path):
    output = tmp_path / "out"
    output.mkdir()
    dump_file = output / "index.txt"

    cli_app.main([
        "--collection", str(collection_dir / "collection.txt"),
        "--dump", str(dump_file),
        "--query", "cat",
        "--stats",
        "--sample", "3",
    ])

    lines = dump_file.read_text(encoding="utf-8").splitlines()
    words = [line.split(" ", 1)[0] for line in lines]
    assert words == sorted(words)
    assert "cat a.txt (0.100000)" in lines


def test_cli_search_returns_ranked_tuples(config, collection_dir):
    cli = cli_app.WordIndexCLI(config=config)
    assert cli.load_collection(str(collection_dir / "collection.txt"))
    results = cli.search("dog cat", top_k=0)
    assert [doc for doc, _ in results] == ["a.txt", "b.txt"]


def test_cli_missing_collection_exits(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli_app.main(["--collection", str(tmp_path / "missing.txt"), "--query", "x"])
    assert excinfo.value.code == 1


def test_cli_search_before_loading(config):
    cli = cli_app.WordIndexCLI(config=config)
    assert cli.search("cat") == []
    assert cli.dump_index() is False
