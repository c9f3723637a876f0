import pytest

from WordIndex.build_inverted_index import InvertedIndexBuilder
from WordIndex.preprocessing.document import Document


def test_term_frequency_is_occurrences_over_word_count(config, pet_documents):
    builder = InvertedIndexBuilder(config=config)
    tree = builder.build_from_documents(pet_documents)

    assert builder.document_count == 2
    assert tree.find("cat").documents.get("docA").term_frequency == pytest.approx(2 / 3)
    assert tree.find("dog").documents.get("docA").term_frequency == pytest.approx(1 / 3)
    assert tree.find("dog").documents.get("docB").term_frequency == pytest.approx(1.0)


def test_discarded_tokens_still_count_toward_word_count(config):
    builder = InvertedIndexBuilder(config=config)
    tree = builder.build_from_documents([Document("d", text="word . ,")])
    assert tree.find("word").documents.get("d").term_frequency == pytest.approx(1 / 3)
    assert [node.word for node in tree] == ["word"]


def test_empty_document_counts_but_adds_no_words(config):
    builder = InvertedIndexBuilder(config=config)
    builder.build_from_documents([Document("empty", text="  \n"), Document("d", text="x")])
    assert builder.document_count == 2
    assert [node.word for node in builder.tree] == ["x"]


def test_build_from_collection_skips_unreadable(config, collection_dir):
    builder = InvertedIndexBuilder(config=config)
    tree = builder.build_from_collection(str(collection_dir / "collection.txt"))

    assert builder.document_count == 2
    assert builder.skipped == ["missing.txt"]
    assert [d.id for d in builder.documents] == ["a.txt", "b.txt"]
    assert tree.find("dog").documents.get("b.txt").term_frequency == pytest.approx(1.0)
    assert tree.find("barked").documents.get("a.txt").term_frequency == pytest.approx(1 / 10)
    assert "loudly" in tree
    assert "loudly." not in tree


def test_missing_collection_file_raises(config, tmp_path):
    builder = InvertedIndexBuilder(config=config)
    with pytest.raises(OSError):
        builder.build_from_collection(str(tmp_path / "nope.txt"))


def test_save_dump_writes_sorted_lines(config, pet_documents, tmp_path):
    builder = InvertedIndexBuilder(config=config)
    builder.build_from_documents(pet_documents)
    output = tmp_path / "invertedIndex.txt"

    builder.save_dump(str(output))

    assert output.read_text(encoding="utf-8") == (
        "cat docA (0.666667)\n"
        "dog docA (0.333333) docB (1.000000)\n"
    )


def test_statistics(config, pet_documents):
    builder = InvertedIndexBuilder(config=config)
    builder.build_from_documents(pet_documents)
    assert builder.statistics() == {
        "words": 2,
        "documents": 2,
        "skipped_documents": 0,
        "tree_height": 2,
    }


def test_build_from_collection_opens_paths_relative_to_working_directory(config, tmp_path, monkeypatch):
    data = tmp_path / "data"
    data.mkdir()
    (data / "f1.txt").write_text("hello world", encoding="utf-8")
    (data / "collection.txt").write_text("data/f1.txt\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    builder = InvertedIndexBuilder(config=config)
    tree = builder.build_from_collection("data/collection.txt")

    assert builder.document_count == 1
    assert builder.skipped == []
    assert tree.find("hello").documents.get("data/f1.txt").term_frequency == pytest.approx(0.5)
