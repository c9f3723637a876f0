import pytest

from WordIndex.config import default_config
from WordIndex.preprocessing.document import Document


@pytest.fixture
def config():
    return default_config()


@pytest.fixture
def pet_documents():
    return [
        Document("docA", text="cat dog cat"),
        Document("docB", text="dog dog"),
    ]


@pytest.fixture
def collection_dir(tmp_path):
    (tmp_path / "a.txt").write_text("The cat sat on the mat.\nThe dog barked, loudly.", encoding="utf-8")
    (tmp_path / "b.txt").write_text("Dog? dog; DOG.", encoding="utf-8")
    (tmp_path / "collection.txt").write_text("a.txt\nmissing.txt\n\nb.txt\n", encoding="utf-8")
    return tmp_path
