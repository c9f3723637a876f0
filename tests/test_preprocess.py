from WordIndex.config import default_config
from WordIndex.preprocessing import (
    Document,
    WhitespaceTokenizer,
    create_preprocessing_pipeline,
    normalise_word,
)


def test_lowercase_and_single_trailing_punctuation():
    assert normalise_word("Hello,") == "hello"
    assert normalise_word("WHY?") == "why"
    assert normalise_word("stop;") == "stop"
    assert normalise_word("Done.") == "done"


def test_only_one_trailing_character_is_stripped():
    assert normalise_word("end..") == "end."
    assert normalise_word("what?!") == "what?!"


def test_inner_and_other_punctuation_kept():
    assert normalise_word("e.g") == "e.g"
    assert normalise_word("wow!") == "wow!"
    assert normalise_word(".net") == ".net"


def test_lone_punctuation_becomes_empty():
    assert normalise_word(".") == ""
    assert normalise_word(",") == ""


def test_whitespace_tokenizer_keeps_punctuation_attached():
    tokens = WhitespaceTokenizer().tokenize("one,  two\nthree.\t")
    assert [t.text for t in tokens] == ["one,", "two", "three."]
    assert [t.position for t in tokens] == [0, 1, 2]


def test_document_terms_drop_empty_tokens():
    pipeline = create_preprocessing_pipeline(default_config())
    doc = Document("d", text="Cat . dog, ?").preprocess(pipeline)
    assert doc.word_count == 4
    assert doc.get_preprocessed_terms() == ["cat", "dog"]


def test_pipeline_respects_disabled_lowercase():
    config = default_config()
    config["preprocessing"]["lowercase"] = False
    pipeline = create_preprocessing_pipeline(config)
    doc = Document("d", text="Cat.").preprocess(pipeline)
    assert doc.get_preprocessed_terms() == ["Cat"]


def test_pipeline_with_every_step_disabled_keeps_tokens_unchanged():
    config = default_config()
    config["preprocessing"]["lowercase"] = False
    config["preprocessing"]["strip_trailing_punctuation"] = False
    pipeline = create_preprocessing_pipeline(config)
    doc = Document("d", text="Cat.").preprocess(pipeline)
    assert pipeline.preprocessors == []
    assert doc.get_preprocessed_terms() == ["Cat."]


def test_pipeline_without_order_uses_defaults():
    config = default_config()
    del config["pipeline_order"]
    pipeline = create_preprocessing_pipeline(config)
    doc = Document("d", text="Cat.").preprocess(pipeline)
    assert doc.get_preprocessed_terms() == ["cat"]
