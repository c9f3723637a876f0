from abc import ABC, abstractmethod
from .tokenizer import Token


class TokenPreprocessor(ABC):
    @abstractmethod
    def preprocess(self, token: Token, document: str) -> Token:
        raise NotImplementedError()

    def preprocess_all(self, tokens: list[Token], document: str) -> list[Token]:
        return [self.preprocess(token, document) for token in tokens]

class LowercasePreprocessor(TokenPreprocessor):
    def preprocess(self, token: Token, document: str) -> Token:
        token.processed_form = token.processed_form.lower()
        return token


class TrailingPunctuationPreprocessor(TokenPreprocessor):
    """Preprocessor for stripping punctuation from the end of a token."""

    def __init__(self, punctuation=".,?;"):
        """
        Initialize preprocessor for stripping trailing punctuation.

        Args:
            punctuation: Characters that are removed when they end a token
        """
        self.punctuation = set(punctuation)

    def preprocess(self, token: Token, document: str) -> Token:
        """
        Remove a single trailing punctuation character.

        Only the last character is inspected, so "end.." keeps one dot.

        Args:
            token: Token to process
            document: Original document

        Returns:
            Processed token
        """
        form = token.processed_form
        if form and form[-1] in self.punctuation:
            token.processed_form = form[:-1]
        return token


class PreprocessingPipeline:
    """Pipeline of token preprocessors."""

    def __init__(self, preprocessors, name="Default Pipeline"):
        """
        Initialize a preprocessing pipeline.

        Args:
            preprocessors: List of preprocessor objects
            name: Name of the pipeline
        """
        self.preprocessors = preprocessors
        self.name = name

    def preprocess(self, tokens: list[Token], document: str) -> list[Token]:
        """
        Apply all preprocessors to the tokens.

        Args:
            tokens: List of tokens to preprocess
            document: Original document text

        Returns:
            List of preprocessed tokens
        """
        for preprocessor in self.preprocessors:
            preprocessor.preprocess_all(tokens, document)

        return tokens


def create_preprocessing_pipeline(config=None):
    """
    Create the normalization pipeline described by the configuration.

    Args:
        config: Configuration dictionary (defaults to config.json)

    Returns:
        PreprocessingPipeline instance
    """
    if not config:
        from ..config import load_config
        config = load_config()

    # Without a pipeline order, use defaults
    if "pipeline_order" not in config:
        return PreprocessingPipeline(
            [LowercasePreprocessor(), TrailingPunctuationPreprocessor()],
            name="NormalizationPipeline"
        )

    preprocessors = []
    preproc_config = config.get("preprocessing", {})

    # Add preprocessors in the order specified in config
    for step in config["pipeline_order"]:
        if step == "lowercase" and preproc_config.get("lowercase", True):
            preprocessors.append(LowercasePreprocessor())

        elif step == "strip_trailing_punctuation" and preproc_config.get("strip_trailing_punctuation", True):
            punctuation = preproc_config.get("punctuation", ".,?;")
            preprocessors.append(TrailingPunctuationPreprocessor(punctuation=punctuation))

    return PreprocessingPipeline(preprocessors, name="NormalizationPipeline")


def normalise_word(word: str, pipeline: PreprocessingPipeline = None) -> str:
    """Normalize a single raw token; an empty result means the token is discarded."""
    pipeline = pipeline or PreprocessingPipeline(
        [LowercasePreprocessor(), TrailingPunctuationPreprocessor()]
    )
    token = Token(word.strip(), 0)
    pipeline.preprocess([token], word)
    return token.processed_form
