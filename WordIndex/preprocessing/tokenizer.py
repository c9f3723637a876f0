from abc import ABC, abstractmethod
from typing import List


class Token:
    """A raw token and the form it takes after preprocessing."""

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        self.processed_form = text

    def __repr__(self):
        return f"Token({self.text!r}, {self.position}, processed_form={self.processed_form!r})"


class Tokenizer(ABC):
    @abstractmethod
    def tokenize(self, document: str) -> List[Token]:
        raise NotImplementedError()


class WhitespaceTokenizer(Tokenizer):
    """Splits a document on runs of whitespace; punctuation stays attached."""

    def tokenize(self, document: str) -> List[Token]:
        return [Token(text, position) for position, text in enumerate(document.split())]
