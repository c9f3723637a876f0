import os
from typing import List
from .tokenizer import Tokenizer, WhitespaceTokenizer, Token
from .preprocess import PreprocessingPipeline

class Document:
    """
    Represents a document in the collection.
    Stores the document text and its tokens.
    """

    def __init__(self, id: str, text: str = "", path: str = None):
        """
        Initialize a document with content.

        Args:
            id: Identifier of the document (the path as listed in the collection)
            text: Full document text
            path: Location the text was read from, if any
        """
        self.id = id
        self.text = text
        self.path = path
        self.tokens = None
        self.processed_tokens = None

    @classmethod
    def from_file(cls, doc_id: str, path: str = None) -> 'Document':
        """
        Read a document from disk.

        Args:
            doc_id: Identifier to store in the index
            path: File to read (defaults to doc_id)

        Returns:
            New Document

        Raises:
            OSError: If the file cannot be read
        """
        path = path or doc_id
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            text = f.read()
        return cls(doc_id, text=text, path=path)

    def tokenize(self, tokenizer: Tokenizer = None) -> 'Document':
        """
        Tokenize the document content.

        Args:
            tokenizer: Tokenizer to use (defaults to WhitespaceTokenizer)

        Returns:
            Self for chaining operations
        """
        tokenizer = tokenizer or WhitespaceTokenizer()
        self.tokens = tokenizer.tokenize(self.text)
        return self

    def preprocess(self, preprocessing_pipeline: PreprocessingPipeline) -> 'Document':
        """
        Normalize the document tokens.

        Args:
            preprocessing_pipeline: Pipeline of preprocessors to apply

        Returns:
            Self for chaining operations
        """
        if self.tokens is None:
            self.tokenize()

        self.processed_tokens = preprocessing_pipeline.preprocess(self.tokens, self.text)
        return self

    @property
    def word_count(self) -> int:
        """Total number of raw tokens, including ones that normalize away."""
        if self.tokens is None:
            self.tokenize()
        return len(self.tokens)

    def get_preprocessed_terms(self) -> List[str]:
        """
        Get the normalized terms from the document.

        Returns:
            List of normalized terms (non-empty)
        """
        if not self.processed_tokens:
            return []

        return [token.processed_form for token in self.processed_tokens
                if token.processed_form]

    def __repr__(self):
        return f"Document({self.id!r})"


def read_collection(collection_file: str) -> List[str]:
    """
    Read the list of document paths from a collection file.

    Args:
        collection_file: Text file with one document path per line

    Returns:
        Document identifiers in the order listed
    """
    with open(collection_file, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip()]


def load_collection(collection_file: str):
    """
    Load every readable document listed in a collection file.

    Relative paths are opened as listed (relative to the current directory);
    a path that does not exist there is looked up next to the collection file.
    Unreadable documents are reported and left out.

    Args:
        collection_file: Text file with one document path per line

    Returns:
        Tuple of (list of Document, list of skipped identifiers)
    """
    base_dir = os.path.dirname(os.path.abspath(collection_file))
    documents = []
    skipped = []

    for doc_id in read_collection(collection_file):
        path = doc_id
        if not os.path.isabs(doc_id) and not os.path.exists(doc_id):
            path = os.path.join(base_dir, doc_id)
        try:
            documents.append(Document.from_file(doc_id, path))
        except OSError as e:
            print(f"Warning: Skipping unreadable document {doc_id}: {e}")
            skipped.append(doc_id)

    return documents, skipped
