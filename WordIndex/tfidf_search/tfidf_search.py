import math
import time
from typing import Dict, Iterable, List, Optional, Tuple

from ..config import load_config
from ..index_tree import IndexTree
from ..build_inverted_index import InvertedIndexBuilder
from ..preprocessing.document import Document
from ..preprocessing.preprocess import PreprocessingPipeline
from ..preprocessing.tokenizer import WhitespaceTokenizer


class TfIdfEntry:
    """Accumulated TF-IDF score of one document."""

    __slots__ = ("document", "score")

    def __init__(self, document: str, score: float):
        self.document = document
        self.score = score

    def as_tuple(self) -> Tuple[str, float]:
        return self.document, self.score

    def __eq__(self, other):
        if not isinstance(other, TfIdfEntry):
            return NotImplemented
        return self.document == other.document and self.score == other.score

    def __repr__(self):
        return f"TfIdfEntry({self.document!r}, {self.score!r})"


def _ranks_before(entry: TfIdfEntry, other: TfIdfEntry) -> bool:
    # Higher score first; equal scores by ascending document identifier
    if entry.score != other.score:
        return entry.score > other.score
    return entry.document < other.document


def insert_ranked(ranked: List[TfIdfEntry], entry: TfIdfEntry) -> List[TfIdfEntry]:
    """
    Insert an entry into a list kept in descending score order.

    The list is scanned from the head and the entry goes before the first
    entry it outranks.

    Args:
        ranked: Ranked list, modified in place
        entry: Entry to insert

    Returns:
        The same list
    """
    for i, current in enumerate(ranked):
        if _ranks_before(entry, current):
            ranked.insert(i, entry)
            return ranked
    ranked.append(entry)
    return ranked


def remove_duplicates(entries: Iterable[TfIdfEntry]) -> List[TfIdfEntry]:
    """
    Collapse entries sharing a document into one entry with the summed score.

    The first occurrence of a document keeps its position.
    """
    merged: Dict[str, TfIdfEntry] = {}
    for entry in entries:
        if entry.document in merged:
            merged[entry.document].score += entry.score
        else:
            merged[entry.document] = TfIdfEntry(entry.document, entry.score)
    return list(merged.values())


def descending_sort(entries: List[TfIdfEntry]) -> List[TfIdfEntry]:
    return sorted(entries, key=lambda entry: (-entry.score, entry.document))


def combine(ranked: List[TfIdfEntry], other: List[TfIdfEntry]) -> List[TfIdfEntry]:
    """
    Merge two ranked lists into a new one.

    Scores of documents present in both lists are summed and the result is
    re-sorted in descending score order. Neither input is modified.

    Args:
        ranked: Accumulated ranked list
        other: Ranked list of the next query term

    Returns:
        New ranked list
    """
    if not other:
        return list(ranked)
    return descending_sort(remove_duplicates(list(ranked) + list(other)))


def inverse_document_frequency(document_count: int, document_frequency: int) -> float:
    """
    Calculate the inverse document frequency for a word.
    IDF(t) = log10(N/DF(t))

    Args:
        document_count: Number of documents in the collection
        document_frequency: Number of documents containing the word

    Returns:
        IDF value for the word
    """
    return math.log10(document_count / document_frequency)


def calculate_tf_idf(tree: IndexTree, word: str, document_count: int) -> List[TfIdfEntry]:
    """
    Rank the documents containing a word by TF-IDF.

    Args:
        tree: Inverted index
        word: Normalized query word
        document_count: Number of documents in the collection

    Returns:
        Entries in descending score order, empty if the word is not indexed

    Raises:
        ValueError: If document_count is not positive
    """
    if document_count <= 0:
        raise ValueError("Document count must be positive to compute IDF")

    node = tree.find(word)
    if node is None:
        return []

    idf = inverse_document_frequency(document_count, node.documents.document_frequency)

    ranked: List[TfIdfEntry] = []
    for entry in node.documents:
        insert_ranked(ranked, TfIdfEntry(entry.document, entry.term_frequency * idf))
    return ranked


def retrieve(tree: IndexTree, search_words: Iterable[str], document_count: int) -> List[TfIdfEntry]:
    """
    Rank documents against several query words.

    Each word is scored separately and merged into the running result, so a
    document's final score is the sum of its TF-IDF over all query words.

    Args:
        tree: Inverted index
        search_words: Normalized query words, in query order
        document_count: Number of documents in the collection

    Returns:
        Ranked list with each document at most once
    """
    ranked: List[TfIdfEntry] = []
    for word in search_words:
        ranked = combine(ranked, calculate_tf_idf(tree, word, document_count))
    return ranked


class TFIDFSearchEngine:
    """TF-IDF search engine over an inverted index tree"""

    def __init__(self, documents=None, config=None):
        """
        Initialize the TF-IDF search engine.

        Args:
            documents: Optional list of Document objects to index
            config: Configuration dictionary (defaults to config.json)
        """
        self.config = config or load_config()
        self.builder = InvertedIndexBuilder(config=self.config)
        self.tokenizer = WhitespaceTokenizer()

        if documents:
            self.add_documents(documents)

    @property
    def tree(self) -> IndexTree:
        return self.builder.tree

    @property
    def pipeline(self) -> PreprocessingPipeline:
        return self.builder.pipeline

    @property
    def document_count(self) -> int:
        return self.builder.document_count

    def add_documents(self, documents):
        """
        Index documents.

        Args:
            documents: Iterable of Document objects, or (identifier, text) pairs
        """
        for document in documents:
            if not isinstance(document, Document):
                doc_id, text = document
                document = Document(doc_id, text=text)
            self.builder.index_document(document)

    def load_collection(self, collection_file):
        """Index every readable document listed in a collection file."""
        self.builder.build_from_collection(collection_file)

    def normalize_query(self, query: str) -> List[str]:
        """Split and normalize a free-text query the same way documents are indexed."""
        tokens = self.pipeline.preprocess(self.tokenizer.tokenize(query), query)
        return [token.processed_form for token in tokens if token.processed_form]

    def search_words(self, words: Iterable[str]) -> List[TfIdfEntry]:
        """Rank documents against already-normalized query words."""
        if self.document_count == 0:
            return []
        return retrieve(self.tree, words, self.document_count)

    def search(self, query: str, top_k: Optional[int] = None) -> List[Tuple[str, float]]:
        """
        Search for documents matching the query.

        Args:
            query: Query string
            top_k: Number of top results to return (defaults to search.top_k; 0 returns all)

        Returns:
            List of (document identifier, tf-idf score) tuples
        """
        search_config = self.config.get("search", {})
        if top_k is None:
            top_k = search_config.get("top_k", 10)

        results = self.search_words(self.normalize_query(query))

        if search_config.get("skip_zero_scores", False):
            results = [entry for entry in results if entry.score > 0]

        if top_k:
            results = results[:top_k]

        return [entry.as_tuple() for entry in results]


# Command-line interface
def main():
    import argparse

    # Parse command-line arguments
    parser = argparse.ArgumentParser(description='TF-IDF Search Engine')
    parser.add_argument('collection', help='Collection file listing document paths')
    parser.add_argument('--query', required=True, help='Search query')
    parser.add_argument('--top', type=int, default=None, help='Number of top results to display')
    args = parser.parse_args()

    try:
        engine = TFIDFSearchEngine()
        engine.load_collection(args.collection)
    except OSError as e:
        print(f"Error: {e}")
        raise SystemExit(1)

    print(f"\nQuery: '{args.query}'")

    start_time = time.time()
    results = engine.search(args.query, top_k=args.top)
    execution_time = time.time() - start_time

    print("\n" + "="*50)
    print("SEARCH RESULTS")
    print("="*50)

    if not results:
        print("No matching documents found.")
    else:
        for i, (document, score) in enumerate(results):
            print(f"{i+1}. {document}  {score:.7f}")
    print(f"\n{len(results)} documents in {execution_time:.6f} seconds")


if __name__ == "__main__":
    main()
