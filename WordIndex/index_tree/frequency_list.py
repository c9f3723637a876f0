from typing import Iterator, List, Optional


class DocumentFrequencyEntry:
    """Term frequency of one word in one document."""

    __slots__ = ("document", "term_frequency")

    def __init__(self, document: str, term_frequency: float):
        self.document = document
        self.term_frequency = term_frequency

    def __repr__(self):
        return f"DocumentFrequencyEntry({self.document!r}, {self.term_frequency!r})"


class DocumentFrequencyList:
    """
    Documents containing a word, kept in ascending order of identifier.
    Each identifier appears at most once.
    """

    def __init__(self):
        self._entries: List[DocumentFrequencyEntry] = []

    def add(self, document: str, increment: float) -> DocumentFrequencyEntry:
        """
        Record an occurrence of the word in a document.

        If the document is already listed its term frequency grows by
        increment; otherwise a new entry is placed before the first entry with
        a greater identifier.

        Args:
            document: Document identifier
            increment: Amount added to the term frequency

        Returns:
            The created or updated entry
        """
        entry = self.get(document)
        if entry is not None:
            entry.term_frequency += increment
            return entry

        position = len(self._entries)
        for i, current in enumerate(self._entries):
            if current.document > document:
                position = i
                break

        entry = DocumentFrequencyEntry(document, increment)
        self._entries.insert(position, entry)
        return entry

    def get(self, document: str) -> Optional[DocumentFrequencyEntry]:
        for entry in self._entries:
            if entry.document == document:
                return entry
            if entry.document > document:
                break
        return None

    @property
    def document_frequency(self) -> int:
        """Number of distinct documents containing the word."""
        return len(self._entries)

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[DocumentFrequencyEntry]:
        return iter(self._entries)

    def format(self, precision: int = 6) -> str:
        """Render the entries as 'document (tf)' pairs separated by spaces."""
        return " ".join(f"{entry.document} ({entry.term_frequency:.{precision}f})"
                        for entry in self._entries)
