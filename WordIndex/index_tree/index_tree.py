"""
Word-keyed binary search tree backing the inverted index.

Every node holds one normalized word and the DocumentFrequencyList of the
documents it occurs in. The tree is never rebalanced, so adversarial
(for example sorted) insertion orders produce a skewed tree; descent and
traversal are iterative so that depth is not limited by the call stack.
"""

from typing import Iterator, List, Optional, TextIO

from .frequency_list import DocumentFrequencyList


class IndexNode:
    """A word together with its document frequency list and two subtrees."""

    __slots__ = ("word", "documents", "left", "right")

    def __init__(self, word: str):
        self.word = word
        self.documents = DocumentFrequencyList()
        self.left: Optional["IndexNode"] = None
        self.right: Optional["IndexNode"] = None

    def __repr__(self):
        return f"IndexNode({self.word!r}, documents={len(self.documents)})"


class IndexTree:
    """Inverted index mapping normalized words to document frequency lists."""

    def __init__(self):
        self.root: Optional[IndexNode] = None
        self._size = 0

    def insert(self, word: str, document: str, tf_increment: float) -> "IndexTree":
        """
        Add one occurrence of a word in a document.

        A node is created on the first occurrence of the word. Otherwise the
        document's entry in the node's frequency list is created or has its
        term frequency increased by tf_increment.

        Args:
            word: Normalized word, must not be empty
            document: Document identifier
            tf_increment: Term frequency contribution of this occurrence

        Returns:
            The tree itself

        Raises:
            ValueError: If word is empty
        """
        if not word:
            raise ValueError("Cannot index an empty word")

        if self.root is None:
            self.root = IndexNode(word)
            self.root.documents.add(document, tf_increment)
            self._size += 1
            return self

        node = self.root
        while True:
            if word < node.word:
                if node.left is None:
                    node.left = IndexNode(word)
                    self._size += 1
                node = node.left
            elif word > node.word:
                if node.right is None:
                    node.right = IndexNode(word)
                    self._size += 1
                node = node.right
            else:
                node.documents.add(document, tf_increment)
                return self

    def find(self, word: str) -> Optional[IndexNode]:
        """Return the node for word, or None if the word was never indexed."""
        node = self.root
        while node is not None:
            if word < node.word:
                node = node.left
            elif word > node.word:
                node = node.right
            else:
                return node
        return None

    def __contains__(self, word) -> bool:
        return self.find(word) is not None

    def __len__(self):
        return self._size

    def __bool__(self):
        return self.root is not None

    def __iter__(self) -> Iterator[IndexNode]:
        """Yield nodes in ascending word order."""
        stack: List[IndexNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""
        height = 0
        stack = [(self.root, 1)] if self.root else []
        while stack:
            node, depth = stack.pop()
            height = max(height, depth)
            if node.left:
                stack.append((node.left, depth + 1))
            if node.right:
                stack.append((node.right, depth + 1))
        return height

    def dump_lines(self, precision: int = 6) -> Iterator[str]:
        """Yield one 'word doc (tf) doc (tf)' line per word, sorted by word."""
        for node in self:
            yield f"{node.word} {node.documents.format(precision)}"

    def dump(self, stream: TextIO, precision: int = 6) -> int:
        """
        Write the human-readable index to a text stream.

        Args:
            stream: Writable text stream
            precision: Decimal places used for term frequencies

        Returns:
            Number of lines written
        """
        count = 0
        for line in self.dump_lines(precision):
            stream.write(line + "\n")
            count += 1
        return count
