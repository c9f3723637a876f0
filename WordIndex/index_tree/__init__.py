"""
Index tree module: the word-keyed search tree and its per-word document frequency lists.
"""
from .frequency_list import DocumentFrequencyEntry, DocumentFrequencyList
from .index_tree import IndexNode, IndexTree
