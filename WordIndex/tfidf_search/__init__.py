"""
TF-IDF search module for ranking documents against the inverted index tree.
Scores every query word with log10 IDF and merges the per-word rankings.
"""
from .tfidf_search import (
    TfIdfEntry,
    TFIDFSearchEngine,
    calculate_tf_idf,
    combine,
    retrieve,
)
