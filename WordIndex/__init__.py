"""
WordIndex: an inverted index over a fixed document collection, stored as a
word-keyed search tree, with TF-IDF ranked retrieval.
"""
