"""
Preprocessing module for turning documents into index keys.
Includes whitespace tokenization, lowercase conversion and trailing punctuation stripping.
"""
from .tokenizer import Tokenizer, WhitespaceTokenizer, Token
from .preprocess import PreprocessingPipeline, create_preprocessing_pipeline, normalise_word
from .document import Document, load_collection, read_collection
