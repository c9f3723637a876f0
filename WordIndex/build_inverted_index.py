import argparse
import os
import sys
import time

from WordIndex.config import load_config
from WordIndex.index_tree import IndexTree
from WordIndex.preprocessing.document import Document, load_collection
from WordIndex.preprocessing.preprocess import create_preprocessing_pipeline

class InvertedIndexBuilder:
    def __init__(self, config=None):
        self.tree = IndexTree()       # word -> documents with term frequencies
        self.documents = []           # ingested Document objects, in order
        self.skipped = []             # identifiers that could not be read
        self.document_count = 0

        # Get configuration
        self.config = config or load_config()

        # Create normalization pipeline based on config
        self.pipeline = create_preprocessing_pipeline(self.config)

    def index_document(self, document: Document):
        """
        Index a single document.

        The total word count is taken first because every occurrence adds
        1 / total to the term frequency of its (word, document) pair.

        Args:
            document: Document to ingest
        """
        document.tokenize()
        total_words = document.word_count

        self.documents.append(document)
        self.document_count += 1

        if total_words == 0:
            return

        document.preprocess(self.pipeline)
        increment = 1 / total_words
        for term in document.get_preprocessed_terms():
            self.tree = self.tree.insert(term, document.id, increment)

    def build_from_documents(self, documents):
        """
        Build the index from documents in the given order.

        Args:
            documents: Iterable of Document objects

        Returns:
            The populated IndexTree
        """
        for document in documents:
            self.index_document(document)
        return self.tree

    def build_from_collection(self, collection_file):
        """
        Build the index from a collection file listing document paths.

        Args:
            collection_file: Path to a text file with one document path per line

        Returns:
            The populated IndexTree

        Raises:
            OSError: If the collection file itself cannot be read
        """
        print(f"Loading documents listed in {collection_file}...")
        start_time = time.time()

        documents, skipped = load_collection(collection_file)
        self.skipped.extend(skipped)
        self.build_from_documents(documents)

        end_time = time.time()
        print(f"Indexed {self.document_count} documents in {end_time - start_time:.2f} seconds")
        if skipped:
            print(f"Warning: {len(skipped)} documents could not be read and were skipped")
        print(f"Total words in inverted index: {len(self.tree)}")

        return self.tree

    def save_dump(self, output_file=None):
        """
        Write the human-readable index, one word per line in sorted order.

        Args:
            output_file: Path to output text file (defaults to index.dump_file from config)

        Returns:
            Path of the written file
        """
        index_config = self.config.get("index", {})
        output_file = output_file or index_config.get("dump_file", "invertedIndex.txt")
        precision = index_config.get("tf_precision", 6)

        with open(output_file, 'w', encoding='utf-8') as f:
            lines = self.tree.dump(f, precision=precision)

        print(f"Inverted index ({lines} words) saved to {output_file}")
        return output_file

    def statistics(self):
        """Return word count, document count and tree height."""
        return {
            "words": len(self.tree),
            "documents": self.document_count,
            "skipped_documents": len(self.skipped),
            "tree_height": self.tree.height()
        }

    def print_sample(self, sample_size=10):
        """Print a sample of the inverted index"""
        print("\nInverted Index Sample:")
        print("-" * 60)

        precision = self.config.get("index", {}).get("tf_precision", 6)
        for i, line in enumerate(self.tree.dump_lines(precision)):
            if i >= sample_size:
                print("...")
                break
            print(line)

        print("-" * 60)

def main():
    # Parse command line arguments
    parser = argparse.ArgumentParser(description='Build inverted index from a document collection')
    parser.add_argument('collection', help='Path to collection file (one document path per line)')
    parser.add_argument('--output', help='Path to output index dump (default from config)')
    parser.add_argument('--sample', type=int, default=10, help='Number of index lines to preview')
    args = parser.parse_args()

    print("=" * 60)
    print("Inverted Index Builder".center(60))
    print("=" * 60)

    if not os.path.exists(args.collection):
        print(f"Error: collection file {args.collection} not found")
        sys.exit(1)

    # Create builder
    builder = InvertedIndexBuilder()

    # Build index
    try:
        builder.build_from_collection(args.collection)
    except OSError as e:
        print(f"Error building inverted index: {e}")
        sys.exit(1)

    # Print sample
    builder.print_sample(args.sample)

    # Save to file
    builder.save_dump(args.output)

    print("\nDone!")

if __name__ == "__main__":
    main()
