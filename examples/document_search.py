#!/usr/bin/env python3
"""
Word index example: look up documents by word and by prefix.

This example demonstrates:
- Indexing every word of a few documents
- Exact and prefix (autocomplete style) lookups
- Removing a document and watching the tree compact
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from radixindex import RadixTree


DOCUMENTS = {
    "doc-1": "The tree house stands in the old tree",
    "doc-2": "Patricia trees store prefixes compactly",
    "doc-3": "A prefix tree is also called a trie",
}


def main():
    """Build an index over DOCUMENTS and query it."""
    if "-v" in sys.argv:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    index = RadixTree()
    for doc_id, text in DOCUMENTS.items():
        index.insert_many(text.split(), doc_id)

    stats = index.stats()
    print(f"Indexed {index.size()} documents in {stats.total_nodes} nodes")
    print("-" * 50)

    for word in ("tree", "TREES", "trie"):
        print(f"  find({word!r}): {sorted(index.find(word))}")
    for prefix in ("tr", "pre", "pat"):
        print(f"  find_by_prefix({prefix!r}): {sorted(index.find_by_prefix(prefix))}")

    index.remove("doc-3")
    print(f"\nAfter removing doc-3: {index.node_count()} nodes")
    print(f"  find_by_prefix('pre'): {sorted(index.find_by_prefix('pre'))}")


if __name__ == "__main__":
    main()
