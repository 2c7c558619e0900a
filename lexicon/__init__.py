"""
lexicon/
--------
Autocomplete index layer.  Public API:

    from lexicon import DatabaseManager, perform_search
"""

from lexicon.entry       import EntryData, FuzzyMatch, HashTableStats, TrieStats, WordEntry, WordMetadata
from lexicon.trie        import Trie, TrieNode, levenshtein
from lexicon.hash_table  import HashTable
from lexicon.database    import Database, DatabaseInfo, DatabaseManager, DEFAULT_DATABASE
from lexicon.bulk_import import parse_bulk_text
from lexicon.search      import SearchOutcome, SearchStats, perform_search

__all__ = [
    "EntryData", "FuzzyMatch", "HashTableStats", "TrieStats", "WordEntry", "WordMetadata",
    "Trie", "TrieNode", "levenshtein",
    "HashTable",
    "Database", "DatabaseInfo", "DatabaseManager", "DEFAULT_DATABASE",
    "parse_bulk_text",
    "SearchOutcome", "SearchStats", "perform_search",
]
