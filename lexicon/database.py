"""
database.py — Named Lexicon Databases
======================================
A Database pairs a Trie with a HashTable under one name.  The
DatabaseManager owns every Database and tracks which one is active.

Rules:
  - "custom-words" always exists, is pre-seeded at construction and can
    never be deleted.
  - Deleting the active database makes "custom-words" active again.
  - Keys are lowercased before they reach either structure, so the trie
    and the hash table always index the same key.
  - Nothing here raises for a missing database: lookups return None /
    empty lists and mutations return False.

Usage:
    mgr = DatabaseManager()
    mgr.create_database("animals", "Zoo words")
    mgr.insert_data("animals", "zebra", EntryData(300, "animal", "Striped"))
    mgr.get_all_words_from_database("animals")
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from lexicon.bulk_import import parse_bulk_text, single_entry
from lexicon.entry import EntryData, HashTableStats, TrieStats, WordEntry, WordMetadata
from lexicon.hash_table import HashTable
from lexicon.seed import CUSTOM_WORDS
from lexicon.trie import Trie

logger = logging.getLogger(__name__)


DEFAULT_DATABASE             = "custom-words"
DEFAULT_DATABASE_DESCRIPTION = "Custom Test Words"


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------
@dataclass
class Database:
    name:          str
    description:   str       = ""
    created:       float     = 0.0
    last_modified: float     = 0.0
    trie:          Trie      = field(default_factory=Trie)
    table:         HashTable = field(default_factory=HashTable)

    def info(self) -> "DatabaseInfo":
        return DatabaseInfo(
            name=self.name,
            description=self.description,
            created=self.created,
            last_modified=self.last_modified,
            trie=self.trie.get_stats(),
            table=self.table.get_stats(),
        )


@dataclass
class DatabaseInfo:
    """Listing row for one database, stats included."""
    name:          str
    description:   str
    created:       float
    last_modified: float
    trie:          TrieStats
    table:         HashTableStats


# ---------------------------------------------------------------------------
# Manager
# ---------------------------------------------------------------------------
class DatabaseManager:
    """
    Attributes:
        databases   : {name: Database}, in creation order.
        active_name : Name of the active database.
    """

    def __init__(self, seed: bool = True, clock: Callable[[], float] = time.time):
        self._clock = clock
        self.databases:   Dict[str, Database] = {}
        self.active_name: str                 = ""

        self.create_database(DEFAULT_DATABASE, DEFAULT_DATABASE_DESCRIPTION)
        if seed:
            for word, frequency, category, description in CUSTOM_WORDS:
                self.insert_data(DEFAULT_DATABASE, word, EntryData(frequency, category, description))
        self.set_active_database(DEFAULT_DATABASE)
        logger.info(
            "database manager ready: %s holds %d word(s)",
            DEFAULT_DATABASE,
            len(self.databases[DEFAULT_DATABASE].trie),
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def create_database(self, name: str, description: str = "") -> bool:
        """Create (or wipe and recreate) `name` as an empty database."""
        if not name or not name.strip():
            logger.warning("refused to create a database with a blank name")
            return False
        now = self._clock()
        replaced = name in self.databases
        self.databases[name] = Database(
            name=name,
            description=description,
            created=now,
            last_modified=now,
        )
        logger.info("%s database %r", "recreated" if replaced else "created", name)
        return True

    def delete_database(self, name: str) -> bool:
        if name == DEFAULT_DATABASE:
            logger.warning("refused to delete the default database %r", name)
            return False
        if self.databases.pop(name, None) is None:
            return False
        if self.active_name == name:
            self.active_name = DEFAULT_DATABASE
        logger.info("deleted database %r", name)
        return True

    # ------------------------------------------------------------------
    # Active database
    # ------------------------------------------------------------------
    def set_active_database(self, name: str) -> bool:
        if name not in self.databases:
            return False
        self.active_name = name
        return True

    def get_active_database(self) -> Optional[Database]:
        return self.databases.get(self.active_name)

    def get_database(self, name: str) -> Optional[Database]:
        return self.databases.get(name)

    def list_databases(self) -> List[DatabaseInfo]:
        return [db.info() for db in self.databases.values()]

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------
    def insert_data(self, db_name: str, key: str, data: EntryData) -> bool:
        """Insert `key` into both indexes of `db_name`.  False if the database is missing."""
        db = self.databases.get(db_name)
        if db is None:
            logger.debug("insert into missing database %r", db_name)
            return False
        key = key.strip().lower()
        if not key:
            return False

        metadata = WordMetadata(
            category=data.category,
            last_accessed=self._clock(),
            description=data.description,
        )
        db.trie.insert(key, data.frequency, metadata)
        db.table.insert(key, data, data.frequency)
        db.last_modified = self._clock()
        return True

    def add_word(
        self,
        db_name: str,
        word: str,
        frequency: int = 100,
        category: str = "",
        description: str = "",
    ) -> bool:
        record = single_entry(word, frequency, category, description)
        if record is None:
            return False
        return self.insert_data(db_name, record.word, record.data)

    def bulk_insert(self, db_name: str, text: str) -> int:
        """Insert every record of a bulk text block; returns how many went in."""
        if db_name not in self.databases:
            return 0
        inserted = sum(
            1 for record in parse_bulk_text(text)
            if self.insert_data(db_name, record.word, record.data)
        )
        logger.info("bulk insert into %r: %d record(s)", db_name, inserted)
        return inserted

    def get_all_words_from_database(self, name: str) -> List[WordEntry]:
        """Every word of `name`, most frequent first, then alphabetical."""
        db = self.databases.get(name)
        if db is None:
            return []
        words = [w for w in db.trie.get_all_words() if w.frequency > 0]
        words.sort(key=lambda w: (-w.frequency, w.word))
        return words
