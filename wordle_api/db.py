# SQLite dictionary store using SQLAlchemy.
# Every operation is fire-and-forget: storage errors are logged here and
# never reach the caller.

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Optional, Union
from sqlalchemy import create_engine, Column, String, func, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.sql import select
from .config import DATABASE_URL, WORD_LENGTH

logger = logging.getLogger(__name__)

Base = declarative_base()

class Word(Base):
    __tablename__ = "dictionary"
    word = Column(String, primary_key=True)

class DictionaryStore:
    def __init__(self, database_url: str = DATABASE_URL):
        self.database_url = database_url
        self._engine = create_engine(database_url, echo=False, future=True)
        self._session = sessionmaker(bind=self._engine, autoflush=False, autocommit=False, future=True)

    def init_db(self) -> None:
        try:
            Base.metadata.create_all(self._engine)
        except SQLAlchemyError:
            logger.exception("Could not create dictionary table at %s", self.database_url)

    def add_word(self, word: str) -> None:
        w = word.lower()
        if len(w) != WORD_LENGTH:
            logger.warning("Rejected %r: words must be %d letters long", word, WORD_LENGTH)
            return
        try:
            with self._session() as s:
                if s.get(Word, w) is None:
                    s.add(Word(word=w))
                    s.commit()
        except SQLAlchemyError:
            logger.exception("Could not add %r to the dictionary", w)

    def add_many_words(self, words: Iterable[str]) -> None:
        for w in words:
            self.add_word(w)

    def remove_word(self, word: str) -> None:
        try:
            with self._session() as s:
                s.execute(delete(Word).where(Word.word == word.lower()))
                s.commit()
        except SQLAlchemyError:
            logger.exception("Could not remove %r from the dictionary", word)

    def get_random_word(self) -> Optional[str]:
        try:
            with self._session() as s:
                return s.execute(select(Word.word).order_by(func.random()).limit(1)).scalar_one_or_none()
        except SQLAlchemyError:
            logger.exception("Could not pick a random word")
            return None

    def has_word(self, word: str) -> bool:
        try:
            with self._session() as s:
                return s.get(Word, word.lower()) is not None
        except SQLAlchemyError:
            logger.exception("Could not look up %r", word)
            return False

    def count_words(self) -> int:
        try:
            with self._session() as s:
                return s.execute(select(func.count()).select_from(Word)).scalar_one()
        except SQLAlchemyError:
            logger.exception("Could not count dictionary words")
            return 0

    def load_word_file(self, path: Union[str, Path]) -> None:
        """Seed the dictionary from a newline-separated word list.

        Blank lines are skipped; everything else goes through ``add_word``,
        so wrong-length entries are logged and dropped.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                words = [line.strip() for line in f if line.strip()]
        except OSError:
            logger.exception("Could not read word list %s", path)
            return
        self.add_many_words(words)
        logger.info("Loaded %s candidate words from %s", len(words), path)
