"""Libraries of books that answer distinct-word and keyword queries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from bisect import bisect_left

from .dynamic_hashtable import DynamicHashMap, DynamicHashSet
from .hash_table import CollisionType


class DigitalLibrary(ABC):
    """Common queries every library supports."""

    @abstractmethod
    def distinct_words(self, book_title):
        """Sorted distinct words of a book, empty if the book is unknown."""

    @abstractmethod
    def count_distinct_words(self, book_title):
        """Number of distinct words of a book."""

    @abstractmethod
    def search_keyword(self, keyword):
        """Titles of the books containing the keyword."""

    @abstractmethod
    def print_books(self):
        """Write the library's contents to standard output."""


class MuskLibrary(DigitalLibrary):
    """Static library built once from titles and texts, queried by binary search."""

    def __init__(self, book_titles, texts):
        self._books = sorted(
            (title, sorted(set(text))) for title, text in zip(book_titles, texts)
        )

    def distinct_words(self, book_title):
        index = bisect_left(self._books, book_title, key=lambda book: book[0])
        if index < len(self._books) and self._books[index][0] == book_title:
            return list(self._books[index][1])
        return []

    def count_distinct_words(self, book_title):
        return len(self.distinct_words(book_title))

    def search_keyword(self, keyword):
        return [title for title, words in self._books if _contains(words, keyword)]

    def print_books(self):
        for title, words in self._books:
            print(f"{title}: {' | '.join(words)}")


def _contains(sorted_words, word):
    index = bisect_left(sorted_words, word)
    return index < len(sorted_words) and sorted_words[index] == word


class JGBLibrary(DigitalLibrary):
    """Library kept in a growing hash map keyed by book title.

    The collision strategy depends on the name: "Jobs" chains, "Gates"
    probes linearly and any other name uses double hashing.
    """

    def __init__(self, name, params):
        self.name = name
        self._params = list(params)
        if name == "Jobs":
            self.collision_type = CollisionType.CHAIN
        elif name == "Gates":
            self.collision_type = CollisionType.LINEAR
        else:
            self.collision_type = CollisionType.DOUBLE
        self._books = DynamicHashMap(self.collision_type, self._params)

    def add_book(self, book_title, text):
        words = DynamicHashSet(self.collision_type, self._params)
        for word in text:
            words.insert(word)
        self._books.insert(book_title, "")
        for word in text:
            self._books.insert(book_title, word)

    def distinct_words(self, book_title):
        if self._books.find(book_title) is not None:
            return [book_title]
        return []

    def count_distinct_words(self, book_title):
        return len(self.distinct_words(book_title))

    def search_keyword(self, keyword):
        if self._books.find(keyword) is None:
            return []
        return self._books._slot_keys()

    def print_books(self):
        self._books.print_table()