# booktables

Hash tables keyed by strings, with three collision strategies, tables that
grow to supplied prime sizes, and two small "digital library" classes built
on top of them.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Hash tables

`booktables.hash_table` provides `HashTable` and its two front ends,
`HashMap` and `HashSet`. A table is created with a collision type, either a
`CollisionType` member or its string value, and a list of integer
parameters whose last element is the table size:

- `"Chain"`: separate chaining; parameters `[z, size]`
- `"Linear"`: linear probing; parameters `[z, size]`
- `"Double"`: double hashing; parameters `[z1, z2, c2, size]`, where the
  probe step is `c2 - (hash_z2(key) % c2)`

An unknown collision type, an empty parameter list, a size that is not
positive, or (for double hashing) fewer than three parameters or a `c2`
that is not positive raises `ValueError`.

Keys are hashed as a polynomial in `z` over their UTF-8 bytes, with 64-bit
wraparound. Lower-case letters count from 0 (`a` is 0) and upper-case
letters from 26 (`A` is 26); other bytes are mapped the same way as
upper-case letters, relative to `A`. `get_slot(key, z)` returns the home
slot.

Inserting a key that is already present leaves the table unchanged, and so
does inserting into a full probing table. Fixed-size tables never grow.

```python
from booktables.hash_table import HashMap, HashSet

words = HashSet("Linear", [31, 11])
words.insert("apple")
words.find("apple")     # True
words.find("pear")      # False

titles = HashMap("Double", [31, 37, 7, 11])
titles.insert("dune", "Herbert")
titles.find("dune")     # "Herbert"
titles.find("emma")     # None

titles.load()           # entries / size
len(titles), titles.size, titles.count, titles.collision_type
print(titles.table_string())
titles.print_table()    # writes the same text and a newline, and returns it
```

The rendered table lists every slot in order: `<EMPTY> | ` for an empty
slot, `(key:value) | ` for an entry, and for a chained bucket its entries
as `(key:value) ` followed by `| `.

## Growing tables

`booktables.dynamic_hashtable` provides `DynamicHashMap` (`insert(key,
value)`) and `DynamicHashSet` (`insert(key)`, `find(key)` returning a
bool). After every insert, once the load reaches 0.5 the table calls
`rehash()`, which moves all entries into a table of the next size.

Sizes come from one list shared by the whole process, kept in
`booktables.primes`. It starts as `[29]`. `set_primes(primes)` replaces it,
and `get_next_size()` removes and returns its last element, so sizes are
handed out from the end of the list:

```python
from booktables.primes import set_primes
from booktables.dynamic_hashtable import DynamicHashSet

set_primes([97, 53, 29])   # handed out as 29, then 53, then 97
seen = DynamicHashSet("Chain", [31, 7])
for word in ["a", "b", "c", "d"]:
    seen.insert(word)      # the fourth insert reaches load 4/7 and grows to 29
```

When the list is empty, `get_next_size()`, and therefore any rehash,
raises `RuntimeError`.

## Digital libraries

`booktables.digital_library` defines the abstract `DigitalLibrary` with
`distinct_words`, `count_distinct_words`, `search_keyword` and
`print_books`, and two implementations.

### MuskLibrary

Built once from a list of titles and a parallel list of word lists. Books
are kept sorted by title, each with its distinct words in sorted order, and
looked up by binary search.

```python
from booktables.digital_library import MuskLibrary

lib = MuskLibrary(
    ["b_book", "a_book"],
    [["the", "cat", "the"], ["a", "dog"]],
)
lib.distinct_words("b_book")        # ["cat", "the"]
lib.distinct_words("missing")       # []
lib.count_distinct_words("b_book")  # 2
lib.search_keyword("dog")           # ["a_book"]
lib.print_books()                   # "a_book: a | dog", then "b_book: cat | the"
```

### JGBLibrary

`JGBLibrary(name, params)` keeps its books in a `DynamicHashMap` keyed by
title. The collision strategy depends on the name: `"Jobs"` uses chaining,
`"Gates"` linear probing, and any other name double hashing; `params` is
the parameter list for that strategy.

`add_book(title, words)` builds a `DynamicHashSet` of the words (which
draws sizes from the shared prime list as it grows, and can raise
`RuntimeError` when that list runs out) and records the title in the map.

What this class does **not** do: it does not keep a book's text. Its
queries answer as follows:

- `distinct_words(title)` returns `[title]` if the book was added, else `[]`;
  `count_distinct_words(title)` is therefore 1 or 0.
- `search_keyword(keyword)` returns `[]` unless `keyword` is the title of an
  added book; then it returns the titles in the map's occupied slots, in
  slot order, for linear or double probing, and `[]` for chaining.
- `print_books()` prints the map's table as described above.

For word-level queries use `MuskLibrary`.