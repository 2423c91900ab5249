"""String-keyed hash tables with chaining, linear probing and double hashing, tables that grow to supplied prime sizes, and two small digital libraries."""

__version__ = "0.1.0"
__all__ = ["primes", "hash_table", "dynamic_hashtable", "digital_library"]