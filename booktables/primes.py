"""Supply of prime table sizes consumed when a hash table grows."""

_prime_sizes: list[int] = [29]


def set_primes(primes):
    """Replace the pending sizes; the last element is handed out first."""
    global _prime_sizes
    _prime_sizes = list(primes)


def get_next_size():
    """Remove and return the next table size.

    Raises RuntimeError once the supply is exhausted.
    """
    if not _prime_sizes:
        raise RuntimeError("No more primes available for resizing.")
    return _prime_sizes.pop()