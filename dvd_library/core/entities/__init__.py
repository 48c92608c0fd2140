"""
Business entities representing core domain concepts.

Exports:
- Dvd: One catalog entry, keyed by its title
- DVD_HEADERS: Column labels used when displaying DVDs
"""

from dvd_library.core.entities.dvd import DVD_HEADERS, Dvd

__all__ = [
    "Dvd",
    "DVD_HEADERS",
]
