"""
Station Name Normalizer

Turns free-form station names into the canonical keys used for matching,
so that "M.G. Road", "mg road" and "M G ROAD" all identify one station.
"""

import logging
from typing import List

KEY_MAX_LENGTH = 79


class StationNameNormalizer:
    """Builds canonical station keys."""

    def __init__(self, max_length: int = KEY_MAX_LENGTH):
        """
        Initialize the station name normalizer.

        Args:
            max_length: Longest key to produce; longer keys are truncated
        """
        if max_length < 1:
            raise ValueError("max_length must be positive")
        self.max_length = max_length
        self.logger = logging.getLogger(__name__)

    def normalize(self, raw_name: str) -> str:
        """
        Normalize a station name into its matching key.

        Steps, each applied to the output of the previous one:
          1. keep only letters, digits and whitespace
          2. collapse whitespace runs into one space and trim
          3. fuse single-letter tokens pairwise ("m g road" -> "mg road")
          4. lower-case, dropping any non-alphanumeric code points it adds

        Args:
            raw_name: Name as written in line data or typed by a user

        Returns:
            The key, or an empty string if nothing usable remains
        """
        if not raw_name:
            return ""

        kept = "".join(ch for ch in raw_name if ch.isalnum() or ch.isspace())
        collapsed = " ".join(kept.split())

        # Truncate before fusing: fusing only shortens, so the key stays a fixed point
        if len(collapsed) > self.max_length:
            self.logger.debug(f"Truncating key for '{raw_name}' to {self.max_length} characters")
            collapsed = collapsed[:self.max_length].rstrip()

        key = self._fuse_single_letters(collapsed).lower()
        # lower() can add combining marks ("İ" -> "i" + U+0307)
        return "".join(ch for ch in key if ch.isalnum() or ch == " ")

    def normalize_list(self, raw_names: List[str]) -> List[str]:
        """Normalize a list of station names."""
        return [self.normalize(name) for name in raw_names]

    def matches(self, first: str, second: str) -> bool:
        """Check if two names refer to the same station key."""
        first_key = self.normalize(first)
        return bool(first_key) and first_key == self.normalize(second)

    @staticmethod
    def is_valid_key(key: str) -> bool:
        """An empty key never identifies a station."""
        return bool(key)

    @staticmethod
    def _fuse_single_letters(text: str) -> str:
        """
        Merge "letter space letter" where both letters are one-letter tokens.

        The scan runs left to right and never revisits consumed characters, so
        "a b c" becomes "ab c" and "a b c d" becomes "ab cd".
        """
        length = len(text)

        def is_single_letter(pos: int) -> bool:
            return (text[pos].isalpha()
                    and (pos == 0 or text[pos - 1] == " ")
                    and (pos + 1 == length or text[pos + 1] == " "))

        out = []
        i = 0
        while i < length:
            if (i + 2 < length
                    and text[i + 1] == " "
                    and is_single_letter(i)
                    and is_single_letter(i + 2)):
                out.append(text[i])
                out.append(text[i + 2])
                i += 3
                continue
            out.append(text[i])
            i += 1
        return "".join(out)


_default_normalizer = StationNameNormalizer()


def normalize_station_name(raw_name: str) -> str:
    """Normalize with the default key length."""
    return _default_normalizer.normalize(raw_name)
