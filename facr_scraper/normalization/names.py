"""Club name comparison helpers.

Federation club names are registered legal names such as ``"TJ Sokol Krnov
z.s."``. Rows on the competition pages use shortened or aliased forms, so
matching is done on lower-cased substrings and on a single simplified token,
usually the town name.
"""

# Legal-entity suffixes that never identify a club
LEGAL_SUFFIXES = frozenset(
    {
        "z.s.", "z.s", "zs", "zapsany", "zapsaný", "spolek",
        "o.s.", "o.s", "os",
        "a.s.", "a.s", "as",
        "s.r.o.", "s.r.o", "sro",
    }
)
TOKEN_PUNCTUATION = ",.;:-()[]{}\"'`“”’"
MIN_TOKEN_LENGTH = 3


def normalize_name(name: str) -> str:
    """Cache and comparison key for a team or club name."""
    return (name or "").strip().lower()


def contains_fold(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test; an empty needle never matches."""
    needle = normalize_name(needle)
    if not needle:
        return False
    return needle in normalize_name(haystack)


def equals_fold(a: str, b: str) -> bool:
    return normalize_name(a) == normalize_name(b)


def simplify_club_name(name: str) -> str:
    """Derives a short search token such as "krnov" from a full club name.

    Words are scanned from the end, skipping legal suffixes, and the first one
    with at least three characters and a letter wins. Falls back to the last
    word.
    """
    parts = (name or "").split()
    if not parts:
        return ""
    for part in reversed(parts):
        token = part.strip(TOKEN_PUNCTUATION).lower()
        if token in LEGAL_SUFFIXES:
            continue
        if len(token) >= MIN_TOKEN_LENGTH and any(ch.isalpha() for ch in token):
            return token
    return parts[-1].strip(TOKEN_PUNCTUATION).lower()
