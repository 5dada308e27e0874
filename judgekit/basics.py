"""Short arithmetic, string and lookup problems."""

from __future__ import annotations

_CODENAMES = (
    "PROXYCITY",
    "P.Y.N.G.",
    "DNSUEY!",
    "SERVERS",
    "HOST!",
    "CRIPTONIZE",
    "OFFLINE DAY",
    "SALT",
    "ANSWER!",
    "RAR?",
    "WIFI ANTENNAS",
)

_ANIMALS = {
    ("v", "a", "c"): "aguia",
    ("v", "a", "o"): "pomba",
    ("v", "m", "o"): "homem",
    ("v", "m", "h"): "vaca",
    ("i", "i", "hm"): "pulga",
    ("i", "i", "hr"): "lagarta",
    ("i", "a", "h"): "sanguessuga",
    ("i", "a", "o"): "minhoca",
}

_POWER_THRESHOLD = 8000
_POWER_LABELS = {True: "Mais de 8000!", False: "Inseto!"}


def game_duration(start: int, end: int) -> int:
    """Return the game length in hours; equal times mean a full day."""
    if start >= end:
        return 24 - (start - end)
    return end - start


def classify_animal(first: str, second: str, third: str) -> str:
    """Return the animal for the three descriptive words."""
    a, b, c = first[:1], second[:1], third[:1]
    if a == "i" and b == "i":
        c += third[2:3]
    try:
        return _ANIMALS[(a, b, c)]
    except KeyError:
        raise ValueError(f"unknown animal: {first} {second} {third}") from None


def triangles_in_polygon(n: int) -> int:
    """Return the number of triangles in a fan triangulation of an n-gon."""
    return n - 2


def previous_number(n: int) -> int:
    """Return n - 1."""
    return n - 1


def fits_tweet(text: str) -> bool:
    """Return True when the text is at most 80 bytes long."""
    return len(text.encode("utf-8")) < 81


def difference(n: int, m: int) -> int:
    """Return n - m."""
    return n - m


def link_clicks(n: int) -> int:
    """Return 4 * n."""
    return 4 * n


def codename(x: int, y: int) -> str:
    """Return the codename indexed by x + y."""
    index = x + y
    if not 0 <= index < len(_CODENAMES):
        raise ValueError(f"no codename for index {index}")
    return _CODENAMES[index]


def power_label(n: int) -> str:
    """Return the label for a power level: above 8000 or an insect."""
    over_threshold = int(n) > _POWER_THRESHOLD
    return _POWER_LABELS[over_threshold]


def can_say(heard: str, wanted: str) -> bool:
    """Return True when the wanted word is no longer than the heard one."""
    return len(wanted) <= len(heard)