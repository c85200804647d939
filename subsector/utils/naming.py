"""World and subsector name generation.

Names are assembled from syllable pools following a fixed set of patterns,
giving pronounceable but alien-sounding results like "Brealara" or "Ekithorix".
"""

from typing import List

from .rng import DiceRNG

# Syllable pools (indexed 1-6 by the patterns below)
SYLLABLE_POOLS = [
    [
        "b", "c", "d", "f", "g", "h", "i", "j", "k", "l", "m", "n", "p", "q", "r", "s", "t",
        "v", "w", "x", "y", "z",
    ],
    ["a", "e", "o", "u"],
    [
        "br", "cr", "dr", "fr", "gr", "pr", "str", "tr", "bl", "cl", "fl", "gl", "pl", "sl",
        "sc", "sk", "sm", "sn", "sp", "st", "sw", "ch", "sh", "th", "wh",
    ],
    [
        "ae", "ai", "ao", "au", "a", "ay", "ea", "ei", "eo", "eu", "e", "ey", "ua", "ue", "ui",
        "uo", "u", "uy", "ia", "ie", "iu", "io", "iy", "oa", "oe", "ou", "oi", "o", "oy",
    ],
    [
        "turn", "ter", "nus", "rus", "tania", "hiri", "hines", "gawa", "nides", "carro",
        "rilia", "stea", "lia", "lea", "ria", "nov", "phus", "mia", "nerth", "wei", "ruta",
        "tov", "zuno", "vis", "lara", "nia", "liv", "tera", "gantu", "yama", "tune", "ter",
        "nus", "cury", "bos", "pra", "thea", "nope", "tis", "clite",
    ],
    [
        "una", "ion", "iea", "iri", "illes", "ides", "agua", "olla", "inda", "eshan", "oria",
        "ilia", "erth", "arth", "orth", "oth", "illon", "ichi", "ov", "arvis", "ara", "ars",
        "yke", "yria", "onoe", "ippe", "osie", "one", "ore", "ade", "adus", "urn", "ypso",
        "ora", "iuq", "orix", "apus", "ion", "eon", "eron", "ao", "omia",
    ],
]

# Each pattern is a flat list of (pool, length-pool) pairs; the syllable is drawn
# from the first pool using an index bounded by the second pool's size.
NAME_PATTERNS = [
    [1, 1, 2, 2, 5, 5],
    [2, 2, 3, 3, 6, 6],
    [3, 3, 4, 4, 5, 5],
    [4, 4, 3, 3, 6, 6],
    [3, 3, 4, 4, 2, 2, 5, 5],
    [2, 2, 1, 1, 3, 3, 6, 6],
    [3, 3, 4, 4, 2, 2, 5, 5],
    [4, 4, 3, 3, 1, 1, 6, 6],
    [3, 3, 4, 4, 1, 1, 4, 4, 5, 5],
    [4, 4, 1, 1, 4, 4, 3, 3, 6, 6],
]


def random_name(rng: DiceRNG, pattern_index: int = 0) -> str:
    """Generate one capitalized name using the given pattern.

    Args:
        rng: Dice roller to draw syllables with
        pattern_index: Which entry of NAME_PATTERNS to use (wraps around)

    Returns:
        Capitalized name

    Examples:
        >>> random_name(DiceRNG(42), 2)  # doctest: +SKIP
        'Slaelara'
    """
    pattern = NAME_PATTERNS[pattern_index % len(NAME_PATTERNS)]
    syllables = []
    for i in range(len(pattern) // 2):
        pool = SYLLABLE_POOLS[pattern[2 * i] - 1]
        bound = len(SYLLABLE_POOLS[pattern[2 * i + 1] - 1])
        syllables.append(pool[rng.roll_uniform(0, bound - 1)])

    return "".join(syllables).capitalize()


def random_names(count: int, rng: DiceRNG) -> List[str]:
    """Generate `count` names, cycling through every name pattern in turn.

    Args:
        count: Number of names to generate
        rng: Dice roller to draw syllables with

    Returns:
        List of capitalized names (duplicates are possible)
    """
    return [random_name(rng, c) for c in range(count)]
