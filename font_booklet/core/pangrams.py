"""
Pangrams used as preview sample text.
"""

import random

STANDARD = "The quick brown fox jumps over the lazy dog."

MYSTERY_BAG = (
    STANDARD,
    "Sphinx of black quartz, judge my vow.",
    "Pack my box with five dozen liquor jugs.",
    "How vexingly quick daft zebras jump!",
    "The five boxing wizards jump quickly.",
    "Jackdaws love my big sphinx of quartz.",
    "Waltz, bad nymph, for quick jigs vex.",
    "Bright vixens jump; dozy fowl quack.",
    "Quick zephyrs blow, vexing daft Jim.",
    "Two driven jocks help fax my big quiz.",
)


def random_pangram(current, pool=MYSTERY_BAG, rng=None):
    """
    Pick a pangram uniformly from `pool`, excluding `current`.

    Raises ValueError when the pool offers nothing different from `current`.
    """
    rng = rng or random
    candidates = [pangram for pangram in pool if pangram != current]
    if not candidates:
        raise ValueError("Pangram pool has no entry different from the current sample")
    return rng.choice(candidates)
