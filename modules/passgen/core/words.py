from __future__ import annotations

from pathlib import Path
from typing import List

from modules.passgen.core.errors import DictionaryError
from universe.settings import get_settings

WORDS = [
    "acorn", "alpine", "amber", "anvil", "apricot", "arbor", "aspen", "badger",
    "bamboo", "banner", "barley", "basin", "bishop", "blossom", "boulder", "bramble",
    "bronze", "buckle", "cabin", "cactus", "candle", "carbon", "cargo", "cedar",
    "chalk", "cherry", "chimney", "cipher", "citadel", "cliff", "cobble", "compass",
    "coral", "cotton", "cricket", "crystal", "cypress", "dagger", "denim", "desert",
    "dolphin", "domino", "dragon", "eagle", "easel", "elbow", "falcon", "ferry",
    "fiddle", "fjord", "galaxy", "garnet", "geyser", "ginger", "glacier", "goblet",
    "gravel", "gull", "hammock", "hazel", "heron", "hickory", "hollow", "igloo",
    "indigo", "iris", "ivory", "jasper", "jigsaw", "juniper", "kayak", "kettle",
    "kiwi", "ladder", "lemon", "lotus", "magnet", "mango", "meteor", "mosaic",
    "muffin", "napkin", "needle", "nickel", "nutmeg", "oak", "onyx", "otter",
    "paddle", "pebble", "pepper", "pillow", "pine", "planet", "pocket", "pony",
    "puzzle", "quill", "rabbit", "radish", "rocket", "saddle", "salmon", "satin",
    "shovel", "sparrow", "spruce", "squash", "tablet", "thistle", "thunder", "tulip",
    "tundra", "turtle", "umbrella", "valley", "violet", "walnut", "wagon", "whale",
    "wicker", "yarrow", "yeti", "zebra",
]


def load_dictionary(path: Path | str) -> List[str]:
    """Read one word per line; blank lines and ``#`` comments are skipped."""
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryError(f"Unable to read dictionary {source}: {exc}") from exc

    words = []
    for line in text.splitlines():
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        words.append(word)

    if not words:
        raise DictionaryError(f"Dictionary {source} contains no words.")
    return words


def get_dictionary(path: Path | str | None = None) -> List[str]:
    if path is None:
        path = get_settings().dictionary_path
    if path is None:
        return list(WORDS)
    return load_dictionary(path)
