"""Writing changeset files to .changeset/."""

from __future__ import annotations

import random
from pathlib import Path

from .config import CHANGESET_DIR
from .content import format_changeset, get_changeset_content
from .models import Changeset

_ADJECTIVES = (
    "brave", "calm", "clever", "cool", "curly", "dry", "early", "fair", "fast",
    "fluffy", "funny", "gentle", "giant", "green", "happy", "kind", "late",
    "lazy", "lucky", "mean", "modern", "nice", "odd", "old", "polite", "proud",
    "quick", "quiet", "rare", "red", "rich", "shy", "silly", "slow", "smart",
    "sour", "spicy", "sweet", "tall", "tidy", "tiny", "warm", "wet", "wild",
    "wise", "young",
)
_NOUNS = (
    "ants", "apes", "bats", "bears", "beds", "bees", "birds", "boats", "books",
    "cats", "clocks", "cows", "crabs", "deer", "dogs", "doors", "ducks", "eels",
    "eggs", "experts", "falcons", "files", "flies", "foxes", "frogs", "geese",
    "goats", "hats", "hounds", "jars", "keys", "kids", "lamps", "lions", "maps",
    "mice", "moles", "moons", "owls", "pans", "pens", "pigs", "plums", "rats",
    "rings", "seals", "shoes", "snails", "socks", "suns", "toys", "trees",
    "worms", "yaks",
)
_VERBS = (
    "accept", "add", "agree", "allow", "argue", "attack", "bake", "begin",
    "behave", "beg", "bow", "breathe", "buy", "camp", "care", "change", "cheer",
    "chew", "clap", "compare", "cough", "count", "cross", "cry", "dance",
    "decide", "deliver", "destroy", "divide", "double", "doubt", "draw", "dream",
    "drive", "drum", "eat", "enjoy", "exist", "explain", "fail", "fetch", "film",
    "fix", "float", "fly", "fold", "glow", "grab", "grin", "grow", "guess",
    "hammer", "hang", "heal", "help", "hide", "hope", "hug", "hunt", "invent",
    "jam", "joke", "judge", "jump", "kick", "kneel", "knock", "know", "laugh",
    "learn", "lick", "lie", "listen", "look", "love", "marry", "melt", "mix",
    "move", "nail", "notice", "obey", "own", "pay", "peel", "play", "poke",
    "pretend", "promise", "pull", "punch", "push", "rescue", "relax", "remain",
    "repeat", "reply", "rest", "retire", "return", "rhyme", "rule", "run",
    "sell", "serve", "shake", "share", "shave", "shop", "shout", "sin", "sing",
    "sip", "sit", "sleep", "smash", "smell", "smile", "sneeze", "sniff", "speak",
    "spend", "sparkle", "stand", "stare", "study", "swim", "swing", "talk",
    "taste", "teach", "tease", "tell", "think", "thank", "tickle", "try",
    "turn", "type", "unite", "visit", "vanish", "wait", "walk", "warn", "wash",
    "watch", "wave", "whisper", "wink", "wonder", "work", "worry", "yawn",
    "yell",
)


def changeset_dir(cwd: str | Path) -> Path:
    return Path(cwd) / CHANGESET_DIR


def changeset_path(cwd: str | Path, changeset_id: str) -> Path:
    return changeset_dir(cwd) / f"{changeset_id}.md"


def generate_id(rng: random.Random | None = None) -> str:
    """Make a human-readable id like "brave-owls-dance"."""
    rng = rng or random.Random()
    return "-".join(
        (rng.choice(_ADJECTIVES), rng.choice(_NOUNS), rng.choice(_VERBS))
    )


def render_changeset(changeset: Changeset) -> str:
    """File content for a changeset.

    Releases with change types get the split-by-bump-type rendering; plain
    changesets fall back to the summary-only format.
    """
    content = get_changeset_content(
        changeset.releases, changeset.summary, split_releases_by_bump_type=True
    )
    if content is None:
        return format_changeset(changeset)
    return content


def write_changeset(changeset: Changeset, cwd: str | Path) -> str:
    """Write the changeset to ``cwd/.changeset/<id>.md`` and return the id.

    Ids are regenerated until they don't clash with an existing file.
    """
    directory = changeset_dir(cwd)
    directory.mkdir(parents=True, exist_ok=True)

    changeset_id = generate_id()
    while changeset_path(cwd, changeset_id).exists():
        changeset_id = generate_id()

    changeset_path(cwd, changeset_id).write_text(render_changeset(changeset))
    return changeset_id
