"""
Plural normalization (best-effort singular forms).

Feedback positions and target lengths are defined on SINGULAR words, so a
plural in the pool ("cities") is compared as its singular ("city"). This
module maps a word to that singular form.

Algorithm:
  - An ordered cascade of rules (SINGULAR_RULES), evaluated top to bottom.
  - Each rule returns the singular form, or None if it does not fire.
  - The first rule that fires wins; if none fires the lowercased word is kept.

Limitations:
  - Heuristic, not a dictionary. The generic "-s" rule strips any trailing
    's' outside a small exclusion set ("news" -> "new", "lens" -> "len").
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

VOWELS = frozenset("aeiou")

# Exact-match irregular plurals -> singular.
IRREGULAR_PLURALS: Mapping[str, str] = MappingProxyType({
    "children": "child",
    "mice": "mouse",
    "men": "man",
    "women": "woman",
    "feet": "foot",
    "teeth": "tooth",
    "geese": "goose",
    "people": "person",
    "leaves": "leaf",
    "knives": "knife",
    "wives": "wife",
    "lives": "life",
    "halves": "half",
    "shelves": "shelf",
    "wolves": "wolf",
    "calves": "calf",
    "elves": "elf",
    "loaves": "loaf",
    "thieves": "thief",
    "cities": "city",
    "countries": "country",
    "stories": "story",
    "studies": "study",
    "bodies": "body",
    "families": "family",
    "parties": "party",
    "dictionaries": "dictionary",
    "universities": "university",
})

# Two-letter endings that usually mark a singular ending in 's' (glass, focus, basis, ...)
NON_PLURAL_ENDINGS = frozenset({"ss", "us", "is", "as", "os"})

# Literal forms that still strip "es" inside the non-plural branch of the -s rule.
NON_PLURAL_EXCEPTIONS = ("classes", "focuses")

# Characters before "es" that take an "-es" plural (s, x, z, ch, sh).
ES_SIBILANTS = frozenset("sxzh")

# Words this short are never stripped.
MIN_STRIP_LENGTH = 3


@dataclass(frozen=True)
class SingularRule:
    """One step of the cascade: apply(word) -> singular, or None to fall through."""
    name: str
    apply: Callable[[str], Optional[str]]


def irregular_rule(word: str) -> Optional[str]:
    return IRREGULAR_PLURALS.get(word)


def ies_rule(word: str) -> Optional[str]:
    """cities -> city (consonant + ies). A vowel before 'ies' falls through."""
    if not (word.endswith("ies") and len(word) > 4):
        return None
    stem = word[:-3]
    if stem[-1] not in VOWELS:
        return stem + "y"
    return None


def ves_rule(word: str) -> Optional[str]:
    """
    shelves -> shelf, scarves -> scarf (l/r + ves).
    Stems ending in 'ie' become '-ife'; stems ending in 'lf'/'rf' take an 'e'.
    """
    if not (word.endswith("ves") and len(word) > 4):
        return None
    stem = word[:-3]
    if word.endswith("lves") or word.endswith("rves"):
        return stem + "f"
    if stem.endswith("ie"):
        return stem[:-2] + "ife"
    if stem.endswith("lf") or stem.endswith("rf"):
        return stem + "e"
    return None


def es_rule(word: str) -> Optional[str]:
    """boxes -> box, churches -> church, heroes -> hero."""
    if not (word.endswith("es") and len(word) > 4):
        return None
    stem = word[:-2]
    if stem[-1] in ES_SIBILANTS or stem[-1] == "o":
        return stem
    return None


def s_rule(word: str) -> Optional[str]:
    """
    Generic plural: strip the trailing 's'.

    Words ending in ss/us/is/as/os are kept as singular. The stem may end in a
    vowel or a consonant; both are treated as plural.
    """
    if not (word.endswith("s") and len(word) > MIN_STRIP_LENGTH):
        return None
    if word[-2:] in NON_PLURAL_ENDINGS:
        if word.endswith(NON_PLURAL_EXCEPTIONS):
            return word[:-2]
        return word
    stem = word[:-1]
    if len(stem) < MIN_STRIP_LENGTH:
        return word
    return stem


SINGULAR_RULES: Tuple[SingularRule, ...] = (
    SingularRule("irregular", irregular_rule),
    SingularRule("ies", ies_rule),
    SingularRule("ves", ves_rule),
    SingularRule("es", es_rule),
    SingularRule("s", s_rule),
)


def explain_singular(word: str) -> Tuple[str, Optional[str]]:
    """
    Return (singular_form, rule_name) for `word`.

    rule_name is the name of the first rule that fired, or None when the word
    was too short or no rule applied.
    """
    w = word.lower()
    if len(w) <= MIN_STRIP_LENGTH:
        return w, None

    for rule in SINGULAR_RULES:
        out = rule.apply(w)
        if out is not None:
            return out, rule.name
    return w, None


def get_singular_form(word: str) -> str:
    """
    Map `word` to its (heuristic) singular form, lowercased.

    Examples:
      get_singular_form("cities") -> "city"
      get_singular_form("wolves") -> "wolf"
      get_singular_form("boxes")  -> "box"
      get_singular_form("glass")  -> "glass"
    """
    return explain_singular(word)[0]


def get_effective_length(word: str) -> int:
    """Length of the singular form; used for matching against the target length."""
    return len(get_singular_form(word))


def is_plural(word: str) -> bool:
    return get_singular_form(word) != word.lower()
