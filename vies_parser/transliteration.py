"""Greek to Latin transliteration for addresses returned by VIES for EL.

The rules form an ordered table. Each rule is applied with ``re.sub``
over the whole string, one after the other. Digraph and diphthong rules
come first so that the single-letter rules at the bottom never see the
first letter of a pair: ``αυτή`` must become ``afti``, not ``aiti``.

Replacements are plain lowercase Latin, so once a span is rewritten no
later rule (all of which match Greek letters only) can touch it again.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Consonants that devoice a preceding αυ/ευ/ηυ, e.g. ευχαριστώ -> efcharisto
_VOICELESS = "θΘκΚξΞπΠσςΣτΤφΦχΧψΨ"
_CONTEXT = rf"([{_VOICELESS}]|\s|$)"

_GREEK_LETTER_RE = re.compile(r"[\u0370-\u03FF\u1F00-\u1FFF]")


@dataclass(frozen=True)
class TransliterationRule:
    """A single substitution step.

    Parameters
    ----------
    pattern : re.Pattern[str]
        Compiled pattern over Greek character classes.
    replacement : str
        Latin replacement; may reference group ``\\1`` to keep the
        context the pattern matched after (or before) the letters.
    """

    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(pattern: str, replacement: str) -> TransliterationRule:
    return TransliterationRule(re.compile(pattern), replacement)


GREEK_RULES: tuple[TransliterationRule, ...] = (
    # diphthongs
    _rule(r"[αΑ][ιίΙΊ]", "e"),
    _rule(r"[οΟεΕ][ιίΙΊ]", "i"),
    _rule(rf"[αΑ][υύΥΎ]{_CONTEXT}", r"af\1"),
    _rule(r"[αΑ][υύΥΎ]", "av"),
    _rule(rf"[εΕ][υύΥΎ]{_CONTEXT}", r"ef\1"),
    _rule(r"[εΕ][υύΥΎ]", "ev"),
    _rule(r"[οΟ][υύΥΎ]", "ou"),
    # consonant clusters
    _rule(r"(^|\s)[μΜ][πΠ]", r"\1b"),
    _rule(r"[μΜ][πΠ](\s|$)", r"b\1"),
    _rule(r"[μΜ][πΠ]", "mp"),
    _rule(r"[νΝ][τΤ]", "nt"),
    _rule(r"[τΤ][σςΣ]", "ts"),
    _rule(r"[τΤ][ζΖ]", "tz"),
    _rule(r"[γΓ][γΓ]", "ng"),
    _rule(r"[γΓ][κΚ]", "gk"),
    _rule(rf"[ηΗ][υύΥΎ]{_CONTEXT}", r"if\1"),
    _rule(r"[ηΗ][υύΥΎ]", "iu"),
    _rule(r"[θΘ]", "th"),
    _rule(r"[χΧ]", "ch"),
    _rule(r"[ψΨ]", "ps"),
    # single letters
    _rule(r"[αάΑΆ]", "a"),
    _rule(r"[βΒ]", "v"),
    _rule(r"[γΓ]", "g"),
    _rule(r"[δΔ]", "d"),
    _rule(r"[εέΕΈ]", "e"),
    _rule(r"[ζΖ]", "z"),
    _rule(r"[ηήΗΉ]", "i"),
    _rule(r"[ιίϊΐΙΊΪ]", "i"),
    _rule(r"[κΚ]", "k"),
    _rule(r"[λΛ]", "l"),
    _rule(r"[μΜ]", "m"),
    _rule(r"[νΝ]", "n"),
    _rule(r"[ξΞ]", "x"),
    _rule(r"[οόΟΌ]", "o"),
    _rule(r"[πΠ]", "p"),
    _rule(r"[ρΡ]", "r"),
    _rule(r"[σςΣ]", "s"),
    _rule(r"[τΤ]", "t"),
    _rule(r"[υύϋΰΥΎΫ]", "i"),
    _rule(r"[φΦ]", "f"),
    _rule(r"[ωώΩΏ]", "o"),
)


def transliterate(text: str) -> str:
    """Rewrite Greek letters in ``text`` as a Latin approximation.

    Non-Greek characters (digits, punctuation, Latin letters) pass
    through unchanged, so transliterating twice is the same as once.

    Parameters
    ----------
    text : str
        Text that may contain Greek script.

    Returns
    -------
    str
        Text with every Greek letter replaced.
    """
    if not contains_greek(text):
        return text
    for rule in GREEK_RULES:
        text = rule.apply(text)
    return text


def contains_greek(text: str) -> bool:
    """Return True if ``text`` has at least one Greek or Coptic character."""
    return _GREEK_LETTER_RE.search(text) is not None
