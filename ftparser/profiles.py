"""Profile table: the ordered stage chains available per language.

Each language has exactly one default profile. The default is what a process
uses unless its configuration selects another entry of this table.

Japanese
    ``database`` (default) keeps surface forms as typed: the morphological
    tokenizer, part-of-speech stop tags, width normalization and lowercasing.
    Base-form reduction is left out so that index terms match the text.
    ``complete`` is the full analyzer chain (base forms and a stopword list on
    top) for recall-oriented indexes.

Korean
    ``database`` (default) is the tokenizer with compound decomposition plus
    lowercasing. Index terms are Kiwi morpheme forms, not surface text: "갑니다"
    becomes "가", "ᆸ니다". Part-of-speech filtering is left out so particles
    stay searchable; ``pos_stop`` adds it back.

Thai
    ``minimal`` (default) is the tokenizer alone. ``analyzer`` mirrors the
    classic Thai analyzer: lowercasing and the Thai stopword list.
"""

from typing import Optional

from .exceptions import UnknownProfileError
from .models import Language, Profile, StageKind, StageSpec

TOKENIZER = StageSpec(StageKind.TOKENIZER)
BASE_FORM = StageSpec(StageKind.BASE_FORM)
POS_STOP = StageSpec(StageKind.POS_STOP)
WIDTH = StageSpec(StageKind.WIDTH)
LOWERCASE = StageSpec(StageKind.LOWERCASE)


def stopwords(resource: str) -> StageSpec:
    """Generic stopword stage backed by the given resource identifier."""
    return StageSpec(StageKind.STOPWORD, resource)


PROFILES: dict[Language, dict[str, Profile]] = {
    Language.JAPANESE: {
        "database": Profile(
            Language.JAPANESE,
            "database",
            (TOKENIZER, POS_STOP, WIDTH, LOWERCASE),
            "Surface forms as typed; particles and punctuation dropped",
        ),
        "complete": Profile(
            Language.JAPANESE,
            "complete",
            (TOKENIZER, BASE_FORM, POS_STOP, WIDTH, stopwords("builtin:ja"), LOWERCASE),
            "Base forms plus stopword list, for recall",
        ),
        "minimal": Profile(
            Language.JAPANESE,
            "minimal",
            (TOKENIZER,),
            "Tokenizer output only",
        ),
    },
    Language.KOREAN: {
        "database": Profile(
            Language.KOREAN,
            "database",
            (TOKENIZER, LOWERCASE),
            "Decompounded morpheme forms, particles kept",
        ),
        "pos_stop": Profile(
            Language.KOREAN,
            "pos_stop",
            (TOKENIZER, POS_STOP, LOWERCASE),
            "Particles, endings and affixes dropped",
        ),
        "minimal": Profile(
            Language.KOREAN,
            "minimal",
            (TOKENIZER,),
            "Tokenizer output only",
        ),
    },
    Language.THAI: {
        "minimal": Profile(
            Language.THAI,
            "minimal",
            (TOKENIZER,),
            "Word segmentation only",
        ),
        "analyzer": Profile(
            Language.THAI,
            "analyzer",
            (TOKENIZER, LOWERCASE, stopwords("pythainlp:thai")),
            "Lowercased, Thai stopwords removed",
        ),
    },
}

DEFAULT_PROFILES: dict[Language, str] = {
    Language.JAPANESE: "database",
    Language.KOREAN: "database",
    Language.THAI: "minimal",
}


def get_profile(language: Language, name: Optional[str] = None) -> Profile:
    """Look up a profile.

    Args:
        language: Language of the profile
        name: Profile name; the language default when omitted

    Returns:
        The Profile

    Raises:
        UnknownProfileError: If the language has no profile of that name
    """
    language = Language.parse(language)
    name = name or DEFAULT_PROFILES[language]
    try:
        return PROFILES[language][name]
    except KeyError:
        available = ", ".join(sorted(PROFILES[language]))
        raise UnknownProfileError(
            f"Unknown {language.name.lower()} profile {name!r} (available: {available})"
        ) from None


def list_profiles(language: Optional[Language] = None) -> list[Profile]:
    """All profiles, or those of one language, in table order."""
    languages = [Language.parse(language)] if language is not None else list(Language)
    return [profile for lang in languages for profile in PROFILES[lang].values()]
