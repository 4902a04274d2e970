"""Resolution of stopword resources referenced by profiles."""

import logging
from pathlib import Path
from typing import Optional

from .exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


def read_word_list(path: Path) -> frozenset:
    """Read a UTF-8 word list, one word per line, ``#`` starting a comment.

    Args:
        path: Path to the word list

    Returns:
        Set of words

    Raises:
        ResourceNotFoundError: If the file does not exist or cannot be read
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceNotFoundError(f"Cannot read word list {path}: {e}") from e

    words = set()
    for line in lines:
        word = line.split("#", 1)[0].strip()
        if word:
            words.add(word)
    return frozenset(words)


def _pythainlp_stopwords(name: str) -> frozenset:
    if name != "thai":
        raise ResourceNotFoundError(f"Unknown PyThaiNLP stopword list: {name!r}")
    try:
        from pythainlp.corpus import thai_stopwords
    except ImportError as e:
        raise ResourceNotFoundError("pythainlp is required for pythainlp:thai stopwords") from e
    return frozenset(thai_stopwords())


def load_stopwords(identifier: str, named_files: Optional[dict] = None) -> frozenset:
    """Resolve a stopword resource identifier to a set of words.

    Identifiers:
        ``builtin:<code>``  list shipped in ``ftparser/data/stopwords_<code>.txt``
        ``pythainlp:thai``  PyThaiNLP's Thai stopword corpus
        ``config:<name>``   file registered under ``stopwords`` in the config
        anything else       path to a word list file

    Args:
        identifier: Resource identifier
        named_files: Mapping of config names to paths

    Returns:
        Set of stopwords

    Raises:
        ResourceNotFoundError: If the identifier cannot be resolved
    """
    scheme, _, name = identifier.partition(":")
    if scheme == "builtin":
        path = DATA_DIR / f"stopwords_{name}.txt"
        if not path.exists():
            raise ResourceNotFoundError(f"No built-in stopword list for {name!r}")
        words = read_word_list(path)
    elif scheme == "pythainlp":
        words = _pythainlp_stopwords(name)
    elif scheme == "config":
        named_files = named_files or {}
        if name not in named_files:
            raise ResourceNotFoundError(f"Stopword list {name!r} is not configured")
        words = read_word_list(Path(named_files[name]))
    else:
        words = read_word_list(Path(identifier))

    logger.debug(f"Loaded {len(words)} stopwords from {identifier}")
    return words
