"""Data models for the segmentation pipelines."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .exceptions import UnsupportedLanguageError


class Language(Enum):
    """Languages with a segmentation backend."""

    JAPANESE = "ja"
    KOREAN = "ko"
    THAI = "th"

    @property
    def code(self) -> str:
        return self.value

    @property
    def file_prefix(self) -> str:
        """Prefix of batch result files (``jp_20250101_120000.txt``)."""
        return _FILE_PREFIXES[self]

    @property
    def parser_name(self) -> str:
        """Name the full-text parser is registered under in the host database."""
        return f"{self.name.lower()}_ftparser"

    @classmethod
    def parse(cls, value: "Language | str") -> "Language":
        """Resolve a Language from a member, a code or a name.

        Args:
            value: ``Language.THAI``, ``"th"``, ``"thai"`` or ``"jp"`` style value

        Returns:
            The matching Language

        Raises:
            UnsupportedLanguageError: If the value names no supported language
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for language in cls:
            if key in (language.value, language.name.lower(), language.file_prefix):
                return language
        raise UnsupportedLanguageError(f"Unsupported language: {value!r}")


_FILE_PREFIXES = {
    Language.JAPANESE: "jp",
    Language.KOREAN: "ko",
    Language.THAI: "th",
}


class StageKind(Enum):
    """Kinds of analysis stages a profile can chain."""

    TOKENIZER = "tokenizer"
    BASE_FORM = "base_form"
    POS_STOP = "pos_stop"
    WIDTH = "width"
    LOWERCASE = "lowercase"
    STOPWORD = "stopword"


@dataclass(frozen=True)
class StageSpec:
    """One entry of a profile: a stage kind plus its resource, if any."""

    kind: StageKind
    resource: Optional[str] = None  # stopword list identifier

    def __str__(self) -> str:
        if self.resource:
            return f"{self.kind.value}({self.resource})"
        return self.kind.value


@dataclass(frozen=True)
class Profile:
    """A named, ordered selection of stages for one language."""

    language: Language
    name: str
    stages: tuple[StageSpec, ...]
    description: str = ""

    def __post_init__(self):
        if not self.stages or self.stages[0].kind is not StageKind.TOKENIZER:
            raise ValueError(f"Profile {self.name!r} must start with a tokenizer stage")
        if any(s.kind is StageKind.TOKENIZER for s in self.stages[1:]):
            raise ValueError(f"Profile {self.name!r} has more than one tokenizer stage")

    @property
    def filters(self) -> tuple[StageSpec, ...]:
        return self.stages[1:]

    def describe(self) -> str:
        return " -> ".join(str(s) for s in self.stages)


@dataclass(frozen=True)
class AnalyzedToken:
    """A token flowing through a pipeline.

    ``pos`` is the analyzer's part-of-speech path, most general category first
    (``("助詞", "係助詞")`` for Sudachi, ``("JKS",)`` for Kiwi). Thai tokens carry
    no tags.
    """

    surface: str
    pos: tuple[str, ...] = ()
    base_form: Optional[str] = None

    @property
    def pos_path(self) -> str:
        return "-".join(self.pos)


class SegmentStatus(Enum):
    """Outcome of one segmentation call."""

    OK = "ok"
    EMPTY_INPUT = "empty_input"
    UNAVAILABLE = "unavailable"  # pipeline construction failed, retried on a later call
    FAILED = "failed"  # analyzer raised mid-stream, absorbed


@dataclass(frozen=True)
class SegmentResult:
    """Tokens of one segmentation call together with its status."""

    status: SegmentStatus
    tokens: tuple[str, ...] = ()

    @classmethod
    def ok(cls, tokens) -> "SegmentResult":
        return cls(SegmentStatus.OK, tuple(tokens))

    @classmethod
    def empty_input(cls) -> "SegmentResult":
        return cls(SegmentStatus.EMPTY_INPUT)

    @classmethod
    def unavailable(cls) -> "SegmentResult":
        return cls(SegmentStatus.UNAVAILABLE)

    @classmethod
    def failed(cls) -> "SegmentResult":
        return cls(SegmentStatus.FAILED)

    def __iter__(self):
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


@dataclass(frozen=True)
class TokenInfo:
    """A token as handed to the host database's full-text index."""

    word: str
    byte_length: int  # UTF-8
    char_length: int
    frequency: int = 1

    @classmethod
    def from_word(cls, word: str) -> "TokenInfo":
        return cls(word=word, byte_length=len(word.encode("utf-8")), char_length=len(word))


@dataclass
class BatchReport:
    """Summary of one batch file run."""

    input_path: str
    output_path: str
    lines_processed: int = 0
    tokens_emitted: int = 0
    passthrough_lines: list[int] = field(default_factory=list)  # 1-based line numbers
