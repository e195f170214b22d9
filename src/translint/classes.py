from collections.abc import Iterator
from dataclasses import dataclass, field


class TranslintError(Exception):
    pass


class MissingReferenceError(TranslintError):
    def __init__(self, reference: str):
        super().__init__(f'Reference language "{reference}" has no translation file')
        self.reference = reference


class TranslationLoadError(TranslintError):
    pass


class InvalidMarkerError(TranslintError):
    def __init__(self, marker: str):
        super().__init__(f"Placeholder marker must be a single character, got {marker!r}")
        self.marker = marker


Translation = dict[str, str]


@dataclass
class Corpus:
    reference: str
    languages: dict[str, Translation]

    def __post_init__(self) -> None:
        if self.reference not in self.languages:
            raise MissingReferenceError(self.reference)

    @property
    def reference_set(self) -> Translation:
        return self.languages[self.reference]

    def candidates(self) -> Iterator[tuple[str, Translation]]:
        for langid, translation in self.languages.items():
            if langid != self.reference:
                yield langid, translation


@dataclass(frozen=True)
class PlaceholderMismatch:
    identifier: str
    reference_text: str
    candidate_text: str

    def __str__(self) -> str:
        return f"mismatch in variables: {self.reference_text} ⇒ {self.candidate_text}"


@dataclass(frozen=True)
class StartWithoutEnd:
    name: str

    def __str__(self) -> str:
        return f"starting tag without ending tag: {self.name}"


@dataclass(frozen=True)
class EndWithoutStart:
    name: str

    def __str__(self) -> str:
        return f"ending tag without starting tag: {self.name}"


@dataclass(frozen=True)
class StartEndMismatch:
    start: str
    end: str

    def __str__(self) -> str:
        return f"starting and ending tags don't match: {self.start}, {self.end}"


@dataclass(frozen=True)
class TokenizerError:
    message: str

    def __str__(self) -> str:
        return f"unknown tokenizer error: {self.message}"


MarkupFinding = StartWithoutEnd | EndWithoutStart | StartEndMismatch | TokenizerError


@dataclass(frozen=True)
class MarkupIssue:
    text: str
    finding: MarkupFinding

    def __str__(self) -> str:
        return f"{self.text}: {self.finding}"


@dataclass
class Report:
    langid: str
    placeholder_warnings: list[str] = field(default_factory=list)
    markup_warnings: list[str] = field(default_factory=list)

    @property
    def warnings(self) -> list[str]:
        return self.placeholder_warnings + self.markup_warnings
