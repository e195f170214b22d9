from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from html.parser import HTMLParser
import logging

from translint.classes import (
    Corpus,
    EndWithoutStart,
    MarkupFinding,
    MarkupIssue,
    StartEndMismatch,
    StartWithoutEnd,
    TokenizerError,
)

logger = logging.getLogger(__name__)


class TokenType(Enum):
    TEXT = "text"
    START = "start"
    END = "end"
    SELF_CLOSING = "self-closing"
    ERROR = "error"


@dataclass(frozen=True)
class Token:
    type: TokenType
    data: str = ""


class _TokenCollector(HTMLParser):
    # Contents of these elements are plain text, not markup.
    CDATA_CONTENT_ELEMENTS = (
        "iframe",
        "noembed",
        "noframes",
        "noscript",
        "script",
        "style",
        "textarea",
        "title",
        "xmp",
    )

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.pending: list[Token] = []

    def handle_starttag(self, tag, attrs):
        self.pending.append(Token(TokenType.START, tag))

    def handle_startendtag(self, tag, attrs):
        self.pending.append(Token(TokenType.SELF_CLOSING, tag))

    def handle_endtag(self, tag):
        self.pending.append(Token(TokenType.END, tag))

    def handle_data(self, data):
        self.pending.append(Token(TokenType.TEXT, data))

    def drain(self) -> list[Token]:
        tokens, self.pending = self.pending, []
        return tokens


def tokenize(text: str) -> Iterator[Token]:
    # A parser failure is yielded as a single ERROR token and ends the stream.
    collector = _TokenCollector()
    try:
        collector.feed(text)
        collector.close()
    except Exception as ex:
        yield from collector.drain()
        yield Token(TokenType.ERROR, str(ex))
        return
    yield from collector.drain()


def find_markup_errors(text: str) -> list[MarkupFinding]:
    # Every closing tag pops the most recently opened one, matching or not.
    errors: list[MarkupFinding] = []
    stack: list[str] = []
    for token in tokenize(text):
        if token.type is TokenType.START:
            stack.append(token.data)
        elif token.type is TokenType.END:
            if not stack:
                errors.append(EndWithoutStart(token.data))
                continue
            start = stack.pop()
            if start != token.data:
                errors.append(StartEndMismatch(start, token.data))
        elif token.type is TokenType.ERROR:
            errors.append(TokenizerError(token.data))
            break
    errors.extend(StartWithoutEnd(name) for name in reversed(stack))
    return errors


def check_markup(text: str) -> list[str]:
    return [str(error) for error in find_markup_errors(text)]


def find_corpus_markup_errors(corpus: Corpus) -> dict[str, list[MarkupIssue]]:
    result: dict[str, list[MarkupIssue]] = defaultdict(list)
    for langid, translation in corpus.languages.items():
        for key, text in translation.items():
            errors = find_markup_errors(text)
            if errors:
                logger.debug(f'[{langid}] "{key}" has {len(errors)} markup errors')
            result[langid].extend(MarkupIssue(text, error) for error in errors)
    return {langid: issues for langid, issues in result.items() if issues}


def check_markup_balance(corpus: Corpus) -> dict[str, list[str]]:
    return {
        langid: [str(issue) for issue in issues]
        for langid, issues in find_corpus_markup_errors(corpus).items()
    }
