from collections import defaultdict
import logging
import re

from translint.classes import Corpus, InvalidMarkerError, PlaceholderMismatch

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "$"


def placeholder_regex(marker: str = DEFAULT_MARKER) -> re.Pattern[str]:
    if not isinstance(marker, str) or len(marker) != 1:
        raise InvalidMarkerError(marker)
    escaped = re.escape(marker)
    return re.compile(f"{escaped}[^{escaped}]+{escaped}")


def extract_placeholders(text: str, marker: str = DEFAULT_MARKER) -> list[str]:
    # Duplicates are kept: "$a$ and $a$" has two placeholders.
    return sorted(placeholder_regex(marker).findall(text))


def find_placeholder_mismatches(
    corpus: Corpus, marker: str = DEFAULT_MARKER
) -> dict[str, list[PlaceholderMismatch]]:
    param_regex = placeholder_regex(marker)
    result: dict[str, list[PlaceholderMismatch]] = defaultdict(list)

    for key, reference_text in corpus.reference_set.items():
        # An empty reference list still matters: the translation may have
        # gained placeholders the original never had.
        reference_params = sorted(param_regex.findall(reference_text))
        for langid, translation in corpus.candidates():
            candidate_text = translation.get(key, "")
            if not candidate_text:
                continue
            if sorted(param_regex.findall(candidate_text)) != reference_params:
                logger.debug(f'[{langid}] "{key}" has mismatching variables')
                result[langid].append(
                    PlaceholderMismatch(key, reference_text, candidate_text)
                )
    return dict(result)


def check_placeholders(
    corpus: Corpus, reference: str | None = None, marker: str = DEFAULT_MARKER
) -> dict[str, list[str]]:
    if reference is not None and reference != corpus.reference:
        corpus = Corpus(reference, corpus.languages)

    return {
        langid: [str(mismatch) for mismatch in mismatches]
        for langid, mismatches in find_placeholder_mismatches(corpus, marker).items()
    }
