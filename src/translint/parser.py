#!/usr/bin/python3
# Copyright (c) 2023 Peace-Maker
import json
import logging
import pathlib
import sys
from typing import TextIO

from translint.classes import Corpus, Report, Translation, TranslationLoadError
from translint.markup import check_markup_balance
from translint.placeholders import DEFAULT_MARKER, check_placeholders

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE = "en"
DEFAULT_PATTERN = "??.json"


def discover_translations(
    path: str | pathlib.Path, pattern: str = DEFAULT_PATTERN
) -> dict[str, pathlib.Path]:
    folder = pathlib.Path(path)
    if not folder.is_dir():
        raise TranslationLoadError(f"Must exist and be a readable directory: {folder}")

    files = {}
    for file in sorted(folder.glob(pattern)):
        if not file.is_file():
            continue
        files[file.stem] = file
    return files


def load_translation(path: str | pathlib.Path) -> Translation:
    file = pathlib.Path(path)
    logger.debug(f"Parsing {file}")
    try:
        translation = json.loads(file.read_text("utf-8"))
    except (OSError, ValueError) as ex:
        raise TranslationLoadError(f"Error parsing {file.name}: {ex}") from ex

    if not isinstance(translation, dict):
        raise TranslationLoadError(f"File {file.name} does not contain a JSON object")
    for key, value in translation.items():
        if not isinstance(value, str):
            raise TranslationLoadError(
                f'File {file.name}: value of "{key}" is not a string'
            )
    return translation


def load_corpus(
    path: str | pathlib.Path,
    reference: str = DEFAULT_REFERENCE,
    pattern: str = DEFAULT_PATTERN,
) -> Corpus:
    languages = {
        langid: load_translation(file)
        for langid, file in discover_translations(path, pattern).items()
    }
    logger.info(f"Available languages: {len(languages)}")
    return Corpus(reference, languages)


def build_reports(corpus: Corpus, marker: str = DEFAULT_MARKER) -> list[Report]:
    placeholder_warnings = check_placeholders(corpus, marker=marker)
    markup_warnings = check_markup_balance(corpus)

    reports = []
    for langid in sorted(corpus.languages):
        report = Report(
            langid,
            placeholder_warnings.get(langid, []),
            markup_warnings.get(langid, []),
        )
        if report.warnings:
            logger.error(f"Found {len(report.warnings)} issues for {langid}")
            reports.append(report)
        else:
            logger.info(f"No issues found for {langid}")
    return reports


def write_reports(reports: list[Report], stream: TextIO) -> None:
    for report in reports:
        stream.write(f"[{report.langid}]\n")
        for warning in report.warnings:
            stream.write(f"    {warning}\n")


def run(
    *,
    translation_folder_path: str,
    reference: str = DEFAULT_REFERENCE,
    marker: str = DEFAULT_MARKER,
    pattern: str = DEFAULT_PATTERN,
    stream: TextIO | None = None,
) -> int:
    logger.info(f"Parsing translations in {translation_folder_path}...")
    corpus = load_corpus(translation_folder_path, reference, pattern)

    reports = build_reports(corpus, marker)
    write_reports(reports, stream if stream is not None else sys.stderr)
    return 1 if reports else 0
