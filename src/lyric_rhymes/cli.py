"""Command line interface for the lyric rhyme analyser."""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from tabulate import tabulate
from tqdm import tqdm

from .analysis import AnalysisOptions, analyze
from .classifier import classify
from .connections import MAX_COMPLEXITY, MIN_COMPLEXITY, ConnectionOptions, generate_connections
from .extract import split_lines
from .models import RHYME_TYPES, RhymeConnection
from .phonetics import approximate_phonemes
from .scheme import detect_scheme_pattern, end_rhyme_scheme, line_density, rhyme_stats
from .syllables import count_syllables

LOGGER = logging.getLogger("lyric_rhymes")

DEFAULT_MAX_CONNECTIONS = 80
DEFAULT_COMPLEXITY = 3


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _default_max_connections() -> int:
    value = os.environ.get("LYRIC_RHYMES_MAX_CONNECTIONS")
    if value:
        try:
            parsed = int(value)
        except ValueError:
            parsed = -1
        if parsed >= 0:
            return parsed
        LOGGER.warning("Ignoring invalid LYRIC_RHYMES_MAX_CONNECTIONS=%r", value)
    return DEFAULT_MAX_CONNECTIONS


def _default_complexity() -> int:
    value = os.environ.get("LYRIC_RHYMES_COMPLEXITY")
    if value:
        try:
            parsed = int(value)
        except ValueError:
            parsed = 0
        if MIN_COMPLEXITY <= parsed <= MAX_COMPLEXITY:
            return parsed
        LOGGER.warning("Ignoring invalid LYRIC_RHYMES_COMPLEXITY=%r", value)
    return DEFAULT_COMPLEXITY


def _default_types() -> FrozenSet[str]:
    value = os.environ.get("LYRIC_RHYMES_TYPES")
    if value:
        try:
            return _parse_types(value)
        except ValueError:
            LOGGER.warning("Ignoring invalid LYRIC_RHYMES_TYPES=%r", value)
    return frozenset(RHYME_TYPES)


def _parse_types(value: str) -> FrozenSet[str]:
    types = frozenset(part.strip().lower() for part in value.split(",") if part.strip())
    unknown = types.difference(RHYME_TYPES)
    if not types or unknown:
        raise ValueError(f"Unknown rhyme types: {', '.join(sorted(unknown)) or value}")
    return types


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Rhyme analysis for song lyrics")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--format", choices=["table", "json"], default="table", help="Output format")

    subparsers = parser.add_subparsers(dest="command", required=True)

    word_parser = subparsers.add_parser("word", help="Show the phonetic approximation and rhyme class of words")
    word_parser.add_argument("words", nargs="+", help="Words to inspect")

    analyze_parser = subparsers.add_parser("analyze", help="Find rhyme groups in lyric files")
    analyze_parser.add_argument("files", nargs="+", help="Lyric files ('-' reads standard input)")
    analyze_parser.add_argument("--no-internal", action="store_true", help="Only consider end rhymes")

    scheme_parser = subparsers.add_parser("scheme", help="Show the end-rhyme scheme of lyric files")
    scheme_parser.add_argument("files", nargs="+", help="Lyric files ('-' reads standard input)")

    connections_parser = subparsers.add_parser("connections", help="List rhyme connections for visualisation")
    connections_parser.add_argument("file", help="Lyric file ('-' reads standard input)")
    connections_parser.add_argument(
        "--max-connections", type=int, default=_default_max_connections(), help="Maximum number of connections"
    )
    connections_parser.add_argument(
        "--complexity", type=int, default=_default_complexity(), help="Connection complexity level (1-5)"
    )
    connections_parser.add_argument("--focus", help="Only connect the word at LINE-POSITION")
    connections_parser.add_argument("--types", help="Comma separated rhyme types to include")
    connections_parser.add_argument("--group", help="Only connect words of this group id")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "word":
        _print_words(args.words, args.format)
        return

    if args.command == "connections":
        try:
            types = _parse_types(args.types) if args.types else _default_types()
            options = ConnectionOptions(
                max_connections=args.max_connections,
                complexity_level=args.complexity,
                focus_word_key=args.focus,
                type_filter=types,
                selected_group_id=args.group,
            )
        except ValueError as exc:
            parser.error(str(exc))
        lyrics = _read_lyrics(parser, args.file)
        connections = generate_connections(analyze(lyrics), options)
        _print_connections(connections, args.format)
        return

    documents = [(name, _read_lyrics(parser, name)) for name in args.files]
    reports: List[Tuple[str, Dict[str, Any]]] = []
    for name, lyrics in tqdm(documents, desc="Lyrics", disable=len(documents) < 2):
        if args.command == "analyze":
            groups = analyze(lyrics, AnalysisOptions(include_internal=not args.no_internal))
            reports.append((name, {"groups": [group.to_dict() for group in groups]}))
        elif args.command == "scheme":
            reports.append((name, _scheme_report(lyrics)))

    if args.format == "json":
        print(json.dumps(dict(reports), indent=2))
        return
    for name, report in reports:
        if len(reports) > 1:
            print(f"== {name}")
        if args.command == "analyze":
            _print_groups(report["groups"])
        else:
            _print_scheme(report)


def _read_lyrics(parser: argparse.ArgumentParser, name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    path = Path(name)
    if not path.is_file():
        parser.error(f"Lyric file {path} does not exist.")
    return path.read_text(encoding="utf8")


def _scheme_report(lyrics: str) -> Dict[str, Any]:
    lines = split_lines(lyrics)
    groups = analyze(lyrics)
    scheme = end_rhyme_scheme(groups, lines)
    return {
        "scheme": scheme,
        "pattern": detect_scheme_pattern(scheme),
        "stats": rhyme_stats(groups, lines).to_dict(),
        "density": line_density(groups, lines),
    }


def _print_words(words: List[str], output_format: str) -> None:
    rows = []
    for word in words:
        classification = classify(word)
        rows.append(
            [
                word,
                approximate_phonemes(word).text,
                count_syllables(word),
                classification.rhyme_type,
                classification.key,
                round(classification.strength, 2),
            ]
        )
    headers = ["Word", "Phonemes", "Syllables", "Type", "Key", "Strength"]
    if output_format == "json":
        print(json.dumps([dict(zip(headers, row)) for row in rows], indent=2))
    else:
        print(tabulate(rows, headers=headers))


def _print_groups(groups: List[Dict[str, Any]]) -> None:
    if not groups:
        print("No rhymes detected")
        return
    rows = []
    for group in groups:
        words = ", ".join(f"{word['word']} ({word['line']}:{word['position']})" for word in group["words"])
        rows.append([group["id"], group["type"], round(group["strength"], 2), words])
    print(tabulate(rows, headers=["Group", "Type", "Strength", "Words"]))


def _print_scheme(report: Dict[str, Any]) -> None:
    print(f"Scheme: {' '.join(report['scheme']) or '(empty)'}")
    if report["pattern"]:
        print(f"Pattern: {report['pattern']}")
    stats = report["stats"]
    print(tabulate([[key.replace("_", " "), value] for key, value in stats.items()], headers=["Statistic", "Value"]))


def _print_connections(connections: List[RhymeConnection], output_format: str) -> None:
    if output_format == "json":
        print(json.dumps([connection.to_dict() for connection in connections], indent=2))
        return
    if not connections:
        print("No connections")
        return
    rows = [
        [
            f"{connection.source.word} ({connection.source.key})",
            f"{connection.target.word} ({connection.target.key})",
            connection.group.id,
            round(connection.group.strength, 2),
            connection.distance,
            round(connection.density, 2),
        ]
        for connection in connections
    ]
    print(tabulate(rows, headers=["Source", "Target", "Group", "Strength", "Distance", "Density"]))


if __name__ == "__main__":  # pragma: no cover
    main()
