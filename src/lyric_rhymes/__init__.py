"""Lyric rhyme analysis: phonetic approximation, rhyme grouping and connections."""

from .analysis import AnalysisOptions, analyze
from .classifier import classify
from .connections import ConnectionOptions, generate_connections
from .extract import extract_words, split_lines
from .grouping import build_groups, merge_groups
from .models import RhymeConnection, RhymeGroup, RhymeWord
from .phonetics import approximate_phonemes
from .syllables import count_syllables

__all__ = [
    "AnalysisOptions",
    "ConnectionOptions",
    "RhymeConnection",
    "RhymeGroup",
    "RhymeWord",
    "analyze",
    "approximate_phonemes",
    "build_groups",
    "classify",
    "count_syllables",
    "extract_words",
    "generate_connections",
    "merge_groups",
    "split_lines",
]
