"""fnspan — locate function definitions by line span and flag long ones."""

from fnspan.models import (
    CheckResult,
    FileResult,
    FunctionLength,
    FunctionSpan,
    StaleEntry,
    Violation,
)
from fnspan.analyzer import analyze
from fnspan.parsers import Parser
from fnspan.parsers.javascript import extract_functions

__all__ = [
    "extract_functions",
    "analyze",
    "Parser",
    "FunctionSpan",
    "FunctionLength",
    "Violation",
    "StaleEntry",
    "FileResult",
    "CheckResult",
]
