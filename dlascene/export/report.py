"""Human-readable status text, kept apart from the serializers."""

from __future__ import annotations

import sys
from typing import TextIO

from dlascene.export.exporter import ExportResult
from dlascene.export.registry import FormatRegistry, get_registry


def format_report(result: ExportResult, registry: FormatRegistry | None = None) -> str:
    spec = (registry or get_registry()).get(result.format_id)
    if not spec.report:
        return f"Saved {spec.id} scene to {result.path}.\n"
    return spec.report.format(path=result.path)


def print_report(result: ExportResult, stream: TextIO | None = None) -> None:
    """Observer that prints the format's status text to stdout."""
    print(format_report(result), file=stream or sys.stdout)
