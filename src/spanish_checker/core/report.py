"""Pure report rendering for check results.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.  The CLI layer is responsible for
writing :attr:`RenderedReport.text` to standard output.

Rendering order:

1. **Extract** — slice each match's snippet out of the source text.
2. **Count** — tally identical snippets to find repetitions.
3. **Format** — numbered entries framed by a header and a summary.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from spanish_checker.config import MAX_SUGGESTIONS, RULE_WIDTH
from spanish_checker.core.models import CheckResult, Match

NO_ERRORS_MESSAGE: str = "✓ No se encontraron errores"
NO_SUGGESTIONS: str = "ninguna"


@dataclass(frozen=True, slots=True)
class RenderedReport:
    """Lines of a finished report plus the figures in its summary."""

    lines: tuple[str, ...]
    total_errors: int
    repeated_errors: int

    @property
    def text(self) -> str:
        return "\n".join(self.lines) + "\n"


# ---------------------------------------------------------------------------
# 1. Extract
# ---------------------------------------------------------------------------

def extract_snippet(text: str, offset: int, length: int) -> str:
    """Return the code-point span ``[offset, offset + length)`` of *text*.

    The end is clamped to the text length and an offset past the end
    yields an empty string, so a response computed against a slightly
    different text never raises.
    """
    end = min(offset + length, len(text))
    return text[offset:end]


# ---------------------------------------------------------------------------
# 2. Count
# ---------------------------------------------------------------------------

def count_repeated(snippets: Iterable[str]) -> int:
    """Count extra occurrences of snippets that appear more than once.

    A snippet seen *k* times contributes ``k - 1``.  Comparison is exact
    and case-sensitive.
    """
    counts = Counter(snippets)
    return sum(count - 1 for count in counts.values() if count > 1)


# ---------------------------------------------------------------------------
# 3. Format
# ---------------------------------------------------------------------------

def format_suggestions(match: Match, limit: int = MAX_SUGGESTIONS) -> str:
    """Quote and join the first *limit* suggestions, or ``ninguna``."""
    suggestions = [f"'{value}'" for value in match.suggestions(limit)]
    if not suggestions:
        return NO_SUGGESTIONS
    return ", ".join(suggestions)


def _format_entry(index: int, match: Match, snippet: str) -> list[str]:
    return [
        f"{index}. [{match.category}]",
        f'   Error: "{snippet}"',
        f"   Sugerencias: {format_suggestions(match)}",
        f"   Contexto: ...{match.context.text}...",
        "",
    ]


def _rule() -> str:
    return "-" * RULE_WIDTH


def render_report(result: CheckResult | Sequence[Match], source_text: str) -> RenderedReport:
    """Render *result* against the text it was computed from.

    An empty result renders as the single no-errors line.
    """
    matches = result.matches if isinstance(result, CheckResult) else tuple(result)

    if not matches:
        return RenderedReport(lines=(NO_ERRORS_MESSAGE,), total_errors=0, repeated_errors=0)

    lines: list[str] = ["", f"{len(matches)} errores encontrados:", "", _rule()]
    snippets: list[str] = []

    for index, match in enumerate(matches, start=1):
        snippet = extract_snippet(source_text, match.offset, match.length)
        snippets.append(snippet)
        lines.extend(_format_entry(index, match, snippet))

    total = len(matches)
    repeated = count_repeated(snippets)

    lines.extend(
        (
            _rule(),
            "Resumen:",
            f"  Palabras mal escritas (total): {total}",
            f"  Repeticiones de las mismas palabras: {repeated}",
        )
    )
    return RenderedReport(lines=tuple(lines), total_errors=total, repeated_errors=repeated)
