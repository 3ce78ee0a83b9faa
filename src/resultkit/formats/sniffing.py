# topmark:header:start
#
#   project      : ResultKit
#   file         : sniffing.py
#   file_relpath : src/resultkit/formats/sniffing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content sniffing: guess a result format from partial evidence.

Evidence is any subset of a syntax URI, a MIME type, a content sample and an
identifier (typically a filename). Each registered factory is scored in
registration order:

1. A declared MIME type equal to ``mime_type`` sets the score to its quality
   weight. A weight of `DECISIVE_SCORE` (10) or more ends the scan: that
   factory wins outright.
2. A declared syntax URI equal to ``uri`` also ends the scan.
3. Otherwise the factory's sniff hook, if any, sees the first `SNIFF_WINDOW`
   bytes of the sample plus the identifier, its suffix and the MIME type, and
   its answer is added to the score.

Scores start at `NO_SCORE` (-1) and are capped at `DECISIVE_SCORE`, so hook
scores alone never outrank declared metadata. Without a decisive match the
highest score wins if it is non-negative; otherwise there is no guess.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from resultkit.config.logging import get_logger
from resultkit.constants import DECISIVE_SCORE, NO_SCORE, SNIFF_WINDOW

if TYPE_CHECKING:
    from collections.abc import Iterable

    from resultkit.config.logging import ResultKitLogger
    from resultkit.formats.base import FormatFactory

logger: ResultKitLogger = get_logger(__name__)

SUFFIX_SEPARATOR: Final[str] = "."


@dataclass(frozen=True)
class SyntaxScore:
    """Score of one candidate factory."""

    score: int
    factory: FormatFactory


def extract_suffix(identifier: str | None) -> str | None:
    """Return the lower-cased suffix after the last ``.`` of ``identifier``.

    The suffix is only used when it consists solely of ASCII letters and
    digits; anything else (``"data.tar-gz"``, ``"file."``) yields ``None``
    rather than a partial suffix.

    Examples:
        >>> extract_suffix("results.SRJ")
        'srj'
        >>> extract_suffix("http://example.org/q?format=json") is None
        True
    """
    if not identifier:
        return None
    _, sep, tail = identifier.rpartition(SUFFIX_SEPARATOR)
    if not sep or not tail:
        return None
    if not (tail.isascii() and tail.isalnum()):
        return None
    return tail.lower()


def _run_sniff_hook(
    factory: FormatFactory,
    sample: bytes,
    identifier: str | None,
    suffix: str | None,
    mime_type: str | None,
) -> int:
    if factory.sniff is None:
        return 0
    try:
        return int(factory.sniff(sample, identifier, suffix, mime_type))
    except Exception:
        logger.exception("Sniff hook of format '%s' failed; ignoring it", factory.name)
        return 0


def score_factories(
    factories: Iterable[FormatFactory],
    *,
    uri: str | None = None,
    mime_type: str | None = None,
    buffer: bytes | None = None,
    identifier: str | None = None,
) -> tuple[FormatFactory | None, list[SyntaxScore]]:
    """Score every factory against the evidence.

    Returns:
        tuple[FormatFactory | None, list[SyntaxScore]]: The decisively matched
        factory (or ``None``) and the scores recorded before the scan stopped.
    """
    suffix: str | None = extract_suffix(identifier)
    sample: bytes = (buffer or b"")[:SNIFF_WINDOW]
    scores: list[SyntaxScore] = []

    for factory in factories:
        score: int = NO_SCORE

        if mime_type:
            q: int | None = factory.mime_quality(mime_type)
            if q is not None:
                score = q
        if score >= DECISIVE_SCORE:
            logger.trace("Format '%s' is authoritative for %s", factory.name, mime_type)
            return factory, scores

        if uri and factory.declares_uri(uri):
            logger.trace("Format '%s' declares syntax URI %s", factory.name, uri)
            return factory, scores

        if factory.sniff is not None:
            score += _run_sniff_hook(factory, sample, identifier, suffix, mime_type)

        score = min(score, DECISIVE_SCORE)
        logger.trace("Score %15s : %d", factory.name, score)
        scores.append(SyntaxScore(score=score, factory=factory))

    return None, scores


def guess_format_name(
    factories: Iterable[FormatFactory],
    *,
    uri: str | None = None,
    mime_type: str | None = None,
    buffer: bytes | None = None,
    identifier: str | None = None,
) -> str | None:
    """Guess the name of the format best matching the evidence.

    Args:
        factories (Iterable[FormatFactory]): Candidates in registration order.
        uri (str | None): Syntax URI of the content.
        mime_type (str | None): MIME type of the content.
        buffer (bytes | None): Content sample (any length; only the first
            1024 bytes are inspected).
        identifier (str | None): Content identifier, typically a filename or URL.

    Returns:
        str | None: The first name of the winning format, or ``None`` when no
        candidate scored at least 0.
    """
    decisive, scores = score_factories(
        factories, uri=uri, mime_type=mime_type, buffer=buffer, identifier=identifier
    )
    if decisive is not None:
        return decisive.name

    if not scores:
        return None
    best: SyntaxScore = sorted(scores, key=lambda s: s.score, reverse=True)[0]
    if best.score < 0:
        return None
    return best.factory.name
