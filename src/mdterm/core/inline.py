"""Inline span resolution: code, links, bold and italic with fixed precedence"""

import re
from bisect import bisect_left
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from mdterm.core.models import InlineKind, InlineToken, LinkMetadata


CODE_RE = re.compile(r'`([^`]+)`')
LINK_RE = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')
BOLD_RES = (
    re.compile(r'\*\*([^*]+)\*\*'),
    re.compile(r'__([^_]+)__'),
)
ITALIC_DELIMITERS = ('*', '_')


@dataclass(frozen=True)
class InlineMatch:
    """A candidate span: [start, start + length) of the source string."""
    start:   int
    length:  int
    kind:    InlineKind
    content: str
    url:     Optional[str] = None

    @property
    def end(self) -> int:
        return self.start + self.length

    def overlaps(self, other: "InlineMatch") -> bool:
        return self.start < other.end and other.start < self.end

    def to_token(self) -> InlineToken:
        metadata = LinkMetadata(url=self.url) if self.kind == InlineKind.link else None
        return InlineToken(kind=self.kind, content=self.content, metadata=metadata)


def _find_code(text: str) -> Iterator[InlineMatch]:
    for m in CODE_RE.finditer(text):
        yield InlineMatch(m.start(), len(m.group(0)), InlineKind.inline_code, m.group(1))


def _find_links(text: str) -> Iterator[InlineMatch]:
    for m in LINK_RE.finditer(text):
        yield InlineMatch(m.start(), len(m.group(0)), InlineKind.link, m.group(1), url=m.group(2))


def _find_bold(text: str) -> Iterator[InlineMatch]:
    for pattern in BOLD_RES:
        for m in pattern.finditer(text):
            yield InlineMatch(m.start(), len(m.group(0)), InlineKind.bold, m.group(1))


def _scan_single(text: str, delim: str) -> Iterator[InlineMatch]:
    """Yield delim-wrapped spans whose delimiters are not doubled on either side."""
    n = len(text)
    i = text.find(delim)
    while i != -1:
        opens = (i == 0 or text[i - 1] != delim) and i + 1 < n and text[i + 1] != delim
        close = text.find(delim, i + 1) if opens else -1
        if close != -1 and (close + 1 == n or text[close + 1] != delim):
            yield InlineMatch(i, close - i + 1, InlineKind.italic, text[i + 1:close])
            i = text.find(delim, close + 1)
        else:
            i = text.find(delim, i + 1)


def _find_italic(text: str) -> Iterator[InlineMatch]:
    for delim in ITALIC_DELIMITERS:
        yield from _scan_single(text, delim)


# Highest precedence first: an accepted span blocks every later candidate touching it.
FINDERS: tuple[Callable[[str], Iterator[InlineMatch]], ...] = (
    _find_code,
    _find_links,
    _find_bold,
    _find_italic,
)


def find_matches(text: str) -> list[InlineMatch]:
    """Collect non-overlapping inline matches in precedence order, sorted by start.

    accepted stays disjoint and start-ordered, so only the two spans adjacent to
    a candidate's insertion point can intersect it.
    """
    accepted: list[InlineMatch] = []
    starts: list[int] = []
    for finder in FINDERS:
        for candidate in finder(text):
            i = bisect_left(starts, candidate.start)
            neighbours = accepted[max(i - 1, 0):i + 1]
            if not any(candidate.overlaps(m) for m in neighbours):
                accepted.insert(i, candidate)
                starts.insert(i, candidate.start)
    return accepted


def parse_inline(text: str) -> list[InlineToken]:
    """Split text into inline tokens; unmatched stretches become text tokens."""
    if not text:
        return []

    tokens: list[InlineToken] = []
    cursor = 0
    for match in find_matches(text):
        if match.start > cursor:
            tokens.append(InlineToken(kind=InlineKind.text, content=text[cursor:match.start]))
        tokens.append(match.to_token())
        cursor = match.end

    if cursor < len(text):
        tokens.append(InlineToken(kind=InlineKind.text, content=text[cursor:]))
    return tokens
