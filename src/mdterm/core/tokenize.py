"""Line-oriented block tokenizer: headers, fences, lists, quotes and paragraphs"""

import logging
import re
from typing import Optional

from mdterm.core.inline import parse_inline
from mdterm.core.models import (
    BlockKind,
    BlockToken,
    CodeBlockMetadata,
    HeaderMetadata,
    ListItemMetadata,
)


logger = logging.getLogger(__name__)

HEADER_RE     = re.compile(r'^(#{1,6})\s+(.+)$')
FENCE_OPEN_RE = re.compile(r'^```(\w*)$')
FENCE_CLOSE   = '```'
BULLET_RE     = re.compile(r'^(\s*)[-*]\s+(.+)$')
ORDERED_RE    = re.compile(r'^(\s*)(\d{1,9})\.\s+(.+)$')    # longer digit runs stay paragraph text
QUOTE_RE      = re.compile(r'^>\s*(.*)$')

# any of these ends a running paragraph
BLOCK_STARTS = (HEADER_RE, FENCE_OPEN_RE, QUOTE_RE, BULLET_RE, ORDERED_RE)


def _is_blank(line: str) -> bool:
    return line.strip() == ''


def _inline_block(kind: BlockKind, content: str, metadata=None) -> BlockToken:
    """Build an inline-eligible block token with parsed children."""
    return BlockToken(kind=kind, content=content, children=parse_inline(content), metadata=metadata)


def _code_block(lines: list[str], language: Optional[str]) -> BlockToken:
    metadata = CodeBlockMetadata(language=language) if language else None
    return BlockToken(kind=BlockKind.code_block, content='\n'.join(lines), metadata=metadata)


def _take_fence(lines: list[str], i: int, language: str) -> tuple[Optional[BlockToken], int]:
    """Consume fence body lines after the opener at i - 1; return (token, next index).

    An unterminated fence is flushed with whatever was accumulated.
    """
    body: list[str] = []
    while i < len(lines):
        if lines[i] == FENCE_CLOSE:
            return _code_block(body, language), i + 1
        body.append(lines[i])
        i += 1

    if not body:
        logger.debug("Dropping empty unterminated code fence")
        return None, i
    logger.debug("Flushing unterminated code fence (%d line(s))", len(body))
    return _code_block(body, language), i


def _take_quote(lines: list[str], i: int) -> tuple[BlockToken, int]:
    """Merge consecutive '>' lines starting at i into one blockquote."""
    quoted: list[str] = []
    while i < len(lines):
        m = QUOTE_RE.match(lines[i])
        if not m:
            break
        quoted.append(m.group(1))
        i += 1
    return _inline_block(BlockKind.blockquote, '\n'.join(quoted)), i


def _take_paragraph(lines: list[str], i: int) -> tuple[BlockToken, int]:
    """Merge lines from i until a blank line or the start of another block."""
    merged: list[str] = []
    while i < len(lines):
        line = lines[i]
        if _is_blank(line) or any(p.match(line) for p in BLOCK_STARTS):
            break
        if line.startswith('#'):
            logger.debug("Hash run without following space kept as text: %r", line[:20])
        merged.append(line)
        i += 1
    return _inline_block(BlockKind.paragraph, '\n'.join(merged)), i


def _list_item(line: str) -> Optional[BlockToken]:
    """Return a list_item token for a bullet or numbered line, else None."""
    m = BULLET_RE.match(line)
    if m:
        return _inline_block(
            BlockKind.list_item, m.group(2),
            ListItemMetadata(indent=len(m.group(1)), ordered=False),
        )
    m = ORDERED_RE.match(line)
    if m:
        return _inline_block(
            BlockKind.list_item, m.group(3),
            ListItemMetadata(indent=len(m.group(1)), ordered=True, number=int(m.group(2))),
        )
    return None


def tokenize(text: Optional[str]) -> list[BlockToken]:
    """Tokenize markdown text into a flat, ordered list of BlockTokens."""
    if not text:
        return []

    lines = text.split('\n')
    tokens: list[BlockToken] = []
    i = 0

    while i < len(lines):
        line = lines[i]

        fence = FENCE_OPEN_RE.match(line)
        if fence:
            token, i = _take_fence(lines, i + 1, fence.group(1))
            if token is not None:
                tokens.append(token)
            continue

        header = HEADER_RE.match(line)
        if header:
            level = len(header.group(1))
            tokens.append(_inline_block(BlockKind.header, header.group(2), HeaderMetadata(level=level)))
            i += 1
            continue

        if QUOTE_RE.match(line):
            token, i = _take_quote(lines, i)
            tokens.append(token)
            continue

        item = _list_item(line)
        if item is not None:
            tokens.append(item)
            i += 1
            continue

        if _is_blank(line):
            i += 1
            continue

        token, i = _take_paragraph(lines, i)
        tokens.append(token)

    return tokens
