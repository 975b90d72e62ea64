"""Terminal rendering of block tokens using click/typer style sequences.

Styles are always emitted; whether they reach the terminal is decided by the
caller when echoing (``typer.echo(..., color=...)`` strips them off a non-TTY).
"""

from typing import Optional

import typer

from mdterm.core.models import BlockKind, BlockToken, InlineKind, InlineToken
from mdterm.core.tokenize import tokenize


HEADER_STYLES: dict[int, dict[str, bool]] = {
    1: {"bold": True, "underline": True},
    2: {"bold": True},
    3: {"bold": True, "dim": True},
    4: {"dim": True},
    5: {"dim": True},
    6: {"dim": True},
}
CODE_INDENT = "  "
LIST_INDENT = "  "    # per two columns of source indent
CODE_COLOR = "bright_black"
INLINE_CODE_COLOR = "cyan"
LINK_COLOR = "blue"
QUOTE_MARKER = "| "
QUOTE_STYLE = {"dim": True}

# kinds followed by an empty line regardless of position
SPACED_KINDS = frozenset({BlockKind.header, BlockKind.code_block})


def _reopen(style: dict[str, bool]) -> str:
    """Escape sequence that turns an enclosing block style back on after a reset."""
    return typer.style("", reset=False, **style) if style else ""


def render_inline_token(token: InlineToken, restore: str = "") -> str:
    """Render one inline span; restore is appended after every style reset."""
    if token.kind == InlineKind.bold:
        return typer.style(token.content, bold=True) + restore
    if token.kind == InlineKind.italic:
        return typer.style(token.content, italic=True) + restore
    if token.kind == InlineKind.inline_code:
        return typer.style(token.content, fg=INLINE_CODE_COLOR) + restore
    if token.kind == InlineKind.link:
        url = typer.style(token.metadata.url, fg=LINK_COLOR, underline=True)
        return f"{token.content} ({url}{restore})"
    return token.content


def render_inline(tokens: list[InlineToken], style: dict[str, bool] = None) -> str:
    """Render inline spans inside a block styled with style, keeping it active between spans."""
    restore = _reopen(style or {})
    return "".join(render_inline_token(t, restore) for t in tokens)


def _body(token: BlockToken, style: dict[str, bool] = None) -> str:
    """Rendered inline children, or raw content when there are none."""
    if token.children is None:
        return token.content
    return render_inline(token.children, style)


def _render_header(token: BlockToken) -> str:
    style = HEADER_STYLES.get(token.metadata.level, {})
    return typer.style(_body(token, style), **style)


def _render_code_block(token: BlockToken) -> str:
    lines = []
    if token.metadata is not None:
        lines.append(typer.style(f"[{token.metadata.language}]", dim=True))
    for line in token.content.split("\n"):
        lines.append(typer.style(CODE_INDENT, dim=True) + typer.style(line, fg=CODE_COLOR))
    return "\n".join(lines)


def _render_list_item(token: BlockToken) -> str:
    meta = token.metadata
    indent = LIST_INDENT * (meta.indent // 2)
    number = meta.number if meta.number is not None else 1
    prefix = f"{number}." if meta.ordered else "-"
    return f"{indent}{prefix} {_body(token)}"


def _render_blockquote(token: BlockToken) -> str:
    lines = _body(token, QUOTE_STYLE).split("\n")
    return "\n".join(typer.style(f"{QUOTE_MARKER}{line}", **QUOTE_STYLE) for line in lines)


RENDERERS = {
    BlockKind.header:     _render_header,
    BlockKind.code_block: _render_code_block,
    BlockKind.list_item:  _render_list_item,
    BlockKind.blockquote: _render_blockquote,
    BlockKind.paragraph:  _body,
}


def render_token(token: BlockToken) -> str:
    """Render a single block token to a styled, possibly multi-line string."""
    return RENDERERS[token.kind](token)


def render_tokens(tokens: list[BlockToken]) -> str:
    """Join rendered blocks, leaving a blank line after headers, code and inner paragraphs."""
    parts: list[str] = []
    last = len(tokens) - 1
    for i, token in enumerate(tokens):
        parts.append(render_token(token))
        if token.kind in SPACED_KINDS or (token.kind == BlockKind.paragraph and i < last):
            parts.append("")
    return "\n".join(parts).rstrip()


def render(text: Optional[str]) -> str:
    """Render markdown text to a styled string for terminal display."""
    if not text:
        return ""
    tokens = tokenize(text)
    if not tokens:
        return text.rstrip()
    return render_tokens(tokens)
