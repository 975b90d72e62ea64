"""Block and inline token models produced by the tokenizer"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BlockKind(str, Enum):
    """Top-level markdown elements recognised by the tokenizer"""
    header = "header"
    code_block = "code_block"
    list_item = "list_item"
    blockquote = "blockquote"
    paragraph = "paragraph"


class InlineKind(str, Enum):
    """Character-level spans found inside a block's content"""
    text = "text"
    bold = "bold"
    italic = "italic"
    inline_code = "inline_code"
    link = "link"


class HeaderMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    level: int = Field(..., ge=1, le=6)


class CodeBlockMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    language: str = Field(..., min_length=1)


class ListItemMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    indent: int = Field(default=0, ge=0, description="Raw leading whitespace width")
    ordered: bool = False
    number: Optional[int] = None    # ordered items only


class LinkMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    url: str


BlockMetadata = Union[HeaderMetadata, CodeBlockMetadata, ListItemMetadata]

# metadata class each block kind must carry; None means no metadata allowed
METADATA_TYPES: dict[BlockKind, Optional[type]] = {
    BlockKind.header:     HeaderMetadata,
    BlockKind.code_block: CodeBlockMetadata,
    BlockKind.list_item:  ListItemMetadata,
    BlockKind.blockquote: None,
    BlockKind.paragraph:  None,
}

INLINE_ELIGIBLE = frozenset({
    BlockKind.header,
    BlockKind.list_item,
    BlockKind.blockquote,
    BlockKind.paragraph,
})


class InlineToken(BaseModel):
    """One inline span; content is the displayed text with delimiters consumed."""
    model_config = ConfigDict(frozen=True)
    kind: InlineKind
    content: str
    metadata: Optional[LinkMetadata] = None

    @model_validator(mode="after")
    def _check_metadata(self):
        if (self.kind == InlineKind.link) != (self.metadata is not None):
            raise ValueError(f"{self.kind.value} token has mismatched metadata: {self.metadata!r}")
        return self


class BlockToken(BaseModel):
    """One top-level markdown element.

    children holds the inline tokens for inline-eligible kinds and is None for
    code blocks, whose content is rendered verbatim. metadata is a kind-specific
    model, or None for blockquotes, paragraphs and code blocks without a language.
    """
    model_config = ConfigDict(frozen=True)
    kind: BlockKind
    content: str = ""
    children: Optional[list[InlineToken]] = None
    metadata: Optional[BlockMetadata] = None

    @model_validator(mode="after")
    def _check_shape(self):
        if (self.kind in INLINE_ELIGIBLE) != (self.children is not None):
            raise ValueError(f"{self.kind.value} token has mismatched children")
        expected = METADATA_TYPES[self.kind]
        if self.metadata is not None and not isinstance(self.metadata, expected or ()):
            raise ValueError(
                f"{self.kind.value} token cannot carry {type(self.metadata).__name__}"
            )
        if self.metadata is None and expected in (HeaderMetadata, ListItemMetadata):
            raise ValueError(f"{self.kind.value} token requires {expected.__name__}")
        return self
