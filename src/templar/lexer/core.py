"""Chunk-aware state-machine lexer.

A template arrives as N+1 literal chunks around N holes. Each chunk is
scanned by a single-use ChunkScanner seeded from the LexerState the previous
chunk left behind; the Lexer emits a zero-width EXPRESSION token at every
boundary that is not inside a comment.

No backtracking: every scanner call advances the position, so tokenization
is O(n) in the total template length.

Thread Safety:
ChunkScanner and Lexer instances are single-use. All state is
instance-local or carried in immutable LexerState values.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Set

from templar.config import get_parse_config
from templar.errors import TemplateSyntaxError
from templar.lexer.modes import LexerMode
from templar.lexer.scanners import (
    AttributeScannerMixin,
    CommentScannerMixin,
    RawTextScannerMixin,
    TagScannerMixin,
    TextScannerMixin,
)
from templar.lexer.state import LexerState
from templar.tokens import Token, TokenType
from templar.utils.logger import get_logger

logger = get_logger(__name__)


class ChunkScanner(
    TextScannerMixin,
    TagScannerMixin,
    AttributeScannerMixin,
    RawTextScannerMixin,
    CommentScannerMixin,
):
    """Scans one literal chunk starting from a LexerState.

    Usage:
            >>> scanner = ChunkScanner('<a href="', LexerState(), frozenset())
            >>> tokens, state = scanner.run()
            >>> state.mode
        <LexerMode.ATTRIBUTE_VALUE: 3>

    """

    __slots__ = (
        "_chunk",
        "_chunk_len",
        "_pos",
        "_base",  # Global offset of chunk[0]
        "_mode",
        "_quote",
        "_tag_name",
        "_closing_tag",
        "_last_type",
        "_raw_text_names",
        "_source_name",
        "_tokens",
    )

    def __init__(
        self,
        chunk: str,
        state: LexerState,
        raw_text_names: Set[str],
        source_name: str | None = None,
    ) -> None:
        self._chunk = chunk
        self._chunk_len = len(chunk)
        self._pos = 0
        self._base = state.offset
        self._mode = state.mode
        self._quote = state.quote
        self._tag_name = state.tag_name
        self._closing_tag = state.closing_tag
        self._last_type = state.last_type
        self._raw_text_names = raw_text_names
        self._source_name = source_name
        self._tokens: list[Token] = []

    def run(self) -> tuple[list[Token], LexerState]:
        """Scan the whole chunk.

        Returns:
            Tokens of this chunk and the state to resume from.

        Raises:
            LexError: On a character that cannot appear inside a tag.
        """
        chunk_len = self._chunk_len
        while self._pos < chunk_len:
            self._dispatch_mode()

        state = LexerState(
            mode=self._mode,
            offset=self._base + chunk_len,
            quote=self._quote,
            tag_name=self._tag_name,
            closing_tag=self._closing_tag,
            last_type=self._last_type,
        )
        return self._tokens, state

    def _dispatch_mode(self) -> None:
        """Dispatch to the scanner for the current mode."""
        mode = self._mode
        if mode is LexerMode.TEXT:
            self._scan_text()
        elif mode is LexerMode.TAG:
            self._scan_tag()
        elif mode is LexerMode.ATTRIBUTE_VALUE:
            self._scan_attribute_value()
        elif mode is LexerMode.RAW_TEXT:
            self._scan_raw_text()
        elif mode is LexerMode.COMMENT:
            self._scan_comment()

    def _emit(
        self,
        token_type: TokenType,
        value: str | int | None,
        start: int,
        end: int,
    ) -> None:
        """Append a token, translating chunk positions to global offsets."""
        base = self._base
        self._tokens.append(Token(token_type, value, base + start, base + end))
        self._last_type = token_type


def scan_chunk(
    chunk: str,
    state: LexerState,
    raw_text_names: Set[str],
    source_name: str | None = None,
) -> tuple[list[Token], LexerState]:
    """Tokenize one chunk: ``(chunk, state) -> (tokens, new_state)``.

    Args:
        chunk: Literal text between two holes
        state: State left by the previous chunk (``LexerState()`` for the first)
        raw_text_names: Tags whose body is captured verbatim
        source_name: Template name for error messages

    Returns:
        The chunk's tokens and the state to carry into the next chunk.
    """
    return ChunkScanner(chunk, state, raw_text_names, source_name).run()


def as_chunks(template: object) -> tuple[str, ...]:
    """Normalize template input to a tuple of literal chunks.

    Accepts a sequence of strings, a single string (a template without
    holes), or any object exposing a ``strings`` attribute such as
    ``string.templatelib.Template``.

    Raises:
        TypeError: If a chunk is not a string.
    """
    if isinstance(template, str):
        return (template,)
    strings = getattr(template, "strings", template)
    if not isinstance(strings, Iterable):
        raise TypeError(f"Expected template chunks, got {type(template).__name__}")
    chunks = tuple(strings)
    for chunk in chunks:
        if not isinstance(chunk, str):
            raise TypeError(f"Template chunks must be str, got {type(chunk).__name__}")
    return chunks


class Lexer:
    """Tokenizer over all chunks of a template.

    Usage:
            >>> lexer = Lexer(["<p>", "</p>"])
            >>> [t.type.name for t in lexer.tokenize()]
        ['OPEN_ANGLE', 'IDENTIFIER', 'CLOSE_ANGLE', 'EXPRESSION', ...]

    Thread Safety:
        Lexer instances are single-use. Create one per template.

    """

    __slots__ = (
        "_chunks",
        "_raw_text_names",
        "_source_name",
        "_state",
    )

    def __init__(
        self,
        chunks: Iterable[str] | str,
        raw_text_names: Iterable[str] | None = None,
        source_name: str | None = None,
    ) -> None:
        """Initialize lexer.

        Args:
            chunks: Literal chunks (N+1 for N holes)
            raw_text_names: Raw-text tags; defaults to the active ParseConfig
            source_name: Template name for error messages; defaults to the
                active ParseConfig
        """
        config = get_parse_config()
        self._chunks = as_chunks(chunks)
        self._raw_text_names = (
            config.raw_text_elements if raw_text_names is None else frozenset(raw_text_names)
        )
        self._source_name = config.source_name if source_name is None else source_name
        self._state = LexerState()

    @property
    def state(self) -> LexerState:
        """State after the most recently scanned chunk."""
        return self._state

    def tokenize(self) -> Iterator[Token]:
        """Tokenize all chunks into one token stream.

        Yields:
            Token objects in source order

        Raises:
            LexError: On a character that cannot appear inside a tag.
        """
        last_index = len(self._chunks) - 1
        count = 0
        try:
            for index, chunk in enumerate(self._chunks):
                tokens, self._state = scan_chunk(
                    chunk, self._state, self._raw_text_names, self._source_name
                )
                count += len(tokens)
                yield from tokens

                if index < last_index and not self._state.in_comment:
                    offset = self._state.offset
                    self._state = self._state.after_hole()
                    count += 1
                    yield Token(TokenType.EXPRESSION, index, offset, offset)
        except TemplateSyntaxError as exc:
            logger.debug("Tokenization failed: %s", exc)
            raise

        logger.debug(
            "Tokenized %d chunk(s) into %d token(s), final mode %s",
            len(self._chunks),
            count,
            self._state.mode.name,
        )


def tokenize(
    chunks: Iterable[str] | str,
    raw_text_names: Iterable[str] | None = None,
    *,
    source_name: str | None = None,
) -> list[Token]:
    """Tokenize template chunks.

    Args:
        chunks: Literal chunks (N+1 for N holes), or a single string
        raw_text_names: Raw-text tags; defaults to the active ParseConfig
        source_name: Template name for error messages

    Returns:
        Flat token stream with offsets into the concatenated chunks.

    Raises:
        LexError: On a character that cannot appear inside a tag.

    Example:
        >>> [t.value for t in tokenize(["Hi ", "!"])]
        ['Hi ', 0, '!']
    """
    return list(Lexer(chunks, raw_text_names, source_name).tokenize())
