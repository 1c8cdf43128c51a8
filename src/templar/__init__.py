"""
Templar: chunked markup templates to position-annotated ASTs

Turns the literal chunks of a tagged template (N+1 strings around N holes)
into a typed, immutable tree of elements, components, text and holes. Every
node, property and token carries offsets into the concatenated chunks.

Quick Start:
    >>> from templar import parse_template
    >>> root = parse_template(['<div class="a ', '">Hi</div>'])
    >>> root.children[0].props[0].parts
    ('a ', 0)

    >>> # Python 3.14 template strings work directly
    >>> root = parse_template(t"<Counter start={n} />")

Stages:
    >>> from templar import tokenize, parse
    >>> tokens = tokenize(["<p>", "</p>"])
    >>> root = parse(tokens)
"""

import dataclasses
from collections.abc import Iterable

from templar.cache import DictParseCache, ParseCache, hash_config, hash_content
from templar.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from templar.elements import RAW_TEXT_ELEMENTS, VOID_ELEMENTS, is_component_name
from templar.errors import LexError, ParseError, TemplarError, TemplateSyntaxError
from templar.lexer import Lexer, as_chunks, tokenize
from templar.location import Span
from templar.nodes import (
    BooleanProp,
    Child,
    Element,
    Expression,
    ExpressionProp,
    MixedProp,
    Node,
    NodeKind,
    Prop,
    PropKind,
    Root,
    SpreadProp,
    StaticProp,
    Text,
)
from templar.parser import Parser, parse
from templar.serialization import from_dict, from_json, to_dict, to_json
from templar.tokens import Token, TokenType
from templar.visitor import BaseVisitor, node_at, transform, walk

__version__ = "0.1.0"


def parse_template(
    template: object,
    *,
    raw_text_names: Iterable[str] | None = None,
    void_names: Iterable[str] | None = None,
    source_name: str | None = None,
    cache: ParseCache | None = None,
) -> Root:
    """Tokenize and parse a template in one call.

    Args:
        template: Literal chunks, a single string, or an object exposing
            ``strings`` (such as ``string.templatelib.Template``)
        raw_text_names: Raw-text tags (uses the active ParseConfig if None)
        void_names: Void tags (uses the active ParseConfig if None)
        source_name: Template name for error messages
        cache: Optional content-addressed parse cache. When provided, checks
            cache before parsing; on miss, parses and stores result. For
            parallel parsing, use a thread-safe cache implementation.

    Returns:
        Root AST node

    Raises:
        LexError: On a character that cannot appear inside a tag.
        ParseError: On any structural problem.

    Example:
        >>> root = parse_template(["<ul>", "</ul>"])
        >>> root.children[0].children
        (Expression(span=Span(start=4, end=4), index=0),)
    """
    chunks = as_chunks(template)

    # Explicit arguments override the active config for this call only
    config = get_parse_config()
    overrides: dict[str, object] = {}
    if raw_text_names is not None:
        overrides["raw_text_elements"] = raw_text_names
    if void_names is not None:
        overrides["void_elements"] = void_names
    if source_name is not None:
        overrides["source_name"] = source_name
    if overrides:
        config = dataclasses.replace(config, **overrides)

    content_hash = config_hash = ""
    if cache is not None:
        content_hash = hash_content(chunks)
        config_hash = hash_config(config)
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            return cached

    with parse_config_context(config):
        tokens = tokenize(chunks)
        root = parse(tokens, length=sum(len(chunk) for chunk in chunks))

    if cache is not None:
        cache.put(content_hash, config_hash, root)
    return root


__all__ = [
    # Public API
    "parse_template",
    "tokenize",
    "parse",
    "as_chunks",
    "Lexer",
    "Parser",
    "__version__",
    # Config
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    "RAW_TEXT_ELEMENTS",
    "VOID_ELEMENTS",
    "is_component_name",
    # Cache
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
    # Errors
    "TemplarError",
    "TemplateSyntaxError",
    "LexError",
    "ParseError",
    # Tokens
    "Span",
    "Token",
    "TokenType",
    # Nodes
    "Node",
    "NodeKind",
    "Root",
    "Element",
    "Text",
    "Expression",
    "Child",
    # Props
    "Prop",
    "PropKind",
    "BooleanProp",
    "StaticProp",
    "ExpressionProp",
    "MixedProp",
    "SpreadProp",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Visitor
    "BaseVisitor",
    "node_at",
    "transform",
    "walk",
]
