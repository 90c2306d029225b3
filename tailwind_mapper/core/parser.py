"""CSS declaration parser.

Walks a stylesheet and returns its declarations in source order. Tokenizing
is done by tinycss2; this module walks the resulting rules. Grouping at-rules
(``@media``, ``@supports`` ...) and nested rules are descended into;
statement at-rules (``@import ...;``) are skipped. Anything that is not valid
rule/declaration structure raises CssParseError with the position of the
offending text.

Legacy browser hacks (``*zoom: 1``, ``_height: 1px``) and malformed
``url()`` values are kept as declarations so the converter can report them
as unsupported.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Tuple

import tinycss2
from tinycss2.ast import Node

from ..utils.error import CssParseError

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r'\s+')
BAD_URL_RE = re.compile(r'[^(]*\((?:\\.|[^\\)])*\)?', re.DOTALL)

# At-rules whose block holds rules rather than declarations
GROUPING_AT_RULES = {'media', 'supports', 'container', 'layer', 'document', '-moz-document', 'scope'}

# Delimiters old IE versions accepted in front of a property name
HACK_PREFIXES = ('*',)

SKIPPED = ('whitespace', 'comment')

# Error tokens that make the stylesheet unusable
FATAL_ERRORS = {
    'bad-string': "Unclosed string",
    'eof-in-string': "Unclosed string",
    'eof-in-url': "Unclosed url(",
    ')': "Unexpected ')'",
    ']': "Unexpected ']'",
    '}': "Unexpected '}'",
}

OPENERS = {'() block': "'('", 'function': "'('", '[] block': "'['"}


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair from a rule body."""
    property: str
    value: str
    important: bool = False


def _children(token: Node):
    if token.type == 'function':
        return token.arguments
    if token.type in ('() block', '[] block', '{} block'):
        return token.content
    return None


class _Source:
    """Stylesheet text with newlines normalized the way tinycss2 does."""

    def __init__(self, css: str):
        self.text = css.replace('\r\n', '\n').replace('\r', '\n').replace('\f', '\n')
        self.line_starts = [0] + [match.end() for match in re.finditer('\n', self.text)]
        self.end = (len(self.line_starts), len(self.text) - self.line_starts[-1] + 1)

    def offset(self, node: Node) -> int:
        return self.line_starts[node.source_line - 1] + node.source_column - 1

    def raw_url(self, token: Node) -> str:
        """Source text of a url() the tokenizer could not read."""
        return BAD_URL_RE.match(self.text, self.offset(token)).group(0)

    def tokenize(self) -> List[Node]:
        """Tokenize the text, rejecting anything left open at the end.

        A closing brace is appended to the text. It comes back as an
        unmatched-brace error at the top level only when every block, string
        and comment before it was closed.

        Raises:
            CssParseError: For an unclosed block, string, comment or parenthesis
        """
        tokens = tinycss2.parse_component_value_list(self.text + '}')
        nodes, blocks = tokens, []
        while nodes:
            last = nodes[-1]
            if last.type == 'error' and (last.source_line, last.source_column) == self.end:
                if blocks:
                    block = blocks[-1]
                    raise CssParseError(f"Unclosed {OPENERS[block.type]}", block.source_line, block.source_column)
                nodes.pop()
                return tokens
            if last.type == 'comment' and self.text.find('*/', self.offset(last) + 2) == -1:
                raise CssParseError("Unclosed comment", last.source_line, last.source_column)
            if last.type == 'error' and last.kind in ('eof-in-string', 'eof-in-url'):
                raise CssParseError(FATAL_ERRORS[last.kind], last.source_line, last.source_column)
            children = _children(last)
            if children is None:
                break
            blocks.append(last)
            nodes = children

        block = blocks[0] if blocks else None
        if block is None:
            raise CssParseError("Unexpected end of input", *self.end)
        raise CssParseError("Unclosed block", block.source_line, block.source_column)


def _check_tokens(tokens: List[Node]) -> None:
    """Raise for error tokens anywhere in the tree.

    Raises:
        CssParseError: For an unclosed string or a stray closing bracket
    """
    for token in tokens:
        if token.type == 'error':
            if token.kind in FATAL_ERRORS:
                raise CssParseError(FATAL_ERRORS[token.kind], token.source_line, token.source_column)
            logger.debug(f"Keeping malformed {token.kind} at line {token.source_line}")
            continue
        children = _children(token)
        if children:
            _check_tokens(children)


def _significant(tokens: List[Node]) -> List[Node]:
    return [token for token in tokens if token.type not in SKIPPED]


def _text(tokens: List[Node]) -> str:
    return WHITESPACE_RE.sub(' ', tinycss2.serialize(tokens)).strip()


class _Walker:
    """Collects declarations from rules and blocks."""

    def __init__(self, source: _Source):
        self.source = source
        self.declarations: List[Declaration] = []

    def walk_rules(self, rules: List[Node]) -> None:
        for rule in rules:
            if rule.type == 'error':
                raise CssParseError("Missing '{' after selector or declaration outside of a rule",
                                    rule.source_line, rule.source_column)
            if rule.type == 'at-rule':
                self._walk_at_rule(rule)
                continue
            self._check_prelude(rule.prelude, rule)
            self.walk_block(rule.content)

    def _walk_at_rule(self, rule: Node) -> None:
        if rule.content is None:
            logger.debug(f"Skipping at-rule statement: @{rule.at_keyword} {_text(rule.prelude)}")
            return
        if rule.lower_at_keyword in GROUPING_AT_RULES:
            self.walk_rules(tinycss2.parse_rule_list(rule.content, skip_comments=True, skip_whitespace=True))
        else:
            self.walk_block(rule.content)

    def _check_prelude(self, prelude: List[Node], rule: Node) -> None:
        significant = _significant(prelude)
        if not significant:
            raise CssParseError("Missing selector before '{'", rule.source_line, rule.source_column)
        for token in significant:
            if token.type == 'literal' and token.value == ';':
                first = significant[0]
                raise CssParseError(f"Declaration {_text(prelude).split(';')[0]!r} outside of a rule",
                                    first.source_line, first.source_column)

    def walk_block(self, tokens: List[Node]) -> None:
        """Split a rule body into declarations and nested rules."""
        chunk: List[Node] = []
        for token in tokens:
            if token.type == '{} block':
                significant = _significant(chunk)
                if not significant:
                    raise CssParseError("Missing selector before '{'", token.source_line, token.source_column)
                self.walk_block(token.content)
                chunk = []
            elif token.type == 'literal' and token.value == ';':
                self._statement(chunk)
                chunk = []
            else:
                chunk.append(token)
        self._statement(chunk)

    def _statement(self, chunk: List[Node]) -> None:
        significant = _significant(chunk)
        if not significant:
            return
        if significant[0].type == 'at-keyword':
            logger.debug(f"Skipping at-rule statement: {_text(chunk)}")
            return
        self.declarations.append(self.declaration(chunk))

    def declaration(self, chunk: List[Node]) -> Declaration:
        significant = _significant(chunk)
        if not significant:
            raise CssParseError("Empty declaration", *self.source.end)
        first = significant[0]
        prefix = ''
        tokens = chunk
        if first.type == 'literal' and first.value in HACK_PREFIXES:
            prefix = first.value
            tokens = chunk[next(i for i, token in enumerate(chunk) if token is first) + 1:]

        parsed = tinycss2.parse_one_declaration(tokens)
        if parsed.type == 'error':
            raise CssParseError(f"Unknown word {_text(chunk)!r}, expected 'property: value'",
                                first.source_line, first.source_column)

        name = parsed.name if parsed.name.startswith('--') else parsed.lower_name
        return Declaration(prefix + name, self._value(parsed.value), parsed.important)

    def _value(self, tokens: List[Node]) -> str:
        parts = []
        for token in tokens:
            if token.type == 'comment':
                parts.append(' ')
            elif token.type == 'error' and token.kind == 'bad-url':
                parts.append(self.source.raw_url(token))
            else:
                parts.append(tinycss2.serialize([token]))
        return WHITESPACE_RE.sub(' ', ''.join(parts)).strip()


def _prepare(css: str) -> Tuple[_Source, List[Node]]:
    source = _Source(css)
    tokens = source.tokenize()
    _check_tokens(tokens)
    return source, tokens


def parse_declaration(text: str) -> Declaration:
    """Parse the text of one declaration.

    Args:
        text: ``property: value`` without the terminating ``;``

    Returns:
        Declaration with a lower-cased property name (custom properties keep
        their case) and a whitespace-normalized value

    Raises:
        CssParseError: If the text is not a ``property: value`` pair
    """
    source, tokens = _prepare(text)
    return _Walker(source).declaration(tokens)


def parse_declarations(css: str) -> List[Declaration]:
    """Parse CSS text into its declarations, in source order.

    Args:
        css: Stylesheet text

    Returns:
        List of Declaration

    Raises:
        CssParseError: If the text is not valid CSS
    """
    source, tokens = _prepare(css)
    walker = _Walker(source)
    walker.walk_rules(tinycss2.parse_stylesheet(tokens, skip_comments=True, skip_whitespace=True))
    logger.debug(f"Parsed {len(walker.declarations)} declarations")
    return walker.declarations

# Exported names
__all__ = ['Declaration', 'parse_declaration', 'parse_declarations']
