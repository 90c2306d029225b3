"""Tests for the CSS declaration parser."""

import pytest

from ..core.parser import Declaration, parse_declaration, parse_declarations
from ..utils.error import CssParseError


class TestParseDeclarations:
    """Tests for parse_declarations."""

    def test_single_rule(self):
        """Test declarations of one rule come back in order."""
        declarations = parse_declarations('.el { display: flex; margin: 1rem; }')
        assert declarations == [
            Declaration('display', 'flex'),
            Declaration('margin', '1rem'),
        ]

    def test_multiple_rules_keep_source_order(self, mixed_batch_css):
        """Test declarations across rules keep source order."""
        properties = [d.property for d in parse_declarations(mixed_batch_css)]
        assert properties == ['margin', 'padding', 'width', 'display', 'margin', 'height']

    def test_last_declaration_without_semicolon(self):
        """Test the final declaration may omit its semicolon."""
        assert parse_declarations('p { color: red }') == [Declaration('color', 'red')]

    def test_comments_are_ignored(self):
        """Test comments inside and outside rules are dropped."""
        css = """
        /* header */
        .el {
            display: flex; /* inline comment */
            justify-content: /* before value */ center;
        }
        """
        assert parse_declarations(css) == [
            Declaration('display', 'flex'),
            Declaration('justify-content', 'center'),
        ]

    def test_media_query(self):
        """Test rules inside @media are walked."""
        css = '@media (min-width: 768px) { .el { display: flex; } }'
        assert parse_declarations(css) == [Declaration('display', 'flex')]

    def test_nested_rule(self):
        """Test nested rules contribute their declarations in place."""
        css = '.a { color: red; &:hover { color: blue; } margin: 0; }'
        assert [d.value for d in parse_declarations(css)] == ['red', 'blue', '0']

    def test_pseudo_selectors(self):
        """Test selectors with pseudo-classes and pseudo-elements."""
        assert parse_declarations('.el:hover { display: flex; }') == [Declaration('display', 'flex')]
        assert parse_declarations('.el::before { display: block; }') == [Declaration('display', 'block')]

    def test_statement_at_rules_skipped(self):
        """Test @import and @charset statements are skipped."""
        css = '@charset "utf-8"; @import url("base.css"); .el { display: block; }'
        assert parse_declarations(css) == [Declaration('display', 'block')]

    def test_font_face_block(self):
        """Test declarations of a non-grouping at-rule block are read."""
        css = '@font-face { font-family: Inter; } .el { display: block; }'
        assert [d.property for d in parse_declarations(css)] == ['font-family', 'display']

    def test_semicolon_inside_url(self):
        """Test semicolons inside url() do not end the declaration."""
        css = '.el { background-image: url(data:image/png;base64,AAAA); }'
        assert parse_declarations(css) == [
            Declaration('background-image', 'url(data:image/png;base64,AAAA)')
        ]

    def test_braces_inside_strings(self):
        """Test braces inside quoted values are kept as text."""
        css = '.el { content: "{}"; }'
        assert parse_declarations(css) == [Declaration('content', '"{}"')]

    def test_whitespace_is_normalized(self):
        """Test values have whitespace runs collapsed."""
        css = '.el {\n  margin:   0    auto ;\n}'
        assert parse_declarations(css) == [Declaration('margin', '0 auto')]

    def test_dimensions_keep_their_text(self):
        """Test numbers come back as written."""
        css = '.el { margin: 0.25rem; padding: .5rem 10PX; }'
        assert [d.value for d in parse_declarations(css)] == ['0.25rem', '.5rem 10PX']

    def test_property_names_lowercased(self):
        """Test property names are lower-cased but custom properties are not."""
        declarations = parse_declarations('.el { DISPLAY: block; --Brand-Color: #fff; }')
        assert declarations[0].property == 'display'
        assert declarations[1] == Declaration('--Brand-Color', '#fff')

    def test_vendor_prefixed_property(self):
        """Test vendor prefixes are valid property names."""
        assert parse_declarations('.el { -webkit-display: flex; }') == [
            Declaration('-webkit-display', 'flex')
        ]

    @pytest.mark.parametrize('css', [
        '.el { margin: 1rem !important; }',
        '.el { margin: 1rem ! IMPORTANT; }',
    ])
    def test_important(self, css):
        """Test !important is stripped from the value and recorded."""
        assert parse_declarations(css) == [Declaration('margin', '1rem', important=True)]

    def test_empty_value_is_a_declaration(self):
        """Test an empty value parses as an empty declaration."""
        assert parse_declarations('.el { display: ; }') == [Declaration('display', '')]

    def test_empty_rule(self):
        """Test an empty rule yields nothing."""
        assert parse_declarations('.el { }') == []

    def test_empty_stylesheet(self):
        assert parse_declarations('') == []
        assert parse_declarations('/* only a comment */') == []

    def test_apply_inside_rule_skipped(self):
        """Test at-rule statements inside a rule are skipped."""
        assert parse_declarations('.el { @apply flex; display: block; }') == [
            Declaration('display', 'block')
        ]

    def test_nested_media_inside_rule(self):
        """Test a nested @media block contributes its declarations."""
        css = '.el { display: block; @media (min-width: 640px) { display: flex; } }'
        assert [d.value for d in parse_declarations(css)] == ['block', 'flex']


class TestLegacyHacks:
    """Tests for old browser hacks and malformed values."""

    def test_star_hack(self):
        """Test a star-prefixed property is kept and the rule goes on."""
        assert parse_declarations('.el { *zoom: 1; display: block; }') == [
            Declaration('*zoom', '1'),
            Declaration('display', 'block'),
        ]

    def test_underscore_hack(self):
        """Test an underscore-prefixed property is kept and the rule goes on."""
        assert parse_declarations('.el { _height: 1px; display: block; }') == [
            Declaration('_height', '1px'),
            Declaration('display', 'block'),
        ]

    def test_bad_url_keeps_source_text(self):
        """Test an unquoted url() with a quote keeps its text and ends at ')'."""
        assert parse_declarations(".el { background: url(it's.png); display: block; }") == [
            Declaration('background', "url(it's.png)"),
            Declaration('display', 'block'),
        ]

    def test_star_alone_rejected(self):
        with pytest.raises(CssParseError):
            parse_declarations('.el { *: 1; }')


class TestParseErrors:
    """Tests for rejected input."""

    @pytest.mark.parametrize('css', [
        '.el { invalid-syntax }',
        '.el { display: block; }}',
        '.el { display: block;',
        'display: block;',
        'color: red',
        'display: block; .el { color: red; }',
        '{ display: block; }',
        '.el { { display: block; } }',
        '.el { 1abc: x; }',
        '.el { content: "open; }',
        '.el { content: "line\nbreak"; }',
        '.el { width: calc(100% - 2rem; }',
        '.el { width: 100%); }',
        '/* never closed',
        '@media screen { .el }',
        '@media screen { color: red; }',
    ])
    def test_invalid_css(self, css):
        """Test malformed CSS raises CssParseError."""
        with pytest.raises(CssParseError):
            parse_declarations(css)

    def test_error_position(self):
        """Test the error carries the line and column of the bad text."""
        with pytest.raises(CssParseError) as exc_info:
            parse_declarations('.el {\n  display: block;\n  oops\n}')
        assert exc_info.value.line == 3
        assert exc_info.value.column == 3
        assert 'oops' in str(exc_info.value)

    def test_error_position_with_crlf(self):
        """Test Windows line endings count as one line break."""
        with pytest.raises(CssParseError) as exc_info:
            parse_declarations('.el {\r\n  oops\r\n}')
        assert (exc_info.value.line, exc_info.value.column) == (2, 3)

    def test_unclosed_block_points_at_opening(self):
        """Test an unclosed block reports where it was opened."""
        with pytest.raises(CssParseError) as exc_info:
            parse_declarations('.a { color: red; }\n.b { color: blue;')
        assert exc_info.value.reason == 'Unclosed block'
        assert exc_info.value.line == 2

    def test_unclosed_block_ending_in_comment(self):
        """Test a closed comment at the end does not hide an unclosed block."""
        with pytest.raises(CssParseError) as exc_info:
            parse_declarations('.a { color: red; /* done */')
        assert exc_info.value.reason == 'Unclosed block'

    @pytest.mark.parametrize('css, reason', [
        ('.el { display: block; }}', "Unexpected '}'"),
        ('/* never closed', 'Unclosed comment'),
        ('.el { content: "open; }', 'Unclosed string'),
        ('.el { width: calc(100% - 2rem; }', "Unclosed '('"),
    ])
    def test_error_reasons(self, css, reason):
        with pytest.raises(CssParseError) as exc_info:
            parse_declarations(css)
        assert exc_info.value.reason == reason

    def test_unclosed_parenthesis_points_at_function(self):
        with pytest.raises(CssParseError) as exc_info:
            parse_declarations('.el { width: calc(100% - 2rem; }')
        assert (exc_info.value.line, exc_info.value.column) == (1, 14)


class TestParseDeclaration:
    """Tests for parse_declaration."""

    def test_parse_declaration(self):
        """Test parsing one declaration text."""
        assert parse_declaration(' Font-Size : 1rem ') == Declaration('font-size', '1rem')

    def test_values_may_contain_colons(self):
        declaration = parse_declaration('background: url(http://example.com/a.png)')
        assert declaration.value == 'url(http://example.com/a.png)'

    def test_missing_colon(self):
        with pytest.raises(CssParseError) as exc_info:
            parse_declaration('display block')
        assert 'display block' in exc_info.value.reason
