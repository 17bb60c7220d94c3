"""Tests for comment stripping."""

from grammar.comments import strip_comments
from grammar.parser import parse


class TestStripComments:
    """Tests for strip_comments()."""

    def test_line_comment(self):
        """Test that a line comment is removed but its newline kept."""
        assert strip_comments("uint8 a; // the a\nuint8 b;") == "uint8 a; \nuint8 b;"

    def test_line_comment_at_end_of_input(self):
        """Test a line comment with no trailing newline."""
        assert strip_comments("uint8 a; // last") == "uint8 a; "

    def test_block_comment(self):
        """Test that block comments are removed."""
        assert strip_comments("uint8 /* inline */ a;") == "uint8  a;"

    def test_multi_line_block_comment(self):
        """Test a block comment spanning lines."""
        raw = "/*\n * Header\n */\nuint8 a;"

        assert strip_comments(raw) == "\nuint8 a;"

    def test_block_comments_are_not_greedy(self):
        """Test that two block comments do not swallow the text between them."""
        raw = "/* one */ uint8 a; /* two */"

        assert strip_comments(raw) == " uint8 a; "

    def test_stripped_text_parses(self):
        """Test that a commented schema parses once stripped."""
        raw = """
// Versions
enum {
    reserved(0),
    mls10(1), /* the only one so far */
    (255)
} ProtocolVersion;

/*
 * Vectors
 */
struct {
    uint32 fixed<0..255>; // bounded
    opaque variable<V>;
} StructWithVectors;
"""
        definitions = parse(strip_comments(raw))

        assert [d.name for d in definitions] == ["ProtocolVersion", "StructWithVectors"]
