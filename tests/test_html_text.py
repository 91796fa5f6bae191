"""Tests for HTML visible-text extraction."""

from chat_tools.handlers.html_text import extract_title, extract_visible_text, truncate


class TestExtractVisibleText:
    """Tests for the script/style-aware text extractor."""

    def test_plain_markup(self):
        """Test tags are dropped and text kept."""
        assert extract_visible_text("<div><b>Hello</b> <i>world</i></div>") == "Hello world"

    def test_script_and_style_removed(self):
        """Test hidden element content never reaches the output."""
        html = "<p>a</p><script>if (x < 1) { alert('no') }</script><style>p{}</style><p>b</p>"
        assert extract_visible_text(html) == "ab"

    def test_uppercase_tags(self):
        """Test tag matching is case-insensitive."""
        assert extract_visible_text("<SCRIPT>bad()</SCRIPT>good") == "good"

    def test_nested_markup_inside_body(self):
        """Test text from nested elements is concatenated in order."""
        assert extract_visible_text("<ul><li>one</li> <li>two <a href='#'>three</a></li></ul>") == "one two three"

    def test_unclosed_script_hides_rest(self):
        """Test an unterminated script hides everything after it."""
        assert extract_visible_text("before<script>var a = 1;") == "before"

    def test_stray_end_tag(self):
        """Test a closing tag without an opener is ignored."""
        assert extract_visible_text("</style>text") == "text"

    def test_entities_and_whitespace(self):
        """Test character references decode and whitespace collapses."""
        assert extract_visible_text("  a &amp;\n\n\t b &lt;c&gt;  ") == "a & b <c>"

    def test_comments_ignored(self):
        """Test comments are not visible text."""
        assert extract_visible_text("x<!-- hidden -->y") == "xy"


class TestExtractTitle:
    """Tests for title extraction."""

    def test_title_with_attributes(self):
        """Test attributes on the title tag and case-insensitivity."""
        assert extract_title('<TITLE lang="en">  My Page </TITLE>') == "My Page"

    def test_first_title_wins(self):
        """Test only the first title is used."""
        assert extract_title("<title>One</title><title>Two</title>") == "One"

    def test_missing_title(self):
        """Test default when no title exists."""
        assert extract_title("<p>no title</p>") == "No title"
        assert extract_title("<title></title>") == "No title"


class TestTruncate:
    """Tests for preview truncation."""

    def test_short_text_unchanged(self):
        assert truncate("abc", 5) == "abc"

    def test_long_text_marked(self):
        assert truncate("abcdef", 3) == "abc..."
