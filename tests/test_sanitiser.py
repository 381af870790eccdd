from slopscore.nlp.sanitiser import (
    looks_like_html,
    sanitise,
    strip_html,
    strip_markdown,
)


def test_looks_like_html():
    """Only opening tags mark a text as HTML."""
    assert looks_like_html("<p>Hello</p>")
    assert looks_like_html('<div class="x">Hi</div>')
    assert not looks_like_html("a < b and c > d")
    assert not looks_like_html("Use <3 often")


def test_strip_html_removes_invisible_content():
    """Scripts, styles, images and comments disappear."""
    text = strip_html(
        "<style>p {}</style><p>Hello <b>world</b></p>"
        '<script>alert("x")</script><img src="a.png"><!-- note -->'
    )
    assert "alert" not in text
    assert "note" not in text
    assert "p {}" not in text
    assert text.split() == ["Hello", "world"]


def test_strip_html_separates_blocks_and_unescapes():
    """Block tags become line breaks and entities are decoded."""
    text = strip_html("<p>One &amp; two.</p><p>Three.</p>")
    assert text == "\nOne & two.\n\nThree.\n"


def test_strip_markdown():
    """Markdown syntax is removed, the content is kept."""
    text = strip_markdown(
        "# Title\n\n**Bold** and *italic* with [link](http://x.io) and `code`.\n"
        "![image](a.png)\n- item\n1. first\n> quote\n---\n"
    )
    assert "#" not in text
    assert "*" not in text
    assert "http" not in text
    assert "image" not in text
    assert "link" in text
    assert "code" in text
    assert "- item" not in text
    assert "1. first" not in text
    assert ">" not in text
    assert "---" not in text


def test_strip_markdown_removes_code_blocks():
    """Fenced code is dropped entirely."""
    assert strip_markdown("Before\n```\nx = 1\n```\nAfter").split() == [
        "Before",
        "After",
    ]


def test_sanitise_collapses_whitespace():
    """The result is a single line of plain text."""
    assert (
        sanitise(
            "# Title\n\n**Bold** and *italic* with [link](http://x.io) and `code`.\n"
            "- item\n> quote"
        )
        == "Title Bold and italic with link and code. item quote"
    )


def test_sanitise_html_document():
    """HTML documents are reduced to their visible text."""
    assert sanitise("<h1>News</h1><p>It rained.</p>") == "News It rained."
