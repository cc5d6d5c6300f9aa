import datetime
import textwrap

import pytest

from mdblog.exceptions import MalformedFrontMatter
from mdblog.services.content_parser import ContentParser, coerce_text, normalize_tags


def test_split_returns_metadata_and_body():
    raw = textwrap.dedent(
        """\
        ---
        title: Hello
        date: 2024-01-10
        custom: ignored later
        ---
        # Heading

        Body text.
        """
    )

    metadata, body = ContentParser().split(raw, "hello")

    assert metadata["title"] == "Hello"
    assert metadata["date"] == "2024-01-10"
    assert metadata["custom"] == "ignored later"
    assert body.strip().startswith("# Heading")


def test_split_without_front_matter_keeps_whole_body():
    metadata, body = ContentParser().split("Just text", "plain")

    assert metadata == {}
    assert body == "Just text"


def test_split_raises_on_invalid_yaml():
    raw = "---\ntitle: [unclosed\n---\nbody\n"

    with pytest.raises(MalformedFrontMatter) as exc:
        ContentParser().split(raw, "broken")

    assert exc.value.slug == "broken"


def test_render_markdown_produces_html():
    html = ContentParser().render_markdown("# Title\n\nSome *emphasis* and a [link](/x).")

    assert "<h1>Title</h1>" in html
    assert "<em>emphasis</em>" in html
    assert '<a href="/x">link</a>' in html


def test_render_markdown_supports_fenced_code():
    html = ContentParser().render_markdown("```\nprint('hi')\n```")

    assert "<pre><code>" in html
    assert "print(&#x27;hi&#x27;)" in html or "print('hi')" in html


def test_render_markdown_is_deterministic():
    parser = ContentParser()
    body = "# Title\n\n- one\n- two\n\n| a | b |\n|---|---|\n| 1 | 2 |\n"

    assert parser.render_markdown(body) == parser.render_markdown(body)


def test_render_markdown_trusted_keeps_raw_html():
    html = ContentParser().render_markdown('<div class="note">hi</div>')

    assert '<div class="note">hi</div>' in html


def test_render_markdown_escaped_policy_escapes_output():
    html = ContentParser(html_policy="escaped").render_markdown("<script>x</script>")

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_unknown_html_policy_rejected():
    with pytest.raises(ValueError):
        ContentParser(html_policy="sanitize-maybe")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "fallback"),
        ("", "fallback"),
        ("  Title  ", "Title"),
        (2024, "2024"),
        (1.5, "1.5"),
        (True, "fallback"),
        (datetime.date(2024, 1, 10), "2024-01-10"),
        (["a", "b"], "fallback"),
        ({"nested": True}, "fallback"),
    ],
)
def test_coerce_text(value, expected):
    assert coerce_text(value, "fallback") == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, []),
        ("solo", ["solo"]),
        (["aws", None, "python"], ["aws", "python"]),
        (42, ["42"]),
    ],
)
def test_normalize_tags(value, expected):
    assert normalize_tags(value) == expected


def test_split_keeps_timestamp_shaped_values_as_strings():
    raw = "---\ndate: 2024-02-30\nupdated: 2024-01-02T03:04:05\ncount: 3\n---\nbody\n"

    metadata, _ = ContentParser().split(raw, "typo")

    assert metadata["date"] == "2024-02-30"
    assert metadata["updated"] == "2024-01-02T03:04:05"
    assert metadata["count"] == 3


def test_split_ignores_rules_in_body_without_front_matter():
    raw = "Intro\n\n---\n\nmiddle\n\n---\n\nend"

    metadata, body = ContentParser().split(raw, "rules")

    assert metadata == {}
    assert body == raw
