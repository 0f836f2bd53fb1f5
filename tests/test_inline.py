import itertools

import pytest
from book_to_md.processing.models import Hyperlink, LineBreak, Media, Run, Tab, TextSegment
from book_to_md.rendering.inline import InlineRunFormatter
from book_to_md.rendering.relationships import RelationshipResolver


RELATIONSHIPS = {
    "rIdImg": "media/image1.png",
    "rIdLink": "https://example.com",
}


@pytest.fixture
def formatter():
    resolver = RelationshipResolver(RELATIONSHIPS, {"word/media/image1.png": "images/image1.png"})
    return InlineRunFormatter(resolver)


def text_run(text, **flags):
    return Run(segments=[TextSegment(text)], **flags)


def test_plain_run(formatter):
    assert formatter.format_run(text_run("hello")) == "hello"


def test_emphasis_wrappers(formatter):
    assert formatter.format_run(text_run("hi", bold=True, italic=True)) == "***hi***"
    assert formatter.format_run(text_run("hi", bold=True)) == "**hi**"
    assert formatter.format_run(text_run("hi", italic=True)) == "*hi*"
    assert formatter.format_run(text_run("hi", strike=True)) == "~~hi~~"


def test_strike_is_innermost_wrapper(formatter):
    assert formatter.format_run(text_run("x", bold=True, strike=True)) == "**~~x~~**"
    assert formatter.format_run(text_run("x", bold=True, italic=True, strike=True)) == "***~~x~~***"


@pytest.mark.parametrize("text", ["", " ", "  ", "\t", " \n "])
@pytest.mark.parametrize("flags", list(itertools.product([False, True], repeat=3)))
def test_blank_run_is_never_wrapped(formatter, text, flags):
    bold, italic, strike = flags
    run = text_run(text, bold=bold, italic=italic, strike=strike)
    assert formatter.format_run(run) == text


def test_segments_concatenate_in_order(formatter):
    run = Run(segments=[
        TextSegment("a"),
        LineBreak(),
        TextSegment("b"),
        Tab(),
        TextSegment("c"),
    ])
    assert formatter.format_run(run) == "a\nb\tc"


def test_media_segment_resolves_to_image(formatter):
    run = Run(segments=[Media("rIdImg", "A chart")])
    assert formatter.format_run(run) == "![A chart](images/image1.png)"


def test_unresolved_media_is_omitted(formatter):
    run = Run(segments=[TextSegment("before "), Media("rIdX"), TextSegment("after")])
    assert formatter.format_run(run) == "before after"
    assert formatter.format_run(Run(segments=[Media("rIdX")])) == ""


def test_hyperlink_with_text(formatter):
    link = Hyperlink(run=text_run("site"), relationship_id="rIdLink")
    assert formatter.format_hyperlink(link) == "[site](https://example.com)"


def test_hyperlink_to_anchor(formatter):
    link = Hyperlink(run=text_run("see below"), anchor="section-2")
    assert formatter.format_hyperlink(link) == "[see below](#section-2)"


def test_hyperlink_without_text_emits_target(formatter):
    assert formatter.format_hyperlink(Hyperlink(relationship_id="rIdLink")) == "https://example.com"
    assert formatter.format_hyperlink(Hyperlink(run=Run(), relationship_id="rIdLink")) == "https://example.com"


def test_hyperlink_without_target_keeps_text(formatter):
    link = Hyperlink(run=text_run("orphan"), relationship_id="rIdMissing")
    assert formatter.format_hyperlink(link) == "orphan"
    assert formatter.format_hyperlink(Hyperlink()) == ""


def test_hyperlink_display_ignores_run_formatting(formatter):
    link = Hyperlink(run=text_run("site", bold=True), relationship_id="rIdLink")
    assert formatter.format_hyperlink(link) == "[site](https://example.com)"


def test_format_inline_mixes_runs_and_links(formatter):
    items = [
        text_run("Visit "),
        Hyperlink(run=text_run("us"), relationship_id="rIdLink"),
        text_run(" today", italic=True),
    ]
    assert formatter.format_inline(items) == "Visit [us](https://example.com)* today*"


def test_format_inline_skips_unknown_items(formatter):
    assert formatter.format_inline([text_run("a"), object(), text_run("b")]) == "ab"
