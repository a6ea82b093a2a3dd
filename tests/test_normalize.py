import pytest

from docindex.ingestion.normalize import normalize


def test_missing_markup_passes_through():
    assert normalize(None) is None
    assert normalize("") == ""


def test_run_on_sentence_is_rejoined_with_a_space():
    # A split word keeps the joining space ("unfin ished"); the merge never glues halves.
    assert normalize("<p>This is unfin</p>\n<p>ished.</p>") == "<p>This is unfin ished.</p>"


def test_boundary_without_newline_is_rejoined():
    assert normalize("<p>split across</p> <p>columns.</p>") == "<p>split across columns.</p>"


def test_every_eligible_boundary_in_a_chain_is_rejoined():
    markup = "<p>one</p>\n<p>two</p>\n<p>three.</p>"
    assert normalize(markup) == "<p>one two three.</p>"


@pytest.mark.parametrize(
    "markup",
    [
        "<p>Finished.</p>\n<p>next line</p>",
        "<p>Really?</p>\n<p>yes</p>",
        "<p>Stop!</p>\n<p>now</p>",
        "<p>End. </p>\n<p>trailing space</p>",
        "<p>Heading</p>\n<p>Capitalised start</p>",
        "<p>Number</p>\n<p>42 items</p>",
    ],
)
def test_legitimate_paragraph_boundaries_are_kept(markup):
    assert normalize(markup) == markup


def test_ampersand_start_is_rejoined():
    assert normalize("<p>Salt</p>\n<p>&amp; pepper</p>") == "<p>Salt &amp; pepper</p>"


def test_tags_match_case_insensitively():
    assert normalize("<P>word</P>\n<P>next</P>") == "<P>word next</P>"


def test_non_breaking_space_and_right_quote_entities():
    assert normalize("a&#xA0;b") == "a b"
    assert normalize("a&#xa0;b&nbsp;c&#160;d") == "a b c d"
    assert normalize("it&#x2019;s") == "it's"
    assert normalize("it&rsquo;s") == "it's"


def test_literal_characters_left_by_the_html_serializer():
    assert normalize("a\u00a0b\u2019s") == "a b's"


def test_other_markup_is_untouched():
    markup = '<div class="page"><table><tr><td>x &amp; y</td></tr></table></div>'
    assert normalize(markup) == markup


@pytest.mark.parametrize(
    "markup",
    [
        "<p>This is unfin</p>\n<p>ished.</p>",
        "<p>a</p>\n<p>b</p>\n<p>c</p>",
        "x&#xA0;&#x2019; ",
        "<p>Done.</p><p>Next!</p>",
    ],
)
def test_normalize_is_idempotent(markup):
    once = normalize(markup)
    assert normalize(once) == once
