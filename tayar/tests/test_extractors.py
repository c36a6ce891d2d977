"""
Tests for field extraction helpers.
"""

from tayar.extractors import (
    PLACEHOLDER_IMAGE_URL,
    TAG_COLORS,
    estimate_read_time,
    html_to_text,
    make_description,
    pick_image_url,
    tag_color,
)


class TestReadTime:

    def test_empty_content_is_one_minute(self):
        assert estimate_read_time("") == 1
        assert estimate_read_time(None) == 1

    def test_rounds_up(self):
        assert estimate_read_time(" ".join(["word"] * 200)) == 1
        assert estimate_read_time(" ".join(["word"] * 201)) == 2

    def test_ignores_markup(self):
        html = "<p>" + "</p><p>".join(["word"] * 400) + "</p>"
        assert estimate_read_time(html) == 2


class TestDescription:

    def test_uses_summary_text(self):
        assert make_description("<p>Short <b>summary</b></p>", "Body") == "Short summary"

    def test_falls_back_to_truncated_content(self):
        body = "x" * 500
        description = make_description(None, body)
        assert description == "x" * 200 + "..."

    def test_nothing_available(self):
        assert make_description(None, None) == ""

    def test_html_to_text_collapses_whitespace(self):
        assert html_to_text("<div>a\n\n  <span>b</span></div>") == "a b"


class TestImages:

    def test_media_wins(self):
        assert pick_image_url("https://m/1.png", "https://e/2.png", "<img src='x.png'>") == "https://m/1.png"

    def test_enclosure_before_html(self):
        assert pick_image_url(None, "https://e/2.png", "<img src='x.png'>") == "https://e/2.png"

    def test_first_img_in_bodies(self):
        assert pick_image_url(None, None, "<p>no image</p>", "<img src='https://c/3.png'>") == "https://c/3.png"

    def test_placeholder(self):
        assert pick_image_url(None, None, None, "plain text") == PLACEHOLDER_IMAGE_URL


class TestTagColor:

    def test_deterministic_palette_entry(self):
        assert tag_color("python") == tag_color("python")
        assert tag_color("python") in TAG_COLORS

    def test_sum_of_char_codes(self):
        # "a" is 97; 97 % 9 == 7
        assert tag_color("a") == TAG_COLORS[7]
