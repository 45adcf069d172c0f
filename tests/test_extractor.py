from blogsum.services.extractor import (
    count_words,
    estimate_reading_time,
    extract_text,
    extract_title,
    truncate,
)


def test_extract_text_strips_tags() -> None:
    assert extract_text("<html><body><p>Hello World</p></body></html>") == "Hello World"


def test_extract_text_collapses_whitespace() -> None:
    html = "<div>\n  First\tline </div>\n\n<p>  second   line  </p>"

    assert extract_text(html) == "First line second line"


def test_extract_text_drops_script_and_style() -> None:
    html = (
        "<html><head><style>body { color: red; }</style>"
        "<script>var tracking = 1;</script></head>"
        "<body><noscript>enable js</noscript><p>Real content</p>"
        "<template><p>hidden</p></template></body></html>"
    )

    assert extract_text(html) == "Real content"


def test_extract_text_keeps_adjacent_words_apart() -> None:
    assert extract_text("<p>one</p><p>two</p>") == "one two"


def test_extract_text_tolerates_malformed_markup() -> None:
    assert extract_text("<p>Unclosed <b>bold <i>text") == "Unclosed bold text"


def test_extract_text_empty_page() -> None:
    assert extract_text("<html><body>   </body></html>") == ""


def test_extract_title_prefers_title_tag() -> None:
    html = "<html><head><title> My  Post </title></head><body><h1>Heading</h1></body></html>"

    assert extract_title(html) == "My Post"


def test_extract_title_falls_back_to_h1() -> None:
    assert extract_title("<body><h1>Heading</h1></body>") == "Heading"


def test_extract_title_missing() -> None:
    assert extract_title("<body><p>no title</p></body>") is None


def test_truncate_keeps_prefix() -> None:
    text = "a" * 12_500

    assert truncate(text) == "a" * 12_000
    assert truncate("short", 3) == "sho"


def test_reading_stats() -> None:
    assert count_words("one two  three\nfour") == 4
    assert estimate_reading_time(0) == "1 min read"
    assert estimate_reading_time(200) == "1 min read"
    assert estimate_reading_time(201) == "2 min read"
