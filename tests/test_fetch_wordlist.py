from script.fetch_wordlist import extract_words


def test_extract_words_from_html():
    html = "<html><body><h1>Words</h1><p>Pot toad, TAP! pot x</p><ul><li>teapot</li></ul></body></html>"
    assert extract_words(html) == ["words", "pot", "toad", "tap", "teapot"]


def test_extract_words_length_bounds():
    html = "<p>a an ant antelope</p>"
    assert extract_words(html, min_len=2, max_len=3) == ["an", "ant"]
