from feedbrain.services.profile.tokenizer import Tokenizer, tokenizer


def test_tokenize_lowercases_and_strips_punctuation():
    assert list(tokenizer.tokenize("(Python!) Tutorial...")) == ["python", "tutorial"]


def test_short_and_stop_words_are_dropped():
    tokens = list(tokenizer.tokenize("The Official 4K Video of an AI demo"))
    assert tokens == ["demo"]


def test_stemming_uses_first_matching_suffix():
    assert tokenizer.stem("learning") == "learn"
    assert tokenizer.stem("movement") == "move"
    assert tokenizer.stem("creation") == "cre"
    assert tokenizer.stem("songs") == "song"


def test_stem_keeps_minimum_length():
    # "ing" would leave only "s"
    assert tokenizer.stem("sing") == "sing"
    assert tokenizer.stem("bus") == "bus"


def test_double_s_is_not_stripped():
    assert tokenizer.stem("chess") == "chess"


def test_empty_input_yields_nothing():
    assert list(tokenizer.tokenize("")) == []
    assert list(tokenizer.surface_words("")) == []


def test_surface_words_skip_stemming():
    assert list(tokenizer.surface_words("Machine Learning")) == ["machine", "learning"]
    assert list(tokenizer.tokenize("Machine Learning", stem=False)) == ["machine", "learning"]


def test_custom_stop_words():
    custom = Tokenizer(stop_words=frozenset({"python"}))
    assert list(custom.tokenize("python tips")) == ["tip"]
