from inclusive_hub.sentences import split_into_sentences


def test_split_keeps_punctuation_attached():
    text = "Hello there. How are you? I am fine!"
    assert split_into_sentences(text) == ["Hello there.", "How are you?", "I am fine!"]


def test_split_without_terminal_punctuation_returns_whole_text():
    assert split_into_sentences("  no punctuation here  ") == ["no punctuation here"]


def test_split_treats_repeated_punctuation_as_one_boundary():
    text = "Wait... Really?! Yes."
    assert split_into_sentences(text) == ["Wait...", "Really?!", "Yes."]


def test_split_ignores_punctuation_without_following_whitespace():
    assert split_into_sentences("Version 1.5 is out.") == ["Version 1.5 is out."]


def test_split_drops_empty_segments_and_blank_text():
    assert split_into_sentences("") == []
    assert split_into_sentences("   \n\t ") == []
    assert split_into_sentences("One.\n\n\nTwo.") == ["One.", "Two."]


def test_split_is_deterministic_and_reconstructs_text():
    text = "First line.  Second line!\nThird line? Tail"
    first = split_into_sentences(text)
    assert first == split_into_sentences(text)
    assert " ".join(first) == " ".join(text.split())
