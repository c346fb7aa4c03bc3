"""Tests for chunking.boundaries."""

from chunking.boundaries import (
    split_paragraph_spans,
    split_sentence_spans,
    split_word_spans,
)


def sentences(text):
    return [s.strip() for s in split_sentence_spans(text)]


class TestSentenceBoundaries:
    def test_empty_string(self):
        assert split_sentence_spans("") == []

    def test_two_sentences(self):
        assert sentences("First goal. Second goal.") == ["First goal.", "Second goal."]

    def test_question_and_exclamation(self):
        result = sentences("Is it done? Yes! Ship it.")
        assert result == ["Is it done?", "Yes!", "Ship it."]

    def test_no_split_lowercase(self):
        assert len(split_sentence_spans("It costs approx. three dollars.")) == 1

    def test_title_abbreviation(self):
        result = sentences("Dr. Smith approved the plan. It starts soon.")
        assert result == ["Dr. Smith approved the plan.", "It starts soon."]

    def test_multi_part_abbreviation(self):
        result = split_sentence_spans("Track metrics, e.g. Revenue and churn. Review weekly.")
        assert len(result) == 2

    def test_numbered_list(self):
        result = split_sentence_spans("Steps are 1. Plan and 2. Execute.")
        assert len(result) == 1


class TestLosslessSpans:
    def test_sentence_spans_keep_whitespace(self):
        text = "First goal.  Second goal.\nThird goal."
        spans = split_sentence_spans(text)
        assert spans == ["First goal.  ", "Second goal.\n", "Third goal."]
        assert "".join(spans) == text

    def test_paragraph_spans(self):
        text = "Intro line\nstill intro\n\nSecond paragraph\n \n\nThird"
        spans = split_paragraph_spans(text)
        assert spans == ["Intro line\nstill intro\n\n", "Second paragraph\n \n\n", "Third"]
        assert "".join(spans) == text

    def test_word_spans(self):
        text = "  lead  words\tand\nlines "
        spans = split_word_spans(text)
        assert "".join(spans) == text
        assert spans[0] == "  "
        assert spans[1] == "lead  "

    def test_empty(self):
        assert split_paragraph_spans("") == []
        assert split_sentence_spans("") == []
        assert split_word_spans("") == []
