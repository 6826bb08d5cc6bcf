"""Tests for question entities, envelope validation and HTML decoding."""

from __future__ import annotations

import pytest

from conftest import envelope, make_question, raw_question
from trivia.errors import DecodingError, NetworkError, NonZeroResponseCode
from trivia.html_decode import html_decoded
from trivia.models import RawQuestion, RawQuestionEnvelope, ResponseCode, TriviaQuestion
from trivia.providers.opentdb import convert_question, parse_envelope


class TestHtmlDecoded:
    """Tests for per-field entity decoding."""

    @pytest.mark.parametrize("escaped, expected", [
        ("&quot;Hello&quot;", '"Hello"'),
        ("Don&#039;t panic", "Don't panic"),
        ("Science &amp; Nature", "Science & Nature"),
        ("&#x27;hex&#x27;", "'hex'"),
        ("Pok&eacute;mon", "Pokémon"),
        ("no entities here", "no entities here"),
    ])
    def test_decodes_entities(self, escaped, expected):
        assert html_decoded(escaped) == expected

    @pytest.mark.parametrize("text", [
        '"Hello"',
        "Science & Nature",
        "Tom & Jerry's 1 < 2",
        "Pokémon",
        "",
    ])
    def test_decoding_decoded_text_is_a_no_op(self, text):
        assert html_decoded(text) == text
        assert html_decoded(html_decoded(text)) == html_decoded(text)

    @pytest.mark.parametrize("escaped, expected", [
        ("Who wrote &amp;quot;Dune&amp;quot;?", 'Who wrote "Dune"?'),
        ("Tom &amp;amp; Jerry", "Tom & Jerry"),
        ("Don&amp;#039;t", "Don't"),
    ])
    def test_multiple_escaping_levels_are_peeled(self, escaped, expected):
        decoded = html_decoded(escaped)

        assert decoded == expected
        assert html_decoded(decoded) == decoded

    def test_failure_returns_original_value(self):
        not_text = 12345
        assert html_decoded(not_text) == not_text


class TestTriviaQuestion:
    """Tests for the decoded question entity."""

    def test_shuffled_answers_contain_every_answer_once(self):
        question = make_question(correct="Right")

        for _ in range(20):
            answers = question.all_answers_shuffled
            assert len(answers) == 4
            assert answers.count("Right") == 1
            assert sorted(answers) == sorted(["Right", "Wrong A", "Wrong B", "Wrong C"])

    def test_shuffled_answers_are_recomputed(self):
        question = make_question()

        first = question.all_answers_shuffled
        first.append("tampered")

        assert "tampered" not in question.all_answers_shuffled
        assert question.incorrect_answers == ["Wrong A", "Wrong B", "Wrong C"]

    def test_is_correct(self):
        question = make_question(correct="Right")

        assert question.is_correct("Right")
        assert not question.is_correct("Wrong A")
        assert not question.is_correct("right")

    def test_to_dict(self):
        question = TriviaQuestion("Art", "Who?", "Monet", ["Manet"], difficulty="hard", type="boolean")

        assert question.to_dict() == {
            "category": "Art",
            "question": "Who?",
            "correct_answer": "Monet",
            "incorrect_answers": ["Manet"],
            "difficulty": "hard",
            "type": "boolean",
        }


class TestEnvelopeValidation:
    """Tests for strict wire-shape validation."""

    def test_valid_envelope(self):
        parsed = RawQuestionEnvelope.from_dict(envelope(results=[raw_question(), raw_question()]))

        assert parsed.response_code == 0
        assert parsed.is_success
        assert len(parsed.results) == 2
        assert isinstance(parsed.results[0], RawQuestion)

    def test_extra_fields_are_ignored(self):
        data = envelope(results=[raw_question(explanation="extra")])
        data["token"] = "abc"

        parsed = RawQuestionEnvelope.from_dict(data)

        assert parsed.results[0].correct_answer == "Paris"

    @pytest.mark.parametrize("data", [
        [],
        "response_code",
        {"results": []},
        {"response_code": 0},
        {"response_code": "0", "results": []},
        {"response_code": False, "results": []},
        {"response_code": 0.0, "results": []},
        {"response_code": 0, "results": {}},
        {"response_code": 0, "results": ["question"]},
    ])
    def test_bad_envelopes_raise_decoding_error(self, data):
        with pytest.raises(DecodingError):
            RawQuestionEnvelope.from_dict(data)

    @pytest.mark.parametrize("overrides", [
        {"question": None},
        {"category": 9},
        {"incorrect_answers": "Lyon"},
        {"incorrect_answers": ["Lyon", 2]},
        {"type": ["multiple"]},
    ])
    def test_bad_questions_raise_decoding_error(self, overrides):
        with pytest.raises(DecodingError):
            RawQuestion.from_dict(raw_question(**overrides))

    def test_parse_envelope_rejects_non_json(self):
        with pytest.raises(DecodingError):
            parse_envelope(b"<html>503 Service Unavailable</html>")


class TestConvertQuestion:
    """Tests for mapping wire records to decoded questions."""

    def test_every_text_field_is_decoded(self):
        raw = RawQuestion.from_dict(raw_question(
            category="Entertainment: Japanese Anime &amp; Manga",
            question="Who is &quot;Goku&quot;?",
            correct_answer="A Saiyan",
            incorrect_answers=["A Namekian", "An Android", "A &quot;Human&quot;"],
        ))

        question = convert_question(raw)

        assert question.category == "Entertainment: Japanese Anime & Manga"
        assert question.question == 'Who is "Goku"?'
        assert question.incorrect_answers == ["A Namekian", "An Android", 'A "Human"']
        assert question.difficulty == "easy"
        assert question.type == "multiple"

    def test_distractor_equal_to_correct_answer_is_removed(self):
        raw = RawQuestion.from_dict(raw_question(
            correct_answer="Rock &amp; Roll",
            incorrect_answers=["Rock & Roll", "Jazz", "Blues"],
        ))

        question = convert_question(raw)

        assert question.correct_answer == "Rock & Roll"
        assert question.incorrect_answers == ["Jazz", "Blues"]

    def test_decode_failure_keeps_original_field_only(self, monkeypatch):
        import html
        import types

        import trivia.html_decode

        def flaky_unescape(text):
            if text == "Broken &amp; field":
                raise ValueError("cannot decode")
            return html.unescape(text)

        monkeypatch.setattr(trivia.html_decode, "html", types.SimpleNamespace(unescape=flaky_unescape))
        raw = RawQuestion.from_dict(raw_question(question="Broken &amp; field", category="A &amp; B"))

        question = convert_question(raw)

        assert question.question == "Broken &amp; field"
        assert question.category == "A & B"
        assert question.correct_answer == "Paris"


def test_response_code_descriptions():
    assert ResponseCode(1).description.startswith("Not enough questions")
    assert NonZeroResponseCode(2).reason == ResponseCode.INVALID_PARAMETER.description


def test_network_error_without_text_names_the_cause():
    assert str(NetworkError(ConnectionRefusedError())) == "Network error: ConnectionRefusedError"
    assert str(NetworkError(OSError("unreachable"))) == "Network error: unreachable"
