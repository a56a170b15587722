import pytest

from carbon_verify.extraction.exceptions import ExtractionResponseError
from carbon_verify.extraction.parser import parse_reply


class TestParseReply:
    def test_plain_json(self) -> None:
        assert parse_reply('{"documents": []}') == {"documents": []}

    def test_json_wrapped_in_prose(self) -> None:
        reply = 'Here is the extraction:\n{"overallConfidence": 0.9}\nLet me know.'
        assert parse_reply(reply) == {"overallConfidence": 0.9}

    def test_markdown_fences_stripped(self) -> None:
        reply = '```json\n{"documents": [{"slot": "project_proposal"}]}\n```'
        assert parse_reply(reply)["documents"][0]["slot"] == "project_proposal"

    def test_skips_brace_that_is_not_json(self) -> None:
        reply = 'Fields use {placeholders}; result: {"a": 1}'
        assert parse_reply(reply) == {"a": 1}

    def test_nested_object_returned_whole(self) -> None:
        reply = 'x {"outer": {"inner": 1}} y'
        assert parse_reply(reply) == {"outer": {"inner": 1}}

    def test_no_object_raises(self) -> None:
        with pytest.raises(ExtractionResponseError, match="No JSON object"):
            parse_reply("I could not read the document.")

    def test_truncated_object_raises(self) -> None:
        with pytest.raises(ExtractionResponseError):
            parse_reply('{"documents": [')

    def test_deeply_nested_reply_raises_response_error(self) -> None:
        with pytest.raises(ExtractionResponseError, match="could not be decoded"):
            parse_reply('{"a":' * 100_000)

    def test_oversized_integer_raises_response_error(self) -> None:
        with pytest.raises(ExtractionResponseError, match="could not be decoded"):
            parse_reply('{"overallConfidence": ' + "9" * 5000 + "}")
