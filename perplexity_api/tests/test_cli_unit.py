"""Unit tests for the example command line program."""
from __future__ import annotations

import io

import pytest

from perplexity_api.cli import main
from perplexity_api.cli.cli_actions import EXIT_ERROR, EXIT_NO_TOKEN, EXIT_OK, build_request, handle_ask
from perplexity_api.cli.cli_parser import _str2bool, build_parser
from perplexity_api.base.models import RecencyFilter

from conftest import completion_document, delta_event, event_line


@pytest.mark.parametrize(
    "raw, expected",
    [(None, True), ("yes", True), ("ON", True), ("0", False), ("off", False), ("n", False), ("maybe", True)],
)
def test_str2bool(raw, expected):
    assert _str2bool(raw) is expected  # nosec B101 - pytest assert in tests


def test_parser_defaults_and_flags():
    parser = build_parser()
    args = parser.parse_args(["What is new?"])
    assert args.prompt == "What is new?" and args.stream is True  # nosec B101
    assert parser.parse_args(["q", "--no-stream"]).stream is False  # nosec B101
    assert parser.parse_args(["q", "--stream", "false"]).stream is False  # nosec B101
    assert parser.parse_args(["q", "--recency", "day"]).recency == "day"  # nosec B101
    with pytest.raises(SystemExit):
        parser.parse_args(["q", "--recency", "decade"])


def test_build_request_uses_config_defaults():
    args = build_parser().parse_args(["hello", "--no-stream", "--recency", "week"])
    req = build_request(args, {"model": "cfg-model", "system_message": "Be brief."}, io.StringIO())
    assert req.model == "cfg-model"  # nosec B101
    assert [m.role.value for m in req.messages] == ["system", "user"]  # nosec B101
    assert req.search_recency_filter is RecencyFilter.WEEK  # nosec B101
    assert req.stream is None  # nosec B101


def test_missing_token_exit_code(capsys):
    assert main(["hello"]) == EXIT_NO_TOKEN  # nosec B101
    assert "PERPLEXITY_API_TOKEN" in capsys.readouterr().err  # nosec B101


def test_document_reply_is_printed(make_client, document_reply):
    respond, _ = document_reply(completion_document("Read Dune."))
    client, recorder = make_client(respond)
    out, err = io.StringIO(), io.StringIO()
    args = build_parser().parse_args(["Recommend a book", "--no-stream", "--system", ""])

    assert handle_ask(args, client=client, out=out, err=err) == EXIT_OK  # nosec B101
    assert "Read Dune." in out.getvalue()  # nosec B101
    assert [m["role"] for m in recorder.last_json["messages"]] == ["user"]  # nosec B101


def test_streamed_reply_is_printed_incrementally(make_client, sse_reply):
    respond, _ = sse_reply([event_line(delta_event("Hello")), event_line(delta_event(" world")), b"data: [DONE]\n\n"])
    client, recorder = make_client(respond)
    out = io.StringIO()
    args = build_parser().parse_args(["Greet me"])

    assert handle_ask(args, client=client, out=out, err=io.StringIO()) == EXIT_OK  # nosec B101
    assert out.getvalue() == "Hello world\n"  # nosec B101
    assert recorder.last_json["stream"] is True  # nosec B101


def test_api_error_exit_code(make_client, document_reply):
    respond, _ = document_reply({"error": "Invalid API key"}, status=401)
    client, _ = make_client(respond)
    err = io.StringIO()
    args = build_parser().parse_args(["q", "--no-stream"])

    assert handle_ask(args, client=client, out=io.StringIO(), err=err) == EXIT_ERROR  # nosec B101
    assert "API error: Invalid API key" in err.getvalue()  # nosec B101
