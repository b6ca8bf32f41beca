"""End-to-end tests for the CLI commands against a fake API."""

import json
import logging
from datetime import datetime, timezone

import httpx
import pytest

from meetgeek.commands.auth import AuthCommand
from meetgeek.main import MeetGeekCLI, build_parser

from tests.util_fake_api import FakeAPI


def make_cli(cli_config, api: FakeAPI) -> MeetGeekCLI:
    return MeetGeekCLI(cli_config, transport=api.transport)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("MEETGEEK_API_KEY", "abc123token1")
    return "abc123token1"


class TestList:
    """`list` command."""

    def test_list_with_limit(self, cli_config, api_key, sample_meetings, capsys):
        """Config absent, env credential set: both meetings shown, IDs truncated."""
        api = FakeAPI({"/meetings": (200, sample_meetings)})

        code = make_cli(cli_config, api).run(["list", "--limit", "2"])

        out, err = capsys.readouterr()
        assert code == 0
        assert "abcdef12" in out
        assert "12345678" in out
        assert "abcdef1234567890" not in out
        assert "Quarterly planning" in out
        assert "Untitled" in out
        assert "45 min" in out
        assert "? min" in out
        assert "Error" not in err
        assert api.requests[0].url.params["limit"] == "2"
        assert api.requests[0].headers["Authorization"] == "Bearer abc123token1"

    def test_default_limit_is_ten(self, cli_config, api_key):
        api = FakeAPI({"/meetings": (200, {"meetings": []})})
        make_cli(cli_config, api).run(["list"])
        assert api.requests[0].url.params["limit"] == "10"

    def test_empty(self, cli_config, api_key, capsys):
        api = FakeAPI({"/meetings": (200, {"meetings": []})})
        assert make_cli(cli_config, api).run(["list"]) == 0
        assert "No meetings found." in capsys.readouterr().out

    def test_json_output(self, cli_config, api_key, sample_meetings, capsys):
        api = FakeAPI({"/meetings": (200, sample_meetings)})
        assert make_cli(cli_config, api).run(["list", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == sample_meetings

    def test_invalid_limit(self, cli_config, api_key, capsys):
        api = FakeAPI()
        assert make_cli(cli_config, api).run(["list", "--limit", "many"]) == 1
        assert "Error:" in capsys.readouterr().err
        assert api.requests == []

    @pytest.mark.parametrize("args", [["--limit", "0"], ["--limit=-3"]])
    def test_limit_below_one_is_rejected(self, cli_config, api_key, capsys, args):
        api = FakeAPI()
        assert make_cli(cli_config, api).run(["list", *args]) == 1
        assert "--limit must be at least 1" in capsys.readouterr().err
        assert api.requests == []

    def test_next_cursor_hint(self, cli_config, api_key, capsys):
        api = FakeAPI({"/meetings": (200, {"meetings": [{"id": "m1"}], "pagination": {"next_cursor": "p2"}})})
        make_cli(cli_config, api).run(["list"])
        assert "--cursor p2" in capsys.readouterr().out


class TestErrors:
    """Every command exits 1 with a single error line."""

    def test_no_credential(self, cli_config, capsys):
        api = FakeAPI()
        code = make_cli(cli_config, api).run(["list"])

        out, err = capsys.readouterr()
        assert code == 1
        assert err.strip().startswith("Error:")
        assert "meetgeek auth" in err
        assert api.requests == []

    def test_http_error_status_and_body(self, cli_config, api_key, capsys):
        api = FakeAPI({"/meetings/m1": (404, "meeting not found")})
        code = make_cli(cli_config, api).run(["show", "m1"])

        err = capsys.readouterr().err
        assert code == 1
        assert "404" in err
        assert "meeting not found" in err
        assert len(err.strip().splitlines()) == 1

    def test_missing_meeting_id(self, cli_config, api_key, capsys):
        assert make_cli(cli_config, FakeAPI()).run(["summary"]) == 1
        assert "Missing meeting ID" in capsys.readouterr().err

    def test_unknown_command(self, cli_config, capsys):
        assert make_cli(cli_config, FakeAPI()).run(["frobnicate"]) == 1
        assert "Unknown command" in capsys.readouterr().err


class TestShow:
    def test_details(self, cli_config, api_key, capsys):
        api = FakeAPI({"/meetings/abcdef1234567890": (200, {
            "meeting_id": "abcdef1234567890",
            "title": "Quarterly planning",
            "timestamp_start_utc": "2024-01-15T10:00:00Z",
            "timestamp_end_utc": "2024-01-15T10:45:00Z",
            "participants": [{"name": "Alice"}, {"email": "bob@example.com"}],
            "recording_url": "https://rec.example.com/1",
        })})

        assert make_cli(cli_config, api).run(["show", "abcdef1234567890"]) == 0

        out = capsys.readouterr().out
        assert "abcdef1234567890" in out
        assert "Alice, bob@example.com" in out
        assert "https://rec.example.com/1" in out
        assert "45 minutes" in out


class TestSummary:
    def test_text_and_action_items(self, cli_config, api_key, capsys):
        api = FakeAPI({"/meetings/m1/summary": (200, {
            "summary": "We agreed on the roadmap.",
            "action_items": ["Email the team", {"text": "Draft the proposal"}, {"description": "Book a room"}],
        })})

        assert make_cli(cli_config, api).run(["summary", "m1"]) == 0

        out = capsys.readouterr().out
        assert "We agreed on the roadmap." in out
        assert "• Email the team" in out
        assert "• Draft the proposal" in out
        assert "• Book a room" in out

    def test_sections(self, cli_config, api_key, capsys):
        api = FakeAPI({"/meetings/m1/summary": (200, {
            "sections": [{"title": "Decisions", "content": "Adopt plan B."}],
        })})

        assert make_cli(cli_config, api).run(["summary", "m1"]) == 0

        out = capsys.readouterr().out
        assert "Decisions" in out
        assert "Adopt plan B." in out

    def test_nothing_available(self, cli_config, api_key, capsys):
        api = FakeAPI({"/meetings/m1/summary": (200, {})})
        assert make_cli(cli_config, api).run(["summary", "m1"]) == 0
        assert "No summary available." in capsys.readouterr().out


class TestTranscript:
    def test_prints_lines(self, cli_config, api_key, sample_transcript, capsys):
        api = FakeAPI({"/meetings/m1/transcript": (200, sample_transcript)})

        assert make_cli(cli_config, api).run(["transcript", "m1"]) == 0

        out = capsys.readouterr().out
        assert "Alice" in out
        assert "Let's review the budget first." in out
        assert "Carol" in out
        assert "Unknown" in out

    def test_epoch_millisecond_times(self, cli_config, api_key, capsys):
        """Epoch times in the payload print as a local time of day."""
        api = FakeAPI({"/meetings/m1/transcript": (200, {
            "sentences": [{"speaker": "Alice", "text": "Morning all.", "timestamp": 1705312805000}],
        })})
        expected = datetime(2024, 1, 15, 10, 0, 5, tzinfo=timezone.utc).astimezone().strftime("%H:%M:%S")

        assert make_cli(cli_config, api).run(["transcript", "m1"]) == 0

        assert f"[{expected}] Alice: Morning all." in capsys.readouterr().out

    def test_output_file(self, cli_config, api_key, sample_transcript, temp_directory, capsys):
        target = temp_directory / "out.txt"
        target.write_text("old content")
        api = FakeAPI({"/meetings/m1/transcript": (200, sample_transcript)})

        code = make_cli(cli_config, api).run(["transcript", "m1", "--output", str(target)])

        assert code == 0
        assert target.read_text().splitlines() == [
            "[0:00:05] Alice: Let's review the budget first.",
            "[0:01:05] Bob: The budget looks fine to me.",
            "Carol: Next item is hiring.",
            "Unknown: ",
        ]
        assert "Saved to" in capsys.readouterr().out

    def test_unwritable_output(self, cli_config, api_key, sample_transcript, temp_directory, capsys):
        api = FakeAPI({"/meetings/m1/transcript": (200, sample_transcript)})
        target = temp_directory / "missing-dir" / "out.txt"

        assert make_cli(cli_config, api).run(["transcript", "m1", "-o", str(target)]) == 1
        assert "Error:" in capsys.readouterr().err


class TestHighlights:
    def test_list(self, cli_config, api_key, capsys):
        api = FakeAPI({"/meetings/m1/highlights": (200, {
            "highlights": [{"highlightText": "Budget approved", "timestamp": 90}],
        })})

        assert make_cli(cli_config, api).run(["highlights", "m1"]) == 0

        out = capsys.readouterr().out
        assert "[0:01:30]" in out
        assert "Budget approved" in out

    def test_raw_json_fallback(self, cli_config, api_key, capsys):
        api = FakeAPI({"/meetings/m1/highlights": (200, {"status": "processing"})})

        assert make_cli(cli_config, api).run(["highlights", "m1"]) == 0

        out = capsys.readouterr().out
        assert '"status": "processing"' in out

    def test_empty(self, cli_config, api_key, capsys):
        api = FakeAPI({"/meetings/m1/highlights": (200, {"highlights": []})})
        assert make_cli(cli_config, api).run(["highlights", "m1"]) == 0
        assert "No highlights available." in capsys.readouterr().out


class TestAsk:
    """Substring search over transcripts."""

    def test_single_meeting_prints_all_matches(self, cli_config, api_key, sample_transcript, capsys):
        api = FakeAPI({"/meetings/m1/transcript": (200, sample_transcript)})

        code = make_cli(cli_config, api).run(["ask", "the", "BUDGET", "--meeting", "m1"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Found 2 match(es)" in out
        assert "Let's review the budget first." in out
        assert "The budget looks fine to me." in out
        assert "hiring" not in out
        assert api.paths == ["/meetings/m1/transcript"]

    def test_skips_failing_meeting(self, cli_config, api_key, capsys, caplog):
        """Meeting #2 fails; #1 and #3 are still reported and the command succeeds."""
        caplog.set_level(logging.DEBUG, logger="meetgeek.commands.ask")
        api = FakeAPI({
            "/meetings": (200, {"meetings": [
                {"meeting_id": "aaaaaaaa-1", "title": "First"},
                {"meeting_id": "bbbbbbbb-2", "title": "Second"},
                {"meeting_id": "cccccccc-3", "title": "Third"},
            ]}),
            "/meetings/aaaaaaaa-1/transcript": (200, {"sentences": [{"speaker": "A", "text": "deadline is Friday"}]}),
            "/meetings/bbbbbbbb-2/transcript": (500, "transcript not ready"),
            "/meetings/cccccccc-3/transcript": (200, {"transcript": [
                {"speaker": "C", "text": "Deadline moved"},
                {"speaker": "C", "text": "no match here"},
            ]}),
        })

        code = make_cli(cli_config, api).run(["ask", "deadline"])

        out, err = capsys.readouterr()
        assert code == 0
        assert "aaaaaaaa" in out
        assert "cccccccc" in out
        assert "bbbbbbbb" not in out
        assert "(1 match)" in out
        assert "2 match(es) in total." in out
        assert "Error" not in err
        assert api.requests[0].url.params["limit"] == "10"
        assert "Skipping meeting bbbbbbbb-2" in caplog.text

    def test_preview_is_truncated_and_capped(self, cli_config, api_key, capsys):
        long_text = "keyword " + "x" * 200
        api = FakeAPI({
            "/meetings": (200, {"meetings": [{"meeting_id": "dddddddd-4", "title": "Long"}]}),
            "/meetings/dddddddd-4/transcript": (200, [
                {"speaker": "S", "text": f"{i} {long_text}"} for i in range(5)
            ]),
        })

        assert make_cli(cli_config, api).run(["ask", "keyword"]) == 0

        out = capsys.readouterr().out
        assert "(5 matches)" in out
        assert out.count("...") == 3
        assert "x" * 150 not in out

    def test_empty_query(self, cli_config, api_key, capsys):
        api = FakeAPI()
        assert make_cli(cli_config, api).run(["ask"]) == 1
        assert "Missing search query" in capsys.readouterr().err
        assert api.requests == []


class TestAuth:
    """`auth` setup, show and clear."""

    def test_rejects_short_key_without_network(self, cli_config, config_path, monkeypatch, capsys):
        monkeypatch.setattr(AuthCommand, "_prompt_key", lambda self: "short123")
        api = FakeAPI({"/meetings": (200, {"meetings": []})})

        code = make_cli(cli_config, api).run(["auth"])

        assert code == 1
        assert api.requests == []
        assert not config_path.exists()
        assert "at least 10 characters" in capsys.readouterr().err

    def test_saves_verified_key(self, cli_config, config_path, monkeypatch):
        monkeypatch.setattr(AuthCommand, "_prompt_key", lambda self: "valid-key-0123456789")
        api = FakeAPI({"/meetings": (200, {"meetings": []})})

        assert make_cli(cli_config, api).run(["auth"]) == 0

        assert json.loads(config_path.read_text()) == {"apiKey": "valid-key-0123456789"}
        assert api.requests[0].url.params["limit"] == "1"
        assert api.requests[0].headers["Authorization"] == "Bearer valid-key-0123456789"

    def test_verification_failure_does_not_save(self, cli_config, config_path, monkeypatch, capsys):
        monkeypatch.setattr(AuthCommand, "_prompt_key", lambda self: "rejected-key-0123")
        api = FakeAPI({"/meetings": (401, "invalid token")})

        assert make_cli(cli_config, api).run(["auth"]) == 1

        assert not config_path.exists()
        err = capsys.readouterr().err
        assert "verification failed" in err
        assert "401" in err

    def test_verification_uses_candidate_not_environment(self, cli_config, api_key, monkeypatch):
        monkeypatch.setattr(AuthCommand, "_prompt_key", lambda self: "candidate-key-0123")
        api = FakeAPI({"/meetings": (200, {})})

        make_cli(cli_config, api).run(["auth"])

        assert api.requests[0].headers["Authorization"] == "Bearer candidate-key-0123"

    def test_show_masks_key(self, cli_config, write_config, config_path, capsys):
        write_config({"apiKey": "abcdefgh12345678wxyz"})

        assert make_cli(cli_config, FakeAPI()).run(["auth", "--show"]) == 0

        out = capsys.readouterr().out
        assert "abcdefgh...wxyz" in out
        assert "abcdefgh12345678wxyz" not in out
        assert str(config_path) in out
        assert "config file" in out

    def test_show_without_key(self, cli_config, capsys):
        assert make_cli(cli_config, FakeAPI()).run(["auth", "--show"]) == 0
        assert "No API key configured" in capsys.readouterr().out

    def test_clear(self, cli_config, write_config, config_path):
        write_config({"apiKey": "abcdefgh12345678wxyz", "theme": "dark"})

        assert make_cli(cli_config, FakeAPI()).run(["auth", "--clear"]) == 0

        assert json.loads(config_path.read_text()) == {"theme": "dark"}


class TestEntryPoint:
    def test_parser_keeps_command_flags(self):
        args = build_parser().parse_args(["-v", "ask", "budget", "--meeting", "m1"])
        assert args.verbose is True
        assert args.command == "ask"
        assert args.args == ["budget", "--meeting", "m1"]

    def test_help_lists_commands(self, cli_config, capsys):
        assert make_cli(cli_config, FakeAPI()).run([]) == 0
        out = capsys.readouterr().out
        for name in ("auth", "list", "show", "summary", "transcript", "highlights", "ask"):
            assert name in out

    def test_help_for_one_command(self, cli_config, capsys):
        assert make_cli(cli_config, FakeAPI()).run(["help", "transcript"]) == 0
        assert "--output FILE" in capsys.readouterr().out

    def test_auth_help_explains_masking(self, cli_config, capsys):
        assert make_cli(cli_config, FakeAPI()).run(["help", "auth"]) == 0
        words = capsys.readouterr().out.split()
        assert "fewer" in words
        assert "8" in words

    def test_main_exit_code(self, monkeypatch, sample_meetings):
        """main() exits with the command's status."""
        monkeypatch.setenv("MEETGEEK_API_KEY", "abc123token1")
        api = FakeAPI({"/meetings": (200, sample_meetings)})
        original = httpx.Client.__init__

        def patched(self, *args, **kwargs):
            kwargs["transport"] = api.transport
            original(self, *args, **kwargs)

        monkeypatch.setattr(httpx.Client, "__init__", patched)
        monkeypatch.setattr("meetgeek.main.configure_logging", lambda level: None)

        from meetgeek.main import main

        with pytest.raises(SystemExit) as exc_info:
            main(["list", "--limit", "2"])
        assert exc_info.value.code == 0
        assert api.paths == ["/meetings"]
