import io
import json
import sys

from users.interfaces.cli import main


def test_list_models(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "commands.CreateUserResult" in out
    assert "queries.GetUserResult" in out


def test_decode_argument(capsys):
    assert main(["commands.CreateUserResult", '{"id": "u1", "name": "Ada"}']) == 0
    assert json.loads(capsys.readouterr().out) == {
        "id": "u1",
        "name": "Ada",
        "email": None,
        "created_at": None,
    }


def test_decode_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"id": "u2", "updated_at": "t2"}'))
    assert main(["queries.GetUserResult"]) == 0
    decoded = json.loads(capsys.readouterr().out)
    assert decoded["id"] == "u2"
    assert decoded["updated_at"] == "t2"


def test_parse_failure(capsys):
    assert main(["queries.GetUserResult", "not valid json"]) == 1
    assert "Malformed JSON document" in capsys.readouterr().err


def test_validation_failure_lists_fields(capsys):
    assert main(["queries.GetUserResult", '{"id": 1}']) == 1
    err = capsys.readouterr().err
    assert "Invalid GetUserResult payload" in err
    assert "  id:" in err


def test_unknown_model(capsys):
    assert main(["queries.Nope", "{}"]) == 2
    err = capsys.readouterr().err
    assert "Model not found: queries.Nope" in err
    assert "known models:" in err


def test_usage(capsys):
    assert main([]) == 2
    assert "usage:" in capsys.readouterr().err


def test_logs_go_to_stderr(capsys, monkeypatch):
    calls = []
    monkeypatch.setattr("shared.logging.logging.basicConfig", lambda **kwargs: calls.append(kwargs))
    main(["--list"])
    [handler] = calls[0]["handlers"]
    assert handler.stream is sys.stderr


def test_lenient_output_is_json(capsys, lenient):
    assert main(["queries.GetUserResult", '{"id": 1, "name": "Bob"}']) == 0
    decoded = json.loads(capsys.readouterr().out)
    assert decoded["id"] is None
    assert decoded["name"] == "Bob"
