import pytest

import route_matcher
from radixroute.cli import check_paths, run_cli
from radixroute.routes import RouteTable


@pytest.fixture
def table():
    return RouteTable(routes=["/", "/index.html", "/static/*"])


def test_check_paths(table, capsys):
    assert check_paths(table, ["/", "/static/a.css"])
    assert not check_paths(table, ["/index.html", "/missing"])
    out = capsys.readouterr().out
    assert "MATCH  /static/a.css" in out
    assert "miss   /missing" in out


def test_run_cli(table, capsys, monkeypatch):
    answers = iter(["/index.html", "/nope", "add /api/*", "add", "/api/v1", "show", "done"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    run_cli(table)

    out = capsys.readouterr().out
    assert "Added '/api/*'" in out
    assert "Format: add ROUTE" in out
    assert out.count("  MATCH (") == 2
    assert out.count("  miss (") == 1
    assert "4 routes" in out
    assert "/api/*" in table.routes


def test_run_cli_stops_on_eof(table, capsys, monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    run_cli(table)
    assert "ROUTE MATCHER" in capsys.readouterr().out


def test_main_queries(tmp_path, capsys):
    path = tmp_path / "routes.txt"
    path.write_text("/\n/static/*\n", encoding="utf-8")

    assert route_matcher.main(["--routes", str(path), "-q", "/static/x", "-q", "/"]) == 0
    assert route_matcher.main(["--routes", str(path), "-q", "/static/"]) == 1


def test_main_dump(tmp_path, capsys):
    path = tmp_path / "routes.txt"
    path.write_text("hoge\nhot\n", encoding="utf-8")

    assert route_matcher.main(["--routes", str(path), "--dump"]) == 0

    out = capsys.readouterr().out
    assert "2 routes, 4 nodes" in out
    assert "    'ge' $" in out


def test_run_cli_question_mark_tests_command_words(capsys, monkeypatch):
    table = RouteTable(routes=["add me", "show"])
    answers = iter(["? add me", "?show", "? add you", "done"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    run_cli(table)

    out = capsys.readouterr().out
    assert out.count("  MATCH (") == 2
    assert out.count("  miss (") == 1
    assert table.routes == ["add me", "show"]
