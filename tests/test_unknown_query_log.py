import json

from troubleshoot_kb.utils.unknown_query_log import UnknownQueryLog


def test_record_appends_json_lines(tmp_path):
    log = UnknownQueryLog(str(tmp_path / "logs" / "unknowns.log"))

    assert log.record("  quantum zebra ", "quantum zebra") is True
    assert log.record("why is the sky green", "why is the sky green") is True

    lines = (tmp_path / "logs" / "unknowns.log").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["query"] == "quantum zebra"
    assert first["processed"] == "quantum zebra"
    assert "timestamp" in first


def test_read_skips_malformed_lines(tmp_path):
    path = tmp_path / "unknowns.log"
    path.write_text(
        '{"query": "a", "processed": "a", "timestamp": "t"}\n'
        "not json\n"
        "\n"
        '{"query": "b", "processed": "b", "timestamp": "t"}\n',
        encoding="utf-8",
    )

    entries = list(UnknownQueryLog(str(path)).read())

    assert [e["query"] for e in entries] == ["a", "b"]


def test_read_missing_file(tmp_path):
    assert list(UnknownQueryLog(str(tmp_path / "none.log")).read()) == []


def test_write_failure_is_not_raised(tmp_path):
    # A directory where the log file should be makes open() fail
    path = tmp_path / "unknowns.log"
    path.mkdir()

    assert UnknownQueryLog(str(path)).record("quantum zebra", "quantum zebra") is False
