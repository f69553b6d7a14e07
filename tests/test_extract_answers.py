from pathlib import Path

from script import extract_wordle_answers as ex

PAGE = """
<html><body><table>
<tr><td>2022-01-03 (Monday)</td><td>198</td><td>SPEED</td></tr>
<tr><td>2022-01-02 (Sunday)</td><td>197</td><td>ABBEY</td></tr>
<tr><td>2022-01-01 (Saturday)</td><td>196</td><td>SPEED</td></tr>
</table></body></html>
"""


class _Resp:
    text = PAGE

    def raise_for_status(self):
        pass


def test_parse_answers_dedupes_in_order():
    assert ex.parse_answers(PAGE) == ["speed", "abbey"]


def test_main_merges_and_sorts(tmp_path: Path, monkeypatch, capsys):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return _Resp()

    monkeypatch.setattr(ex.requests, "get", fake_get)
    out = tmp_path / "answers.txt"
    out.write_text("crane\nabbey\n", encoding="utf-8")

    ex.main(["--out", str(out), "--merge", "--sort"])

    assert calls == [ex.URL]
    assert out.read_text(encoding="utf-8").splitlines() == ["abbey", "crane", "speed"]
    assert "Wrote 3 unique answers" in capsys.readouterr().out
