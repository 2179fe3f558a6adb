import pytest

from qualified_csv.cli import main

CSV = b'Id,Name,Note\r\n1,Smith,"late, again"\r\n2,Jones,ok\r\n'


def test_writes_to_stdout(tmp_path, capsys):
    src = tmp_path / "in.csv"
    src.write_bytes(CSV)
    assert main([str(src)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Id,Name,Note",
        '1,Smith,"late, again"',
        "2,Jones,ok",
    ]

def test_writes_to_file(tmp_path):
    src = tmp_path / "in.csv"
    dst = tmp_path / "out.csv"
    src.write_bytes(CSV)
    assert main([str(src), "-o", str(dst)]) == 0
    assert dst.read_bytes() == CSV

def test_rewrites_with_other_delimiter(tmp_path, capsys):
    src = tmp_path / "in.csv"
    src.write_bytes(b"a|b|'c|d'\r\n")
    assert main([str(src), "--delimiter", "|", "--qualifier", "'"]) == 0
    assert capsys.readouterr().out == "a|b|'c|d'\n"

def test_missing_input_returns_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert "missing.csv" in capsys.readouterr().err

def test_invalid_dialect_is_usage_error(tmp_path):
    src = tmp_path / "in.csv"
    src.write_bytes(CSV)
    with pytest.raises(SystemExit) as exc:
        main([str(src), "--delimiter", ";;"])
    assert exc.value.code == 2
