import pytest

from main import build_parser, main
from config import get_config


def test_cli_writes_diagonal_file(tmp_path):
    out = tmp_path / "out" / "diag.txt"
    main(["--nx", "9", "--ny", "9", "--tmax", "10", "--output-path", str(out), "--quiet-mode"])
    lines = out.read_text().split("\n")
    assert len(lines) == 9 + 3
    assert lines[0].startswith("0 0 ")


def test_bad_backend_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--backend", "gpu", "--output-path", str(tmp_path / "x.txt"), "--quiet-mode"])
    assert excinfo.value.code == 1
    assert "gpu" in capsys.readouterr().out


def test_parser_exposes_every_setting():
    base = get_config()
    args = build_parser(base).parse_args(["--rx", "0.1", "--no-check-finite", "--rotation-rule", "copy"])
    assert args.rx == 0.1
    assert args.check_finite is False
    assert args.rotation_rule == "copy"
    assert args.ny is None
