from funcsurf.__main__ import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert not args.list
    assert args.preset is None
    assert args.log_level == "INFO"


def test_list(capsys):
    assert main(["--list", "--log-level", "WARNING"]) == 0
    out = capsys.readouterr().out
    assert "Gaussian Hill: A radial Gaussian bump" in out
    assert out.count("\n") == 4


def test_unknown_preset(capsys):
    assert main(["--preset", "Klein Bottle", "--log-level", "WARNING"]) == 1
    assert "unknown preset 'Klein Bottle'" in capsys.readouterr().out


def test_missing_config(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.yaml"), "--list"]) == 1
    assert "settings file not found" in capsys.readouterr().out
