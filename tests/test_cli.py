from aerolab.__main__ import build_parser, main


def test_info(capsys):
    assert main(["info"]) == 0
    out = capsys.readouterr().out
    assert "red_coupe" in out
    assert "air_resistance" in out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


def test_force_options_parse():
    args = build_parser().parse_args(["plot", "--speed", "8", "--air", "2"])
    assert args.speed == 8.0
    assert args.air_resistance == 2.0
    assert args.friction is None


def test_plot_to_file(tmp_path, capsys):
    output = tmp_path / "motion.png"
    assert main(["plot", "--frames", "20", "--speed", "5", "-o", str(output)]) == 0
    assert output.exists()


def test_terminal_quiz(monkeypatch, capsys):
    answers = iter(["2", "x", "1", "2", "2"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    assert main(["quiz", "--delay", "0"]) == 0
    out = capsys.readouterr().out
    assert "Incorrect" in out
    assert "Please enter a number" in out
    assert "Quiz complete" in out


def test_terminal_quiz_eof(monkeypatch):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main(["quiz"]) == 1


def test_quiz_rejects_negative_delay(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "1")

    assert main(["quiz", "--delay", "-1"]) == 1
    assert "delay must be a non-negative" in capsys.readouterr().out


def test_quiz_rejects_nan_delay(capsys):
    assert main(["quiz", "--delay", "nan"]) == 1


def test_plot_rejects_negative_frames(tmp_path, capsys):
    output = tmp_path / "motion.png"
    assert main(["plot", "--frames", "-3", "-o", str(output)]) == 1
    assert "frames must be non-negative" in capsys.readouterr().out
    assert not output.exists()
