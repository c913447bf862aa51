import json
import sys

from scripts.evaluate_difficulty import main


def test_evaluate_difficulty_prints_json(tmp_path, monkeypatch, capsys):
    argv = [
        "evaluate_difficulty.py",
        "--config",
        str(tmp_path / "absent.yaml"),
        "--episodes",
        "4",
        "--difficulty",
        "100",
        "--seed",
        "0",
        "--sweep-trials",
        "50",
        "--log-level",
        "WARNING",
    ]
    monkeypatch.setattr(sys, "argv", argv)
    main()

    output = json.loads(capsys.readouterr().out)
    assert output["games"] == 4
    assert output["opponent_wins"] + output["ai_wins"] + output["draws"] == 4
    assert output["sound_move_rate"]["100"] == 1.0
    assert set(output["sound_move_rate"]) == {"0", "25", "50", "75", "100"}
