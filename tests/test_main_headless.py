from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"


def run_cli(*args, extra_env=None):
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC) + os.pathsep + env.get("PYTHONPATH", "")
    env.pop("RL_SETTINGS_FILE", None)
    env.update(extra_env or {})
    cmd = [sys.executable, "-m", "roguelike", "--headless", *args]
    return subprocess.run(cmd, capture_output=True, text=True, env=env, timeout=30)


def test_headless_walk_and_quit():
    proc = run_cli("--keys", "RIGHT,RIGHT,RIGHT,RIGHT,ESCAPE")
    assert proc.returncode == 0, proc.stderr
    assert "Player at (29, 23) after 5 turns" in proc.stdout
    lines = proc.stdout.splitlines()
    assert lines[23][29] == "@"
    assert lines[0] == "#" * 80
    assert lines[22][25] == "."


def test_headless_without_keys_ends_on_close():
    proc = run_cli()
    assert proc.returncode == 0, proc.stderr
    assert "Player at (25, 23) after 0 turns" in proc.stdout


def test_bad_config_exits_with_error(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("map:\n  width: 500\n", encoding="utf-8")
    proc = run_cli("--config", str(cfg))
    assert proc.returncode == 1
    assert "Invalid settings" in proc.stderr


def test_player_spawned_on_wall_is_fatal(tmp_path):
    cfg = tmp_path / "wall.yaml"
    cfg.write_text("spawns:\n  - {name: hero, x: 0, y: 0, role: player}\n", encoding="utf-8")
    proc = run_cli("--config", str(cfg), "--keys", "ESCAPE")
    assert proc.returncode == 1
    assert "Fatal:" in proc.stderr
    assert "blocked tile" in proc.stderr
    assert "Player at" not in proc.stdout


def test_layout_outside_map_is_fatal(tmp_path):
    cfg = tmp_path / "layout.yaml"
    cfg.write_text("map:\n  layout:\n    - room: [70, 40, 20, 20]\n", encoding="utf-8")
    proc = run_cli("--config", str(cfg))
    assert proc.returncode == 1
    assert "Fatal:" in proc.stderr
    assert "Traceback" not in proc.stderr


def test_non_integer_spawn_position_is_rejected(tmp_path):
    cfg = tmp_path / "spawn.yaml"
    cfg.write_text('spawns:\n  - {name: hero, x: "3", y: 3, role: player}\n', encoding="utf-8")
    proc = run_cli("--config", str(cfg))
    assert proc.returncode == 1
    assert "Invalid settings" in proc.stderr
    assert "Traceback" not in proc.stderr
