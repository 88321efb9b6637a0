import json
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


# Helper to run CLI
def run_cli(args):
    cmd = [sys.executable, "-m", "menukeys.cli"] + args
    env = os.environ.copy()
    env["PYTHONPATH"] = str(ROOT)
    for name in ("MENUKEYS_CONFIG_PATH", "MENUKEYS_BACKEND", "MENUKEYS_SOLVER"):
        env.pop(name, None)
    return subprocess.run(cmd, env=env, cwd=ROOT, capture_output=True, text=True)


def test_cli_default_menu():
    res = run_cli([])
    assert res.returncode == 0, res.stderr
    lines = res.stdout.strip().splitlines()
    assert lines[0] == "---- Result: option [mnemonic] ----"
    pairs = [line.split(" ") for line in lines[1:]]
    assert [p[0] for p in pairs] == ["undo", "copy", "mod"]
    chosen = [p[1] for p in pairs]
    assert len(set(chosen)) == 3
    for label, char in pairs:
        assert char in label


def test_cli_json_and_emit(tmp_path):
    out = tmp_path / "menu.cnf"
    res = run_cli(["cut", "copy", "cost", "--json", "--emit", str(out)])
    assert res.returncode == 0, res.stderr
    data = json.loads(res.stdout)
    assert data["status"] == "SAT"
    assert [m["label"] for m in data["mnemonics"]] == ["cut", "copy", "cost"]
    assert out.read_text().startswith("c ")


def test_cli_unsatisfiable():
    res = run_cli(["a", "a", "--backend", "z3"])
    assert res.returncode == 1
    assert "No mnemonic assignment exists." in res.stdout


def test_cli_empty_label():
    res = run_cli(["open", ""])
    assert res.returncode == 2
    assert "Error:" in res.stdout


def test_cli_unknown_engine():
    res = run_cli(["undo", "--solver", "nosuchsolver"])
    assert res.returncode == 2
    assert "Error: Unknown PySAT solver 'nosuchsolver'" in res.stdout
