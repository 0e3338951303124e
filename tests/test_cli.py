## shortopts — CLI integration tests

import os, sys
import subprocess
from pathlib import Path


def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def run_cli(signature: str, *cli_args: str, env: dict | None = None, extra_args: list[str] | None = None) -> subprocess.CompletedProcess:
    args = [sys.executable, "-m", "shortopts", "--plain"]
    if extra_args:
        args.extend(extra_args)
    args.append(signature)
    args.extend(cli_args)
    merged_env = os.environ.copy()
    merged_env.pop("POSIXLY_CORRECT", None)
    merged_env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(repo_root() / "src"), merged_env.get("PYTHONPATH")]))
    if env:
        merged_env.update(env)
    return subprocess.run(args, capture_output=True, text=True, env=merged_env)


def test_cli_prints_shell_assignments():
    result = run_cli("v=verbose t:int=ttl i:str=input", "--", "-v", "-t", "5", "-i", "data file.txt", "pos")
    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == [
        "verbose=1", "has_verbose=1",
        "ttl=5", "has_ttl=1",
        "input='data file.txt'", "has_input=1",
        "set -- pos",
    ]


def test_cli_absent_options_print_defaults():
    result = run_cli("v=verbose t:int=ttl i:str=input")
    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == [
        "verbose=0", "has_verbose=0",
        "ttl=0", "has_ttl=0",
        "input=''", "has_input=0",
        "set --",
    ]


def test_cli_unknown_option_fails_with_diagnostic():
    result = run_cli("v=verbose", "--", "-x")
    assert result.returncode == 1
    assert result.stdout == ""
    assert "UNKNOWN OPTION." in result.stderr
    assert "option -x not recognized" in result.stderr
    assert "\033[" not in result.stderr


def test_cli_missing_value_fails():
    result = run_cli("t:int=ttl", "--", "-t")
    assert result.returncode == 1
    assert "MISSING VALUE." in result.stderr
    assert "OptMissingValueError" in result.stderr


def test_cli_bad_signature_fails():
    result = run_cli("v t:float")
    assert result.returncode == 1
    assert "CONFIGURATION ERROR." in result.stderr
    assert "float" in result.stderr


def test_cli_duplicate_letter_fails():
    result = run_cli("v v=again")
    assert result.returncode == 1
    assert "DUPLICATE OPTION." in result.stderr


def test_cli_shows_optstring():
    result = run_cli("v t:int i:str", extra_args=["--optstring"])
    assert result.returncode == 0
    assert result.stdout.strip() == "i:t:v"


def test_cli_prefix_and_posix_mode():
    result = run_cli("v=verbose", "--", "a", "-v", extra_args=["--posix", "--prefix", "OPT_"])
    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == ["OPT_verbose=0", "OPT_has_verbose=0", "set -- a -v"]


def test_cli_permutes_by_default():
    result = run_cli("v=verbose", "a", "-v")
    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == ["verbose=1", "has_verbose=1", "set -- a"]


def test_cli_posixly_correct_environment():
    result = run_cli("v=verbose", "a", "-v", env={"POSIXLY_CORRECT": "1"})
    assert result.stdout.splitlines()[-1] == "set -- a -v"


def test_cli_verbose_logs_to_stderr():
    result = run_cli("v", "-v", extra_args=["-vv"])
    assert result.returncode == 0
    assert "DEBUG shortopts.registry" in result.stderr
    assert result.stdout.splitlines()[0] == "v=1"


def test_cli_presence_names_cannot_collide():
    result = run_cli("a=has_b b", "--", "-a")
    assert result.returncode == 1
    assert result.stdout == ""
    assert "CONFIGURATION ERROR." in result.stderr


def test_cli_rejects_non_identifier_prefix():
    result = run_cli("v=verbose", "-v", extra_args=["--prefix", "x;rm -rf /;"])
    assert result.returncode == 2
    assert result.stdout == ""
    assert "--prefix" in result.stderr
