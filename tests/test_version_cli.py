import re
import subprocess
import sys


def test_cli_version_matches_package():
    proc = subprocess.run([sys.executable, "-m", "consolog.cli", "--version"], capture_output=True, text=True)
    assert proc.returncode == 0
    out = (proc.stdout + proc.stderr).strip()
    m = re.match(r"consolog\s+(\d+\.\d+\.\d+)", out)
    assert m, f"Unexpected version output: {out}"
    import consolog
    assert m.group(1) == consolog.__version__
