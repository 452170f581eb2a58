# streamprobe/common/probe/ffprobe_helpers.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Iterable, List
import json
import shlex
import subprocess

from streamprobe.common.logging import get_logger
from streamprobe.domain.errors import ProbeError, ProbeTimeoutError
logger = get_logger()

def build_ffprobe_cmd(
    input_path: str | Path,
    ffprobe_bin: str = "ffprobe",
    log_level: str = "error",
    extra_args: Iterable[str] | None = None,
) -> List[str]:
    """
    Build an ffprobe command that emits the JSON stream/format document we parse.
    """
    if isinstance(input_path, Path):
        input_path = str(input_path)
    base = [
        ffprobe_bin,
        "-v", log_level,
        "-show_streams",
        "-show_format",
        "-print_format", "json",
        "--",  # Stop option parsing in case of weird filenames
        input_path,
    ]
    if extra_args:
        # Insert before the "--" so they stay options
        base = base[:-2] + list(extra_args) + base[-2:]
    return base

def run_ffprobe(cmd: List[str], timeout_sec: float) -> Dict[str, Any]:
    """
    Execute ffprobe, wait at most `timeout_sec`, and return the parsed JSON.
    Raises ProbeTimeoutError on timeout and ProbeError on any other failure.
    """
    logger.debug("ffprobe cmd: %s", " ".join(shlex.quote(p) for p in cmd))
    try:
        cp = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout_sec,
            check=False,  # we handle rc manually to attach stderr
        )
    except subprocess.TimeoutExpired as e:
        logger.warning("ffprobe timed out after %ss: %s", timeout_sec, cmd[-1])
        raise ProbeTimeoutError(f"ffprobe timed out after {timeout_sec}s", stderr=str(e)) from e
    except OSError as e:
        logger.warning("Failed to execute ffprobe: %s", e)
        raise ProbeError("Failed to execute ffprobe (OS error).", stderr=str(e)) from e

    if cp.returncode != 0:
        logger.warning("ffprobe exited with %s for %s", cp.returncode, cmd[-1])
        raise ProbeError("ffprobe returned non-zero exit code", stderr=cp.stderr, rc=cp.returncode)

    try:
        data = json.loads(cp.stdout or "{}")
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse ffprobe JSON for %s", cmd[-1])
        raise ProbeError("ffprobe produced invalid JSON", stderr=cp.stdout) from e
    if not isinstance(data, dict):
        raise ProbeError("ffprobe JSON root is not an object", stderr=cp.stdout)
    return data
