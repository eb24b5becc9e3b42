"""
对 `xcodebuild` 的轻量封装：执行命令并按约定判定退出码。

stdout/stderr 直接继承父进程，原样透传，不做解析。
"""

from __future__ import annotations

import os
import shlex
import subprocess
from collections.abc import Sequence

from . import workflow
from .errors import UnexpectedExitCode, XcodebuildLaunchFailure, XcodebuildNotFound

# 65：构建成功但存在失败的测试，这一层视为成功。
SUCCESS_EXIT_CODES = (0, 65)

UNBUFFERED_ENV = {"NSUnbufferedIO": "YES"}


def classify_exit_code(code: int) -> None:
    """0 与 65 视为成功，其余退出码抛出 `UnexpectedExitCode`。"""
    if code not in SUCCESS_EXIT_CODES:
        raise UnexpectedExitCode(code)


def _env() -> dict[str, str]:
    env = dict(os.environ)
    env.update(UNBUFFERED_ENV)
    return env


def run_xcodebuild(
    args: Sequence[str],
    *,
    executable: str = "xcodebuild",
    dry_run: bool = False,
) -> int:
    """执行一次 `xcodebuild`，返回（已判定为成功的）退出码。"""
    cmd = [executable, *args]
    workflow.log_step(f"Executing: {shlex.join(cmd)}")
    if dry_run:
        workflow.log_step("Dry-run mode enabled (xcodebuild not executed)")
        return 0

    try:
        p = subprocess.run(cmd, env=_env(), check=False)
    except FileNotFoundError as e:
        raise XcodebuildNotFound(f"{executable} not found: {e}") from e
    except OSError as e:
        raise XcodebuildLaunchFailure(f"Failed to launch {executable}: {e}") from e

    classify_exit_code(p.returncode)
    if p.returncode == 65:
        workflow.warning("xcodebuild exited with code 65 (one or more tests failed)")
    return p.returncode
