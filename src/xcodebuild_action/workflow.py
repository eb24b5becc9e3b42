"""
GitHub Actions 工作流命令与日志输出。

在非 Actions 环境下这些命令只是普通的 stdout 文本，不影响本地使用。
"""

from __future__ import annotations

import os
import uuid

from .errors import OutputFailure

_PREFIX = "[xcodebuild-action]"


def log_step(message: str) -> None:
    """输出简洁的流程阶段提示。"""
    print(f"{_PREFIX} {message}", flush=True)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def error(message: str) -> None:
    """输出 `::error::` 注解。"""
    print(f"::error::{_escape_data(message)}", flush=True)


def warning(message: str) -> None:
    print(f"::warning::{_escape_data(message)}", flush=True)


def set_output(name: str, value: str) -> None:
    """设置 step 输出：优先写入 `$GITHUB_OUTPUT`，否则回退为旧式 `::set-output`。"""
    output_file = os.environ.get("GITHUB_OUTPUT", "")
    if not output_file:
        print(f"::set-output name={name}::{_escape_data(value)}", flush=True)
        return

    if "\n" in value or "\r" in value:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        line = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
    else:
        line = f"{name}={value}\n"
    try:
        with open(output_file, "a", encoding="utf-8") as f:
            f.write(line)
    except OSError as e:
        raise OutputFailure(f"Failed to write output {name} to {output_file}: {e}") from e


def set_failed(message: str) -> None:
    """标记本次运行失败；退出码由调用方返回。"""
    error(message)
