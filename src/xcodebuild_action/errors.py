"""
构建流程的异常类型。

所有异常都向上抛到命令行入口，由入口统一转换为失败状态；内部不做重试。
"""

from __future__ import annotations


class XcodebuildActionError(RuntimeError):
    """所有可预期失败的基类。"""


class InvalidInput(XcodebuildActionError, ValueError):
    """输入值无法按声明的类型解析。"""


class MalformedDestination(XcodebuildActionError, ValueError):
    """`destination` 字符串不符合 `key=value,key=value` 语法。"""

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"Malformed destination {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


class UnexpectedExitCode(XcodebuildActionError):
    """`xcodebuild` 以 0/65 之外的退出码结束。"""

    def __init__(self, code: int) -> None:
        super().__init__(f"xcodebuild failed with unexpected exit code {code}")
        self.code = code


class XcodebuildNotFound(XcodebuildActionError):
    """找不到 `xcodebuild` 可执行文件。"""


class MissingResultBundle(XcodebuildActionError):
    """构建成功后请求的 result bundle 路径不存在。"""

    def __init__(self, path: str) -> None:
        super().__init__(f"Could not find result bundle at {path}")
        self.path = path


class ArchiveFailure(XcodebuildActionError):
    """压缩 result bundle 失败（非致命，仅记录）。"""


class UploadFailure(XcodebuildActionError):
    """上传 result bundle 归档失败。"""


class XcodebuildLaunchFailure(XcodebuildActionError):
    """`xcodebuild` 存在但无法启动（权限不足等）。"""


class OutputFailure(XcodebuildActionError):
    """写入 step 输出（`$GITHUB_OUTPUT`）失败。"""
