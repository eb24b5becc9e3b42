"""
把 `BuildConfiguration` 组装为 `xcodebuild` 参数列表。

参数顺序是约定的一部分：
1) 全局选项（`-workspace`/`-project`/`-scheme`/`-configuration`/`-destination`/`-sdk`/`-arch`）
2) 命令（`clean`、`build`）
3) 构建选项（`-resultBundlePath`）
4) build settings（`KEY=VALUE`）

每个值都作为独立参数传递，不做 shell 转义。
"""

from __future__ import annotations

from .destination import encode_destination
from .signing import resolve_code_signing_settings
from .types import BuildConfiguration


def global_options(config: BuildConfiguration) -> list[str]:
    """生成全局选项；未提供的字段不输出。"""
    out: list[str] = []
    # `workspace` 与 `project` 的互斥由调用方保证，这里不做校验。
    if config.workspace is not None:
        out += ["-workspace", config.workspace]
    if config.project is not None:
        out += ["-project", config.project]
    if config.scheme is not None:
        out += ["-scheme", config.scheme]
    if config.configuration is not None:
        out += ["-configuration", config.configuration]
    if config.destination is not None:
        out += ["-destination", encode_destination(config.destination)]
    if config.sdk is not None:
        out += ["-sdk", config.sdk]
    if config.arch is not None:
        out += ["-arch", config.arch]
    return out


def command_verbs(clean: bool | None) -> list[str]:
    """返回命令段：需要清理时为 `clean build`，否则仅 `build`。"""
    command = ["build"]
    if clean is True:
        command = ["clean", *command]
    return command


def build_options(config: BuildConfiguration) -> list[str]:
    out: list[str] = []
    if config.result_bundle_path is not None:
        out += ["-resultBundlePath", config.result_bundle_path]
    return out


def build_settings(config: BuildConfiguration) -> list[str]:
    return resolve_code_signing_settings(
        disable=config.disable_code_signing,
        identity=config.code_sign_identity,
        required=config.code_signing_required,
        entitlements=config.code_sign_entitlements,
        allowed=config.code_signing_allowed,
        development_team=config.development_team,
    )


def build_xcodebuild_args(config: BuildConfiguration) -> list[str]:
    """组装完整参数列表（不含可执行文件名）。"""
    return [
        *global_options(config),
        *command_verbs(config.clean),
        *build_options(config),
        *build_settings(config),
    ]
