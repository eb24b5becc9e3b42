"""
输入解析与参数构建之间共享的轻量类型定义。
"""

from dataclasses import dataclass

from .destination import Destination


@dataclass(frozen=True)
class BuildConfiguration:
    """一次构建请求的完整参数；可选字段未提供时为 `None`，不使用空字符串占位。"""

    # 工程标识：`workspace` 与 `project` 由调用方保证二选一。
    workspace: str | None = None
    project: str | None = None
    scheme: str | None = None
    configuration: str | None = None

    # 目标平台。
    sdk: str | None = None
    arch: str | None = None
    destination: Destination | None = None

    # 签名策略：`disable_code_signing` 为真时其余覆盖项全部忽略。
    disable_code_signing: bool | None = None
    code_sign_identity: str | None = None
    code_signing_required: bool | None = None
    code_sign_entitlements: str | None = None
    code_signing_allowed: bool | None = None
    development_team: str | None = None

    clean: bool | None = None

    # 产物：`.xcresult` 路径与上传名称。
    result_bundle_path: str | None = None
    result_bundle_name: str | None = None
