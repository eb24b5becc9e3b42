"""
代码签名相关 build settings 的生成。

两种互斥策略：
- 禁用签名：固定输出四个抑制签名的设置，忽略所有覆盖项。
- 显式覆盖：仅对提供了的字段输出对应设置，未提供的字段不补默认值。

`DEVELOPMENT_TEAM` 与上述策略无关，提供时总是追加在最后。
"""

from __future__ import annotations

DISABLED_CODE_SIGNING_SETTINGS = (
    'CODE_SIGN_IDENTITY=""',
    'CODE_SIGNING_REQUIRED="NO"',
    'CODE_SIGN_ENTITLEMENTS=""',
    'CODE_SIGNING_ALLOWED="NO"',
)


def _yes_no(value: bool) -> str:
    return "YES" if value else "NO"


def resolve_code_signing_settings(
    *,
    disable: bool | None = None,
    identity: str | None = None,
    required: bool | None = None,
    entitlements: str | None = None,
    allowed: bool | None = None,
    development_team: str | None = None,
) -> list[str]:
    """按固定顺序返回 `KEY=VALUE` 形式的签名设置。"""
    out: list[str] = []
    if disable is True:
        out.extend(DISABLED_CODE_SIGNING_SETTINGS)
    else:
        if identity is not None:
            out.append(f"CODE_SIGN_IDENTITY={identity}")
        if required is not None:
            out.append(f"CODE_SIGNING_REQUIRED={_yes_no(required)}")
        if entitlements is not None:
            out.append(f"CODE_SIGN_ENTITLEMENTS={entitlements}")
        if allowed is not None:
            out.append(f"CODE_SIGNING_ALLOWED={_yes_no(allowed)}")

    if development_team is not None:
        out.append(f"DEVELOPMENT_TEAM={development_team}")
    return out
