"""
从 GitHub Actions 输入（`INPUT_*` 环境变量）解析构建参数。

空字符串与仅含空白的值一律视为“未提供”，映射为 `None`。
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from .destination import parse_destination
from .errors import InvalidInput
from .types import BuildConfiguration

_TRUE_VALUES = ("true", "True", "TRUE")
_FALSE_VALUES = ("false", "False", "FALSE")


def _env_name(name: str) -> str:
    return "INPUT_" + name.replace(" ", "_").upper()


def get_optional_input(name: str, env: Mapping[str, str] | None = None) -> str | None:
    """读取字符串输入；未设置或为空时返回 `None`。"""
    env = os.environ if env is None else env
    value = env.get(_env_name(name), "").strip()
    return value or None


def get_optional_bool_input(name: str, env: Mapping[str, str] | None = None) -> bool | None:
    """读取 YAML 1.2 core 风格的布尔输入（`true`/`True`/`TRUE` 等）。"""
    value = get_optional_input(name, env)
    if value is None:
        return None
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidInput(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def parse_yes_no(name: str, value: str) -> bool:
    v = value.strip().upper()
    if v == "YES":
        return True
    if v == "NO":
        return False
    raise InvalidInput(f"Input {name} must be YES or NO, got: {value}")


def get_optional_yes_no_input(name: str, env: Mapping[str, str] | None = None) -> bool | None:
    """读取 `YES`/`NO` 输入（不区分大小写）。"""
    value = get_optional_input(name, env)
    if value is None:
        return None
    return parse_yes_no(name, value)


def parse_configuration(
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> BuildConfiguration:
    """
    组装 `BuildConfiguration`。

    `overrides` 中值不为 `None` 的字段优先于环境输入（命令行参数走这里）；
    `destination` 在此解析，语法错误会在构建开始前抛出。
    """
    config = BuildConfiguration(
        workspace=get_optional_input("workspace", env),
        project=get_optional_input("project", env),
        scheme=get_optional_input("scheme", env),
        configuration=get_optional_input("configuration", env),
        sdk=get_optional_input("sdk", env),
        arch=get_optional_input("arch", env),
        clean=get_optional_bool_input("clean", env),
        disable_code_signing=get_optional_bool_input("disable-code-signing", env),
        code_sign_identity=get_optional_input("CODE_SIGN_IDENTITY", env),
        code_signing_required=get_optional_yes_no_input("CODE_SIGNING_REQUIRED", env),
        code_sign_entitlements=get_optional_input("CODE_SIGN_ENTITLEMENTS", env),
        code_signing_allowed=get_optional_yes_no_input("CODE_SIGNING_ALLOWED", env),
        development_team=get_optional_input("development-team", env),
        result_bundle_path=get_optional_input("result-bundle-path", env),
        result_bundle_name=get_optional_input("result-bundle-name", env),
    )

    raw_destination = get_optional_input("destination", env)
    changes: dict[str, Any] = {}
    for key, value in (overrides or {}).items():
        # 与环境输入一致：空白字符串视为未提供。
        if isinstance(value, str):
            value = value.strip() or None
        if value is None:
            continue
        if key == "destination":
            raw_destination = value
            continue
        changes[key] = value

    # 命令行同时给了 workspace/project 之一时，不再沿用环境里的另一个。
    if changes.get("workspace") is not None and "project" not in changes:
        changes["project"] = None
    if changes.get("project") is not None and "workspace" not in changes:
        changes["workspace"] = None

    if raw_destination is not None:
        changes["destination"] = parse_destination(raw_destination)

    return replace(config, **changes)
