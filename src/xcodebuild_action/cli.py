"""
`xcodebuild-action` 的命令行入口模块。

参数来源分两层：GitHub Actions 输入（`INPUT_*` 环境变量）为底，命令行参数覆盖其上。
解析完成后组装 `xcodebuild` 参数、执行构建，并按需归档上传 result bundle。
"""

import argparse
from collections.abc import Sequence
from typing import Any

from . import workflow
from .artifacts import ArtifactStore, DirectoryArtifactStore
from .errors import XcodebuildActionError
from .inputs import parse_configuration, parse_yes_no
from .options import build_xcodebuild_args
from .result_bundle import capture_result_bundle
from .xcodebuild import run_xcodebuild


def _yes_no_arg(name: str):
    """构造 argparse 的 `YES`/`NO` 类型转换函数。"""

    def _convert(value: str) -> bool:
        try:
            return parse_yes_no(name, value)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e

    return _convert


def build_parser() -> argparse.ArgumentParser:
    """构建并返回 `xcodebuild-action` 命令行参数解析器。"""
    p = argparse.ArgumentParser(
        prog="xcodebuild-action",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "Build an Xcode workspace or project with xcodebuild.\n"
            "Every option falls back to the matching GitHub Actions input (INPUT_* env vars)."
        ),
    )

    # 所有默认值为 None：None 表示“未在命令行提供”，回退到环境输入。
    target = p.add_mutually_exclusive_group()
    target.add_argument("--workspace", default=None, help="Workspace (.xcworkspace) to build")
    target.add_argument("--project", default=None, help="Project (.xcodeproj) to build")
    p.add_argument("--scheme", default=None, help="Scheme to build")
    p.add_argument("--configuration", default=None, help="Build configuration (e.g. Debug, Release)")
    p.add_argument("--sdk", default=None, help="SDK name or path (e.g. iphonesimulator)")
    p.add_argument("--arch", default=None, help="Architecture to build (e.g. arm64)")
    p.add_argument(
        "--destination",
        default=None,
        metavar="FIELD=VALUE[,FIELD=VALUE...]",
        help="Destination descriptor (e.g. platform=iOS Simulator,name=iPhone 14,OS=16.0)",
    )
    p.add_argument(
        "--clean",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Run `clean` before `build`",
    )
    p.add_argument(
        "--disable-code-signing",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Disable code signing (overrides all CODE_SIGN* options)",
    )
    p.add_argument("--code-sign-identity", default=None, help="CODE_SIGN_IDENTITY build setting")
    p.add_argument(
        "--code-signing-required",
        type=_yes_no_arg("CODE_SIGNING_REQUIRED"),
        default=None,
        metavar="YES|NO",
        help="CODE_SIGNING_REQUIRED build setting",
    )
    p.add_argument(
        "--code-sign-entitlements",
        default=None,
        help="CODE_SIGN_ENTITLEMENTS build setting",
    )
    p.add_argument(
        "--code-signing-allowed",
        type=_yes_no_arg("CODE_SIGNING_ALLOWED"),
        default=None,
        metavar="YES|NO",
        help="CODE_SIGNING_ALLOWED build setting",
    )
    p.add_argument("--development-team", default=None, help="DEVELOPMENT_TEAM build setting")
    p.add_argument("--result-bundle-path", default=None, help="Path for the .xcresult bundle")
    p.add_argument(
        "--result-bundle-name",
        default=None,
        help="Artifact name for the archived result bundle (default: bundle file name)",
    )

    p.add_argument("--xcodebuild", default="xcodebuild", help="xcodebuild executable")
    p.add_argument(
        "--artifacts-dir",
        default="",
        help="Directory to store uploaded artifacts "
        "(default: $XCODEBUILD_ACTION_ARTIFACTS_DIR, $RUNNER_TEMP/artifacts or ./artifacts)",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the xcodebuild command without running it",
    )
    return p


def _overrides(ns: argparse.Namespace) -> dict[str, Any]:
    """把命令行参数整理为 `parse_configuration` 的覆盖项。"""
    return {
        "workspace": ns.workspace,
        "project": ns.project,
        "scheme": ns.scheme,
        "configuration": ns.configuration,
        "sdk": ns.sdk,
        "arch": ns.arch,
        "destination": ns.destination,
        "clean": ns.clean,
        "disable_code_signing": ns.disable_code_signing,
        "code_sign_identity": ns.code_sign_identity,
        "code_signing_required": ns.code_signing_required,
        "code_sign_entitlements": ns.code_sign_entitlements,
        "code_signing_allowed": ns.code_signing_allowed,
        "development_team": ns.development_team,
        "result_bundle_path": ns.result_bundle_path,
        "result_bundle_name": ns.result_bundle_name,
    }


def run(ns: argparse.Namespace, *, store: ArtifactStore | None = None) -> int:
    """执行完整流程；失败时抛出 `XcodebuildActionError`。"""
    workflow.log_step("Resolving build configuration")
    config = parse_configuration(_overrides(ns))

    args = build_xcodebuild_args(config)
    run_xcodebuild(args, executable=ns.xcodebuild, dry_run=bool(ns.dry_run))

    if config.result_bundle_path is None:
        return 0
    if ns.dry_run:
        workflow.log_step("Dry-run mode enabled (result bundle not captured)")
        return 0

    if store is None:
        store = DirectoryArtifactStore(ns.artifacts_dir or None)
    bundle_path = capture_result_bundle(
        config.result_bundle_path,
        config.result_bundle_name,
        store=store,
    )
    if bundle_path is not None:
        workflow.set_output("result-bundle-path", bundle_path)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 入口：解析参数并运行构建，已知错误统一转换为失败状态。"""
    parser = build_parser()
    ns = parser.parse_args(argv)
    try:
        return run(ns)
    except (XcodebuildActionError, OSError) as e:
        workflow.set_failed(f"Build failed with an unexpected error: {e}")
        return 1
