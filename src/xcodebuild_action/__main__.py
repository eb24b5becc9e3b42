"""
支持 `python -m xcodebuild_action`。

与控制台脚本 `xcodebuild-action` 共用 `cli.main`；不带参数运行时完全依赖 `INPUT_*` 输入。
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
