#!/usr/bin/env python3
"""
源码目录直接运行入口（无需 `pip install`）。

在 action 的 composite step 中直接执行 `python3 xcodebuild_action.py` 即可，
参数全部来自 `INPUT_*`；本地调试时也可以传命令行参数覆盖，例如：
  python3 xcodebuild_action.py --scheme App --destination "platform=iOS Simulator,name=iPhone 14"
"""

import os
import sys

_ROOT = os.path.dirname(os.path.abspath(__file__))
_SRC = os.path.join(_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

# 以 `xcodebuild_action` 之名被导入时，把子模块查找指向 `src/xcodebuild_action/`，
# 这样本文件不会遮蔽真正的包。
__path__ = [os.path.join(_SRC, "xcodebuild_action")]


def main(argv: list[str] | None = None) -> int:
    from xcodebuild_action.cli import main as cli_main

    return cli_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
