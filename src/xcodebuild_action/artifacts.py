"""
构建产物的存储后端。

上传接口只约定 `upload(name, files, root_dir)`；默认实现把文件复制到本地目录，
便于在 runner 上由后续步骤收集，也便于测试替换。
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Sequence
from typing import Protocol

from .errors import UploadFailure


class ArtifactStore(Protocol):
    def upload(self, name: str, files: Sequence[str], root_dir: str) -> list[str]:
        ...


def default_artifacts_dir() -> str:
    """按 `$XCODEBUILD_ACTION_ARTIFACTS_DIR`、`$RUNNER_TEMP/artifacts`、`./artifacts` 顺序选择目录。"""
    explicit = os.environ.get("XCODEBUILD_ACTION_ARTIFACTS_DIR", "")
    if explicit:
        return os.path.abspath(explicit)
    runner_temp = os.environ.get("RUNNER_TEMP", "")
    if runner_temp:
        return os.path.join(runner_temp, "artifacts")
    return os.path.abspath("artifacts")


class DirectoryArtifactStore:
    """把每个文件按相对 `root_dir` 的路径复制到 `<root>/<name>/` 下。"""

    def __init__(self, root: str | None = None) -> None:
        self.root = root or default_artifacts_dir()

    def upload(self, name: str, files: Sequence[str], root_dir: str) -> list[str]:
        if not name or os.sep in name or name in (".", ".."):
            raise UploadFailure(f"Invalid artifact name: {name!r}")
        dest_root = os.path.join(self.root, name)
        uploaded: list[str] = []
        try:
            for src in files:
                rel = os.path.relpath(src, root_dir)
                if rel.startswith(os.pardir):
                    raise UploadFailure(f"Artifact file {src} is outside {root_dir}")
                dest = os.path.join(dest_root, rel)
                os.makedirs(os.path.dirname(dest), exist_ok=True)
                shutil.copyfile(src, dest)
                uploaded.append(dest)
        except OSError as e:
            raise UploadFailure(f"Failed to upload artifact {name}: {e}") from e
        return uploaded
