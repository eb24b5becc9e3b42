"""
`.xcresult` result bundle 的归档与上传。

归档布局与 `ditto -c -k --keepParent` 一致：zip 内顶层是 bundle 目录本身，
例如 `Tests.xcresult/Info.plist`；单个文件则以文件名作为唯一条目。
"""

from __future__ import annotations

import os
import stat
import zipfile

from . import workflow
from .artifacts import ArtifactStore
from .errors import ArchiveFailure, MissingResultBundle


def _add_symlink(zf: zipfile.ZipFile, path: str, arcname: str) -> None:
    """把符号链接按链接本身写入 zip（不跟随）。"""
    info = zipfile.ZipInfo(arcname)
    info.create_system = 3
    info.external_attr = (stat.S_IFLNK | 0o755) << 16
    zf.writestr(info, os.readlink(path))


def _write_archive(bundle_path: str, archive_path: str) -> None:
    parent = os.path.dirname(bundle_path)
    with zipfile.ZipFile(archive_path, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.write(bundle_path, os.path.relpath(bundle_path, parent))
        for root, dirs, files in os.walk(bundle_path):
            for d in sorted(dirs):
                p = os.path.join(root, d)
                arcname = os.path.relpath(p, parent)
                if os.path.islink(p):
                    _add_symlink(zf, p, arcname)
                else:
                    zf.write(p, arcname)
            for name in sorted(files):
                p = os.path.join(root, name)
                arcname = os.path.relpath(p, parent)
                if os.path.islink(p):
                    _add_symlink(zf, p, arcname)
                else:
                    zf.write(p, arcname)
            dirs.sort()


def archive_result_bundle(result_bundle_path: str) -> str | None:
    """把 result bundle 压缩为 `<path>.zip`；失败时记录错误并返回 `None`。"""
    bundle_path = os.path.abspath(result_bundle_path.rstrip(os.sep) or result_bundle_path)
    archive_path = bundle_path + ".zip"
    try:
        if not os.path.exists(bundle_path):
            raise ArchiveFailure(f"Result bundle not found: {bundle_path}")
        try:
            _write_archive(bundle_path, archive_path)
        except (OSError, ValueError) as e:
            raise ArchiveFailure(f"Failed to archive result bundle {bundle_path}: {e}") from e
    except ArchiveFailure as e:
        workflow.error(str(e))
        if os.path.exists(archive_path):
            try:
                os.remove(archive_path)
            except OSError:
                pass
        return None
    return archive_path


def default_result_bundle_name(result_bundle_path: str) -> str:
    """未指定上传名称时使用 bundle 文件名（去掉扩展名）。"""
    base = os.path.basename(result_bundle_path.rstrip(os.sep))
    stem, _ext = os.path.splitext(base)
    return stem or base


def capture_result_bundle(
    result_bundle_path: str,
    result_bundle_name: str | None,
    *,
    store: ArtifactStore,
) -> str | None:
    """
    归档并上传 result bundle，返回 bundle 的绝对路径。

    - 路径不存在：抛出 `MissingResultBundle`。
    - 归档失败：跳过上传并返回 `None`。
    - 上传失败：`UploadFailure` 直接向上抛出。
    """
    if not os.path.exists(result_bundle_path):
        raise MissingResultBundle(result_bundle_path)

    workflow.log_step(f"Archiving result bundle: {result_bundle_path}")
    archive_path = archive_result_bundle(result_bundle_path)
    if archive_path is None:
        workflow.log_step("Result bundle archive failed; skipping upload")
        return None

    name = result_bundle_name or default_result_bundle_name(result_bundle_path)
    workflow.log_step(f"Uploading result bundle archive as artifact: {name}")
    store.upload(name, [archive_path], os.path.dirname(archive_path))
    return os.path.abspath(result_bundle_path)
