"""
`-destination` 参数的解析与编码。

语法为 `field1=value1,field2=value2,...`：
- 值内不允许出现 `,`，也不支持任何转义。
- 字段顺序有意义，解析与编码都保持输入顺序。
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .errors import MalformedDestination


@dataclass(frozen=True)
class Destination:
    """有序、不可变的 `field -> value` 映射。"""

    fields: tuple[tuple[str, str], ...] = ()

    def __getitem__(self, key: str) -> str:
        for k, v in self.fields:
            if k == key:
                return v
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self.fields)

    def __iter__(self) -> Iterator[str]:
        return (k for k, _ in self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def get(self, key: str, default: str | None = None) -> str | None:
        for k, v in self.fields:
            if k == key:
                return v
        return default

    def keys(self) -> list[str]:
        return [k for k, _ in self.fields]

    def values(self) -> list[str]:
        return [v for _, v in self.fields]

    def items(self) -> list[tuple[str, str]]:
        return list(self.fields)

    def as_dict(self) -> dict[str, str]:
        return dict(self.fields)

    def __str__(self) -> str:
        return encode_destination(self)


def parse_destination(raw: str) -> Destination:
    """把原始 destination 字符串解析为 `Destination`，语法错误时抛出 `MalformedDestination`。"""
    out: list[tuple[str, str]] = []
    seen: set[str] = set()
    for segment in raw.split(","):
        if "=" not in segment:
            raise MalformedDestination(raw, f"expected FIELD=VALUE, got {segment.strip()!r}")
        k, v = segment.split("=", 1)
        k = k.strip()
        if not k:
            raise MalformedDestination(raw, "empty field name")
        if k in seen:
            raise MalformedDestination(raw, f"duplicate field {k!r}")
        seen.add(k)
        out.append((k, v.strip()))
    return Destination(fields=tuple(out))


def encode_destination(destination: Destination) -> str:
    """按存储顺序编码为单个参数值（不增删、不重排字段）。"""
    return ",".join(f"{k}={v}" for k, v in destination.fields)
