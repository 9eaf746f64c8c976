from __future__ import annotations

import os
from typing import Iterator, NamedTuple

from dirsnapshot.ports.filesystem.filesystem_port import FileSystemPort

"""Pre-order directory walking over a FileSystemPort.

The walk is self-first: a directory is yielded before anything below it.
Only real directories are descended into; symlinked directories are yielded
but not followed.
"""


class WalkItem(NamedTuple):
    sub_path: str
    path: str
    name: str
    is_dir: bool


def join(parent: str, name: str, sep: str = os.sep) -> str:
    if not parent:
        return name
    if parent.endswith(sep):
        return parent + name
    return parent + sep + name


def iter_pre_order(
    filesystem: FileSystemPort, root: str, sep: str = os.sep
) -> Iterator[WalkItem]:
    """Yield every entry under ``root`` in listing order, parents first."""
    yield from _walk(filesystem, root, "", sep)


def _walk(
    filesystem: FileSystemPort, directory: str, prefix: str, sep: str
) -> Iterator[WalkItem]:
    for name in filesystem.list_dir(directory):
        path = join(directory, name, sep)
        sub_path = join(prefix, name, sep)
        is_dir = filesystem.is_dir(path)
        yield WalkItem(sub_path, path, name, is_dir)
        if is_dir and not filesystem.is_link(path):
            yield from _walk(filesystem, path, sub_path, sep)
