"""Disk fragmenter: compact a dense disk map and compute its checksum."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_DIGITS = "0123456789"


@dataclass
class _Segment:
    file_id: int | None
    size: int


def _disk_map(lines: Iterable[str]) -> str:
    for line in lines:
        return line
    raise ValueError("no disk map given")


def _segments(disk: str) -> Iterator[_Segment]:
    """Alternate file and free segments, skipping those of length zero."""
    file_id = 0
    for index, char in enumerate(disk):
        if char not in _DIGITS:
            raise ValueError(f"invalid disk map digit {char!r}")
        size = int(char)
        if size == 0:
            continue
        if index % 2 == 0:
            yield _Segment(file_id, size)
            file_id += 1
        else:
            yield _Segment(None, size)


def compact_blocks_checksum(lines: Iterable[str]) -> int:
    """Checksum after moving file blocks one at a time into the leftmost free space."""
    blocks = [
        segment.file_id
        for segment in _segments(_disk_map(lines))
        for _ in range(segment.size)
    ]
    if not blocks:
        raise ValueError("disk holds no blocks")
    used = sum(block is not None for block in blocks)
    from_end = (block for block in reversed(blocks) if block is not None)
    return sum(
        position * (block if block is not None else next(from_end))
        for position, block in enumerate(blocks[:used])
    )


def compact_files_checksum(lines: Iterable[str]) -> int:
    """Checksum after moving whole files, highest first, into the leftmost fitting span."""
    disk = list(_segments(_disk_map(lines)))
    if not disk:
        raise ValueError("disk holds no blocks")

    right = len(disk) - 1
    while right > 0:
        moving = disk[right]
        if moving.file_id is None:
            right -= 1
            continue
        inserted = False
        for left in range(right):
            gap = disk[left]
            if gap.file_id is not None or gap.size < moving.size:
                continue
            if gap.size == moving.size:
                disk[left], disk[right] = moving, gap
            else:
                disk[right] = _Segment(None, moving.size)
                gap.size -= moving.size
                disk.insert(left, _Segment(moving.file_id, moving.size))
                inserted = True
            break
        if not inserted:
            right -= 1

    total = 0
    position = 0
    for segment in disk:
        if segment.file_id is not None:
            total += segment.file_id * sum(range(position, position + segment.size))
        position += segment.size
    return total