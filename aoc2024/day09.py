"""Disk Fragmenter: compacting a disk map and computing its checksum."""

import copy
from dataclasses import dataclass, field

_DIGITS = frozenset("0123456789")


@dataclass
class MovedFile:
    """Blocks of a file that were moved into another part's free space."""

    id: int
    number: int


@dataclass
class DiskPart:
    """One file of the disk map and the free space following it.

    Blocks that leave the file are counted in file_free_space_blocks, before
    the remaining file blocks; moved-in blocks sit before the trailing free space.
    """

    file_blocks: int
    free_space_blocks: int
    file_free_space_blocks: int = 0
    moved_here: list[MovedFile] = field(default_factory=list)


def parse_disk(text: str) -> list[DiskPart]:
    """Parse the dense disk map of alternating file and free space lengths."""
    digits = "".join(text.splitlines()) + "0"
    if not set(digits) <= _DIGITS:
        raise ValueError("the disk map must hold digits only")
    if len(digits) % 2:
        raise ValueError("the disk map must end with a file length")
    return [DiskPart(int(size), int(free)) for size, free in zip(digits[::2], digits[1::2])]


def compute_checksum(parts: list[DiskPart]) -> int:
    """Sum position times file id over every occupied block."""
    position = 0
    checksum = 0

    def occupy(file_id: int, count: int) -> None:
        nonlocal position, checksum
        checksum += file_id * sum(range(position, position + count))
        position += count

    for file_id, part in enumerate(parts):
        position += part.file_free_space_blocks
        occupy(file_id, part.file_blocks)
        for moved in part.moved_here:
            occupy(moved.id, moved.number)
        position += part.free_space_blocks
    return checksum


def compact_blocks(parts: list[DiskPart]) -> list[DiskPart]:
    """Move blocks one by one from the end into the leftmost free space."""
    files = copy.deepcopy(parts)
    candidate = 0
    to_move = len(files) - 1
    while candidate < to_move:
        target, source = files[candidate], files[to_move]
        if target.free_space_blocks >= source.file_blocks:
            count = source.file_blocks
            target.free_space_blocks -= count
            target.moved_here.append(MovedFile(to_move, count))
            source.file_blocks = 0
            to_move -= 1
            if target.free_space_blocks == 0:
                candidate += 1
        else:
            count = target.free_space_blocks
            target.free_space_blocks = 0
            target.moved_here.append(MovedFile(to_move, count))
            source.file_blocks -= count
            candidate += 1
    return files


def compact_files(parts: list[DiskPart]) -> list[DiskPart]:
    """Move whole files, highest id first, into the leftmost span that fits."""
    files = copy.deepcopy(parts)
    for to_move in range(len(files) - 1, 0, -1):
        source = files[to_move]
        if source.file_blocks == 0:
            continue
        for target in files[:to_move]:
            if target.free_space_blocks >= source.file_blocks:
                count = source.file_blocks
                target.moved_here.append(MovedFile(to_move, count))
                target.free_space_blocks -= count
                source.file_free_space_blocks += count
                source.file_blocks = 0
                break
    return files


def part1(text: str) -> int:
    return compute_checksum(compact_blocks(parse_disk(text)))


def part2(text: str) -> int:
    return compute_checksum(compact_files(parse_disk(text)))