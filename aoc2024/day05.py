"""Print Queue: checking and fixing page orderings of updates."""

from collections import defaultdict
from collections.abc import Collection, Iterable, Mapping, Sequence
from functools import cmp_to_key, partial

Orderings = Mapping[int, Collection[int]]


def _parse_number(value: str) -> int | None:
    return int(value) if value.isascii() and value.isdigit() else None


def parse_orderings(text: str) -> dict[int, list[int]]:
    """Map each page to the pages that must come after it (lines like "47|53")."""
    orderings: defaultdict[int, list[int]] = defaultdict(list)
    for line in text.splitlines():
        parts = line.split("|")
        if len(parts) < 2:
            continue
        key, value = _parse_number(parts[0]), _parse_number(parts[1])
        if key is None or value is None:
            continue
        orderings[key].append(value)
    return dict(orderings)


def parse_updates(text: str) -> list[list[int]]:
    """Read the comma separated page lists; lines holding no page are skipped."""
    updates = []
    for line in text.splitlines():
        pages = [page for page in map(_parse_number, line.split(",")) if page is not None]
        if pages:
            updates.append(pages)
    return updates


def are_pages_ordered(pages: Iterable[int], orderings: Orderings) -> bool:
    """Whether no page appears after one that must follow it."""
    seen: set[int] = set()
    for page in pages:
        if any(after in seen for after in orderings.get(page, ())):
            return False
        seen.add(page)
    return True


def _compare_pages(orderings: Orderings, first: int, second: int) -> int:
    """Place ``first`` before ``second`` only when a rule says so."""
    followers = orderings.get(first, ())
    if second in followers:
        return -1
    return 1


def reorder_pages(pages: Iterable[int], orderings: Orderings) -> list[int]:
    """Sort the pages so that every ordering rule is respected."""
    return sorted(pages, key=cmp_to_key(partial(_compare_pages, orderings)))


def _middle(pages: Sequence[int]) -> int:
    return pages[(len(pages) - 1) // 2]


def part1(text: str) -> int:
    orderings = parse_orderings(text)
    return sum(
        _middle(pages) for pages in parse_updates(text) if are_pages_ordered(pages, orderings)
    )


def part2(text: str) -> int:
    orderings = parse_orderings(text)
    lookup = {key: set(values) for key, values in orderings.items()}
    return sum(
        _middle(reorder_pages(pages, lookup))
        for pages in parse_updates(text)
        if not are_pages_ordered(pages, orderings)
    )