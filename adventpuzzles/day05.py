"""Print queue: check page updates against ordering rules."""

from collections.abc import Iterable, Sequence

Rule = tuple[int, int]

_MAX_ROUNDS = 40


class PageOrder:
    """Page ordering rules given as (before, after) pairs."""

    def __init__(self, rules: Iterable[Rule]) -> None:
        self.rules = list(rules)

    def order_for(self, update: Sequence[int]) -> list[int]:
        """Pages of the update's relevant rules in a consistent order."""
        pages = set(update)
        relevant = [r for r in self.rules if r[0] in pages and r[1] in pages]
        remaining = list(relevant)
        order: dict[int, None] = {}
        rounds = 0
        while remaining:
            if rounds == _MAX_ROUNDS:
                raise ValueError(f"ordering rules do not resolve: {remaining}")
            rounds += 1
            afters = {after for _, after in remaining}
            leading = [before for before, _ in remaining if before not in afters]
            leading_set = set(leading)
            remaining = [r for r in remaining if r[0] not in leading_set]
            order.update(dict.fromkeys(leading))
        for _, after in relevant:
            order.setdefault(after, None)
        return list(order)

    def is_ordered(self, update: Sequence[int]) -> bool:
        """True if the update already follows the ordering rules."""
        order = self.order_for(update)
        positions = []
        for page in update:
            if page not in order:
                raise ValueError(f"page {page} is not covered by any rule")
            positions.append(order.index(page))
        return all(a <= b for a, b in zip(positions, positions[1:]))


def parse_input(lines: Iterable[str]) -> tuple[list[Rule], list[list[int]]]:
    """Split the input into ordering rules and page updates."""
    rules: list[Rule] = []
    updates: list[list[int]] = []
    in_rules = True
    for line in lines:
        if not line:
            in_rules = False
            continue
        if in_rules:
            before, after = line.split("|", 1)
            rules.append((int(before), int(after)))
        else:
            updates.append([int(page) for page in line.split(",")])
    return rules, updates


def correct_middle_sum(lines: Iterable[str]) -> int:
    """Sum of middle pages of the correctly ordered updates."""
    rules, updates = parse_input(lines)
    order = PageOrder(rules)
    return sum(u[len(u) // 2] for u in updates if order.is_ordered(u))


def corrected_middle_sum(lines: Iterable[str]) -> int:
    """Sum of middle pages of the wrongly ordered updates once reordered."""
    rules, updates = parse_input(lines)
    order = PageOrder(rules)
    total = 0
    for update in updates:
        if not order.is_ordered(update):
            pages = set(update)
            fixed = [page for page in order.order_for(update) if page in pages]
            total += fixed[len(fixed) // 2]
    return total