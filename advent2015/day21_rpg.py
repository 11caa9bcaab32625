"""Choose shop equipment to win, or lose, a fight against the boss."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from itertools import combinations
from pathlib import Path

PLAYER_HIT_POINTS = 100

_CATEGORY_RE = re.compile(r"^([A-Za-z ]+):")
_STATS_RE = re.compile(r"^([A-Za-z0-9/+ ]+)\s+(\d+)\s+(\d+)\s+(\d+)")


class Item(Enum):
    WEAPON = "Weapons"
    ARMOUR = "Armor"
    RING = "Rings"


@dataclass(frozen=True)
class ShopItem:
    name: str
    cost: int
    damage: int
    armour: int
    stype: Item


@dataclass(frozen=True)
class Stats:
    hit_points: int
    damage: int
    armour: int


def _is_header(line: str) -> bool:
    return all(word in line for word in ("Cost", "Damage", "Armor"))


def read_shop_data(file_path: str | Path) -> dict[Item, list[ShopItem]]:
    """Read the shop's items grouped by category."""
    shop: dict[Item, list[ShopItem]] = {category: [] for category in Item}
    active: Item | None = None

    with open(file_path) as handle:
        for line in handle:
            if _is_header(line):
                caps = _CATEGORY_RE.match(line)
                if caps is None:
                    continue
                try:
                    active = Item(caps[1])
                except ValueError:
                    raise ValueError(f"Unknown shop category: {caps[1]!r}") from None
                continue

            caps = _STATS_RE.match(line)
            if caps is None:
                continue
            if active is None:
                raise ValueError(f"Shop item outside any category: {line.strip()!r}")
            shop[active].append(
                ShopItem(
                    name=caps[1].strip(),
                    cost=int(caps[2]),
                    damage=int(caps[3]),
                    armour=int(caps[4]),
                    stype=active,
                )
            )
    return shop


def calc_equip_cost(equip: Iterable[ShopItem]) -> int:
    """Total gold spent on a set of equipment."""
    return sum(item.cost for item in equip)


def calc_player_stats(equip: Iterable[ShopItem]) -> Stats:
    """Player statistics when wearing the given equipment."""
    items = list(equip)
    return Stats(
        hit_points=PLAYER_HIT_POINTS,
        damage=sum(item.damage for item in items),
        armour=sum(item.armour for item in items),
    )


def does_player_win(player: Stats, boss: Stats) -> bool:
    """Whether the player, attacking first, defeats the boss."""
    player_health = player.hit_points
    boss_health = boss.hit_points
    player_hit = max(1, player.damage - boss.armour)
    boss_hit = max(1, boss.damage - player.armour)

    while True:
        boss_health -= player_hit
        if boss_health <= 0:
            return True
        player_health -= boss_hit
        if player_health <= 0:
            return False


def _loadouts(store: Mapping[Item, list[ShopItem]]) -> Iterator[list[ShopItem]]:
    """One weapon, at most one armour and at most two rings."""
    for weapon in store[Item.WEAPON]:
        for num_armour in range(2):
            for armour in combinations(store[Item.ARMOUR], num_armour):
                for num_rings in range(3):
                    for rings in combinations(store[Item.RING], num_rings):
                        yield [weapon, *armour, *rings]


def _outcomes(store: Mapping[Item, list[ShopItem]], boss: Stats) -> Iterator[tuple[bool, int]]:
    for equip in _loadouts(store):
        yield does_player_win(calc_player_stats(equip), boss), calc_equip_cost(equip)


def find_cheapest_win(store: Mapping[Item, list[ShopItem]], boss: Stats) -> int:
    """Least gold that buys equipment able to beat the boss."""
    costs = [cost for won, cost in _outcomes(store, boss) if won]
    if not costs:
        raise LookupError("No equipment can beat the boss")
    return min(costs)


def find_costliest_loss(store: Mapping[Item, list[ShopItem]], boss: Stats) -> int:
    """Most gold that can be spent on equipment and still lose; 0 if every set wins."""
    return max((cost for won, cost in _outcomes(store, boss) if not won), default=0)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Equip the player to fight the boss.")
    parser.add_argument("shop", nargs="?", default="./data/shop.txt")
    parser.add_argument("--boss-hp", type=int, default=100)
    parser.add_argument("--boss-damage", type=int, default=8)
    parser.add_argument("--boss-armour", type=int, default=2)
    args = parser.parse_args(argv)

    merchant = read_shop_data(args.shop)
    boss = Stats(hit_points=args.boss_hp, damage=args.boss_damage, armour=args.boss_armour)
    print(f"Part 1 = {find_cheapest_win(merchant, boss)}")
    print(f"Part 2 = {find_costliest_loss(merchant, boss)}")


if __name__ == "__main__":
    main()