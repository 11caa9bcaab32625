"""Simulate wizard battles and find the cheapest way to beat the boss."""

from __future__ import annotations

import argparse
import heapq
import itertools
from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

MAX_SPELLS = 100
WIZARD_HEALTH = 50
WIZARD_MANA = 500

_SHIELD_ARMOUR = 7
_POISON_DAMAGE = 3
_RECHARGE_MANA = 101


class BattleStatus(Enum):
    BOSS_WIN = "boss_win"
    WIZARD_WIN = "wizard_win"
    UNDECIDED = "undecided"


class Spell(Enum):
    """Spells the wizard can cast; each value is the spell's mana cost."""

    MISSILE = 53
    DRAIN = 73
    SHIELD = 113
    POISON = 173
    RECHARGE = 229

    @property
    def cost(self) -> int:
        return self.value


@dataclass
class WizardBattle:
    wiz_health: int
    wiz_mana: int
    bos_health: int
    bos_damage: int
    shield_turns: int = 0
    poison_turns: int = 0
    recharge_turns: int = 0
    spent_mana: int = 0

    def _pay(self, spell: Spell) -> bool:
        """Deduct the spell's cost; return True when the wizard could not afford it."""
        run_out = spell.cost > self.wiz_mana
        self.wiz_mana -= spell.cost
        self.spent_mana += spell.cost
        return run_out

    def _outcome(self, mana_run_out: bool = False) -> BattleStatus:
        if mana_run_out or self.wiz_health == 0:
            return BattleStatus.BOSS_WIN
        if self.bos_health == 0:
            return BattleStatus.WIZARD_WIN
        return BattleStatus.UNDECIDED

    def _hit_boss(self, damage: int) -> None:
        self.bos_health = max(0, self.bos_health - damage)

    def boss_attacks(self) -> BattleStatus:
        """The boss strikes the wizard for at least one point of damage."""
        damage = self.bos_damage
        if self.shield_turns > 0:
            damage = max(0, damage - _SHIELD_ARMOUR)
        self.wiz_health = max(0, self.wiz_health - max(damage, 1))
        return self._outcome()

    def cast_magic_missile(self) -> BattleStatus:
        run_out = self._pay(Spell.MISSILE)
        self._hit_boss(4)
        return self._outcome(run_out)

    def cast_drain(self) -> BattleStatus:
        run_out = self._pay(Spell.DRAIN)
        self._hit_boss(2)
        self.wiz_health += 2
        return self._outcome(run_out)

    def cast_shield(self) -> BattleStatus:
        run_out = self._pay(Spell.SHIELD)
        self.shield_turns = 6
        return self._outcome(run_out)

    def cast_poison(self) -> BattleStatus:
        run_out = self._pay(Spell.POISON)
        self.poison_turns = 6
        return self._outcome(run_out)

    def cast_recharge(self) -> BattleStatus:
        run_out = self._pay(Spell.RECHARGE)
        self.recharge_turns = 5
        return self._outcome(run_out)

    def cast(self, spell: Spell) -> BattleStatus:
        """Cast the given spell."""
        casters = {
            Spell.MISSILE: self.cast_magic_missile,
            Spell.DRAIN: self.cast_drain,
            Spell.SHIELD: self.cast_shield,
            Spell.POISON: self.cast_poison,
            Spell.RECHARGE: self.cast_recharge,
        }
        return casters[spell]()

    def impl_active_effects(self) -> BattleStatus:
        """Apply every active effect at the start of a turn."""
        if self.shield_turns > 0:
            self.shield_turns -= 1
        if self.poison_turns > 0:
            self.poison_turns -= 1
            self._hit_boss(_POISON_DAMAGE)
        if self.recharge_turns > 0:
            self.recharge_turns -= 1
            self.wiz_mana += _RECHARGE_MANA
        return self._outcome()

    def _key(self) -> tuple[int, ...]:
        return (
            self.wiz_health,
            self.wiz_mana,
            self.bos_health,
            self.shield_turns,
            self.poison_turns,
            self.recharge_turns,
        )


def spells_cost(all_spells: Iterable[Spell]) -> int:
    """Total mana needed to cast every spell given."""
    return sum(spell.cost for spell in all_spells)


def _play_round(battle: WizardBattle, spell: Spell, hrd_mode: bool) -> BattleStatus:
    """Run one player turn casting ``spell`` followed by one boss turn."""
    if hrd_mode:
        battle.wiz_health = max(0, battle.wiz_health - 1)
    steps = (
        battle.impl_active_effects,
        lambda: battle.cast(spell),
        battle.impl_active_effects,
        battle.boss_attacks,
    )
    for step in steps:
        status = step()
        if status is not BattleStatus.UNDECIDED:
            return status
    return BattleStatus.UNDECIDED


def find_lowest_mana_to_win(
    hrd_mode: bool, boss_health: int = 51, boss_damage: int = 9
) -> int:
    """Least mana the wizard can spend and still win, casting at most 100 spells."""
    start = WizardBattle(WIZARD_HEALTH, WIZARD_MANA, boss_health, boss_damage)
    tie = itertools.count()
    queue: list[tuple[int, int, int, WizardBattle]] = [(0, next(tie), 0, start)]
    seen: set[tuple[int, ...]] = set()
    best: int | None = None

    while queue:
        spent, _, rounds, battle = heapq.heappop(queue)
        if best is not None and spent >= best:
            break
        key = battle._key()
        if key in seen:
            continue
        seen.add(key)
        if rounds >= MAX_SPELLS:
            continue

        for spell in Spell:
            trial = replace(battle)
            status = _play_round(trial, spell, hrd_mode)
            if status is BattleStatus.WIZARD_WIN:
                if best is None or trial.spent_mana < best:
                    best = trial.spent_mana
            elif status is BattleStatus.UNDECIDED:
                heapq.heappush(queue, (trial.spent_mana, next(tie), rounds + 1, trial))

    if best is None:
        raise LookupError("The wizard cannot win this battle")
    return best


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the cheapest winning wizard battle.")
    parser.add_argument("--boss-hp", type=int, default=51)
    parser.add_argument("--boss-damage", type=int, default=9)
    args = parser.parse_args(argv)

    print(f"Part 1 = {find_lowest_mana_to_win(False, args.boss_hp, args.boss_damage)}")
    print(f"Part 2 = {find_lowest_mana_to_win(True, args.boss_hp, args.boss_damage)}")


if __name__ == "__main__":
    main()