"""Run programs on a two-register computer."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

_SIGNED_RE = re.compile(r"([-+])(\d+)")
_REGISTERS = frozenset({"a", "b"})


class Op(Enum):
    HALF = "hlf"
    TRIPLE = "tpl"
    INCREMENT = "inc"
    JUMP = "jmp"
    JUMP_IF_EVEN = "jie"
    JUMP_IF_ONE = "jio"


def _parse_signed_num(raw: str) -> int:
    """Parse an offset written with an explicit '+' or '-' sign."""
    match = _SIGNED_RE.search(raw)
    if match is None:
        raise ValueError(f"Malformed offset: {raw!r}")
    sign, digits = match.groups()
    value = int(digits)
    return -value if sign == "-" else value


@dataclass(frozen=True)
class Comm:
    """One instruction: an operation with its register and/or jump offset."""

    op: Op
    register: str | None = None
    offset: int | None = None

    @classmethod
    def parse(cls, raw_instruction: str) -> Comm:
        """Parse an instruction such as ``inc a``, ``jmp -7`` or ``jio a, +2``."""
        parts = raw_instruction.split()
        if len(parts) < 2:
            raise ValueError(f"Malformed instruction: {raw_instruction.strip()!r}")
        try:
            op = Op(parts[0])
        except ValueError:
            raise ValueError(f"Command {parts[0]!r} not found") from None

        if op is Op.JUMP:
            return cls(op, offset=_parse_signed_num(parts[1]))

        register = parts[1][0]
        if register not in _REGISTERS:
            raise ValueError(f"Unknown register: {register!r}")
        if op in (Op.JUMP_IF_EVEN, Op.JUMP_IF_ONE):
            if len(parts) < 3:
                raise ValueError(f"Missing offset: {raw_instruction.strip()!r}")
            return cls(op, register=register, offset=_parse_signed_num(parts[2]))
        return cls(op, register=register)


@dataclass
class Computer:
    reg_a: int = 0
    reg_b: int = 0
    ptr: int = 0
    comms: list[Comm] = field(default_factory=list)

    def _get(self, register: str | None) -> int:
        return self.reg_a if register == "a" else self.reg_b

    def _set(self, register: str | None, value: int) -> None:
        if register == "a":
            self.reg_a = value
        else:
            self.reg_b = value

    def execute_comms(self) -> None:
        """Run instructions until the pointer leaves the program."""
        while 0 <= self.ptr < len(self.comms):
            comm = self.comms[self.ptr]
            step = 1
            match comm.op:
                case Op.HALF:
                    self._set(comm.register, self._get(comm.register) // 2)
                case Op.TRIPLE:
                    self._set(comm.register, self._get(comm.register) * 3)
                case Op.INCREMENT:
                    self._set(comm.register, self._get(comm.register) + 1)
                case Op.JUMP:
                    step = comm.offset
                case Op.JUMP_IF_EVEN:
                    if self._get(comm.register) % 2 == 0:
                        step = comm.offset
                case Op.JUMP_IF_ONE:
                    if self._get(comm.register) == 1:
                        step = comm.offset
            self.ptr += step

    def read_comms(self, file_path: str | Path) -> None:
        """Load the program from a file, one instruction per line."""
        with open(file_path) as handle:
            self.comms = [Comm.parse(line) for line in handle if line.strip()]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the Turing lock program.")
    parser.add_argument("input", nargs="?", default="./data/input.txt")
    args = parser.parse_args(argv)

    for part, start_a in ((1, 0), (2, 1)):
        computer = Computer(start_a, 0)
        computer.read_comms(args.input)
        computer.execute_comms()
        print(f"Part {part} = {computer.reg_b}")


if __name__ == "__main__":
    main()