"""Queries over a list of pets read from a comma-separated file."""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_AGE = re.compile(r"\s*([+-]?\d+)")

MENU = (
    "---------------------------------------------------------------------\n"
    "1. Посчитать количество различных видов животных у каждого владельца.\n"
    "2. Для конкретного вида животного вывести всех его владельцев и клички\n"
    "3. Определить, сколько видов животных носит определённую кличку.\n"
    "4. Вывести информацию о возрасте самого старого и самого молодого "
    "животного каждого вида.\n"
    "Выберите операцию, которую хотите совершить, нажмите цифру нужной "
    "операции (для выхода - любой другой ввод): "
)


@dataclass(frozen=True)
class Pet:
    owner: str
    pet_type: str
    name: str
    age: int


def parse_pets(lines: Iterable[str]) -> list[Pet]:
    """Parse ``owner,type,name,age`` lines, skipping malformed ones with a warning."""
    pets = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        parts = line.split(",", 3)
        if len(parts) < 4:
            logger.warning("Некорректный формат строки: %s", line)
            continue
        owner, pet_type, name, rest = parts
        match = _AGE.match(rest)
        if match is None:
            logger.warning("Некорректный возраст в строке: %s", line)
            continue
        pets.append(Pet(owner, pet_type, name, int(match.group(1))))
    return pets


def read_pets(path) -> list[Pet]:
    """Read pets from the file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_pets(handle)


def distinct_types_per_owner(pets: Iterable[Pet]) -> dict[str, int]:
    """Number of different pet types for each owner, ordered by owner."""
    types: dict[str, set[str]] = {}
    for pet in pets:
        types.setdefault(pet.owner, set()).add(pet.pet_type)
    return {owner: len(types[owner]) for owner in sorted(types)}


def owners_and_names_by_type(pets: Iterable[Pet], pet_type: str) -> list[tuple[str, str]]:
    """Sorted distinct (owner, name) pairs of pets of the given type."""
    return sorted({(pet.owner, pet.name) for pet in pets if pet.pet_type == pet_type})


def count_types_with_name(pets: Iterable[Pet], name: str) -> int:
    """Number of different pet types that have a pet called ``name``."""
    return len({pet.pet_type for pet in pets if pet.name == name})


def age_range_by_type(pets: Iterable[Pet]) -> dict[str, tuple[int, int]]:
    """Youngest and oldest age for each pet type, ordered by type."""
    ranges: dict[str, tuple[int, int]] = {}
    for pet in pets:
        low, high = ranges.get(pet.pet_type, (pet.age, pet.age))
        ranges[pet.pet_type] = (min(low, pet.age), max(high, pet.age))
    return dict(sorted(ranges.items()))


def _print_types_per_owner(pets: list[Pet]) -> None:
    print("Количество различных видов животных у каждого владельца:")
    for owner, count in distinct_types_per_owner(pets).items():
        print(f"{owner}: {count}")


def _print_owners_by_type(pets: list[Pet]) -> None:
    print("Введите вид животного: ", end="", flush=True)
    pet_type = sys.stdin.readline().rstrip("\r\n")
    pairs = owners_and_names_by_type(pets, pet_type)
    if not pairs:
        print("Животных такого вида не найдено.")
        return
    print(f"Владельцы и клички для вида '{pet_type}':")
    for owner, name in pairs:
        print(f"Владелец: {owner}, Кличка: {name or 'нет клички'}")


def _print_types_with_name(pets: list[Pet]) -> None:
    print("Введите кличку: ", end="", flush=True)
    name = sys.stdin.readline().rstrip("\r\n")
    count = count_types_with_name(pets, name)
    print(f"Количество видов животных с кличкой '{name}': {count}")


def _print_age_ranges(pets: list[Pet]) -> None:
    print("Самый молодой и самый старый возраст для каждого вида:")
    for pet_type, (youngest, oldest) in age_range_by_type(pets).items():
        print(f"{pet_type}: самый молодой - {youngest}, самый старый - {oldest}")


_ACTIONS = {
    1: _print_types_per_owner,
    2: _print_owners_by_type,
    3: _print_types_with_name,
    4: _print_age_ranges,
}


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu over the pets in a data file (default data.txt)."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "data.txt"
    logging.basicConfig(format="%(message)s")
    try:
        pets = read_pets(path)
    except OSError:
        print(f"Не удалось открыть файл {path}", file=sys.stderr)
        pets = []

    while True:
        print(MENU, end="", flush=True)
        try:
            choice = int(sys.stdin.readline())
        except ValueError:
            return 1
        action = _ACTIONS.get(choice)
        if action is None:
            return 1
        action(pets)


if __name__ == "__main__":
    sys.exit(main())