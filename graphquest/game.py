"""Text adventure in which the player walks a graph of scenarios."""

from __future__ import annotations

import argparse
import re
import subprocess
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

from .csvtools import read_csv_rows, split_string
from .hashmap import HashMap

DEFAULT_DATA_PATH = "Data/graphquest.csv"
INITIAL_TIME = 100
TIME_PER_PICK = 10
START_ID = "1"
NO_LINK = "-1"
FINAL_MARK = "Si"
DIRECTIONS = ("up", "down", "left", "right")

_DIRECTION_LABELS = {
    "up": "Arriba",
    "down": "Abajo",
    "left": "Izquierda",
    "right": "Derecha",
}
_RULE = "=" * 40
_MAP_CAPACITY = 20
_FIELD_COUNT = 9
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read the integer at the start of ``text``; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class Item:
    """Something the player can carry."""

    name: str
    value: int
    weight: int


@dataclass(eq=False)
class Scenario:
    """A room of the map and the rooms it leads to."""

    id: str
    name: str
    description: str
    items: list[Item] = field(default_factory=list)
    is_final: bool = False
    connections: dict[str, Scenario | None] = field(
        default_factory=lambda: dict.fromkeys(DIRECTIONS), repr=False
    )


@dataclass
class Player:
    """The state of a game in progress."""

    time_left: int = INITIAL_TIME
    inventory: list[Item] = field(default_factory=list)
    total_weight: int = 0
    score: int = 0
    current: Scenario | None = None

    def reset(self, start: Scenario | None) -> None:
        """Start over from ``start`` with full time and nothing carried."""
        self.time_left = INITIAL_TIME
        self.inventory = []
        self.total_weight = 0
        self.score = 0
        self.current = start


@dataclass
class _Record:
    id: str
    name: str
    description: str
    items: list[Item]
    links: dict[str, str]
    is_final: bool


def parse_items(field: str) -> list[Item]:
    """Parse ``name,value,weight`` entries separated by semicolons."""
    items = []
    for entry in split_string(field, ";"):
        parts = split_string(entry, ",")
        name = parts[0] if parts else ""
        value = _atoi(parts[1]) if len(parts) > 1 else 0
        weight = _atoi(parts[2]) if len(parts) > 2 else 0
        items.append(Item(name, value, weight))
    return items


def format_item(item: Item) -> str:
    """Describe an item with its points and weight."""
    return f"{item.name} ({item.value} pts, {item.weight} kg)"


def _records(stream: TextIO) -> Iterator[_Record]:
    rows = read_csv_rows(stream, ",")
    next(rows, None)  # header
    for fields in rows:
        if not fields:
            continue
        if len(fields) < _FIELD_COUNT:
            raise ValueError(
                f"expected {_FIELD_COUNT} fields, got {len(fields)}: {fields!r}"
            )
        yield _Record(
            id=fields[0],
            name=fields[1],
            description=fields[2],
            items=parse_items(fields[3]),
            links=dict(zip(DIRECTIONS, fields[4:8])),
            is_final=fields[8] == FINAL_MARK,
        )


def _link(records: Iterable[_Record]) -> list[Scenario]:
    table = HashMap(_MAP_CAPACITY)
    for record in records:
        table.insert(record.id, record)

    kept = [pair.value for pair in table.items()]
    scenarios = [
        Scenario(
            id=record.id,
            name=record.name,
            description=record.description,
            items=list(record.items),
            is_final=record.is_final,
        )
        for record in kept
    ]
    by_id: dict[str, Scenario] = {}
    for scenario in scenarios:
        by_id.setdefault(scenario.id, scenario)

    for record, scenario in zip(kept, scenarios):
        for direction in DIRECTIONS:
            target = record.links[direction]
            scenario.connections[direction] = (
                None if target == NO_LINK else by_id.get(target)
            )
    return scenarios


def load_scenarios(stream: TextIO) -> list[Scenario]:
    """Read scenarios from CSV text and link them to their neighbours.

    The first line is a header. A repeated id keeps its first row.
    """
    return _link(_records(stream))


def clear_screen() -> None:
    """Clear the terminal."""
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


class Game:
    """Menus and turns of the adventure, driven by line input."""

    def __init__(
        self,
        data_path: str = DEFAULT_DATA_PATH,
        input_func: Callable[[], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.data_path = data_path
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else sys.stdout
        self.player = Player()
        self.scenarios: list[Scenario] = []

    def _write(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self._output)

    def _clear(self) -> None:
        if self._output is sys.stdout:
            clear_screen()

    def _pause(self) -> None:
        self._write("Presione una tecla para continuar...")
        self._output.flush()
        self._input()

    def _read_option(self) -> str:
        self._output.write("Ingrese su opción: ")
        self._output.flush()
        while True:
            text = self._input().strip()
            if text:
                return text[0]

    def _item_lines(self, items: Iterable[Item]) -> list[str]:
        return [f"  - {format_item(item)}" for item in items]

    def load(self) -> None:
        """Read the scenario file, report it, and start at the first room."""
        try:
            with open(
                self.data_path, encoding="utf-8", errors="replace", newline=""
            ) as stream:
                records = list(_records(stream))
        except OSError as exc:
            self._write(f"Error al abrir el archivo: {exc.strerror or exc}")
            return

        for record in records:
            self._write(
                f"ID: {record.id}",
                f"Nombre: {record.name}",
                f"Descripción: {record.description}",
            )
            if record.items:
                self._write("Items: ", *self._item_lines(record.items))
            else:
                self._write("No hay items disponibles.")
            for direction in DIRECTIONS:
                target = record.links[direction]
                if target != NO_LINK:
                    self._write(f"{_DIRECTION_LABELS[direction]}: {target}")
            self._write("Es final" if record.is_final else "No es final", _RULE)

        self.scenarios = _link(records)
        for scenario in self.scenarios:
            self._write(f"ID: {scenario.id}")
            if scenario.items:
                self._write("Items: ", *self._item_lines(scenario.items))

        start = next((s for s in self.scenarios if s.id == START_ID), None)
        self.player.reset(start)
        self._pause()

    def reset(self) -> None:
        """Clear the player's progress and leave the map."""
        self.player.reset(None)

    def pick_item(self) -> None:
        """Spend the time that picking up an item takes."""
        self.player.time_left -= TIME_PER_PICK

    def status_text(self) -> str:
        """The player's status and the turn menu."""
        player = self.player
        current = player.current
        if current is None:
            raise RuntimeError("no scenario loaded")
        lines = [
            _RULE,
            "Estado actual:",
            f"Tiempo restante: {player.time_left}",
            f"Peso total: {player.total_weight}",
            f"Puntaje acumulado: {player.score}",
            f"Escenario actual: {current.name}",
            f"Descripción: {current.description}",
            "Items disponibles:",
            *self._item_lines(current.items),
        ]
        if player.inventory:
            lines += ["Items en inventario:", *self._item_lines(player.inventory)]
        else:
            lines.append("No hay items en el inventario.")
        lines += [
            _RULE,
            "     Opciones del jugador",
            "1) Recoger item",
            "2) Descartar item",
            "3) Avanzar en escenario",
            "4) Reiniciar partida",
            "5) Salir",
            _RULE,
        ]
        return "\n".join(lines)

    def _finish(self) -> None:
        player = self.player
        self._write(
            "se ha llegado al final del juego",
            f"Puntaje total: {player.score}",
            f"Tiempo restante: {player.time_left}",
            f"Peso total: {player.total_weight}",
            "Items en inventario:",
            *self._item_lines(player.inventory),
            "Se Reiniciara la partida",
        )
        self._pause()
        self.reset()

    def play(self) -> None:
        """Take turns until the player quits or reaches a final room."""
        while True:
            current = self.player.current
            if current is None:
                self._write("No hay escenarios cargados.")
                return
            if current.is_final:
                self._finish()
                return
            self._clear()
            self._write(self.status_text())
            option = self._read_option()
            if option == "1":
                self.pick_item()
            elif option == "4":
                self.load()
                self._write("Partida reiniciada.")
            self._pause()
            if option == "5":
                return

    def run(self) -> None:
        """Show the main menu until the player leaves or input ends."""
        try:
            while True:
                self._clear()
                self._write(
                    _RULE,
                    "     Opciones del juego",
                    _RULE,
                    "1) Leer escenarios",
                    "2) Iniciar partida",
                    "3) Salir",
                )
                option = self._read_option()
                if option == "1":
                    self.load()
                elif option == "2":
                    self.play()
                elif option == "3":
                    break
        except EOFError:
            self._write("")
        self._clear()
        self._write(_RULE, "Gracias por usar el programa. ¡Hasta luego!")


def main(argv: list[str] | None = None) -> int:
    """Start the game from the command line."""
    parser = argparse.ArgumentParser(prog="graphquest")
    parser.add_argument(
        "--data",
        default=DEFAULT_DATA_PATH,
        help="CSV file describing the scenarios",
    )
    args = parser.parse_args(argv)
    Game(args.data).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())