"""Interactive console menu over a :class:`VariableStore`.

A thin adapter: every choice maps to one store operation and prints the
outcome. Input and output are injectable so the loop can be driven from tests.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from weather_manager.errors import VariableNotFoundError
from weather_manager.variables import format_value, format_variable

if TYPE_CHECKING:
    from collections.abc import Callable

    from weather_manager.variables import VariableStore

MENU_TEXT = """
Weather Variable Manager Menu
1. Add/Update Variable
2. Retrieve Variable
3. Remove Variable
4. List All Variables
5. Exit"""

EXIT_CHOICE = 5


class VariableMenu:
    """Numbered command loop: 1 define, 2 get, 3 remove, 4 list, 5 exit."""

    def __init__(
        self,
        store: VariableStore,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.store = store
        self._input = input_fn
        self._print = output_fn
        self._commands: dict[int, Callable[[], None]] = {
            1: self.add_or_update,
            2: self.retrieve,
            3: self.remove,
            4: self.list_all,
        }

    def run(self) -> None:
        """Loop until the user picks Exit or input runs out."""
        while True:
            self._print(MENU_TEXT)
            try:
                raw = self._input("Enter your choice: ")
            except EOFError:
                return

            choice = _parse_choice(raw)
            if choice == EXIT_CHOICE:
                self._print("Exiting the program.")
                return

            command = self._commands.get(choice) if choice is not None else None
            if command is None:
                self._print("Invalid choice. Please try again.")
                continue

            try:
                command()
            except EOFError:
                return

    def add_or_update(self) -> None:
        name = self._input("Enter variable name: ").strip()
        raw_value = self._input("Enter variable value: ").strip()
        try:
            value = float(raw_value)
        except ValueError:
            value = math.nan
        if not math.isfinite(value):
            self._print("Invalid value.")
            return
        self.store.define(name, value)
        self._print("Variable added/updated successfully.")

    def retrieve(self) -> None:
        name = self._input("Enter variable name to retrieve: ").strip()
        try:
            value = self.store.get(name)
        except VariableNotFoundError as exc:
            self._print(str(exc))
            return
        self._print(f"Variable value: {format_value(value)}")

    def remove(self) -> None:
        name = self._input("Enter variable name to remove: ").strip()
        try:
            self.store.remove(name)
        except VariableNotFoundError:
            self._print(f"Variable {name} not found, cannot remove.")
            return
        self._print("Variable removed successfully.")

    def list_all(self) -> None:
        items = self.store.list()
        if not items:
            self._print("No weather variables defined.")
            return
        for name, value in items:
            self._print(format_variable(name, value))


def _parse_choice(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None
