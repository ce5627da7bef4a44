"""Command-line interface for plane_data.

Loads the data file, then either prints every record (--show) or runs
the interactive menu:
- display all planes
- edit one plane field by field, then save the whole file
- quit

End of input at any prompt ends the session without saving a partial edit.
"""

from __future__ import annotations
import argparse
import sys
from typing import Callable, TextIO, TypeVar

from .errors import InputError
from .normalize import edit_field
from .prompts import parse_menu_choice, parse_plane_number, parse_yes_no
from .records import FIELDS, SEPARATOR_RULE, RecordStore, describe
from .storage import load_store, save_store


DEFAULT_PATH = "plane_data.txt"

MENU = """MENU
-----
1. Display all planes
2. Edit plane information
3. Quit
"""

T = TypeVar("T")


class Session:
    """One interactive run over a loaded store."""

    def __init__(self, store: RecordStore, path: str,
                 stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.store = store
        self.path = path
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _say(self, text: str = "", end: str = "\n") -> None:
        self.stdout.write(text + end)

    def _readline(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\n")

    def _read(self, prompt: str) -> str:
        self._say(prompt, end="")
        self.stdout.flush()
        return self._readline()

    def _ask(self, prompt: str, parse: Callable[[str], T], skip_blank: bool = False) -> T:
        while True:
            text = self._read(prompt)
            # blank answers are waited out without re-prompting
            while skip_blank and not text.strip():
                text = self._readline()
            try:
                return parse(text)
            except InputError as ex:
                self._say(str(ex))

    def run(self) -> None:
        try:
            while self._menu_once():
                pass
        except EOFError:
            self._say()

    def _menu_once(self) -> bool:
        self._say(MENU)
        try:
            choice = parse_menu_choice(self._read("Enter your choice (1-3): "))
        except InputError as ex:
            self._say(f"{ex}\n")
            return True

        if choice == 1:
            self.print_all()
        elif choice == 2:
            self.edit_plane()
            if save_store(self.store, self.path):
                self._say("Changes saved successfully.\n")
            else:
                self._say("Error: Could not save changes to file.\n")
        else:
            self._say()
            self._say("Thank you for using the Aircraft Information System. Goodbye!")
            return False
        return True

    def print_all(self) -> None:
        self._say()
        self._say("All Aircraft Information")
        self._say(SEPARATOR_RULE)
        for r in self.store:
            self._say(describe(r))
        self._say()

    def edit_plane(self) -> None:
        count = len(self.store)
        self._say()
        self._say("Select a plane to edit:")
        self._say("-" * 25)
        for i, r in enumerate(self.store, start=1):
            self._say(f"{i}. {r.name}")

        index = self._ask(f"\nEnter plane number (1-{count}): ",
                          lambda text: parse_plane_number(text, count))
        rec = self.store[index]

        self._say()
        self._say(f"Editing plane: {rec.name}")
        self._say("Current information:")
        self._say(SEPARATOR_RULE)
        self._say(describe(rec))

        for spec in FIELDS:
            question = f"\nDo you want to edit the {spec.label}? (Y/N): "
            if self._ask(question, parse_yes_no, skip_blank=True):
                value = self._read(f"Enter new {spec.label}: ")
                updated = edit_field(rec, spec.attr, value)
                # a blank name line reads back as a record separator
                if spec.attr == "name" and not updated.name:
                    self._say("Name cannot be blank; keeping the current name.")
                    continue
                rec = updated

        self.store.replace(index, rec)
        self._say()
        self._say("Updated information:")
        self._say(SEPARATOR_RULE)
        self._say(describe(rec))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="plane-data", description="View and edit aircraft records.")
    p.add_argument("path", nargs="?", default=DEFAULT_PATH, help="Data file path")
    p.add_argument("--show", action="store_true", help="Print all records and exit")
    args = p.parse_args(argv)

    sys.stdout.write("Aircraft Information System\n")
    sys.stdout.write("------------------------------\n")

    loaded = load_store(args.path)
    if not loaded.ok:
        sys.stderr.write(f"error: {loaded.error}\n")
    elif loaded.count == 0:
        sys.stderr.write(f"error: {args.path!r} holds no complete records\n")
    if loaded.count == 0:
        sys.stdout.write("Error: No plane data found or could not open file.\n")
        return 1

    sys.stdout.write(f"Successfully loaded data for {loaded.count} aircraft.\n\n")

    session = Session(loaded.store, args.path)
    try:
        if args.show:
            session.print_all()
        else:
            session.run()
    except Exception as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
