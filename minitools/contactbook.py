"""Command-line contact book kept in a CSV file in the working directory."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import IO

PROG_NAME = "contact-book"
CSV_FILENAME = "contacts.csv"

# Lines are read in chunks of at most MAX_LINE_LENGTH - 1 characters; a longer
# line is treated as several lines.
MAX_LINE_LENGTH = 1024
CSV_DELIMITER = ","

_WHITESPACE = " \t\n\v\f\r"
_LINE_END_RE = re.compile(r"[\r\n]")
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

SEPARATOR = "------------------------------------"
ENTRY_SEPARATOR = "     ---"


def contains_ignore_case(haystack: str, needle: str) -> bool:
    """Tell whether ``needle`` occurs in ``haystack``, ignoring ASCII case."""
    return needle.translate(_ASCII_LOWER) in haystack.translate(_ASCII_LOWER)


@dataclass
class Contact:
    """A single contact entry."""

    name: str
    phone: str
    email: str

    def matches(self, term: str) -> bool:
        """Tell whether ``term`` occurs in the name or e-mail, ignoring case."""
        return contains_ignore_case(self.name, term) or contains_ignore_case(
            self.email, term
        )


class Command(Enum):
    """The commands the contact book understands."""

    ADD = "add"
    LIST = "list"
    FIND = "find"
    DELETE = "delete"
    UNKNOWN = "unknown"


def parse_command(text: str) -> Command:
    """Map a command word to a Command; anything unrecognised is UNKNOWN."""
    for command in (Command.ADD, Command.LIST, Command.FIND, Command.DELETE):
        if text == command.value:
            return command
    return Command.UNKNOWN


@dataclass
class ContactBook:
    """An ordered collection of contacts."""

    contacts: list[Contact] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.contacts)

    def add(self, name: str, phone: str, email: str) -> Contact:
        """Append a new contact and return it."""
        contact = Contact(name, phone, email)
        self.contacts.append(contact)
        return contact

    def find(self, term: str) -> list[Contact]:
        """Return the contacts whose name or e-mail contains ``term``."""
        return [contact for contact in self.contacts if contact.matches(term)]

    def delete(self, name: str) -> int:
        """Remove every contact whose name equals ``name``; return how many."""
        kept = [contact for contact in self.contacts if contact.name != name]
        removed = len(self.contacts) - len(kept)
        self.contacts = kept
        return removed


def _trim(text: str) -> str:
    return text.strip(_WHITESPACE)


def parse_csv_line(line: str) -> Contact | None:
    """Parse one CSV line into a Contact, or None if it has too few fields.

    Empty fields are skipped, fields beyond the third are ignored and each
    field is stripped of surrounding whitespace.
    """
    content = _LINE_END_RE.split(line, maxsplit=1)[0]
    fields = [part for part in content.split(CSV_DELIMITER) if part]
    if len(fields) < 3:
        return None
    name, phone, email = (_trim(part) for part in fields[:3])
    return Contact(name, phone, email)


def _read_chunks(stream: IO[str]) -> Iterator[str]:
    while chunk := stream.readline(MAX_LINE_LENGTH - 1):
        yield chunk


def load_contacts(path: str) -> list[Contact]:
    """Read contacts from the CSV file at ``path``; OSError on failure."""
    with open(
        path, "r", encoding="utf-8", errors="surrogateescape", newline=""
    ) as stream:
        return [
            contact
            for contact in map(parse_csv_line, _read_chunks(stream))
            if contact is not None
        ]


def save_contacts(contacts: Iterable[Contact], path: str) -> None:
    """Write contacts to the CSV file at ``path``; OSError on failure."""
    with open(
        path, "w", encoding="utf-8", errors="surrogateescape", newline=""
    ) as stream:
        for contact in contacts:
            stream.write(f"{contact.name},{contact.phone},{contact.email}\n")


def format_contact_list(contacts: Sequence[Contact]) -> str:
    """Render the full contact listing, ending with a newline."""
    if not contacts:
        return "The contact book is empty.\n"
    lines = [f"--- Contact List ({len(contacts)} contacts) ---"]
    for number, contact in enumerate(contacts, start=1):
        lines.append(f"{number:2d}. Name:  {contact.name}")
        lines.append(f"     Phone: {contact.phone}")
        lines.append(f"     Email: {contact.email}")
        if number < len(contacts):
            lines.append(ENTRY_SEPARATOR)
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"


def format_search_results(term: str, contacts: Sequence[Contact]) -> str:
    """Render the contacts found for ``term``, ending with a newline."""
    lines = [f"--- Search Results for '{term}' ---"]
    for index, contact in enumerate(contacts):
        if index > 0:
            lines.append(ENTRY_SEPARATOR)
        lines.append(f"  Name:  {contact.name}")
        lines.append(f"  Phone: {contact.phone}")
        lines.append(f"  Email: {contact.email}")
    if not contacts:
        lines.append("No contacts found matching that term.")
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"


def _usage(prog_name: str) -> str:
    return (
        "Contact Book - A simple command-line contact manager.\n\n"
        f"Usage: {prog_name} <command> [options]\n\n"
        "Commands:\n"
        "  add <name> <phone> <email>    Add a new contact.\n"
        "  list                            List all contacts.\n"
        "  find <term>                     Find contacts by case-insensitive "
        "name or email.\n"
        "  delete <name>                   Delete a contact by exact name match.\n\n"
        f"Data is stored in '{CSV_FILENAME}' in the current directory.\n"
    )


def _load_book() -> ContactBook:
    try:
        return ContactBook(load_contacts(CSV_FILENAME))
    except OSError as exc:
        if not isinstance(exc, FileNotFoundError):
            print(
                f"Error opening contacts file for reading: {exc.strerror}",
                file=sys.stderr,
            )
        print(
            f"Info: Could not load contacts from '{CSV_FILENAME}'. "
            "Starting with an empty list.",
            file=sys.stderr,
        )
        return ContactBook()


def _bad_arguments(command: Command) -> None:
    print(
        f"Error: Incorrect arguments for '{command.value}' command.",
        file=sys.stderr,
    )
    sys.stderr.write(_usage(PROG_NAME))


def main(argv: Sequence[str] | None = None) -> int:
    """Run one contact-book command; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write(_usage(PROG_NAME))
        return 1

    book = _load_book()
    command = parse_command(args[0])
    needs_save = False

    if command is Command.ADD:
        needs_save = True
        if len(args) != 4:
            _bad_arguments(command)
        else:
            contact = book.add(args[1], args[2], args[3])
            print(f"Contact '{contact.name}' added successfully.")
    elif command is Command.LIST:
        sys.stdout.write(format_contact_list(book.contacts))
    elif command is Command.FIND:
        if len(args) != 2:
            _bad_arguments(command)
        else:
            sys.stdout.write(format_search_results(args[1], book.find(args[1])))
    elif command is Command.DELETE:
        needs_save = True
        if len(args) != 2:
            _bad_arguments(command)
        else:
            name = args[1]
            removed = book.delete(name)
            if removed:
                print(f"Successfully deleted {removed} contact(s) named '{name}'.")
            else:
                print(f"No contact found with the exact name '{name}'.")
    else:
        print(f"Error: Unknown command '{args[0]}'.", file=sys.stderr)
        sys.stderr.write(_usage(PROG_NAME))

    if needs_save:
        try:
            save_contacts(book.contacts, CSV_FILENAME)
        except OSError as exc:
            print(
                f"Error opening contacts file for writing: {exc.strerror}",
                file=sys.stderr,
            )
            print(
                f"Error: Failed to save changes to '{CSV_FILENAME}'.",
                file=sys.stderr,
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())