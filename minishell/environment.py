"""The shell's own environment list and state."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

from minishell.libft.chars import isalnum, isalpha


def valid_identifier(text: str) -> bool:
    """True for a name made of letters, digits and '_' not starting with a digit."""
    if not text:
        return False
    if not (isalpha(text[0]) or text[0] == "_"):
        return False
    return all(isalnum(char) or char == "_" for char in text)


class Environment:
    """An ordered list of ``NAME=value`` or bare ``NAME`` entries."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self.entries: List[str] = list(entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Environment({self.entries!r})"

    def remove(self, name: str) -> None:
        """Drop every entry for ``name``, with or without a value."""
        self.entries = [
            entry
            for entry in self.entries
            if not (entry.startswith(name) and entry[len(name):len(name) + 1] in ("=", ""))
        ]

    def exists(self, name: str) -> bool:
        """True when an entry ``name=...`` is present."""
        prefix = name + "="
        return any(entry.startswith(prefix) for entry in self.entries)

    def add(self, entry: str) -> None:
        """Append an entry as given."""
        self.entries.append(entry)

    def update(self, name: str, value: str) -> None:
        """Set the value of the first ``name=...`` entry; nothing happens if none."""
        prefix = name + "="
        for position, entry in enumerate(self.entries):
            if entry.startswith(prefix):
                self.entries[position] = prefix + value
                return

    def exported_lines(self) -> List[str]:
        """Entries in the form the export builtin lists them."""
        lines = []
        for entry in self.entries:
            name, equal, value = entry.partition("=")
            if equal:
                lines.append(f'declare -x {name}="{value}"')
            else:
                lines.append(f"declare -x {entry}")
        return lines

    def visible_lines(self) -> List[str]:
        """Entries that carry a value, as the env builtin prints them."""
        return [entry for entry in self.entries if "=" in entry]


@dataclass
class ShellState:
    """Environment and the exit status of the last command."""

    env: Environment = field(default_factory=Environment)
    last_status: int = 0