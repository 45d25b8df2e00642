"""Type definitions for indexedseq."""

from typing import Literal, TypeAlias

# Commands understood by the interactive shell
CommandName: TypeAlias = Literal["insert", "remove", "get", "print", "size", "help", "quit"]

# Numeric menu choices accepted as command aliases
MENU_ALIASES: dict[str, CommandName] = {
    "1": "insert",
    "2": "remove",
    "3": "get",
    "4": "print",
    "5": "size",
    "0": "quit",
}
