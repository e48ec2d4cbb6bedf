"""Fixed action table: which key runs which version-control operation.

Every ``Action`` carries its display name, key binding, optional prompt,
help label and the backend method it calls. ``ACTION_BY_KEY`` is the single
lookup the dispatcher uses; it is keyed on ``(character, ctrl)`` so a plain
key and its ctrl variant are independent bindings.
"""

from __future__ import annotations

from enum import Enum

from .input import KeyPress


class Action(Enum):
    # display name, key, prompt, help label, backend operation
    HELP = ("help", KeyPress("h"), None, "help", None)
    EXPLORER = ("explorer", KeyPress("e"), None, "explorer", None)
    STATUS = ("status", KeyPress("s"), None, "status", "status")
    LOG = ("log", KeyPress("l"), None, "log", "log")
    CHANGES = (
        "revision changes",
        KeyPress("d"),
        "show changes from (ctrl+c to cancel): ",
        "revision changes",
        "changes",
    )
    DIFF = ("revision diff", KeyPress("D"), "show diff from (ctrl+c to cancel): ", "revision diff", "diff")
    COMMIT_ALL = ("commit all", KeyPress("c"), "commit message (ctrl+c to cancel): ", "commit all", "commit_all")
    COMMIT_SELECTED = ("commit selected", KeyPress("C"), None, "commit selected", "commit_selected")
    REVERT = ("revert", KeyPress("U"), None, "revert", "revert")
    UPDATE = ("update", KeyPress("u"), "update to (ctrl+c to cancel): ", "update/checkout", "update")
    MERGE = ("merge", KeyPress("m"), "merge with (ctrl+c to cancel): ", "merge", "merge")
    CONFLICTS = ("unresolved conflicts", KeyPress("r"), None, "unresolved conflicts", "conflicts")
    TAKE_OTHER = ("merge taking other", KeyPress("R"), None, "resolve taking other", "take_other")
    TAKE_LOCAL = ("merge taking local", KeyPress("r", ctrl=True), None, "resolve taking local", "take_local")
    FETCH = ("fetch", KeyPress("f"), None, "fetch", "fetch")
    PULL = ("pull", KeyPress("p"), None, "pull", "pull")
    PUSH = ("push", KeyPress("P"), None, "push", "push")
    CREATE_TAG = ("tag", KeyPress("T"), "tag name (ctrl+c to cancel): ", "create tag", "create_tag")
    LIST_BRANCHES = ("branches", KeyPress("b"), None, "list branches", "list_branches")
    CREATE_BRANCH = ("branch", KeyPress("B"), "branch name (ctrl+c to cancel): ", "create branch", "create_branch")
    CLOSE_BRANCH = (
        "close branch",
        KeyPress("b", ctrl=True),
        "branch to close (ctrl+c to cancel): ",
        "close branch",
        "close_branch",
    )

    def __init__(
        self,
        display_name: str,
        key: KeyPress,
        prompt: str | None,
        help_label: str,
        operation: str | None,
    ) -> None:
        self.display_name = display_name
        self.key = key
        self.prompt = prompt
        self.help_label = help_label
        self.operation = operation

    @property
    def requires_prompt(self) -> bool:
        return self.prompt is not None


COMMIT_MESSAGE_PROMPT = "commit message (ctrl+c to cancel): "

# Groups are separated by a blank line in the help listing.
HELP_GROUPS: tuple[tuple[Action, ...], ...] = (
    (Action.HELP,),
    (Action.EXPLORER,),
    (Action.STATUS, Action.LOG),
    (Action.CHANGES, Action.DIFF),
    (Action.COMMIT_ALL, Action.COMMIT_SELECTED, Action.REVERT, Action.UPDATE, Action.MERGE),
    (Action.CONFLICTS, Action.TAKE_OTHER, Action.TAKE_LOCAL),
    (Action.FETCH, Action.PULL, Action.PUSH),
    (Action.CREATE_TAG,),
    (Action.LIST_BRANCHES, Action.CREATE_BRANCH, Action.CLOSE_BRANCH),
)


def build_key_table(actions) -> dict[KeyPress, Action]:
    """Index ``actions`` by key, rejecting two actions bound to the same key."""
    table: dict[KeyPress, Action] = {}
    for action in actions:
        existing = table.get(action.key)
        if existing is not None:
            raise ValueError(f"{action.name} and {existing.name} are both bound to {key_label(action.key)}")
        table[action.key] = action
    return table


def key_label(key: KeyPress) -> str:
    """Human-readable binding label such as ``s``, ``shift+d`` or ``ctrl+b``."""
    if key.ctrl:
        return f"ctrl+{key.char}"
    if key.char.isalpha() and key.char.isupper():
        return f"shift+{key.char.lower()}"
    return key.char


ACTION_BY_KEY: dict[KeyPress, Action] = build_key_table(Action)


def lookup_action(key: KeyPress) -> Action | None:
    return ACTION_BY_KEY.get(key)
