"""
Exceptions raised by the social graph.
"""

from __future__ import annotations


class UnknownUser(LookupError):
    """
    Raised when an operation references a user that was never added.

    Attributes:
        labels: Every missing label, in the order the caller passed them
    """

    def __init__(self, *labels: str) -> None:
        self.labels: tuple[str, ...] = labels
        quoted = ", ".join(f"'{label}'" for label in labels)
        noun = "User" if len(labels) == 1 else "Users"
        super().__init__(f"{noun} {quoted} not found")

    @classmethod
    def check(cls, graph, *labels: str) -> None:
        """Raise for whichever of `labels` are absent from `graph`."""
        missing = [label for label in labels if label not in graph]
        if missing:
            # Report each missing label once (e.g. start == end == "Nobody")
            raise cls(*dict.fromkeys(missing))


class SelfFriendshipError(ValueError):
    """Raised when a user is asked to befriend themselves."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"User '{label}' cannot be friends with themselves")
