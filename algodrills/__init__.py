"""Classic data-structure and algorithm drills."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "codeforces",
    "dynamic",
    "expressions",
    "linked_list",
    "monotonic",
    "queues",
    "stacks",
]