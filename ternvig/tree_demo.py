"""Command that exercises the ternary tree: structure, copying, moving and traversal."""

from __future__ import annotations

import argparse
import sys
from typing import Dict, Optional, Sequence

from ternvig.ternary_tree import TernaryTree, TreeDomainError

_KEYS = ("This", "is", "a", "ternary", "tree", "in", "action.", "It", "works!")

StrTree = TernaryTree[str]


def _sample_nodes() -> Dict[str, StrTree]:
    names = ("root", "a", "b", "c", "aa", "aac", "bb", "cb", "cc")
    key_of = dict(zip(("root", "a", "aa", "aac", "b", "bb", "c", "cb", "cc"), _KEYS))
    nodes = {name: TernaryTree(key_of[name]) for name in names}
    nodes["aa"].add_right(nodes["aac"])
    nodes["a"].add_left(nodes["aa"])
    nodes["b"].add_middle(nodes["bb"])
    nodes["c"].add_middle(nodes["cb"])
    nodes["c"].add_right(nodes["cc"])
    nodes["root"].add_left(nodes["a"])
    nodes["root"].add_middle(nodes["b"])
    nodes["root"].add_right(nodes["c"])
    return nodes


def build_sample_tree() -> StrTree:
    """Build the sample tree whose prefix order spells a sentence."""
    return _sample_nodes()["root"]


def _error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def _run_structure() -> None:
    print("Test Problem 1:")
    print("Setting up ternary tree...")
    nodes = _sample_nodes()
    root = nodes["root"]
    try:
        root.add_right(nodes["c"])
        _error("Non-empty subtree overridden.")
    except TreeDomainError as exc:
        print(f"Successfully caught: {exc}")

    print("Testing basic ternary tree logic ...")
    print(f"Is NIL empty? {'Yes' if TernaryTree.NIL.is_empty() else 'No'}")
    print(f"Is root empty? {'Yes' if root.is_empty() else 'No'}")
    try:
        print(f"Height of root is: {root.height()}")
        TernaryTree.NIL.height()
        _error("NIL has no height.")
    except TreeDomainError as exc:
        print(f"Successfully caught: {exc}")

    print("Tearing down ternary tree...")
    nodes["c"].remove_right()
    nodes["c"].remove_middle()
    nodes["b"].remove_middle()
    nodes["aa"].remove_right()
    nodes["a"].remove_left()
    try:
        nodes["a"].remove_left()
        _error("Empty subtree removed.")
    except TreeDomainError as exc:
        print(f"Successfully caught: {exc}")
    print("Test Problem 1 complete.")


def _check_copy(root: StrTree, copy: StrTree, label: str, noun: str) -> None:
    if copy.left.left.right is root.left.left.right:
        _error("Shallow copy detected.")
    else:
        print(f"{label} appears to work properly.")
    if copy.middle.left is not root.middle.right:
        _error(f"{noun} does not preserve tree structure.")
    elif not copy.middle.left.is_empty():
        _error("NIL not preserved.")
    else:
        print(f"{label} preserves tree structure.")


def _run_copying() -> None:
    print("Test Problem 2:")
    root = build_sample_tree()
    copy = root.clone()
    _check_copy(root, copy, "Copy constructor", "Copy")

    root.assign(copy)
    _check_copy(root, copy, "Assignment", "Assignment")

    try:
        root.assign(TernaryTree.NIL)
        _error("Copy of NIL! You should not see this message.")
    except TreeDomainError as exc:
        print(f"Successfully caught: {exc}")

    clone = root.clone()
    if clone.left.left.right is root.left.left.right:
        _error("Shallow copy detected.")
    else:
        print("Clone appears to work properly.")
    print("Test Problem 2 complete.")


def _print_payloads(tree: StrTree) -> None:
    print(f"The payload of tree: {tree.key}")
    print(f"The payload of tree.left.left.right:\t{tree.left.left.right.key}")
    print(f"The payload of tree.right:\t{tree.right.key}")


def _run_moving() -> None:
    print("Test Problem 3:")
    root = build_sample_tree()
    copy = root.take()
    if root.is_leaf():
        print("Moving makes root a leaf node.")
    else:
        _error("root must become a leaf node.")
    _print_payloads(copy)

    root = copy.take()
    if copy.is_leaf():
        print("Moving makes copy a leaf node.")
    else:
        _error("copy must become a leaf node.")
    _print_payloads(root)

    try:
        TernaryTree.NIL.take()
        _error("Move of NIL! You should not see this message.")
    except TreeDomainError as exc:
        print(f"Successfully caught: {exc}")
    print("Test Problem 3 complete.")


def _run_iteration() -> None:
    print("Test Problem 4:")
    root = build_sample_tree()
    print("Test prefix iterator:" + "".join(f" {key}" for key in root))
    print("Test Problem 4 complete.")


_PROBLEMS = {
    "1": _run_structure,
    "2": _run_copying,
    "3": _run_moving,
    "4": _run_iteration,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the selected demonstrations (all of them by default)."""
    parser = argparse.ArgumentParser(description="Exercise the ternary tree.")
    parser.add_argument(
        "problems",
        nargs="*",
        choices=sorted(_PROBLEMS),
        help="which demonstrations to run",
    )
    args = parser.parse_args(argv)
    for problem in args.problems or sorted(_PROBLEMS):
        _PROBLEMS[problem]()
    return 0


if __name__ == "__main__":
    sys.exit(main())