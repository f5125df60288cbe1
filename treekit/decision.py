"""A yes/no decision tree walked by answering questions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class DecisionNode:
    """A question with yes/no branches, or a conclusion when it has none."""

    text: str
    yes: DecisionNode | None = None
    no: DecisionNode | None = None

    def is_leaf(self) -> bool:
        return self.yes is None and self.no is None


def diagnose(root: DecisionNode, ask: Callable[[str], str]) -> str:
    """Walk the tree, asking each question until a conclusion is reached.

    ``ask`` receives the question text and returns the answer; its first
    non-blank character decides: 's' follows the yes branch, 'n' the no
    branch, anything else repeats the question.
    """
    node = root
    while not node.is_leaf():
        answer = ask(node.text).strip()[:1]
        if answer == "s":
            branch = node.yes
        elif answer == "n":
            branch = node.no
        else:
            continue
        if branch is None:
            raise ValueError(f"question {node.text!r} has no branch for {answer!r}")
        node = branch
    return node.text


def symptom_tree() -> DecisionNode:
    """Build the example symptom tree."""
    return DecisionNode(
        "Voce esta com febre?",
        yes=DecisionNode(
            "Voce sente dores no corpo?",
            yes=DecisionNode("Dengue"),
            no=DecisionNode("Gripe Comum"),
        ),
        no=DecisionNode(
            "Voce esta com tosse?",
            yes=DecisionNode("Covid-19"),
            no=DecisionNode("Nenhuma doenca identificada"),
        ),
    )


def main(argv: list[str] | None = None) -> int:
    """Ask the symptom questions on the terminal and print the diagnosis."""
    try:
        result = diagnose(symptom_tree(), lambda question: input(f"{question} (s/n): "))
    except EOFError:
        return 1
    print(f"Diagnostico: {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())