# octree.py
# Signature trie nodes: each node holds a signature fragment and every word
# whose full signature starts with it. Up to eight children per node, one
# per keypad digit, each one digit longer than its parent.

from enum import Enum
from typing import List, Optional, Set


class Match(Enum):
    """Outcome of signature_match(reference, check)."""

    INVALID = "invalid"
    MISMATCH = "mismatch"
    EQUAL = "equal"
    REFERENCE_IS_PREFIX_OF_CHECK = "reference_is_prefix_of_check"
    CHECK_IS_PREFIX_OF_REFERENCE = "check_is_prefix_of_reference"


# Outcomes that let a traversal step into a child
_DESCENDABLE = (Match.EQUAL, Match.REFERENCE_IS_PREFIX_OF_CHECK)


def signature_match(reference: Optional[str], check: Optional[str]) -> Match:
    """
    Compare a node fragment (``reference``) against a query or word
    signature (``check``). Not symmetric: argument order matters.
    """
    if reference is None or check is None:
        return Match.INVALID

    for r, c in zip(reference, check):
        if r != c:
            return Match.MISMATCH

    if len(reference) == len(check):
        return Match.EQUAL
    if len(reference) < len(check):
        return Match.REFERENCE_IS_PREFIX_OF_CHECK
    return Match.CHECK_IS_PREFIX_OF_REFERENCE


class SignatureNode:
    """
    One vertex of the signature trie.
      fragment: signature prefix this node stands for ("" at the root)
      words:    full words whose signature starts with ``fragment``
      children: nodes one digit deeper; no sibling fragment prefixes another
    """

    __slots__ = ("fragment", "words", "children")

    def __init__(self, fragment: str = "") -> None:
        self.fragment = fragment
        self.words: Set[str] = set()
        self.children: List["SignatureNode"] = []

    @property
    def depth(self) -> int:
        return len(self.fragment)

    def add_word(self, word: str) -> None:
        self.words.add(word)

    def add_child(self, child: "SignatureNode") -> None:
        self.children.append(child)

    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        return (
            f"SignatureNode(fragment={self.fragment!r}, "
            f"words={sorted(self.words)!r}, children={len(self.children)})"
        )


def find_matching_child(node: SignatureNode, signature: str) -> Optional[SignatureNode]:
    """
    Return the child whose fragment equals ``signature`` or is a prefix of
    it, or None. A child whose fragment runs past ``signature`` is never
    returned.
    """
    for child in node.children:
        if signature_match(child.fragment, signature) in _DESCENDABLE:
            return child
    return None
