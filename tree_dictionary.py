# tree_dictionary.py
# Predictive-text dictionary backed by the signature trie in octree.py.

import time
from abc import ABC, abstractmethod
from typing import Iterable, List

import requests
from colorama import Fore
from sortedcontainers import SortedSet

import utils
from utils import log_with_time, vlog
from octree import Match, SignatureNode, find_matching_child, signature_match
from signature import encode, is_alphabetic_word


class WordSourceUnavailable(Exception):
    """The word list could not be read or downloaded."""

    def __init__(self, source, reason):
        super().__init__(f"word source unavailable: {source} ({reason})")
        self.source = source
        self.reason = reason


class Dictionary(ABC):
    """Anything that can answer "which words type this signature?"."""

    @abstractmethod
    def signature_to_words(self, signature: str) -> SortedSet:
        """Return the words matching ``signature``, trimmed to its length."""


# ---------- Word source ----------

def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _read_lines(source: str) -> List[str]:
    if _is_url(source):
        try:
            resp = requests.get(source, timeout=utils.DOWNLOAD_TIMEOUT)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise WordSourceUnavailable(source, e) from e
        return resp.text.splitlines()

    try:
        with open(source, "r", encoding="utf-8", errors="replace") as f:
            return f.read().splitlines()
    except OSError as e:
        raise WordSourceUnavailable(source, e) from e


def load_words(source: str) -> List[str]:
    """
    Read a one-word-per-line list from a file path or an http(s) URL.
    Lines are stripped and lower-cased; blank and non-alphabetic lines are
    dropped. Raises WordSourceUnavailable if nothing could be read.
    """
    t0 = time.time()
    log_with_time(f"⟳ Loading dictionary from {source}…")
    lines = _read_lines(source)
    words = []
    for line in lines:
        w = line.strip().lower()
        if w and is_alphabetic_word(w):
            words.append(w)
    vlog(f"Dictionary read and filtered ({len(words)} of {len(lines)} lines kept)", t0)
    return words


# ---------- Trie algorithms ----------

def insert_word(root: SignatureNode, word: str) -> None:
    """
    Add ``word`` to every node along its signature path, creating nodes one
    digit deeper at a time as needed. ``word`` must be alphabetic; the empty
    word is ignored.
    """
    sig = encode(word)
    if not sig:
        return
    node = root
    while True:
        child = find_matching_child(node, sig)
        if child is None:
            child = SignatureNode(sig[: node.depth + 1])
            node.add_child(child)
            continue
        child.add_word(word)
        if signature_match(child.fragment, sig) is Match.EQUAL:
            return
        node = child


def search_nodes(root: SignatureNode, signature: str) -> frozenset:
    """
    Return a snapshot of the untrimmed word set of the node whose fragment
    equals ``signature``, or an empty set when no stored word has it as a
    prefix.
    """
    node = root
    while True:
        child = find_matching_child(node, signature)
        if child is None:
            return frozenset()
        if signature_match(child.fragment, signature) is Match.EQUAL:
            return frozenset(child.words)
        node = child


def trim_words(words: Iterable[str], length: int) -> SortedSet:
    """Cut every word to ``length`` characters; duplicates collapse."""
    return SortedSet(w[:length] for w in words)


class TreeDictionary(Dictionary):
    """
    Signature trie dictionary.
      - TreeDictionary.build(words) / TreeDictionary.from_source(path_or_url)
      - signature_to_words("227") -> SortedSet(["car"])
    Built once, read-only afterwards; safe to share between reader threads.
    """

    def __init__(self) -> None:
        self._root = SignatureNode()
        self.inserted = 0

    @classmethod
    def build(cls, words: Iterable[str]) -> "TreeDictionary":
        """Build from candidate words. Empty or non-alphabetic ones are skipped."""
        t0 = time.time()
        td = cls()
        skipped = 0
        for w in words:
            if not td.insert(w):
                skipped += 1
        vlog(f"Signature tree built ({td.inserted} words, {td.node_count()} nodes, {skipped} skipped)", t0)
        return td

    @classmethod
    def from_source(cls, source: str) -> "TreeDictionary":
        td = cls.build(load_words(source))
        log_with_time(f"✅ {len(td)} words", color=Fore.GREEN)
        return td

    @property
    def root(self) -> SignatureNode:
        return self._root

    def insert(self, word: str) -> bool:
        """Insert one candidate word. Returns False if it was ignored."""
        w = word.lower()
        if not w or not is_alphabetic_word(w):
            return False
        insert_word(self._root, w)
        self.inserted += 1
        return True

    def signature_to_words(self, signature: str) -> SortedSet:
        return trim_words(search_nodes(self._root, signature), len(signature))

    def node_count(self) -> int:
        """Number of nodes below the root (O(n) walk, for diagnostics)."""
        count = 0
        stack = list(self._root.children)
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children)
        return count

    def __len__(self) -> int:
        # Every word sits in the first-level node for its first digit.
        return sum(len(child.words) for child in self._root.children)

    def __contains__(self, word: str) -> bool:
        w = word.lower()
        if not w or not is_alphabetic_word(w):
            return False
        return w in search_nodes(self._root, encode(w))
