import argparse
import time
from colorama import Fore

import utils
from utils import log_with_time, vlog
from signature import encode, is_alphabetic_word, is_valid_signature_query
from tree_dictionary import TreeDictionary, WordSourceUnavailable


def sigs_to_words(dictionary, signatures):
    """Yield ``(signature, words)`` for every valid signature, in order."""
    for sig in signatures:
        if not is_valid_signature_query(sig):
            log_with_time(f"Skipping invalid signature: {sig!r}", color=Fore.YELLOW)
            continue
        t0 = time.time()
        words = dictionary.signature_to_words(sig)
        vlog(f"{sig}: {len(words)} matches", t0)
        yield sig, words


def words_to_sigs(words):
    """Yield ``(word, signature)`` for every alphabetic word, in order."""
    for w in words:
        if not w or not is_alphabetic_word(w):
            log_with_time(f"Skipping non-alphabetic word: {w!r}", color=Fore.YELLOW)
            continue
        yield w, encode(w)


def build_parser():
    parser = argparse.ArgumentParser(description="Predictive text keypad dictionary")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_sigs = sub.add_parser("sigs", help="Print the words typed by each keypad signature")
    p_sigs.add_argument(
        "--dictionary",
        type=str,
        default=utils.DICTIONARY_PATH,
        help=f"Word list path or http(s) URL, one word per line (default: {utils.DICTIONARY_PATH})",
    )
    p_sigs.add_argument("signatures", nargs="+", help="Keypad signatures (digits only), e.g. 4663")

    p_words = sub.add_parser("words", help="Print the keypad signature of each word")
    p_words.add_argument("words", nargs="+", help="Alphabetic words, e.g. home")
    return parser


def run(argv=None):
    args = build_parser().parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    if args.command == "words":
        for word, sig in words_to_sigs(args.words):
            print(f"{word}: {sig}")
        return 0

    try:
        td = TreeDictionary.from_source(args.dictionary)
    except WordSourceUnavailable as e:
        log_with_time(f"Could not load dictionary: {e}", color=Fore.RED)
        return 1

    for sig, words in sigs_to_words(td, args.signatures):
        print(f"{sig}: {', '.join(words)}")
    return 0
