#!/usr/bin/env python3
"""
Main CLI entry point for charcodec
"""

import argparse
import logging
import sys
from pathlib import Path
from ..config import ConfigError, load_config
from ..core import VOCABULARY_TYPES, VocabularyBrowser, display_char, format_ids
from ..core import parse_id_list, token_breakdown
from ..data import DEFAULT_CODEC


def encode_text(args, config):
    """Encode text into token ids"""
    wrap_special = config['codec']['wrap_special'] and not args.no_special
    tokens = DEFAULT_CODEC.encode(args.text, wrap_special)

    print(format_ids(tokens, config['display']['separator']))
    print(f"Tokens: {len(tokens)}")

    if args.breakdown or config['display']['show_breakdown']:
        print()
        for info in token_breakdown(args.text):
            print(f"{display_char(info.char):>3}  #{info.id:<3} {info.type}")


def decode_ids(args, config):
    """Decode a separated list of token ids"""
    ids = parse_id_list(args.ids, config['parsing']['separator'])
    text = DEFAULT_CODEC.decode(ids)

    print(f'"{text}"')
    print(f"Valid tokens: {len(ids)}")
    print(f"Characters: {len(text)}")


def show_vocabulary(args, config):
    """List vocabulary entries"""
    browser = VocabularyBrowser()
    entries = browser.filter(args.type, args.search or '')

    for entry in entries:
        print(f"#{entry.id:<3} {display_char(entry.char):<6} {entry.type}")

    if not entries:
        print("No tokens found matching your search criteria.")
    print(f"Showing {len(entries)} of {DEFAULT_CODEC.vocabulary_size()} tokens")


def show_stats(args, config):
    """Print vocabulary counts per type"""
    stats = VocabularyBrowser().stats()

    print("Vocabulary statistics")
    print("=" * 30)
    for vocab_type in VOCABULARY_TYPES:
        if vocab_type == 'other' and not stats[vocab_type]:
            continue
        print(f"{vocab_type.capitalize():<12} {stats[vocab_type]}")
    print(f"{'Total':<12} {stats['total']}")


def _override(value, default):
    return default if value is None else value


def build_dataset(args, config):
    """Cut a text file into training windows and report the result"""
    from ..data import EncodedTextDataset, decode_tensor

    if not Path(args.input).is_file():
        print(f"Error: Input file {args.input} not found")
        sys.exit(1)

    with open(args.input, 'r', encoding='utf-8') as f:
        texts = [line.rstrip('\n') for line in f if line.strip()]

    dataset_config = config['dataset']
    dataset = EncodedTextDataset(
        texts,
        context_window=_override(args.context_window, dataset_config['context_window']),
        stride=_override(args.stride, dataset_config['stride']),
        wrap_special=config['codec']['wrap_special']
    )

    print(f"Texts: {len(texts)}")
    print(f"Samples: {len(dataset)}")
    if len(dataset):
        inputs, targets = dataset[0]
        print(f"First input:  \"{decode_tensor(inputs)}\"")
        print(f"First target: \"{decode_tensor(targets)}\"")


def interactive_mode(args, config):
    """Encode or decode lines typed by the user"""
    print("charcodec Interactive Mode")
    print("=" * 30)
    print("Enter text to encode, or ':d 55, 56' to decode (Ctrl+C to exit)")
    print()

    wrap_special = config['codec']['wrap_special']
    separator = config['display']['separator']

    try:
        while True:
            line = input("Input: ").strip()
            if not line:
                continue

            if line == ':d' or line.startswith(':d '):
                ids = parse_id_list(line[2:], config['parsing']['separator'])
                print(f'Output: "{DEFAULT_CODEC.decode(ids)}"')
            else:
                print(f"Output: {format_ids(DEFAULT_CODEC.encode(line, wrap_special), separator)}")
            print()
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        prog='charcodec',
        description='Character-level text codec with a fixed 74-token vocabulary'
    )
    parser.add_argument('--config', type=str,
                        help='Path to YAML configuration file')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Encode command
    encode_parser = subparsers.add_parser('encode', help='Encode text into token ids')
    encode_parser.add_argument('text', type=str, help='Text to encode')
    encode_parser.add_argument('--no-special', action='store_true',
                               help='Do not add <BOS>/<EOS> tokens')
    encode_parser.add_argument('--breakdown', action='store_true',
                               help='Show each token with its id and type')
    encode_parser.set_defaults(func=encode_text)

    # Decode command
    decode_parser = subparsers.add_parser('decode', help='Decode token ids into text')
    decode_parser.add_argument('ids', type=str,
                               help='Separated token ids, e.g. "0, 55, 56, 1"')
    decode_parser.set_defaults(func=decode_ids)

    # Vocabulary command
    vocab_parser = subparsers.add_parser('vocab', help='Browse the vocabulary')
    vocab_parser.add_argument('--type', type=str, default='all',
                              choices=('all',) + VOCABULARY_TYPES,
                              help='Only show tokens of this type')
    vocab_parser.add_argument('--search', type=str,
                              help='Character or token id to search for')
    vocab_parser.set_defaults(func=show_vocabulary)

    # Stats command
    stats_parser = subparsers.add_parser('stats', help='Show vocabulary statistics')
    stats_parser.set_defaults(func=show_stats)

    # Dataset command
    dataset_parser = subparsers.add_parser('dataset', help='Cut a text file into training windows')
    dataset_parser.add_argument('--input', type=str, required=True,
                                help='Input text file, one text per line')
    dataset_parser.add_argument('--context-window', type=int,
                                help='Window length (overrides config)')
    dataset_parser.add_argument('--stride', type=int,
                                help='Window stride (overrides config)')
    dataset_parser.set_defaults(func=build_dataset)

    # Interactive command
    interactive_parser = subparsers.add_parser('interactive', help='Interactive encode/decode')
    interactive_parser.set_defaults(func=interactive_mode)

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ConfigError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    # Execute command
    try:
        args.func(args, config)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
