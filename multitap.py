#!/usr/bin/env python3
"""
Old Phone Keypad (Multi-Tap) Decoder/Encoder

Turn keypad presses from a legacy mobile phone into text, and back.

Input format:
    digits  : pressing a key N times selects its Nth symbol ("222" -> C)
    ' '     : pause between two runs on the same key ("22 2" -> BA)
    '*'     : backspace, deletes the last decoded character
    '#'     : send, everything after it is ignored

Examples:
    # Decode keypad input
    python3 multitap.py decode "44 33 555 555 666#"
    # Output: HELLO

    # Encode text
    python3 multitap.py encode "hello"
    # Output: 44 33 555 555 666#

    # Replay the built-in test cases
    python3 multitap.py selftest
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional, TextIO, Tuple


# Keypad Mapping

KEYMAP = {
    '0': ' ',
    '1': '&', '11': "'", '111': '(', '1111': ')',
    '2': 'A', '22': 'B', '222': 'C',
    '3': 'D', '33': 'E', '333': 'F',
    '4': 'G', '44': 'H', '444': 'I',
    '5': 'J', '55': 'K', '555': 'L',
    '6': 'M', '66': 'N', '666': 'O',
    '7': 'P', '77': 'Q', '777': 'R', '7777': 'S',
    '8': 'T', '88': 'U', '888': 'V',
    '9': 'W', '99': 'X', '999': 'Y', '9999': 'Z',
}

# Reverse mapping: character -> digit run
CHAR_MAP = {char: seq for seq, char in KEYMAP.items()}

DIGITS = '0123456789'
SEPARATOR = ' '
BACKSPACE = '*'
TERMINATOR = '#'


def map_sequence(sequence: str) -> Optional[str]:
    """Return the character for a digit run, or None if the run is unmapped."""
    return KEYMAP.get(sequence)


# Decoding

def decode(text: str) -> str:
    """
    Decode keypad input to text.

    Single pass with one character of lookahead. A digit run is resolved
    as soon as the next character is anything other than the same digit,
    so there is nothing left to flush at end of input. Unmapped runs and
    unknown characters are dropped silently.
    """
    output: List[str] = []
    pending = ''

    def flush():
        char = map_sequence(pending)
        if char is not None:
            output.append(char)

    for i, current in enumerate(text):
        following = text[i + 1] if i + 1 < len(text) else None

        if current == TERMINATOR:
            if pending:
                flush()
            break

        elif current == SEPARATOR:
            if pending:
                flush()
                pending = ''

        elif current == BACKSPACE:
            # Leaves `pending` alone
            if output:
                output.pop()

        elif current in DIGITS:
            pending += current
            if following != current:
                flush()
                pending = ''

    return ''.join(output)


# Encoding

def encode_char(char: str) -> str:
    """Encode single character to its digit run."""
    seq = CHAR_MAP.get(char.upper())
    if seq is None:
        raise ValueError(f"Unsupported character: '{char}'")
    return seq


def encode(text: str, separator: str = SEPARATOR, terminator: str = TERMINATOR) -> str:
    """
    Encode text to keypad input.

    Every run is followed by the separator so that runs on the same key
    stay apart. The separator may be any non-empty string without digits,
    backspace or terminator characters.
    """
    if not separator or any(c in DIGITS + BACKSPACE + TERMINATOR for c in separator):
        raise ValueError(f"Invalid separator: '{separator}'")

    runs = [encode_char(char) for char in text]
    return separator.join(runs) + terminator


# Self-test

SELFTEST_CASES = [
    ("222 2 22#", "CAB"),
    ("44 33 555 555 666#", "HELLO"),
    ("8 666 666 0 3 33#", "TOO DE"),
    ("444 33 33 9 9 0 111#", "IEEWW ("),
    ("2 22 222#", "ABC"),
    ("9 99 999 9999#", "WXYZ"),
    ("33 0 666#", "E O"),
    ("222 2*22#", "CB"),
]

CUSTOM_INPUT = "8 88777444666*664#"


def check_case(text: str, expected: str) -> Tuple[bool, str]:
    """Decode one input and build its PASS/FAIL report line."""
    actual = decode(text)
    if actual == expected:
        return True, f"PASS | Input: {text} -> Output: {actual}"
    return False, f"FAIL | Input: {text} -> Expected: {expected}, Got: {actual}"


def run_selftest(stream: Optional[TextIO] = None) -> int:
    """Print a report for every built-in case. Returns the number of failures."""
    out = stream if stream is not None else sys.stdout
    failures = 0

    print("Running multi-tap decoder tests...", file=out)
    print("-" * 30, file=out)
    for text, expected in SELFTEST_CASES:
        passed, line = check_case(text, expected)
        if not passed:
            failures += 1
        print(line, file=out)

    print("-" * 30, file=out)
    print("Custom test:", file=out)
    print(f"Input: {CUSTOM_INPUT}", file=out)
    print(f"Output: {decode(CUSTOM_INPUT)}", file=out)

    return failures


# File I/O

def read_input(path: str) -> str:
    """Read input from file or stdin."""
    if path == '-':
        return sys.stdin.read().strip('\r\n')

    try:
        return Path(path).read_text(encoding='utf-8').strip('\r\n')
    except FileNotFoundError:
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)
    except UnicodeDecodeError:
        print(f"Error: Invalid UTF-8 encoding: {path}", file=sys.stderr)
        sys.exit(1)


def write_output(content: str, path: Optional[str]) -> None:
    """Write output to file or stdout."""
    if path:
        try:
            Path(path).write_text(content + '\n', encoding='utf-8')
            print(f"Saved: {path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing file: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(content)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='multitap',
        description='Old phone keypad (multi-tap) decoder/encoder',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    subparsers = parser.add_subparsers(dest='command', required=True,
                                       help='Operation mode')

    # Decode command
    decode_parser = subparsers.add_parser('decode',
                                          help='Decode keypad input to text')
    decode_parser.add_argument('sequence', nargs='?',
                               help='Keypad input (or use -i for file)')
    decode_parser.add_argument('-i', '--input',
                               help='Input file (use - for stdin)')
    decode_parser.add_argument('-o', '--output',
                               help='Output file (default: stdout)')

    # Encode command
    encode_parser = subparsers.add_parser('encode',
                                          help='Encode text to keypad input')
    encode_parser.add_argument('text', nargs='?',
                               help='Text to encode (or use -i for file)')
    encode_parser.add_argument('-i', '--input',
                               help='Input file (use - for stdin)')
    encode_parser.add_argument('-o', '--output',
                               help='Output file (default: stdout)')
    encode_parser.add_argument('-s', '--separator', default=SEPARATOR,
                               help='Separator between runs (default: space)')

    # Self-test command
    subparsers.add_parser('selftest',
                          help='Run the built-in decoder test cases')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == 'selftest':
            return 1 if run_selftest() else 0

        if args.command == 'encode':
            if args.input:
                input_data = read_input(args.input)
            elif args.text is not None:
                input_data = args.text
            else:
                parser.error('Provide text or use -i for file input')

            result = encode(input_data, args.separator)

        else:  # decode
            if args.input:
                input_data = read_input(args.input)
            elif args.sequence is not None:
                input_data = args.sequence
            else:
                parser.error('Provide sequence or use -i for file input')

            result = decode(input_data)

        write_output(result, args.output)

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
