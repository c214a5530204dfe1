#!/usr/bin/env python3
"""
Demo script for the Morse Code Translator

Runs sample phrases through the command line utility in both directions.
"""

import subprocess
import sys


def demo_phrase(text, description=""):
    """Demonstrate encoding and decoding of a phrase."""
    print("\n" + "=" * 70)
    print(f"  {description}")
    print("=" * 70)
    print(f"Input: \"{text}\"\n")

    print("1. Text -> Morse:")
    encode_result = subprocess.run(
        [sys.executable, 'morse.py', 'morse', '--text', text],
        capture_output=True,
        text=True
    )

    if encode_result.returncode != 0:
        print(f"   ✗ {encode_result.stderr.strip()}")
        return

    morse = encode_result.stdout.strip()
    print(f"   ✓ {morse}\n")

    print("2. Morse -> Text:")
    decode_result = subprocess.run(
        [sys.executable, 'morse.py', 'text', '--morse', morse],
        capture_output=True,
        text=True
    )

    if decode_result.returncode != 0:
        print(f"   ✗ {decode_result.stderr.strip()}")
        return

    print(f"   ✓ \"{decode_result.stdout.strip()}\"")
    print()


def main():
    """Run demo."""
    print("\n" + "*" * 70)
    print("*" + " " * 68 + "*")
    print("*" + "  Morse Code Translator - Demo".center(68) + "*")
    print("*" + " " * 68 + "*")
    print("*" * 70)

    demos = [
        ('HELLO WORLD', 'Sample 1: Plain phrase'),
        ('cq cq de n4lsj', 'Sample 2: CQ call, lower case'),
        ('73?', 'Sample 3: Unsupported character'),
    ]

    for text, description in demos:
        demo_phrase(text, description)

    print("=" * 70)
    print("  Demo Complete!")
    print("=" * 70)
    print("\nTo translate your own text:")
    print("  python morse.py morse --text \"your text\"")
    print("  python morse.py text --morse \"-.-- --- ..- .-.\"")
    print()


if __name__ == '__main__':
    main()
