#!/usr/bin/env python3
"""
Morse Code Translator

This module converts text into morse code and morse code back into text. It
holds the symbol table, splits morse phrases into words and codes, and looks
each unit up in the table.
"""

import re
import sys
from types import MappingProxyType
from typing import List


# Morse code lookup table (character -> code)
CHAR_TO_MORSE = MappingProxyType({
    'A': '.-', 'B': '-...', 'C': '-.-.', 'D': '-..', 'E': '.',
    'F': '..-.', 'G': '--.', 'H': '....', 'I': '..', 'J': '.---',
    'K': '-.-', 'L': '.-..', 'M': '--', 'N': '-.', 'O': '---',
    'P': '.--.', 'Q': '--.-', 'R': '.-.', 'S': '...', 'T': '-',
    'U': '..-', 'V': '...-', 'W': '.--', 'X': '-..-', 'Y': '-.--',
    'Z': '--..',
    '1': '.----', '2': '..---', '3': '...--', '4': '....-', '5': '.....',
    '6': '-....', '7': '--...', '8': '---..', '9': '----.', '0': '-----',
    ' ': '/',
})

# Reverse lookup table (code -> character)
MORSE_CODE_DICT = MappingProxyType(
    {code: char for char, code in CHAR_TO_MORSE.items()}
)

SPACE = ' '

WHITESPACE_RE = re.compile(r'[\t\n\f\r ]+')
WORD_RE = re.compile(r'[.\t\n\f\r \-]+\w*', re.ASCII)
CODE_RE = re.compile(r'[.\-]+\w*', re.ASCII)


class MorseError(Exception):
    """Base class for translation failures."""


class UnsupportedCharacter(MorseError):
    """Raised when text contains a character with no morse code."""

    def __init__(self, char: str):
        super().__init__(f"Unsupported morse character: {char}")
        self.char = char


class UnsupportedMorseSequence(MorseError):
    """Raised when a morse code has no matching character."""

    def __init__(self, sequence: str, message: str = "Unsupported morse sequence"):
        super().__init__(f"{message}: {sequence}")
        self.sequence = sequence


def get_morse_words(morse_phrase: str) -> List[str]:
    """
    Split a morse phrase into morse words.

    The '/' word separator is outside the matched character class, so it
    ends one word and the next match starts after it.

    Args:
        morse_phrase: Morse phrase, e.g. '.... .. / - .... . .-. .'

    Returns:
        List of morse words, each trimmed of surrounding spaces
    """
    return [match.group(0).strip(' ') for match in WORD_RE.finditer(morse_phrase)]


def get_morse_codes(morse_word: str) -> List[str]:
    """
    Split a morse word into the codes of its characters.

    Args:
        morse_word: Morse word, e.g. '.... ..'

    Returns:
        List of morse codes in order
    """
    return [match.group(0).strip(' ') for match in CODE_RE.finditer(morse_word)]


def upper_each(text: str) -> str:
    """
    Upper-case text one character at a time.

    Characters whose upper-case form is longer than one character ('ß',
    'ﬁ') are kept as they are, so the output has the same length as the
    input.
    """
    return ''.join(char if len(char.upper()) != 1 else char.upper() for char in text)


def morse_code_to_char(morse_code: str) -> str:
    """Look up the character for a single morse code."""
    try:
        return MORSE_CODE_DICT[morse_code]
    except KeyError:
        raise UnsupportedMorseSequence(morse_code, "Unsupported morse code") from None


class MorseTranslator:
    """
    Translates between text and morse code.

    Both directions stop at the first unit missing from the symbol table
    and raise instead of returning a partial result.
    """

    def __init__(self, debug: bool = False):
        """
        Initialize the translator.

        Args:
            debug: Enable debug output to stderr
        """
        self.debug = debug

    def to_morse(self, text: str) -> str:
        """
        Convert text into morse code.

        Input is upper-cased and every whitespace run becomes a single
        space, which encodes as '/'.

        Args:
            text: Text to convert

        Returns:
            Space separated morse codes, one per character

        Raises:
            UnsupportedCharacter: If a character has no morse code
        """
        normalized = WHITESPACE_RE.sub(SPACE, upper_each(text))
        if self.debug:
            print(f"Normalized text: {normalized!r}", file=sys.stderr)

        morse = []
        for char in normalized:
            code = CHAR_TO_MORSE.get(char)
            if code is None:
                if self.debug:
                    print(f"  Unsupported character: {char!r}", file=sys.stderr)
                raise UnsupportedCharacter(char)
            morse.append(code + SPACE)

        return ''.join(morse).rstrip(SPACE)

    def from_morse(self, morse: str) -> str:
        """
        Convert morse code into text.

        Words are joined with a single space and the characters of a word
        are concatenated.

        Args:
            morse: Morse phrase to convert

        Returns:
            Decoded text

        Raises:
            UnsupportedMorseSequence: If a code has no matching character
        """
        morse_words = get_morse_words(morse)
        if self.debug:
            print(f"Morse words: {morse_words}", file=sys.stderr)

        text = []
        for word_idx, morse_word in enumerate(morse_words):
            morse_codes = get_morse_codes(morse_word)
            if self.debug:
                print(f"  Word {word_idx}: {morse_codes}", file=sys.stderr)

            for morse_code in morse_codes:
                try:
                    text.append(morse_code_to_char(morse_code))
                except UnsupportedMorseSequence:
                    raise UnsupportedMorseSequence(morse_code) from None

            if word_idx != len(morse_words) - 1:
                text.append(SPACE)

        return ''.join(text)


_default_translator = MorseTranslator()


def to_morse(text: str) -> str:
    """Convert text into morse code with the default translator."""
    return _default_translator.to_morse(text)


def from_morse(morse: str) -> str:
    """Convert morse code into text with the default translator."""
    return _default_translator.from_morse(morse)
