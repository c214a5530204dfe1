#!/usr/bin/env python3
"""
Test script for the morse command line utility

Runs the dispatcher in-process and as a subprocess, checking output streams
and exit statuses.
"""

import os
import subprocess
import sys

import pytest

from morse import COMMANDS, main


SCRIPT = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'morse.py')


def run_cli(*args):
    """Run morse.py in a subprocess and return the completed process."""
    return subprocess.run(
        [sys.executable, SCRIPT, *args],
        capture_output=True,
        text=True
    )


def test_commands():
    """Test the registered command names."""
    assert [cmd.name for cmd in COMMANDS] == ['morse', 'text']


def test_morse_command(capsys):
    """Test encoding through the dispatcher."""
    assert main(['morse', '--text', 'HELLO WORLD']) == 0

    captured = capsys.readouterr()
    assert captured.out == ".... . .-.. .-.. --- / .-- --- .-. .-.. -..\n"
    assert captured.err == ""


def test_text_command(capsys):
    """Test decoding through the dispatcher."""
    assert main(['text', '--morse', '... --- ... / ...--']) == 0

    captured = capsys.readouterr()
    assert captured.out == "SOS 3\n"


def test_missing_flag_prints_empty_line(capsys):
    """Test that a missing flag translates the empty string."""
    assert main(['morse']) == 0
    assert capsys.readouterr().out == "\n"


def test_unsupported_character(capsys):
    """Test that an encoding error is reported on stderr."""
    assert main(['morse', '--text', '%ELLO']) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: Unsupported morse character: %\n"


def test_unsupported_sequence(capsys):
    """Test that a decoding error is reported on stderr."""
    assert main(['text', '--morse', '------- .']) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: Unsupported morse sequence: -------\n"


def test_no_arguments(capsys):
    """Test that usage is printed when no command is given."""
    assert main([]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("morse is a simple utility to work with morse code.")
    assert "text --morse \"<morse-code>\"" in captured.err


def test_top_level_help(capsys):
    """Test that -h before a command prints usage and succeeds."""
    assert main(['-h']) == 0
    assert "Commands:" in capsys.readouterr().err


def test_unknown_command(capsys):
    """Test that an unknown command prints an error and usage."""
    assert main(['beep']) == 1

    captured = capsys.readouterr()
    assert captured.err.startswith("command \"beep\" not found\n\n")
    assert "Commands:" in captured.err


def test_command_help(capsys):
    """Test that -h on a command prints its flags to stderr."""
    with pytest.raises(SystemExit) as excinfo:
        main(['text', '-h'])

    assert excinfo.value.code == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "--morse" in captured.err


def test_invalid_flag(capsys):
    """Test that an unknown flag is a usage error."""
    with pytest.raises(SystemExit) as excinfo:
        main(['morse', '--bogus'])

    assert excinfo.value.code == 2
    assert "--bogus" in capsys.readouterr().err


def test_single_dash_flags(capsys):
    """Test that flags are accepted with a single dash."""
    assert main(['morse', '-text', 'E']) == 0
    assert main(['text', '-morse=.-']) == 0
    assert capsys.readouterr().out == ".\nA\n"


def test_trailing_arguments_ignored(capsys):
    """Test that parsing stops at the first non-flag argument."""
    assert main(['morse', '--text', 'E', 'extra', '--bogus']) == 0
    assert main(['morse', '--', '--text', 'E']) == 0
    assert capsys.readouterr().out == ".\n\n"


def test_morse_value_starting_with_dash(capsys):
    """Test that a morse value such as '-.-' is not taken for a flag."""
    assert main(['text', '--morse', '-.-']) == 0
    assert main(['text', '-morse', '- ....']) == 0
    assert capsys.readouterr().out == "K\nTH\n"


def test_missing_flag_value(capsys):
    """Test that a string flag without a value is a usage error."""
    with pytest.raises(SystemExit) as excinfo:
        main(['morse', '--text'])

    assert excinfo.value.code == 2
    assert "--text" in capsys.readouterr().err


def test_unknown_top_level_flag(capsys):
    """Test that a flag before the command is a usage error."""
    assert main(['-x']) == 2

    captured = capsys.readouterr()
    assert captured.err.startswith("flag provided but not defined: -x\n")
    assert "Commands:" in captured.err


def test_double_dash_before_command(capsys):
    """Test that '--' before the command is skipped."""
    assert main(['--', 'morse', '--text', 'e']) == 0
    assert capsys.readouterr().out == ".\n"
    assert main(['--']) == 1


def test_debug_flag(capsys):
    """Test that --debug writes diagnostics to stderr."""
    assert main(['morse', '--debug', '--text', 'e']) == 0

    captured = capsys.readouterr()
    assert captured.out == ".\n"
    assert "Normalized text: 'E'" in captured.err


def test_subprocess_round_trip():
    """Test both commands as a separate process."""
    encoded = run_cli('morse', '--text', 'cq de w1abk')
    assert encoded.returncode == 0

    decoded = run_cli('text', '--morse', encoded.stdout.strip())
    assert decoded.returncode == 0
    assert decoded.stdout == "CQ DE W1ABK\n"


def test_subprocess_exit_status():
    """Test exit statuses as a separate process."""
    assert run_cli().returncode == 1
    assert run_cli('beep').returncode == 1
    assert run_cli('morse', '--text', '?').returncode == 1
    assert run_cli('text', '-h').returncode == 0


def main_tests():
    """Run all tests."""
    return pytest.main([__file__, '-v'])


if __name__ == '__main__':
    sys.exit(main_tests())
