"""
Command-line front end for the codec.

Usage:
    b64codec encode <file|->   Encode the file's bytes, print the text
    b64codec decode <file|->   Decode the file's text, write the raw bytes

"-" reads from standard input. Exit status is 0 on success, 1 when the
input cannot be read or is rejected by the decoder and 2 on a bad command
line.
"""

import sys

from b64codec import codec, errors
from b64codec.utils.logger import Event, Level, Logger

USAGE = "Correct args usage: b64codec <encode|decode> <file|->"


def _read_input(path, stdin):
    if path == '-':
        return stdin.read()
    with open(path, 'rb') as file:
        return file.read()


def main(argv=None, stdin=None, stdout=None, stderr=None) -> int:
    """
    Run one encode or decode command.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
        stdin, stdout: Binary streams (default: the process' std streams)
        stderr: Text stream for error messages (default: sys.stderr)

    Returns:
        int: Process exit status
    """
    argv = sys.argv[1:] if argv is None else argv
    stdin = stdin or sys.stdin.buffer
    stdout = stdout or sys.stdout.buffer
    stderr = stderr or sys.stderr

    if len(argv) != 2 or argv[0] not in ('encode', 'decode'):
        print(USAGE, file=stderr)
        return 2

    logger = Logger()
    logger.configure_logger()

    command, path = argv
    try:
        data = _read_input(path, stdin)
    except OSError as err:
        logger.log_event(Level.LEVEL_ERROR, Event.READ_FAILED, message=str(err))
        print(f"error: {err}", file=stderr)
        return 1

    if command == 'encode':
        encoded = codec.encode(data)
        stdout.write(encoded.encode('ascii') + b'\n')
        logger.log_event(Level.LEVEL_INFO, Event.ENCODE, len(data), encoded)
        return 0

    try:
        decoded = codec.decode(data)
    except errors.DecodingError as err:
        logger.log_event(Level.LEVEL_ERROR, Event.DECODE_FAILED, len(data), err.message)
        print(f"error: {err.kind.value}: {err.message}", file=stderr)
        return 1

    stdout.write(decoded)
    logger.log_event(Level.LEVEL_INFO, Event.DECODE, len(data), f"{len(decoded)} bytes")
    return 0


def main_entry():
    """Console script entry point."""
    sys.exit(main())
