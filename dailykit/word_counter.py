"""Word, line and character statistics for a text file."""

from __future__ import annotations

import sys


def count_words(content: str) -> int:
    """Number of whitespace-separated words."""
    return len(content.split())


def count_lines(content: str) -> int:
    """Number of lines; a final newline does not start another line."""
    if not content:
        return 0
    return content.count("\n") + (0 if content.endswith("\n") else 1)


def count_characters(content: str) -> int:
    """Number of characters that are not whitespace."""
    return sum(1 for char in content if not char.isspace())


def main(argv: list[str] | None = None) -> int:
    """Print the statistics of the file named by the only argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("❌ Usage: word_counter <file_path>")
        return 0

    file_path = args[0]
    print(f"📂 Reading file: {file_path}")
    try:
        handle = open(file_path, encoding="utf-8", newline="")
    except OSError as err:
        print(f"❌ Error opening file: {err}")
        return 0
    with handle:
        try:
            content = handle.read()
        except (OSError, UnicodeDecodeError) as err:
            print(f"❌ Error reading file: {err}")
            return 0

    print("📊 Statistics:")
    print(f"   Words: {count_words(content)}")
    print(f"   Lines: {count_lines(content)}")
    print(f"   Characters: {count_characters(content)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())