"""Checks whether a line of text reads the same backwards."""

from __future__ import annotations


def clean_string(text: str) -> str:
    """Keep only alphanumeric characters, with ASCII letters lowered."""
    return "".join(
        char.lower() if char.isascii() else char for char in text if char.isalnum()
    )


def is_palindrome(text: str) -> bool:
    """True if ``text`` equals its reverse."""
    return text == text[::-1]


def main(argv: list[str] | None = None) -> int:
    """Read a line and say whether it is a palindrome."""
    print("🗒️ Welcome to the Palindrome Checker!")
    print("Please enter a string to check if it is a palindrome:")
    try:
        line = input()
    except EOFError:
        line = ""

    cleaned = clean_string(line)
    if not cleaned:
        print("❌ Please enter a valid, non-empty string.")
        return 0
    if is_palindrome(cleaned):
        print(f"✅ The string '{line.strip()}' is a palindrome.")
    else:
        print(f"❌ The string '{line.strip()}' is not a palindrome.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())