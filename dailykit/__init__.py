"""Small everyday command-line tools: a temperature converter, a calculator, a guessing game, a word counter, a BMI calculator, palindrome, Fibonacci and prime checkers, and a to-do list."""

__version__ = "0.1.0"