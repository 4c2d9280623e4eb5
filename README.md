# dailykit

A collection of small command-line tools for everyday tasks. Each tool is a
separate command, and each one can also be used from Python.

## Installation

```
pip install .
```

## Commands

| Command | What it does |
| --- | --- |
| `dailykit-hello` | Prints a welcome greeting. |
| `dailykit-temperature` | Converts a temperature between Celsius, Fahrenheit and Kelvin (menu options 1–6). |
| `dailykit-calculator` | Evaluates one expression of the form `number operator number`, e.g. `5 + 3`. |
| `dailykit-guess` | A guessing game: find a number from 1 to 100 in 5 tries, then choose whether to play again. |
| `dailykit-wordcount FILE` | Prints the word, line and non-whitespace character counts of a UTF-8 text file. |
| `dailykit-bmi` | Computes body mass index from weight (kg) and height (m) and classifies it. |
| `dailykit-palindrome` | Checks whether a line reads the same backwards, ignoring anything that is not a letter or digit and the case of ASCII letters. |
| `dailykit-fibonacci` | Prints the first *n* Fibonacci numbers. |
| `dailykit-primes` | Checks whether a number is prime and lists every prime up to it. |
| `dailykit-todo` | A menu-driven to-do list kept in `tasks.json` in the current directory. |

All commands except `dailykit-hello` and `dailykit-wordcount` are interactive
and read their input from standard input:

```
$ dailykit-fibonacci
Fibonacci Sequence Generator
Enter the number of terms in the Fibonacci sequence you want to generate:
6
✅ Fibonacci sequence with (6 terms): [0, 1, 1, 2, 3, 5]
```

Notes on individual commands:

- `dailykit-calculator` accepts the operators `+`, `*`, `/` and `_` (underscore)
  for subtraction; `-` is rejected as an invalid operator. Dividing by zero is
  reported as an error.
- `dailykit-todo` saves the list when you choose option 5 or when standard
  input ends. A missing or malformed `tasks.json` starts an empty list.
- `dailykit-fibonacci` reports an error when a requested term would not fit
  in 64 bits.

## Using it from Python

```python
from dailykit.temperature import Conversion, celsius_to_fahrenheit, convert
from dailykit.calculator import evaluate
from dailykit.fibonacci import generate_fibonacci
from dailykit.primes import is_prime, primes_up_to
from dailykit.palindrome import is_palindrome, clean_string
from dailykit.bmi import compute_bmi, classify
from dailykit.word_counter import count_words, count_lines, count_characters

celsius_to_fahrenheit(100.0)                      # 212.0
convert(Conversion.CELSIUS_TO_KELVIN, 0.0)        # 273.15
evaluate("6 * 7")                                 # 42.0
generate_fibonacci(6)                             # [0, 1, 1, 2, 3, 5]
is_prime(97)                                      # True
primes_up_to(10)                                  # [2, 3, 5, 7]
is_palindrome(clean_string("A man, a plan, a canal: Panama"))  # True
classify(compute_bmi(70.0, 1.75))                 # 'You have a normal weight.'
count_words("one two three")                      # 3
```

`convert` raises `ValueError` for a choice outside 1–6.
`evaluate` raises `CalculatorError` (a `ValueError`) for malformed
expressions, unknown operators and division by zero.
`generate_fibonacci` raises `OverflowError` when a term would exceed 64 bits.

The guessing game can be driven one guess at a time:

```python
from dailykit.guessing import GuessingGame, Outcome

game = GuessingGame(secret=42)
game.guess(10)      # Outcome.TOO_SMALL
game.guess(42)      # Outcome.CORRECT
game.won            # True
```

`dailykit.guessing.play(input_func, output_func, rng)` runs the full game loop
with your own input and output functions and a `random.Random`-like object.

The to-do list can be used without the menu:

```python
from dailykit.todo import TodoList, load_tasks, save_tasks

todo = load_tasks("tasks.json")
task = todo.add("Buy milk")
todo.complete(task.id)
print(todo.render())
save_tasks(todo, "tasks.json")
```

`TodoList.complete` and `TodoList.delete` raise `TaskNotFoundError` when no
task has the given id. `TodoList.to_json` and `TodoList.from_json` convert the
list to and from a JSON array of `{"id", "description", "completed"}` objects.

## Running the tests

```
pip install ".[test]"
pytest
```