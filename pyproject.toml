[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dailykit"
version = "0.1.0"
description = "Small everyday command-line tools: a temperature converter, a calculator, a guessing game, a word counter, a BMI calculator, palindrome, Fibonacci and prime checkers, and a to-do list."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cli",
    "calculator",
    "temperature",
    "bmi",
    "todo",
    "primes",
    "fibonacci",
    "palindrome",
    "word-count",
    "guessing-game",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dailykit-hello = "dailykit.hello:main"
dailykit-temperature = "dailykit.temperature:main"
dailykit-calculator = "dailykit.calculator:main"
dailykit-guess = "dailykit.guessing:main"
dailykit-wordcount = "dailykit.word_counter:main"
dailykit-bmi = "dailykit.bmi:main"
dailykit-palindrome = "dailykit.palindrome:main"
dailykit-fibonacci = "dailykit.fibonacci:main"
dailykit-primes = "dailykit.primes:main"
dailykit-todo = "dailykit.todo:main"

[tool.hatch.build.targets.wheel]
packages = ["dailykit"]

[tool.pytest.ini_options]
addopts = "-ra"
