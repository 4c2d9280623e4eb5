"""Body mass index from weight and height."""

from __future__ import annotations

import math


def compute_bmi(weight: float, height: float) -> float:
    """Weight in kilograms divided by the square of height in metres."""
    denominator = height * height
    if denominator == 0:
        if weight == 0 or math.isnan(weight):
            return math.nan
        return math.copysign(math.inf, weight)
    return weight / denominator


def classify(bmi: float) -> str:
    """The verdict for a BMI value."""
    if bmi < 18.5:
        return "You are underweight."
    if 18.5 < bmi < 25.0:
        return "You have a normal weight."
    if 25.0 <= bmi < 30.0:
        return "You are overweight."
    return "You are obese."


def _read_number() -> float | None:
    try:
        text = input().strip()
    except EOFError:
        return None
    if "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Ask for weight and height and print the BMI and its verdict."""
    print("Welcome to the BMI Calculator!")
    print("Please enter your weight in kilograms:")
    weight = _read_number()
    if weight is None:
        print("Invalid input for weight. Please enter a valid number.")
        return 0
    print("Please enter your height in meters:")
    height = _read_number()
    if height is None:
        print("Invalid input for height. Please enter a valid number.")
        return 0
    bmi = compute_bmi(weight, height)
    print(f"Your BMI is: {bmi:.2f}")
    print(classify(bmi))
    print("Thank you for using the BMI Calculator!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())