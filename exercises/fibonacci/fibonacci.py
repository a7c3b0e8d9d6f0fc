# fibonacci.py
# Python implementation of the recursive Fibonacci exercise
import sys

# Configuration - indices printed, inclusive
FIRST_INDEX = 1
LAST_INDEX = 9

def fib(index):
    """Compute the index-th Fibonacci number (fib(1) == fib(2) == 1) recursively.

    No memoization: a call for index n makes 2 * fib(n) - 1 calls in total.
    """
    if index < 1:
        raise ValueError(f"Fibonacci index must be at least 1, got {index}")
    if index == 1 or index == 2:
        return 1
    return fib(index - 1) + fib(index - 2)

def describe(index):
    return f"The value of the number {index} in the Fibonacci sequence is: {fib(index)}."

def main():
    for number in range(FIRST_INDEX, LAST_INDEX + 1):
        print(describe(number))
    return 0

if __name__ == "__main__":
    sys.exit(main())
