"""Exercises on the digits of integers and on the Fibonacci sequence."""

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the reversed value does not fit in a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if not INT32_MIN <= reversed_value <= INT32_MAX:
        return 0
    return reversed_value


def is_palindrome_number(x: int) -> bool:
    """Return True if ``x`` reads the same forwards and backwards in base 10."""
    if x < 0:
        return False
    if x % 10 == 0 and x != 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def is_armstrong(n: int) -> bool:
    """Return True if ``n`` equals the sum of its digits each raised to the digit count."""
    if n <= 0:
        return n == 0
    digits = [int(d) for d in str(n)]
    power = len(digits)
    return sum(d**power for d in digits) == n


def _check_index(n: int) -> None:
    if n < 0:
        raise ValueError(f"Fibonacci index must be non-negative, got {n}")


def fib_recursive(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain recursion (exponential time)."""
    _check_index(n)
    if n < 2:
        return n
    return fib_recursive(n - 1) + fib_recursive(n - 2)


def fib_iterative(n: int) -> int:
    """Return the ``n``-th Fibonacci number in linear time."""
    _check_index(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a