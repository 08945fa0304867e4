"""Defines the easy integer exercises.

Every function here takes a single integer and returns an integer or a
boolean. Exercises that only make sense for non-negative input raise
ValueError; digit and bit exercises work on the absolute value instead.
"""


def _require_non_negative(name: str, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name} requires a non-negative integer. Got {n}.")


def fibonacci(n: int) -> int:
    """Returns the n-th Fibonacci number, with fibonacci(0) == 0.

    Args:
        n: A non-negative index into the sequence.

    Returns:
        The n-th Fibonacci number.

    Raises:
        ValueError: If n is negative.
    """
    _require_non_negative("fibonacci", n)

    if n == 0:
        return 0

    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def factorial(n: int) -> int:
    """Returns n!, with 0! == 1.

    Raises:
        ValueError: If n is negative.
    """
    _require_non_negative("factorial", n)

    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def is_prime(n: int) -> bool:
    """Checks primality by trial division up to the square root of n.

    Values below 2 are never prime.
    """
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0:
        return False

    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


def sum_digits(n: int) -> int:
    """Returns the sum of the decimal digits of abs(n)."""
    n = abs(n)
    total = 0
    while n > 0:
        total += n % 10
        n //= 10
    return total


def _reverse_digits(n: int) -> int:
    reversed_n = 0
    while n > 0:
        reversed_n = reversed_n * 10 + n % 10
        n //= 10
    return reversed_n


def reverse_int(n: int) -> int:
    """Reverses the decimal digits of n, keeping its sign.

    Trailing zeros are lost, so reverse_int(120) == 21 and the round trip
    only holds for values without trailing zeros.

    Args:
        n: The integer to reverse.

    Returns:
        The reversed integer, negative if n is negative.
    """
    sign = -1 if n < 0 else 1
    return sign * _reverse_digits(abs(n))


def is_palindrome_number(n: int) -> bool:
    """Checks whether abs(n) reads the same in both directions."""
    n = abs(n)
    return _reverse_digits(n) == n


def count_set_bits(n: int) -> int:
    """Counts the 1-bits in the binary representation of abs(n)."""
    n = abs(n)
    count = 0
    while n:
        count += n & 1
        n >>= 1
    return count


def pow2(n: int) -> int:
    """Returns 2**n computed by repeated doubling.

    Raises:
        ValueError: If n is negative.
    """
    _require_non_negative("pow2", n)

    result = 1
    for _ in range(n):
        result *= 2
    return result


def smallest_divisor(n: int) -> int:
    """Returns the smallest divisor of n greater than 1.

    Args:
        n: An integer of at least 2.

    Returns:
        The smallest divisor, which is n itself when n is prime.

    Raises:
        ValueError: If n is less than 2.
    """
    if n < 2:
        raise ValueError(f"smallest_divisor requires n >= 2. Got {n}.")

    if n % 2 == 0:
        return 2

    i = 3
    while i * i <= n:
        if n % i == 0:
            return i
        i += 2
    return n
