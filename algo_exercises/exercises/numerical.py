"""Defines the numerical exercises: quadrature, modular powers and roots."""


def integrate(a: float, b: float, n: int) -> float:
    """Approximates the integral of x**2 over [a, b] by the trapezoid rule.

    Args:
        a: Lower bound.
        b: Upper bound.
        n: Number of sub-intervals of width (b - a) / n.

    Returns:
        The composite trapezoid estimate.

    Raises:
        ValueError: If n is not positive.
    """
    if n <= 0:
        raise ValueError(f"Number of steps must be positive. Got {n}.")

    h = (b - a) / n
    total = 0.5 * (a * a + b * b)
    for i in range(1, n):
        x = a + i * h
        total += x * x
    return total * h


def modpow(base: int, exp: int, mod: int) -> int:
    """Returns (base ** exp) % mod using exponentiation by squaring.

    Every intermediate product is reduced modulo mod, and the result always
    lies in [0, mod).

    Raises:
        ValueError: If exp is negative or mod is less than 1.
    """
    if exp < 0:
        raise ValueError(f"Exponent must be non-negative. Got {exp}.")
    if mod < 1:
        raise ValueError(f"Modulus must be at least 1. Got {mod}.")

    result = 1 % mod
    base %= mod
    while exp > 0:
        if exp % 2 == 1:
            result = (result * base) % mod
        base = (base * base) % mod
        exp //= 2
    return result


def sqrt_newton(x: float, iterations: int) -> float:
    """Approximates the square root of x with Newton-Raphson steps.

    Starts from x / 2 and applies guess = (guess + x / guess) / 2 the given
    number of times.

    Args:
        x: The value whose root is wanted.
        iterations: How many Newton steps to take.

    Returns:
        The approximation, 0.0 for x == 0, or -1.0 when x is negative.

    Raises:
        ValueError: If iterations is negative.
    """
    if iterations < 0:
        raise ValueError(f"Iterations must be non-negative. Got {iterations}.")
    if x < 0:
        return -1.0
    if x == 0:
        return 0.0

    guess = x / 2.0
    for _ in range(iterations):
        guess = (guess + x / guess) / 2.0
    return guess
