class NumrootError(Exception):
    """Base class for every error raised by numroot."""


class InvalidArgumentError(NumrootError, ValueError):
    """An argument is outside the supported domain."""


class NegativeRadicandError(InvalidArgumentError):
    def __init__(self, radicand: int):
        super().__init__(f"Negative radicand values are not supported: {radicand}")
        self.radicand = radicand


class NegativeDegreeError(InvalidArgumentError):
    def __init__(self, degree: int):
        super().__init__(f"Negative degree values are not supported: {degree}")
        self.degree = degree


class AmbiguousExponentError(InvalidArgumentError):
    """Raised for a zero degree: every non-zero value raised to 0 is 1."""

    def __init__(self, degree: int = 0):
        super().__init__("The value of the degree leads to an ambiguous result")
        self.degree = degree


class NegativeExponentError(InvalidArgumentError):
    def __init__(self, exponent: int):
        super().__init__(f"Negative exponent values are not supported: {exponent}")
        self.exponent = exponent


class InternalError(NumrootError, RuntimeError):
    """A logic defect, not a recoverable condition."""


class UnsupportedAlgorithmError(InternalError):
    def __init__(self, radicand: int, degree: int):
        super().__init__(
            f"No root extraction algorithm selected for degree {degree} "
            f"(radicand of {radicand.bit_length()} bits)"
        )
        self.degree = degree
