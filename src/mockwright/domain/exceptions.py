"""Domain exceptions: all public errors of mockwright.

Hexagonal architecture: all exceptions visible to users defined in domain.
Application/Infrastructure raise these, never define their own public exceptions.

Construction-time errors (InvalidTargetError, MultipleBaseTypesError,
UnsupportedTypeConstraintError) abort mock class assembly.
Call-time errors (FrozenMockError, NeverReturnInvokedError,
NoParentImplementationError) abort only the current intercepted call.
"""


class MockwrightError(Exception):
    """Base for all mockwright error exceptions.

    Allows: except MockwrightError to catch all library errors.
    """


class InvalidTargetError(MockwrightError, TypeError):
    """Target type cannot be mocked.

    Raised when the target does not exist, is final, is readonly,
    or cannot be subclassed by the generated mock class.

    Attributes:
        target: Target name (or repr of the offending object).
        reason: Why the target was rejected.
    """

    def __init__(self, target: str, reason: str) -> None:
        """Initialize with target name and reason."""
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot mock {target!r}: {reason}")


class MultipleBaseTypesError(MockwrightError, TypeError):
    """More than one concrete class requested for the same mock.

    Only one concrete base is allowed; use capabilities (ABCs, Protocols)
    for the rest.

    Attributes:
        first: Name of the first concrete target.
        second: Name of the conflicting concrete target.
    """

    def __init__(self, first: str, second: str) -> None:
        """Initialize with both concrete target names."""
        self.first = first
        self.second = second
        super().__init__(
            f"You cannot use two classes in the same mock: {first}, {second}. "
            "Use capabilities (ABCs or Protocols) instead."
        )


class UnsupportedTypeConstraintError(MockwrightError, TypeError):
    """Annotation cannot be represented on the synthesized surface.

    Raised at synthesis time, never at call time.

    Attributes:
        owner: Qualified name of the method carrying the annotation.
        annotation: The offending annotation object.
    """

    def __init__(self, owner: str, annotation: object) -> None:
        """Initialize with owner name and annotation."""
        self.owner = owner
        self.annotation = annotation
        super().__init__(f"{owner}: unsupported type constraint {annotation!r}")


class FrozenMockError(MockwrightError, RuntimeError):
    """Call made on a mock marked frozen.

    The call is rejected before it is recorded.

    Attributes:
        mock_name: Name of the mocked target.
        method: Method that was called.
    """

    def __init__(self, mock_name: str, method: str) -> None:
        """Initialize with mock name and method."""
        self.mock_name = mock_name
        self.method = method
        super().__init__(f"Received unexpected call {method}() on frozen mock of {mock_name}")


class NeverReturnInvokedError(MockwrightError, RuntimeError):
    """Method declared as never returning was invoked.

    Attributes:
        method: Qualified method name.
    """

    def __init__(self, method: str) -> None:
        """Initialize with method name."""
        self.method = method
        super().__init__(f"{method}() is declared to never return, but it was invoked")


class NoParentImplementationError(MockwrightError, TypeError):
    """Parent delegation requested for a method without a real implementation.

    Abstract methods and Protocol members have nothing to delegate to.

    Attributes:
        method: Qualified method name.
    """

    def __init__(self, method: str) -> None:
        """Initialize with method name."""
        self.method = method
        super().__init__(f"{method}() has no real implementation to delegate to")


class InvalidAnswerError(MockwrightError, TypeError):
    """Answer configured with an unusable value.

    Raised for non-callable callbacks and non-exception raise targets.

    Attributes:
        expected: Description of expected value.
        got: Actual type received.
    """

    def __init__(self, *, expected: str, got: type) -> None:
        """Initialize with expected description and actual type."""
        self.expected = expected
        self.got = got
        super().__init__(f"{expected}, got {got.__name__}")


class NotAMockError(MockwrightError, TypeError):
    """Object passed to the stubbing/verification API is not a generated mock.

    Attributes:
        got: Actual type received.
    """

    def __init__(self, got: type) -> None:
        """Initialize with actual type."""
        self.got = got
        super().__init__(f"expected a mockwright mock, got {got.__name__}")


class VerificationError(MockwrightError, AssertionError):
    """Recorded calls do not satisfy a verification.

    Inherits AssertionError so test runners report it as a failure.

    Attributes:
        expectation: Human readable description of what was expected.
        history: Rendered call history of the mock.
    """

    def __init__(self, expectation: str, history: str) -> None:
        """Initialize with expectation and rendered history."""
        self.expectation = expectation
        self.history = history
        super().__init__(f"{expectation}\n{history}")
