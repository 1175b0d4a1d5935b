"""mockwright: runtime test-double generation.

Generates mock classes that subclass the requested targets, record every
call and answer through programmable stubs.

Example:
    from mockwright import mock, verify, when

    repo = mock(Repository)
    when(repo).get(42).then_return(user)

    assert service(repo).load(42) is user
    verify(repo).get(42)
"""

from mockwright.application.assembly.marker import MockObject, is_mock
from mockwright.domain.exceptions import (
    FrozenMockError,
    InvalidAnswerError,
    InvalidTargetError,
    MockwrightError,
    MultipleBaseTypesError,
    NeverReturnInvokedError,
    NoParentImplementationError,
    NotAMockError,
    UnsupportedTypeConstraintError,
    VerificationError,
)
from mockwright.domain.model.configuration import MockwrightConfig
from mockwright.domain.model.enums import DefaultAnswerMode
from mockwright.domain.model.recorded_call import CallArguments, RecordedCall
from mockwright.domain.model.ref import Ref
from mockwright.presentation.api import (
    Facade,
    any_parameters,
    anything,
    calls,
    dynamic_calls,
    equal_to,
    get_info,
    mock,
    mock_class,
    partial_mock,
    reset,
    reset_static_info,
    verify,
    verify_method,
    verify_no_further_interaction,
    verify_no_interaction,
    verify_static,
    when,
    when_method,
    when_static,
)

__version__ = "0.1.0"

__all__ = [
    "CallArguments",
    "DefaultAnswerMode",
    "Facade",
    "FrozenMockError",
    "InvalidAnswerError",
    "InvalidTargetError",
    "MockObject",
    "MockwrightConfig",
    "MockwrightError",
    "MultipleBaseTypesError",
    "NeverReturnInvokedError",
    "NoParentImplementationError",
    "NotAMockError",
    "RecordedCall",
    "Ref",
    "UnsupportedTypeConstraintError",
    "VerificationError",
    "__version__",
    "any_parameters",
    "anything",
    "calls",
    "dynamic_calls",
    "equal_to",
    "get_info",
    "is_mock",
    "mock",
    "mock_class",
    "partial_mock",
    "reset",
    "reset_static_info",
    "verify",
    "verify_method",
    "verify_no_further_interaction",
    "verify_no_interaction",
    "verify_static",
    "when",
    "when_method",
    "when_static",
]
