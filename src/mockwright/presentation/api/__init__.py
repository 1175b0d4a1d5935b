"""Public API for creating, stubbing and verifying mocks.

Public exports:
    Facade: Mock creation with its own cache and registry
    mock/partial_mock/mock_class: Mock creation on the default facade
    when/when_static/when_method: Stubbing
    verify/verify_static/verify_method/verify_no_interaction/
    verify_no_further_interaction: Verification
    anything/any_parameters/equal_to: Matchers
"""

from mockwright.presentation.api.dsl import (
    PendingStub,
    StubBuilder,
    Verifier,
    any_parameters,
    anything,
    calls,
    dynamic_calls,
    equal_to,
    get_facade,
    get_info,
    mock,
    mock_class,
    partial_mock,
    reset,
    reset_static_info,
    set_facade,
    verify,
    verify_method,
    verify_no_further_interaction,
    verify_no_interaction,
    verify_static,
    when,
    when_method,
    when_static,
)
from mockwright.presentation.api.facade import Facade

__all__ = [
    "Facade",
    "PendingStub",
    "StubBuilder",
    "Verifier",
    "any_parameters",
    "anything",
    "calls",
    "dynamic_calls",
    "equal_to",
    "get_facade",
    "get_info",
    "mock",
    "mock_class",
    "partial_mock",
    "reset",
    "reset_static_info",
    "set_facade",
    "verify",
    "verify_method",
    "verify_no_further_interaction",
    "verify_no_interaction",
    "verify_static",
    "when",
    "when_method",
    "when_static",
]
