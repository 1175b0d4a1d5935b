"""Mock state: MockInfo, InfoRegistry and their factory."""

from mockwright.application.mock.factory import create_mock_info
from mockwright.application.mock.info import InfoRegistry, MockInfo

__all__ = [
    "InfoRegistry",
    "MockInfo",
    "create_mock_info",
]
