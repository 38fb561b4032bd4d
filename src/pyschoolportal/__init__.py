"""pySchoolPortal package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .client import Client
from .exceptions import (
    DomainError,
    NetworkError,
    PySchoolPortalError,
    ResponseDecodeError,
    ValidationError,
)
from .models import (
    AdminStats,
    Candidate,
    CandidateResult,
    LotteryWinner,
    RegistrationRequest,
    RegistrationResponse,
    Session,
    SessionInfo,
    SessionSnapshot,
    VotingStatus,
)
from .service.registration import RegistrationService
from .service.voting import ChannelState, StatusChannel, VotingService
from .sink import DirectoryFileSink, FileSink

try:
    __version__ = version("pyschoolportal")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "AdminStats",
    "Candidate",
    "CandidateResult",
    "ChannelState",
    "Client",
    "DirectoryFileSink",
    "DomainError",
    "FileSink",
    "LotteryWinner",
    "NetworkError",
    "PySchoolPortalError",
    "RegistrationRequest",
    "RegistrationResponse",
    "RegistrationService",
    "ResponseDecodeError",
    "Session",
    "SessionInfo",
    "SessionSnapshot",
    "StatusChannel",
    "ValidationError",
    "VotingService",
    "VotingStatus",
    "__version__",
]
