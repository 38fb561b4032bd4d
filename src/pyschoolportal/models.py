"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Candidate:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class VotingStatus:
    ready: bool
    has_voted: bool


@dataclass(frozen=True, slots=True)
class SessionInfo:
    voter_id: str
    name: str


@dataclass(frozen=True, slots=True)
class CandidateResult:
    name: str
    votes: int


@dataclass(frozen=True, slots=True)
class LotteryWinner:
    name: str
    voter_id: str


@dataclass(frozen=True, slots=True)
class AdminStats:
    voted: int
    unvoted: int


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    id: int
    field_code: str
    field_name: str
    session_date: str
    start_time: str
    end_time: str
    max_capacity: int
    turnus: int


@dataclass(frozen=True, slots=True)
class Session:
    id: int
    field_code: str
    field_name: str
    session_date: str
    start_time: str
    end_time: str
    max_capacity: int
    turnus: int
    available_spots: int


@dataclass(frozen=True, slots=True)
class RegistrationRequest:
    session_id: int
    student_first_name: str
    student_last_name: str
    guardian_first_name: str
    guardian_last_name: str
    guardian_phone: str
    guardian_email: str


@dataclass(frozen=True, slots=True)
class RegistrationResponse:
    id: int
    session: SessionSnapshot
    student_first_name: str
    student_last_name: str
    guardian_first_name: str
    guardian_last_name: str
    guardian_phone: str
    guardian_email: str
    confirmed: bool
    created_at: str
