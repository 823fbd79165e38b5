"""Type definitions for HRMLESS API payloads."""

from typing import Any, NotRequired, TypedDict


class QuestionTD(TypedDict):
    """One screening question on a position."""

    id: NotRequired[str]
    name: str
    value: str


class PositionTD(TypedDict):
    """Position from /org/{org_id}/position."""

    id: str
    name: str
    state: NotRequired[str]  # "active", "draft", "inactive"
    department: NotRequired[str]
    location: NotRequired[str]
    min_score: NotRequired[int]
    role_description: NotRequired[str]
    position_calender_link: NotRequired[str]  # sic, API field name
    questionaire: NotRequired[list[QuestionTD]]  # sic
    created_at: NotRequired[str]
    updated_at: NotRequired[str]
    agent_id: NotRequired[str]


class PositionOptionTD(TypedDict):
    """Dropdown projection of a position."""

    id: str
    name: str


class CandidateTD(TypedDict):
    """Candidate as returned by the API.

    communications, hired and tags are stripped before reaching the host.
    """

    id: str
    name: str
    email: str
    phone: str
    language: str
    position_id: str
    organization_id: str
    state: NotRequired[str]
    score: NotRequired[int]
    feedback: NotRequired[str]
    invited_at: NotRequired[str]
    completed_at: NotRequired[str]
    created_at: NotRequired[str]
    updated_at: NotRequired[str]
    communications: NotRequired[dict[str, Any]]
    hired: NotRequired[bool]
    tags: NotRequired[list[str]]


class InterviewTD(TypedDict, total=False):
    """AI interview record for a candidate."""

    id: str
    conversation_id: str
    transcript_link: str
    recording_link: str
    start_time: str
    end_time: str
    graded_at: str
    last_attempted_at: str
    ip_address: str | None
    location: str | None
    interview_link: str
    status: str
    score: int
    feedback: str
    interview_transcript: str
    candidate: str


class OrganizationTD(TypedDict):
    """Organization settings."""

    id: str
    name: str
    contact_email: str
    contact_phone: str
    address: NotRequired[str]
    is_active: NotRequired[bool]
    contact_name: NotRequired[str]
    calendar_link: NotRequired[str]


class OrgSettingsTD(TypedDict):
    """Response of /org/{org_id}/settings/."""

    org: OrganizationTD


class AuthSessionTD(TypedDict):
    """Token pair handed back to the host, optionally with the org id."""

    access_token: str
    refresh_token: str
    org_id: NotRequired[str]
