"""Sample results shown by the host before a live run."""

from hrmless.types.hrmless import (
    CandidateTD,
    InterviewTD,
    OrganizationTD,
    OrgSettingsTD,
    PositionOptionTD,
    PositionTD,
    QuestionTD,
)

QUESTION_SAMPLE: QuestionTD = {
    "id": "2fa85f64-5717-4561-b3fc-2c963f66afa6",
    "name": "Question 1",
    "value": "Do you have a valid driver's license?",
}

POSITION_SAMPLE: PositionTD = {
    "id": "4fa85f64-5717-4562-b2fc-2c963f66afa6",
    "name": "Delivery Driver",
    "state": "inactive",
    "department": "Delivery",
    "location": "Montana",
    "min_score": 5,
    "role_description": "Responsible for delivering packages to customers",
    "position_calender_link": "https://example.com/schedule_an_interview",
    "created_at": "2025-06-26T19:10:20.269220Z",
    "updated_at": "2025-06-30T14:40:03.161801Z",
    "agent_id": "reserved for internal use",
    "questionaire": [QUESTION_SAMPLE],
}

POSITION_OPTION_SAMPLE: PositionOptionTD = {
    "id": POSITION_SAMPLE["id"],
    "name": POSITION_SAMPLE["name"],
}

CANDIDATE_SAMPLE: CandidateTD = {
    "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
    "position_id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
    "organization_id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
    "name": "someone cool",
    "email": "user@example.com",
    "phone": "1234567890",
    "language": "en",
    "state": "passed",
    "score": 7,
    "feedback": "awesome sauce",
    "invited_at": "2025-11-16T19:31:04.622Z",
    "completed_at": "2025-11-16T19:31:04.622Z",
    "created_at": "2025-11-16T19:31:04.622Z",
    "updated_at": "2025-11-16T19:31:04.622Z",
}

CANDIDATE_CREATE_SAMPLE = {
    "name": "someone cool",
    "email": "user@example.com",
    "phone": "1234567890",
    "language": "en",
}

INTERVIEW_SAMPLE: InterviewTD = {
    "id": "00000000-1111-2222-3333-444444444444",
    "conversation_id": "abc123451234512345",
    "transcript_link": "https://example.com/transcript",
    "recording_link": "https://example.com/recording",
    "start_time": "2025-06-30T21:21:36Z",
    "end_time": "2025-06-30T21:24:13Z",
    "graded_at": "2025-06-30T23:17:31Z",
    "last_attempted_at": "2025-06-30T21:21:36Z",
    "ip_address": None,
    "location": None,
    "interview_link": "https://tiny.hrmless.io/sample",
    "status": "completed",
    "score": 7,
    "feedback": "some feedback",
    "interview_transcript": "entire transcript of the interview",
    "candidate": "00000000-1111-2222-3333-444444444444",
}

ORGANIZATION_SAMPLE: OrganizationTD = {
    "id": "000000-1111-2222-3333-44444444444",
    "name": "Acme Corp",
    "contact_email": "jane.doe@company.com",
    "contact_phone": "1234567890",
    "address": "123 Main St",
    "contact_name": "Jane Doe",
    "calendar_link": "https://my.calendar.link/schedule_a_call",
}

ORG_SETTINGS_SAMPLE: OrgSettingsTD = {
    "org": {
        "id": "000000-1111-2222-3333-44444444444",
        "name": "Acme Corp",
        "contact_email": "contact@acme.com",
        "contact_phone": "1122334455",
        "address": "123 Main St, Springfield, USA",
        "is_active": True,
        "contact_name": "Alice Johnson",
        "calendar_link": "https://calendar.example.com/acme",
    },
}

SUCCESS_SAMPLE = {"success": True}
