"""Interview field schema and payload mapping."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hrmless.types.host import FieldDescriptorTD
from hrmless.utils.fields import build_field, build_key_and_label, input_value

# (name, label, type, help text)
INTERVIEW_FIELDS: tuple[tuple[str, str, str, str], ...] = (
    (
        "conversation_id",
        "Conversation ID",
        "string",
        "INTERNAL USE: The unique identifier of the conversation associated with the interview.",
    ),
    ("transcript_link", "Transcript link", "string", "The link to the transcript of the interview."),
    ("recording_link", "Recording link", "string", "The link to the recording of the interview."),
    ("start_time", "Start time", "string", "The start time of the interview."),
    ("end_time", "End time", "string", "The end time of the interview."),
    ("graded_at", "Graded at", "string", "The time when the interview was graded."),
    (
        "last_attempted_at",
        "Last attempted at",
        "string",
        "The time when the interview was last attempted.",
    ),
    (
        "ip_address",
        "IP address",
        "string",
        "INTERNAL USE: The IP address from which the interview was conducted "
        "(used for GEO load balancing).",
    ),
    (
        "location",
        "Location",
        "string",
        "INTERNAL USE: The general location where the interview took place "
        "(used for GEO load balancing).",
    ),
    ("interview_link", "Interview link", "string", "The link to the interview."),
    ("status", "Status", "string", "The status of the interview."),
    ("score", "Score", "integer", "The score of the interview."),
    ("feedback", "Feedback", "string", "The feedback for the interview."),
    ("interview_transcript", "Interview transcript", "string", "The transcript of the interview."),
    (
        "candidate",
        "Candidate ID",
        "string",
        "The unique identifier of the candidate associated with the interview.",
    ),
)


def fields(
    prefix: str = "", is_input: bool = True, is_array_child: bool = False
) -> list[FieldDescriptorTD]:
    key_prefix, label_prefix = build_key_and_label(prefix, is_input, is_array_child)

    result = [
        build_field(
            f"{key_prefix}id",
            f"[{label_prefix}id]",
            is_input=is_input,
            help_text="The unique identifier of the interview.",
        )
    ]
    result.extend(
        build_field(
            f"{key_prefix}{name}",
            label,
            is_input=is_input,
            field_type=field_type,
            help_text=help_text,
        )
        for name, label, field_type, help_text in INTERVIEW_FIELDS
    )
    return result


def mapping(bundle: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    key_prefix, _ = build_key_and_label(prefix)
    payload = {"id": input_value(bundle, f"{key_prefix}id")}
    for name, *_ in INTERVIEW_FIELDS:
        payload[name] = input_value(bundle, f"{key_prefix}{name}")
    return payload
