"""Interview actions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from hrmless.actions import samples
from hrmless.actions.base import (
    ActionDescriptor,
    ActionDisplay,
    ActionKind,
    ActionOperation,
    ResultShape,
    candidate_id_field,
    perform_request,
    position_id_field,
)
from hrmless.models import interview
from hrmless.types.host import BundleTD

if TYPE_CHECKING:
    from hrmless.clients.hrmless import HrmlessClient

INTERVIEW_PATH = "/org/{org_id}/positions/{position_id}/candidates/{candidate_id}/interview/"


async def read_interview(client: HrmlessClient, bundle: BundleTD) -> Any:
    """The API returns a one-element list.

    Like every search, the result stays a list: the host gets `[interview]`,
    not the bare interview record.
    """
    return await perform_request(
        client,
        bundle,
        method="GET",
        path=INTERVIEW_PATH,
        shape=ResultShape.SEARCH_ITEM,
        not_found="Candidate not found. Please verify the position ID and Candidate ID",
    )


INTERVIEW_READ = ActionDescriptor(
    key="orgPositionsCandidatesInterview",
    noun="Candidates",
    kind=ActionKind.SEARCH,
    display=ActionDisplay(
        label="Get Interview Details",
        description="Gets interview details for a specific candidate.",
    ),
    operation=ActionOperation(
        input_fields=[position_id_field(), candidate_id_field()],
        output_fields=interview.fields("", False),
        perform=read_interview,
        sample=samples.INTERVIEW_SAMPLE,
    ),
)

ACTIONS = [INTERVIEW_READ]
