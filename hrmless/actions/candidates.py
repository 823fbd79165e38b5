"""Candidate actions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from hrmless.actions import samples
from hrmless.actions.base import (
    CANDIDATE_INTERNAL_FIELDS,
    ActionDescriptor,
    ActionDisplay,
    ActionKind,
    ActionOperation,
    ResultShape,
    candidate_id_field,
    perform_request,
    position_id_field,
)
from hrmless.models import candidate, candidate_create, candidate_update
from hrmless.types.host import BundleTD

if TYPE_CHECKING:
    from hrmless.clients.hrmless import HrmlessClient

POSITION_CANDIDATES_PATH = "/org/{org_id}/positions/{position_id}/"
CANDIDATE_PATH = "/org/{org_id}/positions/{position_id}/candidates/{candidate_id}/"

CANDIDATE_NOT_FOUND = "Candidate not found. Please verify the candidate ID and position ID."


async def list_candidates(client: HrmlessClient, bundle: BundleTD) -> Any:
    return await perform_request(
        client,
        bundle,
        method="GET",
        path=POSITION_CANDIDATES_PATH,
        shape=ResultShape.COLLECTION,
        not_found="Candidates not found. Please verify the position ID.",
        strip=CANDIDATE_INTERNAL_FIELDS,
    )


async def create_candidate(client: HrmlessClient, bundle: BundleTD) -> Any:
    """The API answers a create with a list holding the new candidate."""
    return await perform_request(
        client,
        bundle,
        method="POST",
        path=POSITION_CANDIDATES_PATH,
        shape=ResultShape.FIRST_ITEM,
        not_found=(
            "Candidates not found. Please verify the position ID you are trying "
            "to create the candidate under"
        ),
        body=candidate_create.mapping(bundle),
        strip=CANDIDATE_INTERNAL_FIELDS,
    )


async def read_candidate(client: HrmlessClient, bundle: BundleTD) -> Any:
    return await perform_request(
        client,
        bundle,
        method="GET",
        path=CANDIDATE_PATH,
        shape=ResultShape.SEARCH_ITEM,
        not_found=CANDIDATE_NOT_FOUND,
        strip=CANDIDATE_INTERNAL_FIELDS,
    )


async def update_candidate(client: HrmlessClient, bundle: BundleTD) -> Any:
    return await perform_request(
        client,
        bundle,
        method="PUT",
        path=CANDIDATE_PATH,
        shape=ResultShape.OBJECT,
        not_found=CANDIDATE_NOT_FOUND,
        body=candidate_update.mapping(bundle),
        strip=CANDIDATE_INTERNAL_FIELDS,
    )


async def delete_candidate(client: HrmlessClient, bundle: BundleTD) -> Any:
    return await perform_request(
        client,
        bundle,
        method="DELETE",
        path=CANDIDATE_PATH,
        shape=ResultShape.SUCCESS,
        not_found=CANDIDATE_NOT_FOUND,
    )


CANDIDATES_LIST = ActionDescriptor(
    key="orgPositionsRead",
    noun="Candidates",
    kind=ActionKind.SEARCH,
    display=ActionDisplay(
        label="Get All Candidates in a Position",
        description="Gets a list of candidates for a specific position.",
    ),
    operation=ActionOperation(
        input_fields=[position_id_field()],
        output_fields=candidate.fields("", False),
        perform=list_candidates,
        sample=samples.CANDIDATE_SAMPLE,
    ),
)

CANDIDATE_CREATE = ActionDescriptor(
    key="orgPositionsCreate",
    noun="Candidates",
    kind=ActionKind.CREATE,
    display=ActionDisplay(
        label="Create a Candidate",
        description="Create/Add a new candidate to a position.",
    ),
    operation=ActionOperation(
        input_fields=[position_id_field(), *candidate_create.fields()],
        output_fields=candidate.fields("", False),
        perform=create_candidate,
        sample=samples.CANDIDATE_CREATE_SAMPLE,
    ),
)

CANDIDATE_READ = ActionDescriptor(
    key="orgPositionsCandidatesRead",
    noun="Candidates",
    kind=ActionKind.SEARCH,
    display=ActionDisplay(
        label="Get a Candidates Details",
        description="Gets details of a specific candidate by their ID.",
    ),
    operation=ActionOperation(
        input_fields=[position_id_field(), candidate_id_field()],
        output_fields=candidate.fields("", False),
        perform=read_candidate,
        sample=samples.CANDIDATE_SAMPLE,
    ),
)

CANDIDATE_UPDATE = ActionDescriptor(
    key="orgPositionsCandidatesUpdate",
    noun="Candidates",
    kind=ActionKind.CREATE,
    display=ActionDisplay(
        label="Update a Candidate",
        description="Updates details of a specific candidate by their ID.",
    ),
    operation=ActionOperation(
        input_fields=[position_id_field(), candidate_id_field(), *candidate_update.fields()],
        output_fields=candidate.fields("", False),
        perform=update_candidate,
        sample=samples.CANDIDATE_CREATE_SAMPLE,
    ),
)

CANDIDATE_DELETE = ActionDescriptor(
    key="orgPositionsCandidatesDelete",
    noun="Candidates",
    kind=ActionKind.CREATE,
    display=ActionDisplay(
        label="Delete a Candidate",
        description="Deletes a specific candidate by their ID.",
    ),
    operation=ActionOperation(
        input_fields=[position_id_field(), candidate_id_field()],
        output_fields=[],
        perform=delete_candidate,
        sample=samples.SUCCESS_SAMPLE,
    ),
)

ACTIONS = [
    CANDIDATES_LIST,
    CANDIDATE_CREATE,
    CANDIDATE_READ,
    CANDIDATE_UPDATE,
    CANDIDATE_DELETE,
]
