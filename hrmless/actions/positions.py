"""Position actions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from hrmless.actions import samples
from hrmless.actions.base import (
    ActionDescriptor,
    ActionDisplay,
    ActionKind,
    ActionOperation,
    ResultShape,
    perform_request,
    position_id_field,
)
from hrmless.models import position
from hrmless.types.host import BundleTD

if TYPE_CHECKING:
    from hrmless.clients.hrmless import HrmlessClient

POSITIONS_PATH = "/org/{org_id}/position"
POSITION_PATH = "/org/{org_id}/position/{position_id}"

POSITION_NOT_FOUND = "Positions not found. Please verify the position ID."
POSITIONS_NOT_FOUND = "Positions not found. Please verify the organization ID."


async def list_position_options(client: HrmlessClient, bundle: BundleTD) -> Any:
    """Positions reduced to {id, name} for dropdowns."""
    return await perform_request(
        client,
        bundle,
        method="GET",
        path=POSITIONS_PATH,
        shape=ResultShape.OPTIONS,
        not_found=None,
    )


async def list_positions(client: HrmlessClient, bundle: BundleTD) -> Any:
    return await perform_request(
        client,
        bundle,
        method="GET",
        path=POSITIONS_PATH,
        shape=ResultShape.COLLECTION,
        not_found=POSITIONS_NOT_FOUND,
    )


async def read_position(client: HrmlessClient, bundle: BundleTD) -> Any:
    return await perform_request(
        client,
        bundle,
        method="GET",
        path=POSITION_PATH,
        shape=ResultShape.SEARCH_ITEM,
        not_found=POSITION_NOT_FOUND,
    )


async def update_position(client: HrmlessClient, bundle: BundleTD) -> Any:
    return await perform_request(
        client,
        bundle,
        method="PUT",
        path=POSITION_PATH,
        shape=ResultShape.OBJECT,
        not_found=POSITION_NOT_FOUND,
        body=position.mapping(bundle),
    )


POSITION_OPTIONS = ActionDescriptor(
    key="orgPositionAction",
    noun="Position",
    kind=ActionKind.TRIGGER,
    display=ActionDisplay(
        label="List Positions",
        description="Get All Positions",
        hidden=True,
    ),
    operation=ActionOperation(
        input_fields=[],
        output_fields=[
            {"key": "id", "label": "Position ID"},
            {"key": "name", "label": "Position Name"},
        ],
        perform=list_position_options,
        sample=samples.POSITION_OPTION_SAMPLE,
    ),
)

POSITION_LIST = ActionDescriptor(
    key="orgPositionList",
    noun="Position",
    kind=ActionKind.TRIGGER,
    display=ActionDisplay(
        label="Get Positions",
        description="Get All Positions",
    ),
    operation=ActionOperation(
        input_fields=[],
        output_fields=position.fields("", False),
        perform=list_positions,
        sample=samples.POSITION_SAMPLE,
    ),
)

POSITION_READ = ActionDescriptor(
    key="orgPositionRead",
    noun="Position",
    kind=ActionKind.SEARCH,
    display=ActionDisplay(
        label="Get a Position",
        description="Gets a single position by its ID.",
    ),
    operation=ActionOperation(
        input_fields=[position_id_field()],
        output_fields=position.fields("", False),
        perform=read_position,
        sample=samples.POSITION_SAMPLE,
    ),
)

POSITION_UPDATE = ActionDescriptor(
    key="orgPositionUpdate",
    noun="Position",
    kind=ActionKind.CREATE,
    display=ActionDisplay(
        label="Update Position by ID",
        description="Update/Partial-Update Position Object By ID",
    ),
    operation=ActionOperation(
        input_fields=[position_id_field(), *position.fields()],
        output_fields=position.fields("", False),
        perform=update_position,
        sample=samples.POSITION_SAMPLE,
        clean_input_data=True,
    ),
)

ACTIONS = [POSITION_OPTIONS, POSITION_LIST, POSITION_READ, POSITION_UPDATE]
