"""Organization settings actions."""

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
)
from hrmless.models import org_settings, organization
from hrmless.types.host import BundleTD

if TYPE_CHECKING:
    from hrmless.clients.hrmless import HrmlessClient

SETTINGS_PATH = "/org/{org_id}/settings/"

ORGANIZATION_NOT_FOUND = "Organization not found. Please verify the organization ID."


async def read_settings(client: HrmlessClient, bundle: BundleTD) -> Any:
    """Settings come back as one object; triggers hand the host a list."""
    return await perform_request(
        client,
        bundle,
        method="GET",
        path=SETTINGS_PATH,
        shape=ResultShape.COLLECTION,
        not_found=ORGANIZATION_NOT_FOUND,
    )


async def update_settings(client: HrmlessClient, bundle: BundleTD) -> Any:
    return await perform_request(
        client,
        bundle,
        method="PUT",
        path=SETTINGS_PATH,
        shape=ResultShape.OBJECT,
        not_found=ORGANIZATION_NOT_FOUND,
        body=organization.mapping(bundle),
    )


SETTINGS_LIST = ActionDescriptor(
    key="orgSettingsList",
    noun="Organization",
    kind=ActionKind.TRIGGER,
    display=ActionDisplay(
        label="Get Org Settings",
        description="Get all settings for your organization",
    ),
    operation=ActionOperation(
        input_fields=[],
        output_fields=org_settings.fields("", False),
        perform=read_settings,
        sample=samples.ORG_SETTINGS_SAMPLE,
    ),
)

SETTINGS_UPDATE = ActionDescriptor(
    key="orgSettingsUpdate",
    noun="Organization",
    kind=ActionKind.CREATE,
    display=ActionDisplay(
        label="Update Org Settings",
        description="Update organization settings including name, contact info, and calendar link",
    ),
    operation=ActionOperation(
        input_fields=organization.fields(),
        output_fields=organization.fields("", False),
        perform=update_settings,
        sample=samples.ORGANIZATION_SAMPLE,
    ),
)

ACTIONS = [SETTINGS_LIST, SETTINGS_UPDATE]
