"""Action registry and its search / create / trigger collections."""

from __future__ import annotations

from typing import Any

from structlog import get_logger

from hrmless.actions import candidates, interview, organization, positions
from hrmless.actions.base import ActionDescriptor, ActionKind
from hrmless.auth import authentication_config
from hrmless.core.config import VERSION

logger = get_logger()


def build_registry(actions: list[ActionDescriptor]) -> dict[str, ActionDescriptor]:
    """
    Index actions by key.

    Raises:
        ValueError: On a duplicate key, or a search without input fields
            (the host needs at least one field to search by)
    """
    registry: dict[str, ActionDescriptor] = {}
    for action in actions:
        if action.key in registry:
            raise ValueError(f"Duplicate action key: {action.key}")
        if action.kind is ActionKind.SEARCH and not action.operation.input_fields:
            raise ValueError(f"Search action {action.key} has no input fields")
        registry[action.key] = action
    return registry


ACTIONS = build_registry(
    [
        *positions.ACTIONS,
        *candidates.ACTIONS,
        *interview.ACTIONS,
        *organization.ACTIONS,
    ]
)


def actions_of_kind(kind: ActionKind) -> dict[str, ActionDescriptor]:
    return {key: action for key, action in ACTIONS.items() if action.kind is kind}


def search_actions() -> dict[str, ActionDescriptor]:
    """Actions the host uses to find existing records."""
    return actions_of_kind(ActionKind.SEARCH)


def create_actions() -> dict[str, ActionDescriptor]:
    """Actions that create, update or delete records."""
    return actions_of_kind(ActionKind.CREATE)


def triggers() -> dict[str, ActionDescriptor]:
    """Actions feeding dynamic dropdowns and polling."""
    return actions_of_kind(ActionKind.TRIGGER)


def get_action(key: str) -> ActionDescriptor | None:
    return ACTIONS.get(key)


def app_definition() -> dict[str, Any]:
    """Complete definition handed to the host."""

    def render(actions: dict[str, ActionDescriptor]) -> dict[str, Any]:
        return {key: action.to_host_dict() for key, action in actions.items()}

    definition = {
        "version": VERSION,
        "authentication": authentication_config(),
        "beforeRequest": ["include_bearer_token"],
        "afterResponse": [],
        "resources": {},
        "searches": render(search_actions()),
        "creates": render(create_actions()),
        "triggers": render(triggers()),
    }

    logger.info(
        "app_definition_built",
        searches=len(definition["searches"]),
        creates=len(definition["creates"]),
        triggers=len(definition["triggers"]),
    )
    return definition
