"""Conversion preset actions: create, update, delete, get, list."""

import logging
from datetime import datetime, timezone

from file_converter.actions.context import ActionContext, require_user
from file_converter.actions.errors import ActionError, NOT_FOUND
from file_converter.actions.registry import define_action
from file_converter.actions.schemas import CreatePresetInput, IdInput, UpdatePresetInput
from file_converter.db.tables import ConversionPreset
from file_converter.storage.base import ConversionStore

logger = logging.getLogger(__name__)


def _preset_not_found() -> ActionError:
    return ActionError(NOT_FOUND, "Conversion preset not found.")


def get_owned_preset(store: ConversionStore, preset_id: str, user_id: str) -> ConversionPreset:
    """Fetch a preset matching both id and owner.

    Raises NOT_FOUND whether the preset is missing or belongs to someone
    else; callers cannot tell the two apart.
    """
    preset = store.get_preset(preset_id, user_id)
    if preset is None:
        raise _preset_not_found()
    return preset


@define_action("createPreset", CreatePresetInput)
def create_preset(data: CreatePresetInput, context: ActionContext):
    user = require_user(context)

    preset = ConversionPreset(
        **data.model_dump(exclude_unset=True),
        user_id=user.id,
        created_at=datetime.now(timezone.utc),
    )
    preset = context.store.insert_preset(preset)
    logger.info("Created preset %s for user %s", preset.id, user.id)
    return {"success": True, "data": {"preset": preset}}


@define_action("updatePreset", UpdatePresetInput)
def update_preset(data: UpdatePresetInput, context: ActionContext):
    user = require_user(context)

    changes = data.changes()
    preset = context.store.update_preset(data.id, user.id, changes)
    if preset is None:
        logger.info("Preset %s not found for user %s", data.id, user.id)
        raise _preset_not_found()

    logger.info("Updated preset %s fields=%s", preset.id, sorted(changes))
    return {"success": True, "data": {"preset": preset}}


@define_action("deletePreset", IdInput)
def delete_preset(data: IdInput, context: ActionContext):
    user = require_user(context)

    # owner-scoped delete; zero rows covers missing, foreign and already-deleted
    if not context.store.delete_preset(data.id, user.id):
        logger.info("Preset %s not found for user %s", data.id, user.id)
        raise _preset_not_found()

    logger.info("Deleted preset %s", data.id)
    return {"success": True}


@define_action("getPreset", IdInput)
def get_preset(data: IdInput, context: ActionContext):
    user = require_user(context)
    preset = get_owned_preset(context.store, data.id, user.id)
    return {"success": True, "data": {"preset": preset}}


@define_action("listPresets")
def list_presets(_data, context: ActionContext):
    user = require_user(context)
    presets = context.store.list_presets(user.id)
    return {"success": True, "data": {"items": presets, "total": len(presets)}}
