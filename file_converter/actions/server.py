"""Registry of every remote-callable action, keyed by action name."""

from typing import Dict

from file_converter.actions import jobs, presets
from file_converter.actions.registry import Action

server: Dict[str, Action] = {
    action.name: action
    for action in (
        jobs.create_conversion_job,
        jobs.update_conversion_job,
        jobs.get_conversion_job,
        jobs.list_conversion_jobs,
        presets.create_preset,
        presets.update_preset,
        presets.delete_preset,
        presets.get_preset,
        presets.list_presets,
    )
}
