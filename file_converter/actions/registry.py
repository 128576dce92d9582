"""Named, remote-callable actions.

An action couples an input model with a handler. Calling it checks for a
signed-in user, then validates the raw payload, so handlers only ever see
well-formed input from an authenticated caller.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Type

from pydantic import BaseModel, ValidationError

from file_converter.actions.context import ActionContext, require_user
from file_converter.actions.errors import ActionError, BAD_REQUEST

Handler = Callable[[Any, ActionContext], Dict[str, Any]]


def format_validation_error(errors: Sequence[Dict[str, Any]]) -> str:
    """Render pydantic error dicts as `"<loc>: <message>"` joined with `; `."""
    parts = []
    for err in errors:
        if err["type"] == "value_error" and "error" in err.get("ctx", {}):
            message = str(err["ctx"]["error"])
        else:
            message = err["msg"]
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {message}" if loc else message)
    return "; ".join(parts)


@dataclass
class Action:
    name: str
    handler: Handler
    input_model: Optional[Type[BaseModel]] = None

    def parse(self, payload: Any) -> Optional[BaseModel]:
        if payload is not None and not isinstance(payload, dict):
            raise ActionError(BAD_REQUEST, "Input must be a JSON object.")
        if self.input_model is None:
            return None
        try:
            return self.input_model.model_validate(payload or {})
        except ValidationError as e:
            raise ActionError(BAD_REQUEST, format_validation_error(e.errors())) from e

    def __call__(self, payload: Any, context: ActionContext) -> Dict[str, Any]:
        # unauthenticated callers never reach input validation
        require_user(context)
        return self.handler(self.parse(payload), context)


def define_action(name: str, input_model: Optional[Type[BaseModel]] = None):
    """Decorator turning a handler function into an :class:`Action`."""

    def wrap(handler: Handler) -> Action:
        return Action(name=name, handler=handler, input_model=input_model)

    return wrap
