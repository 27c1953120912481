"""The closed set of scoring models offered by the Perspective API.

See https://github.com/conversationai/perspectiveapi/blob/master/api_reference.md
for a description of each model.
"""

from enum import Enum

from perspective.analysis.exceptions import InvalidModelError


class Model(str, Enum):
    """A Perspective scoring model; the value is its wire name.

    Declaration order is the catalog order.
    """

    TOXICITY = "TOXICITY"
    SEVERE_TOXICITY = "SEVERE_TOXICITY"
    TOXICITY_FAST = "TOXICITY_FAST"
    ATTACK_ON_AUTHOR = "ATTACK_ON_AUTHOR"
    ATTACK_ON_COMMENTER = "ATTACK_ON_COMMENTER"
    INCOHERENT = "INCOHERENT"
    INFLAMMATORY = "INFLAMMATORY"
    LIKELY_TO_REJECT = "LIKELY_TO_REJECT"
    OBSCENE = "OBSCENE"
    SPAM = "SPAM"
    UNSUBSTANTIAL = "UNSUBSTANTIAL"


def require_model(value: object) -> Model:
    """Return ``value`` unchanged if it is a catalog model.

    Plain strings equal to a wire name are rejected; use ``from_wire_name``
    to convert those.

    Raises:
        InvalidModelError: if ``value`` is not a ``Model``.
    """
    if not isinstance(value, Model):
        raise InvalidModelError(f"{value!r} is not a valid Perspective model")
    return value


def to_wire_name(model: Model) -> str:
    """Return the uppercase API identifier for ``model``."""
    return require_model(model).value


def from_wire_name(name: str) -> Model:
    """Resolve an API identifier (e.g. from configuration) to its model.

    Raises:
        InvalidModelError: if ``name`` is not a known wire name.
    """
    try:
        return Model(name)
    except ValueError as exc:
        supported = [m.value for m in Model]
        raise InvalidModelError(
            f"Unknown Perspective model '{name}'. Choose from: {supported}"
        ) from exc
