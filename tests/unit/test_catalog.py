import pytest

from perspective.analysis.catalog import Model, from_wire_name, require_model, to_wire_name
from perspective.analysis.exceptions import InvalidModelError


class TestToWireName:
    @pytest.mark.parametrize(
        ("model", "expected"),
        [
            (Model.TOXICITY, "TOXICITY"),
            (Model.SEVERE_TOXICITY, "SEVERE_TOXICITY"),
            (Model.TOXICITY_FAST, "TOXICITY_FAST"),
            (Model.ATTACK_ON_AUTHOR, "ATTACK_ON_AUTHOR"),
            (Model.ATTACK_ON_COMMENTER, "ATTACK_ON_COMMENTER"),
            (Model.INCOHERENT, "INCOHERENT"),
            (Model.INFLAMMATORY, "INFLAMMATORY"),
            (Model.LIKELY_TO_REJECT, "LIKELY_TO_REJECT"),
            (Model.OBSCENE, "OBSCENE"),
            (Model.SPAM, "SPAM"),
            (Model.UNSUBSTANTIAL, "UNSUBSTANTIAL"),
        ],
    )
    def test_wire_names(self, model: Model, expected: str) -> None:
        assert to_wire_name(model) == expected

    def test_rejects_plain_string(self) -> None:
        with pytest.raises(InvalidModelError, match="not a valid Perspective model"):
            to_wire_name("TOXICITY")  # type: ignore[arg-type]

    def test_rejects_none(self) -> None:
        with pytest.raises(InvalidModelError):
            to_wire_name(None)  # type: ignore[arg-type]

    def test_invalid_model_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            to_wire_name(42)  # type: ignore[arg-type]


class TestFromWireName:
    def test_every_model_resolves_back(self) -> None:
        for model in Model:
            assert from_wire_name(to_wire_name(model)) is model

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(InvalidModelError, match="Unknown Perspective model 'PROFANITY'"):
            from_wire_name("PROFANITY")

    def test_lowercase_name_is_not_accepted(self) -> None:
        with pytest.raises(InvalidModelError):
            from_wire_name("toxicity")


class TestRequireModel:
    def test_returns_model(self) -> None:
        assert require_model(Model.SPAM) is Model.SPAM

    def test_catalog_has_eleven_models(self) -> None:
        assert len(list(Model)) == 11
