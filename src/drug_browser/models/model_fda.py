"""openFDA drugs@FDA (application) data models.

Field names mirror the upstream JSON keys. Every field is optional because
the upstream omits whatever it does not know about an application.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class _UpstreamModel(BaseModel):
    """Base for upstream payload models: ignore unknown keys, coerce null lists."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def coerce_nones(cls, values: dict) -> dict:
        if not isinstance(values, dict):
            return values
        for field_name, field_info in cls.model_fields.items():
            if (
                field_name in values
                and values[field_name] is None
                and field_info.default is not None
            ):
                values = {**values, field_name: field_info.get_default(call_default_factory=True)}
        return values


class ActiveIngredient(_UpstreamModel):
    """Named substance within a product, optionally with a strength."""

    name: str | None = None
    strength: str | None = None


class Product(_UpstreamModel):
    """One marketed product of an application."""

    brand_name: str | None = None
    generic_name: str | None = None
    route: str | None = None
    dosage_form: str | None = None
    marketing_status: str | None = None
    product_number: str | None = None
    te_code: str | None = None
    active_ingredients: list[ActiveIngredient] = []


class SubmissionDocument(_UpstreamModel):
    """Dated regulatory artifact (label, letter, review) attached to a submission."""

    id: str | None = None
    url: str | None = None
    date: str | None = None  # YYYYMMDD
    type: str | None = None


class Submission(_UpstreamModel):
    """Regulatory submission with its attached documents."""

    submission_type: str | None = None
    submission_number: str | None = None
    submission_status: str | None = None
    submission_status_date: str | None = None
    application_docs: list[SubmissionDocument] = []


class DrugApplication(_UpstreamModel):
    """One drug application entry returned by the drugs@FDA endpoint."""

    application_number: str | None = None
    sponsor_name: str | None = None
    products: list[Product] = []
    submissions: list[Submission] = []


class SearchOutcome(str, Enum):
    """Whether the upstream search matched anything."""

    MATCHED = "matched"
    NO_MATCH = "no_match"


class DrugsFDASearch(BaseModel):
    """Tagged result of one drugs@FDA search.

    A ``NO_MATCH`` outcome is what the upstream's 404 maps to: an expected,
    empty answer rather than a failure.
    """

    model_config = ConfigDict(frozen=True)

    outcome: SearchOutcome
    results: list[DrugApplication] = []
    total: int = 0

    @classmethod
    def no_match(cls) -> "DrugsFDASearch":
        return cls(outcome=SearchOutcome.NO_MATCH)

    @property
    def is_empty(self) -> bool:
        return self.outcome is SearchOutcome.NO_MATCH or not self.results
