"""Data models for drug-browser."""

from drug_browser.models.model_drug import (
    DrugDetail,
    DrugDocument,
    DrugListItem,
    DrugListPage,
    DrugProduct,
    SearchQuery,
)
from drug_browser.models.model_fda import (
    ActiveIngredient,
    DrugApplication,
    DrugsFDASearch,
    Product,
    SearchOutcome,
    Submission,
    SubmissionDocument,
)

__all__ = [
    "ActiveIngredient",
    "DrugApplication",
    "DrugDetail",
    "DrugDocument",
    "DrugListItem",
    "DrugListPage",
    "DrugProduct",
    "DrugsFDASearch",
    "Product",
    "SearchOutcome",
    "SearchQuery",
    "Submission",
    "SubmissionDocument",
]
