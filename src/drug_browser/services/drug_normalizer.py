"""Reshape drugs@FDA application records into the public view models.

Pure functions only: every view is derived fresh from the upstream models
and no field absence ever raises.
"""

import math
import re

from drug_browser.constants import (
    STRENGTH_SEPARATOR,
    SUBSTANCE_SEPARATOR,
    UNKNOWN_DRUG_ID,
)
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
    SubmissionDocument,
)

_STRENGTH_NUMBER = re.compile(r"(\d+(?:\.\d+)?)")
_RAW_DATE = re.compile(r"^\d{8}$")


# -- Field helpers ------------------------------------------------------------


def substance_names(ingredients: list[ActiveIngredient]) -> list[str]:
    """Ingredient names in upstream order, unnamed ingredients dropped."""
    return [ai.name for ai in ingredients if ai.name]


def join_strengths(ingredients: list[ActiveIngredient]) -> str | None:
    """Join ingredient strengths with " / "; None when no ingredient has one."""
    strengths = [ai.strength for ai in ingredients if ai.strength]
    return STRENGTH_SEPARATOR.join(strengths) if strengths else None


def parse_strength(strength: str | None) -> float:
    """First numeric token of a strength string, e.g. "2.5ML" -> 2.5.

    Strings without a number (and None) map to +inf so they sort last.
    Only the first token counts, whatever the units of later ingredients.
    """
    if not strength:
        return math.inf
    match = _STRENGTH_NUMBER.search(strength)
    return float(match.group(1)) if match else math.inf


def format_document_date(raw: str | None) -> str | None:
    """YYYYMMDD -> YYYY-MM-DD; any other shape -> None."""
    if raw is None or not _RAW_DATE.match(raw):
        return None
    return f"{raw[0:4]}-{raw[4:6]}-{raw[6:8]}"


def _document_sort_key(doc: SubmissionDocument) -> str:
    # Lexicographic order on YYYYMMDD is chronological; anything else sorts as "".
    if doc.date is None or not _RAW_DATE.match(doc.date):
        return ""
    return doc.date


# -- List view ----------------------------------------------------------------


def to_list_item(record: DrugApplication) -> DrugListItem:
    """Summarize an application by its first (primary) product."""
    product = record.products[0] if record.products else None
    names = substance_names(product.active_ingredients) if product else []

    return DrugListItem(
        id=record.application_number or record.sponsor_name or UNKNOWN_DRUG_ID,
        application_number=record.application_number,
        sponsor_name=record.sponsor_name,
        product_name=product.brand_name if product else None,
        substance_name=SUBSTANCE_SEPARATOR.join(names) if names else None,
        route=product.route if product else None,
    )


def to_list_page(search: DrugsFDASearch, query: SearchQuery) -> DrugListPage:
    return DrugListPage(
        page=query.page,
        page_size=query.page_size,
        total=search.total,
        items=[to_list_item(r) for r in search.results],
    )


# -- Detail view --------------------------------------------------------------


def to_detail_product(product: Product) -> DrugProduct:
    return DrugProduct(
        brand_name=product.brand_name,
        generic_name=product.generic_name,
        route=product.route,
        dosage_form=product.dosage_form,
        marketing_status=product.marketing_status,
        product_number=product.product_number,
        te_code=product.te_code,
        strength=join_strengths(product.active_ingredients),
        substances=substance_names(product.active_ingredients),
    )


def to_detail_document(doc: SubmissionDocument) -> DrugDocument:
    return DrugDocument(
        type=doc.type,
        url=doc.url,
        effective_date=format_document_date(doc.date),
    )


def to_detail(record: DrugApplication, application_number: str) -> DrugDetail:
    """Build the detail view of one application.

    Products are ordered by ascending numeric strength; documents from every
    submission are flattened and ordered newest first.
    """
    products = sorted(
        (to_detail_product(p) for p in record.products),
        key=lambda p: parse_strength(p.strength),
    )

    docs = [doc for sub in record.submissions for doc in sub.application_docs]
    docs.sort(key=_document_sort_key, reverse=True)

    return DrugDetail(
        application_number=record.application_number or application_number,
        sponsor_name=record.sponsor_name,
        products=products,
        documents=[to_detail_document(d) for d in docs],
    )


def normalize_detail(
    search: DrugsFDASearch, application_number: str
) -> DrugDetail | None:
    """Detail view of the first matched record, or None when nothing matched."""
    if search.is_empty:
        return None
    return to_detail(search.results[0], application_number)
