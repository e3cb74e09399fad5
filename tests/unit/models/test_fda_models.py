"""Unit tests for drugs@FDA Pydantic models."""

from drug_browser.models.model_fda import (
    DrugApplication,
    DrugsFDASearch,
    Product,
    SearchOutcome,
    Submission,
)


def test_drug_application_from_full_record(sample_application):
    app = DrugApplication.model_validate(sample_application)

    assert app.application_number == "NDA021457"
    assert app.sponsor_name == "ACME PHARMA"
    assert [p.product_number for p in app.products] == ["002", "001"]
    assert app.products[0].active_ingredients[0].strength == "100MG"
    assert len(app.submissions) == 2
    assert app.submissions[1].application_docs[0].date == "20110101"


def test_drug_application_all_fields_optional():
    app = DrugApplication.model_validate({})

    assert app.application_number is None
    assert app.sponsor_name is None
    assert app.products == []
    assert app.submissions == []


def test_coerce_nones_converts_null_lists_to_empty():
    """Explicit nulls for sequence fields must coerce to []."""
    app = DrugApplication.model_validate({"products": None, "submissions": None})
    product = Product.model_validate({"active_ingredients": None})
    submission = Submission.model_validate({"application_docs": None})

    assert app.products == []
    assert product.active_ingredients == []
    assert submission.application_docs == []


def test_coerce_nones_preserves_genuine_nones():
    product = Product.model_validate({"brand_name": None, "te_code": None})

    assert product.brand_name is None
    assert product.te_code is None


def test_unknown_upstream_keys_are_ignored():
    app = DrugApplication.model_validate(
        {"application_number": "ANDA1", "openfda": {"rxcui": ["123"]}}
    )

    assert app.application_number == "ANDA1"
    assert not hasattr(app, "openfda")


def test_no_match_search_is_empty():
    search = DrugsFDASearch.no_match()

    assert search.outcome is SearchOutcome.NO_MATCH
    assert search.results == []
    assert search.total == 0
    assert search.is_empty


def test_matched_search_without_results_is_empty():
    search = DrugsFDASearch(outcome=SearchOutcome.MATCHED, results=[], total=0)

    assert search.is_empty
