"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def sample_application() -> dict:
    """Raw drugs@FDA application record, as returned by the upstream API."""
    return {
        "application_number": "NDA021457",
        "sponsor_name": "ACME PHARMA",
        "products": [
            {
                "brand_name": "EXAMPLOR",
                "generic_name": "EXAMPLORINE",
                "route": "ORAL",
                "dosage_form": "TABLET",
                "marketing_status": "Prescription",
                "product_number": "002",
                "te_code": "AB",
                "active_ingredients": [
                    {"name": "EXAMPLORINE HYDROCHLORIDE", "strength": "100MG"}
                ],
            },
            {
                "brand_name": "EXAMPLOR",
                "generic_name": "EXAMPLORINE",
                "route": "ORAL",
                "dosage_form": "TABLET",
                "marketing_status": "Prescription",
                "product_number": "001",
                "te_code": "AB",
                "active_ingredients": [
                    {"name": "EXAMPLORINE HYDROCHLORIDE", "strength": "10MG"}
                ],
            },
        ],
        "submissions": [
            {
                "submission_type": "ORIG",
                "submission_number": "1",
                "submission_status": "AP",
                "submission_status_date": "20090101",
                "application_docs": [
                    {
                        "id": "1",
                        "url": "https://example.com/letter.pdf",
                        "date": "20090101",
                        "type": "Letter",
                    }
                ],
            },
            {
                "submission_type": "SUPPL",
                "submission_number": "5",
                "submission_status": "AP",
                "application_docs": [
                    {
                        "id": "2",
                        "url": "https://example.com/label.pdf",
                        "date": "20110101",
                        "type": "Label",
                    },
                    {
                        "id": "3",
                        "url": "https://example.com/review.pdf",
                        "date": "20100101",
                        "type": "Review",
                    },
                ],
            },
        ],
    }


@pytest.fixture
def sample_payload(sample_application) -> dict:
    """Successful upstream search payload wrapping one application."""
    return {
        "meta": {"results": {"skip": 0, "limit": 10, "total": 42}},
        "results": [sample_application],
    }
