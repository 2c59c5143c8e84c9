"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path

from json_ontology.models import FlatNode, DocumentData


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_nested_json():
    """Sample nested object with a scalar sibling."""
    return {"a": {"b": "x"}, "c": 1}


@pytest.fixture
def sample_ontology_json():
    """Sample ontology extracted from a contract."""
    return {
        "parties": {
            "buyer": "Acme Corporation",
            "seller": "Globex Ltd",
        },
        "terms": {
            "price": "12,000 EUR",
            "delivery": {
                "date": "March 3, 2024",
                "place": "Rotterdam",
            },
        },
        "signed": True,
        "pages": 4,
    }


@pytest.fixture
def sample_source_text():
    """Source text the sample ontology was extracted from."""
    return (
        "This agreement is made between Acme Corporation (the buyer) and "
        "Globex Ltd (the seller). The price is 12,000 EUR, payable on "
        "delivery in Rotterdam on March 3, 2024."
    )


@pytest.fixture
def sample_document():
    """Small document built by hand, with one container row."""
    nodes = [
        FlatNode(key="a", value="", depth=0),
        FlatNode(key="b", value="x", depth=1),
        FlatNode(key="c", value=1, depth=0),
    ]
    return DocumentData(name="sample", flat_nodes=nodes, source_text="...y appears here...")
