"""Shared fixtures for Whitepaper Server tests."""

import pytest

from whitepaper_server.core.store import DocumentStore

SAMPLE_CONTENT = {
    "title": "Sample Paper",
    "name": "Sample",
    "authors": ["A. Author"],
    "sections": [
        {
            "heading": "Abstract",
            "content": "Provers compete in proof contests to generate zero-knowledge proofs.",
        },
        {
            "heading": "Proof Contests",
            "content": "An all-pay auction for proving rights.",
            "subsections": [
                {
                    "heading": "Mechanism Description",
                    "content": "Provers deposit collateral and bid in proof contests.",
                },
                {
                    "heading": "Proving Pools",
                    "content": "Small provers pool capacity.",
                },
            ],
        },
        {
            "heading": "Conclusion",
            "content": "The network coordinates provers.",
        },
    ],
}

SAMPLE_CONCEPTS = {
    "proof contests": "All-pay auctions for proving rights.",
    "sp1": "A zkVM for RISC-V programs.",
    "proving pools": "Provers pooling capacity.",
}


@pytest.fixture
def sample_store() -> DocumentStore:
    return DocumentStore.from_content(SAMPLE_CONTENT, SAMPLE_CONCEPTS)


@pytest.fixture
def default_store() -> DocumentStore:
    return DocumentStore.default()
