"""Unit tests for section and concept lookups."""

import pytest
from pydantic import ValidationError

from whitepaper_server.core.lookup import ConceptLookupService, SectionLookupService
from whitepaper_server.core.store import DocumentStore
from whitepaper_server.models.domain.results import (
    ConceptMatch,
    ConceptSuggestions,
    MissingParameter,
    NotFound,
    SectionMatch,
    SubsectionMatch,
)


class TestSectionLookupService:
    """Test heading lookup."""

    @pytest.fixture(autouse=True)
    def setup_service(self, sample_store):
        self.service = SectionLookupService(sample_store)

    def test_section_match_is_case_insensitive(self):
        upper = self.service.get_section("Proof Contests")
        lower = self.service.get_section("proof contests")

        assert isinstance(upper, SectionMatch)
        assert upper == lower
        assert [s.heading for s in upper.section.subsections] == [
            "Mechanism Description",
            "Proving Pools",
        ]

    def test_subsection_match_carries_parent(self):
        result = self.service.get_section("PROVING POOLS")

        assert isinstance(result, SubsectionMatch)
        assert result.parent_heading == "Proof Contests"
        assert result.subsection.content == "Small provers pool capacity."

    def test_no_partial_matches(self):
        assert self.service.get_section("Proof") == NotFound(query="Proof")

    def test_unknown_heading(self):
        result = self.service.get_section("not-a-real-heading")
        assert isinstance(result, NotFound)
        assert result.query == "not-a-real-heading"

    def test_first_subsection_match_wins(self):
        store = DocumentStore.from_content(
            {
                "title": "T",
                "name": "T",
                "sections": [
                    {
                        "heading": "One",
                        "content": "first",
                        "subsections": [{"heading": "Notes", "content": "from one"}],
                    },
                    {
                        "heading": "Two",
                        "content": "second",
                        "subsections": [{"heading": "notes", "content": "from two"}],
                    },
                ],
            },
            {},
        )
        result = SectionLookupService(store).get_section("NOTES")

        assert isinstance(result, SubsectionMatch)
        assert result.parent_heading == "One"

    def test_default_document_abstract(self, default_store):
        service = SectionLookupService(default_store)
        assert service.get_section("Abstract") == service.get_section("abstract")


class TestConceptLookupService:
    """Test glossary lookup."""

    @pytest.fixture(autouse=True)
    def setup_service(self, sample_store):
        self.service = ConceptLookupService(sample_store)

    def test_exact_match(self):
        result = self.service.get_concept("SP1")

        assert result == ConceptMatch(name="sp1", explanation="A zkVM for RISC-V programs.")

    def test_key_containing_query_is_suggested(self):
        result = self.service.get_concept("pool")

        assert isinstance(result, ConceptSuggestions)
        assert result.suggestions == ("proving pools",)
        assert result.query == "pool"

    def test_query_containing_key_is_suggested(self):
        result = self.service.get_concept("what is sp1 exactly")

        assert isinstance(result, ConceptSuggestions)
        assert result.suggestions == ("sp1",)

    def test_short_query_matches_many_keys(self):
        result = self.service.get_concept("p")

        assert isinstance(result, ConceptSuggestions)
        assert result.suggestions == ("proof contests", "sp1", "proving pools")

    def test_not_found(self):
        assert self.service.get_concept("zzzznotaconcept") == NotFound(
            query="zzzznotaconcept"
        )

    @pytest.mark.parametrize("name", ["", None])
    def test_missing_name(self, name):
        assert self.service.get_concept(name) == MissingParameter(parameter="concept")

    def test_default_glossary(self, default_store):
        service = ConceptLookupService(default_store)

        exact = service.get_concept("sp1")
        assert isinstance(exact, ConceptMatch)
        assert exact.explanation.startswith("SP1 is a zkVM")

        suggestions = service.get_concept("proof")
        assert isinstance(suggestions, ConceptSuggestions)
        assert "proof contests" in suggestions.suggestions

        assert isinstance(service.get_concept("zzzznotaconcept"), NotFound)


class TestDocumentValidation:
    """Invariants enforced when the store is built."""

    def test_duplicate_section_headings_rejected(self):
        with pytest.raises(ValidationError):
            DocumentStore.from_content(
                {
                    "title": "T",
                    "name": "T",
                    "sections": [
                        {"heading": "Intro", "content": "a"},
                        {"heading": "INTRO", "content": "b"},
                    ],
                },
                {},
            )

    def test_duplicate_subsection_headings_rejected(self):
        with pytest.raises(ValidationError):
            DocumentStore.from_content(
                {
                    "title": "T",
                    "name": "T",
                    "sections": [
                        {
                            "heading": "Intro",
                            "content": "a",
                            "subsections": [
                                {"heading": "Part", "content": "x"},
                                {"heading": "part", "content": "y"},
                            ],
                        }
                    ],
                },
                {},
            )

    def test_empty_content_rejected(self):
        with pytest.raises(ValidationError):
            DocumentStore.from_content(
                {"title": "T", "name": "T", "sections": [{"heading": "A", "content": ""}]},
                {},
            )

    def test_duplicate_concepts_rejected(self):
        with pytest.raises(ValidationError):
            DocumentStore.from_content(
                {"title": "T", "name": "T", "sections": []},
                {"SP1": "one", "sp1": "two"},
            )

    def test_glossary_is_read_only(self, sample_store):
        with pytest.raises(TypeError):
            sample_store.glossary.concepts["sp1"] = "changed"

        assert sample_store.glossary.explain("sp1") == "A zkVM for RISC-V programs."

    def test_glossary_detached_from_source(self):
        concepts = {"sp1": "one"}
        store = DocumentStore.from_content(
            {"title": "T", "name": "T", "sections": []}, concepts
        )

        concepts["sp1"] = "two"

        assert store.glossary.explain("sp1") == "one"

    def test_bundled_content_is_valid(self, default_store):
        assert len(default_store.document.sections) == 7
        assert len(default_store.glossary.concepts) == 8
