"""
Tests for parse_notes_text and the ExtractionResult record.
"""

import pytest
from pydantic import ValidationError

from brain import ExtractionResult, parse_notes_text

DEFAULT_PAYLOAD = {
    "clientName": "Client Name Not Found",
    "projectTitle": "Design Project",
    "clientSize": "small",
    "industry": "technology",
    "timeline": "4",
    "services": ["branding"],
    "clientBudget": "",
}


class TestParseNotesText:

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input_gives_defaults(self, text):
        assert parse_notes_text(text).to_payload() == DEFAULT_PAYLOAD

    def test_full_notes(self, sample_notes):
        result = parse_notes_text(sample_notes)

        assert result.to_payload() == {
            "clientName": "Brightside Health",
            "projectTitle": "Brand Identity Redesign",
            "clientSize": "medium",
            "industry": "healthcare",
            "timeline": "12",
            "services": ["logo", "branding", "website", "print"],
            "clientBudget": "25000",
        }

    def test_deterministic(self, sample_notes):
        assert parse_notes_text(sample_notes) == parse_notes_text(sample_notes)

    @pytest.mark.parametrize(
        "text",
        [
            "   ",
            "\n\n\n",
            "!!!$$$,,,:::",
            "Client:\n",
            "x" * 50_000,
            "ünïcödé notes — 東京 client",
            "1" * 5000 + " weeks",
            "1" * 5000 + " employees",
            "3" + "0" * 4299 + " months",
        ],
    )
    def test_total_for_odd_input(self, text):
        result = parse_notes_text(text)

        assert result.client_name
        assert result.project_title
        assert result.timeline.isdigit() and not result.timeline.startswith("0")
        assert len(result.services) >= 1
        assert result.client_budget == "" or result.client_budget[0].isdigit()

    def test_numerals_past_int_conversion_limit(self):
        result = parse_notes_text("1" * 5000 + " weeks, " + "9" * 5000 + " employees")
        assert result.timeline == "1" * 5000
        assert result.client_size == "enterprise"

        result = parse_notes_text("3" + "0" * 4299 + " months")
        assert result.timeline == "12" + "0" * 4299

    def test_spec_examples(self):
        assert parse_notes_text("Client: Acme Corp, further notes").client_name == "Acme Corp"
        assert parse_notes_text("Our budget is $12,500 for this project").client_budget == "12500"
        assert parse_notes_text("a company with 10 employees").client_size == "small"
        assert parse_notes_text("a company with 11 employees").client_size == "medium"


class TestExtractionResult:

    def test_result_is_frozen(self):
        result = parse_notes_text("")
        with pytest.raises(ValidationError):
            result.client_name = "Someone"

    def test_services_serialise_as_list(self):
        payload = parse_notes_text("logo and website").to_payload()
        assert payload["services"] == ["logo", "website"]

    def test_accepts_alias_names(self):
        result = ExtractionResult(
            clientName="Acme",
            projectTitle="Logo Design",
            clientSize="large",
            industry="retail",
            timeline="6",
            services=["logo"],
        )
        assert result.client_budget == ""
        assert result.services == ("logo",)

    def test_rejects_unknown_enum_value(self):
        with pytest.raises(ValidationError):
            ExtractionResult(
                client_name="Acme",
                project_title="Logo Design",
                client_size="huge",
                industry="retail",
                timeline="6",
                services=("logo",),
            )
