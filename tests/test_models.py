"""Tests for response models and configuration."""

import pytest

from wave_client.core.config import AnalysisOptions, ClientConfig, ReportType, ResponseFormat
from wave_client.core.models import (
    AnalysisResult,
    ContrastDetail,
    FailurePayload,
    WaveItem,
    response_adapter,
)


class TestResponseAdapter:
    """Tests for success/failure discrimination."""

    def test_success_shape(self, success_payload):
        parsed = response_adapter.validate_python(success_payload)
        assert isinstance(parsed, AnalysisResult)

    def test_failure_shape(self, failure_payload):
        parsed = response_adapter.validate_python(failure_payload)

        assert isinstance(parsed, FailurePayload)
        assert parsed.status.message == "Invalid API key"
        assert parsed.status.code == "INVALID_KEY"

    def test_missing_status_is_success(self):
        parsed = response_adapter.validate_python({"statistics": {"pagetitle": "x"}})

        assert isinstance(parsed, AnalysisResult)
        assert parsed.status.success is True
        assert parsed.model_dump(exclude_unset=True) == {"statistics": {"pagetitle": "x"}}


class TestAnalysisResult:
    """Tests for result accessors."""

    def test_absent_category_is_clean(self):
        result = AnalysisResult.model_validate({"status": {"success": True}})

        assert result.category("error") == {}
        assert result.issue_types("aria") == 0
        assert result.instance_count("contrast") == 0

    def test_unknown_category(self):
        result = AnalysisResult()
        with pytest.raises(ValueError, match="Unknown category"):
            result.category("warnings")

    def test_counts(self, success_payload):
        result = AnalysisResult.model_validate(success_payload)

        assert result.issue_types("error") == 1
        assert result.instance_count("error") == 2
        assert result.summary() == {
            "error": 1,
            "alert": 0,
            "feature": 1,
            "structure": 0,
            "aria": 0,
            "contrast": 1,
        }
        assert result.report_url == "https://wave.webaim.org/report#/example.com"

    def test_item_details(self, success_payload):
        result = AnalysisResult.model_validate(success_payload)

        item = result.category("contrast")["contrast"]
        assert isinstance(item, WaveItem)
        assert isinstance(item.contrastdata[0], ContrastDetail)
        assert item.contrastdata[0].fcolor == "#777777"
        assert item.wcag[0].name.startswith("1.4.3")

    def test_positional_contrast_data(self):
        payload = {
            "categories": {
                "contrast": {
                    "contrast": {
                        "id": "contrast",
                        "count": 1,
                        "contrastdata": [[1.63, "#777777", "#999999", False]],
                    },
                },
            },
        }
        result = AnalysisResult.model_validate(payload)

        assert result.category("contrast")["contrast"].contrastdata == [[1.63, "#777777", "#999999", False]]
        assert result.model_dump(exclude_unset=True) == payload

    def test_non_item_entries_kept_raw(self):
        payload = {
            "categories": {
                "error": {
                    "description": "Errors",
                    "count": 1,
                    "alt_missing": {"id": "alt_missing", "count": 1},
                },
            },
        }
        result = AnalysisResult.model_validate(payload)

        assert list(result.category("error")) == ["alt_missing"]
        assert result.model_dump(exclude_unset=True) == payload

    def test_nonconforming_item_still_counted(self):
        payload = {
            "categories": {
                "error": {
                    "alt_missing": {"id": "alt_missing", "count": 2, "selectors": [["img", True]]},
                    "label_missing": {"id": "label_missing", "description": 42, "count": "3"},
                },
            },
        }
        result = AnalysisResult.model_validate(payload)

        items = result.category("error")
        assert sorted(items) == ["alt_missing", "label_missing"]
        assert items["label_missing"].description == 42
        assert result.issue_types("error") == 2
        assert result.instance_count("error") == 5
        assert result.model_dump(exclude_unset=True) == payload

    def test_malformed_blocks_kept_raw(self):
        payload = {
            "status": {"success": True},
            "statistics": {"pagetitle": 7, "creditsremaining": 12},
            "categories": {"error": ["alt_missing"]},
        }
        result = AnalysisResult.model_validate(payload)

        assert result.statistics == {"pagetitle": 7, "creditsremaining": 12}
        assert result.credits_remaining == 12
        assert result.category("error") == {}
        assert result.model_dump(exclude_unset=True) == payload

    @pytest.mark.parametrize("value", [2, 2.5, "2"])
    def test_numbers_keep_their_type(self, value):
        result = AnalysisResult.model_validate({"statistics": {"time": value}})

        assert type(result.stat("time")) is type(value)
        assert result.stat("time") == value

    def test_extra_fields_preserved(self):
        payload = {"status": {"success": True}, "statistics": {"pagetitle": "x", "newfield": 1}}
        result = AnalysisResult.model_validate(payload)

        assert result.model_dump(exclude_unset=True) == payload


class TestConfig:
    """Tests for configuration objects."""

    def test_validate(self):
        assert ClientConfig(api_key="k").validate() == []
        assert "api_key is required" in ClientConfig().validate()
        assert "timeout must be positive" in ClientConfig(api_key="k", timeout=-1).validate()

    def test_options_to_params(self):
        options = AnalysisOptions(
            reporttype=ReportType.CONTRAST,
            format=ResponseFormat.XML,
            evaldelay=250,
            password=None,
        )

        assert options.to_params() == {
            "format": "xml",
            "reporttype": 4,
            "evaldelay": 250,
        }

    def test_extra_overrides(self):
        options = AnalysisOptions(extra={"format": "json", "lang": "en"})
        assert options.to_params() == {"format": "json", "lang": "en"}
