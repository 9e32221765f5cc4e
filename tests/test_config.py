"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from app.domain.value_objects import FilterEncoding
from app.infrastructure.config import Settings


class TestFilterEncodingSetting:
    """Tests for the catalog filter encoding setting."""

    def test_defaults_to_expression(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Expression encoding is used when nothing is configured."""
        monkeypatch.delenv("CATALOG_FILTER_ENCODING", raising=False)
        assert Settings().catalog_filter_encoding is FilterEncoding.EXPRESSION

    def test_reads_encoding_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The encoding name is parsed into the enum."""
        monkeypatch.setenv("CATALOG_FILTER_ENCODING", "sentinel")
        assert Settings().catalog_filter_encoding is FilterEncoding.SENTINEL

    def test_unknown_encoding_fails_at_load(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A misspelled encoding is rejected when settings load."""
        monkeypatch.setenv("CATALOG_FILTER_ENCODING", "sentinal")
        with pytest.raises(ValidationError):
            Settings()
