"""Unit tests for HttpApiOptions."""

import pytest
from pydantic import ValidationError

from graphrest.http.core import HttpApiOptions, HttpMethod


class TestHttpApiOptions:
    """Test option defaults and validation."""

    def test_defaults(self):
        options = HttpApiOptions(origin="https://api.test/")

        assert options.origin == "https://api.test"
        assert options.external_origin == "https://api.test"
        assert options.api_base == ""
        assert options.num_keys_per_chunk == 25
        assert options.timeout == 30.0

    def test_explicit_external_origin(self):
        options = HttpApiOptions(origin="http://backend:8080", external_origin="https://api.example.com/")

        assert options.external_origin == "https://api.example.com"

    def test_invalid_chunk_size(self):
        with pytest.raises(ValidationError):
            HttpApiOptions(origin="https://api.test", num_keys_per_chunk=0)

    def test_origin_required(self):
        with pytest.raises(ValidationError):
            HttpApiOptions()

    def test_frozen(self):
        options = HttpApiOptions(origin="https://api.test")

        with pytest.raises(ValidationError):
            options.origin = "https://other.test"


def test_http_method_body():
    assert HttpMethod.POST.has_body
    assert not HttpMethod.GET.has_body
    assert HttpMethod("DELETE") is HttpMethod.DELETE
