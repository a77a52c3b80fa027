from __future__ import annotations

import pytest
from pydantic import ValidationError

from devagent_providers.base.dto import AdapterParams


def test_blank_strings_become_none():
    params = AdapterParams(model="  ", api_key="", api_url=" https://proxy.local/v1 ")
    assert params.model is None
    assert params.api_key is None
    assert params.api_url == "https://proxy.local/v1"
    assert params.model_dump(exclude_none=True) == {"api_url": "https://proxy.local/v1"}


def test_api_url_must_be_http():
    with pytest.raises(ValidationError):
        AdapterParams(api_url="ftp://example.org")


def test_all_fields_optional():
    assert AdapterParams().model_dump() == {
        "provider": None,
        "model": None,
        "api_key": None,
        "api_url": None,
    }
