"""Shared fixtures for core unit tests"""

import pytest

from policy_samples import ACCESS_POLICY_V2, make_doc


@pytest.fixture(name="left_doc")
def left_doc_fixture():
    return make_doc()


@pytest.fixture(name="right_doc")
def right_doc_fixture():
    return make_doc(
        id="doc-2", content=ACCESS_POLICY_V2, version="2.0", status="draft", last_modified="2024-03-01",
    )
