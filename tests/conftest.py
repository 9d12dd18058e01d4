"""Shared workflow fixtures."""

import copy

import pytest

from _builders import make_crawler, make_job


@pytest.fixture
def etl_workflow():
    return {
        "description": "Nightly ETL",
        "crawlers": [make_crawler("c1")],
        "jobs": [make_job("j1"), make_job("j2")],
    }


@pytest.fixture
def etl_workflows(etl_workflow):
    return {"etl": copy.deepcopy(etl_workflow)}
