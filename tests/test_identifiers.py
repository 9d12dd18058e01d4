"""Logical identifier tests."""

import pytest

from glueflow.ir.identifiers import (
    crawler_logical_id,
    crawler_to_job_trigger_logical_id,
    job_logical_id,
    normalize_resource_id,
    ref,
    trigger_logical_id,
    workflow_logical_id,
)


class TestNormalizeResourceId:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("test-crawler", "testcrawler"),
            ("test_crawler", "testcrawler"),
            ("test.crawler", "testcrawler"),
            ("test crawler", "testcrawler"),
            ("test123", "test123"),
            ("123test", "123test"),
            ("test!@#$%^&*()", "test"),
            ("MixedCase-Name", "MixedCaseName"),
            ("", ""),
        ],
    )
    def test_strips_non_alphanumeric(self, raw, expected):
        assert normalize_resource_id(raw) == expected

    def test_idempotent(self):
        once = normalize_resource_id("daily-load_v2.final")
        assert normalize_resource_id(once) == once

    def test_non_ascii_letters_removed(self):
        assert normalize_resource_id("données") == "donnes"


class TestLogicalIds:
    def test_workflow(self):
        assert workflow_logical_id("test-workflow") == "GlueWorkflowtestworkflow"

    def test_crawler(self):
        assert crawler_logical_id("test-workflow", "crawler-1") == "GlueCrawlertestworkflowcrawler1"

    def test_job(self):
        assert job_logical_id("test-workflow", "job-1") == "GlueJobtestworkflowjob1"

    def test_trigger(self):
        assert trigger_logical_id("test-workflow", "job-1") == "GlueTriggertestworkflowjob1"

    def test_crawler_to_job_trigger(self):
        assert (
            crawler_to_job_trigger_logical_id("etl", "c-1", "j_1")
            == "GlueTriggeretlc1ToJobj1"
        )

    def test_families_do_not_collide(self):
        ids = {
            workflow_logical_id("etl"),
            crawler_logical_id("etl", "load"),
            job_logical_id("etl", "load"),
            trigger_logical_id("etl", "load"),
        }
        assert len(ids) == 4

    def test_ref(self):
        assert ref("GlueJobetlj1") == {"Ref": "GlueJobetlj1"}
