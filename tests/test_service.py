"""Tests for message handling around the extractor."""

import httpx

from jd_engine.errors import InvalidDocumentError
from jd_engine.extractor import DescriptionExtractor
from jd_engine.fetch import PageFetcher
from jd_engine.service import DETECT_ACTION, NO_RESULTS_ERROR, NOT_FOUND_ERROR, DescriptionService

POSTING = '<html><body><div id="jobDescriptionText"><p>Design   data pipelines.</p></div></body></html>'


def service_with_pages(pages):
    def handler(request):
        body = pages.get(str(request.url))
        if body is None:
            return httpx.Response(404)
        return httpx.Response(200, text=body)

    return DescriptionService(fetcher=PageFetcher(transport=httpx.MockTransport(handler), backoff_s=0.0))


class TestHandle:
    def test_html_snapshot(self):
        resp = DescriptionService().handle({"action": DETECT_ACTION, "html": POSTING})
        assert resp == {"success": True, "text": "Design data pipelines."}

    def test_nothing_found(self):
        resp = DescriptionService().handle({"action": DETECT_ACTION, "html": "<p>Cookie banner</p>"})
        assert resp == {"success": False, "error": NOT_FOUND_ERROR}

    def test_missing_payload(self):
        assert DescriptionService().handle({"action": DETECT_ACTION}) == {"success": False, "error": NO_RESULTS_ERROR}

    def test_unknown_action(self):
        resp = DescriptionService().handle({"action": "getAuthToken"})
        assert resp == {"success": False, "error": "Unknown action: getAuthToken"}

    def test_non_mapping_message(self):
        assert DescriptionService().handle(["detectJobDescription"]) == {"success": False, "error": "Invalid message"}

    def test_html_must_be_string(self):
        resp = DescriptionService().handle({"action": DETECT_ACTION, "html": 42})
        assert resp["success"] is False
        assert "html must be a string" in resp["error"]


class TestDetectUrl:
    def test_fetches_and_extracts(self):
        url = "https://www.indeed.com/viewjob?jk=abc123"
        resp = service_with_pages({url: POSTING}).detect(url=url)
        assert resp.success
        assert resp.text == "Design data pipelines."

    def test_snapshot_wins_over_url(self):
        svc = service_with_pages({})
        resp = svc.detect(html=POSTING, url="https://example.com/unreachable")
        assert resp.text == "Design data pipelines."

    def test_fetch_failure_is_reported(self):
        resp = service_with_pages({}).handle({"action": DETECT_ACTION, "url": "https://example.com/missing"})
        assert resp["success"] is False
        assert "HTTP 404" in resp["error"]


class TestMalformedRequests:
    def test_non_string_url(self):
        resp = DescriptionService().handle({"action": DETECT_ACTION, "url": 123})
        assert resp == {"success": False, "error": "url must be a string, got int"}

    def test_unparseable_url(self):
        resp = service_with_pages({}).handle({"action": DETECT_ACTION, "url": "http://[::1"})
        assert resp["success"] is False
        assert "failed" in resp["error"]

    def test_extractor_rejecting_document(self):
        class RejectingExtractor(DescriptionExtractor):
            def extract(self, document):
                raise InvalidDocumentError("Tag is not a document: missing select")

        svc = DescriptionService(extractor=RejectingExtractor())
        resp = svc.handle({"action": DETECT_ACTION, "html": POSTING})
        assert resp == {"success": False, "error": "Tag is not a document: missing select"}


class TestSite:
    def test_recognized_job_board_is_reported(self):
        url = "https://www.indeed.com/viewjob?jk=abc123"
        resp = service_with_pages({url: POSTING}).handle({"action": DETECT_ACTION, "url": url})
        assert resp == {"success": True, "text": "Design data pipelines.", "site": "indeed"}

    def test_site_reported_when_nothing_found(self):
        url = "https://www.glassdoor.com/job-listing/x"
        resp = service_with_pages({url: "<p>Sign in</p>"}).handle({"action": DETECT_ACTION, "url": url})
        assert resp == {"success": False, "error": NOT_FOUND_ERROR, "site": "glassdoor"}

    def test_unknown_site_is_omitted(self):
        url = "https://example.com/careers/1"
        resp = service_with_pages({url: POSTING}).handle({"action": DETECT_ACTION, "url": url})
        assert "site" not in resp
