"""
Tests for the Docker Hub webhook parser.
"""
import pytest

from gitwebhooks.dockerhub import Event, DockerHubWebhookParser
from gitwebhooks.dockerhub.models import BuildPayload
from gitwebhooks.webhook.errors import (
    EventNotFoundError,
    InvalidHTTPMethodError,
    ParsingPayloadError,
)

BUILD_BODY = {
    "callback_url": "https://registry.hub.docker.com/u/svendowideit/testhook/hook/2141b5bi5i5b02bec211i4eeih0242eg11000a/",
    "push_data": {
        "images": ["27d47432a69bca5f2700e4dff7de0388ed65f9d3fb1ec645e2bc24c223dc1cc3"],
        "pushed_at": 1.417566161e09,
        "pusher": "trustedbuilder",
        "tag": "latest",
    },
    "repository": {
        "comment_count": 0,
        "date_created": 1.417494799e09,
        "is_trusted": True,
        "name": "testhook",
        "namespace": "svendowideit",
        "repo_name": "svendowideit/testhook",
        "star_count": 0,
        "status": "Active",
    },
}


class TestDockerHubWebhookParser:
    """Test cases for DockerHubWebhookParser."""

    @pytest.fixture
    def parser(self):
        return DockerHubWebhookParser()

    def test_build(self, parser, make_request):
        """Any POST decodes into BuildPayload."""
        request = make_request({}, BUILD_BODY)

        payload = parser.parse(request, Event.BUILD)

        assert isinstance(payload, BuildPayload)
        assert payload.hook_event == "build"
        assert payload.push_data.tag == "latest"
        assert payload.push_data.pushed_at == 1417566161.0
        assert payload.repository.repo_name == "svendowideit/testhook"
        assert request.body.was_closed

    def test_not_subscribed(self, parser, make_request):
        """Subscribing to something else filters every delivery."""
        with pytest.raises(EventNotFoundError):
            parser.parse(make_request({}, BUILD_BODY), "push")

    def test_invalid_method(self, parser, make_request):
        """Only POST is accepted."""
        with pytest.raises(InvalidHTTPMethodError):
            parser.parse(make_request({}, BUILD_BODY, method="PUT"), Event.BUILD)

    def test_empty_body(self, parser, make_request):
        """An empty body is a parsing error."""
        with pytest.raises(ParsingPayloadError):
            parser.parse(make_request({}, b""), Event.BUILD)
