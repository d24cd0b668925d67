"""
Integration tests for Chat and API key endpoints.
"""

import pytest
from django.urls import reverse


@pytest.mark.integration
class TestChatAPI:
    """Integration tests for Chat API."""

    def test_chats_render_without_messages(self, api_client):
        """Chat listings only carry id and title."""
        items = api_client.get(reverse("chats:list-create")).json()["data"]["items"]

        assert items == [{"id": "c1", "title": "General"}]

    def test_create_chat_and_post_messages(self, api_client):
        """Messages are returned in posting order."""
        chat = api_client.post(
            reverse("chats:list-create"), {"title": "Release"}, format="json"
        ).json()["data"]
        url = reverse("chats:messages", args=[chat["id"]])

        first = api_client.post(url, {"userId": "u1", "text": "ship it"}, format="json")
        api_client.post(url, {"userId": "u2", "text": "shipped"}, format="json")

        assert first.status_code == 200
        assert first.json()["data"]["chatId"] == chat["id"]
        messages = api_client.get(url).json()["data"]
        assert [(m["userId"], m["text"]) for m in messages] == [
            ("u1", "ship it"),
            ("u2", "shipped"),
        ]

    def test_send_message_requires_text(self, api_client):
        """Both userId and text are required."""
        api_client.get(reverse("chats:list-create"))

        response = api_client.post(
            reverse("chats:messages", args=["c1"]), {"userId": "u1"}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["error"] == "text: This field is required."

    def test_messages_of_missing_chat(self, api_client):
        """Unknown chats are a 404."""
        response = api_client.get(reverse("chats:messages", args=["nope"]))

        assert response.status_code == 404


@pytest.mark.integration
class TestApiKeyAPI:
    """Integration tests for API key endpoints."""

    def test_list_seeds_one_key(self, api_client):
        """The first listing seeds a single live key."""
        keys = api_client.get(reverse("apikeys:list-create")).json()["data"]

        assert len(keys) == 1
        assert keys[0]["key"].startswith("sk_live_")

    def test_generate_key(self, api_client):
        """Generated keys are appended to the list."""
        url = reverse("apikeys:list-create")
        api_client.get(url)

        created = api_client.post(url).json()["data"]

        keys = [item["key"] for item in api_client.get(url).json()["data"]]
        assert keys[-1] == created["key"]
        assert len(keys) == 2
