"""
Tests for client-level listings.
"""

from datetime import datetime, timezone

import httpx
import pytest

from conftest import BASE_URL


class TestListings:
    def test_list_clients(self, mock_api, cs) -> None:
        mock_api.get(f"{BASE_URL}clients.json").mock(
            return_value=httpx.Response(
                200,
                json=[
                    {"ClientID": "c1", "Name": "Acme"},
                    {"ClientID": "c2", "Name": "Globex"},
                ],
            )
        )

        clients = cs.clients.list_clients()

        assert [(c.client_id, c.name) for c in clients] == [("c1", "Acme"), ("c2", "Globex")]

    def test_list_lists(self, mock_api, cs) -> None:
        mock_api.get(f"{BASE_URL}clients/c1/lists.json").mock(
            return_value=httpx.Response(200, json=[{"ListID": "l1", "Name": "Newsletter"}])
        )

        lists = cs.clients.list_lists("c1")

        assert lists[0].list_id == "l1"
        assert lists[0].name == "Newsletter"

    @pytest.mark.parametrize(
        "method_name, path",
        [
            ("campaigns", "clients/c1/campaigns.json"),
            ("scheduled_campaigns", "clients/c1/scheduled.json"),
            ("draft_campaigns", "clients/c1/drafts.json"),
            ("list_templates", "clients/c1/templates.json"),
        ],
    )
    def test_client_paths(self, mock_api, cs, method_name: str, path: str) -> None:
        route = mock_api.get(f"{BASE_URL}{path}").mock(return_value=httpx.Response(200, json=[]))

        assert getattr(cs.clients, method_name)("c1") == []
        assert route.calls.last.request.method == "GET"

    def test_sent_campaign_fields(self, mock_api, cs) -> None:
        mock_api.get(f"{BASE_URL}clients/c1/campaigns.json").mock(
            return_value=httpx.Response(
                200,
                json=[
                    {
                        "FromName": "Acme",
                        "FromEmail": "news@acme.test",
                        "ReplyTo": "reply@acme.test",
                        "WebVersionURL": "https://acme.test/web",
                        "WebVersionTextURL": "https://acme.test/web.txt",
                        "CampaignID": "camp1",
                        "Subject": "News",
                        "Name": "October",
                        "SentDate": "2010-10-12 12:58:00",
                        "TotalRecipients": 2245,
                    }
                ],
            )
        )

        [campaign] = cs.clients.campaigns("c1")

        assert campaign.campaign_id == "camp1"
        assert campaign.web_version_url == "https://acme.test/web"
        assert campaign.web_version_text_url == "https://acme.test/web.txt"
        assert campaign.total_recipients == 2245

    def test_templates(self, mock_api, cs) -> None:
        mock_api.get(f"{BASE_URL}clients/c1/templates.json").mock(
            return_value=httpx.Response(
                200,
                json=[
                    {
                        "TemplateID": "t1",
                        "Name": "Plain",
                        "PreviewURL": "https://acme.test/p",
                        "ScreenshotURL": "https://acme.test/s.png",
                    }
                ],
            )
        )

        [template] = cs.clients.list_templates("c1")

        assert template.template_id == "t1"
        assert template.screenshot_url == "https://acme.test/s.png"


class TestListsForEmail:
    def test_email_is_query_encoded(self, mock_api, cs) -> None:
        route = mock_api.get(f"{BASE_URL}clients/c1/listsforemail.json").mock(
            return_value=httpx.Response(
                200,
                json=[
                    {
                        "ListID": "l1",
                        "ListName": "Newsletter",
                        "SubscriberState": "Active",
                        "DateSubscriberAdded": "2012-08-21 12:54:00",
                    },
                    {
                        "ListID": "l2",
                        "ListName": "Offers",
                        "SubscriberState": "Unsubscribed",
                        "DateSubscriberAdded": "2012-08-22 09:00:00",
                    },
                ],
            )
        )

        active, gone = cs.clients.lists_for_email("c1", "jo+news@example.com")

        assert route.calls.last.request.url.params["email"] == "jo+news@example.com"
        assert active.is_subscribed and not active.is_unsubscribed
        assert gone.is_unsubscribed and not gone.is_subscribed
        assert active.date_subscriber_added == "2012-08-21 12:54:00"
        assert active.date_subscriber_added_at == datetime(2012, 8, 21, 12, 54, tzinfo=timezone.utc)
