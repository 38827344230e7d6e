#!/usr/bin/env python3
import unittest
from unittest.mock import Mock, patch

import requests

from relay.services import NotificationError, send_discord_message

WEBHOOK_URL = "https://discord.test/api/webhooks/1/token"


class TestSendDiscordMessage(unittest.TestCase):
    @patch('relay.services.requests.post')
    def test_posts_content_envelope(self, mock_post):
        mock_post.return_value = Mock(status_code=204, text="")

        resp = send_discord_message(WEBHOOK_URL, "hello **world**")

        mock_post.assert_called_once_with(WEBHOOK_URL, json={"content": "hello **world**"})
        self.assertEqual(resp.status_code, 204)

    @patch('relay.services.requests.post')
    def test_200_and_204_are_success(self, mock_post):
        for status in (200, 204):
            with self.subTest(status=status):
                mock_post.return_value = Mock(status_code=status, text="")
                send_discord_message(WEBHOOK_URL, "ok")

    @patch('relay.services.requests.post')
    def test_other_statuses_fail_with_status_code(self, mock_post):
        for status in (201, 400, 404, 429, 500):
            with self.subTest(status=status):
                mock_post.return_value = Mock(status_code=status, text="nope")
                with self.assertRaises(NotificationError) as ctx:
                    send_discord_message(WEBHOOK_URL, "x")
                self.assertEqual(ctx.exception.status_code, status)
                self.assertIn(str(status), str(ctx.exception))

    @patch('relay.services.requests.post')
    def test_transport_error_wrapped(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("connection refused")

        with self.assertRaises(NotificationError) as ctx:
            send_discord_message(WEBHOOK_URL, "x")

        self.assertIsNone(ctx.exception.status_code)
        self.assertIn("connection refused", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, requests.ConnectionError)

    @patch('relay.services.requests.post')
    def test_empty_url_fails_without_request(self, mock_post):
        for url in ("", None):
            with self.subTest(url=url):
                with self.assertRaises(NotificationError):
                    send_discord_message(url, "x")
        mock_post.assert_not_called()


if __name__ == '__main__':
    unittest.main()
