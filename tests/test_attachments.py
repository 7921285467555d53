from __future__ import annotations

import asyncio
import unittest

import httpx

from apps.api.app.services.llm.attachments import (
    build_interleaved_content,
    build_user_content,
    download_image_as_data_uri,
)

_PNG = b"\x89PNG\r\n\x1a\nfake"


def _mock_client(status: int = 200, content_type: str = "image/png", body: bytes = _PNG) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, headers={"content-type": content_type}, content=body)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


async def _download(client: httpx.AsyncClient, url: str = "https://cdn.example.com/p.png") -> str | None:
    async with client:
        return await download_image_as_data_uri(url, timeout=5, client=client)


class DownloadImageTests(unittest.TestCase):
    def test_returns_data_uri(self) -> None:
        uri = asyncio.run(_download(_mock_client()))
        self.assertEqual(uri, "data:image/png;base64,iVBORw0KGgpmYWtl")

    def test_content_type_parameters_stripped(self) -> None:
        uri = asyncio.run(_download(_mock_client(content_type="image/jpeg; charset=binary")))
        self.assertTrue(uri.startswith("data:image/jpeg;base64,"))

    def test_non_success_status_returns_none(self) -> None:
        self.assertIsNone(asyncio.run(_download(_mock_client(status=404))))

    def test_non_image_returns_none(self) -> None:
        self.assertIsNone(asyncio.run(_download(_mock_client(content_type="text/html", body=b"<html>"))))

    def test_transport_error_returns_none(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        self.assertIsNone(asyncio.run(_download(client)))

    def test_malformed_url_returns_none(self) -> None:
        self.assertIsNone(asyncio.run(download_image_as_data_uri("http://[::1", timeout=5)))


class UserContentTests(unittest.TestCase):
    def test_interleaved_order(self) -> None:
        parts = build_interleaved_content("Look at this.", "product image", "data:image/png;base64,AA", "Now write.")
        self.assertEqual(
            parts,
            [
                {"type": "input_text", "text": "Look at this."},
                {"type": "input_text", "text": "--- PRODUCT IMAGE ---"},
                {"type": "input_image", "image_url": "data:image/png;base64,AA"},
                {"type": "input_text", "text": "Now write."},
            ],
        )

    def test_without_image_url_returns_plain_prompt(self) -> None:
        content = asyncio.run(build_user_content("prompt", None, label="l", title="t"))
        self.assertEqual(content, "prompt")

    def test_failed_download_degrades_to_plain_prompt(self) -> None:
        async def run():
            async with _mock_client(status=500) as client:
                return await build_user_content("prompt", "https://x/y.png", label="l", title="t", client=client)

        self.assertEqual(asyncio.run(run()), "prompt")

    def test_malformed_url_degrades_to_plain_prompt(self) -> None:
        content = asyncio.run(build_user_content("prompt", "http://[::1", label="l", title="t"))
        self.assertEqual(content, "prompt")


if __name__ == "__main__":
    unittest.main()
