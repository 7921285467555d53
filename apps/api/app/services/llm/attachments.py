from __future__ import annotations

import base64
import logging

import httpx

from apps.api.app.core.config import get_settings
from apps.api.app.services.llm.invocation import ContentPart, UserContent

_LOGGER = logging.getLogger(__name__)


async def download_image_as_data_uri(
    url: str,
    *,
    timeout: float | None = None,
    client: httpx.AsyncClient | None = None,
) -> str | None:
    """Fetch an image and return it as a base64 data URI, or None if unusable."""
    if timeout is None:
        timeout = get_settings().image_download_timeout_seconds
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned_client:
                response = await owned_client.get(url)
        else:
            response = await client.get(url, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        _LOGGER.warning("Image download failed. url=%s error=%s", url[:120], exc)
        return None

    if not response.is_success:
        _LOGGER.warning("Image download returned non-success status. url=%s status=%s", url[:120], response.status_code)
        return None
    content_type = response.headers.get("content-type", "image/jpeg").split(";")[0].strip()
    if not content_type.startswith("image/"):
        _LOGGER.warning("Image download returned non-image content. url=%s content_type=%s", url[:120], content_type)
        return None

    encoded = base64.b64encode(response.content).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


def build_interleaved_content(label: str, title: str, image_uri: str, instruction: str) -> list[ContentPart]:
    return [
        {"type": "input_text", "text": label},
        {"type": "input_text", "text": f"--- {title.upper()} ---"},
        {"type": "input_image", "image_url": image_uri},
        {"type": "input_text", "text": instruction},
    ]


async def build_user_content(
    prompt_text: str,
    image_url: str | None,
    *,
    label: str,
    title: str,
    client: httpx.AsyncClient | None = None,
) -> UserContent:
    if not image_url:
        return prompt_text
    image_uri = await download_image_as_data_uri(image_url, client=client)
    if image_uri is None:
        return prompt_text
    return build_interleaved_content(label, title, image_uri, prompt_text)
