from __future__ import annotations

from dataclasses import dataclass

from fastapi import Header, HTTPException


@dataclass(frozen=True)
class RequestContext:
    user_id: str
    workspace_id: str | None = None


def get_request_context(
    x_user_id: str | None = Header(default=None),
    x_workspace_id: str | None = Header(default=None),
) -> RequestContext:
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Missing X-User-Id header.")
    workspace_id = (x_workspace_id or "").strip() or None
    return RequestContext(user_id=user_id, workspace_id=workspace_id)
