from typing import Optional

from fastapi import Header, Request

from uptime_dashboard.core.store import SqlRecordStore
from uptime_dashboard.crud.gateway import Gateway


def get_gateway(
    request: Request,
    x_user_id: Optional[str] = Header(default=None, alias="X-User-Id"),
) -> Gateway:
    """
    Gateway for the calling user.

    The SQL store has no auth of its own, so the caller is taken from the
    ``X-User-Id`` header; without it the gateway falls back to the anonymous
    identity. Supabase resolves the caller from its own session.
    """
    store = request.app.state.store
    if isinstance(store, SqlRecordStore):
        store = store.for_user(x_user_id)
    return Gateway(store, settings=request.app.state.settings)
