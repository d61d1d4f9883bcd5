"""Log context dependencies."""

from fastapi import Request

from src.thinktimer.core.logging import bind_entity_context


async def bind_path_ids(request: Request) -> None:
    """Bind project_id/time_block_id path parameters to the request's log context."""
    bind_entity_context(**request.path_params)
