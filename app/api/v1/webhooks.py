"""Inbound GitHub webhook endpoint."""

import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError

from app.api.deps import DbSession, Pipeline, Verifier
from app.core.exceptions import InvalidPayloadError, InvalidSignatureError
from app.schemas.webhook import PushEvent
from app.services.ingestion import PUSH_EVENT

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("/github")
async def handle_github_webhook(
    request: Request,
    db: DbSession,
    verifier: Verifier,
    pipeline: Pipeline,
) -> dict[str, bool | int]:
    """
    Handle GitHub webhook deliveries.

    Verifies the X-Hub-Signature-256 header against the raw body before
    anything else is read. Push events are ingested; every other event
    type is acknowledged and ignored.
    No authentication required (verified by the webhook signature).
    """
    payload = await request.body()
    signature = request.headers.get("x-hub-signature-256")
    event_type = request.headers.get("x-github-event")
    delivery_id = request.headers.get("x-github-delivery", "")

    if not verifier.verify(payload, signature):
        logger.warning(f"Rejected GitHub webhook with invalid signature ({delivery_id})")
        raise InvalidSignatureError()

    logger.info(f"Received GitHub webhook: {event_type} ({delivery_id})")

    if event_type != PUSH_EVENT:
        result = await pipeline.ingest(db, event_type, None)
        return {"ok": True, "ignored": result.ignored, "processed": result.processed}

    try:
        event = PushEvent.model_validate_json(payload)
    except ValidationError as e:
        logger.warning(f"Malformed push payload ({delivery_id}): {e.error_count()} error(s)")
        raise InvalidPayloadError() from None

    result = await pipeline.ingest(db, event_type, event)
    # Commit before answering: GitHub does not redeliver an acknowledged event
    await db.commit()
    return {"ok": True, "ignored": result.ignored, "processed": result.processed}
