"""Voice assistant webhook endpoint."""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from icetime.core.database import get_db
from icetime.schemas.assistant import ToolCallResult, ToolCallsResponse, WebhookRequest
from icetime.services.assistant_tools import assistant_tools

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vapi", tags=["assistant"])


@router.post("/webhook")
async def assistant_webhook(
    payload: WebhookRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Handle server messages from the voice assistant.

    "tool-calls" messages carry a batch of function calls; each is
    dispatched on its own and answered under its toolCallId. The older
    "function-call" message carries a single call. Every other message type
    is acknowledged.

    Args:
        payload: Webhook message
        db: Database session

    Returns:
        Results for the requested calls, or an acknowledgement
    """
    message = payload.message
    if message is None:
        return {"status": "ok"}

    if message.type == "tool-calls":
        response = ToolCallsResponse()
        for call in message.calls():
            result = await assistant_tools.dispatch(
                db, call.function.name, call.function.arguments
            )
            response.results.append(ToolCallResult(tool_call_id=str(call.id), result=result))
        logger.info(f"Answered {len(response.results)} tool call(s)")
        return response.model_dump(by_alias=True)

    if message.type == "function-call" and message.function_call is not None:
        result = await assistant_tools.dispatch(
            db, message.function_call.name, message.function_call.parameters
        )
        return {"result": result}

    logger.debug(f"Ignoring assistant message of type '{message.type}'")
    return {"status": "ok"}
