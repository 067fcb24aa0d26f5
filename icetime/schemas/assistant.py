"""Voice assistant webhook schemas."""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional, Union


class ToolFunction(BaseModel):
    """Named function invocation; arguments may arrive JSON-encoded."""

    name: Optional[str] = None
    arguments: Any = None


class ToolCall(BaseModel):
    id: Union[str, int] = ""
    type: str = "function"
    function: ToolFunction = Field(default_factory=ToolFunction)


class FunctionCall(BaseModel):
    """Single call in the older function-call message format."""

    name: str
    parameters: Any = None


class WebhookMessage(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: str
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_list: Optional[List[ToolCall]] = None
    function_call: Optional[FunctionCall] = None

    def calls(self) -> List[ToolCall]:
        return self.tool_calls or self.tool_call_list or []


class WebhookRequest(BaseModel):
    message: Optional[WebhookMessage] = None


class ToolCallResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    tool_call_id: str
    result: Dict[str, Any]


class ToolCallsResponse(BaseModel):
    results: List[ToolCallResult] = Field(default_factory=list)
