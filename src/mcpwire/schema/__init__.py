"""MCP schema: pydantic models for every message shape."""

from mcpwire.schema.base import (
    JSONRPC_VERSION,
    EmptyResult,
    MCPModel,
    Notification,
    NotificationParams,
    ProgressToken,
    Request,
    RequestId,
    RequestMeta,
    RequestParams,
    Result,
)
from mcpwire.schema.capabilities import (
    ClientCapabilities,
    Implementation,
    ResourcesCapability,
    ServerCapabilities,
)
from mcpwire.schema.completion import (
    MAX_COMPLETION_VALUES,
    CompleteRequest,
    CompleteRequestParams,
    CompleteResult,
    Completion,
    CompletionArgument,
    PromptReference,
    ResourceReference,
)
from mcpwire.schema.content import (
    AnyResourceContents,
    BlobResourceContents,
    Content,
    ImageContent,
    ResourceContents,
    SamplingMessage,
    TextContent,
    TextResourceContents,
)
from mcpwire.schema.jsonrpc import (
    EnvelopeKind,
    ErrorObject,
    JSONRPCError,
    JSONRPCMessage,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponse,
)
from mcpwire.schema.lifecycle import (
    PING_REQUEST_METHOD,
    PROGRESS_NOTIFICATION_METHOD,
    PROTOCOL_VERSION,
    InitializedNotification,
    InitializeRequest,
    InitializeRequestParams,
    InitializeResult,
    PingRequest,
    Progress,
    ProgressNotification,
    ProgressNotificationParams,
)
from mcpwire.schema.log import (
    LoggingLevel,
    LoggingMessageNotification,
    LoggingMessageNotificationParams,
    SetLevelRequest,
    SetLevelRequestParams,
)
from mcpwire.schema.prompts import (
    GetPromptRequest,
    GetPromptRequestParams,
    GetPromptResult,
    ListPromptsRequest,
    ListPromptsResult,
    Prompt,
    PromptArgument,
)
from mcpwire.schema.resources import (
    ListResourcesRequest,
    ListResourcesResult,
    ReadResourceRequest,
    ReadResourceResult,
    Resource,
    ResourceListChangedNotification,
    ResourceRequestParams,
    ResourceTemplate,
    ResourceUpdatedNotification,
    ResourceUpdatedNotificationParams,
    SubscribeRequest,
    UnsubscribeRequest,
)
from mcpwire.schema.sampling import (
    CreateMessageRequest,
    CreateMessageRequestParams,
    CreateMessageResult,
)
from mcpwire.schema.tools import (
    CallToolRequest,
    CallToolRequestParams,
    CallToolResult,
    ListToolsRequest,
    ListToolsResult,
    Tool,
    ToolInputSchema,
    ToolListChangedNotification,
)

__all__ = [
    "JSONRPC_VERSION",
    "MAX_COMPLETION_VALUES",
    "PING_REQUEST_METHOD",
    "PROGRESS_NOTIFICATION_METHOD",
    "PROTOCOL_VERSION",
    "AnyResourceContents",
    "BlobResourceContents",
    "CallToolRequest",
    "CallToolRequestParams",
    "CallToolResult",
    "ClientCapabilities",
    "CompleteRequest",
    "CompleteRequestParams",
    "CompleteResult",
    "Completion",
    "CompletionArgument",
    "Content",
    "CreateMessageRequest",
    "CreateMessageRequestParams",
    "CreateMessageResult",
    "EmptyResult",
    "EnvelopeKind",
    "ErrorObject",
    "GetPromptRequest",
    "GetPromptRequestParams",
    "GetPromptResult",
    "ImageContent",
    "Implementation",
    "InitializeRequest",
    "InitializeRequestParams",
    "InitializeResult",
    "InitializedNotification",
    "JSONRPCError",
    "JSONRPCMessage",
    "JSONRPCNotification",
    "JSONRPCRequest",
    "JSONRPCResponse",
    "ListPromptsRequest",
    "ListPromptsResult",
    "ListResourcesRequest",
    "ListResourcesResult",
    "ListToolsRequest",
    "ListToolsResult",
    "LoggingLevel",
    "LoggingMessageNotification",
    "LoggingMessageNotificationParams",
    "MCPModel",
    "Notification",
    "NotificationParams",
    "PingRequest",
    "Progress",
    "ProgressNotification",
    "ProgressNotificationParams",
    "ProgressToken",
    "Prompt",
    "PromptArgument",
    "PromptReference",
    "ReadResourceRequest",
    "ReadResourceResult",
    "Request",
    "RequestId",
    "RequestMeta",
    "RequestParams",
    "Resource",
    "ResourceContents",
    "ResourceListChangedNotification",
    "ResourceReference",
    "ResourceRequestParams",
    "ResourceTemplate",
    "ResourceUpdatedNotification",
    "ResourceUpdatedNotificationParams",
    "ResourcesCapability",
    "Result",
    "SamplingMessage",
    "ServerCapabilities",
    "SetLevelRequest",
    "SetLevelRequestParams",
    "SubscribeRequest",
    "TextContent",
    "TextResourceContents",
    "Tool",
    "ToolInputSchema",
    "ToolListChangedNotification",
    "UnsubscribeRequest",
]
