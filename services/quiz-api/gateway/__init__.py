"""Real-time gateway exports."""

from .conversation_gateway import ConversationGateway

__all__ = ["ConversationGateway"]
