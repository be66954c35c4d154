from app.completion.client_base import BaseCompletionClient
from app.completion.dispatcher import CompletionDispatcher
from app.completion.factory import CompletionDispatcherFactory

__all__ = ["BaseCompletionClient", "CompletionDispatcher", "CompletionDispatcherFactory"]
