from pinecone_rest.assistant.assistant_client import AssistantClient

__all__ = ["AssistantClient"]
