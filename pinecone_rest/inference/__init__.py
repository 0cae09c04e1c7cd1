from pinecone_rest.inference.inference_client import InferenceClient

__all__ = ["InferenceClient"]
