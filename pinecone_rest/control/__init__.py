"""Control-plane facade."""

from pinecone_rest.control.control_plane import ControlPlane

__all__ = ["ControlPlane"]
