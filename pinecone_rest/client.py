"""Top-level client.

:class:`Pinecone` owns the controller connection and hands out resource
clients bound to data hosts:

- :meth:`Pinecone.index` and :meth:`Pinecone.assistant` describe the resource
  once to learn its host, then cache the bound client by name.
- :meth:`Pinecone.inference` shares the controller connection.

Control-plane operations are available directly on the client::

    with Pinecone(api_key="...") as pc:
        if not pc.has_index("movies"):
            pc.create_index("movies", {"dimension": 8, "spec": {...}})
        pc.index("movies").upsert([{"id": "m1", "values": [0.0] * 8}])
"""

import logging
import threading
from typing import Any, Callable, Mapping, Optional, TypeVar

import httpx

from pinecone_rest.assistant.assistant_client import AssistantClient
from pinecone_rest.config import ClientConfig, Settings, resolve_config
from pinecone_rest.control.control_plane import ControlPlane
from pinecone_rest.data.index import Index
from pinecone_rest.errors import PineconeError, PineconeValidationError
from pinecone_rest.http.resource_client import ResourceClient
from pinecone_rest.inference.inference_client import InferenceClient

logger = logging.getLogger(__name__)

T = TypeVar("T", Index, AssistantClient)


def _origin(host: str) -> str:
    """Return ``host`` as an origin URL, assuming https when no scheme is given."""
    host = host.rstrip("/")
    return host if "://" in host else f"https://{host}"


class Pinecone:
    """Entry point for every operation.

    Args:
        api_key:            API key; falls back to ``PINECONE_API_KEY``.
        controller_host:    Control-plane origin; falls back to
                            ``PINECONE_CONTROLLER_HOST``.
        timeout:            Request timeout in seconds; falls back to
                            ``PINECONE_TIMEOUT``.
        additional_headers: Extra headers sent on every request.  They
                            replace defaults of the same name.
        settings:           Explicit :class:`Settings` instead of the
                            process environment.
        transport:          Optional httpx transport shared by every
                            connection this client opens.

    Raises:
        PineconeValidationError: The resolved configuration is invalid.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        controller_host: Optional[str] = None,
        timeout: Optional[Any] = None,
        additional_headers: Optional[Mapping[str, str]] = None,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config: ClientConfig = resolve_config(
            api_key,
            controller_host=controller_host,
            timeout=timeout,
            additional_headers=additional_headers,
            settings=settings,
        )
        self._transport = transport
        self._controller_client = self._open(self.config.controller_host)
        self._control_plane = ControlPlane(self._controller_client)

        self._lock = threading.Lock()
        self._indexes: dict[str, Index] = {}
        self._assistants: dict[str, AssistantClient] = {}
        self._inference: Optional[InferenceClient] = None

    def _open(self, base_url: str) -> ResourceClient:
        return ResourceClient(
            base_url,
            headers=self.config.default_headers,
            timeout=self.config.timeout,
            transport=self._transport,
        )

    def _cached(
        self,
        cache: dict[str, T],
        name: str,
        refresh: bool,
        build: Callable[[], T],
    ) -> T:
        if not refresh:
            with self._lock:
                existing = cache.get(name)
            if existing is not None:
                return existing

        # Built outside the lock; concurrent first calls may each describe.
        created = build()
        with self._lock:
            existing = cache.get(name)
            if existing is not None and not refresh:
                loser, winner = created, existing
            else:
                cache[name] = created
                loser, winner = existing, created
        if loser is not None:
            loser.close()
        return winner

    # ------------------------------------------------------------------
    # Resource clients
    # ------------------------------------------------------------------

    def index(self, name: str, refresh: bool = False) -> Index:
        """Return the client bound to index ``name``'s data host.

        The host is discovered with one describe call and the client is
        cached; ``refresh=True`` describes again, replaces the cached entry and
        closes the one it replaces, so earlier references stop working.

        Raises:
            PineconeValidationError: ``name`` is blank.
            PineconeError: The index has no host yet, or the describe failed.
        """
        if not name or not name.strip():
            raise PineconeValidationError("Index name must not be empty.")

        def build() -> Index:
            description = self._control_plane.describe_index(name)
            host = description.get("host")
            if not host:
                raise PineconeError(f"Index '{name}' does not have a host URL.")
            origin = _origin(host)
            logger.info("Resolved index %r to host %s", name, origin)
            return Index(self._open(origin), name=name)

        return self._cached(self._indexes, name, refresh, build)

    def assistant(self, name: str, refresh: bool = False) -> AssistantClient:
        """Return the client for assistant ``name``.

        The assistant's data host comes from the describe response; the
        controller host is used when the response has none.
        """
        if not name or not name.strip():
            raise PineconeValidationError("Assistant name must not be empty.")

        def build() -> AssistantClient:
            description = self._control_plane.describe_assistant(name)
            host = description.get("host")
            origin = _origin(host) if host else self.config.controller_host
            logger.info("Resolved assistant %r to host %s", name, origin)
            return AssistantClient(self._open(origin), name)

        return self._cached(self._assistants, name, refresh, build)

    def inference(self) -> InferenceClient:
        """Return the inference client (created on first use)."""
        with self._lock:
            if self._inference is None:
                self._inference = InferenceClient(self._controller_client)
            return self._inference

    def has_index(self, name: str) -> bool:
        """``True`` if ``name`` can be described; any client error counts as absent."""
        try:
            self._control_plane.describe_index(name)
        except PineconeError:
            return False
        return True

    # ------------------------------------------------------------------
    # Control plane
    # ------------------------------------------------------------------

    def list_indexes(self) -> list[dict[str, Any]]:
        return self._control_plane.list_indexes()

    def create_index(self, name: str, request: dict[str, Any]) -> dict[str, Any]:
        return self._control_plane.create_index(name, request)

    def create_for_model(self, name: str, request: dict[str, Any]) -> dict[str, Any]:
        return self._control_plane.create_for_model(name, request)

    def describe_index(self, name: str) -> dict[str, Any]:
        return self._control_plane.describe_index(name)

    def delete_index(self, name: str) -> None:
        self._control_plane.delete_index(name)

    def configure_index(self, name: str, request: dict[str, Any]) -> dict[str, Any]:
        return self._control_plane.configure_index(name, request)

    def create_collection(self, request: dict[str, Any]) -> dict[str, Any]:
        return self._control_plane.create_collection(request)

    def list_collections(self) -> list[dict[str, Any]]:
        return self._control_plane.list_collections()

    def describe_collection(self, name: str) -> dict[str, Any]:
        return self._control_plane.describe_collection(name)

    def delete_collection(self, name: str) -> None:
        self._control_plane.delete_collection(name)

    def create_backup(self, request: dict[str, Any]) -> dict[str, Any]:
        return self._control_plane.create_backup(request)

    def list_backups(self) -> list[dict[str, Any]]:
        return self._control_plane.list_backups()

    def describe_backup(self, backup_id: str) -> dict[str, Any]:
        return self._control_plane.describe_backup(backup_id)

    def delete_backup(self, backup_id: str) -> None:
        self._control_plane.delete_backup(backup_id)

    def create_index_from_backup(
        self, backup_id: str, request: dict[str, Any]
    ) -> dict[str, Any]:
        return self._control_plane.create_index_from_backup(backup_id, request)

    def list_restore_jobs(
        self, params: Optional[dict[str, Any]] = None
    ) -> list[dict[str, Any]]:
        return self._control_plane.list_restore_jobs(params)

    def describe_restore_job(self, job_id: str) -> dict[str, Any]:
        return self._control_plane.describe_restore_job(job_id)

    def create_assistant(self, request: dict[str, Any]) -> dict[str, Any]:
        return self._control_plane.create_assistant(request)

    def list_assistants(self) -> list[dict[str, Any]]:
        return self._control_plane.list_assistants()

    def describe_assistant(self, name: str) -> dict[str, Any]:
        return self._control_plane.describe_assistant(name)

    def update_assistant(self, name: str, request: dict[str, Any]) -> dict[str, Any]:
        return self._control_plane.update_assistant(name, request)

    def delete_assistant(self, name: str) -> None:
        self._control_plane.delete_assistant(name)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self):
        """Close every connection opened by this client."""
        with self._lock:
            owned = [
                *self._indexes.values(),
                *self._assistants.values(),
            ]
            self._indexes.clear()
            self._assistants.clear()
        for resource in owned:
            resource.close()
        self._controller_client.close()

    def __enter__(self) -> "Pinecone":
        return self

    def __exit__(self, *exc_info):
        self.close()
