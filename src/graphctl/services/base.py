"""BaseService — shared foundation for graphctl services.

Every service receives a :class:`Workspace` at construction time. The
workspace owns the graph store; services read it via ``self._workspace.store``
and wrap mutations in ``self._workspace.transaction()`` so the snapshot file
is only rewritten when the mutation completes.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from graphctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from graphctl.infrastructure.workspace import Workspace, WorkspaceError


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GraphService(BaseService):
            def add_node(self, node_id: str) -> ServiceResult:
                with self._workspace.transaction() as store:
                    ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @staticmethod
    def _error(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build a failed ServiceResult."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    @staticmethod
    def _workspace_error(op: str, exc: WorkspaceError) -> ServiceResult:
        """Failed result carrying the workspace error code (IO_ERROR, INVALID_SNAPSHOT)."""
        return BaseService._error(op, exc.code, str(exc), path=str(exc.path))

    @staticmethod
    def _distance(value: float) -> float | None:
        """JSON-safe distance: unreachable (``inf``) becomes None."""
        return value if math.isfinite(value) else None
