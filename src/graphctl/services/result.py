"""ServiceResult and ServiceError — the envelope every service returns.

INVARIANT: All service-layer methods return ServiceResult. Expected
outcomes (missing nodes, no path, exhausted budgets) become ``ok=False``
results with an error code, never exceptions.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is one of ``NOT_FOUND``, ``ALREADY_EXISTS``, ``NO_PATH``,
    ``NO_EULERIAN_PATH``, ``NO_HAMILTONIAN_PATH``, ``NO_HAMILTONIAN_CYCLE``,
    ``BUDGET_EXCEEDED``, ``INVALID_SNAPSHOT``, ``INVALID_FORMAT``, ``IO_ERROR``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_node"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans when verbose).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
