from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from .database import db_manager
from .tables import PromptHistoryRow, RecommendationRow

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the database rejects or fails an operation."""


class MissingFieldError(ValueError):
    """Raised when a required field is absent on write."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"Missing required fields: {', '.join(fields)}")


def _now_iso() -> str:
    # Fixed-width UTC timestamps sort lexicographically in time order.
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


def _require(**fields: Any) -> None:
    missing = [name for name, value in fields.items() if value is None or value == ""]
    if missing:
        raise MissingFieldError(missing)


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


def _add(row: RecommendationRow | PromptHistoryRow) -> dict[str, Any]:
    try:
        with db_manager.get_session() as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return row.to_dict()
    except SQLAlchemyError as exc:
        raise StorageError(str(exc)) from exc


# ── Recommendation stream ────────────────────────────────────────────────


def record_recommendation(
    project_type: str | None,
    requirements: dict[str, bool] | None,
    recommended_framework: str | None,
) -> dict[str, Any]:
    _require(
        project_type=project_type,
        requirements=requirements,
        recommended_framework=recommended_framework,
    )
    stored = _add(
        RecommendationRow(
            project_type=_enum_value(project_type),
            requirements=requirements,
            recommended_framework=_enum_value(recommended_framework),
            created_at=_now_iso(),
        )
    )
    logger.info(
        "Recorded recommendation %s for %s project",
        stored["recommended_framework"],
        stored["project_type"],
    )
    return stored


def recommendation_statistics() -> dict[str, Any]:
    """Count all stored recommendations, overall and per framework."""
    try:
        with db_manager.get_session() as session:
            frameworks = session.scalars(select(RecommendationRow.recommended_framework)).all()
    except SQLAlchemyError as exc:
        raise StorageError(str(exc)) from exc

    by_framework: Counter[str] = Counter()
    for framework in frameworks:
        by_framework[framework] += 1

    return {"total": len(frameworks), "by_framework": dict(by_framework)}


# ── Prompt-history stream ────────────────────────────────────────────────


def record_prompt(
    project_name: str | None,
    project_type: str | None,
    description: str | None,
    requirements: dict[str, bool] | None,
    prompt: str | None,
    recommendation: str | None,
) -> dict[str, Any]:
    _require(
        project_name=project_name,
        project_type=project_type,
        description=description,
        requirements=requirements,
        prompt=prompt,
        recommendation=recommendation,
    )
    stored = _add(
        PromptHistoryRow(
            project_name=project_name,
            project_type=_enum_value(project_type),
            description=description,
            requirements=requirements,
            prompt=prompt,
            recommendation=recommendation,
            created_at=_now_iso(),
        )
    )
    logger.info("Recorded prompt %d for %s", stored["id"], stored["project_name"])
    return stored


def list_prompts() -> list[dict[str, Any]]:
    """Return every prompt-history record, oldest first."""
    query = select(PromptHistoryRow).order_by(
        PromptHistoryRow.created_at.asc(), PromptHistoryRow.id.asc()
    )
    try:
        with db_manager.get_session() as session:
            return [row.to_dict() for row in session.scalars(query)]
    except SQLAlchemyError as exc:
        raise StorageError(str(exc)) from exc


# ── Test helpers ─────────────────────────────────────────────────────────


def clear_recommendations() -> None:
    with db_manager.get_session() as session:
        session.execute(delete(RecommendationRow))
        session.commit()


def clear_prompts() -> None:
    with db_manager.get_session() as session:
        session.execute(delete(PromptHistoryRow))
        session.commit()
