from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class RecommendationRow(Base):
    __tablename__ = "recommendations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_type: Mapped[str] = mapped_column(String(32), nullable=False)
    requirements: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    recommended_framework: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    # 1-5 rating; no endpoint writes it yet
    user_feedback: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[str] = mapped_column(String(40), nullable=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "project_type": self.project_type,
            "requirements": self.requirements,
            "recommended_framework": self.recommended_framework,
            "user_feedback": self.user_feedback,
            "created_at": self.created_at,
        }


class PromptHistoryRow(Base):
    __tablename__ = "prompt_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_name: Mapped[str] = mapped_column(Text, nullable=False)
    project_type: Mapped[str] = mapped_column(String(32), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    requirements: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    prompt: Mapped[str] = mapped_column(Text, nullable=False)
    recommendation: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[str] = mapped_column(String(40), nullable=False, index=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "project_name": self.project_name,
            "project_type": self.project_type,
            "description": self.description,
            "requirements": self.requirements,
            "prompt": self.prompt,
            "recommendation": self.recommendation,
            "created_at": self.created_at,
        }
