from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .catalog.frameworks import (
    FeatureValue,
    FrameworkDescriptor,
    UnknownFrameworkError,
    compare_frameworks,
    frameworks_for_type,
)
from .catalog.requirements import ProjectType, RequirementFlag
from .config import DEFAULT_APP_CONFIG, AppConfig
from .persistence.database import db_manager
from .persistence.store import (
    MissingFieldError,
    StorageError,
    list_prompts,
    record_prompt,
    record_recommendation,
    recommendation_statistics,
)
from .recommendations.engine import evaluate
from .recommendations.models import (
    BoilerplateOut,
    ComparisonOut,
    Evaluation,
    FrameworkOut,
    ProjectRequest,
    PromptCreate,
    PromptOut,
    RecommendationCreate,
    RecommendationOut,
    RecommendationStats,
    TemplateOut,
)
from .templates.library import PROJECT_TEMPLATES, find_templates_by_type, get_template

logger = logging.getLogger(__name__)

app = FastAPI(title="Framework Choice Guide API", version="1.0.0")

db_manager.init_db()


def _storage_failure(message: str, exc: Exception) -> JSONResponse:
    logger.exception(message)
    return JSONResponse(status_code=500, content={"error": message, "details": str(exc)})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(MissingFieldError)
async def missing_field_handler(request: Request, exc: MissingFieldError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc), "details": exc.fields})


def _feature_out(value: FeatureValue | None) -> dict | None:
    if value is None:
        return None
    return {"kind": value.kind, "value": value.value}


def _framework_out(fw: FrameworkDescriptor) -> FrameworkOut:
    return FrameworkOut(
        id=fw.id,
        key=fw.key,
        project_type=fw.project_type,
        name=fw.name,
        description=fw.description,
        strengths=[flag.value for flag in RequirementFlag if flag in fw.strengths],
        features={name: _feature_out(value) for name, value in fw.features.items()},
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/evaluate", response_model=Evaluation)
def evaluate_project(body: ProjectRequest) -> Evaluation:
    return evaluate(body)


@app.get("/api/frameworks", response_model=list[FrameworkOut])
def list_frameworks(project_type: ProjectType = Query(..., alias="projectType")) -> list[FrameworkOut]:
    return [_framework_out(fw) for fw in frameworks_for_type(project_type)]


@app.get("/api/frameworks/compare", response_model=ComparisonOut)
def compare(
    project_type: ProjectType = Query(..., alias="projectType"),
    keys: list[str] = Query(...),
) -> ComparisonOut:
    keys = list(dict.fromkeys(keys))
    try:
        rows = compare_frameworks(project_type, keys)
    except UnknownFrameworkError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown framework: {exc.args[0]}")
    return ComparisonOut(
        project_type=project_type.value,
        frameworks=keys,
        rows=[
            {
                "feature": row["feature"],
                "values": {key: _feature_out(value) for key, value in row["values"].items()},
            }
            for row in rows
        ],
    )


@app.get("/api/templates", response_model=list[TemplateOut])
def list_templates(
    project_type: ProjectType | None = Query(default=None, alias="projectType"),
) -> list[TemplateOut]:
    templates = PROJECT_TEMPLATES if project_type is None else find_templates_by_type(project_type)
    return [
        TemplateOut(
            name=t.name,
            description=t.description,
            project_type=t.project_type,
            requirements=t.requirements,
            features=list(t.features),
            boilerplate_prompt=t.boilerplate_prompt,
        )
        for t in templates
    ]


@app.get("/api/templates/{name}/boilerplate", response_model=BoilerplateOut)
def template_boilerplate(name: str) -> BoilerplateOut:
    template = get_template(name)
    if template is None:
        raise HTTPException(status_code=404, detail=f"Unknown template: {name}")
    return BoilerplateOut(name=template.name, boilerplate=template.boilerplate_prompt)


# ── Recommendation history ───────────────────────────────────────────────


@app.post("/api/recommendations", response_model=RecommendationOut)
def save_recommendation(body: RecommendationCreate):
    try:
        return record_recommendation(
            body.project_type,
            body.requirements.to_record(),
            body.recommended_framework,
        )
    except StorageError as exc:
        return _storage_failure("Failed to save recommendation", exc)


@app.get("/api/recommendations/stats", response_model=RecommendationStats)
def recommendation_stats():
    try:
        return recommendation_statistics()
    except StorageError as exc:
        return _storage_failure("Failed to fetch statistics", exc)


# ── Prompt history ───────────────────────────────────────────────────────


@app.post("/api/prompts", response_model=PromptOut)
def save_prompt(body: PromptCreate):
    try:
        return record_prompt(
            body.project_name,
            body.project_type,
            body.description,
            body.requirements.to_record(),
            body.prompt,
            body.recommendation,
        )
    except StorageError as exc:
        return _storage_failure("Failed to save prompt", exc)


@app.get("/api/prompts", response_model=list[PromptOut])
def prompt_history():
    try:
        return list_prompts()
    except StorageError as exc:
        return _storage_failure("Failed to fetch prompt history", exc)


def main(config: AppConfig = DEFAULT_APP_CONFIG) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="[%(asctime)s] %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Starting server on %s:%d", config.host, config.port)
    # uvicorn exits with status 1 when it cannot bind (port in use, no privilege).
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
