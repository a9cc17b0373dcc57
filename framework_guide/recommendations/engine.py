from __future__ import annotations

from ..catalog.frameworks import FrameworkId, get_framework
from ..catalog.requirements import ProjectType, Requirements
from ..templates.library import get_boilerplate
from .models import Evaluation, ProjectRequest

RECOMMENDATION_TEXT: dict[FrameworkId, str] = {
    FrameworkId.next: (
        "Next.js is recommended for your project due to its built-in performance "
        "optimizations and scalability features. It provides server-side rendering, "
        "static site generation, and excellent developer experience."
    ),
    FrameworkId.vue: (
        "Vue.js is recommended for your project. It's known for its gentle learning "
        "curve and excellent documentation, making it perfect for teams prioritizing "
        "ease of use."
    ),
    FrameworkId.react: (
        "React is recommended as a versatile choice with a massive ecosystem and strong "
        "community support. It's well-suited for most web applications and has "
        "excellent tooling."
    ),
    FrameworkId.fastify: (
        "Fastify is recommended for your API project. It's one of the fastest Node.js "
        "frameworks and has excellent TypeScript support."
    ),
    FrameworkId.express: (
        "Express.js is recommended for your API project. It's the most popular Node.js "
        "framework with extensive middleware support and documentation."
    ),
}

FALLBACK_FRAMEWORK = FrameworkId.express
FALLBACK_TEXT = (
    "Based on your requirements, we recommend starting with a simple Express.js setup "
    "which can be easily extended as needed."
)

CLOSING_INSTRUCTION = (
    "Please help me set up a project with these specifications using best practices "
    "and proper configuration for Replit."
)
TEMPLATE_HEADING = "Template specific requirements:"


def choose_framework(project_type: str, reqs: Requirements) -> tuple[FrameworkId, str]:
    """
    Apply the first-match rule cascade for a project type.

    Returns the framework id and the recommendation sentence. Flags not
    tested by the matching branch have no influence.
    """
    if project_type == ProjectType.web:
        if reqs.performance and reqs.scalability:
            framework = FrameworkId.next
        elif reqs.ease_of_use:
            framework = FrameworkId.vue
        else:
            framework = FrameworkId.react
    elif project_type == ProjectType.api:
        framework = FrameworkId.fastify if reqs.performance else FrameworkId.express
    else:
        return FALLBACK_FRAMEWORK, FALLBACK_TEXT

    return framework, RECOMMENDATION_TEXT[framework]


def build_prompt(request: ProjectRequest, recommendation: str) -> str:
    bullets = "\n".join(f"- {flag.value}" for flag in request.requirements.enabled_flags())
    return (
        f"I'm building {request.project_name}, which is {request.description}\n"
        "\n"
        "Key requirements:\n"
        f"{bullets}\n"
        "\n"
        f"Based on analysis: {recommendation}\n"
        "\n"
        f"{CLOSING_INSTRUCTION}"
    )


def append_template(prompt: str, template_name: str | None) -> str:
    """Append a template's boilerplate; unknown or missing names leave the prompt as is."""
    if not template_name:
        return prompt
    boilerplate = get_boilerplate(template_name)
    if boilerplate is None:
        return prompt
    return f"{prompt}\n\n{TEMPLATE_HEADING}\n{boilerplate}"


def evaluate(request: ProjectRequest) -> Evaluation:
    framework, recommendation = choose_framework(request.project_type, request.requirements)
    prompt = append_template(build_prompt(request, recommendation), request.template)
    return Evaluation(
        framework=framework,
        framework_name=get_framework(framework).name,
        recommendation=recommendation,
        prompt=prompt,
    )
