from __future__ import annotations

from dataclasses import dataclass

from ..catalog.requirements import ProjectType, Requirements


@dataclass(frozen=True)
class ProjectTemplate:
    name: str
    description: str
    project_type: ProjectType
    requirements: Requirements
    features: tuple[str, ...]
    boilerplate_prompt: str


PROJECT_TEMPLATES: tuple[ProjectTemplate, ...] = (
    ProjectTemplate(
        name="REST API Service",
        description="A RESTful API service with database integration",
        project_type=ProjectType.api,
        requirements=Requirements(
            performance=True, scalability=True, ease_of_use=True, ecosystem=True
        ),
        features=(
            "CRUD operations",
            "Database integration",
            "Authentication",
            "API documentation",
        ),
        boilerplate_prompt=(
            "Create a REST API with the following features:\n"
            "- CRUD operations\n"
            "- Database integration\n"
            "- JWT authentication\n"
            "- API documentation using Swagger/OpenAPI"
        ),
    ),
    ProjectTemplate(
        name="SPA Dashboard",
        description="Single Page Application dashboard with real-time updates",
        project_type=ProjectType.web,
        requirements=Requirements(
            performance=True, scalability=False, ease_of_use=True, ecosystem=True
        ),
        features=(
            "Real-time data updates",
            "Interactive charts",
            "Responsive design",
            "Theme customization",
        ),
        boilerplate_prompt=(
            "Create a dashboard SPA with:\n"
            "- Real-time data visualization\n"
            "- Interactive charts using Recharts\n"
            "- Responsive layout\n"
            "- Dark/light theme support"
        ),
    ),
    ProjectTemplate(
        name="CLI Tool",
        description="Command-line interface tool with file processing capabilities",
        project_type=ProjectType.cli,
        requirements=Requirements(
            performance=True, scalability=False, ease_of_use=True, ecosystem=False
        ),
        features=(
            "Command-line arguments",
            "File processing",
            "Progress indicators",
            "Error handling",
        ),
        boilerplate_prompt=(
            "Create a CLI tool that:\n"
            "- Processes command-line arguments\n"
            "- Handles file operations\n"
            "- Shows progress bars\n"
            "- Implements proper error handling"
        ),
    ),
    ProjectTemplate(
        name="Mobile App",
        description="Cross-platform mobile application with offline support",
        project_type=ProjectType.mobile,
        requirements=Requirements(
            performance=True, scalability=False, ease_of_use=True, ecosystem=True
        ),
        features=(
            "Cross-platform compatibility",
            "Offline data storage",
            "Push notifications",
            "Native device features",
        ),
        boilerplate_prompt=(
            "Create a mobile app with:\n"
            "- Cross-platform support\n"
            "- Local data storage\n"
            "- Push notification handling\n"
            "- Device feature integration"
        ),
    ),
)


def find_templates_by_type(project_type: ProjectType | str) -> tuple[ProjectTemplate, ...]:
    """Return templates whose type matches exactly; empty when none do."""
    return tuple(t for t in PROJECT_TEMPLATES if t.project_type == project_type)


def get_template(template_name: str) -> ProjectTemplate | None:
    for template in PROJECT_TEMPLATES:
        if template.name == template_name:
            return template
    return None


def get_boilerplate(template_name: str) -> str | None:
    """Return the boilerplate prompt for a template name, or ``None``."""
    template = get_template(template_name)
    return template.boilerplate_prompt if template else None
