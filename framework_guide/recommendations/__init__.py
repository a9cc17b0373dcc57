"""
Recommendation engine.

Responsibilities:
- Accept a project description and four requirement flags.
- Pick a framework with a fixed first-match rule cascade per project type.
- Generate a setup prompt embedding the project details and the choice.
- Define the request/response schemas shared with the HTTP layer.
"""
