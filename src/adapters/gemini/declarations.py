"""Declaraciones de funciones y esquema de salida estructurada.

Forman parte del contrato con el servicio remoto (function-calling y
`response_schema`): nombres, tipos y listas `required` deben mantenerse tal
cual.
"""

from __future__ import annotations

from google.genai import types

from core.domain.commands import FunctionName
from core.domain.models import AspectRatio

GENERATE_POST_BRIEFS_DECLARATION = types.FunctionDeclaration(
    name=FunctionName.GENERATE_POST_BRIEFS.value,
    parameters=types.Schema(
        type=types.Type.OBJECT,
        description="Generates social media post briefs based on a topic and tone.",
        properties={
            "topic": types.Schema(
                type=types.Type.STRING,
                description="The central topic for the posts.",
            ),
            "tone": types.Schema(
                type=types.Type.STRING,
                description="The desired tone of voice (e.g., professional, witty, casual).",
            ),
        },
        required=["topic", "tone"],
    ),
)

SUMMARIZE_METRICS_DECLARATION = types.FunctionDeclaration(
    name=FunctionName.SUMMARIZE_METRICS.value,
    parameters=types.Schema(
        type=types.Type.OBJECT,
        description="Summarizes social media engagement metrics for a given period.",
        properties={
            "period": types.Schema(
                type=types.Type.STRING,
                description='The time period to summarize (e.g., "last7days", "lastmonth").',
            ),
        },
        required=["period"],
    ),
)

SCHEDULE_POST_DECLARATION = types.FunctionDeclaration(
    name=FunctionName.SCHEDULE_POST.value,
    parameters=types.Schema(
        type=types.Type.OBJECT,
        description="Schedules a post for a specific date, time, and platform.",
        properties={
            "datetime": types.Schema(
                type=types.Type.STRING,
                description="The ISO 8601 date and time for scheduling.",
            ),
            "platform": types.Schema(
                type=types.Type.STRING,
                description="The social media platform (e.g., Twitter, Instagram).",
            ),
        },
        required=["datetime", "platform"],
    ),
)

# Orden fijo: briefs, métricas, programación.
FUNCTION_DECLARATIONS: list[types.FunctionDeclaration] = [
    GENERATE_POST_BRIEFS_DECLARATION,
    SUMMARIZE_METRICS_DECLARATION,
    SCHEDULE_POST_DECLARATION,
]

INTELLIGENCE_TOOL = types.Tool(function_declarations=FUNCTION_DECLARATIONS)

CONCEPTS_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "concepts": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "title": types.Schema(type=types.Type.STRING),
                    "conceptDescription": types.Schema(type=types.Type.STRING),
                    "palette": types.Schema(
                        type=types.Type.ARRAY,
                        items=types.Schema(type=types.Type.STRING),
                    ),
                    "caption": types.Schema(type=types.Type.STRING),
                    "altText": types.Schema(type=types.Type.STRING),
                    "aspectRatio": types.Schema(
                        type=types.Type.STRING,
                        enum=AspectRatio.values(),
                    ),
                },
            ),
        ),
    },
)
