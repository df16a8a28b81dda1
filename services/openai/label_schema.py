"""Schema definitions for the label reporting tool."""

from typing import Any, Dict

FUNCTION_NAME = "report_labels"

FUNCTION_DEFINITION: Dict[str, Any] = {
    "type": "function",
    "name": FUNCTION_NAME,
    "description": "Report the concepts visible in the image, most confident first.",
    "parameters": {
        "type": "object",
        "properties": {
            "labels": {
                "type": "array",
                "description": "Detected labels in descending order of confidence.",
                "items": {
                    "type": "object",
                    "properties": {
                        "description": {
                            "type": "string",
                            "description": "Short name of the object, scene or concept.",
                        },
                        "score": {
                            "type": "number",
                            "description": "Confidence between 0 and 1.",
                        },
                    },
                    "required": ["description", "score"],
                    "additionalProperties": False,
                },
            },
        },
        "required": ["labels"],
        "additionalProperties": False,
    },
    "strict": True,
}
