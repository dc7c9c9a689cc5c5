# -*- coding: utf-8 -*-
"""
Instruction sent to the vision model along with the evidence.

The reply format described here is what `ExtractedData` validates, so both must
change together. Bump PROMPT_VERSION whenever the reply contract changes.
"""
from typing import Optional

PROMPT_VERSION = "2024-06-violations-v1"

USER_CONTEXT_TEMPLATE = (
    'The user who reported this provided the following context: "{user_comment}". '
    "Consider this in your analysis."
)

VIOLATION_PROMPT = """
You are an expert traffic violation analyzer.
Analyze this traffic camera image / video frame carefully.
{user_context}
Provide a JSON object containing the following boolean flags if you detect these specific violations, along with a confidence score (0.0 to 1.0) for each.
Also include a short "comment" field explaining exactly what you see and detailing whether a violation is present.
Critically, attempt to read the license plate of the primary vehicle in the scene. If you can read it, place it in the "license_plate" field as a clean, uppercase string without spaces (e.g. DL8CX9291). If you cannot read it entirely, return null for it.
Ensure the response is ONLY valid JSON.
{{
    "no_helmet": {{ "detected": boolean, "confidence": number }},
    "signal_jumping": {{ "detected": boolean, "confidence": number }},
    "wrong_side_driving": {{ "detected": boolean, "confidence": number }},
    "zebra_crossing_violation": {{ "detected": boolean, "confidence": number }},
    "illegal_parking": {{ "detected": boolean, "confidence": number }},
    "license_plate": "string or null",
    "comment": "your reasoning here"
}}

IMPORTANT FOR THE 'comment' FIELD:
- Make it extremely clear, concrete, and structured.
- Say ONLY what is necessary. No conversational filler.
- Use <b>bold</b> and <u>underline</u> for important keywords and status (e.g. <u><b>Detected</b></u>, <u><b>Not Found</b></u>, <u><b>N/A</b></u>, <u><b>Confirmed</b></u>).
- Separate the reasoning into these exact sections using newlines:
  <u><b>Vehicle:</b></u> [description]
  <u><b>Environment:</b></u> [description]
  <u><b>Behavior:</b></u> [description]
  <u><b>Conclusion:</b></u> [summary]
- Use <u><b>Violation Name</b></u> when referring to specific flags.
"""

FALLBACK_COMMENT = (
    "Simulated AI Fallback: The intelligence API failed to process the image "
    "correctly. Manual review advised."
)


def build_violation_prompt(user_comment: Optional[str] = None) -> str:
    user_context = ""
    if user_comment and user_comment.strip():
        user_context = USER_CONTEXT_TEMPLATE.format(user_comment=user_comment.strip())
    return VIOLATION_PROMPT.format(user_context=user_context)
