from pydantic import BaseModel

from coding_coach.constants import (
    EVALUATION_CRITERIA,
    LANGUAGE_EXPERT_FRAMING,
    LANGUAGE_IDIOM_NOTE,
    LANGUAGE_MAP,
    OUTPUT_SHAPE,
    PROMPT_TEMPLATE,
)


class AnalysisPrompt(BaseModel):
    language: str
    text: str


def detect_language(filename: str) -> str:
    """Map a filename's extension to a language name, or "" when unknown."""
    if "." not in filename:
        return ""
    extension = filename.rsplit(".", 1)[-1].lower()
    return LANGUAGE_MAP.get(extension, "")


def build_prompt(filename: str, content: str) -> AnalysisPrompt:
    language = detect_language(filename)

    # Only the framing and the idiom note depend on the language; the criteria list is fixed.
    framing = ""
    criteria = EVALUATION_CRITERIA
    if language:
        framing = LANGUAGE_EXPERT_FRAMING.format(language=language)
        criteria += "\n\n" + LANGUAGE_IDIOM_NOTE.format(language=language)

    text = PROMPT_TEMPLATE.format(
        framing=framing,
        criteria=criteria,
        output_shape=OUTPUT_SHAPE,
        content=content,
    )
    return AnalysisPrompt(language=language, text=text)
