"""Fills the scenario prompt template with request data."""

import re
from dataclasses import asdict, dataclass

PLACEHOLDERS: dict[str, str] = {
    "context_documents": "{{CONTEXT_DOCUMENTS}}",
    "training_goal": "{{TRAINING_GOAL}}",
    "trainee_role": "{{TRAINEE_ROLE}}",
    "persona_role": "{{PERSONA_ROLE}}",
    "scenario_type": "{{SCENARIO_TYPE}}",
    "coach_role": "{{COACH_ROLE}}",
    "customer_name": "{{CUSTOMER_NAME}}",
}

_PLACEHOLDER_RE = re.compile("|".join(re.escape(token) for token in PLACEHOLDERS.values()))

CONTEXT_PLACEHOLDER_TEXT = "(Paste the transcript or checklist here)"
IMAGE_ONLY_CONTEXT_TEXT = "(The transcript or checklist is provided as attached images)"


@dataclass(frozen=True)
class PromptFields:
    """Values substituted into the template; defaults ask the model to infer."""

    context_documents: str = CONTEXT_PLACEHOLDER_TEXT
    training_goal: str = (
        "(Not provided: infer the training goal and define it explicitly in the output)"
    )
    trainee_role: str = "(Not provided: infer the trainee's role)"
    persona_role: str = "(Not provided: infer the role-play persona type)"
    scenario_type: str = (
        "(Not provided: infer the scenario type and define it explicitly in the output)"
    )
    coach_role: str = "(Not provided: no coach role specified)"
    customer_name: str = "(Not provided: no customer name specified)"

    @classmethod
    def for_context(cls, context_bundle: str, has_images: bool = False) -> "PromptFields":
        context = context_bundle.strip()
        if not context:
            context = IMAGE_ONLY_CONTEXT_TEXT if has_images else CONTEXT_PLACEHOLDER_TEXT
        return cls(context_documents=context)


def assemble(template: str, prompt_fields: PromptFields) -> str:
    """Replace every placeholder occurrence with its field value, literally.

    Substitution is a single pass, so placeholder tokens inside field values
    are left untouched.
    """
    values = {PLACEHOLDERS[name]: value for name, value in asdict(prompt_fields).items()}
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(0)], template)
