# docingest/llm/prompts/registry.py

from dataclasses import dataclass

from docingest.llm.prompts import templates

@dataclass(frozen=True)
class PromptTemplate:
    name: str
    version: str
    system_instruction: str
    template: str

    def render(self, variables: dict) -> str:
        out = self.template
        for k, v in variables.items():
            out = out.replace("{{" + k + "}}", str(v))
        return out

PROMPTS: dict[tuple[str, str], PromptTemplate] = {
    ("enhance_text", "v1"): PromptTemplate(
        "enhance_text", "v1", templates.ENHANCE_TEXT_SYSTEM_V1, templates.ENHANCE_TEXT_V1
    ),
    ("reconstruct_scanned", "v1"): PromptTemplate(
        "reconstruct_scanned", "v1", templates.RECONSTRUCT_SCANNED_SYSTEM_V1, templates.RECONSTRUCT_SCANNED_V1
    ),
    ("healthcheck", "v1"): PromptTemplate(
        "healthcheck", "v1", templates.HEALTHCHECK_SYSTEM_V1, templates.HEALTHCHECK_V1
    ),
}

def get_prompt(name: str, version: str) -> PromptTemplate:
    key = (name, version)
    if key not in PROMPTS:
        raise KeyError(f"Unknown prompt: {name}@{version}")
    return PROMPTS[key]
