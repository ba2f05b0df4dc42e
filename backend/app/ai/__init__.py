from app.ai.generator import GENERATION_FALLBACK_MESSAGE, GenerationResult, SopGenerator
from app.ai.prompts import SOP_SYSTEM_INSTRUCTION, build_prompt

__all__ = [
    "GENERATION_FALLBACK_MESSAGE",
    "GenerationResult",
    "SopGenerator",
    "SOP_SYSTEM_INSTRUCTION",
    "build_prompt",
]
