"""Prompt templates for literary translation requests."""

from authors_linguist.core import TranslationOptions


STRUCTURED_SYSTEM_INSTRUCTION = (
    "You are an expert translator specializing in literature and creative writing. "
    "Your goal is to preserve the author's voice, nuance, and emotional resonance "
    "while ensuring perfect grammatical accuracy in the target language."
)

STREAM_SYSTEM_INSTRUCTION = STRUCTURED_SYSTEM_INSTRUCTION + " Output only the translation."

STREAM_PROMPT_TEMPLATE = """You are a professional literary translator. Translate the following text to {target_language}.

Target Tone: {tone}
Additional Context: {context}

Output ONLY the translated text. Do not include any notes, explanations, or JSON formatting.

Text to translate: "{text}\""""

STRUCTURED_PROMPT_TEMPLATE = """You are a professional literary translator. Translate the following text to {target_language}.

Target Tone: {tone}
Additional Context: {context}

Text to translate: "{text}\""""


def build_stream_prompt(source_text: str, options: TranslationOptions) -> str:
    """Instruction for the streaming path: the reply must be the translation alone."""
    return STREAM_PROMPT_TEMPLATE.format(
        target_language=options.target_language,
        tone=options.tone,
        context=options.context,
        text=source_text,
    )


def build_structured_prompt(source_text: str, options: TranslationOptions) -> str:
    """Instruction for the schema-constrained path."""
    return STRUCTURED_PROMPT_TEMPLATE.format(
        target_language=options.target_language,
        tone=options.tone,
        context=options.context,
        text=source_text,
    )
