# docingest/llm/prompts/templates.py

ENHANCE_TEXT_SYSTEM_V1 = (
    "You are a professional document parser. "
    "Extract clean, readable content from raw PDF data."
)

ENHANCE_TEXT_V1 = """
You are an expert document parser. Analyze this PDF content and extract ONLY the meaningful, human-readable text.

REQUIREMENTS:
1. Remove all PDF artifacts, binary data, and technical jargon
2. Preserve the logical structure and flow
3. Focus on content valuable for Human Resources professionals
4. Return clean, professional text suitable for reading aloud
5. Maintain document hierarchy and organization

PDF Content to Process:
{{content}}

Please provide a clean, structured extraction of the document content.
""".strip()

RECONSTRUCT_SCANNED_SYSTEM_V1 = (
    "You are an OCR specialist. "
    "Reconstruct readable text from scanned PDF content."
)

RECONSTRUCT_SCANNED_V1 = """
This appears to be scanned or image-based PDF content. Please:

1. Extract and reconstruct the readable text content
2. Remove all PDF artifacts, coordinates, and technical data
3. Reconstruct sentences and paragraphs logically
4. Focus on Human Resources relevant content
5. Return clean, professional text

Scanned PDF Content:
{{content}}

Please reconstruct the readable content from this scanned document.
""".strip()

HEALTHCHECK_SYSTEM_V1 = "You are a terse assistant."

HEALTHCHECK_V1 = "Reply with the single word: ok"
