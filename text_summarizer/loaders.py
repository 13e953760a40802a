"""Plain-text extraction for uploaded documents, keeping paragraph breaks."""
from __future__ import annotations
import re

SUPPORTED_EXTENSIONS = ("txt", "md", "rtf")

def _normalize_paragraphs(text: str) -> str:
    # collapse spaces inside lines, keep one blank line between paragraphs
    lines = [re.sub(r'[ \t]+', ' ', line).strip() for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r'\n\s*\n+', '\n\n', text)
    return text.strip()

def extract_rtf_text(rtf_content: str) -> str:
    """Strip RTF control words and groups; \\par becomes a paragraph break."""
    text = re.sub(r'\\par[d]?\b', '\n\n', rtf_content)
    text = re.sub(r'\\\*.*?;', '', text)
    text = re.sub(r'\\[a-z]+-?\d* ?', '', text)
    text = re.sub(r'\\[^a-z]', '', text)
    text = re.sub(r'[{}]', '', text)
    return _normalize_paragraphs(text)

def extract_markdown_text(md_content: str) -> str:
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)   # code blocks
    text = re.sub(r'`([^`]+)`', r'\1', text)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)     # headers
    text = re.sub(r'^[ \t]*[-*+][ \t]+', '', text, flags=re.MULTILINE)   # bullets
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'_{1,2}(.*?)_{1,2}', r'\1', text)
    text = re.sub(r'!?\[([^\]]+)\]\([^)]+\)', r'\1', text)          # links, images
    text = re.sub(r'^-{3,}$', '', text, flags=re.MULTILINE)
    return _normalize_paragraphs(text)

def load_text(filename: str, content: bytes) -> str:
    """Decode an uploaded file and extract its text by extension."""
    ext = filename.lower().rsplit('.', 1)[-1]
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type: .{ext}")
    text = content.decode("utf-8")
    if ext == "rtf":
        return extract_rtf_text(text)
    if ext == "md":
        return extract_markdown_text(text)
    return text
