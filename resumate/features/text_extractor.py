from __future__ import annotations

from typing import Any

from resumate.schemas.resume import ResumeDocument, Section


def _item_leaves(item: dict[str, Any]) -> list[str]:
    leaves: list[str] = []
    for value in item.values():
        if isinstance(value, str):
            leaves.append(value)
        elif isinstance(value, (list, tuple)):
            leaves.append(" ".join(str(entry) for entry in value if isinstance(entry, str)))
    return leaves


def _section_chunks(section: Section) -> list[str]:
    chunks = [section.title]
    if section.content.text:
        chunks.append(section.content.text)
    for item in section.content.items or []:
        chunks.extend(_item_leaves(item))
    return chunks


def extract_resume_text(resume: ResumeDocument) -> str:
    """Flatten every title, body text and string leaf of a resume into one string.

    Order follows the document: per section the title, then ``content.text``, then the
    values of each item in their stored order. Repeats are kept.
    """
    chunks: list[str] = []
    for section in resume.sections:
        chunks.extend(_section_chunks(section))
    return " ".join(chunks)
