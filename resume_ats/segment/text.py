from __future__ import annotations

RESUME_BULLETS = ("•", "-")
JOB_BULLETS = ("•", "-", "*")


def contains_any(text: str, markers: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in markers)


def is_bullet_like(line: str, bullets: tuple[str, ...] = RESUME_BULLETS) -> bool:
    return line.startswith(bullets)


def strip_bullet_prefix(line: str) -> str:
    """Drop the single leading marker character and surrounding whitespace."""
    return line[1:].strip()


def dedupe(items: list[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        unique.append(item)
    return unique
