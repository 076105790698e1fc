from __future__ import annotations

from pathlib import Path


def write_hunspell_dictionary(
    directory: Path,
    words: list[str],
    affix_rules: list[str] | None = None,
    stem: str = "index",
) -> tuple[Path, Path]:
    """Create a minimal UTF-8 Hunspell .aff/.dic pair and return their paths."""
    affix_path = directory / f"{stem}.aff"
    dic_path = directory / f"{stem}.dic"
    affix_lines = ["SET UTF-8", "TRY esianrtolcdugmphbyfvkwz'", *(affix_rules or [])]
    affix_path.write_text("\n".join(affix_lines) + "\n", encoding="utf-8")
    body = "\n".join([str(len(words)), *words]) + "\n"
    dic_path.write_text(body, encoding="utf-8")
    return affix_path, dic_path


def write_word_list(path: Path, words: list[str]) -> Path:
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path
