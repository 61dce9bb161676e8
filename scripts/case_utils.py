"""Loading and validation of agent case files."""

import json
from glob import glob
from pathlib import Path
from typing import Any, Dict, List, Tuple

GLOB_CHARS = ("*", "?", "[", "]")


class CaseFormatError(ValueError):
    """A case file lacks a 'question' string, or its 'documents' or 'paths' are not lists of strings."""


def load_case(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        case = json.load(f)

    if not isinstance(case, dict):
        raise CaseFormatError(f"{path}: top level must be an object")
    question = case.get("question")
    if not isinstance(question, str) or not question.strip():
        raise CaseFormatError(f"{path}: 'question' must be a non-empty string")
    documents = case.setdefault("documents", [])
    if not isinstance(documents, list) or not all(isinstance(d, str) for d in documents):
        raise CaseFormatError(f"{path}: 'documents' must be a list of strings")
    paths = case.setdefault("paths", [])
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        raise CaseFormatError(f"{path}: 'paths' must be a list of strings")
    return case


def resolve_cases(case_pattern: str) -> List[Tuple[Path, Dict[str, Any]]]:
    """
    Resolve a case path or glob to (path, case) pairs, sorted by path.

    A single path must exist and be valid. Under a glob, invalid files are
    reported and skipped.
    """
    if not any(c in case_pattern for c in GLOB_CHARS):
        path = Path(case_pattern)
        if not path.is_file():
            raise FileNotFoundError(f"Case file not found: {case_pattern}")
        return [(path, load_case(path))]

    results = []
    for match in sorted(glob(case_pattern, recursive=True)):
        path = Path(match)
        if not (path.is_file() and path.suffix == ".json"):
            continue
        try:
            results.append((path, load_case(path)))
        except (json.JSONDecodeError, OSError, CaseFormatError) as e:
            print(f"Warning: Skipping {path}: {e}")

    if not results:
        raise FileNotFoundError(f"No valid case files found matching: {case_pattern}")
    return results


def get_case_id(case_path: Path, case: Dict[str, Any]) -> str:
    return case.get("case_id", case_path.stem)
