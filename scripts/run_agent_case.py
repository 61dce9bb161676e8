# scripts/run_agent_case.py

import argparse
import asyncio
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from langchain_openai import OpenAIEmbeddings

from agentic_docqa.config import AgentSettings
from agentic_docqa.ingest import Corpus
from agentic_docqa.model import get_default_model
from agentic_docqa.service import AgentService
from scripts.case_utils import get_case_id, resolve_cases
from tests.agent_eval.json_utils import write_artifact

EMBEDDING_MODEL = "text-embedding-3-small"
EXAMPLE_CASE = "tests/agent_eval/cases/c001_compare.json"


async def run_single_case(
    case_path: Path,
    case: Dict[str, Any],
    *,
    run_id: str,
    settings: AgentSettings,
    llm,
) -> None:
    """Index the case documents into a fresh in-memory corpus and ask the case question."""
    case_id = get_case_id(case_path, case)

    corpus = Corpus.in_memory(OpenAIEmbeddings(model=EMBEDDING_MODEL))
    n = await corpus.add_texts(case.get("documents", []), source_id=case_id)
    for doc_path in case.get("paths", []):
        n += await corpus.add_path(doc_path)
    print(f"\nIndexed {n} chunk(s) for case: {case_id}")

    service = AgentService.from_corpus(corpus, settings=settings, llm=llm)
    out = await service.ask(case["question"])

    print("  ✓ Completed")
    if out.get("errors"):
        print(f"  ⚠ Produced errors: {out['errors']}")
    print(f"  Plan: {out.get('plan')}")
    print(f"  ➡ Output: {out['output'][:100]}...")

    artifacts_dir = Path("artifacts/agent_eval")
    write_artifact(artifacts_dir, run_id, f"{case_id}.input.json", case)
    write_artifact(artifacts_dir, run_id, f"{case_id}.output.json", out)

    print(f"Artifacts written to: {artifacts_dir / run_id}")


async def run_cases(args) -> None:
    cases = resolve_cases(args.case)
    print(f"Found {len(cases)} case(s) to process")

    settings = AgentSettings.from_env()
    if args.max_retries is not None:
        settings = replace(settings, max_retries=args.max_retries)
    llm = get_default_model(settings)

    for case_path, case_data in cases:
        try:
            await run_single_case(case_path, case_data, run_id=args.run_id, settings=settings, llm=llm)
        except Exception as e:
            print(f"\n❌ Error processing {case_path.name}: {e}")
            if len(cases) == 1:
                raise
            continue

    print(f"\n{'='*60}")
    print(f"✓ Completed {len(cases)} case(s)")
    print(f"{'='*60}")


def main():
    parser = argparse.ArgumentParser(
        description="Run the document QA agent on case(s) and persist outputs.\n\n"
        "A case is a JSON object with 'question', a list of pre-chunked 'documents'\n"
        "and optionally 'paths' of PDF or text files to load and split:\n"
        f"  --case {EXAMPLE_CASE}\n"
        "  --case 'tests/agent_eval/cases/*.json'",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--case",
        required=True,
        help="Path to case JSON or glob pattern",
    )
    parser.add_argument(
        "--run-id",
        default="manual_agent",
        help="Run id for artifacts",
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        default=None,
        help="Attempts per graph node (default: AGENTIC_DOCQA_MAX_RETRIES or 2)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log step transitions")

    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    asyncio.run(run_cases(args))


if __name__ == "__main__":
    main()
