"""Show how the concierge ranks knowledge base documents for a question."""
from __future__ import annotations

import argparse
from pathlib import Path

from application.services.context_formatter import DEFAULT_CHAR_LIMIT, format_context
from application.services.corpus_builder import build_corpus
from application.services.lexical_index import LexicalIndex
from application.services.scoring import RESTAURANT_INTENT_BOOSTS, ScoringWeights
from application.use_cases.retrieve import retrieve
from infrastructure.knowledge.json_knowledge_loader import DEFAULT_KNOWLEDGE_PATH, load_knowledge_record
from infrastructure.query.synonym_expander import SynonymExpander


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("query", nargs="*", help="Question to score (empty shows the fallback set)")
    parser.add_argument(
        "--knowledge",
        default=str(DEFAULT_KNOWLEDGE_PATH),
        help="Path to the knowledge JSON file (default: bundled data/restaurant_data.json)",
    )
    parser.add_argument("--top-k", type=int, default=6, help="Number of documents to keep (default: 6)")
    parser.add_argument(
        "--chars",
        type=int,
        default=DEFAULT_CHAR_LIMIT,
        help=f"Character budget of the context block (default: {DEFAULT_CHAR_LIMIT})",
    )
    parser.add_argument("--whole-word", action="store_true", help="Count whole-word matches only.")
    parser.add_argument("--intent-boosts", action="store_true", help="Add the section bonuses for recognized intents.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    record = load_knowledge_record(Path(args.knowledge))
    index = LexicalIndex.build(build_corpus(record))
    query = " ".join(args.query)

    results = retrieve(
        query,
        index=index,
        expander=SynonymExpander(),
        weights=ScoringWeights(
            whole_word=args.whole_word,
            intent_boosts=RESTAURANT_INTENT_BOOSTS if args.intent_boosts else (),
        ),
        top_k=args.top_k,
    )
    print(f"{len(index)} documents, query: {query!r}")
    for rank, result in enumerate(results, start=1):
        print(f"{rank:>2}. {result.score:8.3f}  {result.id:<24} [{result.section}]")
    print()
    print(format_context(results, args.chars) or "(no context)")


if __name__ == "__main__":
    main()
