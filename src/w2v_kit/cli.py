from __future__ import annotations

import argparse
import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
TOKENIZERS = ("default", "whitespace")


def _add_train_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("train", help="Train Word2Vec from a sentence corpus")
    parser.add_argument("--corpus", type=Path, required=True, help="file or directory, one sentence per line")
    parser.add_argument("--model-out", type=Path, required=True, help="base path for .vectors/.vocab")
    parser.add_argument("--batch-size", type=int, default=1000)
    parser.add_argument("--min-freq", type=int, default=5)
    parser.add_argument("--layer-size", type=int, default=300)
    parser.add_argument("--window-size", type=int, default=5)
    parser.add_argument("--workers", type=int, default=3)
    parser.add_argument("--tokenizer", choices=TOKENIZERS, default="default")
    parser.add_argument("--lowercase", action="store_true")
    parser.set_defaults(handler=_handle_train)


def _add_summary_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("summary", help="Print vocabulary statistics of a saved model")
    parser.add_argument("--model", type=Path, required=True)
    parser.add_argument("--top", type=int, default=10)
    parser.set_defaults(handler=_handle_summary)


def _add_similar_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("similar", help="List the nearest words of a saved model")
    parser.add_argument("--model", type=Path, required=True)
    parser.add_argument("--topn", type=int, default=10)
    parser.add_argument("word")
    parser.set_defaults(handler=_handle_similar)


def _handle_train(args: argparse.Namespace) -> int:
    from .embedding import FileSentenceSource, Word2VecConfig, build_word2vec, fit_and_save_model
    from .tokenization import lower_case_sentence, tokenize, tokenize_whitespace

    config = Word2VecConfig(
        batch_size=args.batch_size,
        min_freq=args.min_freq,
        layer_size=args.layer_size,
        window_size=args.window_size,
        workers=max(1, args.workers),
    )
    sentences = FileSentenceSource(args.corpus, preprocessor=lower_case_sentence if args.lowercase else None)
    tokenizer_fn = tokenize_whitespace if args.tokenizer == "whitespace" else tokenize

    model = build_word2vec(sentences, tokenizer_fn, config=config)
    fit_and_save_model(model, args.model_out)

    vocab = model.vocabulary
    print(f"Saved model: {args.model_out} (words={vocab.num_words}, dim={config.layer_size})")
    return 0


def _handle_summary(args: argparse.Namespace) -> int:
    from .embedding import load_model, model_summary

    vectors = load_model(args.model)
    summary = model_summary(vectors.vocabulary, top_n=args.top)

    print(f"Words: {summary.num_words}")
    print(f"Word occurrences: {summary.total_word_occurrences}")
    print(f"Documents: {summary.document_count}")
    for word, count in summary.top_words.items():
        print(f"{word}\t{count}")
    return 0


def _handle_similar(args: argparse.Namespace) -> int:
    from .embedding import load_model

    vectors = load_model(args.model)
    if args.word not in vectors.key_to_index:
        print(f"Unknown word: {args.word}")
        return 1

    for word, score in vectors.most_similar(args.word, topn=args.topn):
        print(f"{word}\t{score:.4f}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="w2v-kit")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    subparsers = parser.add_subparsers(dest="command", required=True)

    _add_train_parser(subparsers)
    _add_summary_parser(subparsers)
    _add_similar_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
